STOCK_IMAGES = (
    "https://images.unsplash.com/photo-1569718212165-3a8278d5f624",
    "https://images.unsplash.com/photo-1609951651556-5334e2706168",
    "https://images.unsplash.com/photo-1607532941433-304659e8198a",
    "https://images.unsplash.com/photo-1512621776951-a57141f2eefd",
    "https://images.unsplash.com/photo-1547592180-85f173990554",
)


IMAGE_QUERY = (
    "?ixlib=rb-4.0.3&ixid=M3wxMjA3fDB8MHxwaG90by1wYWdlfHx8fGVufDB8fHx8fA%3D%3D"
    "&auto=format&fit=crop&w=800&q=80"
)


def image_for(index: int) -> str:
    """Stock image for the recipe at `index`, cycling through the list."""
    return f"{STOCK_IMAGES[index % len(STOCK_IMAGES)]}{IMAGE_QUERY}"
