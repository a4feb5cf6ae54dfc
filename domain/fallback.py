"""Example recipes served whenever live generation is unavailable."""

from domain.images import image_for
from domain.models import Difficulty, RecipeDraft


FALLBACK_RECIPES = (
    {
        "title": "Spicy Peanut Butter Ramen",
        "description": (
            "A unique fusion of creamy peanut butter with instant ramen, "
            "elevated with whatever vegetables you have on hand."
        ),
        "time": "15 min",
        "difficulty": Difficulty.EASY,
        "ingredients": ["Instant ramen", "Peanut butter", "Hot sauce", "Vegetables"],
    },
    {
        "title": "Apple-Cereal Fritters",
        "description": (
            "Transform breakfast cereals and apples into delicious fritters "
            "with a sweet and crunchy texture."
        ),
        "time": "25 min",
        "difficulty": Difficulty.MEDIUM,
        "ingredients": ["Apples", "Breakfast cereal", "Eggs", "Flour", "Cinnamon"],
    },
    {
        "title": "Savory Oatmeal Bowl",
        "description": (
            "A savory twist on traditional oatmeal, incorporating cheese, herbs, "
            "and whatever protein you have available."
        ),
        "time": "10 min",
        "difficulty": Difficulty.EASY,
        "ingredients": ["Oats", "Cheese", "Herbs", "Protein (eggs/chicken)"],
    },
)


def fallback_recipes() -> list[RecipeDraft]:
    """Fresh copies, so callers can't change the examples for everyone else."""
    return [
        RecipeDraft(
            title=recipe["title"],
            description=recipe["description"],
            ingredients=list(recipe["ingredients"]),
            time=recipe["time"],
            difficulty=recipe["difficulty"],
            image=image_for(i),
        )
        for i, recipe in enumerate(FALLBACK_RECIPES)
    ]
