from types import SimpleNamespace
from typing import Any


MODEL_RECIPES = [
    {
        "title": "Tomato Egg Drop Soup",
        "description": "Silky eggs in a tangy tomato broth.",
        "ingredients": ["Tomato", "Eggs", "Scallions"],
        "time": "20 min",
        "difficulty": "Easy",
    },
    {
        "title": "Shakshuka Toast",
        "description": "Baked eggs in spiced tomato on crusty bread.",
        "ingredients": ["Tomato", "Eggs", "Bread"],
        "time": "30 min",
        "difficulty": "Medium",
    },
    {
        "title": "Tomato Tarte Tatin",
        "description": "Caramelised tomatoes under a flaky lid.",
        "ingredients": ["Tomato", "Puff pastry", "Sugar"],
        "time": "1 hour",
        "difficulty": "hard",
    },
]


class FakeCompletions:
    def __init__(self, content: str | None = None, error: Exception | None = None) -> None:
        self.content = content
        self.error = error
        self.calls: list[dict[str, Any]] = []

    async def create(self, **kwargs: Any) -> Any:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeOpenAI:
    """Stands in for `openai.AsyncClient`, answering every chat with `content`."""

    def __init__(self, content: str | None = None, error: Exception | None = None) -> None:
        self.completions = FakeCompletions(content, error)
        self.chat = SimpleNamespace(completions=self.completions)
