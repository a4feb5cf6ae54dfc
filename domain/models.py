from enum import Enum
from typing import Any

from domain.images import image_for


type Row = dict[str, Any]


class Difficulty(Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"

    @classmethod
    def parse(cls, value: Any) -> "Difficulty":
        if isinstance(value, Difficulty):
            return value
        if isinstance(value, str):
            for difficulty in cls:
                if difficulty.value.lower() == value.strip().lower():
                    return difficulty
        raise ValueError(f"Unknown difficulty: {value!r}")


class User:
    def __init__(self, *, id: str, email: str | None = None) -> None:
        self.id = id
        self.email = email

    def __repr__(self) -> str:
        return f"<User(id={self.id})>"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, User) and other.id == self.id

    def __hash__(self) -> int:
        return hash(self.id)


class Ingredient:
    def __init__(self, *, id: str, name: str, user_id: str, created_at: str) -> None:
        self.id = id
        self.name = name
        self.user_id = user_id
        self.created_at = created_at

    def __repr__(self) -> str:
        return f"<Ingredient(id={self.id}, name={self.name})>"

    def to_dict(self) -> Row:
        return {
            "id": self.id,
            "name": self.name,
            "user_id": self.user_id,
            "created_at": self.created_at,
        }


class RecipeDraft:
    """A recipe that has not been saved yet, so has no identity."""

    def __init__(
        self,
        *,
        title: str,
        description: str,
        ingredients: list[str],
        time: str,
        difficulty: Difficulty,
        image: str,
    ) -> None:
        self.title = title
        self.description = description
        self.ingredients = ingredients
        self.time = time
        self.difficulty = difficulty
        self.image = image

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(title={self.title})>"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, RecipeDraft) and other.to_dict() == self.to_dict()

    def to_dict(self) -> Row:
        return {
            "title": self.title,
            "description": self.description,
            "ingredients": list(self.ingredients),
            "time": self.time,
            "difficulty": self.difficulty.value,
            "image": self.image,
        }

    @classmethod
    def from_dict(cls, data: Any, *, index: int = 0) -> "RecipeDraft":
        """Validate loosely shaped recipe data, e.g. decoded model output.

        Raises `ValueError` when a field is missing or has the wrong type.
        A missing image is replaced with the stock image for `index`.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Recipe {index} is not an object.")

        for field in ("title", "description", "time"):
            if not isinstance(data.get(field), str) or not data[field].strip():
                raise ValueError(f"Recipe {index} has no {field}.")

        ingredients = data.get("ingredients")
        if (
            not isinstance(ingredients, list)
            or not ingredients
            or not all(isinstance(i, str) and i.strip() for i in ingredients)
        ):
            raise ValueError(f"Recipe {index} has no ingredients.")

        image = data.get("image")
        if not isinstance(image, str) or not image:
            image = image_for(index)

        return cls(
            title=data["title"],
            description=data["description"],
            ingredients=list(ingredients),
            time=data["time"],
            difficulty=Difficulty.parse(data.get("difficulty")),
            image=image,
        )


class Recipe(RecipeDraft):
    def __init__(
        self,
        *,
        id: str,
        user_id: str,
        created_at: str,
        title: str,
        description: str,
        ingredients: list[str],
        time: str,
        difficulty: Difficulty,
        image: str,
    ) -> None:
        super().__init__(
            title=title,
            description=description,
            ingredients=ingredients,
            time=time,
            difficulty=difficulty,
            image=image,
        )
        self.id = id
        self.user_id = user_id
        self.created_at = created_at

    def to_dict(self) -> Row:
        return {
            "id": self.id,
            **super().to_dict(),
            "user_id": self.user_id,
            "created_at": self.created_at,
        }
