import contextlib
from datetime import datetime, timezone
import json
from typing import Iterator
from uuid import uuid4

from databases import Database
from databases.interfaces import Record

from domain.errors import TransportFailure
from domain.models import Difficulty, Ingredient, Recipe, RecipeDraft


CREATE_INGREDIENTS_TABLE = """
CREATE TABLE IF NOT EXISTS ingredients (
    id VARCHAR(64) PRIMARY KEY,
    name VARCHAR(256) NOT NULL,
    user_id VARCHAR(64) NOT NULL,
    created_at VARCHAR(40) NOT NULL
)
"""


CREATE_RECIPES_TABLE = """
CREATE TABLE IF NOT EXISTS recipes (
    id VARCHAR(64) PRIMARY KEY,
    title VARCHAR(256) NOT NULL,
    description VARCHAR(3000) NOT NULL,
    ingredients TEXT NOT NULL,
    time VARCHAR(64) NOT NULL,
    difficulty VARCHAR(16) NOT NULL,
    image VARCHAR(1024) NOT NULL,
    user_id VARCHAR(64) NOT NULL,
    created_at VARCHAR(40) NOT NULL
)
"""


CREATE_INGREDIENT = """
INSERT INTO ingredients(id, name, user_id, created_at)
VALUES (:id, :name, :user_id, :created_at)
"""


CREATE_RECIPE = """
INSERT INTO recipes(
    id, title, description, ingredients, time, difficulty, image, user_id, created_at
)
VALUES (
    :id, :title, :description, :ingredients, :time, :difficulty, :image, :user_id, :created_at
)
"""


LIST_INGREDIENTS = """
SELECT * FROM ingredients WHERE user_id = :user_id ORDER BY created_at DESC, id DESC
"""


LIST_RECIPES = """
SELECT * FROM recipes WHERE user_id = :user_id ORDER BY created_at DESC, id DESC
"""


def _now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="microseconds")


@contextlib.contextmanager
def _store_errors() -> Iterator[None]:
    try:
        yield
    except Exception as e:
        raise TransportFailure(f"Record store failed: {e!r}") from e


def _ingredient(row: Record) -> Ingredient:
    return Ingredient(
        id=row["id"],
        name=row["name"],
        user_id=row["user_id"],
        created_at=row["created_at"],
    )


def _recipe(row: Record) -> Recipe:
    return Recipe(
        id=row["id"],
        title=row["title"],
        description=row["description"],
        ingredients=json.loads(row["ingredients"]),
        time=row["time"],
        difficulty=Difficulty(row["difficulty"]),
        image=row["image"],
        user_id=row["user_id"],
        created_at=row["created_at"],
    )


class RecordStore:
    """Ingredients and recipes, every query scoped to the owning user."""

    def __init__(self, db: Database) -> None:
        self.db = db

    async def connect(self) -> None:
        with _store_errors():
            await self.db.connect()

    async def disconnect(self) -> None:
        await self.db.disconnect()

    async def create_tables(self) -> None:
        with _store_errors():
            await self.db.execute(  # pyright: ignore[reportUnknownMemberType]
                query=CREATE_INGREDIENTS_TABLE
            )
            await self.db.execute(  # pyright: ignore[reportUnknownMemberType]
                query=CREATE_RECIPES_TABLE
            )

    async def list_ingredients(self, user_id: str) -> list[Ingredient]:
        with _store_errors():
            rows = await self.db.fetch_all(  # pyright: ignore[reportUnknownMemberType]
                LIST_INGREDIENTS, values={"user_id": user_id}
            )
        return [_ingredient(r) for r in rows]

    async def add_ingredients(self, names: list[str], user_id: str) -> list[Ingredient]:
        ingredients = [
            Ingredient(id=uuid4().hex, name=name, user_id=user_id, created_at=_now())
            for name in names
        ]
        with _store_errors():
            async with self.db.transaction():
                for ingredient in ingredients:
                    await self.db.execute(  # pyright: ignore[reportUnknownMemberType]
                        CREATE_INGREDIENT, values=ingredient.to_dict()
                    )
        return ingredients

    async def list_recipes(self, user_id: str) -> list[Recipe]:
        with _store_errors():
            rows = await self.db.fetch_all(  # pyright: ignore[reportUnknownMemberType]
                LIST_RECIPES, values={"user_id": user_id}
            )
        return [_recipe(r) for r in rows]

    async def add_recipe(self, recipe: RecipeDraft, user_id: str) -> Recipe:
        stored = Recipe(
            id=uuid4().hex,
            user_id=user_id,
            created_at=_now(),
            title=recipe.title,
            description=recipe.description,
            ingredients=list(recipe.ingredients),
            time=recipe.time,
            difficulty=recipe.difficulty,
            image=recipe.image,
        )
        values = stored.to_dict()
        values["ingredients"] = json.dumps(values["ingredients"])
        with _store_errors():
            await self.db.execute(  # pyright: ignore[reportUnknownMemberType]
                CREATE_RECIPE, values=values
            )
        return stored
