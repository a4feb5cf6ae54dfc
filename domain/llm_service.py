import json
import logging
from typing import Any

import openai

from domain.aopenai import DEFAULT_MODEL, MAX_TOKENS, TEMPERATURE, quick_chat
from domain.errors import GenerationParseError
from domain.images import image_for
from domain.models import RecipeDraft
from domain.prompts import GenerateRecipesPrompt


logger = logging.getLogger(__name__)


RECIPE_COUNT = 3


def parse_recipes(content: str) -> list[RecipeDraft]:
    """Turn raw model output into recipes, each with a stock image attached."""
    try:
        data: Any = json.loads(content.strip())
    except json.JSONDecodeError as e:
        raise GenerationParseError(f"Model output is not json: {e}") from e

    if not isinstance(data, list) or len(data) != RECIPE_COUNT:
        raise GenerationParseError(f"Expected a list of {RECIPE_COUNT} recipes.")

    recipes: list[RecipeDraft] = []
    for i, item in enumerate(data):
        try:
            recipe = RecipeDraft.from_dict(item, index=i)
        except ValueError as e:
            raise GenerationParseError(str(e)) from e
        # The model is never asked for images.
        recipe.image = image_for(i)
        recipes.append(recipe)
    return recipes


class LLMService:
    def __init__(
        self,
        openai_client: openai.AsyncClient | None = None,
        *,
        api_key: str | None = None,
        model: str = DEFAULT_MODEL,
        temperature: float = TEMPERATURE,
        max_tokens: int = MAX_TOKENS,
    ) -> None:
        self._openai_client = openai_client
        self.api_key = api_key
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    @property
    def openai_client(self) -> openai.AsyncClient:
        # Built on first use so the app can start without a key.
        if self._openai_client is None:
            self._openai_client = openai.AsyncClient(api_key=self.api_key)
        return self._openai_client

    async def generate_recipes(self, ingredients: list[str]) -> list[RecipeDraft]:
        """Single attempt. Raises `GenerationParseError` on unusable output."""
        content = await quick_chat(
            str(GenerateRecipesPrompt(ingredients)),
            openai_client=self.openai_client,
            model=self.model,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )
        try:
            return parse_recipes(content)
        except GenerationParseError:
            logger.warning("Failed to parse model response: %r", content)
            raise
