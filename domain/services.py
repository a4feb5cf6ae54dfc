import logging
from typing import Any, Awaitable, Callable

from domain.errors import TransportFailure
from domain.functions import FunctionsClient
from domain.llm_service import RECIPE_COUNT
from domain.models import RecipeDraft


logger = logging.getLogger(__name__)


GENERATE_RECIPES_FUNCTION = "generate-recipes"


async def with_fallback[T](
    operation: Callable[[], Awaitable[T]],
    fallback: T,
    *,
    on_error: Callable[[Exception], None] | None = None,
) -> T:
    """Run a best-effort read, returning `fallback` if it fails in any way."""
    try:
        return await operation()
    except Exception as e:
        logger.warning("Falling back after failure: %r", e, exc_info=True)
        if on_error is not None:
            on_error(e)
        return fallback


def recipes_from_response(data: Any) -> list[RecipeDraft]:
    if not isinstance(data, list) or len(data) != RECIPE_COUNT:
        raise TransportFailure(f"Expected {RECIPE_COUNT} recipes, got {data!r}")
    try:
        return [RecipeDraft.from_dict(item, index=i) for i, item in enumerate(data)]
    except ValueError as e:
        raise TransportFailure(f"Malformed recipe in response: {e}") from e


async def request_recipes(
    ingredients: list[str],
    *,
    functions: FunctionsClient,
    access_token: str | None = None,
) -> list[RecipeDraft]:
    data = await functions.invoke(
        GENERATE_RECIPES_FUNCTION,
        {"ingredients": ingredients},
        access_token=access_token,
    )
    return recipes_from_response(data)
