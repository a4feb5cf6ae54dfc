"""The generate-recipes function: ingredients in, three model-written recipes out."""

import functools
import logging
from typing import Any, Awaitable, Callable

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from app import config
from domain.errors import GenerationParseError, InvalidRequest
from domain.llm_service import LLMService


logger = logging.getLogger(__name__)


CONFIG = config.Config()


CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


INVALID_INGREDIENTS = "Invalid or missing ingredients list"
PARSE_FAILED = "Failed to parse recipe data"
GENERATION_FAILED = "Failed to generate recipes"


def aJSONResponse(route: Callable[..., Awaitable[Any | tuple[Any, int]]]):
    """Answer preflights straight away and put CORS headers on everything else."""

    @functools.wraps(route)
    async def wrapper(request: Request) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=CORS_HEADERS)
        resp = await route(request)
        if not isinstance(resp, tuple):
            body, code = resp, 200
        else:
            body, code = resp
        return JSONResponse(body, status_code=code, headers=CORS_HEADERS)

    return wrapper


def valid_ingredients(body: Any) -> list[str]:
    """The non-empty list of ingredient names in `body`, else `InvalidRequest`."""
    if not isinstance(body, dict):
        raise InvalidRequest("Body is not a json object.")
    ingredients = body.get("ingredients")
    if (
        not isinstance(ingredients, list)
        or not ingredients
        or not all(isinstance(i, str) and i.strip() for i in ingredients)
    ):
        raise InvalidRequest(f"Bad ingredients: {ingredients!r}")
    return ingredients


@aJSONResponse
async def generate_recipes(request: Request) -> Any | tuple[Any, int]:
    try:
        body = await request.json()
    except ValueError:
        body = None

    try:
        ingredients = valid_ingredients(body)
    except InvalidRequest as e:
        logger.info("Rejected request: %s", e)
        return {"error": INVALID_INGREDIENTS}, 400

    llm: LLMService = request.app.state.llm
    try:
        recipes = await llm.generate_recipes(ingredients)
    except GenerationParseError as e:
        logger.error("Failed to parse model response: %s", e)
        return {"error": PARSE_FAILED}, 500
    except Exception:
        logger.exception("Error processing request")
        return {"error": GENERATION_FAILED}, 500

    return [recipe.to_dict() for recipe in recipes]


def create_app(llm: LLMService | None = None) -> Starlette:
    app = Starlette(
        debug=True if CONFIG.env == config.Env.local else False,
        routes=[
            Route("/generate-recipes", generate_recipes, methods=["POST", "OPTIONS"]),
        ],
    )
    app.state.llm = (
        LLMService(
            api_key=CONFIG.openai_api_key,
            model=CONFIG.core_model,
            temperature=CONFIG.temperature,
            max_tokens=CONFIG.max_tokens,
        )
        if llm is None
        else llm
    )
    return app


app = create_app()
