import json
from typing import Any

import pytest
from starlette.testclient import TestClient

from app.app import CORS_HEADERS, create_app, valid_ingredients
from domain.errors import InvalidRequest
from domain.images import image_for
from domain.llm_service import LLMService
from tests.fakes import MODEL_RECIPES, FakeOpenAI


def assert_cors(headers: Any) -> None:
    assert headers["access-control-allow-origin"] == "*"
    assert headers["access-control-allow-headers"] == (
        "authorization, x-client-info, apikey, content-type"
    )


def client_for(fake_openai: FakeOpenAI) -> TestClient:
    llm = LLMService(fake_openai)  # pyright: ignore[reportArgumentType]
    return TestClient(create_app(llm))


def test_generate_recipes(fake_openai: FakeOpenAI) -> None:
    client = client_for(fake_openai)
    resp = client.post("/generate-recipes", json={"ingredients": ["Tomato", "Eggs"]})

    assert resp.status_code == 200
    assert_cors(resp.headers)
    recipes = resp.json()
    assert len(recipes) == 3
    for i, (got, exp) in enumerate(zip(recipes, MODEL_RECIPES)):
        assert got["title"] == exp["title"]
        assert got["ingredients"] == exp["ingredients"]
        assert got["image"] == image_for(i)
        assert got["difficulty"] in ("Easy", "Medium", "Hard")


def test_model_call(fake_openai: FakeOpenAI) -> None:
    client = client_for(fake_openai)
    client.post("/generate-recipes", json={"ingredients": ["Tomato", "Eggs"]})

    (call,) = fake_openai.completions.calls
    system, user = call["messages"]
    assert system == {"role": "system", "content": "You are a creative recipe generator."}
    assert "Tomato, Eggs" in user["content"]
    assert call["temperature"] == 1.0
    assert call["max_tokens"] == 1000


@pytest.mark.parametrize(
    "body",
    (
        {"ingredients": []},
        {},
        {"ingredients": "Tomato"},
        {"ingredients": [1, 2]},
        ["Tomato"],
    ),
)
def test_invalid_ingredients(fake_openai: FakeOpenAI, body: Any) -> None:
    client = client_for(fake_openai)
    resp = client.post("/generate-recipes", json=body)

    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid or missing ingredients list"}
    assert_cors(resp.headers)
    assert fake_openai.completions.calls == []


def test_body_not_json(fake_openai: FakeOpenAI) -> None:
    client = client_for(fake_openai)
    resp = client.post("/generate-recipes", content=b"Tomato")

    assert resp.status_code == 400
    assert fake_openai.completions.calls == []


@pytest.mark.parametrize("content", (b"", b"not json at all", b'{"ingredients": []}'))
def test_preflight(fake_openai: FakeOpenAI, content: bytes) -> None:
    client = client_for(fake_openai)
    resp = client.request("OPTIONS", "/generate-recipes", content=content)

    assert resp.status_code == 200
    assert resp.content == b""
    assert_cors(resp.headers)
    assert fake_openai.completions.calls == []


@pytest.mark.parametrize(
    "content",
    (
        "Here are your recipes!",
        "```json\n[]\n```",
        json.dumps(MODEL_RECIPES[:2]),
        json.dumps([{"title": "No ingredients"}] * 3),
    ),
)
def test_unparseable_model_output(content: str) -> None:
    client = client_for(FakeOpenAI(content))
    resp = client.post("/generate-recipes", json={"ingredients": ["Tomato"]})

    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to parse recipe data"}
    assert_cors(resp.headers)


def test_model_failure() -> None:
    client = client_for(FakeOpenAI(error=RuntimeError("model is down")))
    resp = client.post("/generate-recipes", json={"ingredients": ["Tomato"]})

    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to generate recipes"}
    assert_cors(resp.headers)


def test_cors_headers_constant() -> None:
    assert CORS_HEADERS == {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    }


@pytest.mark.parametrize(
    "body",
    (None, {"ingredients": []}, {"ingredients": ["Tomato", "  "]}, {"other": ["Tomato"]}),
)
def test_valid_ingredients_rejects(body: Any) -> None:
    with pytest.raises(InvalidRequest):
        valid_ingredients(body)


def test_valid_ingredients() -> None:
    assert valid_ingredients({"ingredients": ["Tomato", "Eggs"]}) == ["Tomato", "Eggs"]
