from typing import Any

import pytest

from config import Config
from domain.backend import backend_factory
from domain.models import User


@pytest.mark.asyncio
async def test_backend_factory(tmp_path: Any) -> None:
    config = Config(
        service_url="https://abc.example.co/",
        service_key="anon-key",
        db_url=f"sqlite+aiosqlite:///{tmp_path / 'scanchef.db'}",
    )
    backend = backend_factory(config)

    http_client = backend.functions.http_client
    assert str(http_client.base_url) == "https://abc.example.co/functions/v1/"
    assert http_client.headers["apikey"] == "anon-key"
    assert http_client.headers["authorization"] == "Bearer anon-key"

    await backend.connect()
    try:
        await backend.records.add_ingredients(["Tomato"], "user-1")
        (ingredient,) = await backend.records.list_ingredients("user-1")
        assert ingredient.name == "Tomato"
    finally:
        await backend.disconnect()

    assert await backend.auth.get_user() is None
    await backend.auth.sign_in(User(id="user-1"))
    assert await backend.auth.get_user() == User(id="user-1")
