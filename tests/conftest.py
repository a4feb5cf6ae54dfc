import json
from typing import Any, AsyncIterator

from databases import Database
import httpx
import pytest
import pytest_asyncio

from app.app import create_app
from config import Config
from domain.auth import AuthClient
from domain.backend import Backend
from domain.functions import FunctionsClient
from domain.llm_service import LLMService
from domain.repository import RecordStore
from tests.fakes import MODEL_RECIPES, FakeOpenAI


@pytest.fixture
def fake_openai() -> FakeOpenAI:
    return FakeOpenAI(json.dumps(MODEL_RECIPES))


@pytest.fixture
def llm(fake_openai: FakeOpenAI) -> LLMService:
    return LLMService(fake_openai)  # pyright: ignore[reportArgumentType]


@pytest.fixture
def config() -> Config:
    return Config(
        service_url="http://testserver",
        service_key="anon-key",
        db_url="sqlite+aiosqlite:///unused.db",
    )


@pytest.fixture
def unconfigured() -> Config:
    return Config(service_url="", service_key="")


@pytest_asyncio.fixture
async def store(tmp_path: Any) -> AsyncIterator[RecordStore]:
    store = RecordStore(Database(f"sqlite+aiosqlite:///{tmp_path / 'scanchef.db'}"))
    await store.connect()
    await store.create_tables()
    yield store
    await store.disconnect()


@pytest_asyncio.fixture
async def functions(llm: LLMService) -> AsyncIterator[FunctionsClient]:
    transport = httpx.ASGITransport(app=create_app(llm))
    client = FunctionsClient(
        httpx.AsyncClient(transport=transport, base_url="http://testserver/")
    )
    yield client
    await client.aclose()


@pytest.fixture
def backend(store: RecordStore, functions: FunctionsClient) -> Backend:
    return Backend(records=store, auth=AuthClient(), functions=functions)
