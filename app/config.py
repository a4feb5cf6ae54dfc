from enum import Enum

from pydantic_settings import BaseSettings


class Env(Enum):
    local = "local"
    dev = "dev"
    prod = "prod"


class Config(BaseSettings):
    env: Env = Env.local
    openai_api_key: str | None = None
    core_model: str = "gpt-4o"
    temperature: float = 1.0
    max_tokens: int = 1000
