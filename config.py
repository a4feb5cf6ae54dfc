from enum import Enum

from pydantic_settings import BaseSettings


class Env(Enum):
    local = "local"
    dev = "dev"
    prod = "prod"


class Config(BaseSettings):
    env: Env = Env.local
    service_url: str = ""
    service_key: str = ""
    db_url: str = "sqlite+aiosqlite:///scanchef.db"
    functions_path: str = "functions/v1"
    timeout: float = 60


def is_configured(config: Config) -> bool:
    """Whether the backend can be used. Missing credentials mean demo mode."""
    return bool(config.service_url.strip() and config.service_key.strip())
