from databases import Database

from config import Config
from domain.auth import AuthClient
from domain.functions import FunctionsClient, functions_client_factory
from domain.repository import RecordStore


class Backend:
    """Everything the recipe book needs from the hosted service."""

    def __init__(
        self,
        *,
        records: RecordStore,
        auth: AuthClient,
        functions: FunctionsClient,
    ) -> None:
        self.records = records
        self.auth = auth
        self.functions = functions

    async def connect(self) -> None:
        await self.records.connect()
        await self.records.create_tables()

    async def disconnect(self) -> None:
        await self.records.disconnect()
        await self.functions.aclose()


def backend_factory(config: Config, auth: AuthClient | None = None) -> Backend:
    return Backend(
        records=RecordStore(Database(config.db_url)),
        auth=AuthClient() if auth is None else auth,
        functions=FunctionsClient(functions_client_factory(config)),
    )
