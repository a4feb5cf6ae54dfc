import logging
from typing import Any

import httpx

from config import Config
from domain.errors import RemoteFunctionError, TransportFailure


logger = logging.getLogger(__name__)


def functions_client_factory(config: Config) -> httpx.AsyncClient:
    base_url = f"{config.service_url.rstrip('/')}/{config.functions_path.strip('/')}/"
    return httpx.AsyncClient(
        base_url=base_url,
        headers={
            "apikey": config.service_key,
            "Authorization": f"Bearer {config.service_key}",
            "Content-Type": "application/json",
        },
        timeout=config.timeout,
    )


class FunctionsClient:
    """Invokes the backend's http functions by name."""

    def __init__(self, http_client: httpx.AsyncClient) -> None:
        self.http_client = http_client

    async def invoke(
        self,
        name: str,
        body: dict[str, Any],
        *,
        access_token: str | None = None,
    ) -> Any:
        headers = {} if access_token is None else {"Authorization": f"Bearer {access_token}"}
        logger.info("Invoking %s", name)
        try:
            resp = await self.http_client.post(name, json=body, headers=headers)
        except httpx.HTTPError as e:
            raise TransportFailure(f"Could not reach function {name}: {e!r}") from e

        if resp.is_error:
            try:
                data = resp.json()
            except ValueError:
                data = None
            message = data.get("error", resp.text) if isinstance(data, dict) else resp.text
            raise RemoteFunctionError(resp.status_code, str(message))

        try:
            return resp.json()
        except ValueError as e:
            raise TransportFailure(f"Function {name} did not return json.") from e

    async def aclose(self) -> None:
        await self.http_client.aclose()
