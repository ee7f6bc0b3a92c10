from logging import getLogger
from typing import Any, Union

from httpx import URL, AsyncClient, Client, Headers, Response

from .._config import Config
from .._utils import user_agent_value
from .._utils._ssl_context import get_httpx_client_kwargs
from .._utils.constants import HEADER_ACCEPT, HEADER_USER_AGENT, LOGGER_NAME


class BaseService:
    """Owns the httpx clients and sends raw requests.

    One sync and one async client are kept per service so connections are
    pooled across calls. Call ``close`` / ``aclose`` when done.
    """

    def __init__(self, config: Config) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._config = config

        client_kwargs = {
            **get_httpx_client_kwargs(self._config),  # SSL, timeout, redirects
            "headers": Headers(self.default_headers),
        }

        self._client = Client(**client_kwargs)
        self._client_async = AsyncClient(**client_kwargs)

        self._logger.debug(f"HEADERS: {self.default_headers}")

        super().__init__()

    def request(self, method: str, url: Union[URL, str], **kwargs: Any) -> Response:
        self._logger.debug(f"Request: {method} {url}")

        response = self._client.request(method, url, **kwargs)
        response.raise_for_status()
        return response

    async def request_async(
        self, method: str, url: Union[URL, str], **kwargs: Any
    ) -> Response:
        self._logger.debug(f"Request: {method} {url}")

        response = await self._client_async.request(method, url, **kwargs)
        response.raise_for_status()
        return response

    @property
    def default_headers(self) -> dict[str, str]:
        return {
            HEADER_ACCEPT: "application/json",
            HEADER_USER_AGENT: user_agent_value(),
            **self.custom_headers,
        }

    @property
    def custom_headers(self) -> dict[str, str]:
        return {}

    def close(self) -> None:
        self._client.close()

    async def aclose(self) -> None:
        await self._client_async.aclose()
