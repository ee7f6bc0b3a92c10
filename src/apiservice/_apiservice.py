from enum import Enum
from functools import cached_property
from logging import getLogger
from typing import Optional, Type, TypeVar, Union

from httpx import URL

from ._config import Config
from ._services import ExecutorService
from ._utils import setup_logging
from ._utils.constants import LOGGER_NAME
from .models.endpoint import Endpoint
from .models.request import APIRequest, HttpMethod, QueryParamsInput

T = TypeVar("T")


class APIService:
    """Entry point: builds requests against one base URL and executes them.

    Explicit arguments win over ``APISERVICE_*`` environment variables. A
    missing base URL is not an error until the first request is built.

    Examples:
        ```python
        from apiservice import APIService, Endpoint

        with APIService(base_url="https://api.github.com") as service:
            request = service.request(
                Endpoint.REPOSITORIES,
                query_params={"q": "tetris", "sort": "stars", "order": "desc"},
            )
            result = service.execute(request, SearchResult)
        ```
    """

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        debug: bool = False,
        config: Optional[Config] = None,
    ) -> None:
        self._config = config or Config.from_env(
            base_url=base_url, timeout=timeout, debug=debug or None
        )

        if self._config.debug:
            setup_logging(self._config.debug)
        log = getLogger(LOGGER_NAME)

        log.debug("CONFIG:")
        log.debug(f"{self._config.model_dump()}\n")

    @property
    def config(self) -> Config:
        return self._config

    @cached_property
    def executor(self) -> ExecutorService:
        return ExecutorService(self._config)

    def request(
        self,
        endpoint: Endpoint,
        *,
        path_components: tuple[str, ...] | list[str] = (),
        query_params: Optional[QueryParamsInput] = None,
        method: Union[HttpMethod, str] = HttpMethod.GET,
    ) -> APIRequest:
        """Build a request bound to this service's config.

        Raises:
            ConfigurationError: If no base URL is configured.
        """
        return APIRequest(
            endpoint,
            self._config,
            path_components=path_components,  # type: ignore[arg-type]
            query_params=query_params or (),  # type: ignore[arg-type]
            method=method,  # type: ignore[arg-type]
        )

    def request_from_url(
        self, url: Union[URL, str], endpoints: Type[Enum] = Endpoint
    ) -> Optional[APIRequest]:
        return APIRequest.from_url(url, self._config, endpoints=endpoints)

    def execute(self, request: APIRequest, expected: Type[T]) -> T:
        return self.executor.execute(request, expected)

    async def execute_async(self, request: APIRequest, expected: Type[T]) -> T:
        return await self.executor.execute_async(request, expected)

    def close(self) -> None:
        """Close the sync client. The async client is only closed by ``aclose``."""
        if "executor" in self.__dict__:
            self.executor.close()

    async def aclose(self) -> None:
        """Close both the sync and the async client."""
        if "executor" in self.__dict__:
            self.executor.close()
            await self.executor.aclose()

    def __enter__(self) -> "APIService":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    async def __aenter__(self) -> "APIService":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
