from typing import Any, Type, TypeVar

from httpx import Response
from pydantic import TypeAdapter, ValidationError

from .._utils import RequestSpec, handle_errors
from ..models.errors import (
    APIServiceError,
    DecodingError,
    RequestConstructionError,
    TransportError,
)
from ..models.request import APIRequest
from ._base_service import BaseService

T = TypeVar("T")


class ExecutorService(BaseService):
    """Service that executes an ``APIRequest`` and decodes the JSON response.

    The expected type can be anything pydantic can validate: a ``BaseModel``
    subclass, a ``TypedDict``, ``list[Model]``, ``dict[str, Any]`` and so on.
    Every call either returns the decoded value or raises one
    ``APIServiceError``. Nothing is retried.
    """

    def execute(self, request: APIRequest, expected: Type[T]) -> T:
        """Execute the request and decode the response body.

        Args:
            request (APIRequest): The request to send.
            expected (Type[T]): The type to decode the response body into.

        Returns:
            T: The decoded response body.

        Raises:
            RequestConstructionError: If the request does not render a valid URL.
                No request is sent in that case.
            TransportError: If the transport fails, the server answers with a
                non-2xx status (``APIStatusError``) or no data is returned.
            DecodingError: If the body does not match ``expected``.

        Examples:
            ```python
            from apiservice import APIService, Endpoint

            service = APIService(base_url="https://api.github.com")
            request = service.request(Endpoint.USERS, path_components=["octocat"])

            user = service.execute(request, User)
            ```
        """
        try:
            spec = self._request_spec(request)
            with handle_errors():
                response = self.request(
                    spec.method, spec.url, headers=spec.headers, timeout=spec.timeout
                )
            return self._decode(response, expected)
        except APIServiceError as e:
            self._logger.debug(f"{type(e).__name__}: {e}")
            raise

    async def execute_async(self, request: APIRequest, expected: Type[T]) -> T:
        """Asynchronously execute the request and decode the response body.

        Args:
            request (APIRequest): The request to send.
            expected (Type[T]): The type to decode the response body into.

        Returns:
            T: The decoded response body.

        Raises:
            RequestConstructionError: If the request does not render a valid URL.
            TransportError: If the transport fails or no data is returned.
            DecodingError: If the body does not match ``expected``.
        """
        try:
            spec = self._request_spec(request)
            with handle_errors():
                response = await self.request_async(
                    spec.method, spec.url, headers=spec.headers, timeout=spec.timeout
                )
            return self._decode(response, expected)
        except APIServiceError as e:
            self._logger.debug(f"{type(e).__name__}: {e}")
            raise

    def _request_spec(self, request: APIRequest) -> RequestSpec:
        url = request.url
        if url is None:
            raise RequestConstructionError(request.url_string)

        return RequestSpec(
            method=request.method.value,
            url=url,
            timeout=self._config.timeout,
        )

    def _decode(self, response: Response, expected: Type[T]) -> T:
        data = response.content
        if not data:
            raise TransportError()

        try:
            adapter: TypeAdapter[Any] = TypeAdapter(expected)
            return adapter.validate_json(data)
        except ValidationError as e:
            raise DecodingError(expected, cause=e) from e
