from typing import Any, Optional


class APIServiceError(Exception):
    """Base class for every error raised by the API service.

    Attributes:
        message: Human readable description of the failure.
        cause: The underlying exception, when there is one.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.message = message
        self.cause = cause
        super().__init__(self.message)


class ConfigurationError(APIServiceError):
    def __init__(
        self,
        message="API base URL not configured. Pass base_url to APIService or set the APISERVICE_URL environment variable.",
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message, cause)


class RequestConstructionError(APIServiceError):
    """Raised when a request cannot be rendered to a well-formed URL.

    The transport is never called when this error is raised.
    """

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Failed to create request: '{url}' is not a valid URL")


class TransportError(APIServiceError):
    """Raised when the HTTP transport fails or returns no data."""

    def __init__(
        self,
        message: str = "Failed to fetch data: no data returned",
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message, cause)


class APIStatusError(TransportError):
    """Raised when the server answers with a non-2xx status code."""

    def __init__(
        self,
        message: str,
        status_code: int,
        body: Any = None,
        cause: Optional[BaseException] = None,
    ):
        self.status_code = status_code
        self.body = body
        super().__init__(message, cause)

    def __str__(self) -> str:
        return f"{self.message} (status code: {self.status_code})"


class DecodingError(APIServiceError):
    """Raised when the response body does not match the expected type."""

    def __init__(self, expected: Any, cause: Optional[BaseException] = None):
        self.expected = expected
        name = getattr(expected, "__name__", repr(expected))
        super().__init__(f"Failed to decode response data as {name}", cause)
