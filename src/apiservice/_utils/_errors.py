from contextlib import contextmanager
from typing import Generator

import httpx

from ..models.errors import APIStatusError, TransportError


@contextmanager
def handle_errors() -> Generator[None, None, None]:
    """Context manager for handling HTTP errors in API calls.

    This context manager wraps transport calls and converts httpx errors into
    the matching APIServiceError subclasses. Anything else propagates untouched.

    Yields:
        None: The context manager yields control to the wrapped code.

    Raises:
        APIStatusError: For responses with a non-2xx status code.
        TransportError: For network or protocol failures.
    """
    try:
        yield
    except httpx.HTTPStatusError as e:
        try:
            error_body = e.response.json()
        except ValueError:
            error_body = e.response.text

        message: str | None = None
        if isinstance(error_body, dict):
            message = (
                error_body.get("message")
                or error_body.get("error")
                or error_body.get("detail")
            )

        raise APIStatusError(
            message or f"{e.request.method} {e.request.url} failed",
            e.response.status_code,
            error_body,
            cause=e,
        ) from e
    except httpx.HTTPError as e:
        raise TransportError(f"Failed to fetch data: {e}", cause=e) from e
