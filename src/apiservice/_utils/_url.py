"""Rendering and parsing of request URLs.

A request URL has the shape ``{base_url}/{endpoint}[/{component}...][?{name}={value}&...]``.
Nothing is percent-encoded on the way out or decoded on the way in: callers pass
URL-safe strings, and strings that are not are reported by ``is_well_formed_url``.
"""

import re
from enum import Enum
from typing import Iterable, List, NamedTuple, Optional, Sequence, Tuple

import httpx

from ..models.endpoint import match_endpoints

# RFC 3986 unreserved + reserved characters, plus "%" for escapes.
_URL_CHARS = re.compile(r"^[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=%]+$")
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")


class QueryParam(NamedTuple):
    name: str
    value: Optional[str] = None


class ParsedURL(NamedTuple):
    endpoint: Enum
    path_components: Tuple[str, ...] = ()
    query_params: Tuple[QueryParam, ...] = ()


def render_url(
    base_url: str,
    endpoint: Enum,
    path_components: Sequence[str] = (),
    query_params: Sequence[QueryParam] = (),
) -> str:
    url = f"{base_url}/{endpoint.value}"
    for component in path_components:
        url += f"/{component}"

    # params without a value are dropped, name included
    arguments = [f"{name}={value}" for name, value in query_params if value is not None]
    if arguments:
        url += "?" + "&".join(arguments)
    return url


def is_well_formed_url(url: str) -> bool:
    if not url or not _URL_CHARS.match(url):
        return False
    if _BAD_ESCAPE.search(url) or not _SCHEME.match(url):
        return False
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL:
        return False
    return bool(parsed.host)


def parse_query(query: str) -> Tuple[QueryParam, ...]:
    """Split ``a=1&b=2`` into params, skipping pieces without ``=``."""
    params: List[QueryParam] = []
    for piece in query.split("&"):
        if "=" not in piece:
            continue
        name, value = piece.split("=", 1)
        params.append(QueryParam(name, value))
    return tuple(params)


def parse_url(
    url: str, base_url: str, endpoints: Iterable[Enum]
) -> Optional[ParsedURL]:
    """Reconstruct endpoint, path components and query params from a URL.

    Path components take precedence over the query: when the URL has both, it
    is parsed path-style and the query is discarded. A bare endpoint with
    neither path components nor a query does not match.

    Endpoints are tried longest first. When the registry overlaps (``gists``
    and ``gists/public``), ``gists/public`` with no query parses as ``gists``
    with the path component ``public``.

    Args:
        url: The URL to parse.
        base_url: The configured base URL the URL must start with.
        endpoints: The known endpoints to match against.

    Returns:
        ParsedURL, or None if the URL does not match.
    """
    prefix = f"{base_url}/"
    if not url.startswith(prefix):
        return None

    trimmed = url[len(prefix) :]
    path, has_query, query = trimmed.partition("?")

    # a longer endpoint that would leave a bare match yields to a shorter one
    for endpoint, path_components in match_endpoints(path.split("/"), endpoints):
        if path_components:
            return ParsedURL(endpoint, path_components=path_components)
        if has_query:
            return ParsedURL(endpoint, query_params=parse_query(query))
    return None
