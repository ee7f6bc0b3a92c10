from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple


class Endpoint(str, Enum):
    """Known API endpoints. The value is the path segment appended to the base URL."""

    REPOSITORIES = "search/repositories"
    USERS = "users"


def match_endpoints(
    segments: Sequence[str], endpoints: Iterable[Enum]
) -> List[Tuple[Enum, Tuple[str, ...]]]:
    """Find every endpoint whose path matches the leading URL segments.

    Endpoints may span more than one segment (``search/repositories``), and a
    registry may hold overlapping endpoints (``gists``, ``gists/public``).

    Returns:
        (endpoint, remaining segments) pairs, longest endpoint first.
    """
    matches: List[Tuple[int, Enum]] = []
    for endpoint in endpoints:
        endpoint_segments = tuple(str(endpoint.value).split("/"))
        length = len(endpoint_segments)
        if tuple(segments[:length]) == endpoint_segments:
            matches.append((length, endpoint))

    matches.sort(key=lambda match: match[0], reverse=True)
    return [(endpoint, tuple(segments[length:])) for length, endpoint in matches]


def match_endpoint(
    segments: Sequence[str], endpoints: Iterable[Enum]
) -> Optional[Tuple[Enum, Tuple[str, ...]]]:
    """Longest endpoint matching the leading URL segments, or ``None``."""
    matches = match_endpoints(segments, endpoints)
    return matches[0] if matches else None
