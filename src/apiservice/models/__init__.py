from .errors import (
    APIServiceError,
    APIStatusError,
    ConfigurationError,
    DecodingError,
    RequestConstructionError,
    TransportError,
)
from .endpoint import Endpoint, match_endpoint, match_endpoints
from .request import APIRequest, HttpMethod

__all__ = [
    "APIServiceError",
    "APIStatusError",
    "ConfigurationError",
    "DecodingError",
    "RequestConstructionError",
    "TransportError",
    "Endpoint",
    "match_endpoint",
    "match_endpoints",
    "APIRequest",
    "HttpMethod",
]
