from ._apiservice import APIService
from ._config import Config
from ._utils import QueryParam, RequestSpec, setup_logging
from .models import (
    APIRequest,
    APIServiceError,
    APIStatusError,
    ConfigurationError,
    DecodingError,
    Endpoint,
    HttpMethod,
    RequestConstructionError,
    TransportError,
)

__all__ = [
    "APIService",
    "Config",
    "QueryParam",
    "RequestSpec",
    "setup_logging",
    "APIRequest",
    "APIServiceError",
    "APIStatusError",
    "ConfigurationError",
    "DecodingError",
    "Endpoint",
    "HttpMethod",
    "RequestConstructionError",
    "TransportError",
]
