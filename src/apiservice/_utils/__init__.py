from ._errors import handle_errors
from ._logs import setup_logging
from ._request_spec import RequestSpec
from ._url import (
    ParsedURL,
    QueryParam,
    is_well_formed_url,
    parse_query,
    parse_url,
    render_url,
)
from ._user_agent import user_agent_value

__all__ = [
    "handle_errors",
    "setup_logging",
    "RequestSpec",
    "ParsedURL",
    "QueryParam",
    "is_well_formed_url",
    "parse_query",
    "parse_url",
    "render_url",
    "user_agent_value",
]
