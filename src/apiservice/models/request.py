from dataclasses import dataclass, field
from enum import Enum
from typing import (
    TYPE_CHECKING,
    Any,
    Iterable,
    Mapping,
    Optional,
    Tuple,
    Type,
    Union,
)

from httpx import URL

from .._utils._url import (
    QueryParam,
    is_well_formed_url,
    parse_url,
    render_url,
)
from .endpoint import Endpoint

if TYPE_CHECKING:
    from .._config import Config

QueryParamsInput = Union[
    Mapping[str, Optional[str]], Iterable[Tuple[str, Optional[str]]]
]


class HttpMethod(str, Enum):
    GET = "GET"
    PUT = "PUT"
    HEAD = "HEAD"
    POST = "POST"
    DELETE = "DELETE"
    CONNECT = "CONNECT"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"

    @classmethod
    def _missing_(cls, value: object) -> Optional["HttpMethod"]:
        if isinstance(value, str):
            return cls.__members__.get(value.upper())
        return None


def _to_query_params(params: Optional[QueryParamsInput]) -> Tuple[QueryParam, ...]:
    if not params:
        return ()
    items = params.items() if isinstance(params, Mapping) else params
    return tuple(QueryParam(name, value) for name, value in items)


@dataclass
class APIRequest:
    """A single API call: endpoint, path components, query params and method.

    Everything except ``method`` is read-only once the request is built. The
    request renders to one canonical URL:

        {base_url}/{endpoint}/{component}...?{name}={value}&...

    Query params whose value is None are left out of the URL entirely.

    Examples:
        ```python
        config = Config(base_url="https://api.github.com")
        request = APIRequest(
            Endpoint.REPOSITORIES,
            config,
            query_params=[("q", "tetris"), ("sort", "stars")],
        )
        request.url_string
        # 'https://api.github.com/search/repositories?q=tetris&sort=stars'
        ```

    Raises:
        ConfigurationError: If ``config`` has no base URL.
    """

    endpoint: Endpoint
    config: "Config" = field(repr=False, compare=False)
    path_components: Tuple[str, ...] = ()
    query_params: Tuple[QueryParam, ...] = ()
    method: HttpMethod = HttpMethod.GET

    def __post_init__(self) -> None:
        self.config.require_base_url()
        if isinstance(self.path_components, str):
            raise TypeError(
                "path_components must be a sequence of strings, not a single string"
            )
        object.__setattr__(self, "path_components", tuple(self.path_components))
        object.__setattr__(
            self, "query_params", _to_query_params(self.query_params)
        )

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "method":
            value = HttpMethod(value)
        elif name in self.__dict__:
            raise AttributeError(f"APIRequest.{name} is read-only")
        super().__setattr__(name, value)

    @property
    def url_string(self) -> str:
        return render_url(
            self.config.require_base_url(),
            self.endpoint,
            self.path_components,
            self.query_params,
        )

    @property
    def url(self) -> Optional[URL]:
        """The canonical URL, or None when the rendered string is not a valid URL."""
        url = self.url_string
        if not is_well_formed_url(url):
            return None
        return URL(url)

    @classmethod
    def from_url(
        cls,
        url: Union[URL, str],
        config: "Config",
        endpoints: Type[Enum] = Endpoint,
    ) -> Optional["APIRequest"]:
        """Rebuild a request from a URL that starts with the configured base URL.

        Args:
            url: The URL to parse.
            config: Config holding the base URL.
            endpoints: The endpoint enum to match against.

        Returns:
            APIRequest: The rebuilt request, or None when the URL does not match
                the base URL or a known endpoint, or names a bare endpoint.

        Raises:
            ConfigurationError: If ``config`` has no base URL.
        """
        parsed = parse_url(str(url), config.require_base_url(), endpoints)
        if parsed is None:
            return None
        return cls(
            parsed.endpoint,  # type: ignore[arg-type]
            config,
            path_components=parsed.path_components,
            query_params=parsed.query_params,
        )
