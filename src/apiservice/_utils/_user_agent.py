from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version

from .constants import USER_AGENT_PREFIX


@lru_cache(maxsize=1)
def get_version() -> str:
    try:
        return version("apiservice")
    except PackageNotFoundError:
        return "0.0.0"


def user_agent_value() -> str:
    return f"{USER_AGENT_PREFIX}/{get_version()}"
