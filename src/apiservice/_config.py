from os import environ as env
from typing import Any, Optional

import httpx
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ._utils.constants import (
    DEFAULT_TIMEOUT_SECONDS,
    ENV_BASE_URL,
    ENV_DEBUG,
    ENV_TIMEOUT,
)
from .models.errors import ConfigurationError


class Config(BaseModel):
    """Configuration shared by requests and services.

    A config is immutable once built. Code that needs a different base URL
    builds a new config rather than reconfiguring an existing one.
    """

    model_config = ConfigDict(frozen=True)

    base_url: Optional[str] = None
    timeout: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)
    debug: bool = False

    @field_validator("base_url", mode="before")
    @classmethod
    def validate_base_url(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        if not isinstance(value, str) or not value.strip():
            raise ConfigurationError("Can't configure API base URL with an empty value.")

        value = value.strip().rstrip("/")
        try:
            url = httpx.URL(value)
        except httpx.InvalidURL as e:
            raise ConfigurationError(f"Invalid API base URL '{value}'.", cause=e) from e
        if not url.scheme or not url.host:
            raise ConfigurationError(
                f"Invalid API base URL '{value}'. Expected an absolute URL such as https://api.example.com"
            )
        return value

    @classmethod
    def from_env(cls, **overrides: Any) -> "Config":
        """Build a config from ``APISERVICE_*`` environment variables.

        Values from a ``.env`` file are loaded first. Keyword arguments that are
        not None take precedence over the environment.
        """
        load_dotenv()
        values: dict[str, Any] = {}
        if ENV_BASE_URL in env:
            values["base_url"] = env[ENV_BASE_URL]
        if env.get(ENV_TIMEOUT):
            values["timeout"] = env[ENV_TIMEOUT]
        if env.get(ENV_DEBUG):
            values["debug"] = env[ENV_DEBUG]

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def require_base_url(self) -> str:
        if self.base_url is None:
            raise ConfigurationError()
        return self.base_url
