import pytest

from apiservice._config import Config


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("APISERVICE_URL", raising=False)
    monkeypatch.delenv("APISERVICE_TIMEOUT", raising=False)
    monkeypatch.delenv("APISERVICE_DEBUG", raising=False)


@pytest.fixture
def base_url() -> str:
    return "https://api.example.com"


@pytest.fixture
def config(base_url: str) -> Config:
    return Config(base_url=base_url)


@pytest.fixture
def unconfigured() -> Config:
    return Config()
