import httpx
import pytest
from pytest_httpx import HTTPXMock

from apiservice._config import Config
from apiservice._services._base_service import BaseService
from apiservice._utils import user_agent_value
from apiservice._utils.constants import HEADER_USER_AGENT


@pytest.fixture
def service(config: Config) -> BaseService:
    return BaseService(config=config)


class TestBaseService:
    def test_init_base_service(self, service: BaseService):
        assert service is not None

    def test_base_service_default_headers(self, service: BaseService):
        assert service.default_headers == {
            "Accept": "application/json",
            "User-Agent": user_agent_value(),
        }

    def test_user_agent_value(self):
        assert user_agent_value().startswith("apiservice-python/")

    def test_client_timeout_from_config(self, base_url: str):
        service = BaseService(config=Config(base_url=base_url, timeout=5))

        assert service._client.timeout == httpx.Timeout(5)
        assert service._client_async.timeout == httpx.Timeout(5)

    class TestRequest:
        def test_simple_request(
            self, httpx_mock: HTTPXMock, service: BaseService, base_url: str
        ):
            url = f"{base_url}/users/octocat"
            httpx_mock.add_response(url=url, status_code=200, json={"test": "test"})

            response = service.request("GET", url)

            sent_request = httpx_mock.get_request()
            if sent_request is None:
                raise Exception("No request was sent")

            assert sent_request.method == "GET"
            assert sent_request.url == url
            assert sent_request.headers["Accept"] == "application/json"
            assert sent_request.headers[HEADER_USER_AGENT] == user_agent_value()

            assert response.status_code == 200
            assert response.json() == {"test": "test"}

        def test_error_status_raises(
            self, httpx_mock: HTTPXMock, service: BaseService, base_url: str
        ):
            url = f"{base_url}/users/ghost"
            httpx_mock.add_response(url=url, status_code=404)

            with pytest.raises(httpx.HTTPStatusError):
                service.request("GET", url)

        def test_logs_request(
            self,
            httpx_mock: HTTPXMock,
            service: BaseService,
            base_url: str,
            caplog: pytest.LogCaptureFixture,
        ):
            url = f"{base_url}/users"
            httpx_mock.add_response(url=url, json=[])

            with caplog.at_level("DEBUG", logger="apiservice"):
                service.request("HEAD", url)

            assert f"Request: HEAD {url}" in caplog.text

    class TestRequestAsync:
        @pytest.mark.anyio
        async def test_simple_request_async(
            self, httpx_mock: HTTPXMock, service: BaseService, base_url: str
        ):
            url = f"{base_url}/users/octocat"
            httpx_mock.add_response(url=url, status_code=200, json={"test": "test"})

            response = await service.request_async("POST", url)

            sent_request = httpx_mock.get_request()
            if sent_request is None:
                raise Exception("No request was sent")

            assert sent_request.method == "POST"
            assert sent_request.url == url
            assert sent_request.headers[HEADER_USER_AGENT] == user_agent_value()

            assert response.status_code == 200
            assert response.json() == {"test": "test"}

            await service.aclose()
