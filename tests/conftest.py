import json
from typing import Callable

import httpx
import pytest

from ddog._config import Config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's Datadog settings out of the tests."""
    for name in (
        "DD_API_KEY",
        "DD_APPLICATION_KEY",
        "DD_APP_KEY",
        "DD_SITE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DD_DISABLE_SSL_VERIFY", "1")


@pytest.fixture
def config() -> Config:
    return Config(
        base_url="https://api.datadoghq.com",
        api_key="test-api-key",
        application_key="test-app-key",
    )


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    return []


@pytest.fixture
def make_transport(
    recorded_requests: list[httpx.Request],
) -> Callable[..., httpx.MockTransport]:
    """Build a MockTransport that records requests and answers with a fixed response."""

    def factory(status_code: int = 202, body: object = None) -> httpx.MockTransport:
        payload = {"status": "ok"} if body is None else body

        def handler(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            return httpx.Response(status_code, content=json.dumps(payload).encode())

        return httpx.MockTransport(handler)

    return factory
