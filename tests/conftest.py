"""
Pytest configuration and fixtures
"""
import json
from typing import Any, Callable, List

import httpx
import pytest

from core.logger import LoggerService
from core.settings import Settings
from management import Management


@pytest.fixture
def settings() -> Settings:
    """Settings pointing at a fake tenant, ignoring any local .env"""
    return Settings(
        _env_file=None,
        MANAGEMENT_DOMAIN="tenant.example.com",
        MANAGEMENT_API_TOKEN="test-token",
        LOG_LEVEL="DEBUG",
        LOG_FORMAT="text",
    )


@pytest.fixture
def logger_service(settings: Settings) -> LoggerService:
    return LoggerService(settings)


class RecordingTransport:
    """Mock transport that records requests and answers with queued responses"""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.responses: List[Callable[[httpx.Request], httpx.Response]] = []

    def reply(self, status_code: int = 200, body: Any = None) -> None:
        def respond(request: httpx.Request) -> httpx.Response:
            if body is None:
                return httpx.Response(status_code)
            return httpx.Response(status_code, json=body)

        self.responses.append(respond)

    def fail(self, error: Exception) -> None:
        def respond(request: httpx.Request) -> httpx.Response:
            raise error

        self.responses.append(respond)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responses.pop(0)(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def management(
    settings: Settings, logger_service: LoggerService, transport: RecordingTransport
) -> Management:
    return Management(
        settings, logger_service, transport=httpx.MockTransport(transport.handler)
    )
