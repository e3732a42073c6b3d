"""
Pytest configuration and fixtures for testing the translation service.
"""

import asyncio
from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from healthcare_translator.core.translation import (
    LLMGateway,
    LLMResponse,
    PromptBundle,
    TranslationService,
)
from healthcare_translator.main import create_app


class StubGateway(LLMGateway):
    """Backend stand-in that replays canned answers.

    Each answer is either a string (returned as the completion content),
    None (a completion without content) or an exception (raised). Calling
    the stub with no answers left fails the call.
    """

    def __init__(self, *answers):
        self.answers = list(answers)
        self.calls: List[PromptBundle] = []
        self.release: Optional[asyncio.Event] = None

    @property
    def provider(self) -> str:
        return "stub"

    @property
    def model(self) -> str:
        return "stub-model"

    async def call(self, bundle: PromptBundle) -> LLMResponse:
        self.calls.append(bundle)
        if self.release is not None:
            await self.release.wait()
        if not self.answers:
            raise AssertionError("Unexpected backend call")
        answer = self.answers.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        return LLMResponse(content=answer, provider=self.provider, model=self.model)


async def wait_for_calls(gateway: StubGateway, count: int = 1) -> None:
    """Yield to the event loop until the stub has seen ``count`` calls."""
    for _ in range(50):
        if len(gateway.calls) >= count:
            return
        await asyncio.sleep(0)
    raise AssertionError(f"Gateway saw {len(gateway.calls)} calls, expected {count}")


@pytest.fixture
def stub_gateway():
    """Stub backend with no canned answers; tests add their own."""
    return StubGateway()


@pytest.fixture
def make_service():
    """Factory for services wired to a stub backend."""

    def _make(gateway: Optional[LLMGateway] = None, api_key: Optional[str] = "test-key", **kwargs):
        return TranslationService(api_key=api_key, gateway=gateway, **kwargs)

    return _make


@pytest.fixture
def service(make_service, stub_gateway):
    """Service with a configured credential and the stub backend."""
    return make_service(stub_gateway)


@pytest.fixture
def offline_service(make_service, stub_gateway):
    """Service without a credential (offline mode) that still holds a stub."""
    return make_service(stub_gateway, api_key=None)


@pytest.fixture
def client(service):
    """Create test client backed by the stub service."""
    app = create_app(service)
    with TestClient(app) as test_client:
        yield test_client
