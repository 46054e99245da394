"""
Shared test fixtures.

Routes get a recording fake in place of the real completion gateway, so no
test ever reaches the network.
"""

import pytest
from fastapi.testclient import TestClient

from debate_coach.exceptions import CompletionGatewayError
from debate_coach.main import app, get_gateway
from debate_coach.models import CompletionResult


class FakeGateway:
    """Records every request and answers with canned text or an error."""

    def __init__(self, text: str = "generated text", error: Exception = None):
        self.text = text
        self.error = error
        self.requests = []

    def complete(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return CompletionResult(text=self.text)

    @property
    def last(self):
        return self.requests[-1]


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def failing_gateway() -> FakeGateway:
    return FakeGateway(error=CompletionGatewayError("provider unavailable"))


@pytest.fixture
def make_client():
    """Build a TestClient whose routes use the given gateway."""

    def _make(fake):
        app.dependency_overrides[get_gateway] = lambda: fake
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture
def client(make_client, gateway) -> TestClient:
    return make_client(gateway)
