"""
Shared pytest fixtures for BFHL tests.
"""

import pytest
from typing import Any, Dict, List, Optional

import requests
from fastapi.testclient import TestClient

from api.server import create_app
from bfhl.utils.config import Settings


TEST_EMAIL = "tester@example.edu"


class MockResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, payload: Any = None, status_code: int = 200):
        self.payload = payload
        self.status_code = status_code

    def json(self) -> Any:
        if isinstance(self.payload, Exception):
            raise self.payload
        return self.payload

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class FakeSession:
    """Records post() calls and replays a canned response or exception."""

    def __init__(self, response: Optional[MockResponse] = None, error: Optional[Exception] = None):
        self.response = response
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def post(self, url: str, **kwargs: Any) -> MockResponse:
        self.calls.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response


def gemini_payload(text: str) -> Dict[str, Any]:
    """Shape of a successful generateContent reply."""
    return {
        "candidates": [
            {
                "content": {"parts": [{"text": text}], "role": "model"},
                "finishReason": "STOP",
            }
        ]
    }


@pytest.fixture
def settings() -> Settings:
    """
    Settings with a fake key and a small fibonacci bound.

    Returns:
        Settings: Test configuration
    """
    return Settings(
        official_email=TEST_EMAIL,
        gemini_api_key="test-key",
        gemini_model="gemini-test",
        ai_timeout_sec=5.0,
        fibonacci_max=100,
    )


@pytest.fixture
def ask_calls() -> List[str]:
    """Questions seen by the fake AI delegate."""
    return []


@pytest.fixture
def fake_ask(ask_calls):
    """
    AI delegate that answers with the first word of the question reversed.

    Returns:
        callable: (question, settings) -> str
    """

    def _ask(question: str, settings: Settings) -> str:
        ask_calls.append(question)
        return question.split()[0][::-1]

    return _ask


@pytest.fixture
def client(settings, fake_ask) -> TestClient:
    """
    TestClient over an app wired to the fake AI delegate.

    Returns:
        TestClient: HTTP client for the app
    """
    return TestClient(create_app(settings, ask_fn=fake_ask))


@pytest.fixture
def make_session():
    """
    Factory for FakeSession instances.

    Returns:
        callable: make_session(text=None, payload=None, status_code=200, error=None)
    """

    def _make(text=None, payload=None, status_code=200, error=None) -> FakeSession:
        if text is not None:
            payload = gemini_payload(text)
        return FakeSession(response=MockResponse(payload, status_code), error=error)

    return _make


# Markers for test organization
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual functions")
    config.addinivalue_line(
        "markers", "integration: Integration tests for multiple components"
    )
    config.addinivalue_line("markers", "slow: Slow tests (network, large files)")
