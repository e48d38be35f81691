"""Shared pytest fixtures and configuration.

Fixture Categories:
1. Settings: mock_settings
2. Collaborators: response_builder, event_dispatcher, mock_messaging_service
3. HTTP: test_client (dependency overrides), sign_body
4. Payloads: make_envelope, make_event
5. Logging: logfire_capture
"""

import json
import os
import random
from typing import Any
from unittest.mock import patch

import pytest

try:
    import logfire
except ImportError:
    logfire = None

# Suppress "not configured" warnings: tests never call logfire.configure
os.environ.setdefault("LOGFIRE_IGNORE_NO_CONFIG", "1")

from src.config import Settings, get_settings
from src.services.event_dispatcher import EventDispatcher
from src.services.messaging_protocol import MockMessagingService
from src.services.response_builder import ResponseBuilder
from src.services.signature import SignatureVerifier

TEST_APP_SECRET = "test-app-secret"
TEST_VALIDATION_TOKEN = "test-verify-token"
TEST_PAGE_ACCESS_TOKEN = "test-page-token"
TEST_SERVER_URL = "https://relay.example.com"


@pytest.fixture
def mock_settings():
    """Settings for a fully configured test page."""
    return Settings(
        messenger_app_secret=TEST_APP_SECRET,
        messenger_validation_token=TEST_VALIDATION_TOKEN,
        messenger_page_access_token=TEST_PAGE_ACCESS_TOKEN,
        server_url=TEST_SERVER_URL,
        env="local",
        logfire_token=None,
        sentry_dsn=None,
    )


@pytest.fixture
def response_builder():
    """ResponseBuilder with a seeded random source."""
    return ResponseBuilder(TEST_SERVER_URL, rng=random.Random(1234))


@pytest.fixture
def event_dispatcher(response_builder):
    """EventDispatcher backed by the seeded response builder."""
    return EventDispatcher(response_builder)


@pytest.fixture
def mock_messaging_service():
    """In-memory MessagingService recording every outbound message."""
    return MockMessagingService()


@pytest.fixture
def test_client(mock_settings, mock_messaging_service):
    """FastAPI TestClient with settings and Send API replaced.

    The lifespan is not run (no context manager), matching how the webhook
    is exercised in isolation.
    """
    from fastapi.testclient import TestClient

    from src.api.dependencies import get_outbound_messaging
    from src.main import app

    app.dependency_overrides[get_settings] = lambda: mock_settings
    app.dependency_overrides[get_outbound_messaging] = lambda: mock_messaging_service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def sign_body():
    """Return a function computing the x-hub-signature header for a body."""
    verifier = SignatureVerifier(TEST_APP_SECRET)

    def _sign(body: bytes) -> str:
        return verifier.header_for(body)

    return _sign


def _event(sender_id: str = "U", recipient_id: str = "P", **fields: Any) -> dict:
    event: dict[str, Any] = {
        "sender": {"id": sender_id},
        "recipient": {"id": recipient_id},
        "timestamp": 1458692752478,
    }
    event.update(fields)
    return event


def _envelope(*events: dict, object_type: str = "page") -> dict:
    return {
        "object": object_type,
        "entry": [{"id": "1", "time": 0, "messaging": list(events)}],
    }


@pytest.fixture
def make_event():
    """Factory for raw messaging events addressed from U to P."""
    return _event


@pytest.fixture
def make_envelope():
    """Factory for single-entry webhook envelopes."""
    return _envelope


@pytest.fixture
def post_webhook(test_client, sign_body):
    """POST a payload to /webhook with a valid signature by default."""

    def _post(payload: Any, *, signed: bool = True, signature: str | None = None):
        body = json.dumps(payload).encode("utf-8")
        headers = {"Content-Type": "application/json"}
        if signature is not None:
            headers["X-Hub-Signature"] = signature
        elif signed:
            headers["X-Hub-Signature"] = sign_body(body)
        return test_client.post("/webhook", content=body, headers=headers)

    return _post


@pytest.fixture
def logfire_capture():
    """
    Capture Logfire logs for testing.

    This fixture patches Logfire to capture log calls for assertion.
    """
    if logfire is None:
        pytest.skip("logfire not available")

    captured_logs = []

    def capture_info(*args, **kwargs):
        captured_logs.append(("info", args, kwargs))

    def capture_warn(*args, **kwargs):
        captured_logs.append(("warn", args, kwargs))

    def capture_error(*args, **kwargs):
        captured_logs.append(("error", args, kwargs))

    with (
        patch("logfire.info", side_effect=capture_info),
        patch("logfire.warn", side_effect=capture_warn),
        patch("logfire.error", side_effect=capture_error),
    ):
        yield captured_logs
