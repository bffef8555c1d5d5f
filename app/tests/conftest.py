"""
Pytest configuration and fixtures for testing.
"""

import pytest
from fastapi.testclient import TestClient

from app.api.v1.routers.contact import get_notifier, get_token_verifier
from app.api.v1.schemas.contact import VerificationResult
from app.core.config import ContactFormSettings
from app.main import create_app

CONTACT_URL = "/api/v1/contact"
ALLOWED_ORIGIN = "https://www.example.com"


class StubVerifier:
    """Records calls and answers with a fixed verification result."""

    def __init__(self, result: VerificationResult):
        self.result = result
        self.calls = []

    async def __call__(self, token, secret_key):
        self.calls.append((token, secret_key))
        return self.result


class StubNotifier:
    """Records calls and answers with a fixed delivery outcome."""

    def __init__(self, delivered: bool = True):
        self.delivered = delivered
        self.calls = []

    async def __call__(self, webhook_url, submission):
        self.calls.append((webhook_url, submission))
        return self.delivered


@pytest.fixture
def contact_settings():
    """Return settings with a test secret, webhook and one allowed origin."""
    return ContactFormSettings(
        turnstile_secret_key="test-secret-key",
        webhook_url="https://chat.example.com/api/webhooks/123/abc",
        allowed_origins=[ALLOWED_ORIGIN],
    )


@pytest.fixture
def verifier():
    return StubVerifier(VerificationResult(success=True))


@pytest.fixture
def notifier():
    return StubNotifier(delivered=True)


@pytest.fixture
def app(contact_settings, verifier, notifier):
    """Create the FastAPI application with stubbed outbound calls."""
    application = create_app(contact_settings)
    application.dependency_overrides[get_token_verifier] = lambda: verifier
    application.dependency_overrides[get_notifier] = lambda: notifier
    return application


@pytest.fixture
def client(app):
    """Create a test client for the FastAPI application."""
    return TestClient(app)


@pytest.fixture
def form_fields():
    """Return a complete, valid contact form submission."""
    return {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "message": "Hello, I would like to know more about your services.",
        "intra_name": "Acme Corp",
        "cf-turnstile-response": "XXXX.DUMMY.TOKEN.XXXX",
    }


@pytest.fixture
def post_form(client):
    """Post fields to the contact endpoint as multipart/form-data parts without filenames."""

    def _post(fields, headers=None):
        return client.post(
            CONTACT_URL,
            files={key: (None, value) for key, value in fields.items()},
            headers=headers,
        )

    return _post
