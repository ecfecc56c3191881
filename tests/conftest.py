# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Provides a recording fake mail transport and a wired TestClient
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("GMAIL_USER", "sender@example.com")
os.environ.setdefault("GMAIL_APP_PASSWORD", "test-app-password")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_intake_service, get_mail_transport
from app.main import app
from core.models.config import IntakeConfig
from core.services.intake_service import ApplicationIntakeService
from lib.mailer import MailMessage, MailTransportError


# =============================================================================
# Fakes
# =============================================================================

class FakeMailTransport:
    """
    Records verify/send calls instead of talking to a relay.

    Set fail_verify to make verify() raise, or fail_on_send to the 1-based
    index of the send that should raise.
    """

    def __init__(self, fail_verify: bool = False, fail_on_send: int | None = None):
        self.fail_verify = fail_verify
        self.fail_on_send = fail_on_send
        self.verify_calls = 0
        self.send_attempts = 0
        self.sent: list[MailMessage] = []

    def verify(self) -> None:
        self.verify_calls += 1
        if self.fail_verify:
            raise MailTransportError("Invalid login: 535 Username and Password not accepted")

    def send(self, message: MailMessage) -> None:
        self.send_attempts += 1
        if self.fail_on_send == self.send_attempts:
            raise MailTransportError(f"Failed to send mail to {message.to_address}: 550 rejected")
        self.sent.append(message)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def valid_payload():
    """Minimal valid submission."""
    return {
        "clientName": "Test User",
        "clientEmail": "t@example.com",
        "clientPhone": "9999999999",
        "totalFee": 50000,
        "currentPayment": 5000,
    }


@pytest.fixture
def full_payload(valid_payload):
    """Submission with every optional field filled in."""
    return {
        **valid_payload,
        "constitution": "Private Limited Company",
        "clientPAN": "ABCDE1234F",
        "clientAddress": "12 MG Road, Pune",
        "signatoryName": "Asha Rao",
        "designation": "Director",
        "signatoryPAN": "PQRST6789K",
        "serviceDate": "2026-10-20",
        "caseReference": "CASE-42",
        "additionalNotes": "Prefers calls after 5pm",
        "submissionTimestamp": "2026-10-19T06:30:00.000Z",
        "userAgent": "Mozilla/5.0 (Test)",
    }


@pytest.fixture
def intake_config():
    """Intake configuration with fake credentials."""
    return IntakeConfig(
        sender_identity="sender@example.com",
        sender_credential="test-app-password",
        operator_inbox="ops@example.com",
    )


@pytest.fixture
def fake_transport():
    """A transport that accepts everything."""
    return FakeMailTransport()


@pytest.fixture
def intake_service(intake_config, fake_transport):
    """Intake service wired to the fake transport."""
    return ApplicationIntakeService(config=intake_config, transport=fake_transport)


@pytest.fixture
def client(intake_config, fake_transport):
    """TestClient whose intake service uses the fake transport."""
    app.dependency_overrides[get_intake_service] = lambda: ApplicationIntakeService(
        config=intake_config, transport=fake_transport
    )
    app.dependency_overrides[get_mail_transport] = lambda: fake_transport
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
