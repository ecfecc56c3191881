# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends

from app.config import get_settings
from core.models.config import IntakeConfig
from core.services.intake_service import ApplicationIntakeService
from lib.mailer import MailTransport, SmtpMailTransport


def get_intake_config() -> IntakeConfig:
    """Build the intake configuration from current settings."""
    return IntakeConfig.from_settings(get_settings())


def get_mail_transport() -> MailTransport:
    """
    Get an SMTP transport for the configured relay.

    A new transport is created per request; it opens connections lazily.
    """
    settings = get_settings()
    return SmtpMailTransport(
        host=settings.SMTP_HOST,
        port=settings.SMTP_PORT,
        username=settings.GMAIL_USER,
        password=settings.GMAIL_APP_PASSWORD,
        timeout=settings.SMTP_TIMEOUT_SECONDS,
        use_ssl=settings.SMTP_USE_SSL,
    )


def get_intake_service(
    config: Annotated[IntakeConfig, Depends(get_intake_config)],
    transport: Annotated[MailTransport, Depends(get_mail_transport)],
) -> ApplicationIntakeService:
    """Wire the intake service with its configuration and transport."""
    return ApplicationIntakeService(config=config, transport=transport)


# Type aliases for dependency injection
IntakeServiceDep = Annotated[ApplicationIntakeService, Depends(get_intake_service)]
MailTransportDep = Annotated[MailTransport, Depends(get_mail_transport)]
