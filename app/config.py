# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import get_settings
#   print(get_settings().SMTP_HOST)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# Mail credentials default to empty so the API can start without them; the
# intake pipeline reports a configuration error when they are missing.
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses pydantic-settings to:
    - Automatically load from .env file
    - Validate types and constraints
    - Provide sensible defaults for development
    """

    # -------------------------------------------------------------------------
    # Mail Relay Credentials
    # -------------------------------------------------------------------------
    # Sender account and its app password for the SMTP relay

    GMAIL_USER: str = Field(
        default="",
        description="Sender account used to authenticate with the mail relay"
    )

    GMAIL_APP_PASSWORD: str = Field(
        default="",
        description="App password for the sender account"
    )

    # -------------------------------------------------------------------------
    # SMTP Relay
    # -------------------------------------------------------------------------

    SMTP_HOST: str = Field(
        default="smtp.gmail.com",
        description="SMTP relay hostname"
    )

    SMTP_PORT: int = Field(
        default=465,
        ge=1,
        le=65535,
        description="SMTP relay port"
    )

    SMTP_USE_SSL: bool = Field(
        default=True,
        description="Use implicit TLS (SMTPS); when false, STARTTLS is used"
    )

    SMTP_TIMEOUT_SECONDS: float = Field(
        default=30.0,
        gt=0,
        description="Socket timeout for relay connections"
    )

    # -------------------------------------------------------------------------
    # Operator Inbox & Brand
    # -------------------------------------------------------------------------
    # Compiled-in defaults; override per deployment if needed

    OPERATOR_INBOX: str = Field(
        default="info@solvedet.com",
        description="Inbox that receives new application notifications"
    )

    BRAND_NAME: str = Field(default="SolveDet")
    BRAND_LEGAL_NAME: str = Field(default="Novasolventia Services Private Limited")
    BRAND_EMAIL: str = Field(default="info@solvedet.com")
    BRAND_WEBSITE: str = Field(default="www.solvedet.com")
    BRAND_ADDRESS: str = Field(
        default="236, Hubtown Solaris One, Andheri East, Mumbai, Maharashtra 400069"
    )

    PAYMENT_PROVIDER: str = Field(
        default="Cashfree",
        description="Payment gateway clients are redirected to after submitting"
    )

    DISPLAY_TIMEZONE: str = Field(
        default="Asia/Kolkata",
        description="IANA timezone used for the agreement date in emails"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.

    Returns:
        Settings: The application settings instance
    """
    return Settings()


# Global settings instance for easy importing
settings = get_settings()
