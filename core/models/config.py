# =============================================================================
# core/models/config.py - Intake Configuration
# =============================================================================
# The explicit configuration handed to the intake service. It is built from
# Settings per request so the service never reads the environment itself.
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field


class BrandContactInfo(BaseModel):
    """Brand and contact strings printed in both emails."""

    model_config = ConfigDict(frozen=True)

    name: str = "SolveDet"
    legal_name: str = "Novasolventia Services Private Limited"
    email: str = "info@solvedet.com"
    website: str = "www.solvedet.com"
    address: str = "236, Hubtown Solaris One, Andheri East, Mumbai, Maharashtra 400069"
    payment_provider: str = "Cashfree"


class IntakeConfig(BaseModel):
    """Sender identity, credential, operator inbox and brand strings."""

    model_config = ConfigDict(frozen=True)

    sender_identity: str
    sender_credential: str = Field(default="", repr=False)
    operator_inbox: str = "info@solvedet.com"
    brand: BrandContactInfo = Field(default_factory=BrandContactInfo)
    display_timezone: str = "Asia/Kolkata"

    @classmethod
    def from_settings(cls, settings) -> "IntakeConfig":
        """Map app Settings onto the intake configuration."""
        return cls(
            sender_identity=settings.GMAIL_USER,
            sender_credential=settings.GMAIL_APP_PASSWORD,
            operator_inbox=settings.OPERATOR_INBOX,
            brand=BrandContactInfo(
                name=settings.BRAND_NAME,
                legal_name=settings.BRAND_LEGAL_NAME,
                email=settings.BRAND_EMAIL,
                website=settings.BRAND_WEBSITE,
                address=settings.BRAND_ADDRESS,
                payment_provider=settings.PAYMENT_PROVIDER,
            ),
            display_timezone=settings.DISPLAY_TIMEZONE,
        )
