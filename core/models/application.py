# =============================================================================
# core/models/application.py - Application Intake Schemas
# =============================================================================
# These models define the API contract for the intake endpoint:
# - ApplicationSubmission: The web form payload (camelCase on the wire)
# - FeeBreakdown: Three-part split of the total service fee
# - ApplicationSuccessResponse / ApplicationErrorResponse: Endpoint output
#
# Required fields are checked by the intake service before the payload is
# parsed, so every field here is optional at the model level.
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Checked in this order; the first missing one is reported
REQUIRED_FIELDS: tuple[str, ...] = (
    "clientName",
    "clientEmail",
    "clientPhone",
    "totalFee",
    "currentPayment",
)

Amount = int | float


class CamelModel(BaseModel):
    """Base for wire models: camelCase aliases, snake_case attributes."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        allow_inf_nan=False,
        extra="ignore",
    )


class FeeBreakdown(CamelModel):
    """
    Initiation / confirmation / balance split of the total fee.

    When a client sends this object it is used as-is: amounts are not
    checked against totalFee or against each other.
    """
    initiation_amount: Amount
    confirmation_amount: Amount
    balance_amount: Amount


class ApplicationSubmission(CamelModel):
    """
    Web form payload for a new consulting engagement.

    Example:
        {
            "clientName": "Test User",
            "clientEmail": "t@example.com",
            "clientPhone": "9999999999",
            "totalFee": 50000,
            "currentPayment": 5000
        }
    """

    # Client identity
    client_name: str | None = None
    client_email: str | None = None
    client_phone: str | None = None
    constitution: str | None = None
    client_pan: str | None = Field(default=None, alias="clientPAN")
    client_address: str | None = None

    # Authorized signatory (companies, firms)
    signatory_name: str | None = None
    designation: str | None = None
    signatory_pan: str | None = Field(default=None, alias="signatoryPAN")

    # Fees
    total_fee: Amount | None = None
    current_payment: Amount | None = None
    initiation_percent: Amount | None = None
    confirmation_percent: Amount | None = None
    balance_percent: Amount | None = None
    calculated_fees: FeeBreakdown | None = None

    # Service details
    service_date: str | None = None
    case_reference: str | None = None
    additional_notes: str | None = None

    # Browser metadata
    submission_timestamp: str | None = None
    user_agent: str | None = None


class ApplicationSuccessResponse(BaseModel):
    """Response when both emails went out."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": True,
                "message": "Application processed successfully",
                "clientName": "Test User",
                "paymentAmount": 5000,
                "timestamp": "2026-10-19T06:30:00.123Z",
            }
        }
    )

    success: bool = True
    message: str = "Application processed successfully"
    clientName: str
    paymentAmount: Amount
    timestamp: str


class ApplicationErrorResponse(BaseModel):
    """Body of every failed request."""
    success: bool = False
    error: str
    code: str
    details: str | None = None
    field: str | None = None
    stage: str | None = None
