# =============================================================================
# core/services/intake_service.py - Application Intake Pipeline
# =============================================================================
# Validates a web form submission, derives the fee breakdown, renders the two
# emails and sends them through the mail transport.
#
# Steps run in order and stop at the first failure:
#   1. required fields    -> MissingFieldError / InvalidSubmissionError (400)
#   2. transport verify   -> ServiceMisconfiguredError (500), nothing sent
#   3. fee breakdown
#   4. render documents
#   5. send business notification, then client confirmation
#                         -> DeliveryError (500)
# Anything else raised in steps 2-5 becomes InternalError (500).
# =============================================================================

import logging
from typing import Any

from pydantic import ValidationError

from app.exceptions import (
    DeliveryError,
    IntakeException,
    InternalError,
    InvalidSubmissionError,
    MissingFieldError,
    ServiceMisconfiguredError,
)
from core.models.application import (
    REQUIRED_FIELDS,
    ApplicationSubmission,
    ApplicationSuccessResponse,
)
from core.models.config import IntakeConfig
from core.services.documents import (
    business_subject,
    client_subject,
    render_business_document,
    render_client_document,
)
from core.services.fee_calculator import derive_fee_breakdown
from lib.mailer import MailMessage, MailTransport, MailTransportError
from lib.utils import format_indian_date, india_today, utc_timestamp

logger = logging.getLogger(__name__)

STAGE_BUSINESS = "business_notification"
STAGE_CLIENT = "client_confirmation"


def check_required_fields(payload: dict[str, Any]) -> None:
    """
    Raise MissingFieldError for the first missing or falsy required field.

    Zero counts as missing for the monetary fields.
    """
    for field in REQUIRED_FIELDS:
        if not payload.get(field):
            raise MissingFieldError(field)


def parse_submission(payload: Any) -> ApplicationSubmission:
    """
    Validate a raw JSON body into an ApplicationSubmission.

    Raises:
        MissingFieldError: A required field is missing or empty
        InvalidSubmissionError: The body is not an object or a field has the
            wrong type
    """
    if not isinstance(payload, dict):
        raise InvalidSubmissionError("Request body must be a JSON object")

    check_required_fields(payload)

    try:
        return ApplicationSubmission.model_validate(payload)
    except ValidationError as e:
        first = e.errors()[0]
        field = str(first["loc"][0]) if first.get("loc") else None
        raise InvalidSubmissionError(first.get("msg", str(e)), field=field) from e


class ApplicationIntakeService:
    """
    Processes one application submission per call.

    Holds no state between calls beyond the injected configuration and
    transport.
    """

    def __init__(self, config: IntakeConfig, transport: MailTransport):
        self.config = config
        self.transport = transport

    def process(self, payload: Any) -> ApplicationSuccessResponse:
        """
        Run the full intake pipeline for one submission.

        Args:
            payload: Decoded JSON body from the web form

        Returns:
            ApplicationSuccessResponse once both emails are sent

        Raises:
            IntakeException: Subclass describing the failed step
        """
        logger.debug(f"Received form data: {payload}")
        submission = parse_submission(payload)
        logger.info(f"Processing application for {submission.client_name}")

        try:
            self._verify_transport()

            fees = derive_fee_breakdown(submission)
            business_message, client_message = self._compose(submission, fees)

            self._send(business_message, STAGE_BUSINESS)
            try:
                self._send(client_message, STAGE_CLIENT)
            except DeliveryError:
                # Business notification is already out; no compensation
                logger.warning(
                    f"Business notification sent but client confirmation failed "
                    f"for {submission.client_name}"
                )
                raise

        except IntakeException:
            raise
        except Exception as e:
            logger.error(f"Error processing application: {e}")
            raise InternalError(str(e)) from e

        logger.info("Emails sent successfully")
        return ApplicationSuccessResponse(
            clientName=submission.client_name,
            paymentAmount=submission.current_payment,
            timestamp=utc_timestamp(),
        )

    # -------------------------------------------------------------------------
    # Steps
    # -------------------------------------------------------------------------

    def _verify_transport(self) -> None:
        try:
            self.transport.verify()
        except MailTransportError as e:
            logger.error(f"Email configuration error: {e}")
            raise ServiceMisconfiguredError() from e
        logger.info("Email configuration verified")

    def _compose(self, submission: ApplicationSubmission, fees) -> tuple[MailMessage, MailMessage]:
        brand = self.config.brand
        today = format_indian_date(india_today(self.config.display_timezone))

        business_message = MailMessage(
            sender_name=f"{brand.name} Applications",
            sender_address=self.config.sender_identity,
            to_address=self.config.operator_inbox,
            subject=business_subject(submission, brand),
            html_body=render_business_document(
                submission, fees, brand=brand, today=today, now_iso=utc_timestamp()
            ),
        )
        client_message = MailMessage(
            sender_name=f"{brand.name} Team",
            sender_address=self.config.sender_identity,
            to_address=submission.client_email,
            subject=client_subject(brand),
            html_body=render_client_document(submission, fees, brand=brand, today=today),
        )
        return business_message, client_message

    def _send(self, message: MailMessage, stage: str) -> None:
        logger.info(f"Sending {stage.replace('_', ' ')} to {message.to_address}")
        try:
            self.transport.send(message)
        except MailTransportError as e:
            logger.error(f"Failed to send {stage}: {e}")
            raise DeliveryError(stage, e.message) from e
