# =============================================================================
# app/exceptions.py - Custom Exceptions and Handlers
# =============================================================================
# Centralized exception handling for the intake API.
# Every failure is rendered as {"success": false, "error": ...} so the web
# form can show a single message field. Raw error text only ever travels in
# "details", which is meant for operators rather than end users.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

GENERIC_ERROR_MESSAGE = "Internal server error. Please try again."


class IntakeException(Exception):
    """
    Base exception for the intake API.

    All custom exceptions inherit from this class and carry the HTTP status
    they map to.
    """

    def __init__(
        self,
        message: str,
        code: str = "INTAKE_ERROR",
        status_code: int = 500,
        details: str | None = None,
        extra: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        self.extra = extra or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result: dict[str, Any] = {
            "success": False,
            "error": self.message,
            "code": self.code,
        }
        result.update(self.extra)
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Client Errors
# =============================================================================

class MissingFieldError(IntakeException):
    """Raised when a required submission field is missing or empty."""

    def __init__(self, field: str):
        super().__init__(
            message=f"Missing required field: {field}",
            code="MISSING_FIELD",
            status_code=400,
            extra={"field": field},
        )
        self.field = field


class InvalidSubmissionError(IntakeException):
    """Raised when the payload is present but cannot be parsed."""

    def __init__(self, reason: str, field: str | None = None):
        message = f"Invalid value for field: {field}" if field else f"Invalid submission: {reason}"
        super().__init__(
            message=message,
            code="INVALID_SUBMISSION",
            status_code=400,
            details=reason,
            extra={"field": field} if field else None,
        )
        self.field = field


class MethodNotAllowedError(IntakeException):
    """Raised for any method other than POST or OPTIONS."""

    def __init__(self, method: str):
        super().__init__(
            message="Method not allowed. Use POST.",
            code="METHOD_NOT_ALLOWED",
            status_code=405,
        )
        self.method = method


# =============================================================================
# Server Errors
# =============================================================================

class ServiceMisconfiguredError(IntakeException):
    """
    Raised when the mail transport fails verification.

    The underlying error is not echoed to the client since it may
    describe credentials.
    """

    def __init__(self):
        super().__init__(
            message="Email configuration error. Please check environment variables.",
            code="SERVICE_MISCONFIGURED",
            status_code=500,
        )


class DeliveryError(IntakeException):
    """Raised when sending one of the two emails fails."""

    def __init__(self, stage: str, cause: str):
        super().__init__(
            message=GENERIC_ERROR_MESSAGE,
            code="DELIVERY_FAILED",
            status_code=500,
            details=cause,
            extra={"stage": stage},
        )
        self.stage = stage
        self.cause = cause


class InternalError(IntakeException):
    """Catch-all for anything unexpected inside the pipeline."""

    def __init__(self, cause: str):
        super().__init__(
            message=GENERIC_ERROR_MESSAGE,
            code="INTERNAL_ERROR",
            status_code=500,
            details=cause,
        )
        self.cause = cause


# =============================================================================
# Exception Handlers
# =============================================================================

async def intake_exception_handler(
    request: Request,
    exc: IntakeException
) -> JSONResponse:
    """
    Convert IntakeException to JSON response.

    Returns structured error with:
    - success: always false
    - error: Safe, human-readable message
    - code: Machine-readable error code
    - details: Underlying error text (if any)
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )
