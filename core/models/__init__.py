# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - application.py: Submission, fee breakdown and response schemas
# - config.py: Intake configuration injected into the service
#
# These models define the "contract" between API and clients.
# =============================================================================

from .application import (
    REQUIRED_FIELDS,
    ApplicationErrorResponse,
    ApplicationSubmission,
    ApplicationSuccessResponse,
    FeeBreakdown,
)
from .config import BrandContactInfo, IntakeConfig

__all__ = [
    "REQUIRED_FIELDS",
    "ApplicationErrorResponse",
    "ApplicationSubmission",
    "ApplicationSuccessResponse",
    "FeeBreakdown",
    "BrandContactInfo",
    "IntakeConfig",
]
