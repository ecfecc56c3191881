# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .documents import render_business_document, render_client_document
from .fee_calculator import derive_fee_breakdown
from .intake_service import ApplicationIntakeService

__all__ = [
    "ApplicationIntakeService",
    "derive_fee_breakdown",
    "render_business_document",
    "render_client_document",
]
