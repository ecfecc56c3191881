# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Provides health check endpoints for monitoring and load balancers.
# =============================================================================

import logging

from fastapi import APIRouter
from pydantic import BaseModel
from starlette.concurrency import run_in_threadpool

from app.config import settings
from app.dependencies import MailTransportDep
from lib.mailer import MailTransportError
from lib.utils import utc_timestamp

logger = logging.getLogger(__name__)

router = APIRouter()

API_VERSION = "1.0.0"


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(BaseModel):
    """Basic health check response."""
    status: str
    timestamp: str
    environment: str
    version: str


class ChecksResponse(BaseModel):
    """Individual service checks."""
    mail: str


class ReadinessResponse(BaseModel):
    """Readiness check response."""
    status: str
    checks: ChecksResponse
    timestamp: str


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint.

    Returns basic health status for load balancers and monitoring.
    """
    return HealthResponse(
        status="healthy",
        timestamp=utc_timestamp(),
        environment=settings.ENVIRONMENT,
        version=API_VERSION,
    )


@router.get("/health/ready", response_model=ReadinessResponse)
async def readiness_check(transport: MailTransportDep):
    """
    Readiness check endpoint.

    Verifies the mail relay accepts the configured credentials.
    """
    checks = ChecksResponse(mail="unknown")

    try:
        await run_in_threadpool(transport.verify)
        checks.mail = "healthy"
    except MailTransportError as e:
        logger.warning(f"Mail relay not ready: {e}")
        checks.mail = "unhealthy"

    return ReadinessResponse(
        status="ready" if checks.mail == "healthy" else "degraded",
        checks=checks,
        timestamp=utc_timestamp(),
    )
