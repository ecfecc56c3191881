# =============================================================================
# app/routers/applications.py - Application Intake Endpoint
# =============================================================================
# One path, three behaviours:
# - POST:    run the intake pipeline
# - OPTIONS: CORS preflight, empty 200
# - other:   405
#
# CORS headers are added to every response by the middleware in main.py.
# =============================================================================

import json
import logging

from fastapi import APIRouter, Request, Response
from starlette.concurrency import run_in_threadpool

from app.dependencies import IntakeServiceDep
from app.exceptions import InvalidSubmissionError, MethodNotAllowedError
from core.models.application import (
    ApplicationErrorResponse,
    ApplicationSuccessResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

PROCESS_PATH = "/process-application"


# =============================================================================
# Endpoints
# =============================================================================

@router.post(
    PROCESS_PATH,
    response_model=ApplicationSuccessResponse,
    responses={
        400: {"model": ApplicationErrorResponse, "description": "Missing or invalid field"},
        500: {"model": ApplicationErrorResponse, "description": "Mail configuration or delivery failure"},
    },
)
async def process_application(request: Request, service: IntakeServiceDep):
    """
    Submit a client application.

    Validates the form, emails the operator inbox and then the client.
    Returns 200 only when both emails were sent.
    """
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidSubmissionError(f"Request body is not valid JSON: {e}") from e

    # SMTP calls block, keep them off the event loop
    return await run_in_threadpool(service.process, payload)


@router.options(PROCESS_PATH, include_in_schema=False)
async def preflight():
    """CORS preflight."""
    return Response(status_code=200)


@router.api_route(
    PROCESS_PATH,
    methods=["GET", "PUT", "PATCH", "DELETE", "HEAD"],
    include_in_schema=False,
)
async def method_not_allowed(request: Request):
    """Reject anything that is not POST or OPTIONS."""
    logger.info(f"Rejected {request.method} on {PROCESS_PATH}")
    raise MethodNotAllowedError(request.method)
