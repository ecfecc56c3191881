# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the SolveDet intake API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
# =============================================================================

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import settings
from app.exceptions import (
    GENERIC_ERROR_MESSAGE,
    IntakeException,
    MethodNotAllowedError,
    intake_exception_handler,
)
from app.routers import applications, health

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Sent on every response, including errors and preflight
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}


# Create FastAPI application
app = FastAPI(
    title="SolveDet Intake API",
    description="""
## Client Application Intake

Receives consulting applications from the SolveDet web form and emails them.

### How It Works

1. **Validate** - clientName, clientEmail, clientPhone, totalFee and currentPayment are required
2. **Verify mail relay** - fail fast if credentials are unusable
3. **Compute fees** - 10 / 20 / 70 split unless overridden
4. **Send emails** - operator notification first, then client confirmation

### Quick Start

```bash
curl -X POST http://localhost:8000/api/process-application \\
  -H "Content-Type: application/json" \\
  -d '{"clientName": "Test User", "clientEmail": "t@example.com",
       "clientPhone": "9999999999", "totalFee": 50000, "currentPayment": 5000}'
```
""",
    version=health.API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=[
        {
            "name": "Applications",
            "description": "Submit client applications",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

@app.middleware("http")
async def add_cors_headers(request: Request, call_next):
    """Attach the permissive CORS headers to every response."""
    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(IntakeException)
async def handle_intake_exception(request: Request, exc: IntakeException):
    """Handle custom intake exceptions."""
    return await intake_exception_handler(request, exc)


@app.exception_handler(StarletteHTTPException)
async def handle_http_exception(request: Request, exc: StarletteHTTPException):
    """Routing errors (unknown path, unrouted method) in the intake error shape."""
    if exc.status_code == 405:
        content = MethodNotAllowedError(request.method).to_dict()
    else:
        content = {"success": False, "error": str(exc.detail), "code": "HTTP_ERROR"}
    return JSONResponse(
        status_code=exc.status_code,
        content=content,
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": GENERIC_ERROR_MESSAGE,
            "code": "INTERNAL_ERROR",
            "details": str(exc),
        },
        headers=CORS_HEADERS,
    )


# =============================================================================
# Routers
# =============================================================================

# Intake endpoint
app.include_router(
    applications.router,
    prefix="/api",
    tags=["Applications"]
)

# Health check endpoints
app.include_router(
    health.router,
    prefix="/api",
    tags=["Health"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "SolveDet Intake API",
        "version": health.API_VERSION,
        "submit": "/api/process-application",
        "health": "/api/health",
    }
