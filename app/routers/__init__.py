# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - applications.py: Application intake endpoint
# - health.py: Health check endpoints
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import applications
from . import health

__all__ = [
    "applications",
    "health",
]
