# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the intake business logic:
# - models/: Pydantic schemas for submissions, fees and configuration
# - services/: Fee calculation, email rendering and the intake pipeline
#
# Nothing here reads environment variables; configuration is passed in.
# =============================================================================
