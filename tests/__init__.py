# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the intake API:
# - test_utils.py: Indian number/date formatting helpers
# - test_fee_calculator.py: Fee breakdown rules
# - test_documents.py: Email rendering
# - test_mailer.py: SMTP transport with smtplib mocked
# - test_intake_service.py: Pipeline behaviour with a fake transport
# - test_api.py: HTTP surface (methods, CORS, status codes, health)
# - test_config.py: Settings to IntakeConfig mapping
#
# Run tests with: pytest
# =============================================================================
