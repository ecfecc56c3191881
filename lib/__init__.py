# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - mailer.py: SMTP mail transport and the MailMessage type
# - utils.py: Indian number/date formatting, timestamps, base error class
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.mailer import MailMessage, MailTransport, MailTransportError, SmtpMailTransport
from lib.utils import ApplicationError, format_indian_date, format_inr, utc_timestamp

__all__ = [
    # Mail
    "MailMessage",
    "MailTransport",
    "MailTransportError",
    "SmtpMailTransport",
    # Utils
    "ApplicationError",
    "format_indian_date",
    "format_inr",
    "utc_timestamp",
]
