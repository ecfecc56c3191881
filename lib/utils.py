# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application:
# - Indian-style currency and date formatting for the email documents
# - Timestamp helpers
# - Base error class
# =============================================================================

from datetime import date, datetime, timezone
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any
from zoneinfo import ZoneInfo


# =============================================================================
# Number & Date Formatting
# =============================================================================

# Amounts show at most this many decimals, trailing zeros dropped
MAX_FRACTION_DIGITS = 3


def group_indian_digits(digits: str) -> str:
    """
    Group an unsigned integer string the Indian way.

    The last three digits form one group, everything before is grouped
    in pairs.

    Example:
        group_indian_digits("1234567")  # "12,34,567"
    """
    if len(digits) <= 3:
        return digits

    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    pairs.insert(0, head)
    return ",".join(pairs) + "," + tail


def format_inr(amount: int | float | Decimal) -> str:
    """
    Format an amount with Indian digit grouping.

    Args:
        amount: Any real number

    Returns:
        The grouped number without a currency symbol

    Raises:
        ValueError: If the amount is infinite or NaN

    Example:
        format_inr(50000)       # "50,000"
        format_inr(1234567.5)   # "12,34,567.5"
        format_inr(10000.0)     # "10,000"
    """
    raw = Decimal(str(amount))
    if not raw.is_finite():
        raise ValueError(f"Cannot format non-finite amount: {amount}")

    # Room for every integer digit plus the fraction digits
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, raw.adjusted() + MAX_FRACTION_DIGITS + 2)
        value = raw.quantize(
            Decimal(1).scaleb(-MAX_FRACTION_DIGITS),
            rounding=ROUND_HALF_UP,
        )
        sign = "-" if value < 0 else ""
        integer_part, _, fraction = f"{abs(value):f}".partition(".")
    fraction = fraction.rstrip("0")

    result = sign + group_indian_digits(integer_part)
    if fraction:
        result += "." + fraction
    return result


def format_indian_date(moment: date) -> str:
    """
    Format a date as day/month/year without zero padding.

    Example:
        format_indian_date(date(2026, 1, 5))  # "5/1/2026"
    """
    return f"{moment.day}/{moment.month}/{moment.year}"


def india_today(tz_name: str = "Asia/Kolkata") -> date:
    """Return today's date in the given timezone."""
    return datetime.now(ZoneInfo(tz_name)).date()


def utc_timestamp() -> str:
    """
    Current UTC time as ISO-8601 with millisecond precision.

    Example:
        utc_timestamp()  # "2026-10-19T06:30:00.123Z"
    """
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


# =============================================================================
# Base Error Class
# =============================================================================

class ApplicationError(Exception):
    """
    Base error class for library-level errors.

    Attributes:
        code: Error code for categorization
        message: Human-readable error message
        details: Additional context for debugging

    Example:
        class MyServiceError(ApplicationError):
            def __init__(self, message: str, **kwargs):
                super().__init__(message, code="MY_SERVICE_ERROR", **kwargs)
    """

    def __init__(
        self,
        message: str,
        code: str = "APPLICATION_ERROR",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"
