# =============================================================================
# core/services/fee_calculator.py - Fee Breakdown
# =============================================================================
# Splits the total service fee into initiation / confirmation / balance.
# =============================================================================

from core.models.application import ApplicationSubmission, FeeBreakdown

# Initiation / confirmation / balance, in percent
DEFAULT_INITIATION_PERCENT = 10
DEFAULT_CONFIRMATION_PERCENT = 20
DEFAULT_BALANCE_PERCENT = 70


def derive_fee_breakdown(submission: ApplicationSubmission) -> FeeBreakdown:
    """
    Work out the three fee tiers for a submission.

    A breakdown supplied with the submission wins and is returned unchanged.
    Otherwise each tier is totalFee * percent / 100, where a falsy percent
    override falls back to the default. The three percents are not required
    to add up to 100.

    Args:
        submission: A submission that already passed required-field checks

    Returns:
        FeeBreakdown for the documents

    Example:
        totalFee=100000, no overrides -> 10000 / 20000 / 70000
    """
    if submission.calculated_fees is not None:
        return submission.calculated_fees

    total = submission.total_fee
    initiation = submission.initiation_percent or DEFAULT_INITIATION_PERCENT
    confirmation = submission.confirmation_percent or DEFAULT_CONFIRMATION_PERCENT
    balance = submission.balance_percent or DEFAULT_BALANCE_PERCENT

    return FeeBreakdown(
        initiation_amount=total * initiation / 100,
        confirmation_amount=total * confirmation / 100,
        balance_amount=total * balance / 100,
    )
