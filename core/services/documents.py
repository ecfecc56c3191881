# =============================================================================
# core/services/documents.py - Email Documents
# =============================================================================
# Pure functions that render the two HTML emails sent per application:
# - Business notification: everything operations needs to follow up
# - Client confirmation: agreement summary sent to the client
#
# No I/O happens here. Dates and timestamps are passed in so rendering is
# deterministic. All submission text is HTML-escaped before interpolation.
# =============================================================================

from html import escape

from core.models.application import ApplicationSubmission, FeeBreakdown
from core.models.config import BrandContactInfo
from lib.utils import format_inr

SERVICES_OFFERED: tuple[str, ...] = (
    "Debt Resolution",
    "Debt Consolidation",
    "Fresh Debt Assistance (All loan types)",
    "Credit Advisory",
    "Restructuring and Resolution Advisory",
    "SARFAESI Advisory",
    "DSCR and Financial Analysis",
    "Legal and Regulatory Support",
)

_HEADER_STYLE = "background: linear-gradient(135deg, #1e3c72 0%, #2a5298 100%); color: white; text-align: center;"
_LABEL_CELL = "padding: 8px; border: 1px solid #ddd; background: {bg};"
_VALUE_CELL = "padding: 8px; border: 1px solid #ddd;"
_TABLE = "width: 100%; border-collapse: collapse; margin-bottom: 20px;"


def _text(value, placeholder: str) -> str:
    """Escape a submitted value, or return the placeholder when it is empty."""
    if value is None or value == "":
        return placeholder
    return escape(str(value))


def _inr(amount) -> str:
    return f"{format_inr(amount)} INR"


def _row(label: str, value: str, label_bg: str = "#f8f9fa") -> str:
    return (
        f'<tr><td style="{_LABEL_CELL.format(bg=label_bg)}"><strong>{label}:</strong></td>'
        f'<td style="{_VALUE_CELL}">{value}</td></tr>'
    )


def default_designation(constitution: str | None) -> str:
    """Designation shown when the client did not name one."""
    return "Individual" if constitution == "Individual" else "Authorized Signatory"


# =============================================================================
# Subjects
# =============================================================================

def business_subject(submission: ApplicationSubmission, brand: BrandContactInfo) -> str:
    """Subject for the operator notification, with client and payment."""
    return (
        f"🎯 New {brand.name} Application - {submission.client_name}"
        f" - ₹{format_inr(submission.current_payment)}"
    )


def client_subject(brand: BrandContactInfo) -> str:
    """Fixed subject for the client confirmation."""
    return f"Consulting Agreement Confirmation – {brand.name}"


# =============================================================================
# Business Notification
# =============================================================================

def _signatory_section(submission: ApplicationSubmission) -> str:
    if not submission.signatory_name:
        return ""
    rows = "".join([
        _row("Name", _text(submission.signatory_name, "")),
        _row("Designation", _text(submission.designation, "Not specified")),
        _row("PAN", _text(submission.signatory_pan, "Not provided")),
    ])
    return f"""
                <h2 style="color: #1e3c72;">✍️ AUTHORIZED SIGNATORY</h2>
                <table style="{_TABLE}">{rows}</table>
    """


def render_business_document(
    submission: ApplicationSubmission,
    fees: FeeBreakdown,
    *,
    brand: BrandContactInfo,
    today: str,
    now_iso: str,
) -> str:
    """
    Render the internal notification for operations staff.

    Args:
        submission: Validated submission
        fees: Fee breakdown to list
        brand: Brand strings
        today: Formatted processing date shown in the header
        now_iso: Fallback when the browser sent no submissionTimestamp

    Returns:
        HTML body
    """
    client_rows = "".join([
        _row("Name", _text(submission.client_name, "")),
        _row("Email", _text(submission.client_email, "")),
        _row("Phone", _text(submission.client_phone, "")),
        _row("Constitution", _text(submission.constitution, "Not specified")),
        _row("PAN", _text(submission.client_pan, "Not provided")),
        _row("Address", _text(submission.client_address, "Not provided")),
    ])

    fee_rows = "".join([
        _row("Total Service Fee", f"<strong>{_inr(submission.total_fee)}</strong>"),
        _row("Initial Processing Fee", _inr(fees.initiation_amount), label_bg="#e8f5e8"),
        _row("Sanction/Confirmation Fee", _inr(fees.confirmation_amount)),
        _row("Final Service Fee", _inr(fees.balance_amount)),
        f'<tr style="background: #fff3cd;"><td style="{_VALUE_CELL}"><strong>💳 CURRENT PAYMENT:</strong></td>'
        f'<td style="{_VALUE_CELL}"><strong style="color: #856404;">{_inr(submission.current_payment)}</strong></td></tr>',
    ])

    provider = escape(brand.payment_provider)

    return f"""
        <div style="font-family: Arial, sans-serif; max-width: 800px; margin: 0 auto;">
            <div style="{_HEADER_STYLE} padding: 20px;">
                <h1 style="margin: 0;">🎯 NEW {escape(brand.name.upper())} APPLICATION</h1>
                <p style="margin: 10px 0 0 0;">Application received on {today}</p>
            </div>

            <div style="padding: 20px; background: white;">
                <h2 style="color: #1e3c72;">👤 CLIENT DETAILS</h2>
                <table style="{_TABLE}">{client_rows}</table>
                {_signatory_section(submission)}
                <h2 style="color: #1e3c72;">💰 FINANCIAL DETAILS</h2>
                <table style="{_TABLE}">{fee_rows}</table>

                <h2 style="color: #1e3c72;">📋 SERVICE DETAILS</h2>
                <ul style="background: #f8f9fa; padding: 15px; border-radius: 5px;">
                    <li><strong>Service Date:</strong> {_text(submission.service_date, "Not specified")}</li>
                    <li><strong>Case Reference:</strong> {_text(submission.case_reference, "None")}</li>
                    <li><strong>Additional Notes:</strong> {_text(submission.additional_notes, "None")}</li>
                </ul>

                <div style="background: #d4edda; padding: 15px; border-radius: 8px; border-left: 4px solid #28a745;">
                    <h3 style="color: #155724; margin-top: 0;">🚀 NEXT STEPS</h3>
                    <ul style="color: #155724; margin-bottom: 0;">
                        <li>Client is being redirected to {provider} for payment</li>
                        <li>Monitor payment status in {provider} dashboard</li>
                        <li>Send signed agreement copy after payment confirmation</li>
                        <li>Initiate service delivery process</li>
                    </ul>
                </div>

                <div style="margin-top: 20px; padding: 15px; background: #f8f9fa; border-radius: 5px; font-size: 0.9em; color: #666;">
                    <p><strong>Submission Details:</strong></p>
                    <p>Time: {_text(submission.submission_timestamp, now_iso)}<br>
                    User Agent: {_text(submission.user_agent, "Not available")}</p>
                </div>
            </div>
        </div>
    """


# =============================================================================
# Client Confirmation
# =============================================================================

def render_client_document(
    submission: ApplicationSubmission,
    fees: FeeBreakdown,
    *,
    brand: BrandContactInfo,
    today: str,
) -> str:
    """Render the agreement confirmation sent to the client."""
    client_name = _text(submission.client_name, "")
    signatory = _text(submission.signatory_name, client_name)
    designation = _text(submission.designation, default_designation(submission.constitution))
    services = "".join(f"<li>{escape(service)}</li>" for service in SERVICES_OFFERED)

    return f"""
        <div style="max-width: 600px; margin: 0 auto; font-family: Arial, sans-serif;">
            <div style="{_HEADER_STYLE} padding: 30px;">
                <h1 style="margin: 0; font-size: 28px;">{escape(brand.name)}</h1>
                <p style="margin: 10px 0 0 0; opacity: 0.9;">Consulting Agreement Confirmation</p>
            </div>

            <div style="padding: 30px; background: white;">
                <h2 style="color: #1e3c72;">Dear {client_name},</h2>

                <p>Thank you for engaging with <strong>{escape(brand.legal_name)} ({escape(brand.name)})</strong>.</p>

                <p>Please find below the Consulting Agreement details executed on <strong>{today}</strong>, covering the scope of services and fees as agreed. Your payment for the initial processing fee is being processed.</p>

                <div style="background: #f8f9fa; padding: 20px; border-radius: 8px; margin: 20px 0;">
                    <h3 style="color: #1e3c72; margin-top: 0;">📋 AGREEMENT DETAILS</h3>
                    <table style="width: 100%;">
                        <tr><td style="padding: 5px 0;"><strong>Client Name:</strong></td><td>{client_name}</td></tr>
                        <tr><td style="padding: 5px 0;"><strong>Constitution:</strong></td><td>{_text(submission.constitution, "Not specified")}</td></tr>
                        <tr><td style="padding: 5px 0;"><strong>Authorized Signatory:</strong></td><td>{signatory}, {designation}</td></tr>
                        <tr><td style="padding: 5px 0;"><strong>Agreement Date:</strong></td><td>{today}</td></tr>
                    </table>
                </div>

                <div style="background: #e8f5e8; padding: 20px; border-radius: 8px; margin: 20px 0;">
                    <h3 style="color: #1e3c72; margin-top: 0;">💰 SERVICE FEES BREAKDOWN</h3>
                    <table style="width: 100%;">
                        <tr><td style="padding: 5px 0;"><strong>Total Service Fee:</strong></td><td><strong>{_inr(submission.total_fee)}</strong></td></tr>
                        <tr><td style="padding: 5px 0;">Initial Processing Fee:</td><td>{_inr(fees.initiation_amount)}</td></tr>
                        <tr><td style="padding: 5px 0;">Sanction/Confirmation Fee:</td><td>{_inr(fees.confirmation_amount)}</td></tr>
                        <tr><td style="padding: 5px 0;">Final Service Fee:</td><td>{_inr(fees.balance_amount)}</td></tr>
                    </table>
                </div>

                <div style="background: #fff3cd; padding: 20px; border-radius: 8px; margin: 20px 0;">
                    <h3 style="color: #856404; margin-top: 0;">🏢 SERVICES INCLUDED</h3>
                    <ol style="color: #856404; margin: 0; padding-left: 20px;">{services}</ol>
                </div>

                <p><strong>Please retain this agreement for your records.</strong> The final signed physical copy will be shared after execution.</p>

                <hr style="margin: 30px 0;">

                <div style="text-align: center; color: #666;">
                    <p><strong>For any queries, contact us at:</strong></p>
                    <p>📧 Email: {escape(brand.email)}<br>
                    🌐 Website: {escape(brand.website)}<br>
                    📍 Address: {escape(brand.address)}</p>
                </div>

                <div style="background: #1e3c72; color: white; padding: 20px; border-radius: 8px; text-align: center; margin: 30px 0;">
                    <p style="margin: 0;"><strong>Best regards,</strong><br>
                    <strong>{escape(brand.name)} Team</strong><br>
                    {escape(brand.legal_name)}</p>
                </div>
            </div>
        </div>
    """
