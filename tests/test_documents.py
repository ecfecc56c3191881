# =============================================================================
# tests/test_documents.py - Email Rendering Tests
# =============================================================================
# The renderers are pure functions, so these tests check the HTML directly.
# =============================================================================

import pytest

from core.models.application import ApplicationSubmission
from core.models.config import BrandContactInfo
from core.services.documents import (
    SERVICES_OFFERED,
    business_subject,
    client_subject,
    default_designation,
    render_business_document,
    render_client_document,
)
from core.services.fee_calculator import derive_fee_breakdown

TODAY = "19/10/2026"
NOW_ISO = "2026-10-19T06:30:00.000Z"


@pytest.fixture
def brand():
    return BrandContactInfo()


def _render_business(payload, brand):
    submission = ApplicationSubmission.model_validate(payload)
    fees = derive_fee_breakdown(submission)
    return render_business_document(submission, fees, brand=brand, today=TODAY, now_iso=NOW_ISO)


def _render_client(payload, brand):
    submission = ApplicationSubmission.model_validate(payload)
    fees = derive_fee_breakdown(submission)
    return render_client_document(submission, fees, brand=brand, today=TODAY)


# =============================================================================
# Business Notification
# =============================================================================

class TestBusinessDocument:
    """Tests for render_business_document."""

    def test_client_details_present(self, valid_payload, brand):
        html = _render_business(valid_payload, brand)

        assert "Test User" in html
        assert "t@example.com" in html
        assert "9999999999" in html
        assert f"Application received on {TODAY}" in html

    def test_missing_optional_fields_use_placeholders(self, valid_payload, brand):
        html = _render_business(valid_payload, brand)

        assert "<strong>Constitution:</strong></td><td" in html
        assert "Not specified" in html
        assert "Not provided" in html
        assert "<strong>Case Reference:</strong> None" in html
        assert "<strong>Additional Notes:</strong> None" in html
        assert "User Agent: Not available" in html
        assert f"Time: {NOW_ISO}" in html
        assert "undefined" not in html

    def test_signatory_section_omitted_without_name(self, valid_payload, brand):
        html = _render_business(valid_payload, brand)
        assert "AUTHORIZED SIGNATORY" not in html

    def test_signatory_section_rendered_with_name(self, full_payload, brand):
        html = _render_business(full_payload, brand)

        assert "AUTHORIZED SIGNATORY" in html
        assert "Asha Rao" in html
        assert "Director" in html
        assert "PQRST6789K" in html

    def test_signatory_placeholders(self, valid_payload, brand):
        html = _render_business({**valid_payload, "signatoryName": "Asha Rao"}, brand)

        section = html.split("AUTHORIZED SIGNATORY")[1].split("FINANCIAL DETAILS")[0]
        assert "Not specified" in section
        assert "Not provided" in section

    def test_financial_lines(self, valid_payload, brand):
        html = _render_business({**valid_payload, "totalFee": 100000}, brand)

        assert "1,00,000 INR" in html
        assert "10,000 INR" in html
        assert "20,000 INR" in html
        assert "70,000 INR" in html
        assert "CURRENT PAYMENT" in html
        assert "5,000 INR" in html

    def test_service_details_and_metadata(self, full_payload, brand):
        html = _render_business(full_payload, brand)

        assert "<strong>Service Date:</strong> 2026-10-20" in html
        assert "CASE-42" in html
        assert "Prefers calls after 5pm" in html
        assert "Time: 2026-10-19T06:30:00.000Z" in html
        assert "Mozilla/5.0 (Test)" in html

    def test_next_steps_checklist(self, valid_payload, brand):
        html = _render_business(valid_payload, brand)

        assert "redirected to Cashfree for payment" in html
        assert "Monitor payment status in Cashfree dashboard" in html
        assert "Send signed agreement copy after payment confirmation" in html
        assert "Initiate service delivery process" in html

    def test_submitted_text_is_escaped(self, valid_payload, brand):
        html = _render_business({**valid_payload, "additionalNotes": "<script>x</script>"}, brand)

        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_subject(self, valid_payload, brand):
        submission = ApplicationSubmission.model_validate({**valid_payload, "currentPayment": 150000})
        assert business_subject(submission, brand) == "🎯 New SolveDet Application - Test User - ₹1,50,000"


# =============================================================================
# Client Confirmation
# =============================================================================

class TestClientDocument:
    """Tests for render_client_document."""

    def test_greeting_and_entity(self, valid_payload, brand):
        html = _render_client(valid_payload, brand)

        assert "Dear Test User," in html
        assert "Novasolventia Services Private Limited (SolveDet)" in html
        assert f"<strong>{TODAY}</strong>" in html

    def test_signatory_falls_back_to_client_for_individual(self, valid_payload, brand):
        html = _render_client({**valid_payload, "constitution": "Individual"}, brand)
        assert "<td>Test User, Individual</td>" in html

    def test_signatory_falls_back_to_authorized_signatory(self, valid_payload, brand):
        html = _render_client({**valid_payload, "constitution": "Partnership Firm"}, brand)
        assert "<td>Test User, Authorized Signatory</td>" in html

    def test_signatory_named(self, full_payload, brand):
        html = _render_client(full_payload, brand)
        assert "<td>Asha Rao, Director</td>" in html

    def test_fee_breakdown(self, valid_payload, brand):
        html = _render_client(valid_payload, brand)

        assert "50,000 INR" in html
        assert "5,000 INR" in html
        assert "10,000 INR" in html
        assert "35,000 INR" in html

    def test_lists_all_services(self, valid_payload, brand):
        html = _render_client(valid_payload, brand)

        assert len(SERVICES_OFFERED) == 8
        for service in SERVICES_OFFERED:
            assert service in html

    def test_contact_block(self, valid_payload, brand):
        html = _render_client(valid_payload, brand)

        assert "Email: info@solvedet.com" in html
        assert "Website: www.solvedet.com" in html
        assert "Andheri East, Mumbai" in html
        assert "SolveDet Team" in html

    def test_subject_is_fixed(self, brand):
        assert client_subject(brand) == "Consulting Agreement Confirmation – SolveDet"


class TestDefaultDesignation:
    """Tests for default_designation."""

    def test_individual(self):
        assert default_designation("Individual") == "Individual"

    @pytest.mark.parametrize("constitution", [None, "", "LLP", "individual"])
    def test_everything_else(self, constitution):
        assert default_designation(constitution) == "Authorized Signatory"
