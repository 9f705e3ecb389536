import pytest

from dsar_detect.redactor.labels import (
    RedactionReview,
    SuggestionStatus,
    can_review_redaction,
    generate_redaction_suggestions,
    get_redaction_label,
    redaction_reason,
    validate_redaction_review,
)
from dsar_detect.scanner import run_all_detectors


@pytest.mark.parametrize(
    ("name", "label"),
    [
        ("EMAIL_ADDRESS", "[REDACTED EMAIL]"),
        ("IBAN_EU_GENERIC", "[REDACTED IBAN]"),
        ("PASSPORT_GENERIC", "[REDACTED ID DOCUMENT]"),
        ("ART9_HEALTH_DATA", "[REDACTED SPECIAL CATEGORY DATA]"),
        ("SOMETHING_NEW", "[REDACTED]"),
    ],
)
def test_redaction_labels(name: str, label: str) -> None:
    assert get_redaction_label(name) == label


def test_reasons_distinguish_special_and_third_party():
    assert redaction_reason("ART9_HEALTH_DATA", "HIGH").startswith("Art. 9 special category data detected (HIGH")
    assert redaction_reason("THIRD_PARTY_NAME", "LOW").startswith("Third-party personal data")
    assert "(EMAIL_ADDRESS)" in redaction_reason("EMAIL_ADDRESS", "MEDIUM")


def test_suggestions_carry_masked_snippets_only():
    suggestions = generate_redaction_suggestions(
        run_all_detectors("Email: test@example.com"),
        evidence_item_id="ev-7",
    )
    email = [item for item in suggestions if item.element_type == "EMAIL_ADDRESS"][0]
    assert email.masked_snippet == "t***@example.com"
    assert "test@example.com" not in email.masked_snippet
    assert email.suggested_redaction == "[REDACTED EMAIL]"
    assert email.status is SuggestionStatus.SUGGESTED
    assert email.evidence_item_id == "ev-7"
    assert "MEDIUM confidence" in email.reason


def test_review_requires_authorised_role():
    assert can_review_redaction("DPO")
    assert not can_review_redaction("CASE_MANAGER")
    decision = validate_redaction_review(
        RedactionReview(suggestion_id="s1", status="APPROVED", reviewer_user_id="u1", reviewer_role="CASE_MANAGER")
    )
    assert not decision.allowed
    assert decision.code == "REDACTION_REVIEW_FORBIDDEN"


def test_review_status_must_be_final():
    decision = validate_redaction_review(
        RedactionReview(suggestion_id="s1", status="SUGGESTED", reviewer_user_id="u1", reviewer_role="DPO")
    )
    assert decision.code == "INVALID_REDACTION_STATUS"
    approved = validate_redaction_review(
        RedactionReview(suggestion_id="s1", status="REJECTED", reviewer_user_id="u1", reviewer_role="TENANT_ADMIN")
    )
    assert approved.allowed
    assert approved.code is None
