"""Redaction suggestions prepared for human review.

Suggestions are never applied automatically. Each one carries the masked
sample produced during detection and starts in ``SUGGESTED`` status until a
reviewer with an authorised role approves or rejects it.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional

from ..models import ConfidenceLevel, DetectionResult

SPECIAL_CATEGORY_PREFIX = "ART9_"
THIRD_PARTY_PREFIX = "THIRD_PARTY_"

_DEFAULT_LABEL = "[REDACTED]"
_SPECIAL_CATEGORY_LABEL = "[REDACTED SPECIAL CATEGORY DATA]"

_LABELS: Dict[str, str] = {
    "EMAIL_ADDRESS": "[REDACTED EMAIL]",
    "PHONE_EU_INTERNATIONAL": "[REDACTED PHONE]",
    "PHONE_DE": "[REDACTED PHONE]",
    "PHONE_AT": "[REDACTED PHONE]",
    "PHONE_CH": "[REDACTED PHONE]",
    "IBAN_DE": "[REDACTED IBAN]",
    "IBAN_AT": "[REDACTED IBAN]",
    "IBAN_CH": "[REDACTED IBAN]",
    "IBAN_EU_GENERIC": "[REDACTED IBAN]",
    "CREDIT_CARD_VISA": "[REDACTED CREDIT CARD]",
    "CREDIT_CARD_MASTERCARD": "[REDACTED CREDIT CARD]",
    "CREDIT_CARD_AMEX": "[REDACTED CREDIT CARD]",
    "TAX_ID_DE": "[REDACTED TAX ID]",
    "SSN_DE": "[REDACTED SSN]",
    "SSN_AT": "[REDACTED SSN]",
    "SSN_GENERIC": "[REDACTED SSN]",
    "PASSPORT_DE": "[REDACTED PASSPORT]",
    "PASSPORT_AT": "[REDACTED PASSPORT]",
    "PASSPORT_GENERIC": "[REDACTED ID DOCUMENT]",
    "DOB_EU_FORMAT": "[REDACTED DATE OF BIRTH]",
    "DOB_ISO_FORMAT": "[REDACTED DATE OF BIRTH]",
}

REVIEWER_ROLES = frozenset({"DPO", "TENANT_ADMIN", "SUPER_ADMIN"})


class SuggestionStatus(str, Enum):
    SUGGESTED = "SUGGESTED"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


@dataclass(frozen=True, slots=True)
class RedactionSuggestion:
    element_type: str
    masked_snippet: str
    suggested_redaction: str
    reason: str
    evidence_item_id: Optional[str] = None
    status: SuggestionStatus = SuggestionStatus.SUGGESTED


@dataclass(frozen=True, slots=True)
class RedactionReview:
    suggestion_id: str
    status: str
    reviewer_user_id: str
    reviewer_role: str
    review_note: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ReviewDecision:
    allowed: bool
    reason: Optional[str] = None
    code: Optional[str] = None


def get_redaction_label(pattern_name: str) -> str:
    if pattern_name.startswith(SPECIAL_CATEGORY_PREFIX):
        return _SPECIAL_CATEGORY_LABEL
    return _LABELS.get(pattern_name, _DEFAULT_LABEL)


def redaction_reason(pattern_name: str, confidence_level: ConfidenceLevel | str) -> str:
    level = confidence_level.value if isinstance(confidence_level, ConfidenceLevel) else confidence_level
    if pattern_name.startswith(SPECIAL_CATEGORY_PREFIX):
        return (
            f"Art. 9 special category data detected ({level} confidence). "
            "Redaction strongly recommended unless explicit legal basis for disclosure exists."
        )
    if pattern_name.startswith(THIRD_PARTY_PREFIX):
        return (
            f"Third-party personal data detected ({level} confidence). "
            "Redaction required unless the third party has consented to disclosure."
        )
    return (
        f"Personal data element ({pattern_name}) detected with {level} confidence. "
        "Review for potential redaction in DSAR response to protect third-party rights."
    )


def generate_redaction_suggestions(
    results: Iterable[DetectionResult],
    evidence_item_id: str | None = None,
) -> List[RedactionSuggestion]:
    suggestions: List[RedactionSuggestion] = []
    for result in results:
        if not result.sample_match:
            continue
        suggestions.append(
            RedactionSuggestion(
                element_type=result.pattern_name,
                masked_snippet=result.sample_match,
                suggested_redaction=get_redaction_label(result.pattern_name),
                reason=redaction_reason(result.pattern_name, result.confidence_level),
                evidence_item_id=evidence_item_id,
            )
        )
    return suggestions


def can_review_redaction(role: str) -> bool:
    return role in REVIEWER_ROLES


def validate_redaction_review(review: RedactionReview) -> ReviewDecision:
    if not can_review_redaction(review.reviewer_role):
        return ReviewDecision(
            allowed=False,
            reason=(
                f"Role '{review.reviewer_role}' does not have permission to review "
                "redaction suggestions."
            ),
            code="REDACTION_REVIEW_FORBIDDEN",
        )
    if review.status not in (SuggestionStatus.APPROVED.value, SuggestionStatus.REJECTED.value):
        return ReviewDecision(
            allowed=False,
            reason="Redaction review status must be 'APPROVED' or 'REJECTED'.",
            code="INVALID_REDACTION_STATUS",
        )
    return ReviewDecision(allowed=True)


__all__ = [
    "SuggestionStatus",
    "RedactionSuggestion",
    "RedactionReview",
    "ReviewDecision",
    "REVIEWER_ROLES",
    "get_redaction_label",
    "redaction_reason",
    "generate_redaction_suggestions",
    "can_review_redaction",
    "validate_redaction_review",
]
