"""Redaction package exports."""
from .labels import generate_redaction_suggestions, get_redaction_label, validate_redaction_review
from .strategies import mask_middle

__all__ = [
    "generate_redaction_suggestions",
    "get_redaction_label",
    "validate_redaction_review",
    "mask_middle",
]
