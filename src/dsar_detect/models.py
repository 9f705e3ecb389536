"""Shared domain models used across the detection engine."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional

import regex


class DataCategory(str, Enum):
    IDENTIFICATION = "IDENTIFICATION"
    CONTACT = "CONTACT"
    CONTRACT = "CONTRACT"
    PAYMENT_BANK = "PAYMENT_BANK"
    COMMUNICATION = "COMMUNICATION"
    HR_EMPLOYMENT = "HR_EMPLOYMENT"
    CREDIT_FINANCIAL = "CREDIT_FINANCIAL"
    ONLINE_TECHNICAL = "ONLINE_TECHNICAL"
    SPECIAL_CATEGORY_ART9 = "SPECIAL_CATEGORY_ART9"


class DetectorKind(str, Enum):
    REGEX = "REGEX"
    KEYWORD = "KEYWORD"


class ConfidenceLevel(str, Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"

    @classmethod
    def from_score(cls, confidence: float) -> "ConfidenceLevel":
        if confidence >= 0.85:
            return cls.HIGH
        if confidence >= 0.70:
            return cls.MEDIUM
        return cls.LOW


@dataclass(frozen=True, slots=True)
class DetectionPattern:
    """A registry entry pairing a matcher with a category and a redactor.

    ``matcher`` is compiled once at startup and never carries scan state; the
    scan cursor lives in the executor call that uses it.
    """

    name: str
    kind: DetectorKind
    matcher: regex.Pattern[str]
    category: DataCategory
    redact: Callable[[str], str]
    is_special_category: bool = False
    special_category_subtype: Optional[str] = None

    def __post_init__(self) -> None:
        if self.is_special_category and not self.special_category_subtype:
            raise ValueError(f"Special-category pattern {self.name} needs a subtype")
        if not self.is_special_category and self.special_category_subtype is not None:
            raise ValueError(f"Pattern {self.name} is not special-category but has a subtype")


@dataclass(frozen=True, slots=True)
class DetectionResult:
    pattern_name: str
    detector_kind: DetectorKind
    match_count: int
    sample_match: Optional[str]
    confidence: float
    category: DataCategory
    is_special_category: bool = False
    special_category_subtype: Optional[str] = None

    @property
    def confidence_level(self) -> ConfidenceLevel:
        return ConfidenceLevel.from_score(self.confidence)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pattern_name": self.pattern_name,
            "detector_kind": self.detector_kind.value,
            "match_count": self.match_count,
            "sample_match": self.sample_match,
            "confidence": self.confidence,
            "confidence_level": self.confidence_level.value,
            "category": self.category.value,
            "is_special_category": self.is_special_category,
            "special_category_subtype": self.special_category_subtype,
        }
