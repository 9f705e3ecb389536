"""Per-category roll-up of detection results."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List

from ..models import DataCategory, DetectionResult

WARNING_CONFIDENCE = 0.85


class Severity(str, Enum):
    CRITICAL = "CRITICAL"
    WARNING = "WARNING"
    INFO = "INFO"


_SEVERITY_ORDER = {Severity.CRITICAL: 0, Severity.WARNING: 1, Severity.INFO: 2}


@dataclass(frozen=True, slots=True)
class Finding:
    category: DataCategory
    severity: Severity
    confidence: float
    element_count: int
    contains_special_category: bool

    @property
    def requires_legal_review(self) -> bool:
        return self.contains_special_category

    def summary(self) -> str:
        return f"Detected {self.element_count} element(s) of category {self.category.value}."


def summarize_findings(results: Iterable[DetectionResult]) -> List[Finding]:
    grouped: Dict[DataCategory, List[DetectionResult]] = {}
    for result in results:
        grouped.setdefault(result.category, []).append(result)

    findings: List[Finding] = []
    for category, members in grouped.items():
        confidence = max(member.confidence for member in members)
        special = any(member.is_special_category for member in members)
        if special:
            severity = Severity.CRITICAL
        elif confidence >= WARNING_CONFIDENCE:
            severity = Severity.WARNING
        else:
            severity = Severity.INFO
        findings.append(
            Finding(
                category=category,
                severity=severity,
                confidence=confidence,
                element_count=sum(member.match_count for member in members),
                contains_special_category=special,
            )
        )
    findings.sort(key=lambda finding: (_SEVERITY_ORDER[finding.severity], finding.category.value))
    return findings


__all__ = ["Finding", "Severity", "summarize_findings"]
