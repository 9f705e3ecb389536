"""Sensitive-content detection and classification for DSAR case work."""
from .models import ConfidenceLevel, DataCategory, DetectionPattern, DetectionResult, DetectorKind
from .scanner import (
    classify_findings,
    detect_art9,
    detect_pii,
    get_special_category_subtypes,
    has_special_category_content,
    run_all_detectors,
)
from .version import __version__

__all__ = [
    "ConfidenceLevel",
    "DataCategory",
    "DetectionPattern",
    "DetectionResult",
    "DetectorKind",
    "classify_findings",
    "detect_art9",
    "detect_pii",
    "get_special_category_subtypes",
    "has_special_category_content",
    "run_all_detectors",
    "__version__",
]
