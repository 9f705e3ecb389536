"""Scanner package exports."""
from .engine import (
    Scanner,
    ScannerConfig,
    classify_findings,
    compute_confidence,
    detect_art9,
    detect_pii,
    get_special_category_subtypes,
    has_special_category_content,
    run_all_detectors,
    run_pattern,
    scan_text,
)
from .findings import Finding, Severity, summarize_findings
from .registry import PatternCompileError, PatternRegistry, default_registry

__all__ = [
    "Scanner",
    "ScannerConfig",
    "classify_findings",
    "compute_confidence",
    "detect_art9",
    "detect_pii",
    "get_special_category_subtypes",
    "has_special_category_content",
    "run_all_detectors",
    "run_pattern",
    "scan_text",
    "Finding",
    "Severity",
    "summarize_findings",
    "PatternCompileError",
    "PatternRegistry",
    "default_registry",
]
