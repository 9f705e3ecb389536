"""Detection executor and result aggregation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Set

import structlog

from ..models import DataCategory, DetectionPattern, DetectionResult, DetectorKind
from ..utils.text import is_scannable, truncate
from .registry import PatternRegistry, default_registry

logger = structlog.get_logger(__name__)

BASELINE_CONFIDENCE: Mapping[DetectorKind, float] = {
    DetectorKind.REGEX: 0.75,
    DetectorKind.KEYWORD: 0.60,
}
MATCH_BOOST = 0.05
MAX_MATCH_BOOST = 0.20


def compute_confidence(kind: DetectorKind, match_count: int) -> float:
    """Baseline for the pattern kind plus a capped per-match boost."""

    boost = min(match_count * MATCH_BOOST, MAX_MATCH_BOOST)
    return round(min(BASELINE_CONFIDENCE[kind] + boost, 1.0), 2)


def iter_matches(text: str, pattern: DetectionPattern, *, timeout: float | None = None) -> Iterator[str]:
    """Yield every non-overlapping match of ``pattern`` in ``text``.

    The cursor is local to this generator, so concurrent scans sharing a
    pattern never observe each other's position. A zero-width match moves the
    cursor one character forward.
    """

    matcher = pattern.matcher
    position = 0
    length = len(text)
    while position <= length:
        match = matcher.search(text, position, timeout=timeout)
        if match is None:
            return
        yield match.group()
        start, end = match.span()
        position = end if end > start else end + 1


def run_pattern(
    text: str,
    pattern: DetectionPattern,
    *,
    timeout: float | None = None,
) -> Optional[DetectionResult]:
    first: str | None = None
    count = 0
    for value in iter_matches(text, pattern, timeout=timeout):
        if first is None:
            first = value
        count += 1
    if first is None:
        return None
    return DetectionResult(
        pattern_name=pattern.name,
        detector_kind=pattern.kind,
        match_count=count,
        sample_match=pattern.redact(first),
        confidence=compute_confidence(pattern.kind, count),
        category=pattern.category,
        is_special_category=pattern.is_special_category,
        special_category_subtype=pattern.special_category_subtype,
    )


def _run_patterns(text: Any, patterns: Iterable[DetectionPattern]) -> List[DetectionResult]:
    if not is_scannable(text):
        return []
    results: List[DetectionResult] = []
    for pattern in patterns:
        result = run_pattern(text, pattern)
        if result is not None:
            results.append(result)
    return results


def sort_by_confidence(results: Iterable[DetectionResult]) -> List[DetectionResult]:
    # sorted() is stable, ties keep registry order.
    return sorted(results, key=lambda result: result.confidence, reverse=True)


def detect_pii(text: Any, *, registry: PatternRegistry | None = None) -> List[DetectionResult]:
    return _run_patterns(text, (default_registry() if registry is None else registry).pii())


def detect_art9(text: Any, *, registry: PatternRegistry | None = None) -> List[DetectionResult]:
    return _run_patterns(text, (default_registry() if registry is None else registry).special())


def run_all_detectors(text: Any, *, registry: PatternRegistry | None = None) -> List[DetectionResult]:
    return sort_by_confidence(
        detect_pii(text, registry=registry) + detect_art9(text, registry=registry)
    )


def classify_findings(results: Iterable[DetectionResult]) -> Set[DataCategory]:
    return {result.category for result in results}


def has_special_category_content(results: Iterable[DetectionResult]) -> bool:
    return any(result.is_special_category for result in results)


def get_special_category_subtypes(results: Iterable[DetectionResult]) -> Set[str]:
    return {
        result.special_category_subtype
        for result in results
        if result.special_category_subtype is not None
    }


@dataclass(slots=True)
class ScannerConfig:
    enabled: Sequence[str] | None = None
    disabled: Sequence[str] | None = None
    max_scan_chars: int | None = None
    max_items_per_run: int | None = None
    include_special_categories: bool = True
    pattern_timeout: float | None = None


class Scanner:
    """Batch-oriented driver around the detection functions.

    Unlike :func:`run_all_detectors`, a pattern that raises during a scan is
    logged and skipped so one pathological input cannot abort a whole batch.
    """

    def __init__(self, registry: PatternRegistry | None = None, config: ScannerConfig | None = None) -> None:
        self.registry = default_registry() if registry is None else registry
        self.config = config or ScannerConfig()

    def scan(self, text: Any) -> List[DetectionResult]:
        if not is_scannable(text):
            return []
        original_length = len(text)
        text = truncate(text, self.config.max_scan_chars)
        if len(text) < original_length:
            logger.warning("scan.truncated", original_chars=original_length, scanned_chars=len(text))
        results: List[DetectionResult] = []
        for pattern in self._resolve_patterns():
            try:
                result = run_pattern(text, pattern, timeout=self.config.pattern_timeout)
            except Exception:
                logger.exception("scan.pattern_failed", pattern=pattern.name)
                continue
            if result is not None:
                results.append(result)
        logger.debug("scan.complete", results=len(results), chars=len(text))
        return sort_by_confidence(results)

    def scan_batch(self, items: Mapping[str, Any]) -> Dict[str, List[DetectionResult]]:
        limit = self.config.max_items_per_run
        output: Dict[str, List[DetectionResult]] = {}
        for index, (item_id, text) in enumerate(items.items()):
            if limit is not None and index >= limit:
                logger.warning("scan.batch.item_skipped", item=item_id, limit=limit)
                continue
            output[item_id] = self.scan(text)
        return output

    def _resolve_patterns(self) -> Iterator[DetectionPattern]:
        selectors = list(self.config.enabled or self.registry.all().keys())
        disabled = set(self.config.disabled or [])
        seen: Set[str] = set()
        for selector in selectors:
            for pattern in self.registry.iter_matching(selector):
                if pattern.name in seen or pattern.name in disabled:
                    continue
                if pattern.is_special_category and not self.config.include_special_categories:
                    continue
                seen.add(pattern.name)
                yield pattern


def scan_text(
    text: Any,
    *,
    scanner: Scanner | None = None,
    config: ScannerConfig | None = None,
) -> List[DetectionResult]:
    if config is None:
        return (scanner or Scanner()).scan(text)
    registry = scanner.registry if scanner is not None else None
    return Scanner(registry=registry, config=config).scan(text)


# Compile the built-in tables at import so a malformed pattern fails fast.
default_registry()


__all__ = [
    "BASELINE_CONFIDENCE",
    "Scanner",
    "ScannerConfig",
    "classify_findings",
    "compute_confidence",
    "detect_art9",
    "detect_pii",
    "get_special_category_subtypes",
    "has_special_category_content",
    "iter_matches",
    "run_all_detectors",
    "run_pattern",
    "scan_text",
    "sort_by_confidence",
]
