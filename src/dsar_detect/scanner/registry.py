"""Pattern registry holding the detectable PII shapes and keyword sets."""
from __future__ import annotations

from typing import Callable, Dict, Iterable, Iterator, List, Mapping

import regex

from ..models import DataCategory, DetectionPattern, DetectorKind
from ..redactor.strategies import redact_generic, redact_keyword


class PatternCompileError(ValueError):
    """Raised when a pattern definition cannot be compiled."""


def compile_pattern(name: str, source: str, flags: int = 0) -> regex.Pattern[str]:
    try:
        # \b and \d follow ASCII word rules, so PII next to umlauts still matches.
        return regex.compile(source, flags | regex.ASCII)
    except regex.error as exc:
        raise PatternCompileError(f"Invalid pattern for {name}: {exc}") from exc


def build_keyword_pattern(name: str, keywords: Iterable[str]) -> regex.Pattern[str]:
    """Compile one case-insensitive whole-word alternation for ``keywords``."""

    escaped = [regex.escape(keyword.strip()) for keyword in keywords if keyword.strip()]
    if not escaped:
        raise PatternCompileError(f"Keyword pattern {name} has no keywords")
    return compile_pattern(name, rf"\b(?:{'|'.join(escaped)})\b", regex.IGNORECASE)


class PatternRegistry:
    """Ordered registry of detection patterns.

    Iteration order is registration order, which is also the order results
    are reported in before confidence sorting.
    """

    def __init__(self) -> None:
        self._patterns: Dict[str, DetectionPattern] = {}

    def register(self, pattern: DetectionPattern, override: bool = False) -> None:
        if not override and pattern.name in self._patterns:
            raise ValueError(f"Pattern already registered: {pattern.name}")
        self._patterns[pattern.name] = pattern

    def register_regex(
        self,
        name: str,
        source: str,
        category: DataCategory,
        *,
        redact: Callable[[str], str] = redact_generic,
        flags: int = 0,
        override: bool = False,
    ) -> DetectionPattern:
        pattern = DetectionPattern(
            name=name,
            kind=DetectorKind.REGEX,
            matcher=compile_pattern(name, source, flags),
            category=category,
            redact=redact,
        )
        self.register(pattern, override=override)
        return pattern

    def register_keywords(
        self,
        name: str,
        keywords: Iterable[str],
        *,
        subtype: str,
        category: DataCategory = DataCategory.SPECIAL_CATEGORY_ART9,
        override: bool = False,
    ) -> DetectionPattern:
        pattern = DetectionPattern(
            name=name,
            kind=DetectorKind.KEYWORD,
            matcher=build_keyword_pattern(name, keywords),
            category=category,
            redact=redact_keyword,
            is_special_category=True,
            special_category_subtype=subtype,
        )
        self.register(pattern, override=override)
        return pattern

    def unregister(self, name: str) -> None:
        self._patterns.pop(name, None)

    def get(self, name: str) -> DetectionPattern:
        try:
            return self._patterns[name]
        except KeyError as exc:
            raise KeyError(f"Unknown pattern: {name}") from exc

    def all(self) -> Mapping[str, DetectionPattern]:
        return dict(self._patterns)

    def pii(self) -> List[DetectionPattern]:
        return [pattern for pattern in self._patterns.values() if not pattern.is_special_category]

    def special(self) -> List[DetectionPattern]:
        return [pattern for pattern in self._patterns.values() if pattern.is_special_category]

    def iter_matching(self, selector: str) -> Iterator[DetectionPattern]:
        if selector.endswith("*"):
            prefix = selector[:-1]
            for name, pattern in self._patterns.items():
                if name.startswith(prefix):
                    yield pattern
        else:
            yield self.get(selector)

    def clear(self) -> None:
        self._patterns.clear()

    def __len__(self) -> int:
        return len(self._patterns)

    def __contains__(self, name: object) -> bool:
        return name in self._patterns


_DEFAULT_REGISTRY: PatternRegistry | None = None


def default_registry() -> PatternRegistry:
    """Return the built-in registry, compiling it on first use."""

    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        from .keywords import load_special_category_patterns
        from .patterns import load_builtin_patterns

        registry = PatternRegistry()
        load_builtin_patterns(registry)
        load_special_category_patterns(registry)
        _DEFAULT_REGISTRY = registry
    return _DEFAULT_REGISTRY


__all__ = [
    "PatternCompileError",
    "PatternRegistry",
    "build_keyword_pattern",
    "compile_pattern",
    "default_registry",
]
