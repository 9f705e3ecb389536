"""Text normalization helpers shared across modules."""
from __future__ import annotations

from typing import Any


def to_text(data: str | bytes) -> str:
    if isinstance(data, bytes):
        return data.decode("utf-8", errors="replace")
    return data


def is_scannable(value: Any) -> bool:
    """Only non-empty strings are scanned; everything else yields no findings."""
    return isinstance(value, str) and bool(value)


def truncate(text: str, limit: int | None) -> str:
    if limit is None or len(text) <= limit:
        return text
    return text[:limit]


__all__ = ["to_text", "is_scannable", "truncate"]
