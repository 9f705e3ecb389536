"""Masking helpers shared by the redaction strategies."""
from __future__ import annotations

import regex

_NON_SPACE = regex.compile(r"\S")


def mask_value(value: str, mask_char: str = "*") -> str:
    if not value:
        return value
    return mask_char * len(value)


def mask_non_whitespace(value: str, mask_char: str = "*") -> str:
    return _NON_SPACE.sub(mask_char, value)


def strip_chars(value: str, pattern: str) -> str:
    """Remove every character matching the character class ``pattern``."""
    return regex.sub(pattern, "", value)
