"""Utility exports."""
from .checks import mask_non_whitespace, mask_value, strip_chars
from .text import is_scannable, to_text, truncate

__all__ = [
    "mask_value",
    "mask_non_whitespace",
    "strip_chars",
    "is_scannable",
    "to_text",
    "truncate",
]
