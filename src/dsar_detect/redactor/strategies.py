"""Format-preserving redaction strategies, one per PII shape.

Every strategy reveals at most a short prefix and/or suffix so a reviewer can
recognise the type of value without being able to reconstruct it. Values that
are not longer than the kept budget are masked completely.
"""
from __future__ import annotations

import regex

from ..utils.checks import mask_non_whitespace, mask_value, strip_chars

_WHITESPACE = r"\s+"
_CARD_SEPARATORS = r"[\s-]"
_TAX_ID_SEPARATORS = r"[\s/.-]"
_DAY_FIRST_DATE = regex.compile(r"(\d{1,2})([./-])(\d{1,2})([./-])(\d{4})")
_YEAR_FIRST_DATE = regex.compile(r"(\d{4})([./-])(\d{1,2})([./-])(\d{1,2})")
_EMAIL_FALLBACK = "***@***.***"


def mask_middle(value: str, keep_start: int = 2, keep_end: int = 2) -> str:
    """Keep ``keep_start`` leading and ``keep_end`` trailing characters.

    Whitespace inside the masked region is preserved so that grouped values
    (``+49 170 1234567``) keep their shape.
    """

    trimmed = value.strip()
    length = len(trimmed)
    if length <= keep_start + keep_end:
        return mask_value(trimmed)
    start = trimmed[:keep_start]
    end = trimmed[length - keep_end :]
    middle = trimmed[keep_start : length - keep_end]
    return f"{start}{mask_non_whitespace(middle)}{end}"


def redact_generic(match: str) -> str:
    return mask_middle(match)


def redact_iban(match: str) -> str:
    clean = strip_chars(match, _WHITESPACE)
    if len(clean) <= 6:
        return mask_value(clean)
    return f"{clean[:2]}{mask_value(clean[2:-4])}{clean[-4:]}"


def redact_credit_card(match: str) -> str:
    digits = strip_chars(match, _CARD_SEPARATORS)
    if len(digits) <= 8:
        return mask_value(digits)
    return f"{digits[:4]} {mask_value(digits[4:-4])} {digits[-4:]}"


def redact_email(match: str) -> str:
    local, sep, domain = match.partition("@")
    if not local or not sep or not domain:
        return _EMAIL_FALLBACK
    if len(local) == 1:
        return f"*@{domain}"
    return f"{local[0]}{mask_value(local[1:])}@{domain}"


def redact_phone(match: str) -> str:
    return mask_middle(match, 4, 2)


def redact_tax_id(match: str) -> str:
    digits = strip_chars(match, _TAX_ID_SEPARATORS)
    if len(digits) <= 4:
        return mask_value(digits)
    return f"{digits[:2]}{mask_value(digits[2:-2])}{digits[-2:]}"


def redact_ssn(match: str) -> str:
    digits = strip_chars(match, _CARD_SEPARATORS)
    if len(digits) <= 4:
        return mask_value(digits)
    return f"{mask_value(digits[:-4])}{digits[-4:]}"


def redact_passport(match: str) -> str:
    return mask_middle(match, 1, 2)


def redact_date_of_birth(match: str) -> str:
    """Keep the four-digit year, mask day and month digits in place."""

    value = match.strip()
    day_first = _DAY_FIRST_DATE.fullmatch(value)
    if day_first:
        day, sep1, month, sep2, year = day_first.groups()
        return f"{mask_value(day)}{sep1}{mask_value(month)}{sep2}{year}"
    year_first = _YEAR_FIRST_DATE.fullmatch(value)
    if year_first:
        year, sep1, month, sep2, day = year_first.groups()
        return f"{year}{sep1}{mask_value(month)}{sep2}{mask_value(day)}"
    return mask_middle(value, 0, 4)


def redact_keyword(match: str) -> str:
    # Keywords carry topical sensitivity only, never personal data.
    return f"[{match.strip().lower()}]"


__all__ = [
    "mask_middle",
    "redact_generic",
    "redact_iban",
    "redact_credit_card",
    "redact_email",
    "redact_phone",
    "redact_tax_id",
    "redact_ssn",
    "redact_passport",
    "redact_date_of_birth",
    "redact_keyword",
]
