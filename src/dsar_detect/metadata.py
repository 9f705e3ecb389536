"""Lightweight PDF Info-dictionary extraction.

This scans the raw bytes of a PDF for the standard document-information keys
without a full PDF parser. It is best-effort: encrypted, compressed or
linearised object streams are not decoded, and malformed input simply yields
empty fields.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

import regex

INFO_KEYS = ("Title", "Author", "Subject", "Creator", "Producer", "CreationDate", "ModDate")

_PAGE_PATTERN = regex.compile(r"/Type\s*/Page(?!s)\b")
_UTF16_BOM = "FEFF"


@dataclass(slots=True)
class PdfMetadata:
    title: Optional[str] = None
    author: Optional[str] = None
    subject: Optional[str] = None
    creator: Optional[str] = None
    producer: Optional[str] = None
    creation_date: Optional[str] = None
    mod_date: Optional[str] = None
    page_count: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _literal_pattern(key: str) -> regex.Pattern[str]:
    return regex.compile(rf"/{key}\s*\(([^)]{{0,512}})\)", regex.IGNORECASE)


def _hex_pattern(key: str) -> regex.Pattern[str]:
    return regex.compile(rf"/{key}\s*<([0-9A-Fa-f]{{2,1024}})>", regex.IGNORECASE)


_LITERALS = {key: _literal_pattern(key) for key in INFO_KEYS}
_HEX_STRINGS = {key: _hex_pattern(key) for key in INFO_KEYS}


def _decode_utf16_hex(value: str) -> Optional[str]:
    clean = value[4:] if value.upper().startswith(_UTF16_BOM) else value
    raw = bytes.fromhex(clean[: len(clean) // 4 * 4])
    decoded = raw.decode("utf-16-be", errors="replace").replace("\x00", "").strip()
    return decoded or None


def _extract(raw: str, key: str) -> Optional[str]:
    literal = _LITERALS[key].search(raw)
    if literal:
        return literal.group(1).strip()
    hex_string = _HEX_STRINGS[key].search(raw)
    if hex_string:
        return _decode_utf16_hex(hex_string.group(1))
    return None


def extract_pdf_metadata(data: bytes) -> PdfMetadata:
    raw = data.decode("latin-1")
    pages = len(_PAGE_PATTERN.findall(raw))
    return PdfMetadata(
        title=_extract(raw, "Title"),
        author=_extract(raw, "Author"),
        subject=_extract(raw, "Subject"),
        creator=_extract(raw, "Creator"),
        producer=_extract(raw, "Producer"),
        creation_date=_extract(raw, "CreationDate"),
        mod_date=_extract(raw, "ModDate"),
        page_count=pages or None,
    )


__all__ = ["INFO_KEYS", "PdfMetadata", "extract_pdf_metadata"]
