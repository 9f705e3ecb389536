"""Built-in PII patterns: financial, contact and government identifiers."""
from __future__ import annotations

import regex

from ..models import DataCategory
from ..redactor.strategies import (
    redact_credit_card,
    redact_date_of_birth,
    redact_email,
    redact_iban,
    redact_passport,
    redact_phone,
    redact_ssn,
    redact_tax_id,
)
from .registry import PatternRegistry

IBAN_DE_PATTERN = r"\bDE\d{2}\s?\d{4}\s?\d{4}\s?\d{4}\s?\d{4}\s?\d{2}\b"
IBAN_AT_PATTERN = r"\bAT\d{2}\s?\d{4}\s?\d{4}\s?\d{4}\s?\d{4}\b"
IBAN_CH_PATTERN = r"\bCH\d{2}\s?\d{4}\s?\d[A-Za-z0-9]{3}\s?[A-Za-z0-9]{4}\s?[A-Za-z0-9]{4}\s?[A-Za-z0-9]\b"
IBAN_EU_GENERIC_PATTERN = r"\b[A-Z]{2}\d{2}\s?[\dA-Za-z]{4}(?:\s?[\dA-Za-z]{4}){2,7}(?:\s?[\dA-Za-z]{1,4})?\b"

CREDIT_CARD_VISA_PATTERN = r"\b4\d{3}[\s-]?\d{4}[\s-]?\d{4}[\s-]?\d{4}\b"
CREDIT_CARD_MASTERCARD_PATTERN = r"\b5[1-5]\d{2}[\s-]?\d{4}[\s-]?\d{4}[\s-]?\d{4}\b"
CREDIT_CARD_AMEX_PATTERN = r"\b3[47]\d{2}[\s-]?\d{6}[\s-]?\d{5}\b"

EMAIL_PATTERN = r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b"

PHONE_EU_INTERNATIONAL_PATTERN = r"\b\+?\d{1,3}[\s.-]?\(?\d{2,5}\)?[\s.-]?\d{3,4}[\s.-]?\d{2,4}[\s.-]?\d{0,4}\b"
PHONE_DE_PATTERN = r"\b(?:\+49|0049|0)\s?\(?\d{2,5}\)?[\s./-]?\d{3,8}[\s./-]?\d{0,5}\b"
PHONE_AT_PATTERN = r"\b(?:\+43|0043|0)\s?\(?\d{1,4}\)?[\s./-]?\d{3,10}\b"
PHONE_CH_PATTERN = r"\b(?:\+41|0041|0)\s?\(?\d{2}\)?[\s./-]?\d{3}[\s./-]?\d{2}[\s./-]?\d{2}\b"

# Steuerliche Identifikationsnummer, 11 digits
TAX_ID_DE_PATTERN = r"\b\d{2}\s?\d{3}\s?\d{3}\s?\d{3}\b"

# Sozialversicherungsnummer: 12 characters, letter at position 9
SSN_DE_PATTERN = r"\b\d{2}[0-3]\d[0-1]\d{2}[A-Za-z]\d{3}\b"
# NNNN DDMMYY
SSN_AT_PATTERN = r"\b\d{4}\s?\d{2}[01]\d[0-3]\d\b"
SSN_GENERIC_PATTERN = r"\b\d{3}-\d{2}-\d{4}\b"

PASSPORT_DE_PATTERN = r"\b[Cc][A-Za-z0-9]{8}\b"
PASSPORT_AT_PATTERN = r"\b[A-Za-z]\d{7}\b"
PASSPORT_GENERIC_PATTERN = r"\b[A-Za-z]{1,2}\d{6,8}\b"

DOB_EU_PATTERN = r"\b(?:0[1-9]|[12]\d|3[01])[./-](?:0[1-9]|1[0-2])[./-](?:19|20)\d{2}\b"
DOB_ISO_PATTERN = r"\b(?:19|20)\d{2}-(?:0[1-9]|1[0-2])-(?:0[1-9]|[12]\d|3[01])\b"


def load_builtin_patterns(registry: PatternRegistry) -> PatternRegistry:
    payment = DataCategory.PAYMENT_BANK
    registry.register_regex("IBAN_DE", IBAN_DE_PATTERN, payment, redact=redact_iban, flags=regex.IGNORECASE)
    registry.register_regex("IBAN_AT", IBAN_AT_PATTERN, payment, redact=redact_iban, flags=regex.IGNORECASE)
    registry.register_regex("IBAN_CH", IBAN_CH_PATTERN, payment, redact=redact_iban, flags=regex.IGNORECASE)
    registry.register_regex("IBAN_EU_GENERIC", IBAN_EU_GENERIC_PATTERN, payment, redact=redact_iban)
    registry.register_regex("CREDIT_CARD_VISA", CREDIT_CARD_VISA_PATTERN, payment, redact=redact_credit_card)
    registry.register_regex(
        "CREDIT_CARD_MASTERCARD",
        CREDIT_CARD_MASTERCARD_PATTERN,
        payment,
        redact=redact_credit_card,
    )
    registry.register_regex("CREDIT_CARD_AMEX", CREDIT_CARD_AMEX_PATTERN, payment, redact=redact_credit_card)

    contact = DataCategory.CONTACT
    registry.register_regex("EMAIL_ADDRESS", EMAIL_PATTERN, contact, redact=redact_email)
    registry.register_regex(
        "PHONE_EU_INTERNATIONAL",
        PHONE_EU_INTERNATIONAL_PATTERN,
        contact,
        redact=redact_phone,
    )
    registry.register_regex("PHONE_DE", PHONE_DE_PATTERN, contact, redact=redact_phone)
    registry.register_regex("PHONE_AT", PHONE_AT_PATTERN, contact, redact=redact_phone)
    registry.register_regex("PHONE_CH", PHONE_CH_PATTERN, contact, redact=redact_phone)

    identification = DataCategory.IDENTIFICATION
    registry.register_regex("TAX_ID_DE", TAX_ID_DE_PATTERN, identification, redact=redact_tax_id)

    employment = DataCategory.HR_EMPLOYMENT
    registry.register_regex("SSN_DE", SSN_DE_PATTERN, employment, redact=redact_ssn)
    registry.register_regex("SSN_AT", SSN_AT_PATTERN, employment, redact=redact_ssn)
    registry.register_regex("SSN_GENERIC", SSN_GENERIC_PATTERN, employment, redact=redact_ssn)

    registry.register_regex("PASSPORT_DE", PASSPORT_DE_PATTERN, identification, redact=redact_passport)
    registry.register_regex("PASSPORT_AT", PASSPORT_AT_PATTERN, identification, redact=redact_passport)
    registry.register_regex("PASSPORT_GENERIC", PASSPORT_GENERIC_PATTERN, identification, redact=redact_passport)

    registry.register_regex("DOB_EU_FORMAT", DOB_EU_PATTERN, identification, redact=redact_date_of_birth)
    registry.register_regex("DOB_ISO_FORMAT", DOB_ISO_PATTERN, identification, redact=redact_date_of_birth)
    return registry


__all__ = ["load_builtin_patterns"]
