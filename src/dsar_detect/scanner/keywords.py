"""Special-category (GDPR Art. 9) keyword tables, English and German.

Each subtype compiles to a single case-insensitive whole-word alternation so
results are reported per subtype rather than per keyword.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

from .registry import PatternRegistry

HEALTH_KEYWORDS: Tuple[str, ...] = (
    "medical",
    "diagnosis",
    "diagnose",
    "diagnosed",
    "treatment",
    "prescription",
    "doctor",
    "hospital",
    "disability",
    "allergy",
    "allergies",
    "medication",
    "medicine",
    "patient",
    "clinical",
    "therapy",
    "chronic",
    "symptom",
    "symptoms",
    "surgery",
    "vaccination",
    "vaccine",
    "blood type",
    "health insurance",
    "health record",
    "mental health",
    "psychiatric",
    "psychotherapy",
    "illness",
    "disease",
    "Krankheit",
    "Diagnose",
    "Behandlung",
    "Rezept",
    "Arzt",
    "Krankenhaus",
    "Behinderung",
    "Allergie",
    "Medikament",
    "Therapie",
    "Impfung",
    "Krankenversicherung",
    "Gesundheit",
)

BIOMETRIC_KEYWORDS: Tuple[str, ...] = (
    "biometric",
    "fingerprint",
    "retina scan",
    "iris scan",
    "facial recognition",
    "face id",
    "voice recognition",
    "voiceprint",
    "palm print",
    "dna",
    "genetic",
    "biometrisch",
    "Fingerabdruck",
    "Gesichtserkennung",
    "genetisch",
)

POLITICAL_KEYWORDS: Tuple[str, ...] = (
    "political opinion",
    "political party",
    "political affiliation",
    "political belief",
    "party member",
    "party membership",
    "politische Meinung",
    "Parteimitglied",
    "Parteimitgliedschaft",
    "politische Zugehoerigkeit",
)

RELIGIOUS_KEYWORDS: Tuple[str, ...] = (
    "religious belief",
    "religion",
    "religious affiliation",
    "church membership",
    "faith",
    "denomination",
    "church tax",
    "Kirchensteuer",
    "Religionszugehoerigkeit",
    "Konfession",
    "Glaubensbekenntnis",
    "Kirchenmitgliedschaft",
)

TRADE_UNION_KEYWORDS: Tuple[str, ...] = (
    "trade union",
    "union membership",
    "labor union",
    "trade union membership",
    "works council",
    "Gewerkschaft",
    "Gewerkschaftsmitgliedschaft",
    "Betriebsrat",
)

ETHNIC_KEYWORDS: Tuple[str, ...] = (
    "ethnic origin",
    "ethnicity",
    "racial origin",
    "race",
    "ethnic background",
    "ethnische Herkunft",
    "Rasse",
    "rassische Herkunft",
)

SEXUAL_ORIENTATION_KEYWORDS: Tuple[str, ...] = (
    "sexual orientation",
    "sexual preference",
    "gender identity",
    "sexuelle Orientierung",
    "geschlechtliche Identitaet",
)

CRIMINAL_KEYWORDS: Tuple[str, ...] = (
    "criminal conviction",
    "criminal record",
    "criminal offence",
    "criminal offense",
    "penal record",
    "police record",
    "conviction",
    "court ruling",
    "Strafregister",
    "Vorstrafe",
    "strafrechtliche Verurteilung",
    "Fuehrungszeugnis",
)

SPECIAL_CATEGORY_KEYWORDS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "health_data": HEALTH_KEYWORDS,
        "biometric_data": BIOMETRIC_KEYWORDS,
        "political_opinions": POLITICAL_KEYWORDS,
        "religious_beliefs": RELIGIOUS_KEYWORDS,
        "trade_union_membership": TRADE_UNION_KEYWORDS,
        "ethnic_origin": ETHNIC_KEYWORDS,
        "sexual_orientation": SEXUAL_ORIENTATION_KEYWORDS,
        "criminal_convictions": CRIMINAL_KEYWORDS,
    }
)


def pattern_name_for(subtype: str) -> str:
    return f"ART9_{subtype.upper()}"


def load_special_category_patterns(registry: PatternRegistry) -> PatternRegistry:
    for subtype, keywords in SPECIAL_CATEGORY_KEYWORDS.items():
        registry.register_keywords(pattern_name_for(subtype), keywords, subtype=subtype)
    return registry


__all__ = [
    "SPECIAL_CATEGORY_KEYWORDS",
    "load_special_category_patterns",
    "pattern_name_for",
]
