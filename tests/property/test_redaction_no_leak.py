import string

import pytest
from hypothesis import given, strategies as st

from dsar_detect.redactor.strategies import (
    mask_middle,
    redact_credit_card,
    redact_email,
    redact_iban,
    redact_ssn,
)
from dsar_detect.scanner import default_registry, detect_pii, run_pattern

_ALNUM = string.ascii_letters + string.digits


@given(st.text(alphabet=_ALNUM, max_size=40))
def test_mask_middle_reveals_at_most_keep_window(value: str) -> None:
    masked = mask_middle(value)
    assert len(masked) == len(value)
    if len(value) <= 4:
        assert set(masked) <= {"*"}
    else:
        assert masked[:2] == value[:2]
        assert masked[-2:] == value[-2:]
        assert set(masked[2:-2]) == {"*"}


@given(st.from_regex(r"[A-Z]{2}\d{16,30}", fullmatch=True))
def test_iban_interior_never_exposed(value: str) -> None:
    masked = redact_iban(value)
    assert masked != value
    assert len(masked) == len(value)
    assert sum(char != "*" for char in masked) == 6


@given(st.from_regex(r"\d{13,16}", fullmatch=True))
def test_card_keeps_eight_digits(value: str) -> None:
    masked = redact_credit_card(value)
    assert sum(char.isdigit() for char in masked) == 8
    assert value not in masked


@given(st.from_regex(r"\d{3}-\d{2}-\d{4}", fullmatch=True))
def test_ssn_keeps_last_four(value: str) -> None:
    masked = redact_ssn(value)
    assert sum(char.isdigit() for char in masked) == 4
    assert masked.endswith(value[-4:])


@given(
    st.from_regex(r"[a-z0-9]{2,12}", fullmatch=True),
    st.from_regex(r"[a-z]{3,10}\.(com|org|de)", fullmatch=True),
)
def test_email_local_part_masked(local: str, domain: str) -> None:
    masked = redact_email(f"{local}@{domain}")
    assert masked == f"{local[0]}{'*' * (len(local) - 1)}@{domain}"


@given(
    st.from_regex(r"[a-z]{2,10}\.[a-z]{2,10}", fullmatch=True),
    st.text(alphabet=string.ascii_letters + " ", max_size=20),
)
def test_detected_email_sample_differs_from_raw(local: str, padding: str) -> None:
    raw = f"{local}@x1.io"
    results = detect_pii(f"{padding} {raw} {padding}")
    emails = [result for result in results if result.pattern_name == "EMAIL_ADDRESS"]
    assert emails
    assert emails[0].sample_match != raw
    assert local not in emails[0].sample_match


# Generators for values each built-in PII pattern matches, and how many
# alphanumeric characters its sample may reveal.
_SHAPES = {
    "IBAN_DE": (r"DE[0-9]{20}", 6),
    "IBAN_AT": (r"AT[0-9]{18}", 6),
    "IBAN_CH": (r"CH[0-9]{7}[A-Z0-9]{12}", 6),
    "IBAN_EU_GENERIC": (r"[A-Z]{2}[0-9]{2}[A-Z0-9]{12,28}", 6),
    "CREDIT_CARD_VISA": (r"4[0-9]{3}-[0-9]{4}-[0-9]{4}-[0-9]{4}", 8),
    "CREDIT_CARD_MASTERCARD": (r"5[1-5][0-9]{14}", 8),
    "CREDIT_CARD_AMEX": (r"3[47][0-9]{2} [0-9]{6} [0-9]{5}", 8),
    "EMAIL_ADDRESS": (r"[a-z]{2,10}\.[a-z0-9]{1,8}@[a-z]{2,10}\.(de|com|org)", 1),
    "PHONE_EU_INTERNATIONAL": (r"\+[0-9]{2} [0-9]{3} [0-9]{7}", 6),
    "PHONE_DE": (r"0[0-9]{3} [0-9]{6}", 6),
    "PHONE_AT": (r"0[0-9]{3} [0-9]{6}", 6),
    "PHONE_CH": (r"0[0-9]{2} [0-9]{3} [0-9]{2} [0-9]{2}", 6),
    "TAX_ID_DE": (r"[0-9]{2} [0-9]{3} [0-9]{3} [0-9]{3}", 4),
    "SSN_DE": (r"[0-9]{2}[0-3][0-9][01][0-9]{2}[A-Z][0-9]{3}", 4),
    "SSN_AT": (r"[0-9]{4} [0-9]{2}[01][0-9][0-3][0-9]", 4),
    "SSN_GENERIC": (r"[0-9]{3}-[0-9]{2}-[0-9]{4}", 4),
    "PASSPORT_DE": (r"C[A-Z0-9]{8}", 3),
    "PASSPORT_AT": (r"[A-Z][0-9]{7}", 3),
    "PASSPORT_GENERIC": (r"[A-Z]{1,2}[0-9]{6,8}", 3),
    "DOB_EU_FORMAT": (r"(0[1-9]|[12][0-9]|3[01])\.(0[1-9]|1[0-2])\.(19|20)[0-9]{2}", 4),
    "DOB_ISO_FORMAT": (r"(19|20)[0-9]{2}-(0[1-9]|1[0-2])-(0[1-9]|[12][0-9]|3[01])", 4),
}


def test_shapes_cover_every_pii_pattern() -> None:
    assert set(_SHAPES) == {pattern.name for pattern in default_registry().pii()}


@pytest.mark.parametrize("name", sorted(_SHAPES))
@given(data=st.data())
def test_every_pii_sample_stays_within_keep_window(name: str, data: st.DataObject) -> None:
    source, revealed_limit = _SHAPES[name]
    pattern = default_registry().get(name)
    text = f"ref: {data.draw(st.from_regex(source, fullmatch=True))};"
    match = pattern.matcher.search(text)
    assert match is not None
    raw = match.group()

    result = run_pattern(text, pattern)
    assert result is not None
    assert result.sample_match != raw
    revealed = result.sample_match
    if name == "EMAIL_ADDRESS":
        revealed = revealed.partition("@")[0]
    assert sum(char.isalnum() for char in revealed) <= revealed_limit
