import pytest

from dsar_detect.redactor.strategies import (
    mask_middle,
    redact_credit_card,
    redact_date_of_birth,
    redact_email,
    redact_iban,
    redact_keyword,
    redact_passport,
    redact_phone,
    redact_ssn,
    redact_tax_id,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("abcdef", "ab**ef"),
        ("abcd", "****"),
        ("ab", "**"),
        ("", ""),
        ("  ab cd ef  ", "ab ** ef"),
    ],
)
def test_mask_middle(value: str, expected: str) -> None:
    assert mask_middle(value) == expected


def test_mask_middle_without_prefix_keeps_suffix_only():
    assert mask_middle("March 1985", 0, 4) == "***** 1985"


def test_iban_keeps_country_and_last_four():
    assert redact_iban("DE89 3704 0044 0532 0130 00") == "DE" + "*" * 16 + "3000"


def test_iban_too_short_is_fully_masked():
    assert redact_iban("DE8912") == "******"


def test_credit_card_keeps_first_and_last_four():
    assert redact_credit_card("4111-1111-1111-1111") == "4111 ******** 1111"
    assert redact_credit_card("41111111") == "********"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("jane@example.com", "j***@example.com"),
        ("a@x.org", "*@x.org"),
        ("broken", "***@***.***"),
        ("@example.com", "***@***.***"),
    ],
)
def test_email(value: str, expected: str) -> None:
    assert redact_email(value) == expected


def test_phone_keeps_prefix_and_last_two_with_spacing():
    assert redact_phone("+49 170 1234567") == "+49 *** *****67"


def test_tax_id_strips_separators():
    assert redact_tax_id("12/345/678/901") == "12*******01"
    assert redact_tax_id("12 34") == "****"


def test_ssn_keeps_last_four_only():
    assert redact_ssn("123-45-6789") == "*****6789"
    assert redact_ssn("1234") == "****"


def test_passport_keeps_first_and_last_two():
    assert redact_passport("C01X00T47") == "C******47"
    assert redact_passport("AB1") == "***"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("15.03.1985", "**.**.1985"),
        ("15/03/1985", "**/**/1985"),
        ("1985-03-15", "1985-**-**"),
    ],
)
def test_date_of_birth_keeps_year(value: str, expected: str) -> None:
    assert redact_date_of_birth(value) == expected


def test_keyword_is_bracketed_lowercase():
    assert redact_keyword("  Krankheit ") == "[krankheit]"
