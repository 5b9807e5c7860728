from __future__ import annotations

import pytest

from directory_api.domain.validation import (
    is_alpha_name,
    is_valid_email,
    is_valid_password,
    is_valid_phone,
    normalize_phone,
    validate_registration,
)
from conftest import make_fields


def test_valid_registration_has_no_violations():
    assert validate_registration(make_fields()) == []


def test_first_name_with_digits_is_rejected():
    assert validate_registration(make_fields(firstName="John12")) == ["Invalid first name"]


@pytest.mark.parametrize("value", [None, "", "   ", "Jean-Luc", "Johnathan", 42])
def test_bad_names(value):
    assert is_alpha_name(value) is False


def test_name_is_trimmed_before_checks():
    assert is_alpha_name("  Ann ") is True


@pytest.mark.parametrize(
    "value,ok",
    [
        ("a@b.com", True),
        ("A@B.COM", True),
        ("a@b", False),
        ("a b@c.com", False),
        ("@b.com", False),
        ("a@@b.com", False),
        ("", False),
        (None, False),
    ],
)
def test_email_shape(value, ok):
    assert is_valid_email(value) is ok


@pytest.mark.parametrize(
    "value,ok",
    [
        ("29456789", True),
        ("(29) 45-67-89", True),
        ("49456789", True),
        ("1234567", False),
        ("612345678", False),
        ("19456789", False),
        ("294567890", False),
        (None, False),
    ],
)
def test_phone_rules(value, ok):
    assert is_valid_phone(value) is ok


def test_phone_normalisation_keeps_digits_only():
    assert normalize_phone("(29) 45-67-89") == "29456789"


@pytest.mark.parametrize("value,ok", [("secret1", True), ("0123456789", True), ("01234567890", False), ("has space", False), ("", False)])
def test_password_rules(value, ok):
    assert is_valid_password(value) is ok


def test_all_violations_are_collected():
    errors = validate_registration({"firstName": "J0hn", "lastName": "", "email": "nope", "phone": "1", "password": "a b"})
    assert errors == [
        "Invalid first name",
        "Invalid last name",
        "Invalid email",
        "Invalid phone",
        "Invalid password",
    ]


def test_missing_fields_are_violations_not_exceptions():
    assert len(validate_registration({})) == 5


@pytest.mark.parametrize("value", ["2" + "٠" * 7, "٢٩456789", "29４５6789"])
def test_non_ascii_digits_are_not_phone_digits(value):
    assert is_valid_phone(value) is False
    assert normalize_phone(value).isascii()


@pytest.mark.parametrize("value", [" a@b.com", "a@b.com ", "\ta@b.com\n"])
def test_email_with_surrounding_whitespace_is_rejected(value):
    assert is_valid_email(value) is False
