"""Field validation and normalisation helpers for user registrations."""
from __future__ import annotations

import re
from typing import Any

NAME_PATTERN = re.compile(r"[A-Za-z]+")
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_PATTERN = re.compile(r"[2459][0-9]{7}")
NON_DIGITS = re.compile(r"[^0-9]")

NAME_MAX_LENGTH = 7
PASSWORD_MAX_LENGTH = 10


def normalize_email(value: Any) -> str:
    if not isinstance(value, str):
        return ""
    return value.strip().lower()


def normalize_phone(value: Any) -> str:
    """Keep ASCII digits only: "(29) 45-67-89" -> "29456789"."""
    if not isinstance(value, str):
        return ""
    return NON_DIGITS.sub("", value)


def is_alpha_name(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    candidate = value.strip()
    return bool(NAME_PATTERN.fullmatch(candidate)) and len(candidate) <= NAME_MAX_LENGTH


def is_valid_email(value: Any) -> bool:
    if not isinstance(value, str) or not value:
        return False
    return bool(EMAIL_PATTERN.fullmatch(value))


def is_valid_phone(value: Any) -> bool:
    return bool(PHONE_PATTERN.fullmatch(normalize_phone(value)))


def is_valid_password(value: Any) -> bool:
    if not isinstance(value, str) or not value:
        return False
    return " " not in value and len(value) <= PASSWORD_MAX_LENGTH


def validate_registration(fields: Any) -> list[str]:
    """
    Return every violation found in the candidate registration.

    ``fields`` may be a mapping or any object exposing ``first_name``,
    ``last_name``, ``email``, ``phone`` and ``password`` attributes. An
    empty list means the input is valid.
    """
    get = _getter(fields)
    errors: list[str] = []
    if not is_alpha_name(get("first_name", "firstName")):
        errors.append("Invalid first name")
    if not is_alpha_name(get("last_name", "lastName")):
        errors.append("Invalid last name")
    if not is_valid_email(get("email", "email")):
        errors.append("Invalid email")
    if not is_valid_phone(get("phone", "phone")):
        errors.append("Invalid phone")
    if not is_valid_password(get("password", "password")):
        errors.append("Invalid password")
    return errors


def _getter(fields: Any):
    if isinstance(fields, dict):
        return lambda attr, key: fields.get(key, fields.get(attr))
    return lambda attr, key: getattr(fields, attr, None)
