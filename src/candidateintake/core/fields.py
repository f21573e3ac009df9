"""Atomic checks for scalar candidate fields."""

from __future__ import annotations

from typing import Any

import pendulum

from .errors import InvalidAddress, InvalidDate, InvalidEmail, InvalidName, InvalidPhone
from .rules import DATE_PATTERN, DEFAULT_RULES, EMAIL_PATTERN, ValidationRules


def is_present(value: Any) -> bool:
    """Return True when a scalar field was actually supplied."""
    return value is not None and value != ""


def validate_name(value: Any, *, rules: ValidationRules = DEFAULT_RULES) -> None:
    if (
        not isinstance(value, str)
        or not rules.name_min_length <= len(value) <= rules.name_max_length
        or rules.name_pattern.fullmatch(value) is None
    ):
        raise InvalidName()


def validate_email(value: Any) -> None:
    if not isinstance(value, str) or EMAIL_PATTERN.fullmatch(value) is None:
        raise InvalidEmail()


def validate_phone(value: Any, *, rules: ValidationRules = DEFAULT_RULES) -> None:
    """Phone is optional: absent values always pass."""
    if not is_present(value):
        return
    if not isinstance(value, str) or rules.phone_pattern.fullmatch(value) is None:
        raise InvalidPhone()


def validate_address(value: Any, *, rules: ValidationRules = DEFAULT_RULES) -> None:
    if not is_present(value):
        return
    if not isinstance(value, str) or len(value) > rules.address_max_length:
        raise InvalidAddress()


def is_date_shaped(value: Any) -> bool:
    return isinstance(value, str) and DATE_PATTERN.fullmatch(value) is not None


def validate_date(value: Any) -> pendulum.Date:
    """Check a ``YYYY-MM-DD`` string and return the parsed calendar date.

    The shape check runs first; strings such as ``2024-13-40`` match the shape
    but are still rejected because they do not name a real day.
    """
    if not is_date_shaped(value):
        raise InvalidDate()
    try:
        parsed = pendulum.parse(value, exact=True)
    except ValueError as exc:
        raise InvalidDate() from exc
    if not isinstance(parsed, pendulum.Date):
        raise InvalidDate()
    return parsed


__all__ = [
    "is_present",
    "is_date_shaped",
    "validate_name",
    "validate_email",
    "validate_phone",
    "validate_address",
    "validate_date",
]
