"""Composite checks for education and work-experience entries."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .errors import (
    InvalidCompany,
    InvalidDescription,
    InvalidEndDate,
    InvalidInstitution,
    InvalidPosition,
    InvalidTitle,
)
from .fields import is_date_shaped, is_present, validate_date
from .keys import lookup
from .rules import DEFAULT_RULES, ValidationRules


def _bounded_text(value: Any, max_length: int) -> bool:
    return isinstance(value, str) and value != "" and len(value) <= max_length


def validate_education(entry: Any, *, rules: ValidationRules = DEFAULT_RULES) -> None:
    if not isinstance(entry, Mapping):
        raise InvalidInstitution()

    limit = rules.record_field_max_length
    if not _bounded_text(lookup(entry, "institution"), limit):
        raise InvalidInstitution()
    if not _bounded_text(lookup(entry, "title"), limit):
        raise InvalidTitle()

    start = validate_date(lookup(entry, "start_date"))
    end_value = lookup(entry, "end_date")
    if not is_present(end_value):
        return

    end = validate_date(end_value)
    if end < start:
        raise InvalidEndDate(InvalidEndDate.ORDER_MESSAGE)


def validate_experience(entry: Any, *, rules: ValidationRules = DEFAULT_RULES) -> None:
    """Validate one work-experience entry.

    Unlike education, the end date is only checked for shape: an end date
    before the start date is accepted.
    """
    if not isinstance(entry, Mapping):
        raise InvalidCompany()

    limit = rules.record_field_max_length
    if not _bounded_text(lookup(entry, "company"), limit):
        raise InvalidCompany()
    if not _bounded_text(lookup(entry, "position"), limit):
        raise InvalidPosition()

    description = lookup(entry, "description")
    if is_present(description) and (
        not isinstance(description, str)
        or len(description) > rules.description_max_length
    ):
        raise InvalidDescription()

    validate_date(lookup(entry, "start_date"))

    end_value = lookup(entry, "end_date")
    if is_present(end_value) and not is_date_shaped(end_value):
        raise InvalidEndDate()


__all__ = ["validate_education", "validate_experience"]
