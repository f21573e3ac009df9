"""Candidate payload orchestration."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from ..schemas import CandidatePayload
from .attachments import validate_attachment
from .errors import InvalidPayload, TooManyAttachments
from .fields import (
    is_present,
    validate_address,
    validate_email,
    validate_name,
    validate_phone,
)
from .keys import lookup
from .records import validate_education, validate_experience
from .rules import DEFAULT_RULES, ValidationRules


class ValidationMode(str, Enum):
    """Whether a payload creates a new candidate or edits an existing one."""

    CREATE = "create"
    EDIT = "edit"

    @classmethod
    def of(cls, payload: Mapping[str, Any]) -> "ValidationMode":
        return cls.EDIT if is_present(lookup(payload, "id")) else cls.CREATE


def _sequence(value: Any) -> list[Any] | tuple[Any, ...] | None:
    if isinstance(value, (list, tuple)):
        return value
    return None


def _is_identifier(value: Any) -> bool:
    return isinstance(value, (int, str)) and not isinstance(value, bool)


class CandidateValidator:
    """Apply every candidate rule in a fixed order, stopping at the first failure."""

    def __init__(self, *, rules: ValidationRules | None = None) -> None:
        self._rules = rules or DEFAULT_RULES

    @property
    def rules(self) -> ValidationRules:
        return self._rules

    def validate(self, payload: Any) -> ValidationMode:
        """Raise a ``CandidateValidationError`` on the first violation.

        Returns the detected mode so callers can route create vs update.
        """
        if not isinstance(payload, Mapping):
            raise InvalidPayload()

        mode = ValidationMode.of(payload)
        if mode is ValidationMode.EDIT and not _is_identifier(lookup(payload, "id")):
            raise InvalidPayload()
        self._validate_scalars(payload, mode)

        educations = _sequence(lookup(payload, "educations"))
        for entry in educations or ():
            validate_education(entry, rules=self._rules)

        experiences = _sequence(lookup(payload, "work_experiences"))
        for entry in experiences or ():
            validate_experience(entry, rules=self._rules)

        resumes = _sequence(lookup(payload, "resumes"))
        if resumes is not None:
            if len(resumes) > self._rules.max_attachments:
                raise TooManyAttachments()
            for ref in resumes:
                validate_attachment(ref, rules=self._rules)

        return mode

    def _validate_scalars(self, payload: Mapping[str, Any], mode: ValidationMode) -> None:
        first_name = lookup(payload, "first_name")
        last_name = lookup(payload, "last_name")
        email = lookup(payload, "email")

        if mode is ValidationMode.EDIT:
            # Partial update: absent fields are left untouched.
            if is_present(first_name):
                validate_name(first_name, rules=self._rules)
            if is_present(last_name):
                validate_name(last_name, rules=self._rules)
            if is_present(email):
                validate_email(email)
        else:
            validate_name(first_name, rules=self._rules)
            validate_name(last_name, rules=self._rules)
            validate_email(email)

        validate_phone(lookup(payload, "phone"), rules=self._rules)
        validate_address(lookup(payload, "address"), rules=self._rules)


_default_validator = CandidateValidator()


def validate_candidate(payload: Any, *, rules: ValidationRules | None = None) -> None:
    """Validate a raw candidate payload; returning normally means it is valid."""
    validator = _default_validator if rules is None else CandidateValidator(rules=rules)
    validator.validate(payload)


def parse_candidate(
    payload: Any, *, rules: ValidationRules | None = None
) -> CandidatePayload:
    """Validate a raw payload and return it as a typed model."""
    validate_candidate(payload, rules=rules)
    return CandidatePayload.model_validate(payload)


__all__ = [
    "CandidateValidator",
    "ValidationMode",
    "parse_candidate",
    "validate_candidate",
]
