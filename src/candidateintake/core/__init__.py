"""Candidate validation engine."""

from __future__ import annotations

from .attachments import validate_attachment
from .errors import (
    CandidateValidationError,
    InvalidAddress,
    InvalidAttachment,
    InvalidCompany,
    InvalidDate,
    InvalidDescription,
    InvalidEmail,
    InvalidEndDate,
    InvalidInstitution,
    InvalidName,
    InvalidPayload,
    InvalidPhone,
    InvalidPosition,
    InvalidTitle,
    TooManyAttachments,
)
from .fields import (
    validate_address,
    validate_date,
    validate_email,
    validate_name,
    validate_phone,
)
from .records import validate_education, validate_experience
from .rules import DEFAULT_RULES, ValidationRules
from .validator import (
    CandidateValidator,
    ValidationMode,
    parse_candidate,
    validate_candidate,
)

__all__ = [
    "CandidateValidator",
    "ValidationMode",
    "ValidationRules",
    "DEFAULT_RULES",
    "validate_candidate",
    "parse_candidate",
    "validate_name",
    "validate_email",
    "validate_phone",
    "validate_address",
    "validate_date",
    "validate_education",
    "validate_experience",
    "validate_attachment",
    "CandidateValidationError",
    "InvalidPayload",
    "InvalidName",
    "InvalidEmail",
    "InvalidPhone",
    "InvalidAddress",
    "InvalidDate",
    "InvalidInstitution",
    "InvalidTitle",
    "InvalidEndDate",
    "InvalidCompany",
    "InvalidPosition",
    "InvalidDescription",
    "InvalidAttachment",
    "TooManyAttachments",
]
