"""Validation error taxonomy.

Every rule violation is raised as a subclass of ``CandidateValidationError``.
The message text is part of the public contract: API consumers match on it,
so each class pins its own default message.
"""

from __future__ import annotations


class CandidateValidationError(ValueError):
    """Base class for payload rejections."""

    default_message = "Invalid candidate data"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def code(self) -> str:
        return type(self).__name__


class InvalidPayload(CandidateValidationError):
    default_message = "Invalid candidate data"


class InvalidName(CandidateValidationError):
    default_message = "Invalid name"


class InvalidEmail(CandidateValidationError):
    default_message = "Invalid email"


class InvalidPhone(CandidateValidationError):
    default_message = "Invalid phone"


class InvalidAddress(CandidateValidationError):
    default_message = "Invalid address"


class InvalidDate(CandidateValidationError):
    default_message = "Invalid date"


class InvalidInstitution(CandidateValidationError):
    default_message = "Invalid institution"


class InvalidTitle(CandidateValidationError):
    default_message = "Invalid title"


class InvalidEndDate(CandidateValidationError):
    default_message = "Invalid end date"

    ORDER_MESSAGE = "Invalid end date: End date cannot be before start date"


class InvalidCompany(CandidateValidationError):
    default_message = "Invalid company"


class InvalidPosition(CandidateValidationError):
    default_message = "Invalid position"


class InvalidDescription(CandidateValidationError):
    default_message = "Invalid description"


class InvalidAttachment(CandidateValidationError):
    """Raised for any résumé reference problem; sub-causes are not exposed."""

    default_message = "Invalid CV data"


class TooManyAttachments(CandidateValidationError):
    default_message = "Too many resumes"


__all__ = [
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
