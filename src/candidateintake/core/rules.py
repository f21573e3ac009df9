"""Tunable limits and locale conventions used by the validators."""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import cached_property

# Letters accepted in names on top of ASCII a-z / A-Z (Spanish locale).
SPANISH_NAME_LETTERS = "ñÑáéíóúÁÉÍÓÚ"

# National mobile numbers: nine digits starting with 6, 7 or 9.
SPANISH_PHONE_PREFIXES = "679"
SPANISH_PHONE_LENGTH = 9

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

DOCUMENT_FILE_TYPES: tuple[str, ...] = (
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
)


@dataclass(frozen=True)
class ValidationRules:
    """Configuration for candidate payload validation.

    Column limits mirror the storage schema. The locale fields control the
    name alphabet and the phone-number convention.
    """

    name_min_length: int = 2
    name_max_length: int = 100
    name_extra_letters: str = SPANISH_NAME_LETTERS
    phone_prefixes: str = SPANISH_PHONE_PREFIXES
    phone_length: int = SPANISH_PHONE_LENGTH
    address_max_length: int = 100
    record_field_max_length: int = 100
    description_max_length: int = 200
    file_path_max_length: int = 255
    allowed_file_types: tuple[str, ...] = DOCUMENT_FILE_TYPES
    max_attachments: int = 5

    @cached_property
    def name_pattern(self) -> re.Pattern[str]:
        letters = re.escape(self.name_extra_letters)
        return re.compile(rf"[a-zA-Z{letters}\-\s]+")

    @cached_property
    def phone_pattern(self) -> re.Pattern[str]:
        prefixes = re.escape(self.phone_prefixes)
        return re.compile(rf"[{prefixes}][0-9]{{{self.phone_length - 1}}}")


DEFAULT_RULES = ValidationRules()
