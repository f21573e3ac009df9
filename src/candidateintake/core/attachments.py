"""Résumé attachment reference checks."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .errors import InvalidAttachment
from .keys import lookup
from .rules import DEFAULT_RULES, ValidationRules


def validate_attachment(ref: Any, *, rules: ValidationRules = DEFAULT_RULES) -> None:
    """Check path length and declared MIME type of one attachment.

    File contents are never inspected. All failures raise the same
    ``InvalidAttachment`` error.
    """
    if not isinstance(ref, Mapping):
        raise InvalidAttachment()

    file_path = lookup(ref, "file_path")
    if not isinstance(file_path, str) or not file_path:
        raise InvalidAttachment()
    if len(file_path) > rules.file_path_max_length:
        raise InvalidAttachment()

    file_type = lookup(ref, "file_type")
    if not isinstance(file_type, str) or file_type not in rules.allowed_file_types:
        raise InvalidAttachment()


__all__ = ["validate_attachment"]
