"""Field lookup across snake_case and camelCase payload keys."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic.alias_generators import to_camel


def lookup(payload: Mapping[str, Any], field: str) -> Any:
    """Return ``payload[field]`` or its camelCase twin, ``None`` when absent."""
    if field in payload:
        return payload[field]
    return payload.get(to_camel(field))
