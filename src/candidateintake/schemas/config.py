"""Pydantic configuration schema for CLI YAML input."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator


class ValidationSettings(BaseModel):
    """Overrides for validation limits and locale conventions."""

    name_min_length: int | None = Field(default=None, ge=1)
    name_max_length: int | None = Field(default=None, ge=1)
    name_extra_letters: str | None = None
    phone_prefixes: str | None = Field(default=None, min_length=1)
    phone_length: int | None = Field(default=None, ge=2)
    address_max_length: int | None = Field(default=None, ge=1)
    record_field_max_length: int | None = Field(default=None, ge=1)
    description_max_length: int | None = Field(default=None, ge=1)
    file_path_max_length: int | None = Field(default=None, ge=1)
    allowed_file_types: list[str] | None = None
    max_attachments: int | None = Field(default=None, ge=0)

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _check_name_bounds(self) -> "ValidationSettings":
        from ..core.rules import DEFAULT_RULES

        minimum = self.name_min_length or DEFAULT_RULES.name_min_length
        maximum = self.name_max_length or DEFAULT_RULES.name_max_length
        if minimum > maximum:
            raise ValueError(
                f"name_min_length ({minimum}) exceeds name_max_length ({maximum})"
            )
        return self


class AppConfig(BaseModel):
    validation: ValidationSettings = Field(default_factory=ValidationSettings)

    model_config = ConfigDict(extra="forbid")

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        validation = self.validation.model_dump(exclude_none=True)
        if "allowed_file_types" in validation:
            validation["allowed_file_types"] = tuple(validation["allowed_file_types"])
        if validation:
            settings["validation"] = validation
        return settings


def load_config(raw: Any) -> AppConfig:
    if not isinstance(raw, dict):
        raise ValidationError.from_exception_data(
            "AppConfig",
            [{"type": "dict_type", "loc": ("config",), "input": raw}],
        )
    return AppConfig.model_validate(raw)
