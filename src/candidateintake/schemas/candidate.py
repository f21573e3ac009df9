"""Typed views of candidate intake payloads."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class IntakeModel(BaseModel):
    """Base model accepting snake_case or camelCase keys.

    When a payload carries both spellings of a field the snake_case key wins.
    Serialising with ``by_alias=True`` yields the camelCase wire format.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def _prefer_snake_case(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        normalized: dict[str, Any] = {}
        for name in cls.model_fields:
            if name in data:
                normalized[name] = data[name]
            elif to_camel(name) in data:
                normalized[name] = data[to_camel(name)]
        return normalized


class EducationEntry(IntakeModel):
    """One education history record."""

    institution: str
    title: str
    start_date: date
    end_date: date | None = None

    @field_validator("end_date", mode="before")
    @classmethod
    def _blank_as_open(cls, value: Any) -> Any:
        return None if value == "" else value


class ExperienceEntry(IntakeModel):
    """One work-experience record.

    ``end_date`` is kept as text because only its shape is validated.
    """

    company: str
    position: str
    description: str | None = None
    start_date: date
    end_date: str | None = None


class AttachmentRef(IntakeModel):
    """Reference to an uploaded résumé file."""

    file_path: str
    file_type: str


class CandidatePayload(IntakeModel):
    """Candidate data submitted for creation (no ``id``) or update."""

    id: int | str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    educations: list[EducationEntry] = Field(default_factory=list)
    work_experiences: list[ExperienceEntry] = Field(default_factory=list)
    resumes: list[AttachmentRef] = Field(default_factory=list)

    @field_validator("educations", "work_experiences", "resumes", mode="before")
    @classmethod
    def _only_sequences(cls, value: Any) -> Any:
        # Collections that are not lists are ignored by the validator.
        if isinstance(value, (list, tuple)):
            return list(value)
        return []

    @field_validator("id", mode="before")
    @classmethod
    def _blank_id(cls, value: Any) -> Any:
        return None if value == "" else value

    def to_record(self) -> dict[str, Any]:
        """Serialise to the camelCase record handed to persistence."""
        return self.model_dump(
            mode="json", by_alias=True, exclude={"id"}, exclude_unset=True
        )
