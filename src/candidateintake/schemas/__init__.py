"""Pydantic schema definitions for intake payloads and configuration."""

from __future__ import annotations

from .candidate import (
    AttachmentRef,
    CandidatePayload,
    EducationEntry,
    ExperienceEntry,
)
from .config import AppConfig, ValidationSettings, load_config

__all__ = [
    "AttachmentRef",
    "CandidatePayload",
    "EducationEntry",
    "ExperienceEntry",
    "AppConfig",
    "ValidationSettings",
    "load_config",
]
