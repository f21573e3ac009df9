"""Dependency injection container for the intake service."""

from __future__ import annotations

from dependency_injector import containers, providers

from .core import CandidateValidator, ValidationRules
from .pipeline import IntakePipeline
from .repository import InMemoryCandidateRepository
from .service import CandidateService


class IntakeContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    rules = providers.Singleton(ValidationRules)

    validator = providers.Singleton(CandidateValidator, rules=rules)

    repository = providers.Singleton(InMemoryCandidateRepository)

    service = providers.Factory(
        CandidateService,
        validator=validator,
        repository=repository,
    )

    pipeline = providers.Factory(IntakePipeline, validator=validator)


def create_container(*, settings: dict | None = None) -> IntakeContainer:
    """Instantiate container with optional overrides."""

    container = IntakeContainer()

    if not settings:
        return container

    validation_settings = settings.get("validation", {}) if isinstance(settings, dict) else {}
    if validation_settings:
        container.rules.override(
            providers.Singleton(ValidationRules, **validation_settings)
        )

    return container
