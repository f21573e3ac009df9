"""Validate-then-persist workflow for candidate payloads."""

from __future__ import annotations

from typing import Any

import structlog

from .core import CandidateValidationError, CandidateValidator, ValidationMode
from .repository import CandidateRepository, RecordNotFoundError, StorageUnavailableError
from .schemas import CandidatePayload

STORAGE_UNAVAILABLE_MESSAGE = "No se pudo conectar con la base de datos"
RECORD_NOT_FOUND_MESSAGE = "No se pudo encontrar el registro"


class CandidateSaveError(RuntimeError):
    """Persistence failure translated into a user-facing message.

    ``retryable`` is True for storage outages and False for missing records.
    """

    def __init__(self, message: str, *, retryable: bool):
        super().__init__(message)
        self.message = message
        self.retryable = retryable


class CandidateService:
    """Runs validation before any persistence attempt."""

    def __init__(
        self,
        *,
        validator: CandidateValidator,
        repository: CandidateRepository,
    ) -> None:
        self._validator = validator
        self._repository = repository
        self._logger = structlog.get_logger(__name__)

    def save(self, payload: Any) -> dict[str, Any]:
        """Validate ``payload`` and create or update the candidate.

        Validation errors propagate unchanged; storage errors are raised as
        ``CandidateSaveError``.
        """
        try:
            mode = self._validator.validate(payload)
        except CandidateValidationError as exc:
            self._logger.info("candidate.validation_failed", code=exc.code, message=exc.message)
            raise

        candidate = CandidatePayload.model_validate(payload)
        record = candidate.to_record()

        try:
            if mode is ValidationMode.EDIT:
                saved = self._repository.update(candidate.id, record)
            else:
                saved = self._repository.create(record)
        except StorageUnavailableError as exc:
            self._logger.error("candidate.storage_unavailable", error=str(exc))
            raise CandidateSaveError(STORAGE_UNAVAILABLE_MESSAGE, retryable=True) from exc
        except RecordNotFoundError as exc:
            self._logger.warning("candidate.not_found", candidate_id=exc.candidate_id)
            raise CandidateSaveError(RECORD_NOT_FOUND_MESSAGE, retryable=False) from exc

        self._logger.info("candidate.saved", candidate_id=saved.get("id"), mode=mode.value)
        return saved


__all__ = [
    "CandidateSaveError",
    "CandidateService",
    "RECORD_NOT_FOUND_MESSAGE",
    "STORAGE_UNAVAILABLE_MESSAGE",
]
