"""Persistence boundary for candidate records."""

from __future__ import annotations

from itertools import count
from typing import Any, Protocol, runtime_checkable


class StorageUnavailableError(RuntimeError):
    """Raised when the backing store cannot be reached."""


class RecordNotFoundError(LookupError):
    """Raised when an update targets a candidate that does not exist."""

    def __init__(self, candidate_id: Any):
        super().__init__(f"Candidate {candidate_id!r} not found")
        self.candidate_id = candidate_id


@runtime_checkable
class CandidateRepository(Protocol):
    """Storage contract consumed by the save workflow.

    Implementations raise ``StorageUnavailableError`` when the store is
    unreachable and ``RecordNotFoundError`` when an update misses.
    """

    def create(self, data: dict[str, Any]) -> dict[str, Any]:
        """Insert a new candidate and return the stored record with its id."""

    def update(self, candidate_id: Any, data: dict[str, Any]) -> dict[str, Any]:
        """Merge ``data`` into an existing candidate and return the result."""


class InMemoryCandidateRepository:
    """Dictionary-backed repository used by the CLI and tests."""

    def __init__(self) -> None:
        self._records: dict[int, dict[str, Any]] = {}
        self._ids = count(1)
        self.online = True

    def create(self, data: dict[str, Any]) -> dict[str, Any]:
        self._ensure_online()
        candidate_id = next(self._ids)
        record = {"id": candidate_id, **data}
        self._records[candidate_id] = record
        return dict(record)

    def update(self, candidate_id: Any, data: dict[str, Any]) -> dict[str, Any]:
        self._ensure_online()
        key = self._normalize_id(candidate_id)
        if key not in self._records:
            raise RecordNotFoundError(candidate_id)
        record = self._records[key]
        record.update({k: v for k, v in data.items() if v not in (None, "")})
        return dict(record)

    def get(self, candidate_id: Any) -> dict[str, Any] | None:
        record = self._records.get(self._normalize_id(candidate_id))
        return dict(record) if record is not None else None

    def _ensure_online(self) -> None:
        if not self.online:
            raise StorageUnavailableError("Candidate store is offline")

    @staticmethod
    def _normalize_id(candidate_id: Any) -> int | None:
        try:
            return int(candidate_id)
        except (TypeError, ValueError):
            return None


__all__ = [
    "CandidateRepository",
    "InMemoryCandidateRepository",
    "RecordNotFoundError",
    "StorageUnavailableError",
]
