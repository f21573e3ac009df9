from __future__ import annotations

from typing import Any

import pytest

from candidateintake.core import CandidateValidator, InvalidEmail, InvalidPayload
from candidateintake.repository import (
    InMemoryCandidateRepository,
    RecordNotFoundError,
    StorageUnavailableError,
)
from candidateintake.service import (
    RECORD_NOT_FOUND_MESSAGE,
    STORAGE_UNAVAILABLE_MESSAGE,
    CandidateSaveError,
    CandidateService,
)


class RecordingRepository:
    def __init__(self, error: Exception | None = None):
        self._error = error
        self.calls: list[tuple[str, Any]] = []

    def create(self, data: dict[str, Any]) -> dict[str, Any]:
        self.calls.append(("create", data))
        if self._error:
            raise self._error
        return {"id": 1, **data}

    def update(self, candidate_id: Any, data: dict[str, Any]) -> dict[str, Any]:
        self.calls.append(("update", candidate_id))
        if self._error:
            raise self._error
        return {"id": candidate_id, **data}


def build_payload(**kwargs: Any) -> dict[str, Any]:
    defaults: dict[str, Any] = {
        "firstName": "John",
        "lastName": "Doe",
        "email": "john@example.com",
        "phone": "666777888",
        "address": "Test Address",
        "educations": [],
        "workExperiences": [],
        "resumes": [],
    }
    defaults.update(kwargs)
    return defaults


def build_service(repository: Any) -> CandidateService:
    return CandidateService(validator=CandidateValidator(), repository=repository)


def test_save_creates_valid_candidate():
    repository = InMemoryCandidateRepository()
    service = build_service(repository)

    saved = service.save(build_payload())

    assert saved["id"] == 1
    assert saved["firstName"] == "John"
    assert repository.get(1)["email"] == "john@example.com"


def test_save_with_resumes_serialises_wire_keys():
    repository = InMemoryCandidateRepository()
    service = build_service(repository)

    saved = service.save(
        build_payload(
            resumes=[
                {"filePath": "/path/to/resume1.pdf", "fileType": "application/pdf"},
                {"filePath": "/path/to/resume2.docx", "fileType": "application/msword"},
            ],
            educations=[
                {"institution": "University", "title": "CS", "startDate": "2020-01-01"}
            ],
        )
    )

    assert saved["resumes"][1]["fileType"] == "application/msword"
    assert saved["educations"][0]["startDate"] == "2020-01-01"


def test_save_updates_existing_candidate_partially():
    repository = InMemoryCandidateRepository()
    service = build_service(repository)
    created = service.save(build_payload())

    updated = service.save({"id": created["id"], "email": "new@example.com"})

    assert updated["email"] == "new@example.com"
    assert updated["firstName"] == "John"


def test_invalid_payload_never_reaches_repository():
    repository = RecordingRepository()
    service = build_service(repository)

    with pytest.raises(InvalidEmail):
        service.save(build_payload(email="invalid-email"))
    assert repository.calls == []


def test_storage_outage_is_translated():
    service = build_service(RecordingRepository(StorageUnavailableError("down")))

    with pytest.raises(CandidateSaveError, match=STORAGE_UNAVAILABLE_MESSAGE) as exc:
        service.save(build_payload())
    assert exc.value.retryable is True
    assert isinstance(exc.value.__cause__, StorageUnavailableError)


def test_offline_in_memory_store_is_translated():
    repository = InMemoryCandidateRepository()
    repository.online = False
    service = build_service(repository)

    with pytest.raises(CandidateSaveError, match="^No se pudo conectar con la base de datos$"):
        service.save(build_payload())


def test_missing_record_is_translated():
    service = build_service(InMemoryCandidateRepository())

    with pytest.raises(CandidateSaveError, match="^No se pudo encontrar el registro$") as exc:
        service.save(build_payload(id=1))
    assert exc.value.message == RECORD_NOT_FOUND_MESSAGE
    assert exc.value.retryable is False
    assert isinstance(exc.value.__cause__, RecordNotFoundError)


@pytest.mark.parametrize("candidate_id", [1.5, [1], {"a": 1}])
def test_malformed_identifier_is_rejected_before_persistence(candidate_id):
    repository = RecordingRepository()
    service = build_service(repository)

    with pytest.raises(InvalidPayload, match="^Invalid candidate data$"):
        service.save({"id": candidate_id, "email": "a@b.co"})
    assert repository.calls == []
