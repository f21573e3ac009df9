"""Batch intake: validate JSONL payload files and report the outcome."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

import pendulum
import structlog

from .core import CandidateValidationError, CandidateValidator
from .core.keys import lookup
from . import __version__


@dataclass(slots=True)
class IntakeResult:
    """Validation outcome for one payload line."""

    line: int
    candidate_id: Any
    email: Any
    mode: str | None
    valid: bool
    error: str | None = None
    code: str | None = None


class PayloadLoadError(ValueError):
    """Raised when a payload file contains unreadable lines."""

    def __init__(self, errors: list[str], partial: list[tuple[int, Any]]):
        super().__init__("Payload loading failed")
        self.errors = errors
        self.partial = partial

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"Payload loading failed: {self.errors}"


class PayloadLoader:
    """Read one JSON payload per line, keeping line numbers."""

    def load(self, path: Path) -> list[tuple[int, Any]]:
        payloads: list[tuple[int, Any]] = []
        errors: list[str] = []
        with path.open("r", encoding="utf-8") as handle:
            for idx, line in enumerate(handle, start=1):
                raw = line.strip()
                if not raw:
                    continue
                try:
                    payloads.append((idx, json.loads(raw)))
                except json.JSONDecodeError as exc:
                    errors.append(f"line {idx}: invalid JSON ({exc})")
        if errors:
            raise PayloadLoadError(errors, payloads)
        return payloads


class ReportWriter:
    """Persist intake reports."""

    def write(self, path: Path, payload: dict) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )


class AuditLogger:
    """Append-only audit logger writing JSON lines."""

    def __init__(self, path: Path):
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def append(self, record: dict) -> None:
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(record, ensure_ascii=False))
            handle.write("\n")


class IntakePipeline:
    """Validate every payload of a JSONL file and write a JSON report."""

    def __init__(
        self,
        *,
        validator: CandidateValidator,
        loader: PayloadLoader | None = None,
        writer: ReportWriter | None = None,
    ) -> None:
        self._validator = validator
        self._loader = loader or PayloadLoader()
        self._writer = writer or ReportWriter()
        self._logger = structlog.get_logger(__name__)

    def check(self, line: int, payload: Any) -> IntakeResult:
        is_mapping = isinstance(payload, dict)
        result = IntakeResult(
            line=line,
            candidate_id=lookup(payload, "id") if is_mapping else None,
            email=lookup(payload, "email") if is_mapping else None,
            mode=None,
            valid=False,
        )
        try:
            mode = self._validator.validate(payload)
        except CandidateValidationError as exc:
            result.error = exc.message
            result.code = exc.code
            return result
        result.mode = mode.value
        result.valid = True
        return result

    def run(
        self,
        *,
        payloads_path: Path,
        output_path: Path,
        audit_logger: AuditLogger | None = None,
    ) -> list[dict]:
        load_errors: list[str] = []
        try:
            payloads = self._loader.load(payloads_path)
        except PayloadLoadError as exc:
            payloads = exc.partial
            load_errors.extend(exc.errors)
            self._logger.warning("intake.partial_load", errors=exc.errors)

        results: list[dict] = []
        for line, payload in payloads:
            result = asdict(self.check(line, payload))
            results.append(result)

            if audit_logger:
                audit_logger.append(
                    {**result, "checked_at": pendulum.now("UTC").to_iso8601_string()}
                )

            self._logger.info(
                "intake.result",
                line=line,
                candidate_id=result["candidate_id"],
                valid=result["valid"],
                code=result["code"],
            )

        valid_count = sum(1 for item in results if item["valid"])
        metadata = {
            "total": len(results),
            "valid": valid_count,
            "invalid": len(results) - valid_count,
            "errors": load_errors,
            "timestamp": pendulum.now().to_iso8601_string(),
            "app_version": __version__,
        }
        self._writer.write(output_path, {"metadata": metadata, "results": results})
        return results


__all__ = [
    "AuditLogger",
    "IntakePipeline",
    "IntakeResult",
    "PayloadLoadError",
    "PayloadLoader",
    "ReportWriter",
]
