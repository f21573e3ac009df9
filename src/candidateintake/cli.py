"""Typer CLI entrypoint for batch candidate validation."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
import yaml
from pydantic import ValidationError

from .container import create_container
from .logging import configure_logging
from .pipeline import AuditLogger
from .schemas import load_config

app = typer.Typer(help="Candidate intake validation CLI.")


@app.command()
def run(
    candidates: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Candidate payloads JSONL path."),
    output: Path = typer.Option(
        ...,
        exists=False,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
        help="Output report JSON path.",
    ),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
    log_json: bool = typer.Option(True, "--log-json/--log-console", help="Render logs as JSON lines."),
    audit_log: Optional[Path] = typer.Option(None, dir_okay=False, help="Audit log output (JSONL)."),
    strict: bool = typer.Option(False, help="Exit with status 1 when any payload is invalid."),
) -> None:
    """Validate candidate payloads and write a report."""
    settings: dict = {}
    if config:
        with config.open("r", encoding="utf-8") as handle:
            loaded = yaml.safe_load(handle) or {}
        try:
            settings = load_config(loaded).to_settings()
        except ValidationError as exc:
            raise typer.BadParameter(str(exc), param_name="config") from exc

    configure_logging(log_level, json_output=log_json)

    container = create_container(settings=settings)
    pipeline = container.pipeline()
    audit_logger = AuditLogger(audit_log) if audit_log else None

    results = pipeline.run(
        payloads_path=candidates,
        output_path=output,
        audit_logger=audit_logger,
    )
    invalid = sum(1 for item in results if not item["valid"])
    typer.echo(
        f"Checked {len(results)} candidates ({invalid} invalid). Report saved to {output}."
    )
    if strict and invalid:
        raise typer.Exit(code=1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
