"""Typer-based command line interface."""
from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import List, Optional

import structlog
import typer

from ..config import AppConfig, dump_default_config, load_config
from ..logging import configure_logging
from ..metadata import extract_pdf_metadata
from ..redactor.labels import generate_redaction_suggestions
from ..scanner import (
    Scanner,
    ScannerConfig,
    default_registry,
    get_special_category_subtypes,
    has_special_category_content,
    summarize_findings,
)
from ..utils.text import to_text

app = typer.Typer(help="Sensitive-content detection for DSAR evidence")
logger = structlog.get_logger(__name__)


@app.callback()
def main(ctx: typer.Context, config: Optional[Path] = typer.Option(None, "--config", metavar="PATH")) -> None:
    try:
        ctx.obj = load_config(config)
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc
    configure_logging(ctx.obj.logging.normalized_level())


def _scanner_config(
    ctx: typer.Context,
    detector: Optional[List[str]] = None,
    max_chars: Optional[int] = None,
    pii_only: bool = False,
    art9_only: bool = False,
) -> ScannerConfig:
    app_config: AppConfig = ctx.find_root().obj
    config = app_config.scan.scanner_config()
    if pii_only and art9_only:
        typer.echo("--pii-only and --art9-only are mutually exclusive", err=True)
        raise typer.Exit(code=2)
    if detector:
        config.enabled = list(detector)
    if art9_only:
        config.enabled = ["ART9_*"]
    if pii_only:
        config.include_special_categories = False
    if max_chars is not None:
        config.max_scan_chars = max_chars
    return config


def _scan_file(path: Path, config: ScannerConfig):
    text = to_text(path.read_bytes())
    try:
        return Scanner(config=config).scan(text)
    except KeyError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc


def _dump(payload: object) -> None:
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))


@app.command()
def scan(
    ctx: typer.Context,
    path: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    detector: Optional[List[str]] = typer.Option(None, "--detector", help="Pattern name or PREFIX* selector"),
    max_chars: Optional[int] = typer.Option(None, "--max-chars", min=1, help="Truncate input before scanning"),
    pii_only: bool = typer.Option(False, "--pii-only", help="Skip special-category keyword patterns"),
    art9_only: bool = typer.Option(False, "--art9-only", help="Run special-category keyword patterns only"),
) -> None:
    config = _scanner_config(ctx, detector, max_chars, pii_only, art9_only)
    results = _scan_file(path, config)
    logger.debug("cli.scan", path=str(path), results=len(results))
    _dump([result.to_dict() for result in results])


@app.command()
def summary(ctx: typer.Context, path: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False)) -> None:
    results = _scan_file(path, _scanner_config(ctx))
    findings = summarize_findings(results)
    _dump(
        {
            "contains_special_category": has_special_category_content(results),
            "special_category_subtypes": sorted(get_special_category_subtypes(results)),
            "findings": [
                {
                    "category": finding.category.value,
                    "severity": finding.severity.value,
                    "confidence": finding.confidence,
                    "element_count": finding.element_count,
                    "requires_legal_review": finding.requires_legal_review,
                    "summary": finding.summary(),
                }
                for finding in findings
            ],
        }
    )


@app.command()
def suggest(
    ctx: typer.Context,
    path: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    evidence_id: Optional[str] = typer.Option(None, "--evidence-id", help="Evidence item the text came from"),
) -> None:
    results = _scan_file(path, _scanner_config(ctx))
    suggestions = generate_redaction_suggestions(results, evidence_item_id=evidence_id)
    _dump([asdict(suggestion) | {"status": suggestion.status.value} for suggestion in suggestions])


@app.command()
def patterns(special: bool = typer.Option(False, "--special", help="List special-category patterns")) -> None:
    registry = default_registry()
    selected = registry.special() if special else registry.pii()
    _dump(
        [
            {
                "name": pattern.name,
                "kind": pattern.kind.value,
                "category": pattern.category.value,
                "special_category_subtype": pattern.special_category_subtype,
            }
            for pattern in selected
        ]
    )


@app.command("pdf-meta")
def pdf_meta(path: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False)) -> None:
    _dump(extract_pdf_metadata(path.read_bytes()).to_dict())


@app.command("config-init")
def config_init(target: Path = typer.Argument(..., help="Where to write the default configuration")) -> None:
    if target.exists():
        typer.echo(f"Refusing to overwrite existing file: {target}", err=True)
        raise typer.Exit(code=1)
    dump_default_config(target)
    typer.echo(f"Default configuration written to {target}")


@app.command()
def version() -> None:
    from ..version import __version__

    typer.echo(__version__)


if __name__ == "__main__":  # pragma: no cover
    app()
