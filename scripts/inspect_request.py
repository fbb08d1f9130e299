#!/usr/bin/env python3
"""
Inspect how a staffing request is parsed.

Usage:
    python scripts/inspect_request.py request.txt
    python scripts/inspect_request.py request.txt --log
    python scripts/inspect_request.py request.txt --dictionary configs/dictionaries
"""

import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from loguru import logger

from sieve.contexts.extraction.entities import ENTITY_DICTIONARIES
from sieve.contexts.extraction.entity_registry import DictionaryRegistry
from sieve.contexts.extraction.exceptions import DictionaryConfigError
from sieve.contexts.extraction.logger import setup_extraction_logger
from sieve.contexts.extraction.request_parser import parse_request_text

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(add_completion=False, help="Inspect staffing request parsing.")


def _load_overrides(registry: DictionaryRegistry) -> dict:
    """Load every override file present in the registry's directory."""
    overrides = {}
    for entity_type in ENTITY_DICTIONARIES:
        config_path = registry.get_dictionary_path(entity_type)
        if config_path is not None and config_path.exists():
            overrides[entity_type] = registry.get_dictionary(entity_type)
    return overrides


@app.command()
def main(
    request_file: Path = typer.Argument(..., help="Text file holding one raw request"),
    dictionary: Optional[Path] = typer.Option(
        None,
        "--dictionary",
        "-d",
        help="Directory of {entity_type}.yaml dictionary overrides (default: $SIEVE_DICTIONARY_PATH)",
    ),
    log: bool = typer.Option(False, "--log", help="Write a session log under $LOGS_PATH"),
    log_dir: Optional[Path] = typer.Option(
        None, "--log-dir", help="Write the session log to this directory"
    ),
):
    """Parse a request file and display the extracted structure."""
    if not request_file.exists():
        typer.echo(f"ERROR: Request file not found: {request_file}", err=True)
        raise typer.Exit(1)

    registry = DictionaryRegistry(dictionary)
    dictionary_source = str(registry.dictionaries_path) if registry.dictionaries_path else "built-in"

    if log and log_dir is None:
        log_dir = LOGS_PATH / f"inspect_{datetime.now():%Y%m%d_%H%M%S}"
    if log_dir is not None:
        log_file = setup_extraction_logger(log_dir, dictionary_source=dictionary_source)
        typer.echo(f"Logging to {log_file}")
    else:
        logger.remove()
        logger.add(sys.stderr, level="WARNING")

    try:
        overrides = _load_overrides(registry)
    except DictionaryConfigError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Loading {request_file}")
    typer.echo(f"Dictionaries: {dictionary_source}")
    parsed = parse_request_text(request_file.read_text(encoding="utf-8"), dictionaries=overrides)

    # Meta info
    typer.echo("\n=== Meta Info ===")
    if parsed.meta_info:
        for key, value in parsed.meta_info.items():
            typer.echo(f"  {key}: {value}")
    else:
        typer.echo("  (none detected)")

    # Numbered list
    numbered_list = parsed.sections.numbered_list
    typer.echo(f"\n=== Numbered List ({len(numbered_list)} items) ===")
    for number in sorted(numbered_list):
        typer.echo(f"  {number}. {numbered_list[number]}")
    missing = ", ".join(str(number) for number in parsed.missing_items)
    typer.echo(f"  Missing items: {missing or 'none'}")

    # Patterns
    typer.echo(f"\n=== Pattern Matches ({len(parsed.patterns)} patterns) ===")
    for name, matches in parsed.patterns.items():
        values = ", ".join(match.value for match in matches)
        typer.echo(f"  {name} ({matches[0].confidence:.2f}): {values}")

    # Entities
    technologies = parsed.technologies
    typer.echo("\n=== Technologies ===")
    typer.echo(f"  Required: {', '.join(sorted(technologies.required)) or '(none)'}")
    typer.echo(f"  Preferred: {', '.join(sorted(technologies.preferred)) or '(none)'}")
    typer.echo(f"  Leadership: {', '.join(sorted(technologies.leadership)) or '(none)'}")

    typer.echo("\n=== Keywords ===")
    for entity_type, names in parsed.keywords.items():
        typer.echo(f"  {entity_type}: {', '.join(names) or '(none)'}")

    # Fields
    typer.echo("\n=== Fields ===")
    for name, result in parsed.fields.items():
        if result.confidence > 0 and name != "missing_data":
            typer.echo(f"  {name} [{result.method}, {result.confidence:.2f}]: {result.value}")
    typer.echo(f"  Overall confidence: {parsed.confidence:.2f}")

    # Warnings
    if parsed.warnings:
        typer.echo("\n=== Warnings ===")
        for w in parsed.warnings:
            typer.echo(f"  ! {w}")

    typer.secho("\n✓ Parsing complete", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
