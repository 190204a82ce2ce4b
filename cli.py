from __future__ import annotations

import logging
import re
from enum import Enum
from pathlib import Path
from typing import List, Optional

import typer

from io_utils.ena_xml import iter_sample_elements, parse_sample
from io_utils.read import find_files
from sample_metadata import (
    build_from_document,
    classify,
    parse_coordinate,
    parse_date,
    parse_depth,
)
from sample_metadata.config import get_config
from sample_metadata.errors import ExtractionError, NoInputFiles
from sample_metadata.logging_config import configure_logging

logger = logging.getLogger(__name__)

app = typer.Typer(help="Extract normalized metadata from ENA sample XML")


class ValueKind(str, Enum):
    date = "date"
    depth = "depth"
    coordinate = "coordinate"


def _check_pattern(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    try:
        re.compile(value)
    except re.error as e:
        raise typer.BadParameter(f"not a valid regular expression: {e}")
    return value


def extract_cli(
    paths: List[Path],
    skip_tag: Optional[str] = None,
    extensions: Optional[List[str]] = None,
) -> int:
    """Print one JSON record per sample found in ``paths``.

    Returns the number of files or samples that failed.
    """

    config = get_config()
    skip = re.compile(skip_tag) if skip_tag else config.skip_pattern()

    files = find_files(paths, extensions or config.INPUT_EXTENSIONS)
    logger.info(
        "Will process %d file%s", len(files), "" if len(files) == 1 else "s"
    )

    failed = 0
    records = 0
    for file in files:
        try:
            samples = list(iter_sample_elements(file))
        except ExtractionError as e:
            failed += 1
            logger.error("%s: %s", file, e, extra={"file": str(file), "code": e.code})
            continue

        # a broken sample does not stop its siblings in a SAMPLE_SET
        for sample in samples:
            try:
                record = build_from_document(parse_sample(sample, skip))
            except ExtractionError as e:
                failed += 1
                logger.error("%s: %s", file, e, extra={"file": str(file), "code": e.code})
                continue
            typer.echo(record.model_dump_json())
            records += 1

    logger.info("Extracted %d record(s) from %d file(s), %d failed", records, len(files), failed)
    return failed


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Log level (defaults to LOG_LEVEL)"
    ),
    json_logs: bool = typer.Option(
        False, "--json-logs", help="Emit logs as JSON lines"
    ),
) -> None:
    config = get_config()
    configure_logging(
        level=log_level or config.LOG_LEVEL,
        json_format=json_logs or config.LOG_FORMAT == "json",
    )


@app.command()
def extract(
    paths: List[Path] = typer.Argument(..., help="Sample XML files or directories"),
    skip_tag: Optional[str] = typer.Option(
        None,
        "--skip-tag",
        callback=_check_pattern,
        help="Regex of attribute tags to ignore (defaults to MEXTRACT_SKIP_TAG_PATTERN)",
    ),
    extensions: Optional[List[str]] = typer.Option(
        None,
        "--ext",
        help="File suffix to pick up from directories; repeatable (defaults to MEXTRACT_INPUT_EXTENSIONS)",
    ),
) -> None:
    """Extract normalized records from sample XML."""
    try:
        failed = extract_cli(paths, skip_tag, extensions)
    except (NoInputFiles, FileNotFoundError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    if failed:
        raise typer.Exit(1)


@app.command("classify")
def classify_tag(tag: str = typer.Argument(..., help="Attribute tag")) -> None:
    """Print the semantic class of an attribute tag."""
    typer.echo(classify(tag).value)


@app.command()
def parse(
    value: str = typer.Argument(..., help="Attribute value"),
    kind: ValueKind = typer.Option(..., "--kind", "-k", help="What to resolve"),
    unit: Optional[str] = typer.Option(None, "--unit", help="Separate depth unit"),
) -> None:
    """Resolve a single attribute value."""
    if kind is ValueKind.date:
        result = parse_date(value)
        rendered = result.isoformat().replace("+00:00", "Z") if result else None
    elif kind is ValueKind.depth:
        result = parse_depth(value, unit)
        rendered = None if result is None else str(result)
    else:
        result = parse_coordinate(value)
        rendered = None if result is None else str(result)

    if rendered is None:
        typer.echo("absent")
        raise typer.Exit(1)
    typer.echo(rendered)


if __name__ == "__main__":
    app()
