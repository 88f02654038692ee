"""classdiff CLI entry point."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from classdiff import __version__
from classdiff.config import DEFAULT_SIMILARITY_THRESHOLD, CompareConfig
from classdiff.engine.comparer import compare as compare_sources
from classdiff.engine.pairing import analyze_trees
from classdiff.engine.summarizer import render_pairs, render_report
from classdiff.languages import SUPPORTED_LANGUAGES, detect_language
from classdiff.schema import ComparisonResult, export_json_schema

logger = logging.getLogger(__name__)

# Exit codes
EXIT_SUCCESS = 0  # No member differences
EXIT_FINDINGS = 1  # Differences present
EXIT_ERROR = 2  # Something went wrong, or an input held no usable declaration

_LANGUAGE_CHOICE = click.Choice(sorted(SUPPORTED_LANGUAGES))


def _is_invalid(result: ComparisonResult) -> bool:
    """Structural equality fails only with differences, unless nothing was compared."""
    return not result.signatures_equal and not result.differences and bool(result.warnings)


@click.group()
@click.version_option(__version__, "--version", "-v")
@click.option("--debug", is_flag=True, default=False, help="Enable debug logging.")
def main(debug: bool) -> None:
    """classdiff — compare two versions of a class member by member."""
    if debug:
        logging.basicConfig(level=logging.DEBUG)


@main.command()
@click.argument("file1", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("file2", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--language",
    type=_LANGUAGE_CHOICE,
    default=None,
    help="Source language (default: detected from FILE1's extension).",
)
@click.option(
    "--type",
    "type_name",
    default=None,
    help="Name of the type to compare (default: first type in each file).",
)
@click.option(
    "--threshold",
    type=click.FloatRange(0.0, 1.0),
    default=DEFAULT_SIMILARITY_THRESHOLD,
    show_default=True,
    help="Token similarity below which a body counts as changed.",
)
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
def compare(
    file1: Path,
    file2: Path,
    language: str | None,
    type_name: str | None,
    threshold: float,
    fmt: str,
) -> None:
    """Compare the type declared in FILE1 with the one in FILE2.

    \b
    Exit codes:
      0 — No member differences
      1 — Differences found
      2 — Error or invalid input
    """
    try:
        language = language or detect_language(file1.name)
        if language is None:
            click.echo(f"Error: cannot detect language of {file1.name}; use --language", err=True)
            sys.exit(EXIT_ERROR)

        result = compare_sources(
            file1.read_text(encoding="utf-8"),
            file2.read_text(encoding="utf-8"),
            language,
            type_name=type_name,
            config=CompareConfig(threshold=threshold),
        )

        if fmt == "json":
            click.echo(result.model_dump_json(indent=2))
        else:
            click.echo(render_report(result))

        if _is_invalid(result):
            sys.exit(EXIT_ERROR)
        sys.exit(EXIT_FINDINGS if result.differences else EXIT_SUCCESS)

    except SystemExit:
        raise
    except Exception as exc:
        logger.debug("CLI error", exc_info=True)
        click.echo(f"Error: {exc}", err=True)
        sys.exit(EXIT_ERROR)


@main.command()
@click.argument("dir1", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.argument("dir2", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option(
    "--language",
    type=_LANGUAGE_CHOICE,
    default=None,
    help="Only index files of this language (default: all supported).",
)
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
def pairs(dir1: Path, dir2: Path, language: str | None, fmt: str) -> None:
    """List type names shared by DIR1 and DIR2, unique to one, or duplicated."""
    try:
        analysis = analyze_trees(dir1, dir2, language)
    except Exception as exc:
        logger.debug("CLI error", exc_info=True)
        click.echo(f"Error: {exc}", err=True)
        sys.exit(EXIT_ERROR)

    if fmt == "json":
        click.echo(json.dumps(analysis.model_dump(), indent=2))
    else:
        click.echo(render_pairs(analysis))


@main.command()
def schema() -> None:
    """Print the JSON schema of the comparison result."""
    click.echo(export_json_schema())
