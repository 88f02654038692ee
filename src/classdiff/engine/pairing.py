"""Pair type declarations across two source trees by name."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from classdiff.engine._types import Declaration
from classdiff.engine.parser import parse_source
from classdiff.languages import detect_language
from classdiff.schema import PairAnalysis

logger = logging.getLogger(__name__)

_SKIP_DIRS = {".git", "bin", "obj", "node_modules"}


def collect_declarations(
    root: str | Path,
    language: str | None = None,
) -> Iterator[tuple[str, Declaration]]:
    """Yield ``(relative_path, declaration)`` for every type under *root*.

    Files whose extension maps to no supported language, or to a language
    other than *language* when given, are ignored. Unreadable files are
    logged and skipped.
    """
    root = Path(root)
    for path in sorted(root.rglob("*")):
        if not path.is_file() or _SKIP_DIRS.intersection(path.relative_to(root).parts):
            continue
        file_language = detect_language(path.name)
        if file_language is None or (language is not None and file_language != language):
            continue
        try:
            source = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Error processing file %s: %s", path, exc)
            continue
        relative = path.relative_to(root).as_posix()
        for declaration in parse_source(source, file_language).declarations:
            yield relative, declaration


def index_declarations(root: str | Path, language: str | None = None) -> dict[str, list[str]]:
    """Map each type name under *root* to the files declaring it."""
    index: dict[str, list[str]] = {}
    for relative, declaration in collect_declarations(root, language):
        index.setdefault(declaration.name, []).append(relative)
    return index


def analyze_trees(
    root1: str | Path,
    root2: str | Path,
    language: str | None = None,
) -> PairAnalysis:
    """Report type names common to both trees, unique to one, or declared twice."""
    left = index_declarations(root1, language)
    right = index_declarations(root2, language)
    logger.debug("Indexed %d types in %s and %d in %s", len(left), root1, len(right), root2)

    return PairAnalysis(
        common=sorted(left.keys() & right.keys()),
        unique_left=sorted(left.keys() - right.keys()),
        unique_right=sorted(right.keys() - left.keys()),
        duplicates_left={name: paths for name, paths in sorted(left.items()) if len(paths) > 1},
        duplicates_right={name: paths for name, paths in sorted(right.items()) if len(paths) > 1},
    )
