"""End-to-end comparison: two sources → ComparisonResult."""

from __future__ import annotations

import logging

from classdiff.config import CompareConfig
from classdiff.engine._types import Declaration
from classdiff.engine.extractor import extract_members
from classdiff.engine.parser import find_declaration, parse_source
from classdiff.engine.semantics import diff_implementations
from classdiff.engine.signatures import diff_signatures
from classdiff.languages import SUPPORTED_LANGUAGES, get_keywords
from classdiff.schema import ComparisonResult

logger = logging.getLogger(__name__)

_SIDES = ("First input", "Second input")


def compare(
    source1: str,
    source2: str,
    language: str = "csharp",
    *,
    type_name: str | None = None,
    config: CompareConfig | None = None,
) -> ComparisonResult:
    """Compare the type declared in *source1* with the one in *source2*.

    Args:
        source1: Source text of the "before" side.
        source2: Source text of the "after" side.
        language: Frontend to parse both sides with.
        type_name: Compare the first declaration with this name instead of
            the first declaration in each source.
        config: Threshold and reserved-word overrides.

    Returns:
        A :class:`ComparisonResult`. Inputs that cannot be parsed or hold no
        matching declaration yield warnings and default values, never an
        exception.
    """
    warnings: list[str] = []
    declarations: list[Declaration] = []

    if language not in SUPPORTED_LANGUAGES:
        warnings.append(f"Unsupported language: {language}")
        logger.warning("Comparison skipped: %s", warnings[0])
        return ComparisonResult(warnings=warnings, type_name=type_name, language=language)

    for label, source in zip(_SIDES, (source1, source2), strict=True):
        parsed = parse_source(source, language)
        declaration = find_declaration(parsed, type_name)
        if declaration is None:
            if type_name is not None:
                warnings.append(f"{label} has no type declaration named '{type_name}'")
            else:
                warnings.append(f"{label} is not a valid type declaration")
            continue
        if parsed.parse_error:
            warnings.append(f"{label} contains syntax errors; results may be incomplete")
        declarations.append(declaration)

    if len(declarations) != len(_SIDES):
        logger.warning("Comparison skipped: %s", "; ".join(warnings))
        return ComparisonResult(warnings=warnings, type_name=type_name, language=language)

    return compare_declarations(declarations[0], declarations[1], config=config, warnings=warnings)


def compare_declarations(
    declaration1: Declaration,
    declaration2: Declaration,
    *,
    config: CompareConfig | None = None,
    warnings: list[str] | None = None,
) -> ComparisonResult:
    """Compare two already-parsed declarations."""
    config = config or CompareConfig()
    warnings = list(warnings or [])
    keywords = config.keywords
    if keywords is None:
        keywords = frozenset()
        if declaration1.language:
            try:
                keywords = get_keywords(declaration1.language)
            except ValueError as exc:
                logger.warning("No reserved words for %s: %s", declaration1.name, exc)
                warnings.append(f"{exc}; reserved words are not filtered")

    members1 = extract_members(declaration1)
    members2 = extract_members(declaration2)
    logger.debug(
        "Comparing %s (%d members) with %s (%d members)",
        declaration1.name,
        len(members1),
        declaration2.name,
        len(members2),
    )

    structural = diff_signatures(members1, members2)
    semantic = diff_implementations(members1, members2, keywords, config.threshold)

    return ComparisonResult(
        signatures_equal=structural.equal,
        implementations_semantically_equal=semantic.equal,
        similarity_score=semantic.similarity_score,
        differences=[*structural.differences, *semantic.differences],
        warnings=warnings,
        type_name=declaration1.name,
        language=declaration1.language or None,
    )
