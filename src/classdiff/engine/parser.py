"""Tree-sitter parsing and declaration extraction."""

from __future__ import annotations

from dataclasses import replace

import tree_sitter

from classdiff.engine._types import Declaration, ParseResult
from classdiff.languages import get_language_module, get_parser

__all__ = ["Declaration", "ParseResult", "find_declaration", "parse_source"]


def parse_source(source: str, language: str) -> ParseResult:
    """Parse source code and extract its type declarations.

    Args:
        source: The source code text
        language: Language identifier ("csharp", "java", "typescript", "javascript")

    Returns:
        ParseResult with declarations in document order, outer types first
    """
    try:
        parser = get_parser(language)
    except ValueError as e:
        return ParseResult(
            declarations=[],
            language=language,
            parse_error=True,
            error_message=str(e),
        )

    source_bytes = source.encode("utf-8")
    tree: tree_sitter.Tree = parser.parse(source_bytes)

    has_error = tree.root_node.has_error

    lang_module = get_language_module(language)
    declarations = [
        replace(d, language=language) for d in lang_module.extract_declarations(tree)
    ]

    return ParseResult(
        declarations=declarations,
        language=language,
        parse_error=has_error,
        error_message="Parse errors detected in source" if has_error else None,
    )


def find_declaration(result: ParseResult, type_name: str | None = None) -> Declaration | None:
    """First declaration in *result*, or the first one named *type_name*."""
    for declaration in result.declarations:
        if type_name is None or declaration.name == type_name:
            return declaration
    return None
