"""Shared utilities for language modules."""

from __future__ import annotations

from collections.abc import Iterator

import tree_sitter


def node_text(node: tree_sitter.Node | None) -> str:
    """Safely get the text of a tree-sitter node."""
    if node is None:
        return ""
    text = node.text
    if text is None:
        return ""
    return text.decode("utf-8")


def _tokens(
    node: tree_sitter.Node,
    trivia_types: frozenset[str],
    atomic_types: frozenset[str],
) -> Iterator[str]:
    if node.type in trivia_types or node.type.startswith("preproc"):
        return
    if node.child_count == 0 or node.type in atomic_types:
        text = node_text(node)
        if text:
            yield text
        return
    for child in node.children:
        yield from _tokens(child, trivia_types, atomic_types)


def normalized_text(
    node: tree_sitter.Node,
    trivia_types: frozenset[str],
    atomic_types: frozenset[str] = frozenset(),
) -> str:
    """Re-serialize *node* without comments, one space between tokens.

    Nodes in *atomic_types* (string literals) are emitted verbatim so
    whitespace inside them survives.
    """
    return " ".join(_tokens(node, trivia_types, atomic_types))


_NO_SPACE_BEFORE = frozenset({")", "]", "<", ">", ",", ";", ".", "?", ":"})
_NO_SPACE_AFTER = frozenset({"(", "[", "<", ".", "...", "@"})


def signature_text(
    node: tree_sitter.Node | None,
    trivia_types: frozenset[str],
    atomic_types: frozenset[str] = frozenset(),
) -> str:
    """Tokens of *node* without trivia, spaced as declarations are usually written.

    ``( int a,int b )`` and ``(int a, /* x */ int b)`` both give
    ``(int a, int b)``; ``List < int >`` gives ``List<int>``.
    """
    if node is None:
        return ""
    parts: list[str] = []
    previous = ""
    for token in _tokens(node, trivia_types, atomic_types):
        if parts and token not in _NO_SPACE_BEFORE and previous not in _NO_SPACE_AFTER:
            parts.append(" ")
        parts.append(token)
        previous = token
    return "".join(parts)


def find_descendants(node: tree_sitter.Node, types: frozenset[str]) -> Iterator[tree_sitter.Node]:
    """Yield descendants of *node* whose type is in *types*, in pre-order."""
    for child in node.children:
        if child.type in types:
            yield child
        yield from find_descendants(child, types)


def has_child_type(node: tree_sitter.Node, types: frozenset[str]) -> bool:
    return any(child.type in types for child in node.children)
