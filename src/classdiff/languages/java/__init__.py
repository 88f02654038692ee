"""Java language support."""

from __future__ import annotations

import tree_sitter
import tree_sitter_java

from classdiff.engine._types import Declaration, DeclaredMember
from classdiff.languages._utils import (
    find_descendants,
    has_child_type,
    node_text,
    normalized_text,
    signature_text,
)

KEYWORDS: frozenset[str] = frozenset(
    {
        "if", "else", "for", "while", "do", "switch", "case", "default", "break",
        "continue", "return", "new", "this", "super", "class", "void", "int",
        "long", "double", "float", "boolean", "char", "byte", "short", "var",
        "String", "true", "false", "null", "try", "catch", "finally", "throw",
    }
)

# Java members without an access modifier are package-private.
DEFAULT_ACCESSIBILITY = "package-default"

_TYPE_DECLARATIONS: dict[str, str] = {
    "class_declaration": "class",
    "interface_declaration": "interface",
    "record_declaration": "record",
}

_TRIVIA = frozenset({"line_comment", "block_comment", "comment"})
_ATOMIC = frozenset({"string_literal", "character_literal", "text_block"})
_FIELD_TYPES = frozenset({"field_declaration", "constant_declaration"})


def get_language() -> tree_sitter.Language:
    """Return the tree-sitter Language object for Java."""
    return tree_sitter.Language(tree_sitter_java.language())


def extract_declarations(tree: tree_sitter.Tree) -> list[Declaration]:
    """Extract class, interface and record declarations in document order."""
    declarations: list[Declaration] = []
    for node in find_descendants(tree.root_node, frozenset(_TYPE_DECLARATIONS)):
        name_node = node.child_by_field_name("name")
        if name_node is None:
            continue
        body = node.child_by_field_name("body")
        members = [
            _extract_member(child)
            for child in (body.named_children if body is not None else [])
            if child.type not in _TRIVIA
        ]
        declarations.append(
            Declaration(
                name=node_text(name_node),
                kind=_TYPE_DECLARATIONS[node.type],
                members=tuple(members),
                language="java",
                default_accessibility=DEFAULT_ACCESSIBILITY,
                start_line=node.start_point.row + 1,
                end_line=node.end_point.row + 1,
            )
        )
    return declarations


def _modifiers(node: tree_sitter.Node) -> tuple[str, ...]:
    """Keyword modifiers in written order; annotations are not modifiers."""
    mods = next((c for c in node.children if c.type == "modifiers"), None)
    if mods is None:
        return ()
    return tuple(
        node_text(child)
        for child in mods.children
        if child.type not in ("annotation", "marker_annotation")
    )


def _extract_member(node: tree_sitter.Node) -> DeclaredMember:
    line = node.start_point.row + 1
    text = node_text(node)
    normalized = normalized_text(node, _TRIVIA, _ATOMIC)

    if node.type == "method_declaration":
        type_params = node.child_by_field_name("type_parameters")
        return DeclaredMember(
            kind="method",
            names=(node_text(node.child_by_field_name("name")),),
            type_text=" ".join(
                part
                for part in (
                    signature_text(type_params, _TRIVIA),
                    signature_text(node.child_by_field_name("type"), _TRIVIA),
                )
                if part
            ),
            parameters=signature_text(node.child_by_field_name("parameters"), _TRIVIA, _ATOMIC),
            modifiers=_modifiers(node),
            has_body=node.child_by_field_name("body") is not None,
            text=text,
            normalized_text=normalized,
            line=line,
        )

    if node.type in _FIELD_TYPES:
        declarators = [c for c in node.named_children if c.type == "variable_declarator"]
        return DeclaredMember(
            kind="field",
            names=tuple(node_text(d.child_by_field_name("name")) for d in declarators),
            type_text=signature_text(node.child_by_field_name("type"), _TRIVIA),
            modifiers=_modifiers(node),
            has_body=any(d.child_by_field_name("value") is not None for d in declarators),
            text=text,
            normalized_text=normalized,
            line=line,
        )

    name_node = node.child_by_field_name("name")
    return DeclaredMember(
        kind=node.type,
        names=(node_text(name_node),) if name_node is not None else (),
        modifiers=_modifiers(node),
        has_body=has_child_type(node, frozenset({"block", "constructor_body"})),
        text=text,
        normalized_text=normalized,
        line=line,
    )
