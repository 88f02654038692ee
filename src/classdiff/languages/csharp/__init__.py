"""C# language support."""

from __future__ import annotations

import tree_sitter
import tree_sitter_c_sharp

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
        "if", "else", "for", "while", "do", "switch", "case", "return", "var",
        "class", "void", "int", "string", "bool", "true", "false", "null",
    }
)

DEFAULT_ACCESSIBILITY = "private"

_TYPE_DECLARATIONS: dict[str, str] = {
    "class_declaration": "class",
    "struct_declaration": "struct",
    "interface_declaration": "interface",
    "record_declaration": "record",
    "record_struct_declaration": "record",
}

_TRIVIA = frozenset({"comment"})
_ATOMIC = frozenset(
    {
        "string_literal",
        "verbatim_string_literal",
        "raw_string_literal",
        "interpolated_string_expression",
        "character_literal",
    }
)
_BODY_TYPES = frozenset({"block", "arrow_expression_clause"})
_INITIALIZER_TYPES = frozenset({"=", "equals_value_clause"})
_ACCESSOR_KEYWORDS = frozenset({"get", "set", "init", "add", "remove"})


def get_language() -> tree_sitter.Language:
    """Return the tree-sitter Language object for C#."""
    return tree_sitter.Language(tree_sitter_c_sharp.language())


def extract_declarations(tree: tree_sitter.Tree) -> list[Declaration]:
    """Extract every type declaration, outer types before nested ones."""
    declarations: list[Declaration] = []
    for node in find_descendants(tree.root_node, frozenset(_TYPE_DECLARATIONS)):
        declaration = _build_declaration(node)
        if declaration is not None:
            declarations.append(declaration)
    return declarations


def _build_declaration(node: tree_sitter.Node) -> Declaration | None:
    name_node = node.child_by_field_name("name")
    if name_node is None:
        return None

    members: list[DeclaredMember] = []
    body = node.child_by_field_name("body")
    if body is not None:
        for child in body.named_children:
            if child.type in _TRIVIA or child.type.startswith("preproc"):
                continue
            members.append(_extract_member(child))

    return Declaration(
        name=node_text(name_node),
        kind=_TYPE_DECLARATIONS[node.type],
        members=tuple(members),
        language="csharp",
        default_accessibility=DEFAULT_ACCESSIBILITY,
        start_line=node.start_point.row + 1,
        end_line=node.end_point.row + 1,
    )


def _extract_member(node: tree_sitter.Node) -> DeclaredMember:
    if node.type == "method_declaration":
        return _extract_method(node)
    if node.type == "property_declaration":
        return _extract_property(node)
    if node.type == "field_declaration":
        return _extract_field(node, kind="field")
    if node.type == "event_field_declaration":
        return _extract_field(node, kind="event")
    if node.type == "event_declaration":
        return _extract_event(node)

    # Constructors, indexers, operators, nested types: reported but not indexed.
    name_node = node.child_by_field_name("name")
    return DeclaredMember(
        kind=node.type,
        names=(node_text(name_node),) if name_node is not None else (),
        modifiers=_modifiers(node),
        text=node_text(node),
        normalized_text=normalized_text(node, _TRIVIA, _ATOMIC),
        line=node.start_point.row + 1,
    )


def _modifiers(node: tree_sitter.Node) -> tuple[str, ...]:
    return tuple(node_text(child) for child in node.children if child.type == "modifier")


def _extract_method(node: tree_sitter.Node) -> DeclaredMember:
    returns = node.child_by_field_name("returns") or node.child_by_field_name("type")
    type_params = node.child_by_field_name("type_parameters")
    params = node.child_by_field_name("parameters")

    return DeclaredMember(
        kind="method",
        names=(node_text(node.child_by_field_name("name")),),
        type_text=signature_text(returns, _TRIVIA, _ATOMIC),
        parameters=(
            signature_text(type_params, _TRIVIA) + signature_text(params, _TRIVIA, _ATOMIC)
        ),
        modifiers=_modifiers(node),
        has_body=has_child_type(node, _BODY_TYPES),
        text=node_text(node),
        normalized_text=normalized_text(node, _TRIVIA, _ATOMIC),
        line=node.start_point.row + 1,
    )


def _accessor_shape(node: tree_sitter.Node) -> str:
    """``private set;`` for ``private set { _x = value; }``."""
    parts: list[str] = []
    for child in node.children:
        if child.type == "modifier":
            parts.append(node_text(child))
        elif node_text(child) in _ACCESSOR_KEYWORDS:
            parts.append(node_text(child))
            break
    return " ".join(parts) + ";"


def _accessors(node: tree_sitter.Node | None) -> list[tree_sitter.Node]:
    if node is None:
        return []
    return [child for child in node.named_children if child.type == "accessor_declaration"]


def _extract_property(node: tree_sitter.Node) -> DeclaredMember:
    accessors = _accessors(node.child_by_field_name("accessors"))
    expression_bodied = has_child_type(node, frozenset({"arrow_expression_clause"}))

    if accessors:
        shape = " ".join(_accessor_shape(a) for a in accessors)
    elif expression_bodied:
        shape = "get;"
    else:
        shape = ""

    has_body = (
        expression_bodied
        or has_child_type(node, frozenset({"="}))
        or any(has_child_type(a, _BODY_TYPES) for a in accessors)
    )

    return DeclaredMember(
        kind="property",
        names=(node_text(node.child_by_field_name("name")),),
        type_text=signature_text(node.child_by_field_name("type"), _TRIVIA, _ATOMIC),
        accessors=shape,
        modifiers=_modifiers(node),
        has_body=has_body,
        text=node_text(node),
        normalized_text=normalized_text(node, _TRIVIA, _ATOMIC),
        line=node.start_point.row + 1,
    )


def _declarator_name(node: tree_sitter.Node) -> str:
    name_node = node.child_by_field_name("name")
    if name_node is None:
        name_node = next((c for c in node.named_children if c.type == "identifier"), None)
    return node_text(name_node)


def _extract_field(node: tree_sitter.Node, kind: str) -> DeclaredMember:
    """Field and event-field declarations; ``int a, b;`` lists both names."""
    variables = next((c for c in node.named_children if c.type == "variable_declaration"), None)
    declarators = (
        [c for c in variables.named_children if c.type == "variable_declarator"]
        if variables is not None
        else []
    )
    type_node = variables.child_by_field_name("type") if variables is not None else None

    return DeclaredMember(
        kind=kind,
        names=tuple(_declarator_name(d) for d in declarators),
        type_text=signature_text(type_node, _TRIVIA, _ATOMIC),
        modifiers=_modifiers(node),
        has_body=any(has_child_type(d, _INITIALIZER_TYPES) for d in declarators),
        text=node_text(node),
        normalized_text=normalized_text(node, _TRIVIA, _ATOMIC),
        line=node.start_point.row + 1,
    )


def _extract_event(node: tree_sitter.Node) -> DeclaredMember:
    accessors = _accessors(node.child_by_field_name("accessors"))
    return DeclaredMember(
        kind="event",
        names=(node_text(node.child_by_field_name("name")),),
        type_text=signature_text(node.child_by_field_name("type"), _TRIVIA, _ATOMIC),
        accessors=" ".join(_accessor_shape(a) for a in accessors),
        modifiers=_modifiers(node),
        has_body=any(has_child_type(a, _BODY_TYPES) for a in accessors),
        text=node_text(node),
        normalized_text=normalized_text(node, _TRIVIA, _ATOMIC),
        line=node.start_point.row + 1,
    )
