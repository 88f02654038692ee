"""TypeScript/JavaScript language support."""

from __future__ import annotations

import tree_sitter
import tree_sitter_javascript
import tree_sitter_typescript

from classdiff.engine._types import Declaration, DeclaredMember
from classdiff.languages._utils import (
    find_descendants,
    node_text,
    normalized_text,
    signature_text,
)

# Default to TypeScript grammar (superset of JS)
_ts_lang = tree_sitter.Language(tree_sitter_typescript.language_typescript())
_js_lang = tree_sitter.Language(tree_sitter_javascript.language())

KEYWORDS: frozenset[str] = frozenset(
    {
        "if", "else", "for", "while", "do", "switch", "case", "return", "const",
        "let", "var", "class", "function", "void", "number", "string", "boolean",
        "true", "false", "null", "undefined", "this", "new",
    }
)

# Class members without an accessibility modifier are public.
DEFAULT_ACCESSIBILITY = "public"

_CLASS_TYPES: dict[str, str] = {
    "class_declaration": "class",
    "abstract_class_declaration": "class",
}

_TRIVIA = frozenset({"comment"})
_ATOMIC = frozenset({"string", "template_string"})
_METHOD_TYPES = frozenset({"method_definition", "abstract_method_signature", "method_signature"})
_FIELD_TYPES = frozenset({"public_field_definition", "field_definition"})
_MODIFIER_TOKENS = frozenset({"static", "readonly", "abstract", "async", "declare", "override"})


def get_language() -> tree_sitter.Language:
    """Return the tree-sitter Language object for TypeScript."""
    return _ts_lang


def get_js_language() -> tree_sitter.Language:
    """Return the tree-sitter Language object for JavaScript."""
    return _js_lang


def extract_declarations(tree: tree_sitter.Tree) -> list[Declaration]:
    """Extract class declarations (exported or not) in document order."""
    declarations: list[Declaration] = []
    for node in find_descendants(tree.root_node, frozenset(_CLASS_TYPES)):
        name_node = node.child_by_field_name("name")
        if name_node is None:
            continue
        body = node.child_by_field_name("body")
        members = [
            _extract_member(child)
            for child in (body.named_children if body is not None else [])
            if child.type not in _TRIVIA and child.type != "decorator"
        ]
        declarations.append(
            Declaration(
                name=node_text(name_node),
                kind=_CLASS_TYPES[node.type],
                members=tuple(members),
                language="typescript",
                default_accessibility=DEFAULT_ACCESSIBILITY,
                start_line=node.start_point.row + 1,
                end_line=node.end_point.row + 1,
            )
        )
    return declarations


def _member_name(node: tree_sitter.Node) -> tree_sitter.Node | None:
    return node.child_by_field_name("name") or node.child_by_field_name("property")


def _modifiers(node: tree_sitter.Node, name_node: tree_sitter.Node | None) -> tuple[str, ...]:
    """Modifier tokens written before the member name."""
    mods: list[str] = []
    for child in node.children:
        if name_node is not None and child.start_byte >= name_node.start_byte:
            break
        if child.type == "accessibility_modifier":
            mods.append(node_text(child))
        elif child.type == "override_modifier" or node_text(child) in _MODIFIER_TOKENS:
            mods.append(node_text(child))
    return tuple(mods)


def _type_annotation(node: tree_sitter.Node | None) -> str:
    """``number`` for ``: number``."""
    return signature_text(node, _TRIVIA, _ATOMIC).lstrip(":").strip()


def _extract_member(node: tree_sitter.Node) -> DeclaredMember:
    name_node = _member_name(node)
    name = node_text(name_node)
    line = node.start_point.row + 1
    text = node_text(node)
    normalized = normalized_text(node, _TRIVIA, _ATOMIC)
    modifiers = _modifiers(node, name_node)

    if node.type in _METHOD_TYPES and name != "constructor":
        type_params = node.child_by_field_name("type_parameters")
        params = node.child_by_field_name("parameters")
        return DeclaredMember(
            kind="method",
            names=(name,),
            type_text=_type_annotation(node.child_by_field_name("return_type")),
            parameters=(
                signature_text(type_params, _TRIVIA)
                + (signature_text(params, _TRIVIA, _ATOMIC) or "()")
            ),
            modifiers=modifiers,
            has_body=node.child_by_field_name("body") is not None,
            text=text,
            normalized_text=normalized,
            line=line,
        )

    if node.type in _FIELD_TYPES:
        return DeclaredMember(
            kind="field",
            names=(name,),
            type_text=_type_annotation(node.child_by_field_name("type")),
            modifiers=modifiers,
            has_body=node.child_by_field_name("value") is not None,
            text=text,
            normalized_text=normalized,
            line=line,
        )

    return DeclaredMember(
        kind="constructor" if name == "constructor" else node.type,
        names=(name,) if name else (),
        modifiers=modifiers,
        text=text,
        normalized_text=normalized,
        line=line,
    )
