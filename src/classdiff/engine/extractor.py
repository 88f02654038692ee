"""Member extraction: declaration members to a name-indexed model."""

from __future__ import annotations

import logging

from classdiff.engine._types import (
    ACCESS_MODIFIERS,
    Declaration,
    DeclaredMember,
    Event,
    Field,
    Member,
    Method,
    Property,
)

logger = logging.getLogger(__name__)


def extract_members(declaration: Declaration) -> dict[str, Member]:
    """Index the recognized members of *declaration* by name.

    Methods, properties, fields and events are kept; every other kind is
    skipped. A field declaring several variables is indexed under its first
    variable only. When two members share a name the later one wins.
    """
    members: dict[str, Member] = {}
    for declared in declaration.members:
        member = _project(declared, declaration.default_accessibility)
        if member is None:
            logger.debug("Skipping %s member in %s", declared.kind, declaration.name)
            continue
        members[member.name] = member
    return members


def get_accessibility(modifiers: tuple[str, ...], default: str = "private") -> str:
    """First access modifier written, else *default*."""
    return next((m for m in modifiers if m in ACCESS_MODIFIERS), default)


def get_modifiers(modifiers: tuple[str, ...]) -> tuple[str, ...]:
    """Non-access modifiers, in written order."""
    return tuple(m for m in modifiers if m not in ACCESS_MODIFIERS)


def _project(declared: DeclaredMember, default_accessibility: str) -> Member | None:
    if not declared.names or not declared.names[0]:
        return None

    common = {
        "name": declared.names[0],
        "accessibility": get_accessibility(declared.modifiers, default_accessibility),
        "modifiers": get_modifiers(declared.modifiers),
        "has_body": declared.has_body,
        "body_text": declared.normalized_text if declared.has_body else "",
        "line": declared.line,
    }

    if declared.kind == "method":
        return Method(**common, return_type=declared.type_text, parameters=declared.parameters)
    if declared.kind == "property":
        return Property(**common, type_text=declared.type_text, accessors=declared.accessors)
    if declared.kind == "field":
        return Field(**common, type_text=declared.type_text)
    if declared.kind == "event":
        return Event(**common, type_text=declared.type_text)
    return None
