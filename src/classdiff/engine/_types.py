"""Shared types for the classdiff engine."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from typing import ClassVar


ACCESS_MODIFIERS: frozenset[str] = frozenset({"public", "private", "protected", "internal"})


@dataclass(frozen=True)
class DeclaredMember:
    """A member as reported by a language frontend, before indexing."""

    kind: str  # "method", "property", "field", "event", or anything the frontend saw
    names: tuple[str, ...]  # fields list every declared variable
    type_text: str = ""  # return type for methods
    parameters: str = ""
    accessors: str = ""  # accessor shape without bodies, e.g. "get; set;"
    modifiers: tuple[str, ...] = ()  # as written, access modifiers included
    has_body: bool = False
    text: str = ""
    normalized_text: str = ""  # trivia removed, tokens joined by single spaces
    line: int = 0


@dataclass(frozen=True)
class Declaration:
    """A parsed type declaration and its ordered members."""

    name: str
    kind: str  # "class", "struct", "interface", "record"
    members: tuple[DeclaredMember, ...] = ()
    language: str = ""
    default_accessibility: str = "private"
    start_line: int = 0
    end_line: int = 0


@dataclass(frozen=True)
class ParseResult:
    """Result of parsing a source file."""

    declarations: list[Declaration] = field(default_factory=list)
    language: str = ""
    parse_error: bool = False
    error_message: str | None = None


@dataclass(frozen=True)
class Member:
    """An indexed member. Concrete kinds are the subclasses below."""

    name: str
    accessibility: str
    modifiers: tuple[str, ...]
    has_body: bool
    body_text: str
    line: int

    kind: ClassVar[str] = ""

    @property
    def signature(self) -> str:
        raise NotImplementedError

    @property
    def is_abstract_or_extern(self) -> bool:
        return "abstract" in self.modifiers or "extern" in self.modifiers


@dataclass(frozen=True)
class Method(Member):
    return_type: str = ""
    parameters: str = ""

    kind: ClassVar[str] = "method"

    @property
    def signature(self) -> str:
        return f"{self.return_type} {self.name}{self.parameters}".strip()


@dataclass(frozen=True)
class Property(Member):
    type_text: str = ""
    accessors: str = ""

    kind: ClassVar[str] = "property"

    @property
    def signature(self) -> str:
        return f"{self.type_text} {self.name} {{ {self.accessors} }}".strip()


@dataclass(frozen=True)
class Field(Member):
    type_text: str = ""

    kind: ClassVar[str] = "field"

    @property
    def signature(self) -> str:
        return f"{self.type_text} {self.name}".strip()


@dataclass(frozen=True)
class Event(Member):
    type_text: str = ""

    kind: ClassVar[str] = "event"

    @property
    def signature(self) -> str:
        return f"event {self.type_text} {self.name}"


def compute_body_hash(body: str) -> str:
    """SHA-256 of already-normalized body text. Empty text hashes to ``""``."""
    if not body:
        return ""
    return hashlib.sha256(body.encode("utf-8")).hexdigest()
