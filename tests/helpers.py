"""Builders for hand-made members in tests."""

from __future__ import annotations

from classdiff.engine._types import Field, Member, Method


def method(
    name: str = "Run",
    *,
    return_type: str = "void",
    parameters: str = "()",
    accessibility: str = "public",
    modifiers: tuple[str, ...] = (),
    body_text: str | None = None,
    has_body: bool = True,
) -> Method:
    if body_text is None:
        body_text = f"public void {name} ( ) {{ DoWork ( ) ; }}" if has_body else ""
    return Method(
        name=name,
        accessibility=accessibility,
        modifiers=modifiers,
        has_body=has_body,
        body_text=body_text,
        line=1,
        return_type=return_type,
        parameters=parameters,
    )


def field(name: str = "_value", *, type_text: str = "int", body_text: str = "") -> Field:
    return Field(
        name=name,
        accessibility="private",
        modifiers=(),
        has_body=bool(body_text),
        body_text=body_text,
        line=1,
        type_text=type_text,
    )


def index(*members: Member) -> dict[str, Member]:
    return {m.name: m for m in members}
