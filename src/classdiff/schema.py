"""classdiff output schema — Pydantic v2 models."""

from __future__ import annotations

import json
from typing import Literal

from pydantic import BaseModel, ConfigDict

DifferenceKind = Literal[
    "signature_change",
    "implementation_change",
    "added",
    "removed",
    "accessibility_change",
    "modifier_change",
]


class MemberDifference(BaseModel):
    """A single member-level discrepancy."""

    model_config = ConfigDict(frozen=True)

    member_name: str
    kind: DifferenceKind
    description: str
    before: str | None = None
    after: str | None = None
    similarity: float | None = None


class ComparisonResult(BaseModel):
    """Outcome of comparing two type declarations.

    ``differences`` holds the structural differences first, then the
    implementation differences. ``similarity_score`` averages over the
    members present on both sides that carry a comparable body.
    """

    model_config = ConfigDict(frozen=True)

    signatures_equal: bool = False
    implementations_semantically_equal: bool = False
    similarity_score: float = 0.0
    differences: list[MemberDifference] = []
    warnings: list[str] = []
    type_name: str | None = None
    language: str | None = None


class PairAnalysis(BaseModel):
    """Type names shared between, or unique to, two source trees."""

    common: list[str] = []
    unique_left: list[str] = []
    unique_right: list[str] = []
    duplicates_left: dict[str, list[str]] = {}
    duplicates_right: dict[str, list[str]] = {}


def export_json_schema() -> str:
    """Export the JSON schema as a string."""
    return json.dumps(ComparisonResult.model_json_schema(), indent=2)
