"""Structural comparison of member indexes.

Presence, signature text, accessibility and modifier order. No body
content is looked at here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from classdiff.engine._types import Member
from classdiff.schema import MemberDifference


@dataclass(frozen=True)
class SignatureDiff:
    """Structural differences between two member indexes."""

    equal: bool
    differences: tuple[MemberDifference, ...] = ()


def diff_signatures(
    members1: Mapping[str, Member],
    members2: Mapping[str, Member],
) -> SignatureDiff:
    """Compare two name-indexed member sets structurally.

    Reports added members (only in *members2*), removed members (only in
    *members1*), then signature, accessibility and modifier mismatches for
    members present on both sides. Names are visited in sorted order so
    reports are reproducible.
    """
    differences: list[MemberDifference] = []

    for name in sorted(members2.keys() - members1.keys()):
        differences.append(
            MemberDifference(
                member_name=name,
                kind="added",
                description=f"Member '{name}' was added",
                after=members2[name].signature,
            )
        )

    for name in sorted(members1.keys() - members2.keys()):
        differences.append(
            MemberDifference(
                member_name=name,
                kind="removed",
                description=f"Member '{name}' was removed",
                before=members1[name].signature,
            )
        )

    for name in sorted(members1.keys() & members2.keys()):
        differences.extend(_diff_member(members1[name], members2[name]))

    return SignatureDiff(equal=not differences, differences=tuple(differences))


def _diff_member(old: Member, new: Member) -> list[MemberDifference]:
    differences: list[MemberDifference] = []
    name = old.name

    if old.signature != new.signature:
        differences.append(
            MemberDifference(
                member_name=name,
                kind="signature_change",
                description=f"Signature changed from '{old.signature}' to '{new.signature}'",
                before=old.signature,
                after=new.signature,
            )
        )

    if old.accessibility != new.accessibility:
        differences.append(
            MemberDifference(
                member_name=name,
                kind="accessibility_change",
                description=f"Accessibility changed from {old.accessibility} to {new.accessibility}",
                before=old.accessibility,
                after=new.accessibility,
            )
        )

    # Order-sensitive: "static readonly" and "readonly static" differ.
    if old.modifiers != new.modifiers:
        before = ", ".join(old.modifiers)
        after = ", ".join(new.modifiers)
        differences.append(
            MemberDifference(
                member_name=name,
                kind="modifier_change",
                description=f"Modifiers changed from [{before}] to [{after}]",
                before=before,
                after=after,
            )
        )

    return differences
