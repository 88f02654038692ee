"""Human-readable rendering of comparison and pairing results.

Sections are ordered by review priority: removed members first, since
callers may break, then structural changes, then body changes.
"""

from __future__ import annotations

from collections import Counter

from classdiff.schema import ComparisonResult, MemberDifference, PairAnalysis

_SECTIONS: dict[str, str] = {
    "removed": "Removed",
    "added": "Added",
    "signature_change": "Signature Changes",
    "accessibility_change": "Accessibility Changes",
    "modifier_change": "Modifier Changes",
    "implementation_change": "Implementation Changes",
}

_COUNT_LABELS: dict[str, str] = {
    "removed": "removed",
    "added": "added",
    "signature_change": "signature",
    "accessibility_change": "accessibility",
    "modifier_change": "modifier",
    "implementation_change": "implementation",
}


def build_counts(result: ComparisonResult) -> dict[str, int]:
    """Number of differences per kind, in section order."""
    counter: Counter[str] = Counter(d.kind for d in result.differences)
    return {kind: counter[kind] for kind in _SECTIONS if counter[kind]}


def _headline(result: ComparisonResult) -> str:
    name = f"`{result.type_name}`" if result.type_name else "Type"
    signatures = "equal" if result.signatures_equal else "differ"
    bodies = "equal" if result.implementations_semantically_equal else "differ"
    return (
        f"{name}: signatures {signatures}, implementations {bodies}, "
        f"similarity {result.similarity_score:.0%}"
    )


def _difference_line(d: MemberDifference) -> str:
    if d.kind in ("added", "removed"):
        signature = d.after or d.before
        return f"- `{d.member_name}`: {signature}" if signature else f"- `{d.member_name}`"
    if d.kind == "implementation_change" and d.similarity is not None:
        return f"- `{d.member_name}` ({d.similarity:.0%} similar)"
    if d.before is None and d.after is None:
        return f"- `{d.member_name}`"
    return f"- `{d.member_name}`: {d.before} → {d.after}"


def render_report(result: ComparisonResult) -> str:
    """Render *result* as a short markdown-flavoured report."""
    lines: list[str] = [_headline(result)]

    counts = build_counts(result)
    if counts:
        lines.append(
            "Differences: " + ", ".join(f"{n} {_COUNT_LABELS[kind]}" for kind, n in counts.items())
        )
    elif not result.warnings:
        lines.append("No member differences.")
    lines.append("")

    for kind, heading in _SECTIONS.items():
        items = [d for d in result.differences if d.kind == kind]
        if not items:
            continue
        lines.append(f"## {heading}")
        lines.extend(_difference_line(d) for d in items)
        lines.append("")

    if result.warnings:
        lines.append("## Warnings")
        lines.extend(f"⚠ {w}" for w in result.warnings)
        lines.append("")

    return "\n".join(lines).strip()


def render_pairs(analysis: PairAnalysis) -> str:
    """Render a pairing analysis as text."""
    lines = [
        f"Common types: {len(analysis.common)}",
        f"Unique to left: {len(analysis.unique_left)}",
        f"Unique to right: {len(analysis.unique_right)}",
        "",
    ]
    for heading, names in (
        ("Common", analysis.common),
        ("Left only", analysis.unique_left),
        ("Right only", analysis.unique_right),
    ):
        if names:
            lines.append(f"## {heading}")
            lines.extend(f"- {name}" for name in names)
            lines.append("")

    for side, duplicates in (("left", analysis.duplicates_left), ("right", analysis.duplicates_right)):
        if not duplicates:
            continue
        lines.append(f"## Duplicates ({side})")
        for name, paths in duplicates.items():
            lines.append(f"- {name} ({len(paths)} occurrences)")
            lines.extend(f"  - {p}" for p in paths)
        lines.append("")

    return "\n".join(lines).strip()
