"""Tests for report rendering."""

from __future__ import annotations

from classdiff.engine.summarizer import build_counts, render_pairs, render_report
from classdiff.schema import ComparisonResult, MemberDifference, PairAnalysis


def _diff(kind: str, name: str, **kwargs: object) -> MemberDifference:
    return MemberDifference(member_name=name, kind=kind, description=f"{kind} {name}", **kwargs)  # type: ignore[arg-type]


SAMPLE = ComparisonResult(
    signatures_equal=False,
    implementations_semantically_equal=False,
    similarity_score=0.6,
    differences=[
        _diff("added", "Log", after="void Log(string message)"),
        _diff("removed", "Sqrt", before="double Sqrt(double x)"),
        _diff("accessibility_change", "Next", before="protected", after="private"),
        _diff("implementation_change", "Add", similarity=0.25),
    ],
    type_name="Calculator",
    language="csharp",
)


class TestBuildCounts:
    def test_counts_in_section_order(self) -> None:
        assert list(build_counts(SAMPLE).items()) == [
            ("removed", 1),
            ("added", 1),
            ("accessibility_change", 1),
            ("implementation_change", 1),
        ]

    def test_no_differences(self) -> None:
        assert build_counts(ComparisonResult(signatures_equal=True)) == {}


class TestRenderReport:
    def test_headline(self) -> None:
        first = render_report(SAMPLE).splitlines()[0]
        assert first == "`Calculator`: signatures differ, implementations differ, similarity 60%"

    def test_counts_line(self) -> None:
        lines = render_report(SAMPLE).splitlines()
        assert lines[1] == "Differences: 1 removed, 1 added, 1 accessibility, 1 implementation"

    def test_sections(self) -> None:
        report = render_report(SAMPLE)
        assert "## Removed\n- `Sqrt`: double Sqrt(double x)" in report
        assert "## Added\n- `Log`: void Log(string message)" in report
        assert "## Accessibility Changes\n- `Next`: protected → private" in report
        assert "## Implementation Changes\n- `Add` (25% similar)" in report
        assert report.index("## Removed") < report.index("## Added")
        assert "## Signature Changes" not in report

    def test_identical(self) -> None:
        result = ComparisonResult(
            signatures_equal=True,
            implementations_semantically_equal=True,
            similarity_score=1.0,
            type_name="Adder",
        )
        assert render_report(result) == (
            "`Adder`: signatures equal, implementations equal, similarity 100%\n"
            "No member differences."
        )

    def test_warnings(self) -> None:
        result = ComparisonResult(warnings=["First input is not a valid type declaration"])
        report = render_report(result)
        assert report.startswith("Type: signatures differ")
        assert "No member differences." not in report
        assert report.endswith("## Warnings\n⚠ First input is not a valid type declaration")


class TestRenderPairs:
    def test_lists_and_duplicates(self) -> None:
        analysis = PairAnalysis(
            common=["Shared"],
            unique_left=["Legacy"],
            unique_right=[],
            duplicates_left={"Config": ["a/Config.cs", "b/Config.cs"]},
        )
        text = render_pairs(analysis)
        assert text.splitlines()[:3] == [
            "Common types: 1",
            "Unique to left: 1",
            "Unique to right: 0",
        ]
        assert "## Common\n- Shared" in text
        assert "## Left only\n- Legacy" in text
        assert "## Right only" not in text
        assert "## Duplicates (left)\n- Config (2 occurrences)\n  - a/Config.cs\n  - b/Config.cs" in text

    def test_empty(self) -> None:
        assert render_pairs(PairAnalysis()) == (
            "Common types: 0\nUnique to left: 0\nUnique to right: 0"
        )
