"""Tests for implementation (semantic) comparison."""

from __future__ import annotations

import pytest
from helpers import field, index, method

from classdiff.engine.semantics import (
    code_similarity,
    code_tokens,
    diff_implementations,
    is_comparable,
)
from classdiff.languages.csharp import KEYWORDS


def _body(tokens: list[str]) -> str:
    return " ".join(tokens)


SHARED = [f"tok{i}" for i in range(19)]


class TestCodeTokens:
    def test_splits_on_delimiters(self) -> None:
        assert code_tokens("Foo(bar,baz){qux;}") == {"Foo", "bar", "baz", "qux"}

    def test_drops_short_tokens(self) -> None:
        assert code_tokens("a + bb ; c") == {"bb"}

    def test_drops_keywords(self) -> None:
        assert code_tokens("return total ; if done", KEYWORDS) == {"total", "done"}

    def test_is_a_set(self) -> None:
        assert code_tokens("sum sum sum") == {"sum"}


class TestCodeSimilarity:
    def test_identical_tokens(self) -> None:
        assert code_similarity("return a + b ;", "return b + a ;", KEYWORDS) == 1.0

    def test_jaccard(self) -> None:
        assert code_similarity("alpha beta", "beta gamma") == pytest.approx(1 / 3)

    def test_disjoint(self) -> None:
        assert code_similarity("alpha", "beta") == 0.0

    def test_no_tokens_on_either_side(self) -> None:
        assert code_similarity("a ; b", "{ }") == 1.0

    def test_duplicates_do_not_add_weight(self) -> None:
        assert code_similarity("alpha alpha alpha beta", "alpha beta") == 1.0


class TestDiffImplementations:
    def test_empty_intersection(self) -> None:
        result = diff_implementations(index(method("A")), index(method("B")))
        assert result.equal is False
        assert result.similarity_score == 0.0
        assert result.differences == ()

    def test_exact_match(self) -> None:
        members = index(method("Run", body_text="do work ;"), method("Stop", body_text="halt now ;"))
        result = diff_implementations(members, members)
        assert result.equal is True
        assert result.similarity_score == 1.0
        assert result.differences == ()

    def test_only_common_members_count(self) -> None:
        old = index(method("Run", body_text="same body"), method("Gone", body_text="xx yy"))
        new = index(method("Run", body_text="same body"), method("New", body_text="zz ww"))
        result = diff_implementations(old, new)
        assert result.equal is True
        assert result.similarity_score == 1.0

    def test_reordered_tokens_not_flagged(self) -> None:
        old = index(method("Add", body_text="public int Add ( ) { return a + b ; }"))
        new = index(method("Add", body_text="public int Add ( ) { return b + a ; }"))
        result = diff_implementations(old, new, KEYWORDS)
        assert result.equal is False
        assert result.similarity_score == 1.0
        assert result.differences == ()

    def test_change_flagged_with_percentage(self) -> None:
        old = index(method("Run", body_text="alpha beta gamma delta"))
        new = index(method("Run", body_text="alpha epsilon"))
        result = diff_implementations(old, new)
        assert result.equal is False
        assert result.similarity_score == pytest.approx(0.2)
        assert len(result.differences) == 1
        d = result.differences[0]
        assert d.kind == "implementation_change"
        assert d.member_name == "Run"
        assert d.description == "Implementation changed (similarity: 20%)"
        assert d.similarity == pytest.approx(0.2)

    def test_threshold_boundary_not_flagged(self) -> None:
        old = index(method("Run", body_text=_body([*SHARED, "extra"])))
        new = index(method("Run", body_text=_body(SHARED)))
        result = diff_implementations(old, new)
        assert result.similarity_score == 0.95
        assert result.differences == ()
        assert result.equal is False

    def test_just_below_threshold_flagged(self) -> None:
        old = index(method("Run", body_text=_body([*SHARED[:18], "extra"])))
        new = index(method("Run", body_text=_body(SHARED[:18])))
        result = diff_implementations(old, new)
        assert result.similarity_score == pytest.approx(18 / 19)
        assert [d.kind for d in result.differences] == ["implementation_change"]

    def test_custom_threshold(self) -> None:
        old = index(method("Run", body_text="alpha beta"))
        new = index(method("Run", body_text="alpha gamma"))
        assert diff_implementations(old, new, threshold=0.3).differences == ()

    def test_mean_over_compared_members(self) -> None:
        old = index(method("A", body_text="same"), method("B", body_text="alpha beta"))
        new = index(method("A", body_text="same"), method("B", body_text="alpha gamma"))
        result = diff_implementations(old, new)
        assert result.similarity_score == pytest.approx((1.0 + 1 / 3) / 2)


class TestExclusions:
    def test_abstract_both_sides_excluded(self) -> None:
        old = index(
            method("Area", modifiers=("abstract",), body_text="one thing"),
            method("Name", body_text="same body"),
        )
        new = index(
            method("Area", modifiers=("abstract",), body_text="completely different"),
            method("Name", body_text="same body"),
        )
        result = diff_implementations(old, new)
        assert result.differences == ()
        assert result.equal is True
        assert result.similarity_score == 1.0

    def test_abstract_on_one_side_excluded(self) -> None:
        old = index(method("Area", modifiers=("abstract",), has_body=False))
        new = index(method("Area", body_text="return width * height ;"))
        result = diff_implementations(old, new)
        assert result.differences == ()

    def test_extern_excluded(self) -> None:
        old = index(method("Beep", modifiers=("static", "extern"), body_text="xx"))
        new = index(method("Beep", modifiers=("static", "extern"), body_text="yy"))
        assert diff_implementations(old, new).differences == ()

    def test_all_common_members_skipped(self) -> None:
        old = index(method("Area", modifiers=("abstract",), has_body=False))
        new = index(method("Area", modifiers=("abstract",), has_body=False))
        result = diff_implementations(old, new)
        assert result.equal is False
        assert result.similarity_score == 0.0
        assert result.differences == ()

    def test_bodyless_members_excluded(self) -> None:
        old = index(field("_count"), method("Run", body_text="same"))
        new = index(field("_count", type_text="long"), method("Run", body_text="same"))
        result = diff_implementations(old, new)
        assert result.equal is True
        assert result.similarity_score == 1.0

    def test_is_comparable(self) -> None:
        assert is_comparable(method("Run"), method("Run"))
        assert not is_comparable(method("Run", has_body=False), method("Run", has_body=False))
        assert not is_comparable(method("Run", modifiers=("extern",)), method("Run"))
        assert not is_comparable(field("_count"), field("_count"))
        assert is_comparable(field("_count"), field("_count", body_text="private int _count = 0 ;"))
        assert is_comparable(method("Run"), method("Run", has_body=False))


class TestOneSidedBodies:
    def test_initializer_added(self) -> None:
        old = index(field("_x"))
        new = index(field("_x", body_text="private int _x = 42 ;"))
        result = diff_implementations(old, new, KEYWORDS)
        assert result.equal is False
        assert result.similarity_score == 0.0
        assert [(d.kind, d.member_name) for d in result.differences] == [
            ("implementation_change", "_x")
        ]
        assert result.differences[0].description == "Implementation changed (similarity: 0%)"

    def test_implementation_dropped(self) -> None:
        old = index(method("Run", body_text="public void Run ( ) { Launch ( ) ; }"))
        new = index(method("Run", has_body=False))
        result = diff_implementations(old, new, KEYWORDS)
        assert [d.kind for d in result.differences] == ["implementation_change"]

    def test_counts_in_denominator(self) -> None:
        old = index(field("_x"), method("Run", body_text="same body"))
        new = index(field("_x", body_text="private int _x = 42 ;"), method("Run", body_text="same body"))
        result = diff_implementations(old, new, KEYWORDS)
        assert result.similarity_score == pytest.approx(0.5)
