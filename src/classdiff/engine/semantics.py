"""Implementation comparison: body hashes with a token-overlap fallback."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Mapping

from classdiff.config import DEFAULT_SIMILARITY_THRESHOLD
from classdiff.engine._types import Member, compute_body_hash
from classdiff.schema import MemberDifference

logger = logging.getLogger(__name__)

_TOKEN_SPLIT_RE = re.compile(r"[\s(){};,]+")


@dataclass(frozen=True)
class SemanticDiff:
    """Implementation differences and the aggregate similarity."""

    equal: bool
    similarity_score: float
    differences: tuple[MemberDifference, ...] = ()


def code_tokens(code: str, keywords: Iterable[str] = ()) -> set[str]:
    """Distinct tokens of *code*, minus one-character tokens and *keywords*."""
    reserved = frozenset(keywords)
    return {t for t in _TOKEN_SPLIT_RE.split(code) if len(t) > 1 and t not in reserved}


def code_similarity(code1: str, code2: str, keywords: Iterable[str] = ()) -> float:
    """Jaccard similarity of the token sets of two bodies.

    Two bodies with no usable tokens at all are considered identical.
    """
    reserved = frozenset(keywords)
    tokens1 = code_tokens(code1, reserved)
    tokens2 = code_tokens(code2, reserved)
    union = tokens1 | tokens2
    if not union:
        return 1.0
    return len(tokens1 & tokens2) / len(union)


def is_comparable(old: Member, new: Member) -> bool:
    """Whether the bodies of a same-named pair take part in body comparison.

    Abstract and extern members never do. A pair where neither side has a
    body has nothing to compare; a pair where only one side has a body is
    compared, so adding or dropping an implementation is reported.
    """
    if old.is_abstract_or_extern or new.is_abstract_or_extern:
        return False
    return old.has_body or new.has_body


def diff_implementations(
    members1: Mapping[str, Member],
    members2: Mapping[str, Member],
    keywords: Iterable[str] = (),
    threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
) -> SemanticDiff:
    """Compare bodies of the members present on both sides.

    A member is skipped when either side is abstract or extern, or when
    neither side has a body.
    Identical normalized bodies score 1.0; otherwise the token similarity is
    used and a score strictly below *threshold* is reported as an
    ``implementation_change``.
    """
    common = sorted(members1.keys() & members2.keys())
    if not common:
        return SemanticDiff(equal=False, similarity_score=0.0)

    reserved = frozenset(keywords)
    differences: list[MemberDifference] = []
    compared = 0
    matching = 0
    total_similarity = 0.0

    for name in common:
        old, new = members1[name], members2[name]
        if not is_comparable(old, new):
            logger.debug("Skipping %s: no comparable implementation", name)
            continue

        compared += 1
        if compute_body_hash(old.body_text) == compute_body_hash(new.body_text):
            matching += 1
            total_similarity += 1.0
            continue

        similarity = code_similarity(old.body_text, new.body_text, reserved)
        total_similarity += similarity
        if similarity < threshold:
            differences.append(
                MemberDifference(
                    member_name=name,
                    kind="implementation_change",
                    description=f"Implementation changed (similarity: {similarity:.0%})",
                    similarity=similarity,
                )
            )

    if compared == 0:
        return SemanticDiff(equal=False, similarity_score=0.0)

    return SemanticDiff(
        equal=matching == compared,
        similarity_score=total_similarity / compared,
        differences=tuple(differences),
    )
