"""Comparison settings."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_SIMILARITY_THRESHOLD = 0.95


@dataclass(frozen=True)
class CompareConfig:
    """Immutable settings for a comparison.

    Attributes:
        threshold: Token similarity below which a body counts as changed.
        keywords: Reserved words ignored by token similarity.  ``None`` uses
            the set shipped with the language module.
    """

    threshold: float = DEFAULT_SIMILARITY_THRESHOLD
    keywords: frozenset[str] | None = None

    def __post_init__(self) -> None:
        if not 0.0 <= self.threshold <= 1.0:
            msg = f"threshold must be in [0, 1], got {self.threshold}"
            raise ValueError(msg)
