"""classdiff — member-level structural and semantic comparison of type declarations."""

from __future__ import annotations

from classdiff.config import CompareConfig
from classdiff.engine.comparer import compare, compare_declarations
from classdiff.schema import ComparisonResult, MemberDifference

__version__ = "0.1.0"

__all__ = [
    "CompareConfig",
    "ComparisonResult",
    "MemberDifference",
    "__version__",
    "compare",
    "compare_declarations",
]
