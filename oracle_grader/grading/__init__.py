"""
Grading module for ranking honest records against consensus.

This module handles:
- Per-asset averages over the surviving records
- Quartic deviation grades (lower is better)
- Iterative narrowing: drop the worst record, recompute, repeat

Usage:
    from oracle_grader.grading import GradingEngine

    engine = GradingEngine(registry, minimum=10)
    result = engine.grade(honest_records)
    for graded in result.ranked[:10]:
        print(graded.short_hash, graded.grade)
"""

from .engine import (
    DEFAULT_MINIMUM,
    GradingEngine,
    calculate_averages,
    calculate_grade,
    calculate_grades,
    rank_graded,
)
from .models import GradedRecord, GradingResult, GradingSnapshot

__all__ = [
    # Main component
    "GradingEngine",
    "DEFAULT_MINIMUM",
    # Formula functions
    "calculate_averages",
    "calculate_grades",
    "calculate_grade",
    "rank_graded",
    # Result models
    "GradedRecord",
    "GradingSnapshot",
    "GradingResult",
]
