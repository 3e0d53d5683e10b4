"""Rank assignment.

Ranks run from S (best) to F (worst). The first tier whose conditions hold
wins, checked in that order:

| Rank | Condition |
|------|-----------|
| S | score <= 5 and violations == 0 |
| A | score <= 10 and violations <= 1 |
| B | score <= 20 and violations <= 3 |
| C | score <= 30 and violations <= 5 |
| D | score <= 40 or violations <= 8 |
| F | otherwise |

Ceilings come from :class:`~style_rank.config.thresholds.RankThresholds`.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..config.thresholds import RankThresholds


class Rank(str, Enum):
    """Categorical grade, totally ordered by severity (S < A < ... < F)."""

    S = "S"
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"

    @property
    def severity(self) -> int:
        """0 for S up to 5 for F."""
        return _ORDER.index(self)

    def is_better_than(self, other: Rank) -> bool:
        return self.severity < other.severity

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.severity < other.severity

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.severity <= other.severity

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.severity > other.severity

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.severity >= other.severity


_ORDER = (Rank.S, Rank.A, Rank.B, Rank.C, Rank.D, Rank.F)


def assign_rank(
    score: float, violation_count: int, thresholds: RankThresholds | None = None
) -> Rank:
    """Map a composite score and violation count to a rank.

    Args:
        score: Composite score (cognitive complexity + 0.5 * length penalty)
        violation_count: Number of style violations
        thresholds: Tier ceilings, the default table when omitted

    Returns:
        Rank from S to F
    """
    if thresholds is None:
        from ..config.thresholds import RankThresholds

        thresholds = RankThresholds()

    t = thresholds
    if score <= t.s_score and violation_count <= t.s_violations:
        return Rank.S
    elif score <= t.a_score and violation_count <= t.a_violations:
        return Rank.A
    elif score <= t.b_score and violation_count <= t.b_violations:
        return Rank.B
    elif score <= t.c_score and violation_count <= t.c_violations:
        return Rank.C
    elif score <= t.d_score or violation_count <= t.d_violations:
        return Rank.D
    else:
        return Rank.F


def assign_complexity_rank(complexity: int) -> Rank:
    """Grade a bare complexity number, ignoring violations.

    Shown next to the cyclomatic complexity in the status tooltip.

    Grade thresholds:
    - S: 0-5
    - A: 6-10
    - B: 11-15
    - C: 16-20
    - D: 21-30
    - F: 31+
    """
    if complexity <= 5:
        return Rank.S
    elif complexity <= 10:
        return Rank.A
    elif complexity <= 15:
        return Rank.B
    elif complexity <= 20:
        return Rank.C
    elif complexity <= 30:
        return Rank.D
    else:
        return Rank.F


def get_rank_description(rank: Rank, locale: str = "en") -> str:
    """Human-readable description of a rank in the given locale."""
    from .messages import get_messages

    return get_messages(locale).rank_description(rank)
