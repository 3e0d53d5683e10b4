"""Metric dataclasses produced by a single analysis run.

Every value here is built fresh from one syntax tree and frozen once
returned; nothing is shared between runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .ranking import Rank
from .syntax import NodeKind


@dataclass(frozen=True)
class Hotspot:
    """A branching or looping construct found at nesting level 2 or deeper.

    Attributes:
        kind: Construct kind (if, ternary, switch-case, loop, catch)
        line: Source line, 0 when unknown
        nesting_level: Cognitive nesting level at the construct
        function_name: Enclosing function name, None at module level or
            inside an anonymous function
    """

    kind: NodeKind
    line: int
    nesting_level: int
    function_name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "line": self.line,
            "nesting_level": self.nesting_level,
            "function_name": self.function_name,
        }


@dataclass(frozen=True)
class LongFunction:
    """A function whose span exceeds the recommended length."""

    name: str
    start_line: int
    end_line: int
    length: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "start_line": self.start_line,
            "end_line": self.end_line,
            "length": self.length,
        }


@dataclass(frozen=True)
class Violation:
    """A detected instance of one of the style rules.

    Attributes:
        rule: Rule identifier (locale independent)
        message: Localized, human-readable message
        line: Source line, None when the node carries no span
    """

    rule: str
    message: str
    line: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"rule": self.rule, "message": self.message, "line": self.line}


@dataclass(frozen=True)
class MetricsBundle:
    """Complexity metrics for one syntax tree.

    Attributes:
        cyclomatic_complexity: Independent paths, baseline 1
        cognitive_complexity: Nesting-weighted reading effort
        max_nesting_depth: Deepest if/loop nesting inside any function scope
        length_penalty: Largest per-function length penalty
        hotspots: Deeply nested constructs in traversal order
        long_functions: Functions over the length limit in traversal order
    """

    cyclomatic_complexity: int = 1
    cognitive_complexity: int = 0
    max_nesting_depth: int = 0
    length_penalty: int = 0
    hotspots: tuple[Hotspot, ...] = ()
    long_functions: tuple[LongFunction, ...] = ()

    @property
    def composite_score(self) -> float:
        """Scalar ranking input: cognitive complexity plus half the length penalty."""
        return self.cognitive_complexity + 0.5 * self.length_penalty


@dataclass(frozen=True)
class AnalysisResult:
    """Everything the reporting layer needs about one file."""

    metrics: MetricsBundle
    violations: tuple[Violation, ...]
    rank: Rank
    rank_description: str
    suggestions: tuple[str, ...] = ()
    file_path: str | None = None
    locale: str = field(default="en", compare=False)

    @property
    def cyclomatic_complexity(self) -> int:
        return self.metrics.cyclomatic_complexity

    @property
    def cognitive_complexity(self) -> int:
        return self.metrics.cognitive_complexity

    @property
    def max_nesting_depth(self) -> int:
        return self.metrics.max_nesting_depth

    @property
    def length_penalty(self) -> int:
        return self.metrics.length_penalty

    @property
    def composite_score(self) -> float:
        return self.metrics.composite_score

    @property
    def hotspots(self) -> tuple[Hotspot, ...]:
        return self.metrics.hotspots

    @property
    def long_functions(self) -> tuple[LongFunction, ...]:
        return self.metrics.long_functions

    @property
    def violation_count(self) -> int:
        return len(self.violations)

    def to_dict(self) -> dict[str, Any]:
        """Flatten the result for JSON output.

        Returns:
            Dictionary with plain str/int/float/list values
        """
        return {
            "file_path": self.file_path,
            "rank": self.rank.value,
            "rank_description": self.rank_description,
            "composite_score": self.composite_score,
            "cyclomatic_complexity": self.cyclomatic_complexity,
            "cognitive_complexity": self.cognitive_complexity,
            "max_nesting_depth": self.max_nesting_depth,
            "length_penalty": self.length_penalty,
            "violation_count": self.violation_count,
            "violations": [v.to_dict() for v in self.violations],
            "hotspots": [h.to_dict() for h in self.hotspots],
            "long_functions": [f.to_dict() for f in self.long_functions],
            "suggestions": list(self.suggestions),
        }
