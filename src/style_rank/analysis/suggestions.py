"""Remediation suggestions for an analysis result."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

from .messages import get_messages
from .metrics import AnalysisResult, Hotspot

if TYPE_CHECKING:
    from ..config.thresholds import ThresholdConfig


def top_hotspots(hotspots: tuple[Hotspot, ...] | list[Hotspot], limit: int) -> list[Hotspot]:
    """Deepest hotspots first; ties keep source order."""
    return sorted(hotspots, key=lambda h: h.nesting_level, reverse=True)[:limit]


def generate_suggestions(
    result: AnalysisResult, config: ThresholdConfig | None = None
) -> list[str]:
    """Build the ordered list of remediation suggestions.

    Priority order:
    1. Each of the deepest hotspots (up to ``max_hotspot_suggestions``)
    2. Otherwise, a deep-nesting warning when max nesting depth is high
    3. One "split it" suggestion per long function
    4. A generic "split logic" suggestion for high cognitive complexity,
       only when no hotspot was listed
    5. One aggregated suggestion per violated rule, in catalog order
    6. A clean-code message when nothing else applies

    Args:
        result: Analysis result (metrics, violations, rank)
        config: Thresholds; defaults when omitted

    Returns:
        Suggestions in display order, never empty
    """
    if config is None:
        from ..config.thresholds import ThresholdConfig

        config = ThresholdConfig()

    msg = get_messages(result.locale)
    complexity = config.complexity
    suggestions: list[str] = []

    hotspots = top_hotspots(result.hotspots, complexity.max_hotspot_suggestions)
    for hotspot in hotspots:
        kind = msg.kind_label(hotspot.kind)
        if hotspot.function_name:
            suggestions.append(
                msg(
                    "suggest.hotspot",
                    kind=kind,
                    function=hotspot.function_name,
                    line=hotspot.line,
                    level=hotspot.nesting_level,
                )
            )
        else:
            suggestions.append(
                msg(
                    "suggest.hotspot.module",
                    kind=kind,
                    line=hotspot.line,
                    level=hotspot.nesting_level,
                )
            )

    if not hotspots and result.max_nesting_depth >= complexity.deep_nesting_warning:
        suggestions.append(msg("suggest.deep-nesting", depth=result.max_nesting_depth))

    for func in result.long_functions:
        suggestions.append(
            msg(
                "suggest.long-function",
                name=func.name,
                length=func.length,
                start=func.start_line,
                end=func.end_line,
                limit=complexity.max_function_lines,
            )
        )

    if result.cognitive_complexity > complexity.cognitive_split and not hotspots:
        suggestions.append(
            msg("suggest.cognitive", complexity=result.cognitive_complexity)
        )

    # Counter preserves first-seen order, which is catalog order
    by_rule = Counter(v.rule for v in result.violations)
    for rule, count in by_rule.items():
        suggestions.append(
            msg(f"suggest.{rule}", count=count, limit=config.rules.max_parameters)
        )

    if not suggestions:
        suggestions.append(msg("suggest.clean"))

    return suggestions
