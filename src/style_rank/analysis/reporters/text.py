"""Plain-text report formatting."""

from __future__ import annotations

from collections.abc import Sequence

from ..messages import get_messages
from ..metrics import AnalysisResult, Violation
from ..ranking import Rank

RANK_EMOJI: dict[Rank, str] = {
    Rank.S: "🏆",
    Rank.A: "⭐",
    Rank.B: "👍",
    Rank.C: "⚠️",
    Rank.D: "❌",
    Rank.F: "🚨",
}

DETAILED_REPORT_VIOLATIONS = 5


def _line_info(violation: Violation) -> str:
    return f" (Line {violation.line})" if violation.line else ""


def format_violations(violations: Sequence[Violation], locale: str = "en") -> str:
    """Numbered, one-per-line list of violations.

    Returns:
        The list, or the localized "no violations" text when empty
    """
    if not violations:
        return get_messages(locale)("report.no-violations")
    return "\n".join(
        f"{index}. {v.message}{_line_info(v)}"
        for index, v in enumerate(violations, 1)
    )


def format_detailed_report(result: AnalysisResult) -> str:
    """Compact report: rank header, first violations, suggestions."""
    msg = get_messages(result.locale)
    lines = [
        f"{RANK_EMOJI[result.rank]} "
        + msg("report.rank", rank=result.rank.value, description=result.rank_description)
    ]

    if result.violation_count > 0:
        lines.append("")
        lines.append(f"🧹 {msg('report.violations', count=result.violation_count)}")
        shown = result.violations[:DETAILED_REPORT_VIOLATIONS]
        for index, violation in enumerate(shown, 1):
            lines.append(f"  {index}. {violation.message}{_line_info(violation)}")
        hidden = result.violation_count - len(shown)
        if hidden > 0:
            lines.append(f"  {msg('report.more', count=hidden)}")

    if result.suggestions:
        lines.append("")
        lines.append(f"💡 {msg('report.suggestions')}")
        lines.extend(f"  • {suggestion}" for suggestion in result.suggestions)

    return "\n".join(lines)
