"""Status line and navigation list for editor-style integrations.

Both are plain data: whoever renders them (a terminal, an editor plugin)
decides how icons, warning colors and jump-to-location are displayed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..messages import get_messages
from ..metrics import AnalysisResult
from ..ranking import Rank, assign_complexity_rank
from ..suggestions import top_hotspots
from .text import RANK_EMOJI

if TYPE_CHECKING:
    from ...config.thresholds import ThresholdConfig

RANK_ICONS: dict[Rank, str] = {
    Rank.S: "$(star-full)",
    Rank.A: "$(star)",
    Rank.B: "$(check)",
    Rank.C: "$(warning)",
    Rank.D: "$(alert)",
    Rank.F: "$(error)",
}

WARNING_RANKS = frozenset({Rank.D, Rank.F})

NAVIGATION_HOTSPOTS = 5
NAVIGATION_VIOLATIONS = 10


@dataclass(frozen=True)
class StatusLine:
    """Compact rank indicator.

    Attributes:
        text: ``"<icon> Rank: <R>"``
        tooltip: Cyclomatic complexity with its grade, and the rank description
        warning: True for ranks that should be highlighted (D, F)
    """

    text: str
    tooltip: str
    warning: bool = False


def format_status(result: AnalysisResult) -> StatusLine:
    """Build the status indicator for a result."""
    msg = get_messages(result.locale)
    return StatusLine(
        text=f"{RANK_ICONS[result.rank]} Rank: {result.rank.value}",
        tooltip=msg(
            "status.tooltip",
            complexity=result.cyclomatic_complexity,
            grade=assign_complexity_rank(result.cyclomatic_complexity).value,
            description=result.rank_description,
        ),
        warning=result.rank in WARNING_RANKS,
    )


@dataclass(frozen=True)
class NavigableItem:
    """One entry of a selectable result list.

    Attributes:
        label: Main text
        description: Secondary text shown beside the label
        detail: Tertiary text shown below the label
        file_path: File to open when selected
        line: 1-based line to jump to when selected
        separator: True for section headers, which are not selectable
    """

    label: str
    description: str | None = None
    detail: str | None = None
    file_path: str | None = None
    line: int | None = None
    separator: bool = False

    @property
    def location(self) -> str | None:
        """``path:line`` when the item can be navigated to."""
        if self.file_path and self.line:
            return f"{self.file_path}:{self.line}"
        return None


def build_navigation_items(
    result: AnalysisResult, config: ThresholdConfig | None = None
) -> list[NavigableItem]:
    """Build the ordered navigation list for a result.

    Order: summary, hotspots (deepest first), long functions, violations
    (with a trailing "N more" entry past the limit). When there is nothing
    to improve, a single clean-code entry follows the summary.

    Args:
        result: Analysis result
        config: Thresholds used in hints, defaults when omitted

    Returns:
        Items in display order, the summary first
    """
    if config is None:
        from ...config.thresholds import ThresholdConfig

        config = ThresholdConfig()

    msg = get_messages(result.locale)
    items = [
        NavigableItem(
            label=f"{RANK_EMOJI[result.rank]} {msg('report.overall')}",
            description=f"{result.rank.value} - {result.rank_description}",
            detail=" | ".join(
                [
                    f"{msg('report.composite')}: {result.composite_score:.1f}",
                    f"{msg('report.cognitive')}: {result.cognitive_complexity}",
                    f"{msg('report.nesting')}: {result.max_nesting_depth}",
                    msg("report.violations", count=result.violation_count),
                ]
            ),
        )
    ]

    if result.hotspots:
        items.append(NavigableItem(label=f"🔥 {msg('report.hotspots')}", separator=True))
        for hotspot in top_hotspots(result.hotspots, NAVIGATION_HOTSPOTS):
            function = f" ({hotspot.function_name})" if hotspot.function_name else ""
            items.append(
                NavigableItem(
                    label=f"$(warning) {msg.kind_label(hotspot.kind)}{function}",
                    description=msg("report.nesting-level", level=hotspot.nesting_level),
                    detail=f"{msg('report.line', line=hotspot.line)} - {msg('report.flatten-hint')}",
                    file_path=result.file_path,
                    line=hotspot.line,
                )
            )

    if result.long_functions:
        items.append(
            NavigableItem(label=f"📏 {msg('report.long-functions')}", separator=True)
        )
        for func in result.long_functions:
            line_range = msg("report.line-range", start=func.start_line, end=func.end_line)
            hint = msg("report.split-hint", limit=config.complexity.max_function_lines)
            items.append(
                NavigableItem(
                    label=f"$(symbol-method) {func.name}",
                    description=msg("report.lines", count=func.length),
                    detail=f"{line_range} - {hint}",
                    file_path=result.file_path,
                    line=func.start_line,
                )
            )

    if result.violations:
        items.append(
            NavigableItem(
                label=f"🧹 {msg('report.violations', count=result.violation_count)}",
                separator=True,
            )
        )
        for violation in result.violations[:NAVIGATION_VIOLATIONS]:
            items.append(
                NavigableItem(
                    label=f"$(error) {violation.message}",
                    description=(
                        msg("report.line", line=violation.line) if violation.line else None
                    ),
                    file_path=result.file_path,
                    line=violation.line,
                )
            )
        hidden = result.violation_count - NAVIGATION_VIOLATIONS
        if hidden > 0:
            items.append(
                NavigableItem(
                    label=msg("report.more", count=hidden),
                    description=msg("report.show-more"),
                )
            )

    if len(items) == 1:
        items.append(
            NavigableItem(
                label=f"$(check) {msg('report.clean')}",
                description=msg("report.clean-detail"),
            )
        )

    return items
