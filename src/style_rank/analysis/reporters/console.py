"""Console reporter for style analysis results."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..messages import get_messages
from ..ranking import Rank
from ..suggestions import top_hotspots
from .status import NAVIGATION_HOTSPOTS, NAVIGATION_VIOLATIONS
from .text import RANK_EMOJI

if TYPE_CHECKING:
    from ..metrics import AnalysisResult

RANK_COLORS: dict[Rank, str] = {
    Rank.S: "bright_green",
    Rank.A: "green",
    Rank.B: "blue",
    Rank.C: "yellow",
    Rank.D: "orange1",
    Rank.F: "red",
}


class ConsoleReporter:
    """Console reporter for displaying analysis results in terminal."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def print_result(self, result: AnalysisResult) -> None:
        """Print the full report for one file.

        Args:
            result: Analysis result to display
        """
        msg = get_messages(result.locale)
        color = RANK_COLORS[result.rank]

        self.console.print()
        self.console.print(f"[bold blue]📊 {msg('report.title')}[/bold blue]")
        if result.file_path:
            self.console.print(f"[dim]{escape(result.file_path)}[/dim]")
        self.console.print("━" * 50)
        self.console.print(
            f"{RANK_EMOJI[result.rank]} [bold {color}]"
            + escape(
                msg(
                    "report.rank",
                    rank=result.rank.value,
                    description=result.rank_description,
                )
            )
            + f"[/bold {color}]"
        )
        self.console.print()

        self.print_metrics(result)
        self.print_hotspots(result)
        self.print_long_functions(result)
        self.print_violations(result)
        self.print_suggestions(result)
        self.console.print("━" * 50)

    def print_metrics(self, result: AnalysisResult) -> None:
        msg = get_messages(result.locale)
        self.console.print(f"[bold]📈 {msg('report.complexity')}[/bold]")

        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right")
        table.add_row(msg("report.composite"), f"{result.composite_score:.1f}")
        table.add_row(msg("report.cyclomatic"), str(result.cyclomatic_complexity))
        table.add_row(msg("report.cognitive"), str(result.cognitive_complexity))
        table.add_row(msg("report.nesting"), str(result.max_nesting_depth))
        table.add_row(msg("report.length-penalty"), str(result.length_penalty))
        self.console.print(table)
        self.console.print()

    def print_hotspots(self, result: AnalysisResult) -> None:
        if not result.hotspots:
            return
        msg = get_messages(result.locale)
        self.console.print(f"[bold]🔥 {msg('report.hotspots')}[/bold]")
        for index, hotspot in enumerate(
            top_hotspots(result.hotspots, NAVIGATION_HOTSPOTS), 1
        ):
            function = f" ({escape(hotspot.function_name)})" if hotspot.function_name else ""
            self.console.print(
                f"  {index}. {msg.kind_label(hotspot.kind)}{function} - "
                f"{msg('report.nesting-level', level=hotspot.nesting_level)}"
            )
            self._print_location(result, hotspot.line)
        self.console.print()

    def print_long_functions(self, result: AnalysisResult) -> None:
        if not result.long_functions:
            return
        msg = get_messages(result.locale)
        self.console.print(f"[bold]📏 {msg('report.long-functions')}[/bold]")
        for index, func in enumerate(result.long_functions, 1):
            self.console.print(
                f"  {index}. {escape(func.name)} ({msg('report.lines', count=func.length)})"
            )
            self._print_location(result, func.start_line)
        self.console.print()

    def print_violations(self, result: AnalysisResult) -> None:
        if not result.violations:
            return
        msg = get_messages(result.locale)
        self.console.print(
            f"[bold]🧹 {escape(msg('report.violations', count=result.violation_count))}[/bold]"
        )
        for index, violation in enumerate(result.violations[:NAVIGATION_VIOLATIONS], 1):
            self.console.print(
                f"  {index}. [yellow]{escape(violation.message)}[/yellow] "
                f"[dim]({violation.rule})[/dim]"
            )
            self._print_location(result, violation.line)
        hidden = result.violation_count - NAVIGATION_VIOLATIONS
        if hidden > 0:
            self.console.print(f"  {escape(msg('report.more', count=hidden))}")
        self.console.print()

    def print_suggestions(self, result: AnalysisResult) -> None:
        msg = get_messages(result.locale)
        self.console.print(f"[bold]💡 {msg('report.suggestions')}[/bold]")
        for suggestion in result.suggestions:
            self.console.print(f"  • {escape(suggestion)}")
        self.console.print()

    def print_summary(self, results: Sequence[AnalysisResult], locale: str = "en") -> None:
        """Print a one-row-per-file table for a directory analysis.

        Args:
            results: Results in display order
            locale: Locale for headings
        """
        msg = get_messages(locale)
        self.console.print(f"\n[bold blue]📊 {msg('report.title')}[/bold blue]")
        self.console.print(msg("report.summary", count=len(results)))

        table = Table(show_header=True, header_style="bold cyan", box=None)
        table.add_column(msg("report.file"), style="cyan")
        table.add_column(msg("report.rank-column"), justify="center", width=6)
        table.add_column(msg("report.composite"), justify="right")
        table.add_column(msg("report.cyclomatic"), justify="right")
        table.add_column(msg("report.violations-column"), justify="right")

        for result in results:
            color = RANK_COLORS[result.rank]
            table.add_row(
                escape(result.file_path or "-"),
                f"[{color}]{result.rank.value}[/{color}]",
                f"{result.composite_score:.1f}",
                str(result.cyclomatic_complexity),
                str(result.violation_count),
            )

        self.console.print(table)
        self.console.print()

    def _print_location(self, result: AnalysisResult, line: int | None) -> None:
        if result.file_path and line:
            self.console.print(f"     [dim]at {escape(result.file_path)}:{line}:1[/dim]")
