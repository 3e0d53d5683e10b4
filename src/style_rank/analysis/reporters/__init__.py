"""Reporters for style analysis results."""

from .console import ConsoleReporter
from .status import NavigableItem, StatusLine, build_navigation_items, format_status
from .text import format_detailed_report, format_violations

__all__ = [
    "ConsoleReporter",
    "NavigableItem",
    "StatusLine",
    "build_navigation_items",
    "format_status",
    "format_detailed_report",
    "format_violations",
]
