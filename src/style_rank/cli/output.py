"""Console output helpers for the Style Rank CLI."""

import json
import sys
from typing import Any

from loguru import logger
from rich.console import Console
from rich.markup import escape

console = Console()


def setup_logging(verbose: bool = False) -> None:
    """Route loguru output to stderr, WARNING by default, DEBUG when verbose."""
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else "WARNING",
        format="<level>{level: <8}</level> | {name}:{function} - {message}",
    )


def print_error(message: str) -> None:
    console.print(f"[bold red]✗[/bold red] {escape(message)}")


def print_warning(message: str) -> None:
    console.print(f"[yellow]⚠[/yellow] {escape(message)}")


def print_info(message: str) -> None:
    console.print(f"[blue]ℹ[/blue] {escape(message)}")


def print_json(data: Any) -> None:
    """Write JSON to stdout without rich markup or wrapping."""
    console.out(json.dumps(data, indent=2, ensure_ascii=False), highlight=False)
