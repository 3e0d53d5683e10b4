"""Watch command for Style Rank CLI."""

import asyncio
from pathlib import Path

import typer
from loguru import logger
from rich.markup import escape

from ...analysis.analyzer import StyleAnalyzer
from ...analysis.metrics import AnalysisResult
from ...analysis.reporters import format_status
from ...config.defaults import DEFAULT_CONFIG_FILENAME, DEFAULT_DEBOUNCE_SECONDS
from ...core.exceptions import StyleRankError
from ...core.watcher import FileWatcher
from ..output import console, print_error, print_info, print_warning, setup_logging
from .analyze import resolve_config


def watch(
    path: Path = typer.Argument(
        Path("."),
        help="Directory to watch",
        exists=True,
        file_okay=False,
        dir_okay=True,
    ),
    config_file: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help=f"Threshold configuration file (default: ./{DEFAULT_CONFIG_FILENAME})",
        exists=True,
        dir_okay=False,
    ),
    locale: str | None = typer.Option(
        None, "--locale", "-l", help="Message language (en, ko)"
    ),
    debounce: float = typer.Option(
        DEFAULT_DEBOUNCE_SECONDS,
        "--debounce",
        help="Seconds to wait for saves to settle before analyzing",
        min=0.0,
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Show debug logging"
    ),
) -> None:
    """👀 Re-analyze files every time they are saved.

    Prints the rank and suggestions of each saved JavaScript/TypeScript file.
    Press Ctrl+C to stop.
    """
    setup_logging(verbose)

    try:
        config = resolve_config(config_file, locale)
        analyzer = StyleAnalyzer(config)
    except StyleRankError as e:
        print_error(str(e))
        raise typer.Exit(1)

    watcher = FileWatcher(
        path.resolve(),
        analyzer,
        on_result=print_saved_result,
        on_error=lambda file_path, e: print_warning(f"{file_path}: {e}"),
        debounce_delay=debounce,
    )

    try:
        asyncio.run(_run(watcher))
    except KeyboardInterrupt:
        print_info("Stopped watching")


async def _run(watcher: FileWatcher) -> None:
    async with watcher:
        print_info(f"Watching {watcher.root} (Ctrl+C to stop)")
        while True:
            await asyncio.sleep(1)


def print_saved_result(result: AnalysisResult) -> None:
    status = format_status(result)
    style = "bold red" if status.warning else "bold"
    console.print(
        f"[{style}]{status.text}[/{style}]  {escape(result.file_path or '')}",
        highlight=False,
    )
    for suggestion in result.suggestions:
        console.print(f"  • {suggestion}", markup=False, highlight=False)
    logger.debug(f"Reported {result.file_path}: {result.rank.value}")
