"""Analyze command for Style Rank CLI."""

from enum import Enum
from pathlib import Path

import typer
from loguru import logger
from rich.markup import escape

from ...analysis.analyzer import StyleAnalyzer
from ...analysis.metrics import AnalysisResult
from ...analysis.ranking import Rank
from ...analysis.reporters import (
    ConsoleReporter,
    build_navigation_items,
    format_detailed_report,
    format_status,
)
from ...config.defaults import DEFAULT_CONFIG_FILENAME, DEFAULT_IGNORE_PATTERNS
from ...config.thresholds import ThresholdConfig
from ...core.exceptions import StyleRankError
from ...parsers.registry import ParserRegistry
from ..output import console, print_error, print_json, setup_logging

# Exit code when a file reaches the --fail-on rank
EXIT_RANK_THRESHOLD = 2


class OutputFormat(str, Enum):
    REPORT = "report"
    STATUS = "status"
    LIST = "list"
    TEXT = "text"


def analyze(
    path: Path = typer.Argument(
        ...,
        help="Source file or directory to analyze",
        exists=True,
        readable=True,
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output results in JSON format",
        rich_help_panel="📊 Display Options",
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.REPORT,
        "--format",
        "-f",
        help="Human-readable output layout",
        rich_help_panel="📊 Display Options",
    ),
    config_file: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help=f"Threshold configuration file (default: ./{DEFAULT_CONFIG_FILENAME})",
        exists=True,
        dir_okay=False,
        rich_help_panel="🔧 Configuration",
    ),
    locale: str | None = typer.Option(
        None,
        "--locale",
        "-l",
        help="Message language (en, ko)",
        rich_help_panel="🔧 Configuration",
    ),
    file_length: bool | None = typer.Option(
        None,
        "--file-length/--no-file-length",
        help="Also hold the whole file's length against the function length limit",
        rich_help_panel="🔧 Configuration",
    ),
    fail_on: Rank | None = typer.Option(
        None,
        "--fail-on",
        help="Exit with code 2 if any file gets this rank or worse",
        case_sensitive=False,
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Show debug logging"
    ),
) -> None:
    """📊 Analyze code complexity and clean code rules.

    Ranks each JavaScript/TypeScript file from S (best) to F (worst) based
    on cognitive complexity, function length and style violations.

    [bold cyan]Examples:[/bold cyan]

    [green]Analyze a single file:[/green]
        $ style-rank analyze src/app.js

    [green]Analyze a directory, fail CI on rank D or worse:[/green]
        $ style-rank analyze src --format status --fail-on D

    [green]Export to JSON:[/green]
        $ style-rank analyze src/app.ts --json > analysis.json
    """
    setup_logging(verbose)

    try:
        config = resolve_config(config_file, locale, file_length)
        analyzer = StyleAnalyzer(config)
        results = run_analysis(path, analyzer)
    except StyleRankError as e:
        logger.error(f"Analysis failed: {e}")
        if json_output:
            print_json({"error": str(e)})
        else:
            print_error(str(e))
        raise typer.Exit(1)

    if json_output:
        if path.is_file():
            print_json(results[0].to_dict())
        else:
            print_json(
                {
                    "root": str(path),
                    "file_count": len(results),
                    "files": [result.to_dict() for result in results],
                }
            )
    else:
        render_results(results, output_format, config)

    if fail_on is not None and any(result.rank >= fail_on for result in results):
        raise typer.Exit(EXIT_RANK_THRESHOLD)


def resolve_config(
    config_file: Path | None,
    locale: str | None = None,
    file_length: bool | None = None,
) -> ThresholdConfig:
    """Load thresholds and apply command line overrides.

    Raises:
        ConfigError: If the configuration file is invalid
    """
    config = ThresholdConfig.load(config_file or Path.cwd() / DEFAULT_CONFIG_FILENAME)
    if locale is not None:
        config.locale = locale
    if file_length is not None:
        config.complexity.include_file_length = file_length
    return config


def find_source_files(root: Path, registry: ParserRegistry) -> list[Path]:
    """Supported source files under ``root``, ignored directories skipped."""
    return sorted(
        path
        for path in root.rglob("*")
        if path.is_file()
        and registry.is_supported(path)
        and not any(
            part in DEFAULT_IGNORE_PATTERNS for part in path.relative_to(root).parts
        )
    )


def run_analysis(path: Path, analyzer: StyleAnalyzer) -> list[AnalysisResult]:
    """Analyze a file, or every supported file below a directory.

    A single file's failure propagates. In a directory, files that fail are
    logged and skipped.

    Raises:
        StyleRankError: If a single file fails, or a directory holds no
            supported files
    """
    if path.is_file():
        return [analyzer.analyze_file(path)]

    files = find_source_files(path, analyzer.registry)
    if not files:
        raise StyleRankError(f"No supported source files found in {path}")

    results = []
    for file_path in files:
        try:
            results.append(analyzer.analyze_file(file_path))
        except StyleRankError as e:
            logger.warning(f"Skipping {file_path}: {e}")
    logger.debug(f"Analyzed {len(results)} of {len(files)} files in {path}")
    return results


def render_results(
    results: list[AnalysisResult],
    output_format: OutputFormat,
    config: ThresholdConfig,
) -> None:
    if output_format is OutputFormat.REPORT:
        reporter = ConsoleReporter(console)
        for result in results:
            reporter.print_result(result)
        if len(results) > 1:
            reporter.print_summary(results, config.locale)
    elif output_format is OutputFormat.STATUS:
        for result in results:
            status = format_status(result)
            style = "bold red" if status.warning else "bold"
            console.print(
                f"[{style}]{status.text}[/{style}]  {escape(result.file_path or '')}",
                markup=True,
                highlight=False,
            )
    elif output_format is OutputFormat.LIST:
        for result in results:
            print_navigation_list(result, config)
    else:
        for result in results:
            if len(results) > 1:
                console.print(f"[bold]{result.file_path}[/bold]")
            console.out(format_detailed_report(result), highlight=False)
            console.out("")


def print_navigation_list(result: AnalysisResult, config: ThresholdConfig) -> None:
    for item in build_navigation_items(result, config):
        if item.separator:
            console.out(f"\n{item.label}", highlight=False)
            continue
        line = item.label
        if item.description:
            line += f"  {item.description}"
        if item.location:
            line += f"  [{item.location}]"
        console.out(line, highlight=False)
        if item.detail:
            console.out(f"    {item.detail}", highlight=False)
