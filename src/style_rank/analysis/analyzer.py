"""Analysis facade: syntax tree in, ranked result out.

One call to :meth:`StyleAnalyzer.analyze_tree` creates fresh collectors and
rules, walks the tree once with all of them, and assembles the metrics,
violations, rank and suggestions into an :class:`AnalysisResult`. Nothing is
carried over between calls, so analyzing the same tree twice gives equal
results and concurrent analyses never share state.
"""

from __future__ import annotations

import dataclasses
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

from ..config.thresholds import ThresholdConfig
from ..core.exceptions import AnalysisError
from .collectors import (
    CognitiveComplexityCollector,
    CollectorContext,
    CyclomaticComplexityCollector,
    FunctionLengthCollector,
    NestingDepthCollector,
    TreeWalker,
)
from .messages import get_messages
from .metrics import AnalysisResult, MetricsBundle
from .ranking import assign_rank
from .rules import RuleChecker
from .suggestions import generate_suggestions
from .syntax import SyntaxNode

if TYPE_CHECKING:
    from ..parsers.registry import ParserRegistry


class StyleAnalyzer:
    """Computes metrics, violations and a rank for syntax trees and files."""

    def __init__(
        self,
        config: ThresholdConfig | None = None,
        registry: ParserRegistry | None = None,
    ) -> None:
        """Initialize analyzer.

        Args:
            config: Threshold configuration, defaults when omitted
            registry: Parser registry for source and file analysis, the
                global registry when omitted

        Raises:
            ConfigError: If the configured locale is not supported
        """
        self.config = config or ThresholdConfig()
        self.messages = get_messages(self.config.locale)
        self._registry = registry

    @property
    def registry(self) -> ParserRegistry:
        if self._registry is None:
            from ..parsers.registry import get_parser_registry

            self._registry = get_parser_registry()
        return self._registry

    def analyze_tree(
        self, tree: SyntaxNode, file_path: str | None = None
    ) -> AnalysisResult:
        """Analyze a syntax tree.

        Args:
            tree: Root node, normally of kind ``program``
            file_path: Carried into the result for reporting

        Returns:
            Frozen analysis result with suggestions
        """
        complexity = self.config.complexity
        cyclomatic = CyclomaticComplexityCollector()
        cognitive = CognitiveComplexityCollector(
            hotspot_nesting=complexity.hotspot_nesting
        )
        nesting = NestingDepthCollector()
        length = FunctionLengthCollector(
            max_lines=complexity.max_function_lines,
            penalty_step=complexity.length_penalty_step,
            include_file_length=complexity.include_file_length,
            anonymous_name=self.messages.anonymous,
        )
        rules = RuleChecker(self.config.rules, self.messages).create_rules()

        TreeWalker([cyclomatic, cognitive, nesting, length, *rules]).walk(
            tree, CollectorContext(file_path=file_path)
        )

        metrics = MetricsBundle(
            cyclomatic_complexity=cyclomatic.complexity,
            cognitive_complexity=cognitive.complexity,
            max_nesting_depth=nesting.max_depth,
            length_penalty=length.penalty,
            hotspots=tuple(cognitive.hotspots),
            long_functions=tuple(length.long_functions),
        )
        violations = tuple(RuleChecker.collect(rules))
        rank = assign_rank(metrics.composite_score, len(violations), self.config.ranking)

        result = AnalysisResult(
            metrics=metrics,
            violations=violations,
            rank=rank,
            rank_description=self.messages.rank_description(rank),
            file_path=file_path,
            locale=self.messages.locale,
        )
        result = dataclasses.replace(
            result, suggestions=tuple(generate_suggestions(result, self.config))
        )

        logger.debug(
            f"Analyzed {file_path or '<tree>'}: rank={rank.value} "
            f"score={metrics.composite_score} violations={len(violations)}"
        )
        return result

    def analyze_source(
        self, source: str, language: str = "javascript", file_path: str | None = None
    ) -> AnalysisResult:
        """Parse and analyze source text.

        Raises:
            ParsingError: If the source does not parse
            UnsupportedLanguageError: If the language has no parser
        """
        parser = self.registry.get_parser(language)
        tree = parser.parse(source, Path(file_path) if file_path else None)
        return self.analyze_tree(tree, file_path)

    def analyze_file(self, path: Path) -> AnalysisResult:
        """Read, parse and analyze one file.

        Args:
            path: Source file

        Returns:
            Analysis result carrying ``str(path)`` as its file path

        Raises:
            AnalysisError: If the file cannot be read
            ParsingError: If the file does not parse
            UnsupportedLanguageError: If the extension is not supported
        """
        language = self.registry.get_language_for_file(path)
        try:
            source = path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise AnalysisError(
                f"Failed to read {path}: {e}", {"path": str(path)}
            ) from e
        return self.analyze_source(source, language, str(path))


def analyze(tree: SyntaxNode, config: ThresholdConfig | None = None) -> AnalysisResult:
    """Analyze a syntax tree with a one-off :class:`StyleAnalyzer`."""
    return StyleAnalyzer(config).analyze_tree(tree)
