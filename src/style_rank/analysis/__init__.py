"""Style analysis engine.

This module turns a syntax tree of one source file into quality signals:
complexity metrics, style rule violations, a rank and remediation
suggestions.

Key Components:
    - SyntaxNode: Language-neutral syntax tree node
    - TreeWalker: Single-pass traversal dispatching to collectors
    - CyclomaticComplexityCollector / CognitiveComplexityCollector /
      NestingDepthCollector / FunctionLengthCollector: Complexity metrics
    - RuleChecker: The four style rules
    - assign_rank: Composite score + violation count to a rank
    - generate_suggestions: Ordered remediation hints
    - StyleAnalyzer: Facade running all of the above

Example:
    from style_rank.analysis import StyleAnalyzer
    from style_rank.analysis import syntax as s

    tree = s.program(
        s.function(
            "check",
            [s.identifier("a"), s.identifier("b")],
            s.block(s.if_statement(s.binary("==", s.identifier("a"), s.identifier("b")),
                                   s.block())),
            line=1,
            end_line=3,
        )
    )
    result = StyleAnalyzer().analyze_tree(tree)
    assert result.violations[0].rule == "loose-equality"
"""

from .analyzer import StyleAnalyzer, analyze
from .collectors import (
    CognitiveComplexityCollector,
    CollectorContext,
    CyclomaticComplexityCollector,
    FunctionLengthCollector,
    FunctionScope,
    MetricCollector,
    NestingDepthCollector,
    TreeWalker,
)
from .messages import Messages, get_messages
from .metrics import AnalysisResult, Hotspot, LongFunction, MetricsBundle, Violation
from .ranking import Rank, assign_complexity_rank, assign_rank, get_rank_description
from .rules import RULE_CATALOG, RuleChecker
from .suggestions import generate_suggestions
from .syntax import NodeKind, SyntaxNode

__all__ = [
    # Facade
    "StyleAnalyzer",
    "analyze",
    # Syntax tree
    "NodeKind",
    "SyntaxNode",
    # Traversal and collectors
    "CollectorContext",
    "FunctionScope",
    "MetricCollector",
    "TreeWalker",
    "CognitiveComplexityCollector",
    "CyclomaticComplexityCollector",
    "NestingDepthCollector",
    "FunctionLengthCollector",
    # Rules
    "RULE_CATALOG",
    "RuleChecker",
    # Results
    "AnalysisResult",
    "Hotspot",
    "LongFunction",
    "MetricsBundle",
    "Violation",
    # Ranking
    "Rank",
    "assign_rank",
    "assign_complexity_rank",
    "get_rank_description",
    # Suggestions and messages
    "generate_suggestions",
    "Messages",
    "get_messages",
]
