"""Metric collector implementations.

This module provides the traversal engine and the collectors that run on it.

Example:
    from style_rank.analysis.collectors import (
        CognitiveComplexityCollector,
        TreeWalker,
    )

    cognitive = CognitiveComplexityCollector()
    TreeWalker([cognitive]).walk(tree)
    print(cognitive.complexity, cognitive.hotspots)
"""

from .base import CollectorContext, FunctionScope, MetricCollector, TreeWalker
from .complexity import (
    CognitiveComplexityCollector,
    CyclomaticComplexityCollector,
    NestingDepthCollector,
)
from .length import FunctionLengthCollector

__all__ = [
    "CollectorContext",
    "FunctionScope",
    "MetricCollector",
    "TreeWalker",
    "CognitiveComplexityCollector",
    "CyclomaticComplexityCollector",
    "NestingDepthCollector",
    "FunctionLengthCollector",
]
