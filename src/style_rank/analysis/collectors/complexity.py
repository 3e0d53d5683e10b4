"""Complexity collectors: cyclomatic, cognitive (with hotspots), nesting depth.

Each collector keeps its own nesting counter in the walker's function scope,
keyed by the collector name, because the three metrics disagree on which
constructs nest: cognitive complexity exempts early returns and does not nest
ternaries or cases, nesting depth counts only ifs and loops.
"""

from __future__ import annotations

from ..metrics import Hotspot
from ..syntax import LOGICAL_OPERATORS, SyntaxNode, is_early_return
from .base import CollectorContext


class CyclomaticComplexityCollector:
    """McCabe cyclomatic complexity: 1 + number of decision points.

    Decision points, each +1 regardless of nesting: if-statement, ternary,
    ``&&``/``||``, non-default switch-case, for, while, catch.
    """

    def __init__(self) -> None:
        self._complexity = 1

    @property
    def name(self) -> str:
        return "cyclomatic_complexity"

    @property
    def complexity(self) -> int:
        return self._complexity

    def _decision_point(self, node: SyntaxNode, context: CollectorContext) -> None:
        self._complexity += 1

    enter_if_statement = _decision_point
    enter_conditional_expression = _decision_point
    enter_for_statement = _decision_point
    enter_while_statement = _decision_point
    enter_catch_clause = _decision_point

    def enter_logical_expression(
        self, node: SyntaxNode, context: CollectorContext
    ) -> None:
        if node.operator in LOGICAL_OPERATORS:
            self._complexity += 1

    def enter_switch_case(self, node: SyntaxNode, context: CollectorContext) -> None:
        if node.test is not None:
            self._complexity += 1

    def reset(self) -> None:
        self._complexity = 1


class CognitiveComplexityCollector:
    """Cognitive complexity with hotspot recording.

    Scoring:
    - if-statement: ``1 + nesting`` and nests its children, except an early
      return (single ``return`` body, no else) which adds a flat +1 and
      does not nest
    - ternary, non-default switch-case, catch: ``1 + nesting``, no nesting
    - loops (for, for-in, for-of, while, do-while): ``1 + nesting``, nests
    - ``&&``/``||``: flat +1

    Every nesting-scaled construct seen at ``hotspot_nesting`` or deeper is
    recorded as a :class:`Hotspot`. Recording never changes the score.
    """

    def __init__(self, hotspot_nesting: int = 2) -> None:
        self.hotspot_nesting = hotspot_nesting
        self._complexity = 0
        self._hotspots: list[Hotspot] = []

    @property
    def name(self) -> str:
        return "cognitive_complexity"

    @property
    def complexity(self) -> int:
        return self._complexity

    @property
    def hotspots(self) -> list[Hotspot]:
        return list(self._hotspots)

    def _structural(self, node: SyntaxNode, context: CollectorContext) -> None:
        level = context.nesting(self.name)
        self._complexity += 1 + level
        if level >= self.hotspot_nesting:
            self._hotspots.append(
                Hotspot(
                    kind=node.kind,
                    line=node.line,
                    nesting_level=level,
                    function_name=context.function_name,
                )
            )

    def enter_if_statement(self, node: SyntaxNode, context: CollectorContext) -> None:
        if is_early_return(node):
            self._complexity += 1
            return
        self._structural(node, context)
        context.enter_nesting(self.name)

    def exit_if_statement(self, node: SyntaxNode, context: CollectorContext) -> None:
        if not is_early_return(node):
            context.exit_nesting(self.name)

    def _enter_loop(self, node: SyntaxNode, context: CollectorContext) -> None:
        self._structural(node, context)
        context.enter_nesting(self.name)

    def _exit_loop(self, node: SyntaxNode, context: CollectorContext) -> None:
        context.exit_nesting(self.name)

    enter_for_statement = _enter_loop
    enter_for_in_statement = _enter_loop
    enter_for_of_statement = _enter_loop
    enter_while_statement = _enter_loop
    enter_do_while_statement = _enter_loop
    exit_for_statement = _exit_loop
    exit_for_in_statement = _exit_loop
    exit_for_of_statement = _exit_loop
    exit_while_statement = _exit_loop
    exit_do_while_statement = _exit_loop

    enter_conditional_expression = _structural
    enter_catch_clause = _structural

    def enter_switch_case(self, node: SyntaxNode, context: CollectorContext) -> None:
        if node.test is not None:
            self._structural(node, context)

    def enter_logical_expression(
        self, node: SyntaxNode, context: CollectorContext
    ) -> None:
        if node.operator in LOGICAL_OPERATORS:
            self._complexity += 1

    def reset(self) -> None:
        self._complexity = 0
        self._hotspots.clear()


class NestingDepthCollector:
    """Maximum nesting depth of ifs and loops within any function scope.

    Unlike cognitive complexity there is no early-return exemption here.
    """

    def __init__(self) -> None:
        self._max_depth = 0

    @property
    def name(self) -> str:
        return "max_nesting_depth"

    @property
    def max_depth(self) -> int:
        return self._max_depth

    def _enter(self, node: SyntaxNode, context: CollectorContext) -> None:
        depth = context.enter_nesting(self.name)
        self._max_depth = max(self._max_depth, depth)

    def _exit(self, node: SyntaxNode, context: CollectorContext) -> None:
        context.exit_nesting(self.name)

    enter_if_statement = _enter
    enter_for_statement = _enter
    enter_for_in_statement = _enter
    enter_for_of_statement = _enter
    enter_while_statement = _enter
    enter_do_while_statement = _enter
    exit_if_statement = _exit
    exit_for_statement = _exit
    exit_for_in_statement = _exit
    exit_for_of_statement = _exit
    exit_while_statement = _exit
    exit_do_while_statement = _exit

    def reset(self) -> None:
        self._max_depth = 0
