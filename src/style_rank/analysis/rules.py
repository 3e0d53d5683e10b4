"""Clean code rule catalog.

Four independent rules, always reported in this catalog order:

1. ``loose-equality``: ``==`` / ``!=`` instead of ``===`` / ``!==``
2. ``parameter-as-flag``: ``if (param)`` on a bare parameter of an enclosing
   function (boolean flag argument)
3. ``magic-number``: numeric literals other than 0, 1, -1 outside member
   access, object property and array element positions
4. ``max-parameters``: functions taking more than 5 parameters

Each rule is a collector for :class:`TreeWalker`, so all four share one
traversal. Within a rule, violations keep traversal order; across rules the
list is concatenated by catalog order, never re-sorted by line.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from .collectors.base import CollectorContext, TreeWalker
from .messages import Messages, get_messages
from .metrics import Violation
from .syntax import NodeKind, SyntaxNode

if TYPE_CHECKING:
    from ..config.thresholds import RuleThresholds

LOOSE_EQUALITY = "loose-equality"
PARAMETER_AS_FLAG = "parameter-as-flag"
MAGIC_NUMBER = "magic-number"
MAX_PARAMETERS = "max-parameters"

RULE_CATALOG: tuple[str, ...] = (
    LOOSE_EQUALITY,
    PARAMETER_AS_FLAG,
    MAGIC_NUMBER,
    MAX_PARAMETERS,
)


class _Rule:
    rule_id: str = ""

    def __init__(self, messages: Messages) -> None:
        self.messages = messages
        self._violations: list[Violation] = []

    @property
    def name(self) -> str:
        return self.rule_id

    @property
    def violations(self) -> list[Violation]:
        return list(self._violations)

    def _report(self, node: SyntaxNode, **kwargs: object) -> None:
        self._violations.append(
            Violation(
                rule=self.rule_id,
                message=self.messages(f"violation.{self.rule_id}", **kwargs),
                line=node.start_line,
            )
        )

    def reset(self) -> None:
        self._violations.clear()


class LooseEqualityRule(_Rule):
    """Flags ``==`` and ``!=``."""

    rule_id = LOOSE_EQUALITY
    STRICT_COUNTERPARTS = {"==": "===", "!=": "!=="}

    def enter_binary_expression(
        self, node: SyntaxNode, context: CollectorContext
    ) -> None:
        strict = self.STRICT_COUNTERPARTS.get(node.operator or "")
        if strict is not None:
            self._report(node, operator=node.operator, strict=strict)


class ParameterFlagRule(_Rule):
    """Flags if-statements testing a bare parameter of an enclosing function.

    An if-statement inside a nested function is checked against the
    parameters of every enclosing function, but yields one violation at most.
    """

    rule_id = PARAMETER_AS_FLAG

    def enter_if_statement(self, node: SyntaxNode, context: CollectorContext) -> None:
        test = node.test
        if test is None or test.kind is not NodeKind.IDENTIFIER or not test.name:
            return
        if any(test.name in scope.param_names for scope in context.enclosing_functions()):
            self._report(node, name=test.name)


class MagicNumberRule(_Rule):
    """Flags unexplained numeric literals."""

    rule_id = MAGIC_NUMBER
    EXEMPT_PARENTS = frozenset(
        {
            NodeKind.MEMBER_EXPRESSION,
            NodeKind.OBJECT_PROPERTY,
            NodeKind.ARRAY_EXPRESSION,
        }
    )

    def __init__(
        self, messages: Messages, allowed_numbers: Iterable[float] = (0, 1, -1)
    ) -> None:
        super().__init__(messages)
        self.allowed_numbers = frozenset(allowed_numbers)

    def enter_numeric_literal(
        self, node: SyntaxNode, context: CollectorContext
    ) -> None:
        if node.value is None or node.value in self.allowed_numbers:
            return
        if node.parent is not None and node.parent.kind in self.EXEMPT_PARENTS:
            return
        self._report(node, value=format_number(node.value))


class MaxParametersRule(_Rule):
    """Flags functions with too many parameters."""

    rule_id = MAX_PARAMETERS

    def __init__(self, messages: Messages, max_parameters: int = 5) -> None:
        super().__init__(messages)
        self.max_parameters = max_parameters

    def _check(self, node: SyntaxNode, context: CollectorContext) -> None:
        count = len(node.params)
        if count > self.max_parameters:
            self._report(
                node,
                name=node.name or self.messages.anonymous,
                count=count,
                limit=self.max_parameters,
            )

    enter_function_declaration = _check
    enter_function_expression = _check
    enter_arrow_function = _check
    enter_method_definition = _check


def format_number(value: float | int) -> str:
    """Render a literal value the way it would read in source."""
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return str(value)


class RuleChecker:
    """Runs the rule catalog over a syntax tree."""

    def __init__(
        self,
        thresholds: RuleThresholds | None = None,
        messages: Messages | None = None,
    ) -> None:
        if thresholds is None:
            from ..config.thresholds import RuleThresholds

            thresholds = RuleThresholds()
        self.thresholds = thresholds
        self.messages = messages or get_messages()

    def create_rules(self) -> list[_Rule]:
        """Fresh rule instances in catalog order."""
        return [
            LooseEqualityRule(self.messages),
            ParameterFlagRule(self.messages),
            MagicNumberRule(self.messages, self.thresholds.allowed_numbers),
            MaxParametersRule(self.messages, self.thresholds.max_parameters),
        ]

    @staticmethod
    def collect(rules: Sequence[_Rule]) -> list[Violation]:
        """Concatenate violations of already-walked rules in catalog order."""
        ordered = sorted(rules, key=lambda rule: RULE_CATALOG.index(rule.rule_id))
        return [violation for rule in ordered for violation in rule.violations]

    def check(self, tree: SyntaxNode) -> list[Violation]:
        """Check ``tree`` against every rule.

        Args:
            tree: Root of the syntax tree

        Returns:
            Violations grouped by rule in catalog order
        """
        rules = self.create_rules()
        TreeWalker(rules).walk(tree)
        return self.collect(rules)
