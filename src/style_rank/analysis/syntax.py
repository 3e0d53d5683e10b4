"""Syntax tree contract consumed by the metrics engine.

The engine never parses source itself. Front ends (see ``style_rank.parsers``)
normalize whatever their grammar produces into :class:`SyntaxNode` trees:
a kind tag, a line span, ordered children, and a handful of kind-specific
fields.

Role fields (``test``, ``consequent``, ``alternate``, ``body``, ``params``)
always point at nodes that are also in ``children``; traversal only follows
``children``. ``parent`` is a back-reference set when a node is attached and
is used for lookups only.

Example:
    tree = program(
        if_statement(
            identifier("ready", line=2),
            block(return_statement(line=3), line=2),
            line=2,
        ),
        line=1,
        end_line=4,
    )
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum


class NodeKind(str, Enum):
    """Node kinds understood by the collectors and rules."""

    PROGRAM = "program"
    BLOCK_STATEMENT = "block_statement"
    EXPRESSION_STATEMENT = "expression_statement"
    RETURN_STATEMENT = "return_statement"

    IF_STATEMENT = "if_statement"
    CONDITIONAL_EXPRESSION = "conditional_expression"
    LOGICAL_EXPRESSION = "logical_expression"
    BINARY_EXPRESSION = "binary_expression"
    UNARY_EXPRESSION = "unary_expression"
    SWITCH_CASE = "switch_case"
    FOR_STATEMENT = "for_statement"
    FOR_IN_STATEMENT = "for_in_statement"
    FOR_OF_STATEMENT = "for_of_statement"
    WHILE_STATEMENT = "while_statement"
    DO_WHILE_STATEMENT = "do_while_statement"
    CATCH_CLAUSE = "catch_clause"

    FUNCTION_DECLARATION = "function_declaration"
    FUNCTION_EXPRESSION = "function_expression"
    ARROW_FUNCTION = "arrow_function"
    METHOD_DEFINITION = "method_definition"

    NUMERIC_LITERAL = "numeric_literal"
    IDENTIFIER = "identifier"
    MEMBER_EXPRESSION = "member_expression"
    OBJECT_PROPERTY = "object_property"
    ARRAY_EXPRESSION = "array_expression"
    MARKUP_ELEMENT = "markup_element"

    OTHER = "other"


FUNCTION_KINDS = frozenset(
    {
        NodeKind.FUNCTION_DECLARATION,
        NodeKind.FUNCTION_EXPRESSION,
        NodeKind.ARROW_FUNCTION,
        NodeKind.METHOD_DEFINITION,
    }
)

LOOP_KINDS = frozenset(
    {
        NodeKind.FOR_STATEMENT,
        NodeKind.FOR_IN_STATEMENT,
        NodeKind.FOR_OF_STATEMENT,
        NodeKind.WHILE_STATEMENT,
        NodeKind.DO_WHILE_STATEMENT,
    }
)

LOGICAL_OPERATORS = frozenset({"&&", "||"})


@dataclass(eq=False)
class SyntaxNode:
    """A single node of a normalized syntax tree.

    Attributes:
        kind: Node kind tag
        start_line: 1-based first line, None when the front end has no span
        end_line: 1-based last line, None when unknown
        children: Ordered child nodes, the only edges traversal follows
        operator: Operator symbol for binary/logical/unary expressions
        name: Identifier name, or function name for function-like nodes
        value: Numeric value of a numeric literal
        test: Condition of an if/ternary/loop, or the case value of a switch-case
        consequent: Then-branch of an if/ternary
        alternate: Else-branch of an if/ternary
        body: Body of a function or loop
        params: Parameters of a function-like node
        source_type: Front end node type, kept for debugging
        parent: Enclosing node (lookups only)
    """

    kind: NodeKind
    start_line: int | None = None
    end_line: int | None = None
    children: list[SyntaxNode] = field(default_factory=list)
    operator: str | None = None
    name: str | None = None
    value: float | int | None = None
    test: SyntaxNode | None = None
    consequent: SyntaxNode | None = None
    alternate: SyntaxNode | None = None
    body: SyntaxNode | None = None
    params: list[SyntaxNode] = field(default_factory=list)
    source_type: str | None = None
    parent: SyntaxNode | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        # Role nodes missing from children are appended in source order
        roles = [*self.params, self.test, self.consequent, self.alternate, self.body]
        for role in roles:
            if role is not None and not any(role is c for c in self.children):
                self.children.append(role)
        for child in self.children:
            child.parent = self
        if self.end_line is None and self.start_line is not None:
            self.end_line = max(
                [self.start_line]
                + [c.end_line for c in self.children if c.end_line is not None]
            )

    @property
    def line(self) -> int:
        """Start line, or 0 when the span is unknown."""
        return self.start_line or 0

    @property
    def is_function(self) -> bool:
        return self.kind in FUNCTION_KINDS

    @property
    def length(self) -> int | None:
        """Inclusive line count, None without a complete span."""
        if self.start_line is None or self.end_line is None:
            return None
        return self.end_line - self.start_line + 1

    def walk(self) -> Iterator[SyntaxNode]:
        """Yield this node and all descendants depth-first, pre-order."""
        stack: list[SyntaxNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def contains(self, kind: NodeKind) -> bool:
        """Check whether this subtree holds a node of the given kind."""
        return any(node.kind is kind for node in self.walk())


def is_early_return(node: SyntaxNode) -> bool:
    """Check for ``if (x) return ...;`` with no else-branch.

    The consequent must be a single return statement, either bare or as the
    only statement of a block.
    """
    if node.kind is not NodeKind.IF_STATEMENT or node.alternate is not None:
        return False
    consequent = node.consequent
    if consequent is None:
        return False
    if consequent.kind is NodeKind.BLOCK_STATEMENT:
        return (
            len(consequent.children) == 1
            and consequent.children[0].kind is NodeKind.RETURN_STATEMENT
        )
    return consequent.kind is NodeKind.RETURN_STATEMENT


# =============================================================================
# Builders
# =============================================================================
#
# Thin constructors used by the parsers and by tests. ``line`` is the start
# line; ``end_line`` defaults to the furthest child end line.


def program(*body: SyntaxNode, line: int | None = 1, end_line: int | None = None) -> SyntaxNode:
    return SyntaxNode(NodeKind.PROGRAM, line, end_line, children=list(body))


def block(*statements: SyntaxNode, line: int | None = None, end_line: int | None = None) -> SyntaxNode:
    return SyntaxNode(NodeKind.BLOCK_STATEMENT, line, end_line, children=list(statements))


def expression_statement(expression: SyntaxNode, line: int | None = None) -> SyntaxNode:
    return SyntaxNode(
        NodeKind.EXPRESSION_STATEMENT, line or expression.start_line, children=[expression]
    )


def return_statement(argument: SyntaxNode | None = None, line: int | None = None) -> SyntaxNode:
    children = [argument] if argument is not None else []
    return SyntaxNode(NodeKind.RETURN_STATEMENT, line, children=children)


def if_statement(
    test: SyntaxNode,
    consequent: SyntaxNode,
    alternate: SyntaxNode | None = None,
    line: int | None = None,
    end_line: int | None = None,
) -> SyntaxNode:
    return SyntaxNode(
        NodeKind.IF_STATEMENT,
        line,
        end_line,
        test=test,
        consequent=consequent,
        alternate=alternate,
    )


def conditional(
    test: SyntaxNode,
    consequent: SyntaxNode,
    alternate: SyntaxNode,
    line: int | None = None,
) -> SyntaxNode:
    return SyntaxNode(
        NodeKind.CONDITIONAL_EXPRESSION,
        line,
        test=test,
        consequent=consequent,
        alternate=alternate,
    )


def logical(operator: str, left: SyntaxNode, right: SyntaxNode, line: int | None = None) -> SyntaxNode:
    return SyntaxNode(
        NodeKind.LOGICAL_EXPRESSION, line, operator=operator, children=[left, right]
    )


def binary(operator: str, left: SyntaxNode, right: SyntaxNode, line: int | None = None) -> SyntaxNode:
    return SyntaxNode(
        NodeKind.BINARY_EXPRESSION, line, operator=operator, children=[left, right]
    )


def unary(operator: str, argument: SyntaxNode, line: int | None = None) -> SyntaxNode:
    return SyntaxNode(
        NodeKind.UNARY_EXPRESSION, line, operator=operator, children=[argument]
    )


def switch_case(
    test: SyntaxNode | None, *consequent: SyntaxNode, line: int | None = None
) -> SyntaxNode:
    """Build a switch-case; ``test=None`` is the default case."""
    children = ([test] if test is not None else []) + list(consequent)
    return SyntaxNode(NodeKind.SWITCH_CASE, line, test=test, children=children)


def loop(
    kind: NodeKind,
    body: SyntaxNode,
    test: SyntaxNode | None = None,
    line: int | None = None,
    end_line: int | None = None,
) -> SyntaxNode:
    if kind not in LOOP_KINDS:
        raise ValueError(f"{kind} is not a loop kind")
    return SyntaxNode(kind, line, end_line, test=test, body=body)


def catch_clause(body: SyntaxNode, line: int | None = None) -> SyntaxNode:
    return SyntaxNode(NodeKind.CATCH_CLAUSE, line, body=body)


def function(
    name: str | None,
    params: list[SyntaxNode] | None = None,
    body: SyntaxNode | None = None,
    kind: NodeKind = NodeKind.FUNCTION_DECLARATION,
    line: int | None = None,
    end_line: int | None = None,
) -> SyntaxNode:
    if kind not in FUNCTION_KINDS:
        raise ValueError(f"{kind} is not a function kind")
    return SyntaxNode(
        kind,
        line,
        end_line,
        name=name,
        params=list(params or []),
        body=body if body is not None else block(line=line, end_line=end_line),
    )


def numeric_literal(value: float | int, line: int | None = None) -> SyntaxNode:
    return SyntaxNode(NodeKind.NUMERIC_LITERAL, line, value=value)


def identifier(name: str, line: int | None = None) -> SyntaxNode:
    return SyntaxNode(NodeKind.IDENTIFIER, line, name=name)


def member(obj: SyntaxNode, prop: SyntaxNode, line: int | None = None) -> SyntaxNode:
    return SyntaxNode(NodeKind.MEMBER_EXPRESSION, line, children=[obj, prop])


def object_property(key: SyntaxNode, value: SyntaxNode, line: int | None = None) -> SyntaxNode:
    return SyntaxNode(NodeKind.OBJECT_PROPERTY, line, children=[key, value])


def array(*elements: SyntaxNode, line: int | None = None) -> SyntaxNode:
    return SyntaxNode(NodeKind.ARRAY_EXPRESSION, line, children=list(elements))


def markup_element(*children: SyntaxNode, line: int | None = None) -> SyntaxNode:
    return SyntaxNode(NodeKind.MARKUP_ELEMENT, line, children=list(children))


def other(*children: SyntaxNode, line: int | None = None, source_type: str | None = None) -> SyntaxNode:
    return SyntaxNode(
        NodeKind.OTHER, line, children=list(children), source_type=source_type
    )
