"""Function length collector.

A function-like node longer than ``max_lines`` earns a penalty of
``(length - max_lines) // penalty_step``; the file's length penalty is the
largest one seen. Functions whose body holds markup (JSX and friends) are
exempt: long render functions are structure, not a smell.

Whole-file length is a separate, opt-in policy (``include_file_length``).
When enabled, the program node's own line count is held against the same
maximum and its penalty competes in the same max. It never produces a
:class:`LongFunction` entry.
"""

from __future__ import annotations

from ..metrics import LongFunction
from ..syntax import NodeKind, SyntaxNode
from .base import CollectorContext


class FunctionLengthCollector:
    """Collects long functions and the resulting length penalty."""

    def __init__(
        self,
        max_lines: int = 30,
        penalty_step: int = 10,
        include_file_length: bool = False,
        anonymous_name: str = "<anonymous>",
    ) -> None:
        self.max_lines = max_lines
        self.penalty_step = max(1, penalty_step)
        self.include_file_length = include_file_length
        self.anonymous_name = anonymous_name
        self._long_functions: list[LongFunction] = []
        self._penalty = 0

    @property
    def name(self) -> str:
        return "length_penalty"

    @property
    def penalty(self) -> int:
        return self._penalty

    @property
    def long_functions(self) -> list[LongFunction]:
        return list(self._long_functions)

    def _penalty_for(self, length: int) -> int:
        return (length - self.max_lines) // self.penalty_step

    def enter_program(self, node: SyntaxNode, context: CollectorContext) -> None:
        if not self.include_file_length:
            return
        length = node.length
        if length is not None and length > self.max_lines:
            self._penalty = max(self._penalty, self._penalty_for(length))

    def _enter_function(self, node: SyntaxNode, context: CollectorContext) -> None:
        length = node.length
        if length is None or length <= self.max_lines:
            return
        if (node.body or node).contains(NodeKind.MARKUP_ELEMENT):
            return

        self._long_functions.append(
            LongFunction(
                name=node.name or self.anonymous_name,
                start_line=node.line,
                end_line=node.end_line or node.line,
                length=length,
            )
        )
        self._penalty = max(self._penalty, self._penalty_for(length))

    enter_function_declaration = _enter_function
    enter_function_expression = _enter_function
    enter_arrow_function = _enter_function
    enter_method_definition = _enter_function

    def reset(self) -> None:
        self._long_functions.clear()
        self._penalty = 0
