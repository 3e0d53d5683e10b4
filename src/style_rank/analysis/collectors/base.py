"""Tree traversal engine shared by every collector and rule.

A :class:`TreeWalker` visits each node of a :class:`SyntaxNode` tree exactly
once, depth-first, and dispatches to handlers keyed by node kind. A collector
is any object exposing ``enter_<kind>`` and/or ``exit_<kind>`` methods, where
``<kind>`` is a :class:`NodeKind` value, e.g. ``enter_if_statement``. Several
collectors run side by side in one pass; for a given node, enter handlers run
in collector order and exit handlers run after all descendants were visited.

All mutable traversal state lives in the :class:`CollectorContext` created
for the walk. Each function-like node pushes a fresh :class:`FunctionScope`
before its enter handlers run and pops it after its exit handlers, so
nesting counters restart at 0 inside every function and resume afterwards.

Example:
    class IfCounter:
        name = "if_counter"

        def __init__(self) -> None:
            self.count = 0

        def enter_if_statement(self, node, context):
            self.count += 1

    counter = IfCounter()
    TreeWalker([counter]).walk(tree)
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from loguru import logger

from ..syntax import NodeKind, SyntaxNode

Handler = Callable[[SyntaxNode, "CollectorContext"], None]


@dataclass
class FunctionScope:
    """Per-function traversal state.

    Attributes:
        node: The function-like node, None for the module-level scope
        name: Function name, None when anonymous or at module level
        param_names: Names of plain identifier parameters
        nesting: Nesting level per counter key (one key per collector)
    """

    node: SyntaxNode | None = None
    name: str | None = None
    param_names: frozenset[str] = frozenset()
    nesting: dict[str, int] = field(default_factory=dict)


@dataclass
class CollectorContext:
    """Shared context during one tree traversal.

    Attributes:
        file_path: Path of the analyzed file, if known
        scopes: Function scope stack; index 0 is the module scope
    """

    file_path: str | None = None
    scopes: list[FunctionScope] = field(default_factory=lambda: [FunctionScope()])

    @property
    def scope(self) -> FunctionScope:
        return self.scopes[-1]

    @property
    def function_name(self) -> str | None:
        """Name of the innermost enclosing function."""
        return self.scope.name

    @property
    def in_function(self) -> bool:
        return len(self.scopes) > 1

    def enclosing_functions(self) -> Iterator[FunctionScope]:
        """Yield function scopes from innermost to outermost."""
        return reversed(self.scopes[1:])

    def nesting(self, key: str) -> int:
        return self.scope.nesting.get(key, 0)

    def enter_nesting(self, key: str) -> int:
        """Increment the current scope's level for ``key`` and return it."""
        level = self.scope.nesting.get(key, 0) + 1
        self.scope.nesting[key] = level
        return level

    def exit_nesting(self, key: str) -> None:
        self.scope.nesting[key] = max(0, self.scope.nesting.get(key, 0) - 1)

    def push_scope(self, node: SyntaxNode) -> None:
        params = frozenset(
            p.name for p in node.params if p.kind is NodeKind.IDENTIFIER and p.name
        )
        self.scopes.append(FunctionScope(node=node, name=node.name, param_names=params))

    def pop_scope(self) -> None:
        if len(self.scopes) > 1:
            self.scopes.pop()


@runtime_checkable
class MetricCollector(Protocol):
    """Capability interface for anything the walker dispatches to.

    Beyond ``name`` and ``reset``, a collector only implements the
    ``enter_<kind>``/``exit_<kind>`` handlers it needs.
    """

    @property
    def name(self) -> str: ...

    def reset(self) -> None: ...


class TreeWalker:
    """Single-pass, depth-first dispatcher over a syntax tree."""

    def __init__(self, collectors: Sequence[Any]) -> None:
        """Build the dispatch tables.

        Args:
            collectors: Objects exposing ``enter_<kind>``/``exit_<kind>`` methods
        """
        self.collectors = list(collectors)
        self._enter: dict[NodeKind, list[Handler]] = {}
        self._exit: dict[NodeKind, list[Handler]] = {}

        for kind in NodeKind:
            for collector in self.collectors:
                enter = getattr(collector, f"enter_{kind.value}", None)
                if enter is not None:
                    self._enter.setdefault(kind, []).append(enter)
                exit_ = getattr(collector, f"exit_{kind.value}", None)
                if exit_ is not None:
                    self._exit.setdefault(kind, []).append(exit_)

    def walk(
        self, root: SyntaxNode, context: CollectorContext | None = None
    ) -> CollectorContext:
        """Visit every node under ``root`` once.

        Uses an explicit stack, so tree depth is not limited by the
        interpreter's recursion limit.

        Args:
            root: Root of the tree
            context: Context to thread through; a fresh one by default

        Returns:
            The context after traversal (scope stack back at module level)
        """
        if context is None:
            context = CollectorContext()

        visited = 0
        stack: list[tuple[SyntaxNode, bool]] = [(root, False)]
        while stack:
            node, exiting = stack.pop()

            if exiting:
                for handler in self._exit.get(node.kind, ()):
                    handler(node, context)
                if node.is_function:
                    context.pop_scope()
                continue

            visited += 1
            if node.is_function:
                context.push_scope(node)
            for handler in self._enter.get(node.kind, ()):
                handler(node, context)

            stack.append((node, True))
            stack.extend((child, False) for child in reversed(node.children))

        logger.debug(
            f"Walked {visited} nodes with {len(self.collectors)} collectors"
        )
        return context
