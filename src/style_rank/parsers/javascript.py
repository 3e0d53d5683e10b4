"""JavaScript/TypeScript front end built on tree-sitter.

Parses source with the grammars from ``tree-sitter-language-pack`` and
normalizes the concrete tree into :class:`SyntaxNode` trees:

- parentheses and ``else`` wrappers disappear, their content takes their place
- ``&&``/``||``/``??`` become logical expressions, other binary operators
  keep their symbol on a binary expression
- ``for (... of ...)`` and ``for (... in ...)`` are told apart
- functions get a name from their declaration, method name, or the variable,
  property or assignment they are bound to
- plain identifier parameters (including typed TypeScript ones without a
  default) become identifiers; defaults, rest and destructuring stay opaque
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from loguru import logger

from ..analysis.syntax import NodeKind, SyntaxNode
from ..core.exceptions import ParsingError

_SIMPLE_KINDS: dict[str, NodeKind] = {
    "program": NodeKind.PROGRAM,
    "statement_block": NodeKind.BLOCK_STATEMENT,
    "expression_statement": NodeKind.EXPRESSION_STATEMENT,
    "return_statement": NodeKind.RETURN_STATEMENT,
    "catch_clause": NodeKind.CATCH_CLAUSE,
    "member_expression": NodeKind.MEMBER_EXPRESSION,
    "subscript_expression": NodeKind.MEMBER_EXPRESSION,
    "pair": NodeKind.OBJECT_PROPERTY,
    "array": NodeKind.ARRAY_EXPRESSION,
    "jsx_element": NodeKind.MARKUP_ELEMENT,
    "jsx_self_closing_element": NodeKind.MARKUP_ELEMENT,
}

_LOOP_KINDS: dict[str, NodeKind] = {
    "for_statement": NodeKind.FOR_STATEMENT,
    "while_statement": NodeKind.WHILE_STATEMENT,
    "do_statement": NodeKind.DO_WHILE_STATEMENT,
}

_FUNCTION_KINDS: dict[str, NodeKind] = {
    "function_declaration": NodeKind.FUNCTION_DECLARATION,
    "generator_function_declaration": NodeKind.FUNCTION_DECLARATION,
    "function_expression": NodeKind.FUNCTION_EXPRESSION,
    "function": NodeKind.FUNCTION_EXPRESSION,
    "generator_function": NodeKind.FUNCTION_EXPRESSION,
    "arrow_function": NodeKind.ARROW_FUNCTION,
    "method_definition": NodeKind.METHOD_DEFINITION,
}

_IDENTIFIER_TYPES = {
    "identifier",
    "property_identifier",
    "shorthand_property_identifier",
}

_TRANSPARENT_TYPES = {"parenthesized_expression", "else_clause"}

_SKIPPED_TYPES = {"comment", "hash_bang_line"}

_LOGICAL_OPERATORS = {"&&", "||", "??"}

_LEAF_TYPES = _SKIPPED_TYPES | _IDENTIFIER_TYPES | {"number"}

# SyntaxNode role -> tree-sitter field
_BRANCH_ROLES = {
    "test": "condition",
    "consequent": "consequence",
    "alternate": "alternative",
}
_LOOP_ROLES = {"test": "condition", "body": "body"}
_CASE_ROLES = {"test": "value"}

# Conversion stack actions
_VISIT = "visit"
_PARAM = "param"
_BUILD = "build"


def parse_number(text: str) -> float | int | None:
    """Parse a JavaScript numeric literal.

    Returns:
        The numeric value, or None for BigInt literals (``10n``)
    """
    cleaned = text.replace("_", "")
    lowered = cleaned.lower()
    if lowered.endswith("n"):
        return None
    if lowered.startswith(("0x", "0o", "0b")):
        return int(cleaned, 0)
    if len(cleaned) > 1 and cleaned.startswith("0") and cleaned.isdigit():
        # Legacy octal (010) unless it holds 8 or 9
        return int(cleaned, 8) if set(cleaned) <= set("01234567") else int(cleaned)
    value = float(cleaned)
    if value.is_integer() and abs(value) < 2**53:
        return int(value)
    return value


class JavaScriptParser:
    """JavaScript/TypeScript/TSX parser with lazy grammar loading."""

    def __init__(self, language: str = "javascript") -> None:
        self.language = language
        self._parser: Any = None
        self._initialized = False

    def _ensure_parser_initialized(self) -> None:
        """Ensure tree-sitter parser is initialized (lazy loading)."""
        if self._initialized:
            return
        try:
            from tree_sitter_language_pack import get_parser
        except ImportError as e:
            raise ParsingError(
                "tree-sitter-language-pack is required to parse source files",
                {"language": self.language},
            ) from e

        self._parser = get_parser(self.language)
        self._initialized = True
        logger.debug(f"Loaded tree-sitter grammar for {self.language}")

    def parse_file(self, file_path: Path) -> SyntaxNode:
        """Parse a source file into a syntax tree.

        Raises:
            ParsingError: If the file cannot be read or has syntax errors
        """
        try:
            content = file_path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise ParsingError(
                f"Failed to read file {file_path}: {e}", {"path": str(file_path)}
            ) from e
        return self.parse(content, file_path)

    def parse(self, source: str, file_path: Path | None = None) -> SyntaxNode:
        """Parse source text into a syntax tree.

        Args:
            source: Source text
            file_path: Used in error messages only

        Returns:
            Root :class:`SyntaxNode` of kind ``program``

        Raises:
            ParsingError: If the source contains syntax errors
        """
        self._ensure_parser_initialized()
        tree = self._parser.parse(source.encode("utf-8"))
        root = tree.root_node

        if root.has_error:
            line = _first_error_line(root)
            where = f"{file_path}:{line}" if file_path else f"line {line}"
            raise ParsingError(
                f"Syntax error in {self.language} source at {where}",
                {"language": self.language, "line": line},
            )

        node = self._convert(root)
        if node is None:
            return SyntaxNode(NodeKind.PROGRAM, 1, 1)
        return node

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def _convert(self, root: Any) -> SyntaxNode | None:
        """Convert a tree-sitter subtree into a :class:`SyntaxNode` tree.

        Uses an explicit stack: operator chains in generated or minified
        code nest thousands of levels deep. A node is built once all of its
        inputs are converted; their results sit on top of ``results`` in
        source order.
        """
        results: list[SyntaxNode | None] = []
        stack: list[tuple[Any, str, list[Any]]] = [(root, _VISIT, [])]
        while stack:
            ts_node, action, inputs = stack.pop()

            if action == _BUILD:
                start = len(results) - len(inputs)
                converted = results[start:]
                del results[start:]
                results.append(_build(ts_node, inputs, converted))
                continue

            if action == _PARAM:
                param = _simple_param(ts_node)
                if param is not None:
                    results.append(param)
                    continue

            if ts_node.type in _LEAF_TYPES:
                results.append(_convert_leaf(ts_node))
                continue

            pending = _inputs(ts_node)
            stack.append((ts_node, _BUILD, [child for child, _ in pending]))
            stack.extend(
                (child, child_action, []) for child, child_action in reversed(pending)
            )

        return results[-1]


def _inputs(ts_node: Any) -> list[tuple[Any, str]]:
    """Children to convert before ``ts_node`` can be built, in source order."""
    if ts_node.type not in _FUNCTION_KINDS:
        return [(child, _VISIT) for child in ts_node.named_children]

    inputs: list[tuple[Any, str]] = []
    parameters = ts_node.child_by_field_name("parameters")
    if parameters is not None:
        inputs.extend((child, _PARAM) for child in parameters.named_children)
    else:
        single = ts_node.child_by_field_name("parameter")
        if single is not None:
            inputs.append((single, _PARAM))
    body = ts_node.child_by_field_name("body")
    if body is not None:
        inputs.append((body, _VISIT))
    return inputs


def _convert_leaf(ts_node: Any) -> SyntaxNode | None:
    node_type = ts_node.type
    if node_type in _SKIPPED_TYPES:
        return None
    if node_type == "number":
        value = parse_number(_text(ts_node))
        if value is None:
            return SyntaxNode(NodeKind.OTHER, *_span(ts_node), source_type=node_type)
        return SyntaxNode(
            NodeKind.NUMERIC_LITERAL,
            *_span(ts_node),
            value=value,
            source_type=node_type,
        )
    return SyntaxNode(
        NodeKind.IDENTIFIER,
        *_span(ts_node),
        name=_text(ts_node),
        source_type=node_type,
    )


def _simple_param(ts_node: Any) -> SyntaxNode | None:
    """Typed TypeScript parameter without default, as a plain identifier."""
    if ts_node.type not in ("required_parameter", "optional_parameter"):
        return None
    pattern = ts_node.child_by_field_name("pattern")
    value = ts_node.child_by_field_name("value")
    if pattern is None or pattern.type != "identifier" or value is not None:
        return None
    return SyntaxNode(
        NodeKind.IDENTIFIER,
        *_span(pattern),
        name=_text(pattern),
        source_type=ts_node.type,
    )


def _build(
    ts_node: Any, inputs: list[Any], converted: list[SyntaxNode | None]
) -> SyntaxNode | None:
    node_type = ts_node.type

    if node_type in _TRANSPARENT_TYPES:
        return next((node for node in converted if node is not None), None)
    if node_type in _FUNCTION_KINDS:
        return _build_function(ts_node, _FUNCTION_KINDS[node_type], converted)

    fields: dict[str, Any] = {}
    if node_type == "if_statement":
        kind = NodeKind.IF_STATEMENT
        fields = _roles(ts_node, inputs, converted, _BRANCH_ROLES)
    elif node_type == "ternary_expression":
        kind = NodeKind.CONDITIONAL_EXPRESSION
        fields = _roles(ts_node, inputs, converted, _BRANCH_ROLES)
    elif node_type in _LOOP_KINDS:
        kind = _LOOP_KINDS[node_type]
        fields = _roles(ts_node, inputs, converted, _LOOP_ROLES)
    elif node_type == "for_in_statement":
        operator = ts_node.child_by_field_name("operator")
        kind = (
            NodeKind.FOR_OF_STATEMENT
            if operator is not None and operator.type == "of"
            else NodeKind.FOR_IN_STATEMENT
        )
        fields = _roles(ts_node, inputs, converted, _LOOP_ROLES)
    elif node_type in ("switch_case", "switch_default"):
        kind = NodeKind.SWITCH_CASE
        fields = _roles(ts_node, inputs, converted, _CASE_ROLES)
    elif node_type in ("binary_expression", "unary_expression"):
        operator_node = ts_node.child_by_field_name("operator")
        operator = operator_node.type if operator_node is not None else None
        if node_type == "unary_expression":
            kind = NodeKind.UNARY_EXPRESSION
        elif operator in _LOGICAL_OPERATORS:
            kind = NodeKind.LOGICAL_EXPRESSION
        else:
            kind = NodeKind.BINARY_EXPRESSION
        fields = {"operator": operator}
    else:
        kind = _SIMPLE_KINDS.get(node_type, NodeKind.OTHER)

    return SyntaxNode(
        kind,
        *_span(ts_node),
        children=[node for node in converted if node is not None],
        source_type=node_type,
        **fields,
    )


def _roles(
    ts_node: Any,
    inputs: list[Any],
    converted: list[SyntaxNode | None],
    fields: dict[str, str],
) -> dict[str, SyntaxNode]:
    """Match converted children to role fields by tree-sitter node identity."""
    matched: dict[str, SyntaxNode] = {}
    for role, field_name in fields.items():
        ts_role = ts_node.child_by_field_name(field_name)
        if ts_role is None:
            continue
        for child, node in zip(inputs, converted):
            if node is not None and child == ts_role:
                matched[role] = node
                break
    return matched


def _build_function(
    ts_node: Any, kind: NodeKind, converted: list[SyntaxNode | None]
) -> SyntaxNode:
    params, body = converted, None
    if ts_node.child_by_field_name("body") is not None:
        params, body = converted[:-1], converted[-1]
    return SyntaxNode(
        kind,
        *_span(ts_node),
        name=_function_name(ts_node),
        params=[param for param in params if param is not None],
        body=body,
        source_type=ts_node.type,
    )


def _text(ts_node: Any) -> str:
    return ts_node.text.decode("utf-8", errors="replace")


def _span(ts_node: Any) -> tuple[int, int]:
    # tree-sitter rows are 0-indexed
    return ts_node.start_point[0] + 1, ts_node.end_point[0] + 1


def _function_name(ts_node: Any) -> str | None:
    """Resolve a function's name from the node or what it is bound to."""
    name_node = ts_node.child_by_field_name("name")
    if name_node is not None:
        return _text(name_node)

    parent = ts_node.parent
    while parent is not None and parent.type == "parenthesized_expression":
        parent = parent.parent
    if parent is None:
        return None

    if parent.type == "variable_declarator":
        target = parent.child_by_field_name("name")
    elif parent.type == "pair":
        target = parent.child_by_field_name("key")
    elif parent.type == "assignment_expression":
        target = parent.child_by_field_name("left")
    elif parent.type in ("field_definition", "public_field_definition"):
        target = parent.child_by_field_name("property") or parent.child_by_field_name(
            "name"
        )
    else:
        return None

    if target is None or target.type in ("object_pattern", "array_pattern"):
        return None
    return _text(target)


def _first_error_line(root: Any) -> int:
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            return node.start_point[0] + 1
        if node.has_error:
            stack.extend(reversed(node.children))
    return root.start_point[0] + 1


class TypeScriptParser(JavaScriptParser):
    """TypeScript parser (``.ts``)."""

    def __init__(self) -> None:
        super().__init__("typescript")


class TSXParser(JavaScriptParser):
    """TypeScript + JSX parser (``.tsx``)."""

    def __init__(self) -> None:
        super().__init__("tsx")
