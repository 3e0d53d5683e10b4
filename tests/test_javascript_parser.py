"""Tests for the JavaScript/TypeScript parser."""

from pathlib import Path

import pytest

from style_rank.analysis.analyzer import StyleAnalyzer
from style_rank.analysis.syntax import NodeKind
from style_rank.core.exceptions import ParsingError, UnsupportedLanguageError
from style_rank.parsers.javascript import JavaScriptParser, TSXParser, parse_number
from style_rank.parsers.registry import ParserRegistry


@pytest.fixture
def js_parser(ts_language_pack):
    """Create JavaScript parser fixture."""
    return JavaScriptParser()


@pytest.fixture
def style_analyzer(ts_language_pack):
    return StyleAnalyzer()


def component_source(jsx: bool) -> str:
    """A 35-line function, returning markup when ``jsx`` is set."""
    body = "".join(f"  const v{i} = load{i}();\n" for i in range(32))
    returned = "<div>{v0}</div>" if jsx else "v0"
    return f"export function Page() {{\n{body}  return {returned};\n}}\n"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("0", 0),
        ("42", 42),
        ("1.5", 1.5),
        (".5", 0.5),
        ("1e3", 1000),
        ("0x1F", 31),
        ("0o17", 15),
        ("0b101", 5),
        ("1_000", 1000),
        ("010", 8),
        ("019", 19),
    ],
)
def test_parse_number(text, expected):
    """Test numeric literal forms."""
    assert parse_number(text) == expected


def test_parse_number_bigint():
    """BigInt literals have no plain numeric value."""
    assert parse_number("10n") is None


def test_parser_initialization():
    """Test the grammar is not loaded until first use."""
    parser = JavaScriptParser()
    assert parser.language == "javascript"
    assert parser._parser is None
    assert TSXParser().language == "tsx"


def test_parse_program(js_parser):
    """Test basic parsing into a program node."""
    tree = js_parser.parse("function add(a, b) {\n  return a + b;\n}\n")

    assert tree.kind is NodeKind.PROGRAM
    func = tree.children[0]
    assert func.kind is NodeKind.FUNCTION_DECLARATION
    assert func.name == "add"
    assert [p.name for p in func.params] == ["a", "b"]
    assert (func.start_line, func.end_line) == (1, 3)


def test_for_of_and_for_in(js_parser):
    """Test for...of and for...in are told apart."""
    tree = js_parser.parse("for (const x of items) {}\nfor (const k in obj) {}\n")
    assert [child.kind for child in tree.children] == [
        NodeKind.FOR_OF_STATEMENT,
        NodeKind.FOR_IN_STATEMENT,
    ]


def test_parentheses_are_transparent(js_parser):
    """Test the if condition is the identifier, not its parentheses."""
    tree = js_parser.parse("if ((ready)) {\n  go();\n} else {\n  stop();\n}\n")
    statement = tree.children[0]

    assert statement.kind is NodeKind.IF_STATEMENT
    assert statement.test.kind is NodeKind.IDENTIFIER
    assert statement.test.name == "ready"
    assert statement.alternate.kind is NodeKind.BLOCK_STATEMENT


def test_logical_operators(js_parser):
    """Test && and ?? become logical expressions."""
    tree = js_parser.parse("a && b;\nc ?? d;\ne + f;\n")
    kinds = [statement.children[0].kind for statement in tree.children]
    assert kinds == [
        NodeKind.LOGICAL_EXPRESSION,
        NodeKind.LOGICAL_EXPRESSION,
        NodeKind.BINARY_EXPRESSION,
    ]


def test_syntax_error(js_parser):
    """Test malformed source raises ParsingError."""
    with pytest.raises(ParsingError) as exc_info:
        js_parser.parse("const ok = 1;\nfunction (\n")
    assert exc_info.value.context["language"] == "javascript"


def test_loose_equality_line(style_analyzer):
    """Test the violation points at the comparison line."""
    source = "function same(a, b) {\n  return a == b;\n}\n"
    result = style_analyzer.analyze_source(source)

    assert [(v.rule, v.line) for v in result.violations] == [("loose-equality", 2)]


def test_magic_number_positions(style_analyzer):
    """Test exempt positions for numeric literals."""
    source = (
        "const LIMIT = 0;\n"
        "const items = [5, 6];\n"
        "const options = { retries: 3 };\n"
        "const first = items[2];\n"
        "const total = first * 42;\n"
    )
    result = style_analyzer.analyze_source(source)

    assert len(result.violations) == 1
    violation = result.violations[0]
    assert violation.line == 5
    assert violation.message == "Replace magic number '42' with a named constant"


def test_arrow_function_named_by_variable(style_analyzer):
    """Test arrow functions take the name of their variable."""
    result = style_analyzer.analyze_source("const build = (a, b, c, d, e, f) => a;\n")
    assert [v.message for v in result.violations] == [
        "Function 'build' has 6 parameters (max 5)"
    ]


def test_method_and_property_names(js_parser):
    """Test methods and object properties carry names."""
    tree = js_parser.parse(
        "class Job {\n  run(a) {}\n}\nconst api = { fetch: function (b) {} };\n"
    )
    names = [node.name for node in tree.walk() if node.is_function]
    assert names == ["run", "fetch"]


def test_typescript_typed_parameter_flag(style_analyzer):
    """Test typed TypeScript parameters are still seen as flags."""
    source = (
        "function render(verbose: boolean): string {\n"
        "  if (verbose) {\n"
        "    return 'full';\n"
        "  }\n"
        "  return 'short';\n"
        "}\n"
    )
    result = style_analyzer.analyze_source(source, language="typescript")

    assert [(v.rule, v.line) for v in result.violations] == [("parameter-as-flag", 2)]


def test_tsx_component_length_exempt(style_analyzer):
    """Test long functions returning markup are not penalized."""
    component = style_analyzer.analyze_source(component_source(jsx=True), language="tsx")
    plain = style_analyzer.analyze_source(component_source(jsx=False), language="typescript")

    assert component.long_functions == ()
    assert component.length_penalty == 0
    assert plain.long_functions[0].name == "Page"
    assert plain.long_functions[0].length == 35


def test_analyze_file(style_analyzer, tmp_path):
    """Test analysis from disk keeps the file path."""
    path = tmp_path / "util.js"
    path.write_text("export const twice = (x) => x * 2;\n")

    result = style_analyzer.analyze_file(path)

    assert result.file_path == str(path)
    assert [v.rule for v in result.violations] == ["magic-number"]


class TestParserRegistry:
    """Test extension and language lookups."""

    def test_supported_extensions(self):
        registry = ParserRegistry()
        assert registry.is_supported(Path("App.tsx"))
        assert registry.is_supported(Path("index.MJS"))
        assert not registry.is_supported(Path("script.py"))

    def test_language_for_file(self):
        registry = ParserRegistry()
        assert registry.get_language_for_file(Path("a.jsx")) == "javascript"
        assert registry.get_language_for_file(Path("a.cts")) == "typescript"

    def test_unsupported_file(self):
        with pytest.raises(UnsupportedLanguageError):
            ParserRegistry().get_language_for_file(Path("script.py"))

    def test_unsupported_language(self):
        with pytest.raises(UnsupportedLanguageError):
            ParserRegistry().get_parser("python")

    def test_parsers_are_cached(self):
        registry = ParserRegistry()
        assert registry.get_parser("tsx") is registry.get_parser("tsx")

    def test_register_parser(self):
        registry = ParserRegistry()
        custom = JavaScriptParser()
        registry.register_parser("typescript", custom)
        assert registry.get_parser_for_file(Path("a.ts")) is custom

    def test_supported_languages(self):
        assert sorted(ParserRegistry().get_supported_languages()) == [
            "javascript",
            "tsx",
            "typescript",
        ]


def test_parse_file(js_parser, tmp_path):
    """Test parsing from disk."""
    path = tmp_path / "math.js"
    path.write_text("// helpers\nexport const half = (x) => x / 2;\n")

    tree = js_parser.parse_file(path)

    functions = [node for node in tree.walk() if node.is_function]
    assert functions[0].name == "half"
    assert functions[0].start_line == 2


def test_parse_missing_file(tmp_path):
    """Test unreadable files raise ParsingError before any grammar is needed."""
    with pytest.raises(ParsingError):
        JavaScriptParser().parse_file(tmp_path / "missing.js")


def test_long_operator_chain(js_parser, style_analyzer):
    """Test deeply nested expressions convert without exhausting the call stack."""
    source = "const total = " + " + ".join(["x"] * 2000) + ";\n"

    tree = js_parser.parse(source)
    result = style_analyzer.analyze_source(source)

    binaries = [node for node in tree.walk() if node.kind is NodeKind.BINARY_EXPRESSION]
    assert len(binaries) == 1999
    assert result.rank.value == "S"
    assert result.violations == ()
