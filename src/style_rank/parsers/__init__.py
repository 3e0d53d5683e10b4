"""Language parsers producing :class:`~style_rank.analysis.syntax.SyntaxNode` trees."""

from .javascript import JavaScriptParser, TSXParser, TypeScriptParser, parse_number
from .registry import ParserRegistry, get_parser_for_file, get_parser_registry

__all__ = [
    "JavaScriptParser",
    "TypeScriptParser",
    "TSXParser",
    "parse_number",
    "ParserRegistry",
    "get_parser_for_file",
    "get_parser_registry",
]
