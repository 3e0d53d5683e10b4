"""Parser registry for Style Rank."""

from pathlib import Path

from loguru import logger

from ..config.defaults import LANGUAGE_MAPPINGS
from ..core.exceptions import UnsupportedLanguageError
from .javascript import JavaScriptParser, TSXParser, TypeScriptParser


class ParserRegistry:
    """Registry for managing language parsers."""

    def __init__(self) -> None:
        """Initialize parser registry with lazy loading."""
        self._parsers: dict[str, JavaScriptParser] = {}
        self._parser_classes: dict[str, type[JavaScriptParser]] = {
            "javascript": JavaScriptParser,
            "typescript": TypeScriptParser,
            "tsx": TSXParser,
        }
        self._extension_map: dict[str, str] = {
            ext.lower(): lang for ext, lang in LANGUAGE_MAPPINGS.items()
        }

    def register_parser(self, language: str, parser: JavaScriptParser) -> None:
        """Register a parser instance for a language.

        Args:
            language: Language name
            parser: Parser instance
        """
        self._parsers[language] = parser
        logger.debug(f"Registered parser for {language}: {parser.__class__.__name__}")

    def get_parser(self, language: str) -> JavaScriptParser:
        """Get parser for a language (lazy instantiation).

        Args:
            language: Language name (``javascript``, ``typescript``, ``tsx``)

        Returns:
            Parser instance

        Raises:
            UnsupportedLanguageError: If no parser handles the language
        """
        if language not in self._parsers:
            parser_class = self._parser_classes.get(language)
            if parser_class is None:
                raise UnsupportedLanguageError(
                    f"Unsupported language: {language}", {"language": language}
                )
            self._parsers[language] = parser_class()
            logger.debug(f"Lazily instantiated parser for {language}")
        return self._parsers[language]

    def get_parser_for_file(self, file_path: Path) -> JavaScriptParser:
        """Get parser for a specific file.

        Raises:
            UnsupportedLanguageError: If the extension is not supported
        """
        return self.get_parser(self.get_language_for_file(file_path))

    def get_language_for_file(self, file_path: Path) -> str:
        """Map a file's extension to a language name.

        Raises:
            UnsupportedLanguageError: If the extension is not supported
        """
        language = self._extension_map.get(file_path.suffix.lower())
        if language is None:
            raise UnsupportedLanguageError(
                f"Unsupported file type: {file_path.suffix or file_path.name}",
                {"path": str(file_path)},
            )
        return language

    def get_supported_languages(self) -> list[str]:
        return sorted(set(self._extension_map.values()))

    def get_supported_extensions(self) -> list[str]:
        return list(self._extension_map.keys())

    def is_supported(self, file_path: Path) -> bool:
        """Check if a file has a supported extension."""
        return file_path.suffix.lower() in self._extension_map


# Global parser registry instance
_registry = ParserRegistry()


def get_parser_registry() -> ParserRegistry:
    """Get the global parser registry instance.

    Returns:
        Parser registry instance
    """
    return _registry


def get_parser_for_file(file_path: Path) -> JavaScriptParser:
    """Get parser for a file from the global registry."""
    return _registry.get_parser_for_file(file_path)
