"""Core infrastructure: exceptions and the file watcher."""

from .exceptions import (
    AnalysisError,
    ConfigError,
    ConfigurationError,
    ParsingError,
    StyleRankError,
    UnsupportedLanguageError,
)

__all__ = [
    "AnalysisError",
    "ConfigError",
    "ConfigurationError",
    "ParsingError",
    "StyleRankError",
    "UnsupportedLanguageError",
]
