"""Typed exception hierarchy for style-rank.

Hierarchy
---------
StyleRankError (base)
├── ParsingError              – source could not be turned into a syntax tree
│   └── UnsupportedLanguageError
├── ConfigError               – configuration / validation errors
│   └── ConfigurationError    – (alias)
└── AnalysisError             – a file could not be analyzed end to end

The metrics engine itself raises nothing for a well-formed tree. These errors
belong to the collaborators around it (parsers, config loading, the CLI).
"""

from typing import Any


class StyleRankError(Exception):
    """Base exception for style-rank."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context = context or {}


# ── Parsing layer ───────────────────────────────────────────────────────


class ParsingError(StyleRankError):
    """Source text could not be parsed into a syntax tree."""

    pass


class UnsupportedLanguageError(ParsingError):
    """No parser is registered for the requested language or extension."""

    pass


# ── Configuration layer ─────────────────────────────────────────────────


class ConfigError(StyleRankError):
    """Configuration / validation errors."""

    pass


# Alias kept for callers used to the longer name
ConfigurationError = ConfigError


# ── Analysis layer ──────────────────────────────────────────────────────


class AnalysisError(StyleRankError):
    """A file could not be read or analyzed."""

    pass
