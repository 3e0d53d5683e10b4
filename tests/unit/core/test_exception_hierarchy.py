"""Tests for the typed exception hierarchy."""

from __future__ import annotations

import pytest


class TestExceptionHierarchy:
    """Verify the class hierarchy defined in core/exceptions.py."""

    def test_style_rank_error_is_base_exception(self):
        from style_rank.core.exceptions import StyleRankError

        err = StyleRankError("base")
        assert isinstance(err, Exception)
        assert err.context == {}

    def test_parsing_error_inherits_from_base(self):
        from style_rank.core.exceptions import ParsingError, StyleRankError

        assert isinstance(ParsingError("parse"), StyleRankError)

    def test_unsupported_language_is_parsing_error(self):
        from style_rank.core.exceptions import ParsingError, UnsupportedLanguageError

        assert isinstance(UnsupportedLanguageError(".py"), ParsingError)

    def test_config_error_inherits_from_base(self):
        from style_rank.core.exceptions import ConfigError, StyleRankError

        assert isinstance(ConfigError("config"), StyleRankError)

    def test_configuration_error_is_alias(self):
        from style_rank.core.exceptions import ConfigError, ConfigurationError

        assert ConfigurationError is ConfigError

    def test_analysis_error_inherits_from_base(self):
        from style_rank.core.exceptions import AnalysisError, StyleRankError

        assert isinstance(AnalysisError("analysis"), StyleRankError)

    def test_context_is_kept(self):
        from style_rank.core.exceptions import ParsingError

        err = ParsingError("bad syntax", {"line": 3})
        assert err.context == {"line": 3}
        assert str(err) == "bad syntax"

    def test_catch_by_base(self):
        from style_rank.core.exceptions import AnalysisError, StyleRankError

        with pytest.raises(StyleRankError):
            raise AnalysisError("boom")


class TestPackageExports:
    """Verify exceptions are importable from the package roots."""

    def test_root_export(self):
        import style_rank

        assert style_rank.StyleRankError.__name__ == "StyleRankError"

    def test_core_exports(self):
        from style_rank import core

        for name in (
            "AnalysisError",
            "ConfigError",
            "ConfigurationError",
            "ParsingError",
            "StyleRankError",
            "UnsupportedLanguageError",
        ):
            assert hasattr(core, name)
