"""Shared fixtures for style-rank tests."""

from __future__ import annotations

import pytest

from style_rank.analysis.analyzer import StyleAnalyzer
from style_rank.config.thresholds import ThresholdConfig


@pytest.fixture
def config() -> ThresholdConfig:
    return ThresholdConfig()


@pytest.fixture
def analyzer(config: ThresholdConfig) -> StyleAnalyzer:
    return StyleAnalyzer(config)


@pytest.fixture
def ts_language_pack():
    """Skip parser-backed tests when the grammar pack is not installed."""
    return pytest.importorskip("tree_sitter_language_pack")
