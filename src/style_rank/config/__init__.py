"""Configuration: defaults and YAML threshold loading."""

from .thresholds import (
    ComplexityThresholds,
    RankThresholds,
    RuleThresholds,
    ThresholdConfig,
)

__all__ = [
    "ComplexityThresholds",
    "RankThresholds",
    "RuleThresholds",
    "ThresholdConfig",
]
