"""Threshold configuration for code quality metrics."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml
from pydantic import TypeAdapter, ValidationError

from ..core.exceptions import ConfigError
from .defaults import DEFAULT_LOCALE


@dataclass
class ComplexityThresholds:
    """Thresholds for complexity metrics and the suggestions built on them."""

    # Hotspots are recorded at this nesting level or deeper
    hotspot_nesting: int = 2

    # Generic deep-nesting suggestion when no hotspot was recorded
    deep_nesting_warning: int = 3

    # "Split logic into functions" suggestion above this cognitive complexity
    cognitive_split: int = 10

    # Function length (lines) before a length penalty applies
    max_function_lines: int = 30
    # One penalty point per this many lines over the maximum
    length_penalty_step: int = 10

    # Also compare the whole file's line count against max_function_lines
    include_file_length: bool = False

    # Hotspots listed individually in suggestions
    max_hotspot_suggestions: int = 5


@dataclass
class RuleThresholds:
    """Thresholds for the style rule catalog."""

    max_parameters: int = 5
    allowed_numbers: list[float] = field(default_factory=lambda: [0, 1, -1])


@dataclass
class RankThresholds:
    """Score and violation ceilings for each rank tier.

    S through C require both ceilings to hold. D holds when either does.
    Anything else is F.
    """

    s_score: float = 5
    s_violations: int = 0
    a_score: float = 10
    a_violations: int = 1
    b_score: float = 20
    b_violations: int = 3
    c_score: float = 30
    c_violations: int = 5
    d_score: float = 40
    d_violations: int = 8


@dataclass
class ThresholdConfig:
    """Complete threshold configuration."""

    complexity: ComplexityThresholds = field(default_factory=ComplexityThresholds)
    rules: RuleThresholds = field(default_factory=RuleThresholds)
    ranking: RankThresholds = field(default_factory=RankThresholds)
    locale: str = DEFAULT_LOCALE

    @classmethod
    def load(cls, path: Path) -> ThresholdConfig:
        """Load configuration from YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            ThresholdConfig instance (defaults if the file does not exist)

        Raises:
            ConfigError: If the file is not valid YAML or has invalid keys or values
        """
        if not path.exists():
            return cls()

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(
                f"Invalid YAML in {path}: {e}", {"path": str(path)}
            ) from e

        if not isinstance(data, dict):
            raise ConfigError(
                f"Configuration in {path} must be a mapping", {"path": str(path)}
            )

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ThresholdConfig:
        """Create config from dictionary.

        Args:
            data: Configuration dictionary

        Returns:
            ThresholdConfig instance

        Raises:
            ConfigError: On unknown sections or keys, or values of the wrong type
        """
        unknown = set(data) - {"complexity", "rules", "ranking", "locale"}
        if unknown:
            raise ConfigError(
                f"Unknown configuration sections: {', '.join(sorted(unknown))}",
                {"sections": sorted(unknown)},
            )

        return cls(
            complexity=_build_section(
                ComplexityThresholds, data.get("complexity"), "complexity"
            ),
            rules=_build_section(RuleThresholds, data.get("rules"), "rules"),
            ranking=_build_section(RankThresholds, data.get("ranking"), "ranking"),
            locale=_build_locale(data.get("locale", DEFAULT_LOCALE)),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization.

        Returns:
            Dictionary representation
        """
        return {
            "complexity": {
                f.name: getattr(self.complexity, f.name)
                for f in fields(ComplexityThresholds)
            },
            "rules": {
                "max_parameters": self.rules.max_parameters,
                "allowed_numbers": list(self.rules.allowed_numbers),
            },
            "ranking": {
                f.name: getattr(self.ranking, f.name) for f in fields(RankThresholds)
            },
            "locale": self.locale,
        }

    def save(self, path: Path) -> None:
        """Save configuration to YAML file.

        Args:
            path: Path to save configuration
        """
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)


def _build_section(section_cls: type, data: Any, section: str) -> Any:
    if not data:
        return section_cls()
    if not isinstance(data, dict):
        raise ConfigError(f"Section '{section}' must be a mapping")
    unknown = set(data) - {f.name for f in fields(section_cls)}
    if unknown:
        raise ConfigError(
            f"Invalid keys in section '{section}': {', '.join(sorted(unknown))}",
            {"section": section},
        )
    try:
        return TypeAdapter(section_cls).validate_python(data)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        raise ConfigError(
            f"Invalid values in section '{section}': {problems}", {"section": section}
        ) from e


def _build_locale(value: Any) -> str:
    if not isinstance(value, str):
        raise ConfigError(
            f"Locale must be a string, got {value!r}", {"section": "locale"}
        )
    return value
