"""Unit tests for threshold configuration."""

import pytest
import yaml

from style_rank.config.thresholds import (
    ComplexityThresholds,
    RankThresholds,
    RuleThresholds,
    ThresholdConfig,
)
from style_rank.core.exceptions import ConfigError


class TestDefaults:
    """Test default threshold values."""

    def test_complexity_defaults(self):
        complexity = ComplexityThresholds()
        assert complexity.hotspot_nesting == 2
        assert complexity.deep_nesting_warning == 3
        assert complexity.cognitive_split == 10
        assert complexity.max_function_lines == 30
        assert complexity.length_penalty_step == 10
        assert complexity.include_file_length is False
        assert complexity.max_hotspot_suggestions == 5

    def test_rule_defaults(self):
        rules = RuleThresholds()
        assert rules.max_parameters == 5
        assert rules.allowed_numbers == [0, 1, -1]

    def test_rank_defaults(self):
        ranking = RankThresholds()
        assert (ranking.s_score, ranking.s_violations) == (5, 0)
        assert (ranking.d_score, ranking.d_violations) == (40, 8)

    def test_instances_do_not_share_lists(self):
        first, second = RuleThresholds(), RuleThresholds()
        first.allowed_numbers.append(2)
        assert second.allowed_numbers == [0, 1, -1]


class TestLoad:
    """Test loading configuration from YAML."""

    def test_missing_file_gives_defaults(self, tmp_path):
        config = ThresholdConfig.load(tmp_path / ".style-rank.yaml")
        assert config == ThresholdConfig()

    def test_partial_override(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "complexity:\n"
            "  max_function_lines: 50\n"
            "  include_file_length: true\n"
            "rules:\n"
            "  allowed_numbers: [0, 1, -1, 2]\n"
            "locale: ko\n"
        )
        config = ThresholdConfig.load(path)

        assert config.complexity.max_function_lines == 50
        assert config.complexity.include_file_length is True
        assert config.complexity.hotspot_nesting == 2
        assert config.rules.allowed_numbers == [0, 1, -1, 2]
        assert config.rules.max_parameters == 5
        assert config.locale == "ko"

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert ThresholdConfig.load(path) == ThresholdConfig()

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("complexity: [unclosed\n")
        with pytest.raises(ConfigError):
            ThresholdConfig.load(path)

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError):
            ThresholdConfig.load(path)

    def test_unknown_section(self):
        with pytest.raises(ConfigError, match="metrics"):
            ThresholdConfig.from_dict({"metrics": {}})

    def test_unknown_key(self):
        with pytest.raises(ConfigError) as exc_info:
            ThresholdConfig.from_dict({"rules": {"max_params": 3}})
        assert exc_info.value.context["section"] == "rules"

    def test_section_must_be_mapping(self):
        with pytest.raises(ConfigError):
            ThresholdConfig.from_dict({"ranking": [1, 2]})

    def test_numeric_strings_converted(self):
        config = ThresholdConfig.from_dict(
            {
                "rules": {"max_parameters": "4"},
                "complexity": {"include_file_length": "yes"},
            }
        )
        assert config.rules.max_parameters == 4
        assert config.complexity.include_file_length is True

    def test_wrong_value_type(self):
        with pytest.raises(ConfigError, match="max_parameters") as exc_info:
            ThresholdConfig.from_dict({"rules": {"max_parameters": "many"}})
        assert "Invalid values" in str(exc_info.value)
        assert exc_info.value.context["section"] == "rules"

    def test_wrong_list_item_type(self):
        with pytest.raises(ConfigError, match="allowed_numbers"):
            ThresholdConfig.from_dict({"rules": {"allowed_numbers": ["x"]}})

    def test_locale_must_be_string(self):
        with pytest.raises(ConfigError, match="Locale"):
            ThresholdConfig.from_dict({"locale": 5})


class TestSave:
    """Test serialization."""

    def test_round_trip(self, tmp_path):
        config = ThresholdConfig()
        config.complexity.cognitive_split = 15
        config.ranking.c_violations = 6
        config.locale = "ko"

        path = tmp_path / "nested" / "config.yaml"
        config.save(path)

        assert ThresholdConfig.load(path) == config

    def test_to_dict_is_plain_yaml(self, tmp_path):
        data = ThresholdConfig().to_dict()
        assert set(data) == {"complexity", "rules", "ranking", "locale"}
        assert yaml.safe_load(yaml.dump(data)) == data
