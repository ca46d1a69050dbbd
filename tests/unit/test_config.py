"""Unit tests for configuration management."""

from pathlib import Path

import pytest

from lcz_app.config.defaults import get_default_config
from lcz_app.config.loader import CONFIG_FILENAME, ConfigLoader
from lcz_app.config.validation import ConfigValidator
from lcz_app.errors import ConfigurationError


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        """Test that default configuration can be created."""
        config = get_default_config()
        assert config.analyzer.reference_resistance == 992.3
        assert config.analyzer.phase_epsilon == 1e-15
        assert config.display.significant_digits == 4
        assert config.display.numeric is False
        assert config.logging.level == "WARNING"


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self) -> None:
        loader = ConfigLoader.create()
        assert isinstance(loader.config_dir, Path)

    def test_repository_config_is_valid(self) -> None:
        loader = ConfigLoader.create()
        config = loader.merge_config()
        assert ConfigValidator.validate_config(config) == []

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        loader = ConfigLoader.create(tmp_path)
        assert loader.load_file_config() == {}
        config = loader.merge_config()
        assert config["analyzer"]["reference_resistance"] == 992.3

    def test_file_overrides_defaults(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text(
            "analyzer:\n  reference_resistance: 1000.0\ndisplay:\n  numeric: true\n"
        )
        loader = ConfigLoader.create(tmp_path)
        config = loader.merge_config()

        assert config["analyzer"]["reference_resistance"] == 1000.0
        assert config["analyzer"]["phase_epsilon"] == 1e-15
        assert config["display"]["numeric"] is True
        assert config["display"]["significant_digits"] == 4

    def test_overrides_beat_file(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("analyzer:\n  reference_resistance: 1000.0\n")
        loader = ConfigLoader.create(tmp_path)
        config = loader.merge_config({"analyzer": {"reference_resistance": 327.8}})
        assert config["analyzer"]["reference_resistance"] == 327.8

    def test_empty_file(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        assert ConfigLoader.create(tmp_path).load_file_config() == {}

    def test_malformed_yaml(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("analyzer: [unclosed\n")
        with pytest.raises(ConfigurationError):
            ConfigLoader.create(tmp_path).load_file_config()

    def test_non_mapping_yaml(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("- 1\n- 2\n")
        with pytest.raises(ConfigurationError):
            ConfigLoader.create(tmp_path).load_file_config()

    def test_build_config(self, tmp_path: Path) -> None:
        loader = ConfigLoader.create(tmp_path)
        config = loader.build_config(loader.merge_config({"display": {"significant_digits": 6}}))
        assert config.display.significant_digits == 6
        assert config.analyzer.reference_resistance == 992.3

    def test_build_config_unknown_key(self, tmp_path: Path) -> None:
        loader = ConfigLoader.create(tmp_path)
        with pytest.raises(ConfigurationError):
            loader.build_config(loader.merge_config({"display": {"colour": "red"}}))


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_valid_defaults(self) -> None:
        config = ConfigLoader.create().merge_config()
        assert ConfigValidator.validate_config(config) == []

    @pytest.mark.parametrize("value", [0, -1.0, "1k", float("inf"), True])
    def test_invalid_reference_resistance(self, value) -> None:
        errors = ConfigValidator.validate_analyzer_params({"reference_resistance": value})
        assert len(errors) == 1
        assert errors[0].field == "reference_resistance"

    @pytest.mark.parametrize("value", [-1e-15, 0.1])
    def test_invalid_phase_epsilon(self, value) -> None:
        errors = ConfigValidator.validate_analyzer_params({"phase_epsilon": value})
        assert [e.field for e in errors] == ["phase_epsilon"]

    def test_zero_phase_epsilon_allowed(self) -> None:
        assert ConfigValidator.validate_analyzer_params({"phase_epsilon": 0.0}) == []

    @pytest.mark.parametrize("value", [0, 16, 4.0, True])
    def test_invalid_significant_digits(self, value) -> None:
        errors = ConfigValidator.validate_display_params({"significant_digits": value})
        assert [e.field for e in errors] == ["significant_digits"]

    def test_invalid_numeric(self) -> None:
        errors = ConfigValidator.validate_display_params({"numeric": "yes"})
        assert errors[0].field == "numeric"
        assert errors[0].value == "yes"

    def test_invalid_logging(self) -> None:
        errors = ConfigValidator.validate_logging_params({"level": "LOUD", "format_json": 1})
        assert [e.field for e in errors] == ["level", "format_json"]

    def test_lowercase_level_allowed(self) -> None:
        assert ConfigValidator.validate_logging_params({"level": "debug"}) == []
