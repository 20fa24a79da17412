"""
Unit tests for configuration loading and logging setup.
"""

import logging

import pytest

from mathsets import ConfigError
from mathsets.config import (
    MAX_POWER_SET_LIMIT,
    MathSetsConfig,
    configure_logging,
    get_config,
    load_config,
    set_config,
)


class TestMathSetsConfig:
    """Tests for the configuration dataclass."""

    def test_defaults(self):
        config = MathSetsConfig()
        assert config.power_set_limit == 30
        assert config.log_level == "WARNING"

    @pytest.mark.parametrize("limit", [-1, MAX_POWER_SET_LIMIT + 1, "10", True])
    def test_invalid_limit(self, limit):
        with pytest.raises(ConfigError):
            MathSetsConfig(power_set_limit=limit)

    def test_invalid_log_level(self):
        with pytest.raises(ConfigError):
            MathSetsConfig(log_level="LOUD")

    def test_with_overrides(self):
        config = MathSetsConfig().with_overrides(power_set_limit=5)
        assert config.power_set_limit == 5
        assert config.log_level == "WARNING"

    def test_with_unknown_override(self):
        with pytest.raises(ConfigError):
            MathSetsConfig().with_overrides(colour="blue")

    def test_set_config_returns_previous(self):
        original = get_config()
        previous = set_config(MathSetsConfig(power_set_limit=4))
        assert previous is original
        assert get_config().power_set_limit == 4


class TestLoadConfig:
    """Tests for reading TOML files."""

    def test_mathsets_toml(self, tmp_path):
        path = tmp_path / "mathsets.toml"
        path.write_text('[mathsets]\npower_set_limit = 12\nlog_level = "DEBUG"\n')
        config = load_config(path)
        assert config == MathSetsConfig(power_set_limit=12, log_level="DEBUG")

    def test_pyproject_toml(self, tmp_path):
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "demo"\n\n[tool.mathsets]\npower_set_limit = 8\n')
        assert load_config(path).power_set_limit == 8

    def test_missing_table_gives_defaults(self, tmp_path):
        path = tmp_path / "mathsets.toml"
        path.write_text("[other]\nvalue = 1\n")
        assert load_config(path) == MathSetsConfig()

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "mathsets.toml"
        path.write_text("[mathsets]\ncolour = 'blue'\n")
        with pytest.raises(ConfigError, match="colour"):
            load_config(path)

    def test_invalid_value(self, tmp_path):
        path = tmp_path / "mathsets.toml"
        path.write_text("[mathsets]\npower_set_limit = 100\n")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_bad_toml(self, tmp_path):
        path = tmp_path / "mathsets.toml"
        path.write_text("[mathsets\n")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "absent.toml")


class TestConfigureLogging:
    def test_sets_package_level(self):
        logger = logging.getLogger("mathsets")
        saved = logger.level
        try:
            configure_logging("DEBUG")
            assert logger.level == logging.DEBUG
        finally:
            logger.setLevel(saved)

    def test_defaults_to_config_level(self):
        logger = logging.getLogger("mathsets")
        saved = logger.level
        set_config(MathSetsConfig(log_level="ERROR"))
        try:
            configure_logging()
            assert logger.level == logging.ERROR
        finally:
            logger.setLevel(saved)
