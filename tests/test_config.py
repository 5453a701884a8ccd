"""Unit tests for configuration loading."""

import json

from config import (
    Config,
    DemoConfig,
    LoggingConfig,
    load_config,
)


class TestDemoConfig:
    """Tests for DemoConfig class."""

    def test_default_values(self):
        """DemoConfig has sensible defaults."""
        config = DemoConfig()
        assert config.base_id == 1_000_000_000_000
        assert config.total == 10

    def test_custom_values(self):
        """DemoConfig accepts custom values."""
        config = DemoConfig(base_id=5, total=3)
        assert config.base_id == 5
        assert config.total == 3


class TestLoggingConfig:
    """Tests for LoggingConfig class."""

    def test_default_values(self):
        """LoggingConfig defaults to INFO."""
        assert LoggingConfig().level == "INFO"

    def test_custom_values(self):
        """LoggingConfig accepts custom level."""
        assert LoggingConfig(level="DEBUG").level == "DEBUG"


class TestConfig:
    """Tests for main Config class."""

    def test_default_config(self):
        """Config creates default sub-configs."""
        config = Config()
        assert isinstance(config.demo, DemoConfig)
        assert isinstance(config.logging, LoggingConfig)

    def test_from_dict(self):
        """Config.from_dict parses dictionary."""
        data = {"demo": {"base_id": 42, "total": 2}, "logging": {"level": "DEBUG"}}
        config = Config.from_dict(data)
        assert config.demo.base_id == 42
        assert config.demo.total == 2
        assert config.logging.level == "DEBUG"

    def test_from_dict_partial(self):
        """Config.from_dict handles partial data."""
        config = Config.from_dict({"demo": {"total": 5}})
        assert config.demo.total == 5
        assert config.demo.base_id == 1_000_000_000_000
        assert config.logging.level == "INFO"


class TestLoadConfig:
    """Tests for load_config function."""

    def test_load_config_reads_file(self):
        """load_config reads from config.json."""
        config = load_config()
        assert isinstance(config, Config)
        assert config.demo.base_id == 1_000_000_000_000
        assert config.demo.total == 10

    def test_load_config_custom_path(self, tmp_path):
        """load_config reads an explicit path."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"logging": {"level": "WARN"}}))
        assert load_config(path).logging.level == "WARN"

    def test_load_config_missing_file(self, tmp_path):
        """load_config returns defaults for missing file."""
        config = load_config(tmp_path / "nonexistent.json")
        assert isinstance(config, Config)
        assert config.demo.total == 10
