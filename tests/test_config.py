"""Unit tests for configuration loading."""

import json

import pytest
from config import (
    AuthConfig,
    Config,
    GeneratorConfig,
    ServerConfig,
    LoggingConfig,
    load_config,
)


class TestGeneratorConfig:
    """Tests for GeneratorConfig class."""

    def test_default_values(self):
        """GeneratorConfig has sensible defaults."""
        config = GeneratorConfig()
        assert config.entropy == "mixed"
        assert config.clock_policy == "clamp"
        assert config.max_batch == 100

    def test_custom_values(self):
        """GeneratorConfig accepts custom values."""
        config = GeneratorConfig(entropy="secure", clock_policy="strict", max_batch=5)
        assert config.entropy == "secure"
        assert config.clock_policy == "strict"
        assert config.max_batch == 5

    def test_unknown_clock_policy(self):
        """Only clamp and strict are accepted."""
        with pytest.raises(ValueError):
            GeneratorConfig(clock_policy="panic")


class TestServerConfig:
    """Tests for ServerConfig class."""

    def test_default_values(self):
        """ServerConfig has sensible defaults."""
        config = ServerConfig()
        assert config.host == "127.0.0.1"
        assert config.port == 8080

    def test_custom_values(self):
        """ServerConfig accepts custom values."""
        config = ServerConfig(host="0.0.0.0", port=9000)
        assert config.host == "0.0.0.0"
        assert config.port == 9000


class TestAuthConfig:
    """Tests for AuthConfig class."""

    def test_env_fallback(self, monkeypatch):
        """Environment supplies credentials when none are given."""
        monkeypatch.setenv("API_USERNAME", "ops")
        monkeypatch.setenv("API_PASSWORD", "hunter2")
        config = AuthConfig()
        assert config.username == "ops"
        assert config.password == "hunter2"

    def test_explicit_values_win(self, monkeypatch):
        """Explicit credentials override the environment."""
        monkeypatch.setenv("API_USERNAME", "ops")
        config = AuthConfig(username="tester", password="s3cret")
        assert config.username == "tester"
        assert config.password == "s3cret"

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("API_USERNAME", raising=False)
        monkeypatch.delenv("API_PASSWORD", raising=False)
        config = AuthConfig()
        assert config.username == "admin"
        assert config.password == "admin123"

    def test_empty_password_kept(self, monkeypatch):
        """An explicit empty password is not replaced by a fallback."""
        monkeypatch.setenv("API_PASSWORD", "hunter2")
        config = AuthConfig(username="", password="")
        assert config.username == ""
        assert config.password == ""


class TestLoggingConfig:
    """Tests for LoggingConfig class."""

    def test_default_values(self):
        """LoggingConfig has sensible defaults."""
        config = LoggingConfig()
        assert config.level == "INFO"
        assert config.crash_file == "logs/crash.log"

    def test_custom_values(self):
        """LoggingConfig accepts custom values."""
        config = LoggingConfig(level="DEBUG", crash_file="/var/log/crash.log")
        assert config.level == "DEBUG"
        assert config.crash_file == "/var/log/crash.log"


class TestConfig:
    """Tests for main Config class."""

    def test_default_config(self):
        """Config creates default sub-configs."""
        config = Config()
        assert isinstance(config.generator, GeneratorConfig)
        assert isinstance(config.server, ServerConfig)
        assert isinstance(config.auth, AuthConfig)
        assert isinstance(config.logging, LoggingConfig)

    def test_from_dict(self):
        """Config.from_dict parses dictionary."""
        data = {
            "generator": {"entropy": "secure", "max_batch": 10},
            "server": {"port": 9000},
            "logging": {"level": "DEBUG"}
        }
        config = Config.from_dict(data)
        assert config.generator.entropy == "secure"
        assert config.generator.max_batch == 10
        assert config.server.port == 9000
        assert config.logging.level == "DEBUG"

    def test_from_dict_partial(self):
        """Config.from_dict handles partial data."""
        data = {"generator": {"max_batch": 5}}
        config = Config.from_dict(data)
        assert config.generator.max_batch == 5
        assert config.server.port == 8080  # Default


class TestLoadConfig:
    """Tests for load_config function."""

    def test_load_config_returns_config(self):
        """load_config returns Config object."""
        config = load_config()
        assert isinstance(config, Config)

    def test_load_config_reads_file(self):
        """load_config reads from config.json."""
        config = load_config()
        # Should have values from config.json
        assert config.generator.entropy == "mixed"
        assert config.generator.max_batch == 500

    def test_load_config_custom_path(self, tmp_path):
        """load_config reads an explicit file."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"generator": {"clock_policy": "strict"}}))
        config = load_config(path)
        assert config.generator.clock_policy == "strict"

    def test_load_config_missing_file(self, tmp_path):
        """load_config returns defaults for missing file."""
        config = load_config(tmp_path / "nonexistent.json")
        assert isinstance(config, Config)
        assert config.generator.max_batch == 100  # Default
