"""Tests for config.py."""

from pathlib import Path

from config import Config, DEFAULTS


class TestConfigLoad:
    """Tests for Config.load()."""

    def test_load_with_defaults_when_no_config_file(self, tmp_path):
        """Config uses defaults when config file doesn't exist."""
        config = Config.load(config_path=tmp_path / "nonexistent.toml")

        assert config.action_source == DEFAULTS["action_source"]
        assert config.request_timeout == DEFAULTS["request_timeout"]
        assert config.output_json is False

    def test_load_from_toml_file(self, tmp_path, config_toml_content):
        """Config loads values from TOML file."""
        config_file = tmp_path / "config.toml"
        config_file.write_text(config_toml_content)

        config = Config.load(config_path=config_file)

        assert config.action_source == "https://custom.example.com/action.json"
        assert config.request_timeout == 10.5
        assert config.output_json is True

    def test_cli_overrides_take_precedence(self, tmp_path, config_toml_content):
        """CLI overrides take precedence over config file values."""
        config_file = tmp_path / "config.toml"
        config_file.write_text(config_toml_content)

        config = Config.load(
            config_path=config_file,
            action_override="/cli/action.json",
            timeout_override=3,
            output_json_override=False,
        )

        assert config.action_source == "/cli/action.json"
        assert config.request_timeout == 3.0
        assert config.output_json is False

    def test_action_path_expansion(self, tmp_path):
        """Action path with ~ is expanded."""
        config = Config.load(
            config_path=tmp_path / "nonexistent.toml",
            action_override="~/action.json",
        )

        assert "~" not in config.action_source
        assert Path(config.action_source).is_absolute()


class TestConfigProperties:
    """Tests for Config properties."""

    def test_is_remote_false_for_path(self, sample_config):
        """is_remote is False for a local file."""
        assert sample_config.is_remote is False

    def test_is_remote_true_for_url(self, tmp_path):
        """is_remote is True for an HTTPS source."""
        config = Config.load(
            config_path=tmp_path / "nonexistent.toml",
            action_override="https://example.com/action.json",
        )

        assert config.is_remote is True
