"""
Tests for environment configuration.
"""

from jsongrep.config.config import Config, get_config, reset_config


class TestConfig:
    """Environment and .env loading."""

    def test_defaults(self):
        config = get_config()
        assert config.log.level == "WARNING"
        assert config.log.log_dir == ""
        assert config.output.stats is False
        assert config.output.error_style == "bold red"
        assert config.validate() == (True, [])

    def test_singleton(self):
        assert get_config() is get_config()
        assert Config() is get_config()

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("JSONGREP_LOG_LEVEL", "debug")
        monkeypatch.setenv("JSONGREP_STATS", "TRUE")
        monkeypatch.setenv("JSONGREP_ERROR_STYLE", "yellow")
        config = get_config()
        assert config.log.level == "DEBUG"
        assert config.output.stats is True
        assert config.output.error_style == "yellow"

    def test_dotenv_file(self, monkeypatch, tmp_path):
        # Registered so teardown removes the value load_dotenv writes
        monkeypatch.setenv("JSONGREP_LOG_DIR", "")
        env_file = tmp_path / "custom.env"
        env_file.write_text("JSONGREP_LOG_DIR=logs\n", encoding="utf-8")
        config = get_config(str(env_file))
        assert config.log.log_dir == "logs"

    def test_invalid_level(self, monkeypatch):
        monkeypatch.setenv("JSONGREP_LOG_LEVEL", "loud")
        valid, errors = get_config().validate()
        assert not valid
        assert "JSONGREP_LOG_LEVEL" in errors[0]

    def test_reset(self):
        first = get_config()
        reset_config()
        assert get_config() is not first

    def test_reload(self, monkeypatch):
        config = get_config()
        monkeypatch.setenv("JSONGREP_STATS", "true")
        assert config.reload().output.stats is True
