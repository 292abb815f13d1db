"""Integration tests for configuration module."""

import warnings
from pathlib import Path

import pytest

from billtext.config import (
    AppConfig,
    ConfigurationError,
    ReclassifierMode,
    load_config,
    load_environment_config,
    validate_config_file,
)
from billtext.config.validators import check_for_warnings

# Test fixtures directory
FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch, clean_env):
    """Run every test from an empty directory without environment overrides."""
    monkeypatch.chdir(tmp_path)


class TestConfigurationLoading:
    """Test configuration loading from YAML files."""

    def test_load_valid_config(self):
        app_config, env_config = load_config(FIXTURES_DIR / "valid_config.yaml")

        assert app_config.reclassifier.mode == "strict"
        assert app_config.reclassifier.line_number_width == 10
        assert app_config.reclassifier.max_join_length == 150
        assert app_config.filtering.enabled is False
        assert app_config.http.timeout == 45
        assert app_config.http.user_agent == "billtext-tests/1.0"
        assert app_config.http.max_pdf_size_mb == 20
        assert app_config.logging.level == "DEBUG"
        assert app_config.logging.format == "json"
        assert env_config.log_level is None

    def test_defaults_without_config_file(self):
        app_config, _ = load_config()

        assert ReclassifierMode(app_config.reclassifier.mode) is ReclassifierMode.STRUCTURAL
        assert app_config.reclassifier.line_number_width == 8
        assert app_config.reclassifier.max_join_length == 120
        assert app_config.filtering.enabled is True
        assert app_config.http.timeout == 30
        assert app_config.http.verify_ssl is True

    def test_finds_config_in_config_directory(self, tmp_path):
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / "config.yaml").write_text("filtering:\n  enabled: false\n")

        app_config, _ = load_config()

        assert app_config.filtering.enabled is False

    def test_prefers_config_yaml_in_working_directory(self, tmp_path):
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / "config.yaml").write_text("http:\n  timeout: 60\n")
        (tmp_path / "config.yaml").write_text("http:\n  timeout: 90\n")

        app_config, _ = load_config()

        assert app_config.http.timeout == 90

    def test_empty_file_uses_defaults(self, tmp_path):
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")

        app_config, _ = load_config(config_file)

        assert app_config == AppConfig()

    def test_explicit_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        config_file = tmp_path / "broken.yaml"
        config_file.write_text("reclassifier: [unclosed\n")

        with pytest.raises(ConfigurationError, match="Failed to parse YAML"):
            load_config(config_file)

    def test_top_level_must_be_mapping(self, tmp_path):
        config_file = tmp_path / "list.yaml"
        config_file.write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError, match="mapping"):
            load_config(config_file)

    def test_invalid_values_are_all_reported(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(FIXTURES_DIR / "invalid_config.yaml")

        errors = exc_info.value.errors
        assert len(errors) == 4
        assert any("reclassifier -> mode" in error for error in errors)
        assert any("reclassifier -> line_number_width" in error for error in errors)
        assert any("http -> timeout" in error for error in errors)
        assert any("http -> user_agent" in error for error in errors)
        assert "Validation Errors:" in str(exc_info.value)
        assert "Suggestions:" in str(exc_info.value)
        assert exc_info.value.source == str(FIXTURES_DIR / "invalid_config.yaml")
        assert str(exc_info.value).startswith(
            f"Configuration validation failed ({FIXTURES_DIR / 'invalid_config.yaml'})"
        )

    def test_validate_config_file(self, capsys):
        assert validate_config_file(FIXTURES_DIR / "valid_config.yaml") is True
        assert validate_config_file(FIXTURES_DIR / "invalid_config.yaml") is False

        output = capsys.readouterr().out
        assert "is valid" in output
        assert "validation failed" in output


class TestEnvironmentConfig:
    """Test environment variable overrides."""

    def test_no_variables(self):
        env_config = load_environment_config()

        assert env_config.log_level is None
        assert env_config.verify_ssl is None
        assert env_config.http_timeout is None
        assert env_config.environment == "local"

    def test_valid_variables(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("BILLTEXT_VERIFY_SSL", "false")
        monkeypatch.setenv("BILLTEXT_HTTP_TIMEOUT", "60")
        monkeypatch.setenv("ENVIRONMENT", "staging")

        env_config = load_environment_config()

        assert env_config.log_level == "DEBUG"
        assert env_config.verify_ssl is False
        assert env_config.http_timeout == 60
        assert env_config.environment == "staging"

    def test_invalid_variables_are_all_reported(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "LOUD")
        monkeypatch.setenv("BILLTEXT_VERIFY_SSL", "maybe")
        monkeypatch.setenv("BILLTEXT_HTTP_TIMEOUT", "soon")

        with pytest.raises(ConfigurationError) as exc_info:
            load_environment_config()

        assert len(exc_info.value.errors) == 3
        assert exc_info.value.source == "environment"
        assert "  3. " in str(exc_info.value)

    def test_timeout_out_of_range(self, monkeypatch):
        monkeypatch.setenv("BILLTEXT_HTTP_TIMEOUT", "1")

        with pytest.raises(ConfigurationError, match="between 5 and 300"):
            load_environment_config()

    def test_environment_overrides_http_settings(self, monkeypatch):
        monkeypatch.setenv("BILLTEXT_VERIFY_SSL", "0")
        monkeypatch.setenv("BILLTEXT_HTTP_TIMEOUT", "120")

        app_config, _ = load_config(FIXTURES_DIR / "valid_config.yaml")

        assert app_config.http.verify_ssl is False
        assert app_config.http.timeout == 120


class TestConfigWarnings:
    """Test non-fatal configuration warnings."""

    def test_no_warnings_for_defaults(self):
        assert check_for_warnings({}) == []

    def test_disabled_tls_verification(self):
        warning_messages = check_for_warnings({"http": {"verify_ssl": False}})
        assert any("verify_ssl" in message for message in warning_messages)

    def test_large_join_length(self):
        warning_messages = check_for_warnings({"reclassifier": {"max_join_length": 300}})
        assert any("max_join_length" in message for message in warning_messages)

    def test_strict_mode_without_filtering(self):
        warning_messages = check_for_warnings(
            {"reclassifier": {"mode": "strict"}, "filtering": {"enabled": False}}
        )
        assert len(warning_messages) == 1

    def test_warnings_emitted_on_load(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("http:\n  verify_ssl: false\n")

        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            load_config(config_file)

        assert any("verify_ssl" in str(w.message) for w in caught)
