"""Tests for convcommit.global_config module."""

import stat
from pathlib import Path

import pytest
import yaml

from convcommit.global_config import (
    GlobalConfigError,
    ensure_global_config_dir,
    get_active_base_url,
    get_active_model,
    get_config_file_path,
    get_credential,
    get_credentials_file_path,
    get_editor_preference,
    get_global_config_dir,
    get_temperature,
    is_configured,
    load_credentials,
    load_global_config,
    save_credential,
    save_global_config,
    set_active_base_url,
    set_active_model,
    set_editor_preference,
)


class TestGlobalConfigDir:
    """Tests for global config directory functions."""

    def test_get_global_config_dir_returns_path(self):
        """Test that get_global_config_dir returns a Path."""
        result = get_global_config_dir()
        assert isinstance(result, Path)
        assert ".convcommit" in str(result)

    def test_ensure_global_config_dir_creates_directory(self, isolated_config):
        """Test that ensure_global_config_dir creates the directory."""
        result = ensure_global_config_dir()

        assert isolated_config.exists()
        assert result == isolated_config

    def test_file_paths(self):
        """Test config and credentials file names."""
        assert get_config_file_path().name == "config.yaml"
        assert get_credentials_file_path().name == "credentials"


class TestLoadSaveGlobalConfig:
    """Tests for loading and saving global config."""

    def test_load_returns_empty_if_missing(self):
        """Test that load returns empty dict if file doesn't exist."""
        assert load_global_config() == {}
        assert is_configured() is False

    def test_save_creates_file(self):
        """Test saving config creates the file."""
        save_global_config({"model": "gpt-4o"})

        content = yaml.safe_load(get_config_file_path().read_text())
        assert content["model"] == "gpt-4o"
        assert is_configured() is True

    def test_load_invalid_yaml_raises(self, isolated_config):
        """Test that invalid YAML raises GlobalConfigError."""
        isolated_config.mkdir(parents=True)
        (isolated_config / "config.yaml").write_text("model: [unclosed\n")

        with pytest.raises(GlobalConfigError):
            load_global_config()

    def test_load_non_mapping_raises(self, isolated_config):
        """Test that a YAML list is rejected."""
        isolated_config.mkdir(parents=True)
        (isolated_config / "config.yaml").write_text("- a\n- b\n")

        with pytest.raises(GlobalConfigError) as exc_info:
            load_global_config()

        assert "expected a mapping" in str(exc_info.value)


class TestSettings:
    """Tests for individual setting getters and setters."""

    def test_model(self):
        """Test setting and getting the model."""
        assert get_active_model() is None
        set_active_model("gpt-4.1")
        assert get_active_model() == "gpt-4.1"

    def test_base_url(self):
        """Test setting and getting the base URL."""
        set_active_base_url("http://localhost:8000/v1")
        assert get_active_base_url() == "http://localhost:8000/v1"

    def test_editor(self):
        """Test setting and getting the editor."""
        set_editor_preference("vim")
        assert get_editor_preference() == "vim"

    def test_settings_preserve_each_other(self):
        """Test that setters keep other keys."""
        set_active_model("gpt-4.1")
        set_editor_preference("nano")

        config = load_global_config()
        assert config == {"model": "gpt-4.1", "editor": "nano"}

    def test_temperature(self):
        """Test reading temperature."""
        save_global_config({"temperature": 0.5})
        assert get_temperature() == 0.5


class TestCredentials:
    """Tests for credentials management."""

    def test_load_credentials_returns_empty_if_missing(self):
        """Test load returns empty dict if no credentials file."""
        assert load_credentials() == {}

    def test_save_and_get_credential(self):
        """Test saving then reading a key."""
        save_credential("OPENAI_API_KEY", "sk-test-123")

        assert get_credential("OPENAI_API_KEY") == "sk-test-123"

    def test_credentials_file_is_private(self):
        """Test that the credentials file is owner read/write only."""
        save_credential("OPENAI_API_KEY", "sk-test-123")

        mode = stat.S_IMODE(get_credentials_file_path().stat().st_mode)
        assert mode == stat.S_IRUSR | stat.S_IWUSR

    def test_update_keeps_other_keys(self):
        """Test that updating one key keeps the rest."""
        save_credential("OPENAI_API_KEY", "sk-old")
        save_credential("OTHER_KEY", "other")
        save_credential("OPENAI_API_KEY", "sk-new")

        assert load_credentials() == {"OPENAI_API_KEY": "sk-new", "OTHER_KEY": "other"}

    def test_comments_and_blank_lines_ignored(self, isolated_config):
        """Test parsing of comments and blank lines."""
        isolated_config.mkdir(parents=True)
        (isolated_config / "credentials").write_text(
            "# header\n\nOPENAI_API_KEY = sk-spaced \n"
        )

        assert load_credentials() == {"OPENAI_API_KEY": "sk-spaced"}

    def test_missing_credential_is_none(self):
        """Test that an unknown key returns None."""
        assert get_credential("OPENAI_API_KEY") is None
