"""Global configuration management for convcommit.

Handles user-level configuration stored in ~/.convcommit/:
- config.yaml: Model, endpoint, and preference settings
- credentials: API keys
"""

import os
import stat
from pathlib import Path
from typing import Dict, Optional, Any

import yaml


class GlobalConfigError(Exception):
    """Raised when there's an error with global configuration."""
    pass


_CONFIG_DIR = Path.home() / ".convcommit"


def get_global_config_dir() -> Path:
    """Get the global convcommit configuration directory.

    Returns:
        Path to ~/.convcommit/
    """
    return _CONFIG_DIR


def ensure_global_config_dir() -> Path:
    """Ensure the global config directory exists.

    Returns:
        Path to ~/.convcommit/
    """
    config_dir = get_global_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_file_path() -> Path:
    """Get path to config.yaml file."""
    return get_global_config_dir() / "config.yaml"


def get_credentials_file_path() -> Path:
    """Get path to credentials file."""
    return get_global_config_dir() / "credentials"


def load_global_config() -> Dict[str, Any]:
    """Load global configuration from ~/.convcommit/config.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.

    Raises:
        GlobalConfigError: If the file cannot be read or is not valid YAML.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config, dict):
        raise GlobalConfigError(f"Invalid config in {config_file}: expected a mapping")
    return config


def save_global_config(config: Dict[str, Any]) -> None:
    """Save global configuration to ~/.convcommit/config.yaml.

    Args:
        config: Configuration dictionary to save.
    """
    ensure_global_config_dir()
    config_file = get_config_file_path()

    try:
        with open(config_file, "w") as f:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False)
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to save config to {config_file}: {e}")


def _parse_credentials(lines) -> Dict[str, str]:
    credentials = {}
    for line in lines:
        line = line.strip()
        # Skip empty lines and comments
        if not line or line.startswith("#"):
            continue
        if "=" in line:
            key, value = line.split("=", 1)
            credentials[key.strip()] = value.strip()
    return credentials


def load_credentials() -> Dict[str, str]:
    """Load API keys from ~/.convcommit/credentials.

    Returns:
        Dictionary mapping environment variable names to API keys.
    """
    credentials_file = get_credentials_file_path()

    if not credentials_file.exists():
        return {}

    try:
        with open(credentials_file, "r") as f:
            return _parse_credentials(f)
    except OSError as e:
        raise GlobalConfigError(f"Failed to load credentials from {credentials_file}: {e}")


def save_credential(key_name: str, api_key: str) -> None:
    """Save or update an API key in the credentials file.

    Args:
        key_name: Environment variable name (e.g., "OPENAI_API_KEY")
        api_key: The API key value.
    """
    ensure_global_config_dir()
    credentials_file = get_credentials_file_path()

    existing_creds = load_credentials()
    existing_creds[key_name] = api_key

    try:
        with open(credentials_file, "w") as f:
            f.write("# convcommit API credentials\n")
            f.write("# Format: OPENAI_API_KEY=your_key_here\n\n")

            for key, value in existing_creds.items():
                f.write(f"{key}={value}\n")

        # Owner read/write only
        os.chmod(credentials_file, stat.S_IRUSR | stat.S_IWUSR)

    except OSError as e:
        raise GlobalConfigError(f"Failed to save credential: {e}")


def get_credential(key_name: str) -> Optional[str]:
    """Get an API key from the credentials file.

    Args:
        key_name: Environment variable name (e.g., "OPENAI_API_KEY")

    Returns:
        The API key if found, None otherwise.
    """
    return load_credentials().get(key_name)


def get_active_model() -> Optional[str]:
    """Get the model name from global config, or None if not configured."""
    return load_global_config().get("model")


def set_active_model(model: str) -> None:
    """Set the model name in global config."""
    config = load_global_config()
    config["model"] = model
    save_global_config(config)


def get_active_base_url() -> Optional[str]:
    """Get the chat-completion base URL from global config, or None if not configured."""
    return load_global_config().get("base_url")


def set_active_base_url(base_url: str) -> None:
    """Set the chat-completion base URL in global config."""
    config = load_global_config()
    config["base_url"] = base_url
    save_global_config(config)


def get_temperature() -> Optional[float]:
    """Get temperature setting from global config.

    Returns:
        Temperature value, or None if not configured.
    """
    return load_global_config().get("temperature")


def get_editor_preference() -> Optional[str]:
    """Get the user's preferred editor from global config.

    Returns:
        Editor command string, or None if not set.
    """
    return load_global_config().get("editor")


def set_editor_preference(editor: str) -> None:
    """Set the user's preferred editor in global config.

    Args:
        editor: Editor command (e.g., "nano", "vim", "code --wait")
    """
    config = load_global_config()
    config["editor"] = editor
    save_global_config(config)


def is_configured() -> bool:
    """Check if a config.yaml exists."""
    return get_config_file_path().exists()
