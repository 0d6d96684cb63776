"""Configuration for convcommit.

Settings are resolved in this order:
1. Environment variables (OPENAI_MODEL, OPENAI_BASE_URL)
2. ~/.convcommit/config.yaml
3. The defaults below
"""

import os

from convcommit import global_config

# ============================================================
# DEFAULT FALLBACK VALUES
# ============================================================

DEFAULT_MODEL = "gpt-4.1-mini"
DEFAULT_BASE_URL = "https://api.openai.com/v1"
DEFAULT_TEMPERATURE = 0.0

# Diff budget sent to the API, in characters
MAX_DIFF_CHARS = 3072

# Maximum length of the commit description
MAX_MESSAGE_CHARS = 50

COMMIT_TYPES = ("feat", "fix", "docs", "style", "refactor", "test", "chore")


# ============================================================
# ENVIRONMENT VARIABLES
# ============================================================

API_KEY_ENV_VAR = "OPENAI_API_KEY"
MODEL_ENV_VAR = "OPENAI_MODEL"
BASE_URL_ENV_VAR = "OPENAI_BASE_URL"
EDITOR_ENV_VAR = "EDITOR"


# ============================================================
# ACTIVE CONFIGURATION (resolved by load_config)
# ============================================================

ACTIVE_MODEL = DEFAULT_MODEL
ACTIVE_BASE_URL = DEFAULT_BASE_URL
TEMPERATURE = DEFAULT_TEMPERATURE


def load_config() -> None:
    """Resolve the active model, base URL and temperature.

    This should be called by the CLI before using the LLM.
    """
    global ACTIVE_MODEL, ACTIVE_BASE_URL, TEMPERATURE

    model = None
    base_url = None
    temperature = None

    try:
        model = global_config.get_active_model()
        base_url = global_config.get_active_base_url()
        temperature = global_config.get_temperature()
    except global_config.GlobalConfigError:
        # Environment variables alone must still be enough to run
        pass

    ACTIVE_MODEL = os.environ.get(MODEL_ENV_VAR) or model or DEFAULT_MODEL
    ACTIVE_BASE_URL = (
        os.environ.get(BASE_URL_ENV_VAR) or base_url or DEFAULT_BASE_URL
    ).rstrip("/")

    try:
        TEMPERATURE = float(temperature) if temperature is not None else DEFAULT_TEMPERATURE
    except (TypeError, ValueError):
        TEMPERATURE = DEFAULT_TEMPERATURE
