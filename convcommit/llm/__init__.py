"""LLM module for convcommit.

Sends the staged diff to an OpenAI-compatible chat-completion endpoint
and returns a validated CommitDescriptor.
"""

from dotenv import find_dotenv, load_dotenv

from convcommit.llm.exceptions import (
    APIStatusError,
    JSONParseError,
    LLMError,
    MissingAPIKeyError,
)
from convcommit.llm.openai_provider import LLMResult, OpenAIProvider


def load_env() -> None:
    """Load variables from a .env file in the working directory or its parents."""
    load_dotenv(find_dotenv(usecwd=True))


load_env()


def get_provider(model: str | None = None, base_url: str | None = None) -> OpenAIProvider:
    """Get a provider instance.

    Args:
        model: The model to use. Defaults to the active model from config.
        base_url: The API base URL. Defaults to the active base URL from config.

    Returns:
        An OpenAIProvider instance.
    """
    return OpenAIProvider(model=model, base_url=base_url)


def generate_commit_json(diff: str) -> LLMResult:
    """Generate a commit descriptor from the staged diff.

    This is the main entry point for generating commit messages.

    Args:
        diff: The staged diff from get_staged_diff().

    Returns:
        An LLMResult containing the validated CommitDescriptor and token usage.

    Raises:
        MissingAPIKeyError: If the API key is not set.
        APIStatusError: If the API answers with a non-2xx status.
        JSONParseError: If the LLM response cannot be parsed.
        LLMError: For other LLM-related errors.
    """
    provider = get_provider()
    return provider.generate(diff)


__all__ = [
    "APIStatusError",
    "JSONParseError",
    "LLMError",
    "LLMResult",
    "MissingAPIKeyError",
    "OpenAIProvider",
    "get_provider",
    "generate_commit_json",
    "load_env",
]
