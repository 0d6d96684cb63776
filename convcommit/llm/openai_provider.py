"""OpenAI-compatible chat-completion provider.

Works against api.openai.com or any endpoint that speaks the same
/chat/completions protocol (set OPENAI_BASE_URL).
"""

import os
from dataclasses import dataclass

import openai
from openai import OpenAI

from convcommit import config, global_config
from convcommit.formatters import CommitDescriptor
from convcommit.llm.exceptions import (
    APIStatusError,
    JSONParseError,
    LLMError,
    MissingAPIKeyError,
)
from convcommit.llm.parsing import parse_json_response, validate_commit_json
from convcommit.llm.prompts import (
    SYSTEM_PROMPT,
    build_response_format,
    build_user_prompt,
)


@dataclass
class LLMResult:
    """Result from an LLM generation call, including token usage."""

    commit: CommitDescriptor
    model: str
    input_tokens: int
    output_tokens: int
    raw_response: str = ""


class OpenAIProvider:
    """Chat-completion provider using the OpenAI SDK."""

    def __init__(
        self,
        model: str | None = None,
        base_url: str | None = None,
        temperature: float | None = None,
    ):
        """Initialize the provider.

        Args:
            model: The model to use. Defaults to the active model from config.
            base_url: API base URL. Defaults to the active base URL from config.
            temperature: Sampling temperature. Defaults to config.TEMPERATURE.
        """
        self.model = model or config.ACTIVE_MODEL
        self.base_url = (base_url or config.ACTIVE_BASE_URL).rstrip("/")
        self.temperature = config.TEMPERATURE if temperature is None else temperature
        self.api_key_env_var = config.API_KEY_ENV_VAR

    def get_api_key(self) -> str:
        """Get the API key from the environment or the credentials file.

        Returns:
            The API key string.

        Raises:
            MissingAPIKeyError: If the key is not found anywhere.
        """
        api_key = os.environ.get(self.api_key_env_var)
        if api_key:
            return api_key

        try:
            api_key = global_config.get_credential(self.api_key_env_var)
        except global_config.GlobalConfigError:
            api_key = None
        if api_key:
            return api_key

        raise MissingAPIKeyError(
            f"{self.api_key_env_var} environment variable is not set. Set it using:\n"
            f"  1. Environment variable: export {self.api_key_env_var}=your_key_here\n"
            f"  2. Run: convcommit config set-key\n"
            f"  3. Manually add to ~/.convcommit/credentials"
        )

    def build_request(self, diff: str) -> dict:
        """Build the keyword arguments for chat.completions.create."""
        return {
            "model": self.model,
            "temperature": self.temperature,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": build_user_prompt(diff)},
            ],
            "response_format": build_response_format(),
        }

    def generate(self, diff: str) -> LLMResult:
        """Generate a commit descriptor for the staged diff.

        Args:
            diff: The (already truncated) staged diff.

        Returns:
            An LLMResult containing the commit descriptor and metadata.

        Raises:
            MissingAPIKeyError: If the API key is not set.
            APIStatusError: If the API answers with a non-2xx status.
            JSONParseError: If the response cannot be parsed.
            LLMError: For other LLM-related errors.
        """
        api_key = self.get_api_key()

        # No retries: a failed request ends the run
        client = OpenAI(api_key=api_key, base_url=self.base_url, max_retries=0)

        try:
            response = client.chat.completions.create(**self.build_request(diff))
        except openai.APIStatusError as e:
            raise APIStatusError(e.status_code, e.response.text)
        except openai.APIError as e:
            raise LLMError(f"API request to {self.base_url} failed: {e}")

        if not response.choices:
            raise JSONParseError("API response contained no choices")

        message = response.choices[0].message
        raw_response = message.content
        if not raw_response:
            refusal = getattr(message, "refusal", None)
            detail = f" (refusal: {refusal})" if refusal else ""
            raise JSONParseError(f"API response contained no message content{detail}")

        parsed = parse_json_response(raw_response)
        commit = validate_commit_json(parsed, raw_response)

        usage = response.usage
        return LLMResult(
            commit=commit,
            model=self.model,
            input_tokens=usage.prompt_tokens if usage else 0,
            output_tokens=usage.completion_tokens if usage else 0,
            raw_response=raw_response,
        )
