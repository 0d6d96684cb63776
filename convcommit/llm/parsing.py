"""JSON parsing and validation utilities for LLM responses.

Contains functions for parsing and validating LLM responses:
- parse_json_response: Parse raw LLM response as JSON
- validate_commit_json: Validate parsed JSON against the CommitDescriptor schema
"""

import json

from pydantic import ValidationError

from convcommit.formatters import CommitDescriptor
from convcommit.llm.exceptions import JSONParseError


def parse_json_response(raw_response: str) -> dict:
    """Parse the LLM response as JSON.

    Args:
        raw_response: The raw text response from the LLM.

    Returns:
        The parsed JSON as a dictionary.

    Raises:
        JSONParseError: If parsing fails.
    """
    cleaned = raw_response.strip()

    # Remove markdown code fences if the model included them despite instructions
    if cleaned.startswith("```"):
        lines = cleaned.split("\n")
        # Remove first line (```json or ```)
        lines = lines[1:]
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        cleaned = "\n".join(lines)

    # Find the first { and last }
    first_brace = cleaned.find("{")
    last_brace = cleaned.rfind("}")

    if first_brace != -1 and last_brace != -1 and last_brace > first_brace:
        cleaned = cleaned[first_brace:last_brace + 1]

    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise JSONParseError(
            f"Failed to parse LLM response as JSON.\n"
            f"Error: {e}\n"
            f"Raw response:\n{raw_response}"
        )

    if not isinstance(parsed, dict):
        raise JSONParseError(
            f"LLM response is not a JSON object.\n"
            f"Raw response:\n{raw_response}"
        )

    return parsed


def validate_commit_json(parsed: dict, raw_response: str) -> CommitDescriptor:
    """Validate parsed JSON against the CommitDescriptor schema.

    Args:
        parsed: The parsed JSON dictionary.
        raw_response: The original raw response (for error messages).

    Returns:
        A validated CommitDescriptor object.

    Raises:
        JSONParseError: If validation fails.
    """
    try:
        return CommitDescriptor(**parsed)
    except (ValidationError, TypeError) as e:
        raise JSONParseError(
            f"LLM response does not match expected schema.\n"
            f"Error: {e}\n"
            f"Raw response:\n{raw_response}"
        )
