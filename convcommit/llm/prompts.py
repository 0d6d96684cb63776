"""Prompts and response schema for commit message generation."""

from convcommit.config import COMMIT_TYPES, MAX_MESSAGE_CHARS

SYSTEM_PROMPT = f"""You are a git commit message generator.
Analyze changes and output JSON with:
- type: {"|".join(COMMIT_TYPES)}
- scope: affected component (null if none)
- message: clear description ({MAX_MESSAGE_CHARS} chars max)
Return ONLY valid JSON, no other text."""

USER_PROMPT_TEMPLATE = """Changes:
{diff}"""

COMMIT_SCHEMA = {
    "type": "object",
    "additionalProperties": False,
    "required": ["type", "scope", "message"],
    "properties": {
        "type": {"type": "string", "enum": list(COMMIT_TYPES)},
        "scope": {"type": ["string", "null"]},
        "message": {"type": "string", "maxLength": MAX_MESSAGE_CHARS},
    },
}

SCHEMA_NAME = "commit_message"


def build_user_prompt(diff: str) -> str:
    """Build the user prompt holding the staged diff."""
    return USER_PROMPT_TEMPLATE.format(diff=diff)


def build_response_format() -> dict:
    """Build the structured-output response_format block.

    Returns:
        A json_schema response format that constrains the model to
        emit only a commit object.
    """
    return {
        "type": "json_schema",
        "json_schema": {
            "name": SCHEMA_NAME,
            "schema": COMMIT_SCHEMA,
            "strict": True,
        },
    }
