"""Commit message model and formatting."""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from convcommit.config import MAX_MESSAGE_CHARS

CommitType = Literal["feat", "fix", "docs", "style", "refactor", "test", "chore"]


class CommitDescriptor(BaseModel):
    """Pydantic model for the structured commit returned by the LLM.

    Attributes:
        type: Conventional Commit type.
        scope: Affected component, or None.
        message: Short imperative description (max 50 chars).
    """

    model_config = ConfigDict(extra="forbid")

    type: CommitType
    scope: Optional[str] = None
    message: str = Field(max_length=MAX_MESSAGE_CHARS)

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, v):
        """Accept surrounding whitespace and upper case in the type."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("scope", mode="before")
    @classmethod
    def blank_scope_is_none(cls, v):
        """Treat an empty scope as no scope."""
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @field_validator("message", mode="before")
    @classmethod
    def message_must_not_be_empty(cls, v):
        """Keep only the first line of the message and ensure it is not empty."""
        if isinstance(v, str):
            v = v.strip().split("\n")[0].strip()
            if not v:
                raise ValueError("Message cannot be empty")
        return v


def build_commit_line(descriptor: CommitDescriptor) -> str:
    """Render a CommitDescriptor as a Conventional Commit line.

    Example output:
        feat(auth): add token refresh endpoint
    """
    out = descriptor.type.strip()
    scope = (descriptor.scope or "").strip()
    if scope:
        out += f"({scope})"
    return f"{out}: {descriptor.message.strip()}"


def clean_edited_message(text: str) -> str:
    """Clean a message returned from the editor.

    Lines starting with '#' are dropped, trailing whitespace is removed
    from every line, and leading/trailing blank lines are removed.

    Returns:
        The cleaned message, or an empty string if nothing is left.
    """
    lines = [
        line.rstrip()
        for line in text.splitlines()
        if not line.startswith("#")
    ]
    return "\n".join(lines).strip("\n")
