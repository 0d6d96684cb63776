"""Staged diff retrieval.

Contains:
- truncate_diff: Cut a diff down to the character budget
- get_staged_diff: Read the staged diff (whitespace changes ignored)
"""

from convcommit.config import MAX_DIFF_CHARS
from convcommit.git.exceptions import NoStagedChangesError
from convcommit.git.runner import _run_git_command


def truncate_diff(diff: str, max_chars: int = MAX_DIFF_CHARS) -> str:
    """Truncate the diff to at most max_chars characters.

    Args:
        diff: The raw diff text.
        max_chars: Maximum number of characters to keep.

    Returns:
        The diff unchanged if it fits, otherwise its first max_chars characters.
    """
    if len(diff) > max_chars:
        return diff[:max_chars]
    return diff


def get_staged_diff(max_chars: int = MAX_DIFF_CHARS) -> str:
    """Get the staged diff, ignoring whitespace-only changes within lines.

    Args:
        max_chars: Maximum characters for the diff output.

    Returns:
        The staged diff string, truncated to max_chars.

    Raises:
        NoStagedChangesError: If there are no staged changes.
        GitError: If git fails.
    """
    diff = _run_git_command(["diff", "--cached", "-b"], strip=False)

    if not diff.strip():
        raise NoStagedChangesError(
            "No staged changes found. Stage your changes first with: git add <files>"
        )

    return truncate_diff(diff, max_chars)
