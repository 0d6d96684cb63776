"""Git write operations used by the commit workflow.

Contains:
- stage_all: Stage every change in the working tree
- create_commit: Commit the index with a message
- push: Push the current branch
- get_branch: Current branch name
"""

from convcommit.git.runner import _run_git_command


def stage_all() -> None:
    """Stage all changes (git add .).

    Raises:
        GitError: If staging fails.
    """
    _run_git_command(["add", "."])


def create_commit(message: str) -> str:
    """Create a commit with the given message.

    Args:
        message: The full commit message, passed verbatim to git.

    Returns:
        git's stdout (the commit summary).

    Raises:
        GitError: If the commit fails; carries git's stderr.
    """
    return _run_git_command(["commit", "-m", message])


def push() -> str:
    """Push the current branch to its upstream.

    Returns:
        git's stdout.

    Raises:
        GitError: If the push fails; carries git's stderr.
    """
    return _run_git_command(["push"])


def get_branch() -> str:
    """Get the current branch name.

    Returns:
        The current branch name, or 'HEAD (detached)' if in detached state.
    """
    branch = _run_git_command(["branch", "--show-current"])
    if not branch:
        return "HEAD (detached)"
    return branch
