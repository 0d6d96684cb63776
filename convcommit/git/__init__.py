"""Git helpers for convcommit.

This package provides:
- exceptions: GitError, NoStagedChangesError
- runner: _run_git_command, get_repo_root
- diff: get_staged_diff, truncate_diff
- operations: stage_all, create_commit, push, get_branch
"""

from convcommit.git.exceptions import (
    GitError,
    NoStagedChangesError,
)

from convcommit.git.runner import (
    _run_git_command,
    get_repo_root,
)

from convcommit.git.diff import (
    get_staged_diff,
    truncate_diff,
)

from convcommit.git.operations import (
    create_commit,
    get_branch,
    push,
    stage_all,
)

__all__ = [
    "GitError",
    "NoStagedChangesError",
    "_run_git_command",
    "get_repo_root",
    "get_staged_diff",
    "truncate_diff",
    "create_commit",
    "get_branch",
    "push",
    "stage_all",
]
