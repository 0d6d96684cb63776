"""Shared utility functions for CLI commands."""

import os
import shlex
import shutil
import subprocess
import tempfile
from pathlib import Path

import typer

from convcommit import global_config
from convcommit.config import EDITOR_ENV_VAR
from convcommit.formatters import clean_edited_message
from convcommit.git import GitError, get_branch

YES_ANSWERS = ("y", "yes")
NO_ANSWERS = ("n", "no")

EDIT_HINT = """
# Edit the commit message above. Lines starting with '#' are ignored.
# Format: type(scope): description
# An empty message cancels the commit.
"""


def confirm(question: str) -> bool:
    """Ask a yes/no question until a valid answer is given.

    Only y, yes, n and no are accepted (case-insensitive). Anything else,
    including an empty answer, re-prompts.

    Args:
        question: The question to display.

    Returns:
        True for yes, False for no.
    """
    while True:
        answer = typer.prompt(
            f"{question} [y/n]",
            default="",
            show_default=False,
        )
        answer = answer.strip().lower()

        if answer in YES_ANSWERS:
            return True
        if answer in NO_ANSWERS:
            return False

        typer.echo("Please answer 'y' or 'n'.", err=True)


def get_current_branch_safe() -> str:
    """Safely get the current branch name without raising errors.

    Returns:
        The branch name, or 'unknown' if it cannot be determined.
    """
    try:
        return get_branch()
    except GitError:
        return "unknown"


def find_editor() -> list[str]:
    """Find an available text editor.

    Preference order:
    1. editor from ~/.convcommit/config.yaml
    2. $EDITOR environment variable
    3. nano, then vi

    Returns:
        List of command parts to run the editor.
    """
    try:
        preferred = global_config.get_editor_preference()
    except global_config.GlobalConfigError:
        preferred = None
    if preferred:
        return shlex.split(preferred)

    editor = os.environ.get(EDITOR_ENV_VAR)
    if editor:
        return shlex.split(editor)

    # noinspection PyArgumentList
    if shutil.which("nano"):
        return ["nano"]

    # Last resort: vi
    return ["vi"]


def open_editor(file_path: Path) -> None:
    """Open the file in an editor and wait for it to close.

    Args:
        file_path: Path to the file to edit.

    Raises:
        typer.Exit: If the editor is missing or exits non-zero.
    """
    editor_cmd = find_editor()

    typer.echo(f"Opening editor: {' '.join(editor_cmd)}", err=True)

    try:
        result = subprocess.run(
            editor_cmd + [str(file_path)],
            check=False,
        )
    except FileNotFoundError:
        typer.echo(f"Error: Editor not found: {editor_cmd[0]}", err=True)
        raise typer.Exit(1)

    if result.returncode != 0:
        typer.echo(
            f"Error: Editor exited with code {result.returncode}; aborting commit.",
            err=True,
        )
        raise typer.Exit(1)


def edit_message(message: str) -> str:
    """Let the user review and edit a commit message in their editor.

    Args:
        message: The generated commit line.

    Returns:
        The edited message with comment lines removed, or an empty string
        if the user cleared it.
    """
    with tempfile.NamedTemporaryFile(
        mode="w",
        prefix="COMMIT_EDITMSG_",
        suffix=".txt",
        delete=False,
    ) as f:
        f.write(message + "\n" + EDIT_HINT)
        file_path = Path(f.name)

    try:
        open_editor(file_path)
        edited = file_path.read_text()
    finally:
        file_path.unlink(missing_ok=True)

    return clean_edited_message(edited)


def print_message(message: str) -> None:
    """Print the commit message framed by separator lines."""
    typer.echo("")
    typer.echo("=" * 60)
    typer.echo(message)
    typer.echo("=" * 60)
