"""Main CLI command: stage, generate, review, commit and push."""

import typer

from convcommit.config import MAX_DIFF_CHARS
from convcommit.formatters import build_commit_line
from convcommit.git import (
    GitError,
    NoStagedChangesError,
    create_commit,
    get_repo_root,
    get_staged_diff,
    push,
    stage_all,
)
from convcommit.llm import LLMError, MissingAPIKeyError, generate_commit_json
from convcommit.cli.utils import (
    confirm,
    edit_message,
    get_current_branch_safe,
    print_message,
)


def main_command(
    ctx: typer.Context,
    max_diff_chars: int = typer.Option(
        MAX_DIFF_CHARS,
        "--max-diff-chars",
        min=1,
        help="Maximum characters of the staged diff sent to the API",
    ),
    no_edit: bool = typer.Option(
        False,
        "--no-edit",
        help="Skip the editor review of the generated message",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show the parsed commit fields and token usage",
    ),
) -> None:
    """Generate a Conventional Commit message from your changes, commit and push."""
    # If a subcommand is invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return

    from convcommit.config import load_config
    load_config()

    try:
        get_repo_root()

        # Step 1: Stage everything
        typer.echo("Staging changes...", err=True)
        stage_all()

        # Step 2: Read the staged diff
        diff = get_staged_diff(max_chars=max_diff_chars)

        # Step 3: Ask the LLM for a commit descriptor
        typer.echo("Staged diff found; generating commit message...", err=True)
        llm_result = generate_commit_json(diff)
        commit = llm_result.commit

        if verbose:
            typer.echo(
                f"Parsed commit: type='{commit.type}', scope='{commit.scope or ''}', "
                f"message='{commit.message}'",
                err=True,
            )
            typer.echo(
                f"Model: {llm_result.model} "
                f"({llm_result.input_tokens} input / {llm_result.output_tokens} output tokens)",
                err=True,
            )

        message = build_commit_line(commit)

        # Step 4: Review in the editor
        if not no_edit:
            message = edit_message(message)
            if not message:
                typer.echo("Aborting commit due to empty commit message.", err=True)
                raise typer.Exit(0)

        print_message(message)

        # Step 5: Commit
        typer.echo("")
        if not confirm("Commit with this message?"):
            typer.echo("Commit cancelled.", err=True)
            raise typer.Exit(0)

        typer.echo("Committing...", err=True)
        try:
            output = create_commit(message)
        except GitError as e:
            typer.echo("Commit failed!", err=True)
            typer.echo(str(e), err=True)
            raise typer.Exit(1)

        typer.echo("Commit successful!", err=True)
        if output:
            typer.echo(output)

        # Step 6: Push
        if not confirm("Push to remote?"):
            typer.echo("Commit saved locally (not pushed).", err=True)
            raise typer.Exit(0)

        typer.echo("Pushing...", err=True)
        try:
            push()
        except GitError as e:
            typer.echo("Push failed! The commit is saved locally.", err=True)
            typer.echo(str(e), err=True)
            raise typer.Exit(1)

        typer.echo("Push successful!", err=True)

    except NoStagedChangesError:
        # Display a git-style message for no staged changes
        typer.echo("On branch " + get_current_branch_safe(), err=True)
        typer.echo("", err=True)
        typer.echo("nothing to commit (no staged changes)", err=True)
        raise typer.Exit(1)
    except MissingAPIKeyError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)
    except LLMError as e:
        typer.echo(f"LLM error: {e}", err=True)
        raise typer.Exit(1)
