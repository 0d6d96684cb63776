"""CLI commands for global configuration management."""

import typer

from convcommit import config, global_config

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage global convcommit configuration in ~/.convcommit/",
    add_completion=False,
)


def _mask_key(api_key: str) -> str:
    return api_key[:8] + "..." + api_key[-4:] if len(api_key) > 12 else "***"


@config_app.command("show")
def config_show() -> None:
    """Show the effective configuration."""
    try:
        config.load_config()
        stored = global_config.load_global_config()
        api_key = global_config.get_credential(config.API_KEY_ENV_VAR)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error reading configuration: {e}", err=True)
        raise typer.Exit(1)

    typer.echo("Current convcommit configuration:")
    typer.echo()
    typer.echo(f"  Model: {config.ACTIVE_MODEL}")
    typer.echo(f"  Base URL: {config.ACTIVE_BASE_URL}")
    typer.echo(f"  Temperature: {config.TEMPERATURE}")

    editor = stored.get("editor")
    if editor:
        typer.echo(f"  Editor: {editor}")

    typer.echo()
    if api_key:
        typer.echo(f"  API Key ({config.API_KEY_ENV_VAR}, credentials file): {_mask_key(api_key)}")
    else:
        typer.echo(f"  API Key ({config.API_KEY_ENV_VAR}, credentials file): not set")


@config_app.command("set-key")
def config_set_key() -> None:
    """Store the API key in ~/.convcommit/credentials."""
    api_key = typer.prompt("Enter your API key", hide_input=True)

    try:
        global_config.save_credential(config.API_KEY_ENV_VAR, api_key.strip())
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ API key saved as {config.API_KEY_ENV_VAR}")


@config_app.command("set-model")
def config_set_model(
    model: str = typer.Argument(..., help="Model name (e.g., gpt-4.1-mini)"),
) -> None:
    """Set the default model."""
    try:
        global_config.set_active_model(model)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ Model set to: {model}")


@config_app.command("set-base-url")
def config_set_base_url(
    base_url: str = typer.Argument(
        ...,
        help="Base URL of an OpenAI-compatible API (e.g., https://api.openai.com/v1)",
    ),
) -> None:
    """Set the chat-completion base URL."""
    if not base_url.startswith(("http://", "https://")):
        typer.echo(f"Invalid base URL: {base_url}", err=True)
        raise typer.Exit(1)

    try:
        global_config.set_active_base_url(base_url.rstrip("/"))
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ Base URL set to: {base_url.rstrip('/')}")


@config_app.command("set-editor")
def config_set_editor(
    editor: str = typer.Argument(..., help="Editor command (e.g., nano, vim, 'code --wait')"),
) -> None:
    """Set the editor used to review commit messages."""
    try:
        global_config.set_editor_preference(editor)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ Editor set to: {editor}")
