"""Configuration command for Passion Hub CLI."""

import click
from rich.console import Console
from rich.panel import Panel

from passionhub.config import CONFIG_PATH, create_template_config

console = Console()


@click.command()
@click.option("--force", is_flag=True, help="Overwrite an existing config file.")
def init(force: bool) -> None:
    """Write a template configuration file.

    The file is created at ~/.config/passionhub/config.toml. Leave
    backend.url empty to send requests to the configured origin.
    """
    if CONFIG_PATH.exists() and not force:
        console.print(
            f"[yellow]Config already exists at {CONFIG_PATH}. "
            "Use --force to overwrite.[/yellow]"
        )
        return

    config_path = create_template_config(CONFIG_PATH)
    console.print(Panel(
        f"[green]✓[/green] Configuration written to:\n"
        f"[cyan]{config_path}[/cyan]\n\n"
        "[dim]Set backend.url (or PASSIONHUB_BACKEND_URL) to point at your entries service.[/dim]",
        title="[bold green]Config Created[/bold green]",
        border_style="green",
    ))
