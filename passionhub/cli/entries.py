"""Entry commands for Passion Hub CLI.

Lists categories, shows the entries of a category and creates entries.
"""

import asyncio
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from passionhub.cli.common import build_client, get_config, render_entries
from passionhub.models import CATEGORIES, category_keys

console = Console()


def _warn_unknown(category: str) -> None:
    if category not in category_keys():
        console.print(f"[yellow]'{category}' is not one of the known categories[/yellow]")


@click.command()
@click.pass_context
def categories(ctx: click.Context) -> None:
    """List the journal categories."""
    config = get_config(ctx)

    table = Table(title="Categories", show_header=True, header_style="bold cyan")
    table.add_column("Key", style="bold")
    table.add_column("Label")
    table.add_column("Default", justify="center")

    for category in CATEGORIES:
        is_default = category.key == config.default_category
        table.add_row(category.key, category.label, "[green]✓[/green]" if is_default else "")

    console.print(table)


@click.command()
@click.option(
    "--category", "-c",
    default=None,
    help="Category key (default: the configured default category).",
)
@click.pass_context
def entries(ctx: click.Context, category: Optional[str]) -> None:
    """Show the entries of a category.

    \b
    Examples:
      passionhub entries              # Default category
      passionhub entries -c coding    # Coding entries
    """
    config = get_config(ctx)
    category = category or config.default_category
    _warn_unknown(category)

    async def run():
        async with build_client(config) as client:
            client.select_category(category)
            await client.wait_idle()
            return client.visible_entries

    visible = asyncio.run(run())
    render_entries(console, visible, category)


@click.command()
@click.option("--category", "-c", default=None, help="Category key.")
@click.option("--title", "-t", required=True, help="Entry title.")
@click.option("--content", required=True, help="Entry body.")
@click.option("--mood", "-m", default="", help="Mood tag (optional).")
@click.pass_context
def add(ctx: click.Context, category: Optional[str], title: str, content: str, mood: str) -> None:
    """Create an entry and show the refreshed category.

    \b
    Examples:
      passionhub add -c football -t "Goal!" --content "Great match" -m happy
    """
    config = get_config(ctx)
    category = category or config.default_category

    if not title.strip() or not content.strip():
        console.print(Panel(
            "[red]Title and content are required.[/red]",
            title="[bold red]Error[/bold red]",
            border_style="red",
        ))
        raise SystemExit(1)

    _warn_unknown(category)

    async def run():
        async with build_client(config) as client:
            client.set_active_category(category)
            created = await client.submit_entry(category, title, content, mood)
            return created, client.visible_entries

    created, visible = asyncio.run(run())

    if not created:
        console.print(Panel(
            "[red]✗[/red] The entry could not be saved.\n\n"
            f"[dim]Check that the entries service at {config.api_base} is reachable.[/dim]",
            title="[bold red]Save Failed[/bold red]",
            border_style="red",
        ))
        raise SystemExit(1)

    console.print(f"[green]✓ Saved entry to {category}[/green]")
    render_entries(console, visible, category)
