"""Helpers shared by the Passion Hub CLI commands."""

from typing import Iterable, Optional

import click
from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from passionhub.api import BaseEntriesApi, HttpEntriesApi
from passionhub.client import JournalClient
from passionhub.config import ClientConfig, load_config
from passionhub.logging_config import setup_logging
from passionhub.models import Entry, category_label

EMPTY_STATE = "No entries yet. Be the first to add one!"


def get_config(ctx: click.Context) -> ClientConfig:
    """Load configuration, apply command-line overrides and set up logging."""
    obj = ctx.find_root().obj or {}
    config = load_config()

    overrides = {}
    if obj.get("backend_url"):
        overrides["backend_url"] = obj["backend_url"]
    if obj.get("verbose"):
        overrides["log_level"] = "INFO"
    if overrides:
        config = config.model_copy(update=overrides)

    setup_logging(config.log_level)
    return config


def build_api(config: ClientConfig) -> BaseEntriesApi:
    """Create the entries service client for a configuration."""
    return HttpEntriesApi(config.api_base, timeout=config.timeout)


def build_client(config: ClientConfig) -> JournalClient:
    return JournalClient(build_api(config), default_category=config.default_category)


def render_entry(entry: Entry) -> Panel:
    """Render one entry as a panel.

    Content is shown as plain text so line breaks survive and any square
    brackets are not read as markup.
    """
    body = [Text(entry.content)]
    if entry.mood:
        body.append(Text(f"Mood: {entry.mood}", style="magenta"))

    return Panel(
        Group(*body),
        title=Text(entry.title, style="bold"),
        title_align="left",
        subtitle=Text(category_label(entry.category), style="dim"),
        subtitle_align="right",
        border_style="purple",
    )


def render_entries(
    console: Console,
    entries: Iterable[Entry],
    category: str,
    loading: bool = False,
    heading: Optional[str] = None,
) -> None:
    """Print the entry list of a category."""
    entries = list(entries)
    title = heading or f"Recent entries - {category_label(category)}"
    header = Text(title, style="bold")
    if loading:
        header.append("  Loading...", style="dim")
    console.print(header)

    if not entries:
        console.print(f"[dim]{EMPTY_STATE}[/dim]")
        return

    for entry in entries:
        console.print(render_entry(entry))
