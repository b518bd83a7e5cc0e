"""Interactive journal session for Passion Hub CLI.

Prompts run in a worker thread so fetches keep progressing on the event
loop while the user types.
"""

import asyncio

import click
from rich.console import Console
from rich.text import Text

from passionhub.cli.common import build_client, get_config, render_entries
from passionhub.client import JournalClient, JournalState
from passionhub.models import CATEGORIES, category_label

console = Console()

HELP_TEXT = (
    "[dim]Enter a number or key to switch category, "
    "[cyan]n[/cyan] new entry, [cyan]r[/cyan] refresh, [cyan]q[/cyan] quit[/dim]"
)


def _render_selector(active: str) -> None:
    line = Text()
    for i, category in enumerate(CATEGORIES, start=1):
        style = "bold reverse magenta" if category.key == active else "magenta"
        line.append(f" {i}:{category.label} ", style=style)
        line.append(" ")
    console.print(line)


def _resolve_choice(choice: str) -> str | None:
    """Map a menu answer to a category key, or None for other commands."""
    if choice.isdigit():
        index = int(choice) - 1
        if 0 <= index < len(CATEGORIES):
            return CATEGORIES[index].key
        return None
    for category in CATEGORIES:
        if choice.lower() in (category.key, category.label.lower()):
            return category.key
    return None


async def _prompt(text: str, **kwargs) -> str:
    return await asyncio.to_thread(click.prompt, text, **kwargs)


async def _compose(client: JournalClient) -> None:
    draft = client.draft
    label = category_label(client.active_category)

    title = await _prompt(f"Title about {label}", default=draft.title, show_default=bool(draft.title))
    client.update_draft(title=title)
    content = await _prompt("Content (use \\n for a line break)", default=draft.content,
                            show_default=bool(draft.content))
    client.update_draft(content=content.replace("\\n", "\n"))
    mood = await _prompt("Mood (optional)", default=draft.mood, show_default=False)
    client.update_draft(mood=mood)

    if await client.submit_draft():
        console.print("[green]✓ Saved[/green]")
    elif not client.draft.title.strip() or not client.draft.content.strip():
        console.print("[yellow]Title and content are required.[/yellow]")
    else:
        console.print("[red]✗ Could not save the entry. Your draft was kept.[/red]")


async def _session(client: JournalClient) -> None:
    def on_change(state: JournalState) -> None:
        if state.is_loading:
            console.print("[dim]Loading...[/dim]")

    unsubscribe = client.subscribe(on_change)
    await client.start()

    try:
        while True:
            _render_selector(client.active_category)
            render_entries(
                console,
                client.visible_entries,
                client.active_category,
                loading=client.is_loading,
            )
            console.print(HELP_TEXT)

            choice = (await _prompt(">", default="", show_default=False)).strip()
            if choice in ("q", "quit", "exit"):
                break
            if choice == "n":
                await _compose(client)
            elif choice == "r":
                await client.select_category(client.active_category)
            elif choice:
                key = _resolve_choice(choice)
                if key is None:
                    console.print(f"[yellow]Unknown choice '{choice}'[/yellow]")
                else:
                    await client.select_category(key)
    finally:
        unsubscribe()


@click.command()
@click.option("--category", "-c", default=None, help="Category to start in.")
@click.pass_context
def browse(ctx: click.Context, category: str | None) -> None:
    """Browse and write entries interactively."""
    config = get_config(ctx)
    if category:
        config = config.model_copy(update={"default_category": category})

    async def run():
        async with build_client(config) as client:
            await _session(client)

    try:
        asyncio.run(run())
    except (KeyboardInterrupt, EOFError, click.Abort):
        console.print()
