"""Main CLI entry point for Passion Hub.

Subcommand modules are imported only when their command is invoked.
"""

import importlib
from typing import Optional

import click
from rich.console import Console

console = Console()


class LazyGroup(click.Group):
    """A click Group that imports its commands on first use."""

    def __init__(self, *args, lazy_subcommands: dict[str, str] | None = None, **kwargs):
        """Initialize the lazy group.

        Args:
            lazy_subcommands: Mapping of command names to module paths.
        """
        super().__init__(*args, **kwargs)
        self._lazy_subcommands = lazy_subcommands or {}

    def list_commands(self, ctx: click.Context) -> list[str]:
        base = super().list_commands(ctx)
        return sorted(set(base) | set(self._lazy_subcommands))

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        if cmd_name in self.commands:
            return self.commands[cmd_name]
        if cmd_name in self._lazy_subcommands:
            return self._lazy_load(cmd_name)
        return None

    def _lazy_load(self, cmd_name: str) -> click.Command:
        module_path = self._lazy_subcommands[cmd_name]
        module = importlib.import_module(module_path)

        cmd = None
        for attr_name in dir(module):
            attr = getattr(module, attr_name)
            if isinstance(attr, click.Command) and attr.name == cmd_name:
                cmd = attr
                break

        if cmd is None:
            raise click.ClickException(f"Could not find command '{cmd_name}' in {module_path}")

        self.add_command(cmd)
        return cmd


LAZY_SUBCOMMANDS = {
    "categories": "passionhub.cli.entries",
    "entries": "passionhub.cli.entries",
    "add": "passionhub.cli.entries",
    "browse": "passionhub.cli.browse",
    "init": "passionhub.cli.init",
}


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(cls=LazyGroup, lazy_subcommands=LAZY_SUBCOMMANDS, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="passionhub")
@click.option(
    "--backend-url",
    default=None,
    help="Entries service base URL (overrides config and PASSIONHUB_BACKEND_URL).",
)
@click.option("-v", "--verbose", is_flag=True, help="Log requests at INFO level.")
@click.pass_context
def cli(ctx: click.Context, backend_url: Optional[str], verbose: bool) -> None:
    """Passion Hub - a journal for football, Star Wars, coding, drawing,
    music, art, and hacking.

    \b
    Quick Start:
      passionhub init                      # Write a config file
      passionhub entries -c coding         # Show coding entries
      passionhub add -c music -t "Riff" --content "New chord progression"
      passionhub browse                    # Interactive session
    """
    ctx.ensure_object(dict)
    ctx.obj["backend_url"] = backend_url
    ctx.obj["verbose"] = verbose


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
