from __future__ import annotations

import typer
from rich.console import Console

from tree_create_size.cli.commands.show import show_command
from tree_create_size.cli.commands.stats import stats_command
from tree_create_size.logging import configure_logging

app = typer.Typer(
    name="tree-create-size",
    help="Create trees of a given size and inspect their shape",
    add_completion=False,
)

console = Console()

app.command("stats")(stats_command)
app.command("show")(show_command)


def main():
    configure_logging()
    app()


if __name__ == "__main__":
    main()
