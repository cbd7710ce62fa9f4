"""Rich table rendering for the CLI layer.

This module is responsible for:

* Todo and attachment tables.
* The history listing.
* The interactive and non-interactive help screens.
* The ``env`` report.

All display-related logic lives here — no storage access, no parsing.
User-supplied text is escaped before it reaches Rich markup.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from toodles.cli.console import console
from toodles.config import AppConfig
from toodles.core.models import AttachmentInfo, CommandCategory, Todo
from toodles.core.registry import CommandRegistry
from toodles.exceptions import EnvironmentError

CHECK_MARK: str = "✅"
CROSS_MARK: str = "✘"


def _import_rich_table() -> type[Any]:
    """Import rich table lazily for rendering."""
    try:
        from rich.table import Table
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Table


def escape(text: str) -> str:
    """Escape Rich markup in *text*; identity when Rich is missing."""
    try:
        from rich.markup import escape as rich_escape
    except ModuleNotFoundError:
        return text
    return str(rich_escape(text))


# ---------------------------------------------------------------------------
# Presentation helpers (pure transforms, no I/O)
# ---------------------------------------------------------------------------

def _done_marker(done: bool) -> str:
    return CHECK_MARK if done else CROSS_MARK


def _format_size(size: int) -> str:
    return f"{size:,}"


# ---------------------------------------------------------------------------
# Todos and attachments
# ---------------------------------------------------------------------------

def render_todos(todos: Iterable[Todo]) -> None:
    """Print todos as an Id/Title/Done/Created table."""
    table_class = _import_rich_table()

    table = table_class(show_header=True, header_style="bold magenta", border_style="dim")
    table.add_column("Id", justify="right", style="bold cyan")
    table.add_column("Title", justify="left", min_width=20, overflow="fold")
    table.add_column("Done", justify="center")
    table.add_column("Created", justify="left", no_wrap=True)

    for todo in todos:
        table.add_row(
            str(todo.id),
            escape(todo.title),
            _done_marker(todo.done),
            todo.created,
        )

    console.print(table)


def render_attachments(attachments: Iterable[AttachmentInfo]) -> None:
    """Print attachment metadata as an Id/Name/Size table."""
    table_class = _import_rich_table()

    table = table_class(show_header=True, header_style="bold magenta", border_style="dim")
    table.add_column("Id", justify="right", style="bold cyan")
    table.add_column("Name", justify="left", overflow="fold")
    table.add_column("Size in bytes", justify="right")

    for attachment in attachments:
        table.add_row(str(attachment.id), escape(attachment.name), _format_size(attachment.size))

    console.print(table)


# ---------------------------------------------------------------------------
# History
# ---------------------------------------------------------------------------

def render_history(entries: Iterable[tuple[int, str]]) -> None:
    """Print ``[index] line`` for every stored history entry."""
    for index, line in entries:
        console.print(f"[bold cyan]\\[{index}][/bold cyan] {escape(line)}")


# ---------------------------------------------------------------------------
# Help screens
# ---------------------------------------------------------------------------

def render_help(registry: CommandRegistry) -> None:
    """Print every command grouped by category."""
    table_class = _import_rich_table()

    table = table_class(show_header=True, header_style="bold cyan", box=None, pad_edge=False)
    table.add_column("Long command", style="magenta", min_width=12)
    table.add_column("Short command", style="magenta", min_width=6)
    table.add_column("Synopsis", style="magenta")
    table.add_column("Description")

    for category in CommandCategory:
        definitions = registry.by_category(category)
        if not definitions:
            continue
        table.add_row("", "", "", "")
        table.add_row(f"[bold yellow]{category.value}[/bold yellow]", "", "", "")
        for definition in definitions:
            table.add_row(
                escape(definition.name),
                escape(definition.short_name or ""),
                escape(definition.synopsis),
                escape(definition.description),
            )

    console.print()
    console.print(table)
    console.print()
    console.print("[bold yellow]Non-interactive mode[/bold yellow]")
    console.print("toodles can be run in non-interactive mode too.")
    console.print("Non-interactive mode is used if at least one argument is given to toodles.")
    console.print("For more information on non-interactive mode use [cyan]'toodles -h'[/cyan].")
    console.print()


def render_noninteractive_help() -> None:
    """Print the flag reference for non-interactive mode."""
    table_class = _import_rich_table()

    console.print("Following arguments can be given to toodles for non-interactive mode:")
    console.print()

    flags = table_class(show_header=True, header_style="bold magenta", box=None, pad_edge=False)
    flags.add_column("Argument", min_width=10)
    flags.add_column("Synopsis", style="cyan", min_width=12)
    flags.add_column("Function")
    flags.add_row("-h", "", "Prints out help text for non-interactive mode.")
    flags.add_row("-c", escape("[COMMAND]"), "Specifies the command to execute.")
    flags.add_row("-t", escape("[TITLE]"), "Title for a todo entry.")
    flags.add_row("-V", "", "Prints the toodles version.")
    console.print(flags)
    console.print()

    commands = table_class(show_header=True, header_style="bold magenta", box=None, pad_edge=False)
    commands.add_column("COMMANDS", min_width=10)
    commands.add_column("")
    commands.add_row("add", "Adds a new todo entry.")
    commands.add_row("erase", "Erase all data that is stored in the toodles database.")
    console.print(commands)
    console.print()


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

def render_env(config: AppConfig) -> None:
    """Print the application directory and storage file paths."""
    table_class = _import_rich_table()

    table = table_class(show_header=False, box=None, pad_edge=False)
    table.add_column("Key", style="bold cyan", min_width=20)
    table.add_column("Value", style="green", overflow="fold")
    table.add_row("App directory", escape(str(config.app_dir)))
    table.add_row("Storage", escape(str(config.storage_file)))
    table.add_row("Editor", escape(config.editor))
    console.print(table)
