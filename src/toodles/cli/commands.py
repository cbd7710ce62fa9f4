"""Command table and per-command handlers for the interactive session.

Each handler receives the :class:`~toodles.core.models.ResolvedCommand`
and the raw line, binds its own arguments with the slot layout it
needs, calls the storage collaborator and renders the outcome.
Handlers raise :class:`~toodles.exceptions.ToodlesError` subclasses;
the session reports them and carries on.
"""

from __future__ import annotations

from collections.abc import Callable

from toodles.cli.console import console
from toodles.cli.render import (
    escape,
    render_attachments,
    render_env,
    render_help,
    render_history,
    render_todos,
)
from toodles.config import AppConfig
from toodles.core.binder import bind_one
from toodles.core.history import HistoryStore
from toodles.core.models import (
    CAPACITY_DETAIL,
    CAPACITY_HISTORY_INDEX,
    CAPACITY_ID,
    CAPACITY_LIST_OPTION,
    CAPACITY_PATH,
    CAPACITY_SEARCH,
    CAPACITY_TITLE,
    CommandCategory,
    CommandDefinition,
    ListFilter,
    ResolvedCommand,
)
from toodles.core.protocols import Prompter, TodoStorage
from toodles.core.registry import CommandRegistry
from toodles.exceptions import InvalidArgumentError, MissingArgumentsError, SessionExit
from toodles.infra.editor import edit_text
from toodles.version import __version__

EditorFn = Callable[..., str]
"""``edit_text``-compatible callable: ``(initial, *, editor, temp_file) -> str``."""


def parse_id(text: str) -> int:
    """Convert a bound id argument to ``int``.

    Raises
    ------
    InvalidArgumentError
        If *text* is not a non-negative integer.
    """
    stripped = text.strip()
    if not stripped.isdecimal():
        raise InvalidArgumentError("Please provide a valid id.")
    try:
        return int(stripped)
    except ValueError as exc:
        raise InvalidArgumentError("Please provide a valid id.") from exc


def parse_history_index(text: str) -> int:
    """Convert a bound history index to ``int`` (sign allowed)."""
    try:
        return int(text.strip())
    except ValueError as exc:
        raise InvalidArgumentError("History index must be a number.") from exc


class TodoCommands:
    """Handlers for every interactive command.

    Parameters
    ----------
    storage:
        The todo store.
    prompter:
        Source of follow-up input (titles, confirmations, paths).
    config:
        Runtime configuration (editor, paths for ``env``).
    history:
        The session's history ring.
    replay:
        Callback that runs a line through the full dispatch pipeline.
    editor:
        Detail editing function; defaults to the external editor.
    """

    def __init__(
        self,
        *,
        storage: TodoStorage,
        prompter: Prompter,
        config: AppConfig,
        history: HistoryStore,
        replay: Callable[[str], None],
        editor: EditorFn = edit_text,
    ) -> None:
        self._storage = storage
        self._prompter = prompter
        self._config = config
        self._history = history
        self._replay = replay
        self._editor = editor
        self.registry: CommandRegistry = build_registry(self)

    def _bind_id(self, resolved: ResolvedCommand, raw_line: str) -> int:
        return parse_id(bind_one(resolved, raw_line, CAPACITY_ID))

    # ------------------------------------------------------------------
    # Todo commands
    # ------------------------------------------------------------------

    def add_todo(self, resolved: ResolvedCommand, raw_line: str) -> None:
        details: str | None = None
        try:
            title = bind_one(resolved, raw_line, CAPACITY_TITLE)
        except MissingArgumentsError:
            title = self._prompter.read_line("Title: ", CAPACITY_TITLE)
            details = self._prompter.read_line("Details (can be empty): ", CAPACITY_DETAIL)

        todo_id = self._storage.create_todo(title, details)
        console.print(f"[dim]Added todo {todo_id}.[/dim]")

    def remove_todo(self, resolved: ResolvedCommand, raw_line: str) -> None:
        self._storage.delete_todo(self._bind_id(resolved, raw_line))

    def edit_details(self, resolved: ResolvedCommand, raw_line: str) -> None:
        todo_id = self._bind_id(resolved, raw_line)
        current = self._storage.get_details(todo_id)
        edited = self._editor(
            current,
            editor=self._config.editor,
            temp_file=self._config.edit_file,
        )
        self._storage.save_details(todo_id, edited)

    def show_details(self, resolved: ResolvedCommand, raw_line: str) -> None:
        details = self._storage.get_details(self._bind_id(resolved, raw_line))
        console.print(details, markup=False, highlight=False)

    def list_todos(self, resolved: ResolvedCommand, raw_line: str) -> None:
        try:
            option = bind_one(resolved, raw_line, CAPACITY_LIST_OPTION)
        except MissingArgumentsError:
            option = ""
        render_todos(self._storage.list_todos(ListFilter.from_option(option)))

    def search_todos(self, resolved: ResolvedCommand, raw_line: str) -> None:
        text = bind_one(resolved, raw_line, CAPACITY_SEARCH)
        render_todos(self._storage.search_by_title(text))

    def mark_done(self, resolved: ResolvedCommand, raw_line: str) -> None:
        self._storage.set_done_flag(self._bind_id(resolved, raw_line), True)

    def mark_open(self, resolved: ResolvedCommand, raw_line: str) -> None:
        self._storage.set_done_flag(self._bind_id(resolved, raw_line), False)

    # ------------------------------------------------------------------
    # Attachment commands
    # ------------------------------------------------------------------

    def attach_file(self, resolved: ResolvedCommand, raw_line: str) -> None:
        todo_text = self._prompter.read_line("Todo Id: ", CAPACITY_ID)
        path = self._prompter.read_line("File path: ", CAPACITY_PATH)

        if not todo_text:
            raise InvalidArgumentError("Please provide an id.")
        if not path:
            raise InvalidArgumentError("Please provide a file path.")

        attachment_id = self._storage.attach_file(parse_id(todo_text), path)
        console.print(f"[dim]Stored attachment {attachment_id}.[/dim]")

    def delete_attachment(self, resolved: ResolvedCommand, raw_line: str) -> None:
        self._storage.delete_attachment(self._bind_id(resolved, raw_line))

    def show_attachments(self, resolved: ResolvedCommand, raw_line: str) -> None:
        render_attachments(self._storage.list_attachments(self._bind_id(resolved, raw_line)))

    def print_attachment(self, resolved: ResolvedCommand, raw_line: str) -> None:
        attachment = self._storage.get_attachment(self._bind_id(resolved, raw_line))
        text = attachment.content.decode("utf-8", errors="replace")
        console.print(text, markup=False, highlight=False)

    def save_attachment(self, resolved: ResolvedCommand, raw_line: str) -> None:
        attachment_id = self._bind_id(resolved, raw_line)
        save_path = self._prompter.read_line("Save path: ", CAPACITY_PATH)
        written = self._storage.save_attachment_to_disk(attachment_id, save_path)
        console.print(f"[dim]Saved to {escape(str(written))}.[/dim]")

    # ------------------------------------------------------------------
    # Miscellaneous commands
    # ------------------------------------------------------------------

    def erase_all(self, resolved: ResolvedCommand, raw_line: str) -> None:
        if not self._prompter.confirm("Do you really want to erase all data?"):
            console.print("Cancel")
            return
        self._storage.erase_all()
        console.print("Done")

    def show_help(self, resolved: ResolvedCommand, raw_line: str) -> None:
        render_help(self.registry)

    def exit_session(self, resolved: ResolvedCommand, raw_line: str) -> None:
        raise SessionExit

    def clear_screen(self, resolved: ResolvedCommand, raw_line: str) -> None:
        console.clear()

    def show_history(self, resolved: ResolvedCommand, raw_line: str) -> None:
        render_history(self._history.entries())

    def replay(self, resolved: ResolvedCommand, raw_line: str) -> None:
        index = parse_history_index(bind_one(resolved, raw_line, CAPACITY_HISTORY_INDEX))
        line = self._history.get(index)
        if line is None:
            console.print(f"[yellow]No command stored at history index {index}.[/yellow]")
            return
        self._replay(line)

    def show_version(self, resolved: ResolvedCommand, raw_line: str) -> None:
        console.print(f"toodles {__version__}")

    def show_env(self, resolved: ResolvedCommand, raw_line: str) -> None:
        render_env(self._config)


# ---------------------------------------------------------------------------
# Command table
# ---------------------------------------------------------------------------

def build_registry(commands: TodoCommands) -> CommandRegistry:
    """Return the command table bound to *commands*, in display order."""
    todos = CommandCategory.TODOS
    attachments = CommandCategory.ATTACHMENTS
    misc = CommandCategory.MISC

    return CommandRegistry([
        CommandDefinition("add", commands.add_todo, todos, "Adds a new todo entry.",
                          short_name="a", synopsis="[TITLE](opt)"),
        CommandDefinition("remove", commands.remove_todo, todos, "Removes a todo entry.",
                          short_name="r", synopsis="[ID]"),
        CommandDefinition("edit", commands.edit_details, todos, "Edit the details of a todo entry.",
                          short_name="e", synopsis="[ID]"),
        CommandDefinition("detail", commands.show_details, todos, "Displays the details of an entry.",
                          short_name="d", synopsis="[ID]"),
        CommandDefinition("list", commands.list_todos, todos, "Lists all current entries.",
                          short_name="l", synopsis="[all|done|open](opt)"),
        CommandDefinition("search", commands.search_todos, todos, "Search entries by title.",
                          short_name="s", synopsis="[SEARCH EXPR]"),
        CommandDefinition("done", commands.mark_done, todos, "Marks the given todo as done.",
                          synopsis="[ID]"),
        CommandDefinition("open", commands.mark_open, todos, "Marks the given todo as open.",
                          synopsis="[ID]"),
        CommandDefinition("erase", commands.erase_all, misc, "Erases all entries from the database."),
        CommandDefinition("help", commands.show_help, misc,
                          "Displays helpful information for using toodles.", short_name="h"),
        CommandDefinition("exit", commands.exit_session, misc, "Exits toodles."),
        CommandDefinition("quit", commands.exit_session, misc, "Exits toodles."),
        CommandDefinition("clear", commands.clear_screen, misc, "Clears the screen."),
        CommandDefinition("history", commands.show_history, misc,
                          "Displays the command history of the session."),
        CommandDefinition("version", commands.show_version, misc, "Displays toodles version number."),
        CommandDefinition("attach", commands.attach_file, attachments,
                          "Attaches a file to an existing todo."),
        CommandDefinition("delatt", commands.delete_attachment, attachments,
                          "Deletes the attachment with given id.", synopsis="[ID]"),
        CommandDefinition("showatt", commands.show_attachments, attachments,
                          "Shows all attachments for given todo id.", synopsis="[ID]"),
        CommandDefinition("patt", commands.print_attachment, attachments,
                          "Prints out the content of the attachment.", synopsis="[ID]"),
        CommandDefinition("satt", commands.save_attachment, attachments,
                          "Save an attachment to disk.", synopsis="[ID]"),
        CommandDefinition("!", commands.replay, misc,
                          "Executes a command that is stored in the history.",
                          synopsis="[HISTORY INDEX]", records_history=False),
        CommandDefinition("env", commands.show_env, misc, "Displays environment data for toodles."),
    ])
