"""Interactive dispatch loop.

One iteration: show a prompt, read a line, resolve it, run its
handler, record it in history.  Everything is sequential; one line is
fully handled before the next prompt appears.

Error policy
------------
* An unknown command is reported and **not** recorded.
* Any :class:`~toodles.exceptions.ToodlesError` raised by a handler is
  reported; the line is still recorded and the loop continues.
* :class:`~toodles.exceptions.SessionExit` ends the loop at once.
"""

from __future__ import annotations

import logging
import random

from toodles.cli import exit_codes
from toodles.cli.commands import EditorFn, TodoCommands
from toodles.cli.console import console, print_error
from toodles.config import AppConfig
from toodles.core.history import HistoryStore
from toodles.core.models import RAW_LINE_MAX
from toodles.core.protocols import Prompter, TodoStorage
from toodles.core.registry import CommandRegistry
from toodles.exceptions import (
    InputOutputError,
    InvalidCommandError,
    SessionExit,
    ToodlesError,
)
from toodles.infra.editor import edit_text

logger = logging.getLogger(__name__)

PROMPTS: tuple[str, ...] = (
    "[green]toodles :) > [/green]",
    "[green]>>> [/green]",
    "[green]==> [/green]",
    "[green]*-* > [/green]",
    "[green]:-* > [/green]",
    "[green]wanna party? > [/green]",
    "[green]omg i love cookies!... > [/green]",
    "[green]funny, huh? > [/green]",
    "[green]¯\\_(ツ)_/¯ > [/green]",
    "[green]ugh... duh... > [/green]",
    "[magenta]🍆[/magenta][cyan]💦[/cyan] > ",
    "[green]I know, right?... > [/green]",
    "[green]Okay, boomer... > [/green]",
)


class Session:
    """One interactive toodles session with its own history.

    Parameters
    ----------
    storage:
        The todo store used by every handler.
    prompter:
        Line source for the main prompt and follow-up questions.
    config:
        Runtime configuration.
    history:
        History ring; a fresh 1024-slot store when omitted.
    rng:
        Random source for prompt selection.
    editor:
        Detail editing function passed to the ``edit`` handler.
    """

    def __init__(
        self,
        *,
        storage: TodoStorage,
        prompter: Prompter,
        config: AppConfig,
        history: HistoryStore | None = None,
        rng: random.Random | None = None,
        editor: EditorFn = edit_text,
    ) -> None:
        self.history: HistoryStore = history if history is not None else HistoryStore()
        self._prompter = prompter
        self._rng = rng if rng is not None else random.Random()
        self._commands = TodoCommands(
            storage=storage,
            prompter=prompter,
            config=config,
            history=self.history,
            replay=self.execute,
            editor=editor,
        )

    @property
    def registry(self) -> CommandRegistry:
        return self._commands.registry

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------

    def execute(self, raw_line: str) -> None:
        """Resolve, run and record one line.

        Raises
        ------
        SessionExit
            When the line (or a replayed line) asks to exit.
        """
        try:
            resolved = self.registry.lookup_by_token(raw_line)
        except InvalidCommandError as exc:
            print_error(exc)
            return

        definition = resolved.definition
        logger.debug(
            "Dispatching %r to '%s' (short form: %s)",
            raw_line, definition.name, resolved.via_short_form,
        )

        try:
            definition.handler(resolved, raw_line)
        except ToodlesError as exc:
            logger.debug("Command '%s' failed: %s", definition.name, exc)
            print_error(exc)

        if definition.records_history and not self.history.append(raw_line):
            print_error(ToodlesError("Error inserting command into history."))

    def next_prompt(self) -> str:
        return self._rng.choice(PROMPTS)

    def run(self) -> int:
        """Run the read-dispatch loop until exit or end of input."""
        while True:
            try:
                line = self._prompter.read_line(self.next_prompt(), RAW_LINE_MAX + 1)
            except EOFError:
                console.print()
                return exit_codes.SUCCESS
            except InputOutputError as exc:
                print_error(exc)
                continue

            try:
                self.execute(line)
            except SessionExit:
                logger.debug("Session exit requested")
                return exit_codes.SUCCESS
