"""Terminal-backed :class:`~toodles.core.protocols.Prompter`.

Lines are read through the Rich console so prompts can carry colour
markup; yes/no questions go through questionary.  Both are imported
lazily, mirroring :mod:`toodles.cli.console`.
"""

from __future__ import annotations

from typing import Any

from toodles.cli.console import console
from toodles.core.models import ArgumentSlot
from toodles.exceptions import EnvironmentError, InputOutputError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive confirmation."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def bounded_line(line: str, capacity: int) -> str:
    """Cut *line* at its first newline and to ``capacity - 1`` characters."""
    slot = ArgumentSlot(capacity)
    slot.fill(line.split("\n", 1)[0])
    return slot.value


class ConsolePrompter:
    """Interactive prompter reading from the controlling terminal."""

    def read_line(self, prompt: str, capacity: int) -> str:
        """Read one line; overlong input is truncated, never an error.

        Raises
        ------
        EOFError
            When stdin is closed (Ctrl+D).
        InputOutputError
            When reading from stdin fails.
        """
        try:
            line = console.input(prompt)
        except OSError as exc:
            raise InputOutputError("Error retrieving line.") from exc
        return bounded_line(line, capacity)

    def confirm(self, question: str) -> bool:
        """Ask *question*; only an explicit "yes" returns ``True``.

        Cancelling the prompt (Ctrl+C / Esc) counts as "no".
        """
        questionary = _import_questionary()
        answer: bool | None = questionary.confirm(question, default=False).ask()
        return bool(answer)
