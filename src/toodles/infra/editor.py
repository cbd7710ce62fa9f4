"""Infrastructure: external editor round-trip for todo details.

The current details are written to a temp file in the application
directory, the user's editor is run on it, and the edited text is read
back.  The temp file is removed on every exit path.

Rules
-----
* Editor command from ``$EDITOR`` (split with :mod:`shlex`).
* Every ``OSError`` and non-zero editor exit maps to
  :class:`~toodles.exceptions.InputOutputError`.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from pathlib import Path

from toodles.exceptions import InputOutputError

logger = logging.getLogger(__name__)


def _remove_quietly(path: Path) -> None:
    try:
        path.unlink(missing_ok=True)
    except OSError as exc:
        logger.warning("Could not remove %s: %s", path, exc)


def run_editor(editor: str, path: Path) -> None:
    """Run *editor* on *path* and wait for it to exit.

    Raises
    ------
    InputOutputError
        If the editor cannot be started or exits non-zero.
    """
    command = [*shlex.split(editor), str(path)]
    logger.debug("Running editor: %s", command)
    try:
        completed = subprocess.run(command, check=False)
    except OSError as exc:
        raise InputOutputError(
            f"Cannot start editor '{editor}': {exc.strerror or exc}",
            hint="Set the EDITOR environment variable to an installed editor.",
        ) from exc

    if completed.returncode != 0:
        raise InputOutputError(f"Error with {editor} (exit code {completed.returncode}).")


def edit_text(initial: str, *, editor: str, temp_file: Path) -> str:
    """Let the user edit *initial* in *editor* and return the result."""
    _remove_quietly(temp_file)

    try:
        temp_file.write_text(initial, encoding="utf-8")
    except OSError as exc:
        raise InputOutputError(
            f"Error writing temporary detail file: {exc.strerror or exc}",
        ) from exc

    try:
        run_editor(editor, temp_file)
        try:
            return temp_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise InputOutputError(f"Error reading temporary detail file: {exc}") from exc
    finally:
        _remove_quietly(temp_file)
