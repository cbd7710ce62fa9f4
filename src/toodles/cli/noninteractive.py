"""Non-interactive mode: a single command given through flags.

Used whenever toodles is started with at least one argument::

    toodles -c add -t "Buy milk"
    toodles -c erase
    toodles -h

Exit status is :data:`exit_codes.SUCCESS` on success or help display
and :data:`exit_codes.GENERAL_ERROR` on any parse, command or storage
failure.
"""

from __future__ import annotations

import argparse
import enum
from collections.abc import Callable, Sequence
from typing import NoReturn

from toodles.cli import exit_codes
from toodles.cli.console import print_error
from toodles.cli.render import render_noninteractive_help
from toodles.core.protocols import TodoStorage
from toodles.exceptions import ArgumentParseError, StorageError, ToodlesError
from toodles.version import __version__


class FlagCommand(enum.Enum):
    """Commands accepted by ``-c``."""

    NONE = "none"
    ADD = "add"
    ERASE = "erase"

    @classmethod
    def parse(cls, value: str | None) -> FlagCommand:
        """Map a ``-c`` value to a command; unknown values mean ``NONE``."""
        if value == cls.ADD.value:
            return cls.ADD
        if value == cls.ERASE.value:
            return cls.ERASE
        return cls.NONE


class _FlagParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise ArgumentParseError(message)


def build_parser() -> argparse.ArgumentParser:
    """Construct the flag parser for non-interactive mode.

    ``-h`` is a plain flag so the toodles help screen is shown instead
    of argparse's generated usage text.
    """
    parser = _FlagParser(
        prog="toodles",
        description="Interactive command-line todo manager.",
        add_help=False,
    )
    parser.add_argument("-c", dest="command", metavar="COMMAND", default=None)
    parser.add_argument("-t", dest="title", metavar="TITLE", default=None)
    parser.add_argument("-h", dest="show_help", action="store_true")
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def run_noninteractive(
    argv: Sequence[str],
    open_storage: Callable[[], TodoStorage],
) -> int:
    """Parse *argv*, run the requested command and return an exit code.

    Parameters
    ----------
    argv:
        Arguments without the program name.
    open_storage:
        Opens (and initialises) the store; only called once a valid
        command needs it.
    """
    parser = build_parser()
    try:
        args = parser.parse_args(list(argv))
    except ArgumentParseError as exc:
        print_error(exc)
        render_noninteractive_help()
        return exit_codes.GENERAL_ERROR

    if args.show_help:
        render_noninteractive_help()
        return exit_codes.SUCCESS

    command = FlagCommand.parse(args.command)
    if command is FlagCommand.NONE:
        print_error(ToodlesError("Please provide a valid command."))
        render_noninteractive_help()
        return exit_codes.GENERAL_ERROR

    storage = open_storage()
    try:
        if command is FlagCommand.ADD:
            storage.create_todo(args.title or "", None)
        else:
            storage.erase_all()
    except StorageError as exc:
        print_error(exc)
        return exit_codes.GENERAL_ERROR

    return exit_codes.SUCCESS
