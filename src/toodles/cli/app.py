"""CLI application entry point and mode selection for toodles.

This module is the **sole process-level error boundary**.  It catches
:class:`~toodles.exceptions.ToodlesError`, ``KeyboardInterrupt``, and
any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No arguments: interactive session (:mod:`toodles.cli.session`).
* One or more arguments: flag mode (:mod:`toodles.cli.noninteractive`).
* Startup failures (home directory, storage creation) are fatal; every
  later error is handled per command inside the session.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from toodles.cli import exit_codes
from toodles.cli.console import configure_logging, console, print_error
from toodles.config import AppConfig
from toodles.exceptions import ToodlesError
from toodles.infra.environment import ensure_app_dir
from toodles.infra.sqlite_storage import SqliteTodoStorage
from toodles.version import __version__


# ---------------------------------------------------------------------------
# Bootstrap
# ---------------------------------------------------------------------------

def open_storage(config: AppConfig) -> SqliteTodoStorage:
    """Create the app directory and an initialised SQLite store.

    Raises
    ------
    AppDirectoryError
        If the application directory cannot be created.
    StorageCriticalError
        If the database cannot be opened or its schema created.
    """
    ensure_app_dir(config)
    storage = SqliteTodoStorage(config.storage_file)
    storage.initialize()
    return storage


def _greet() -> None:
    console.print(f"[bold cyan]toodles[/bold cyan] {__version__}")
    console.print("Type [cyan]'help'[/cyan] to list all commands, [cyan]'exit'[/cyan] to leave.\n")


# ---------------------------------------------------------------------------
# Mode dispatch
# ---------------------------------------------------------------------------

def _run_interactive(config: AppConfig) -> int:
    """Run the REPL until the user exits."""
    from toodles.cli.prompts import ConsolePrompter
    from toodles.cli.session import Session

    storage = open_storage(config)
    session = Session(storage=storage, prompter=ConsolePrompter(), config=config)

    _greet()
    code = session.run()
    console.print("[bold cyan]Byyyeee![/bold cyan]")
    return code


def _run_noninteractive(argv: Sequence[str], config: AppConfig) -> int:
    from toodles.cli.noninteractive import run_noninteractive

    return run_noninteractive(argv, lambda: open_storage(config))


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the toodles CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    args = sys.argv[1:] if argv is None else argv

    config = AppConfig.from_env()
    configure_logging(config.log_level)

    if args:
        return _run_noninteractive(args, config)
    return _run_interactive(config)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except ToodlesError as exc:
        print_error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
