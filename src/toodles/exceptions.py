"""Custom exception hierarchy for toodles.

Every user-visible error condition maps to a subclass of
:class:`ToodlesError`.  The interactive session catches these at the
handler boundary and keeps running; the :func:`toodles.cli.app.cli`
boundary turns them into exit codes.  Raw ``sqlite3`` and ``OSError``
exceptions must never escape the infrastructure layer.

Hierarchy
---------
ToodlesError
├── InvalidCommandError
├── MissingArgumentsError
├── InvalidArgumentError
├── HistoryIndexError
├── StorageError
│   └── StorageCriticalError
├── InputOutputError
├── ArgumentParseError
└── EnvironmentError
    └── AppDirectoryError
"""

from __future__ import annotations


class ToodlesError(Exception):
    """Base exception for all toodles errors.

    The message is shown to the user verbatim, so it must read as a
    complete sentence.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command line ----------------------------------------------------------

class InvalidCommandError(ToodlesError):
    """Raised when the leading token matches no registered command."""


class MissingArgumentsError(ToodlesError):
    """Raised when the binder found no characters to bind."""


class InvalidArgumentError(ToodlesError):
    """Raised when a bound argument cannot be interpreted (e.g. an id)."""


class HistoryIndexError(ToodlesError):
    """Raised when a history index lies outside the ring."""


# --- Storage ---------------------------------------------------------------

class StorageError(ToodlesError):
    """Raised when a storage operation fails; the command is aborted."""


class StorageCriticalError(StorageError):
    """Raised when the store cannot be opened or created at startup."""


# --- I/O and environment ---------------------------------------------------

class InputOutputError(ToodlesError):
    """Raised for failed line input or detail-editing file round-trips."""


class ArgumentParseError(ToodlesError):
    """Raised when non-interactive flags cannot be parsed."""


class EnvironmentError(ToodlesError):
    """Raised when a required runtime dependency is not available."""


class AppDirectoryError(EnvironmentError):
    """Raised when the application directory cannot be set up."""


class SessionExit(Exception):
    """Signals the interactive session to stop.

    Not a :class:`ToodlesError`, so the handler boundary lets it through.
    """
