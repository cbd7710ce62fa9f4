"""toodles — interactive command-line todo manager.

Line-oriented REPL over a local SQLite store, with file attachments
and a per-session command history.
"""

from toodles.version import __version__

__all__: list[str] = ["__version__"]
