"""Infrastructure layer — external system integration.

This layer wraps all interaction with SQLite, the file system and the
user's editor.  Every raw third-party or OS exception must be caught
here and re-raised as a :class:`~toodles.exceptions.ToodlesError`
subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from toodles.infra.editor import edit_text, run_editor
from toodles.infra.environment import ensure_app_dir
from toodles.infra.sqlite_storage import SqliteTodoStorage

__all__: list[str] = [
    "SqliteTodoStorage",
    "edit_text",
    "ensure_app_dir",
    "run_editor",
]
