"""Protocols (interfaces) consumed by the core and CLI layers.

These define the contracts that infrastructure adapters must satisfy.
Handlers depend ONLY on these protocols — never on concrete
implementations — so tests can swap in fakes.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from toodles.core.models import Attachment, AttachmentInfo, ListFilter, Todo


class TodoStorage(Protocol):
    """Contract for the persistent todo/attachment store.

    Every failure is raised as :class:`~toodles.exceptions.StorageError`
    carrying a human-readable message.
    """

    def initialize(self) -> None:
        """Create the schema if needed.

        Raises
        ------
        StorageCriticalError
            When the store cannot be opened or created.
        """
        ...  # pragma: no cover

    def create_todo(self, title: str, details: str | None) -> int:
        """Insert a todo and return its id."""
        ...  # pragma: no cover

    def list_todos(self, list_filter: ListFilter) -> list[Todo]:
        ...  # pragma: no cover

    def erase_all(self) -> None:
        """Delete every todo and every attachment."""
        ...  # pragma: no cover

    def search_by_title(self, text: str) -> list[Todo]:
        """Return todos whose title contains *text*."""
        ...  # pragma: no cover

    def delete_todo(self, todo_id: int) -> None:
        ...  # pragma: no cover

    def get_details(self, todo_id: int) -> str:
        ...  # pragma: no cover

    def save_details(self, todo_id: int, text: str) -> None:
        ...  # pragma: no cover

    def set_done_flag(self, todo_id: int, done: bool) -> None:
        ...  # pragma: no cover

    def attach_file(self, todo_id: int, file_path: str | Path) -> int:
        """Store the file at *file_path* for *todo_id*; return attachment id."""
        ...  # pragma: no cover

    def delete_attachment(self, attachment_id: int) -> None:
        ...  # pragma: no cover

    def list_attachments(self, todo_id: int) -> list[AttachmentInfo]:
        ...  # pragma: no cover

    def get_attachment(self, attachment_id: int) -> Attachment:
        ...  # pragma: no cover

    def save_attachment_to_disk(self, attachment_id: int, dest_path: str | Path) -> Path:
        """Write the attachment payload; return the path written."""
        ...  # pragma: no cover


class Prompter(Protocol):
    """Contract for reading user input during a session."""

    def read_line(self, prompt: str, capacity: int) -> str:
        """Show *prompt* and return one line, at most ``capacity - 1`` chars.

        Raises
        ------
        EOFError
            When input is exhausted.
        InputOutputError
            When the line cannot be read.
        """
        ...  # pragma: no cover

    def confirm(self, question: str) -> bool:
        """Ask a yes/no question; only an explicit yes returns ``True``."""
        ...  # pragma: no cover
