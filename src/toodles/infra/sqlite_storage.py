"""SQLite-backed implementation of :class:`~toodles.core.protocols.TodoStorage`.

This module is the **only** place in the codebase that imports
``sqlite3``.  Every ``sqlite3.Error`` and file-system ``OSError`` is
caught here and re-raised as :class:`~toodles.exceptions.StorageError`
— nothing raw escapes the infrastructure boundary.

A connection is opened per operation and closed afterwards; each
operation runs in its own transaction.
"""

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from toodles.core.models import Attachment, AttachmentInfo, ListFilter, Todo
from toodles.exceptions import StorageCriticalError, StorageError

logger = logging.getLogger(__name__)

_CREATE_TODOS = (
    "create table if not exists TODOS ("
    "ID integer"
    ", TITLE text"
    ", DETAILS text"
    ", DONE integer not null default 0 check(DONE = 0 or DONE = 1)"
    ", CREATED date default (datetime('now', 'localtime'))"
    ", primary key(ID autoincrement))"
)

_CREATE_ATTACHMENTS = (
    "create table if not exists ATTACHMENTS ("
    "ID integer"
    ", NAME text not null"
    ", TODO_ID integer not null"
    ", ATTACHMENT blob not null"
    ", SIZE integer not null"
    ", primary key(ID autoincrement)"
    ", foreign key(TODO_ID) references TODOS(ID))"
)

_SELECT_TODOS = "select ID, TITLE, DONE, CREATED from TODOS"

_FILTER_CLAUSES: dict[ListFilter, str] = {
    ListFilter.ALL: "",
    ListFilter.DONE: " where DONE = 1",
    ListFilter.OPEN: " where DONE = 0",
}


class SqliteTodoStorage:
    """Concrete :class:`TodoStorage` persisting to a single SQLite file.

    Usage::

        storage = SqliteTodoStorage(config.storage_file)
        storage.initialize()
        todo_id = storage.create_todo("Buy milk", None)

    This class satisfies the :class:`~toodles.core.protocols.TodoStorage`
    protocol structurally — no explicit inheritance required.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    # ------------------------------------------------------------------
    # Connection handling
    # ------------------------------------------------------------------

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        """Open a connection, run one transaction, always close."""
        try:
            conn = sqlite3.connect(self._path)
        except sqlite3.Error as exc:
            raise StorageError(str(exc)) from exc

        try:
            conn.execute("pragma foreign_keys = on")
            with conn:
                yield conn
        except sqlite3.Error as exc:
            logger.warning("SQLite operation failed: %s", exc)
            raise StorageError(str(exc)) from exc
        finally:
            conn.close()

    def initialize(self) -> None:
        """Create the TODOS and ATTACHMENTS tables if they do not exist."""
        logger.debug("Opening store at %s", self._path)
        try:
            with self._connect() as conn:
                conn.execute(_CREATE_TODOS)
                conn.execute(_CREATE_ATTACHMENTS)
        except StorageError as exc:
            raise StorageCriticalError(
                f"Cannot open storage {self._path}: {exc}",
            ) from exc

    # ------------------------------------------------------------------
    # Todos
    # ------------------------------------------------------------------

    def create_todo(self, title: str, details: str | None) -> int:
        if not title:
            raise StorageError("Please provide a title.")

        with self._connect() as conn:
            cursor = conn.execute(
                "insert into TODOS (TITLE, DETAILS) values (?, ?)",
                (title, details),
            )
            todo_id = int(cursor.lastrowid or 0)
        logger.debug("Created todo %d", todo_id)
        return todo_id

    def list_todos(self, list_filter: ListFilter) -> list[Todo]:
        sql = _SELECT_TODOS + _FILTER_CLAUSES[list_filter] + " order by ID"
        with self._connect() as conn:
            rows = conn.execute(sql).fetchall()
        return [_row_to_todo(row) for row in rows]

    def search_by_title(self, text: str) -> list[Todo]:
        with self._connect() as conn:
            rows = conn.execute(
                _SELECT_TODOS + " where TITLE like ? order by ID",
                (f"%{text}%",),
            ).fetchall()
        return [_row_to_todo(row) for row in rows]

    def erase_all(self) -> None:
        with self._connect() as conn:
            conn.execute("delete from ATTACHMENTS")
            conn.execute("delete from TODOS")
        logger.debug("Erased all todos and attachments")

    def delete_todo(self, todo_id: int) -> None:
        with self._connect() as conn:
            self._require_todo(conn, todo_id)
            conn.execute("delete from ATTACHMENTS where TODO_ID = ?", (todo_id,))
            conn.execute("delete from TODOS where ID = ?", (todo_id,))
        logger.debug("Deleted todo %d", todo_id)

    def get_details(self, todo_id: int) -> str:
        with self._connect() as conn:
            row = conn.execute(
                "select DETAILS from TODOS where ID = ?", (todo_id,),
            ).fetchone()
        if row is None:
            raise StorageError(f"No todo with id {todo_id}.")
        return row[0] or ""

    def save_details(self, todo_id: int, text: str) -> None:
        with self._connect() as conn:
            self._require_todo(conn, todo_id)
            conn.execute("update TODOS set DETAILS = ? where ID = ?", (text, todo_id))

    def set_done_flag(self, todo_id: int, done: bool) -> None:
        with self._connect() as conn:
            self._require_todo(conn, todo_id)
            conn.execute(
                "update TODOS set DONE = ? where ID = ?", (1 if done else 0, todo_id),
            )
        logger.debug("Todo %d marked %s", todo_id, "done" if done else "open")

    # ------------------------------------------------------------------
    # Attachments
    # ------------------------------------------------------------------

    def attach_file(self, todo_id: int, file_path: str | Path) -> int:
        if not str(file_path):
            raise StorageError("Please provide a file to attach.")

        source = Path(file_path).expanduser()
        if not source.name:
            raise StorageError("Please provide a valid filename.")

        try:
            content = source.read_bytes()
        except OSError as exc:
            raise StorageError(f"{exc.strerror or exc}: {source}") from exc

        with self._connect() as conn:
            self._require_todo(conn, todo_id)
            cursor = conn.execute(
                "insert into ATTACHMENTS (NAME, TODO_ID, ATTACHMENT, SIZE) "
                "values (?, ?, ?, ?)",
                (source.name, todo_id, content, len(content)),
            )
            attachment_id = int(cursor.lastrowid or 0)
        logger.debug(
            "Attached %s (%d bytes) to todo %d as %d",
            source.name, len(content), todo_id, attachment_id,
        )
        return attachment_id

    def delete_attachment(self, attachment_id: int) -> None:
        with self._connect() as conn:
            cursor = conn.execute("delete from ATTACHMENTS where ID = ?", (attachment_id,))
            if cursor.rowcount == 0:
                raise StorageError(f"No attachment with id {attachment_id}.")

    def list_attachments(self, todo_id: int) -> list[AttachmentInfo]:
        with self._connect() as conn:
            rows = conn.execute(
                "select ID, NAME, SIZE from ATTACHMENTS where TODO_ID = ? order by ID",
                (todo_id,),
            ).fetchall()
        return [AttachmentInfo(id=row[0], name=row[1], size=row[2]) for row in rows]

    def get_attachment(self, attachment_id: int) -> Attachment:
        with self._connect() as conn:
            row = conn.execute(
                "select ID, NAME, TODO_ID, ATTACHMENT from ATTACHMENTS where ID = ?",
                (attachment_id,),
            ).fetchone()
        if row is None:
            raise StorageError(f"No attachment with id {attachment_id}.")
        return Attachment(id=row[0], name=row[1], todo_id=row[2], content=bytes(row[3]))

    def save_attachment_to_disk(self, attachment_id: int, dest_path: str | Path) -> Path:
        if not str(dest_path):
            raise StorageError("Please provide a save path.")

        attachment = self.get_attachment(attachment_id)

        target = Path(dest_path).expanduser()
        if target.is_dir():
            target = target / attachment.name

        try:
            target.write_bytes(attachment.content)
        except OSError as exc:
            raise StorageError(f"{exc.strerror or exc}: {target}") from exc

        logger.debug("Saved attachment %d to %s", attachment_id, target)
        return target

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _require_todo(conn: sqlite3.Connection, todo_id: int) -> None:
        row = conn.execute("select 1 from TODOS where ID = ?", (todo_id,)).fetchone()
        if row is None:
            raise StorageError(f"No todo with id {todo_id}.")


def _row_to_todo(row: tuple[object, ...]) -> Todo:
    todo_id, title, done, created = row
    return Todo(
        id=int(todo_id),  # type: ignore[call-overload]
        title=str(title or ""),
        done=bool(done),
        created=str(created or ""),
    )
