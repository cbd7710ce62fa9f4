"""Tests for Rich rendering helpers.

Output is captured with ``capsys``; Rich writes plain text when stdout
is not a terminal.
"""

from __future__ import annotations

import pytest

from toodles.cli.render import (
    CHECK_MARK,
    CROSS_MARK,
    escape,
    render_attachments,
    render_history,
    render_todos,
)
from toodles.core.models import AttachmentInfo, Todo


def _todo(todo_id: int, title: str, done: bool = False) -> Todo:
    return Todo(id=todo_id, title=title, done=done, created="2024-05-01 09:30:00")


class TestRenderTodos:
    def test_columns_and_markers(self, capsys: pytest.CaptureFixture[str]) -> None:
        render_todos([_todo(1, "Buy milk", done=True), _todo(2, "Walk dog")])

        out = capsys.readouterr().out
        for header in ("Id", "Title", "Done", "Created"):
            assert header in out
        assert CHECK_MARK in out
        assert CROSS_MARK in out
        assert "2024-05-01 09:30:00" in out

    def test_markup_in_title_is_literal(self, capsys: pytest.CaptureFixture[str]) -> None:
        render_todos([_todo(1, "[red]not red[/red]")])
        assert "[red]not red[/red]" in capsys.readouterr().out

    def test_empty_list_prints_header_only(self, capsys: pytest.CaptureFixture[str]) -> None:
        render_todos([])
        out = capsys.readouterr().out
        assert "Title" in out


class TestRenderAttachments:
    def test_rows(self, capsys: pytest.CaptureFixture[str]) -> None:
        render_attachments([AttachmentInfo(id=3, name="report.pdf", size=123456)])

        out = capsys.readouterr().out
        assert "report.pdf" in out
        assert "123,456" in out
        assert "Size in bytes" in out


class TestRenderHistory:
    def test_index_prefix(self, capsys: pytest.CaptureFixture[str]) -> None:
        render_history([(0, "add milk"), (4, "list [done]")])

        out = capsys.readouterr().out
        assert "[0] add milk" in out
        assert "[4] list [done]" in out


class TestEscape:
    def test_escapes_markup(self) -> None:
        assert escape("[bold]x[/bold]") != "[bold]x[/bold]"

    def test_plain_text_unchanged(self) -> None:
        assert escape("plain text") == "plain text"
