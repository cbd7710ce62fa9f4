"""Tests for flag-driven non-interactive mode."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from toodles.cli import exit_codes
from toodles.cli.noninteractive import FlagCommand, build_parser, run_noninteractive
from toodles.core.models import ListFilter
from toodles.exceptions import ArgumentParseError, StorageError
from toodles.infra.sqlite_storage import SqliteTodoStorage


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

class TestFlagCommand:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("add", FlagCommand.ADD),
            ("erase", FlagCommand.ERASE),
            ("list", FlagCommand.NONE),
            ("", FlagCommand.NONE),
            (None, FlagCommand.NONE),
        ],
    )
    def test_parse(self, value: str | None, expected: FlagCommand) -> None:
        assert FlagCommand.parse(value) is expected


class TestParser:
    def test_flags(self) -> None:
        args = build_parser().parse_args(["-c", "add", "-t", "Buy milk"])
        assert args.command == "add"
        assert args.title == "Buy milk"
        assert args.show_help is False

    def test_unknown_flag_raises(self) -> None:
        with pytest.raises(ArgumentParseError):
            build_parser().parse_args(["-x"])

    def test_version_exits(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["-V"])
        assert exc_info.value.code == 0
        assert "toodles" in capsys.readouterr().out


# ---------------------------------------------------------------------------
# Execution
# ---------------------------------------------------------------------------

class TestRun:
    def test_add(self, storage: SqliteTodoStorage) -> None:
        code = run_noninteractive(["-c", "add", "-t", "Buy milk"], lambda: storage)

        assert code == exit_codes.SUCCESS
        assert [t.title for t in storage.list_todos(ListFilter.ALL)] == ["Buy milk"]

    def test_erase(self, storage: SqliteTodoStorage) -> None:
        storage.create_todo("old", None)

        code = run_noninteractive(["-c", "erase"], lambda: storage)

        assert code == exit_codes.SUCCESS
        assert storage.list_todos(ListFilter.ALL) == []

    def test_add_without_title_fails(
        self, storage: SqliteTodoStorage, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = run_noninteractive(["-c", "add"], lambda: storage)

        assert code == exit_codes.GENERAL_ERROR
        assert "Please provide a title." in capsys.readouterr().out

    def test_help_skips_storage(self, capsys: pytest.CaptureFixture[str]) -> None:
        open_storage = MagicMock()

        code = run_noninteractive(["-h"], open_storage)

        assert code == exit_codes.SUCCESS
        open_storage.assert_not_called()
        assert "non-interactive mode" in capsys.readouterr().out

    @pytest.mark.parametrize("argv", [["-c", "list"], ["-t", "orphan title"]])
    def test_invalid_command(
        self, argv: list[str], capsys: pytest.CaptureFixture[str],
    ) -> None:
        open_storage = MagicMock()

        code = run_noninteractive(argv, open_storage)

        assert code == exit_codes.GENERAL_ERROR
        open_storage.assert_not_called()
        assert "Please provide a valid command." in capsys.readouterr().out

    @pytest.mark.parametrize("argv", [["-x"], ["stray"], ["-c"]])
    def test_parse_errors(self, argv: list[str]) -> None:
        open_storage = MagicMock()
        assert run_noninteractive(argv, open_storage) == exit_codes.GENERAL_ERROR
        open_storage.assert_not_called()

    def test_storage_failure(self) -> None:
        storage = MagicMock()
        storage.erase_all.side_effect = StorageError("database is locked")

        code = run_noninteractive(["-c", "erase"], lambda: storage)

        assert code == exit_codes.GENERAL_ERROR
