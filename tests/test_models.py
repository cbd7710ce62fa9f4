"""Unit tests for core domain models."""

from __future__ import annotations

import dataclasses
from typing import Any

import pytest

from toodles.core.models import (
    ArgumentSlot,
    CommandCategory,
    CommandDefinition,
    ListFilter,
    ResolvedCommand,
    Todo,
)


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------

def _make_definition(**overrides: Any) -> CommandDefinition:
    defaults: dict[str, Any] = {
        "name": "detail",
        "handler": lambda resolved, raw_line: None,
        "category": CommandCategory.TODOS,
        "description": "Displays the details of an entry.",
        "short_name": "d",
    }
    defaults.update(overrides)
    return CommandDefinition(**defaults)


# ---------------------------------------------------------------------------
# ArgumentSlot
# ---------------------------------------------------------------------------

class TestArgumentSlot:
    def test_limit_excludes_terminator(self) -> None:
        slot = ArgumentSlot(5)
        assert slot.capacity == 5
        assert slot.limit == 4

    def test_write_until_full(self) -> None:
        slot = ArgumentSlot(3)
        assert [slot.write(c) for c in "abcd"] == [1, 1, 0, 0]
        assert slot.value == "ab"
        assert slot.full

    def test_fill_truncates(self) -> None:
        slot = ArgumentSlot(4)
        assert slot.fill("hello") == 3
        assert slot.value == "hel"
        assert len(slot) == 3

    def test_fill_after_write(self) -> None:
        slot = ArgumentSlot(4)
        slot.write("x")
        assert slot.fill("yzw") == 2
        assert slot.value == "xyz"

    def test_capacity_one_holds_nothing(self) -> None:
        slot = ArgumentSlot(1)
        assert slot.write("a") == 0
        assert slot.value == ""

    def test_invalid_capacity(self) -> None:
        with pytest.raises(ValueError):
            ArgumentSlot(0)


# ---------------------------------------------------------------------------
# ListFilter
# ---------------------------------------------------------------------------

class TestListFilter:
    @pytest.mark.parametrize(
        ("option", "expected"),
        [
            ("all", ListFilter.ALL),
            ("done", ListFilter.DONE),
            ("open", ListFilter.OPEN),
            ("", ListFilter.ALL),
            (None, ListFilter.ALL),
            ("DONE", ListFilter.ALL),
            ("whatever", ListFilter.ALL),
        ],
    )
    def test_from_option(self, option: str | None, expected: ListFilter) -> None:
        assert ListFilter.from_option(option) is expected


# ---------------------------------------------------------------------------
# Command definitions
# ---------------------------------------------------------------------------

class TestResolvedCommand:
    def test_token_long_form(self) -> None:
        assert ResolvedCommand(_make_definition()).token == "detail"

    def test_token_short_form(self) -> None:
        assert ResolvedCommand(_make_definition(), via_short_form=True).token == "d"

    def test_short_flag_without_alias_falls_back(self) -> None:
        definition = _make_definition(short_name=None)
        assert ResolvedCommand(definition, via_short_form=True).token == "detail"

    def test_definition_defaults(self) -> None:
        definition = _make_definition()
        assert definition.synopsis == ""
        assert definition.records_history is True

    def test_definitions_are_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            _make_definition().name = "other"  # type: ignore[misc]


class TestTodo:
    def test_frozen(self) -> None:
        todo = Todo(id=1, title="t", done=False, created="2024-01-01 10:00:00")
        with pytest.raises(dataclasses.FrozenInstanceError):
            todo.done = True  # type: ignore[misc]
