"""Shared pytest fixtures and configuration for the toodles test suite.

Guidelines
----------
* Storage tests use a real SQLite file under ``tmp_path``.
* Terminal input is replaced by :class:`ScriptedPrompter`.
* The external editor is never started; ``subprocess.run`` is mocked.
* Tests must not depend on the real ``HOME``.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import pytest

from toodles.config import AppConfig
from toodles.infra.sqlite_storage import SqliteTodoStorage


class ScriptedPrompter:
    """Prompter that replays canned lines and answers.

    Raises ``EOFError`` once the scripted lines run out, like a closed
    stdin.
    """

    def __init__(self, lines: Iterable[str] = (), answers: Iterable[bool] = ()) -> None:
        self.lines = list(lines)
        self.answers = list(answers)
        self.prompts: list[str] = []
        self.questions: list[str] = []

    def read_line(self, prompt: str, capacity: int) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)[: capacity - 1]

    def confirm(self, question: str) -> bool:
        self.questions.append(question)
        return self.answers.pop(0) if self.answers else False


@pytest.fixture()
def app_config(tmp_path: Path) -> AppConfig:
    config = AppConfig(home=tmp_path, editor="true")
    config.app_dir.mkdir()
    return config


@pytest.fixture()
def storage(app_config: AppConfig) -> SqliteTodoStorage:
    store = SqliteTodoStorage(app_config.storage_file)
    store.initialize()
    return store


@pytest.fixture()
def prompter() -> ScriptedPrompter:
    return ScriptedPrompter()


@pytest.fixture()
def make_prompter() -> type[ScriptedPrompter]:
    return ScriptedPrompter
