"""Tests for environment-driven configuration and app-dir bootstrap."""

from __future__ import annotations

from pathlib import Path

import pytest

from toodles.config import DEFAULT_EDITOR, DEFAULT_LOG_LEVEL, AppConfig
from toodles.exceptions import AppDirectoryError
from toodles.infra.environment import ensure_app_dir


class TestFromEnv:
    def test_defaults(self) -> None:
        config = AppConfig.from_env({"HOME": "/home/alex"})

        assert config.home == Path("/home/alex")
        assert config.editor == DEFAULT_EDITOR
        assert config.log_level == DEFAULT_LOG_LEVEL

    def test_derived_paths(self) -> None:
        config = AppConfig.from_env({"HOME": "/home/alex"})

        assert config.app_dir == Path("/home/alex/.toodles")
        assert config.storage_file == Path("/home/alex/.toodles/toodles.sqlite")
        assert config.edit_file == Path("/home/alex/.toodles/toodles.details.edit")

    def test_toodles_home_wins(self) -> None:
        config = AppConfig.from_env({"HOME": "/home/alex", "TOODLES_HOME": "/srv/todo"})
        assert config.app_dir == Path("/srv/todo/.toodles")

    def test_editor_and_level(self) -> None:
        config = AppConfig.from_env(
            {"HOME": "/h", "EDITOR": "nano -w", "TOODLES_LOG_LEVEL": "debug"},
        )
        assert config.editor == "nano -w"
        assert config.log_level == "DEBUG"

    @pytest.mark.parametrize("environ", [{}, {"HOME": ""}, {"HOME": "   "}])
    def test_missing_home(self, environ: dict[str, str]) -> None:
        with pytest.raises(AppDirectoryError, match="HOME environment variable not set."):
            AppConfig.from_env(environ)


class TestEnsureAppDir:
    def test_creates_directory(self, tmp_path: Path) -> None:
        config = AppConfig(home=tmp_path)

        created = ensure_app_dir(config)

        assert created == tmp_path / ".toodles"
        assert created.is_dir()

    def test_existing_directory_is_fine(self, tmp_path: Path) -> None:
        (tmp_path / ".toodles").mkdir()
        assert ensure_app_dir(AppConfig(home=tmp_path)).is_dir()

    def test_file_in_the_way(self, tmp_path: Path) -> None:
        (tmp_path / ".toodles").write_text("not a directory")
        with pytest.raises(AppDirectoryError):
            ensure_app_dir(AppConfig(home=tmp_path))
