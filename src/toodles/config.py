"""Environment-driven configuration for toodles.

All knobs come from environment variables; there is no config file.

* ``TOODLES_HOME`` — overrides ``HOME`` as the parent of the app dir.
* ``EDITOR`` — editor used by the ``edit`` command (default ``vim``).
* ``TOODLES_LOG_LEVEL`` — log level name (default ``WARNING``).
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from toodles.exceptions import AppDirectoryError

APP_DIR_NAME: str = ".toodles"
STORAGE_FILE_NAME: str = "toodles.sqlite"
EDIT_TEMP_FILE_NAME: str = "toodles.details.edit"
DEFAULT_EDITOR: str = "vim"
DEFAULT_LOG_LEVEL: str = "WARNING"


def _env_text(environ: Mapping[str, str], name: str, *, default: str = "") -> str:
    return environ.get(name, default).strip()


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Resolved runtime configuration."""

    home: Path
    editor: str = DEFAULT_EDITOR
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def app_dir(self) -> Path:
        """Directory holding the database and the edit temp file."""
        return self.home / APP_DIR_NAME

    @property
    def storage_file(self) -> Path:
        return self.app_dir / STORAGE_FILE_NAME

    @property
    def edit_file(self) -> Path:
        return self.app_dir / EDIT_TEMP_FILE_NAME

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppConfig:
        """Build a config from *environ* (defaults to ``os.environ``).

        Raises
        ------
        AppDirectoryError
            If neither ``TOODLES_HOME`` nor ``HOME`` is set.
        """
        env = os.environ if environ is None else environ

        home = _env_text(env, "TOODLES_HOME") or _env_text(env, "HOME")
        if not home:
            raise AppDirectoryError(
                "HOME environment variable not set.",
                hint="Set HOME or TOODLES_HOME to a writable directory.",
            )

        return cls(
            home=Path(home),
            editor=_env_text(env, "EDITOR") or DEFAULT_EDITOR,
            log_level=(_env_text(env, "TOODLES_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
        )
