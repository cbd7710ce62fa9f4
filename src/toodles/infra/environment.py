"""Infrastructure: application directory bootstrap.

Creates ``~/.toodles/`` (or ``$TOODLES_HOME/.toodles/``) once at
startup.  No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import logging
from pathlib import Path

from toodles.config import AppConfig
from toodles.exceptions import AppDirectoryError

logger = logging.getLogger(__name__)

APP_DIR_MODE: int = 0o770


def ensure_app_dir(config: AppConfig) -> Path:
    """Create the application directory if missing and return it.

    Raises
    ------
    AppDirectoryError
        If the directory cannot be created.
    """
    app_dir = config.app_dir
    try:
        app_dir.mkdir(mode=APP_DIR_MODE, parents=True, exist_ok=True)
    except OSError as exc:
        raise AppDirectoryError(
            f"Cannot create application directory {app_dir}: {exc.strerror or exc}",
        ) from exc

    if not app_dir.is_dir():
        raise AppDirectoryError(f"{app_dir} exists but is not a directory.")

    logger.debug("Application directory ready at %s", app_dir)
    return app_dir
