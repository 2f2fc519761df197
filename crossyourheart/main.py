"""Entry point: configure logging, then hand over to the Typer app."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from .cli import app
from .config import DEFAULT_LOG_FILE, get_settings

LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
LOG_FILE_BACKUP_COUNT = 3

logger = logging.getLogger(__name__)


def _log_target() -> tuple[Path, str, Optional[str]]:
    """Return (log file, level, settings error) with defaults on bad config."""
    try:
        settings = get_settings()
    except ValidationError as e:
        return DEFAULT_LOG_FILE, "INFO", str(e)
    return settings.log_file, settings.log_level, None


def setup_logging() -> None:
    """Send tutorial logs to a rotating file and warnings to stderr.

    The file receives everything at or above CYH_LOG_LEVEL; stderr only shows
    WARNING and above so it does not paint over the TUI. A malformed CYH_*
    setting does not prevent logging: the defaults are used and the problem
    is logged once the handlers exist.
    """
    log_file, log_level, settings_error = _log_target()
    log_file.parent.mkdir(parents=True, exist_ok=True)

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    file_handler.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter("%(levelname)-8s | %(name)s | %(message)s"))
    console_handler.setLevel(logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level))
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    if settings_error is not None:
        logger.warning("Ignoring invalid settings, using defaults: %s", settings_error)


def main() -> None:
    """Main entry point for the crossyourheart CLI."""
    setup_logging()
    app()


if __name__ == "__main__":
    main()
