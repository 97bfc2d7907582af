"""
clipboard_manager.logger

Logging setup for the clipboard manager.

`logger` is the package logger; components take it (or a child of it) by injection.
`configure_logging` installs a JSON-lines file handler and a console handler and is
called by the CLI entry point only, so importing the library never touches the
filesystem.
"""

import logging
from logging import Logger as T_Logger
from logging.config import dictConfig
from pathlib import Path
from typing import Optional

from pythonjsonlogger.json import JsonFormatter  # type: ignore # noqa F401

from .config import ClipboardManagerSettings
from .constants import LOGGER_NAME

logger: T_Logger = logging.getLogger(LOGGER_NAME)
system_logger = logger.getChild("SYSTEM")


def build_logging_config(log_file: Path, log_level: str, console: bool = True) -> dict:
    """Build a dictConfig mapping writing JSON lines to `log_file`."""
    level = log_level.upper()
    handlers = ["file", "console"] if console else ["file"]
    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": "pythonjsonlogger.json.JsonFormatter",
                "fmt": "%(asctime)s %(levelname)s %(name)s %(message)s",
            },
            "standard": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            },
        },
        "handlers": {
            "file": {
                "class": "logging.FileHandler",
                "filename": str(log_file),
                "formatter": "json",
                "level": level,
                "encoding": "utf-8",
            },
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                # Toasts already reach the console; keep it to warnings and up.
                "level": "WARNING",
            },
        },
        "loggers": {
            LOGGER_NAME: {
                "handlers": handlers,
                "level": level,
                "propagate": False,
            },
        },
    }
    if not console:
        del config["handlers"]["console"]
    return config


def configure_logging(
    settings: ClipboardManagerSettings, console: Optional[bool] = True
) -> T_Logger:
    """Configure the package logger from settings and return it."""
    log_file = Path(settings.log_file)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    dictConfig(build_logging_config(log_file, settings.log_level, bool(console)))
    system_logger.debug("Logger for %s initialized.", LOGGER_NAME)
    return logger


__all__ = ["logger", "system_logger", "build_logging_config", "configure_logging"]
