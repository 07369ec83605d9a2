"""Logging configuration for the inputid command line tool."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional


DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
PACKAGE_LOGGER = "inputid"


def setup_logger(config: Dict[str, Any], name: str = PACKAGE_LOGGER) -> logging.Logger:
    """Configure and return the ``name`` logger from a ``logging`` config section.

    Recognised keys: ``level``, ``format``, ``console`` (default on) and
    ``file``.
    """

    level_name = str(config.get("level", "INFO")).upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.INFO

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Reconfiguring must not duplicate output.
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(str(config.get("format", DEFAULT_FORMAT)))

    if _console_enabled(config):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    log_file = _log_file_path(config.get("file"))
    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logger %s configured at level %s", name, logging.getLevelName(level))
    return logger


def _console_enabled(config: Dict[str, Any]) -> bool:
    console = config.get("console")
    if console is None:
        return True
    return bool(console)


def _log_file_path(value: Any) -> Optional[Path]:
    """Absolute path of the configured log file; its directory is created."""

    if value is None or value is False or value == "":
        return None
    path = Path(str(value)).expanduser()
    if not path.is_absolute():
        path = Path.cwd() / path
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


__all__ = ["DEFAULT_FORMAT", "setup_logger"]
