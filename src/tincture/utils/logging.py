"""Logging helpers for applications embedding tincture."""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

__all__ = ["setup_logging", "get_logger", "get_log_path"]

_DEFAULT_LOG_DIR = Path.home() / ".tincture" / "logs"
_LOG_DIR_ENV = "TINCTURE_LOG_DIR"
_CONFIGURED = False
_LOG_PATH: Path | None = None
_PACKAGE_LOGGER = "tincture"


def setup_logging(
    level: int = logging.INFO,
    *,
    log_dir: Path | str | None = None,
    console: bool = True,
    max_bytes: int = 1_000_000,
    backup_count: int = 3,
    root_level: int | None = None,
    force: bool = False,
) -> Path:
    """Configure rotating file + optional console handlers for tincture.

    ``level`` applies to the ``tincture`` logger hierarchy. The root logger is
    set to ``root_level`` (``level`` when omitted), so a host can keep its own
    loggers quiet while tracing range operations at debug level.
    """

    global _CONFIGURED, _LOG_PATH
    if _CONFIGURED and not force and _LOG_PATH is not None:
        return _LOG_PATH

    target_dir = _resolve_log_dir(log_dir)
    target_dir.mkdir(parents=True, exist_ok=True)
    log_path = target_dir / "tincture.log"
    root_level = level if root_level is None else root_level
    handler_level = min(level, root_level)

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handlers: list[logging.Handler] = []
    file_handler = logging.handlers.RotatingFileHandler(
        log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    file_handler.setLevel(handler_level)
    file_handler.setFormatter(formatter)
    handlers.append(file_handler)

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(handler_level)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    logging.basicConfig(level=root_level, handlers=handlers, force=True)
    logging.getLogger(_PACKAGE_LOGGER).setLevel(level)
    logging.captureWarnings(True)

    _CONFIGURED = True
    _LOG_PATH = log_path
    return log_path


def get_logger(name: str) -> logging.Logger:
    """Return a module-specific logger."""

    return logging.getLogger(name)


def get_log_path() -> Path | None:
    """Return the currently configured log file if available."""

    return _LOG_PATH


def _resolve_log_dir(log_dir: Path | str | None) -> Path:
    env_override = os.environ.get(_LOG_DIR_ENV)
    return Path(log_dir or env_override or _DEFAULT_LOG_DIR).expanduser()
