"""Structured logging for the client.

One shared ``deepseek`` base logger writes single-line JSON to stderr; child
loggers obtained through :func:`get_logger` propagate into it. The base level
comes from ``DEEPSEEK_LOG_LEVEL`` (default INFO). Client events are emitted
at DEBUG unless the client runs with ``debug=True``, which lifts them to INFO.
:func:`log_event` is the only emission primitive used by the
HTTP and streaming layers.
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Optional

from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "deepseek"
LOG_LEVEL_ENV = "DEEPSEEK_LOG_LEVEL"

_BASE_LOGGER_ATTR = "_deepseek_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_deepseek_console_handler"
_FILE_HANDLER_ATTR = "_deepseek_file_handler"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _parse_level(value: str | None, default: int = logging.INFO) -> int:
    """Parse a level name (case-insensitive); unknown names yield ``default``."""
    if not value:
        return default
    mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return mapping.get(value.strip().upper(), default)


def _formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


def _ensure_base_logger(json_mode: bool) -> logging.Logger:
    logger = logging.getLogger(BASE_LOGGER_NAME)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        return logger
    level = _parse_level(os.getenv(LOG_LEVEL_ENV))
    logger.setLevel(level)
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(logging.NOTSET)
    handler.setFormatter(_formatter(json_mode))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    logger.handlers[:] = [h for h in logger.handlers if not getattr(h, _CONSOLE_HANDLER_ATTR, False)]
    logger.addHandler(handler)
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def get_logger(name: str = BASE_LOGGER_NAME, json_mode: bool = True) -> logging.Logger:
    """Return the base logger or a child of it.

    Names outside the ``deepseek.`` hierarchy are nested under it so every
    client logger shares the base handler.
    """
    base_logger = _ensure_base_logger(json_mode=json_mode)
    if name == BASE_LOGGER_NAME:
        return base_logger
    if not name.startswith(BASE_LOGGER_NAME + "."):
        name = f"{BASE_LOGGER_NAME}.{name}"
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
) -> logging.Logger:
    """Reconfigure the shared ``deepseek`` logger at runtime.

    Parameters
    ----------
    level: int | str | None
        New level, numeric or by name. ``None`` keeps the current level.
    file_path: Optional[str]
        When given, attach (or retarget) a rotating file handler writing to
        this path. When ``None``, any file handler previously attached here is
        removed; handlers added by the application are left alone.
    json_mode: bool
        JSON formatter (default) or plain text for the handlers managed here.
    """
    logger = _ensure_base_logger(json_mode=json_mode)
    if level is not None:
        if isinstance(level, str):
            logger.setLevel(_parse_level(level, default=logger.level))
        else:
            logger.setLevel(level)
    for h in logger.handlers:
        if getattr(h, _CONSOLE_HANDLER_ATTR, False):
            h.setFormatter(_formatter(json_mode))

    managed = [h for h in logger.handlers if getattr(h, _FILE_HANDLER_ATTR, False)]
    abs_path = os.path.abspath(os.path.expanduser(file_path)) if file_path else None
    existing: Optional[logging.FileHandler] = None
    for h in managed:
        if abs_path is not None and getattr(h, "baseFilename", None) == abs_path:
            existing = h
            continue
        logger.removeHandler(h)
        with contextlib.suppress(OSError):
            h.close()
    if abs_path is None:
        return logger

    if existing is None:
        directory = os.path.dirname(abs_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        fh = RotatingFileHandler(abs_path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
        setattr(fh, _FILE_HANDLER_ATTR, True)
        fh.setFormatter(_formatter(json_mode))
        logger.addHandler(fh)
    else:
        existing.setFormatter(_formatter(json_mode))
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.DEBUG,
    **fields: Any,
) -> None:
    """Emit one structured event as a JSON message.

    ``None``-valued fields are dropped. The payload is only built when
    ``level`` is enabled on ``logger``.
    """
    if not logger.isEnabledFor(level):
        return
    payload: dict[str, Any] = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


__all__ = [
    "BASE_LOGGER_NAME",
    "LOG_LEVEL_ENV",
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
]
