"""Shared logging configuration using structlog.

Everything goes through stdlib ``logging`` with a structlog
``ProcessorFormatter``, so both ``logging.getLogger(__name__)`` and
``structlog.get_logger()`` callers share the same renderer.
"""

from __future__ import annotations

import logging
import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

import structlog

from sumup_common.config.env import parse_bool_env

# Log lines on stderr would tear the full-screen picker, so stay quiet by default.
DEFAULT_LEVEL = logging.WARNING
# Libraries that log every request at INFO.
NOISY_LOGGERS = ("httpx", "httpcore")

_CONSOLE_HANDLER_NAME = "sumup-console"


@dataclass(frozen=True)
class LogSettings:
    level: int = DEFAULT_LEVEL
    json: bool = False
    log_file: Optional[str] = None

    @classmethod
    def resolve(
        cls,
        *,
        level: str | int | None = None,
        debug: bool = False,
        log_file: str | None = None,
        json: bool | None = None,
    ) -> "LogSettings":
        """Merge explicit arguments over the ``SUMUP_LOG_*`` environment."""
        if json is None:
            json = bool(parse_bool_env(os.environ.get("SUMUP_LOG_JSON")))
        if log_file is None:
            log_file = os.environ.get("SUMUP_LOG_FILE") or None
        if debug:
            resolved = logging.DEBUG
        else:
            resolved = _parse_level(level if level is not None else os.environ.get("SUMUP_LOG_LEVEL"))
        return cls(level=resolved, json=json, log_file=log_file)


def _parse_level(value: str | int | None) -> int:
    if value is None or value == "":
        return DEFAULT_LEVEL
    if isinstance(value, int):
        return value
    if value.strip().isdigit():
        return int(value)
    return logging.getLevelNamesMapping().get(value.strip().upper(), DEFAULT_LEVEL)


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]


def _formatter(json: bool) -> structlog.stdlib.ProcessorFormatter:
    renderer: structlog.types.Processor
    if json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    return structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=_shared_processors(),
    )


def _handlers(settings: LogSettings) -> list[logging.Handler]:
    formatter = _formatter(settings.json)
    console = logging.StreamHandler(sys.stderr)
    console.set_name(_CONSOLE_HANDLER_NAME)
    console.setFormatter(formatter)
    handlers: list[logging.Handler] = [console]
    if settings.log_file:
        file_handler = logging.FileHandler(settings.log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)
    return handlers


def _configure_structlog() -> None:
    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def configure_logging(
    *,
    level: str | int | None = None,
    debug: bool = False,
    log_file: str | None = None,
    json: bool | None = None,
    force: bool = False,
) -> LogSettings:
    """Install the stderr (and optional file) handlers on the root logger.

    An already configured root logger is left alone unless ``force`` is set,
    so embedding applications and pytest's caplog keep their handlers.
    Returns the settings that were resolved.
    """
    settings = LogSettings.resolve(level=level, debug=debug, log_file=log_file, json=json)
    root_logger = logging.getLogger()

    if force or not root_logger.handlers:
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
            if isinstance(handler, logging.FileHandler):
                handler.close()
        for handler in _handlers(settings):
            root_logger.addHandler(handler)
        root_logger.setLevel(settings.level)
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(max(settings.level, logging.WARNING))

    _configure_structlog()
    return settings


@contextmanager
def suspend_console_logging() -> Iterator[None]:
    """Silence the stderr handler while a full-screen UI owns the terminal.

    File handlers keep receiving records.
    """
    console = [
        handler
        for handler in logging.getLogger().handlers
        if handler.get_name() == _CONSOLE_HANDLER_NAME
    ]
    previous = [handler.level for handler in console]
    for handler in console:
        handler.setLevel(logging.CRITICAL + 1)
    try:
        yield
    finally:
        for handler, level in zip(console, previous):
            handler.setLevel(level)
