"""
Keysmith Structured Logger
===========================

Provides :class:`ForgeLogger`, a logging facade bound to one Keysmith
component.  Records go to a Rich handler on stderr and, when a log file
is configured, to a rotating file as plain text or JSON lines.

Secrets never pass through this module: callers log lengths, pool sizes
and labels, not password material.

References:
    - Python logging HOWTO. https://docs.python.org/3/howto/logging.html
    - Rich library. https://github.com/Textualize/rich
"""

from __future__ import annotations

import json
import logging
import time
from contextlib import contextmanager
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Iterator

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

_LOGGER_PREFIX = "keysmith"
_TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_RESERVED_KWARGS = frozenset({"exc_info", "stack_info", "stacklevel"})

_STDERR_THEME = Theme(
    {
        "logging.level.debug": "dim cyan",
        "logging.level.info": "bright_blue",
        "logging.level.warning": "bold yellow",
        "logging.level.error": "bold red",
    }
)


class _JSONLineFormatter(logging.Formatter):
    """One JSON object per record: time, level, logger, component,
    operation, message and any structured fields passed by the caller."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry: dict[str, Any] = {
            "time": created.isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for attr in ("component", "operation"):
            value = getattr(record, attr, None)
            if value is not None:
                entry[attr] = value
        fields = getattr(record, "fields", None)
        if fields:
            entry["fields"] = fields
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def _stderr_handler(level: int) -> logging.Handler:
    return RichHandler(
        console=Console(theme=_STDERR_THEME, stderr=True),
        level=level,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )


def _file_handler(
    path: Path, level: int, json_lines: bool, max_bytes: int, backups: int
) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        path, maxBytes=max_bytes, backupCount=backups, encoding="utf-8"
    )
    handler.setLevel(level)
    if json_lines:
        handler.setFormatter(_JSONLineFormatter())
    else:
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT))
    return handler


class ForgeLogger:
    """Logger bound to one Keysmith component.

    Keyword arguments other than the stdlib ones are collected into a
    ``fields`` mapping on the record, which the JSON file format emits::

        log = ForgeLogger("engine", log_level="INFO")
        with log.operation("generate"):
            log.info("Pool of %d characters", 77, pool_size=77)

    Args:
        component: Component name; the stdlib logger is ``keysmith.<component>``.
        log_level: Minimum level name; unknown names fall back to WARNING.
        log_file: Rotating log file path. ``None`` or ``""`` disables it.
        json_logs: Write JSON lines instead of plain text to the file.
        max_bytes: File size that triggers rotation.
        backup_count: Rotated files to keep.
        console_output: Attach the stderr handler.
    """

    def __init__(
        self,
        component: str,
        *,
        log_level: str = "WARNING",
        log_file: str | Path | None = None,
        json_logs: bool = False,
        max_bytes: int = 5 * 1024 * 1024,
        backup_count: int = 3,
        console_output: bool = True,
    ) -> None:
        self._component = component
        self._operation: str | None = None

        level = logging.getLevelName(log_level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

        self._logger = logging.getLogger(f"{_LOGGER_PREFIX}.{component}")
        self._logger.setLevel(level)
        self._logger.propagate = False

        # Re-instantiation replaces the previous handlers
        for old in self._logger.handlers[:]:
            self._logger.removeHandler(old)
            old.close()

        if console_output:
            self._logger.addHandler(_stderr_handler(level))
        if log_file:
            self._logger.addHandler(
                _file_handler(Path(log_file), level, json_logs, max_bytes, backup_count)
            )

    @property
    def component(self) -> str:
        return self._component

    @property
    def underlying(self) -> logging.Logger:
        """The stdlib logger behind this facade."""
        return self._logger

    # ------------------------------------------------------------------ #
    #  Scopes
    # ------------------------------------------------------------------ #

    @contextmanager
    def operation(self, name: str) -> Iterator[ForgeLogger]:
        """Tag every record emitted inside the block with *name*."""
        previous, self._operation = self._operation, name
        try:
            yield self
        finally:
            self._operation = previous

    @contextmanager
    def timed(self, label: str) -> Iterator[None]:
        """Log the wall-clock duration of the block at DEBUG."""
        start = time.perf_counter()
        try:
            yield
        finally:
            self.debug(
                "%s took %.3f ms", label, (time.perf_counter() - start) * 1000
            )

    # ------------------------------------------------------------------ #
    #  Emitters
    # ------------------------------------------------------------------ #

    def _log(self, level: int, msg: str, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        if not self._logger.isEnabledFor(level):
            return
        passthrough = {k: kwargs.pop(k) for k in list(kwargs) if k in _RESERVED_KWARGS}
        passthrough.setdefault("stacklevel", 3)
        extra = {
            "component": self._component,
            "operation": self._operation,
            "fields": kwargs,
        }
        self._logger.log(level, msg, *args, extra=extra, **passthrough)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.DEBUG, msg, args, kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.INFO, msg, args, kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.WARNING, msg, args, kwargs)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.ERROR, msg, args, kwargs)
