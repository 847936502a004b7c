"""
pwquality Structured Logger
============================

Provides :class:`QualityLogger`, a structured logging facade that emits
human-friendly Rich console output and, optionally, machine-parseable
JSON lines to a rotating log file.

Password values are never passed to the logger; callers log lengths and
verdicts only.

References:
    - Python logging HOWTO. https://docs.python.org/3/howto/logging.html
    - Rich library. https://github.com/Textualize/rich
"""

from __future__ import annotations

import json
import logging
from contextvars import ContextVar, Token
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

_LOG_THEME = Theme(
    {
        "log.level.debug": "dim cyan",
        "log.level.info": "bold bright_blue",
        "log.level.warning": "bold yellow",
        "log.level.error": "bold red",
    }
)

_current_operation: ContextVar[str | None] = ContextVar(
    "pwquality_operation", default=None
)


# ========================== JSON Formatter =================================


class _JSONFormatter(logging.Formatter):
    """Emit each log record as a single-line JSON object.

    Output fields::

        {
          "timestamp": "...",
          "level": "INFO",
          "logger": "pwquality.engine",
          "message": "...",
          "component": "engine",
          "operation": "evaluate",
          "extra": { ... }
        }
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for attr in ("component", "operation"):
            val = getattr(record, attr, None)
            if val is not None:
                entry[attr] = val

        extra = getattr(record, "quality_extra", None)
        if extra is not None:
            entry["extra"] = extra

        if record.exc_info and record.exc_info[1] is not None:
            entry["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(entry, ensure_ascii=False, default=str)


class _ColorConsoleHandler(RichHandler):
    """RichHandler writing to stderr with the pwquality theme."""

    def __init__(self, **kwargs: Any) -> None:
        console = Console(theme=_LOG_THEME, stderr=True)
        super().__init__(
            console=console,
            show_path=False,
            show_time=True,
            rich_tracebacks=True,
            markup=False,
            **kwargs,
        )


# ========================== QualityLogger ==================================


class QualityLogger:
    """Structured, context-aware logger for pwquality components.

    Each instance is bound to a *component* name (e.g. ``"engine"``) and
    can carry a temporary *operation* context via a context manager. The
    operation is held in a :class:`~contextvars.ContextVar`, so concurrent
    threads and tasks each see their own.

    When neither a console handler nor a log file is requested the
    underlying ``pwquality.<component>`` logger is left untouched: no
    handlers, level or propagation changes. Records then flow to whatever
    logging configuration the embedding application has set up.

    Usage::

        log = QualityLogger("engine", log_file="pwquality.log", json_logs=True)
        with log.operation("evaluate"):
            log.debug("Rule checks complete", feedback=3)

    Args:
        component:       Name appended to the ``pwquality.`` logger namespace.
        log_level:       Minimum severity (DEBUG, INFO, WARNING, ERROR).
        log_file:        Rotating log file path. ``None`` disables file logging.
        json_logs:       If ``True`` the file handler emits JSON lines.
        max_bytes:       Maximum log-file size before rotation (default 10 MiB).
        backup_count:    Number of rotated backup files to keep.
        console_output:  If ``True`` attach a Rich console handler.
    """

    def __init__(
        self,
        component: str,
        *,
        log_level: str = "WARNING",
        log_file: str | Path | None = None,
        json_logs: bool = False,
        max_bytes: int = 10_485_760,
        backup_count: int = 5,
        console_output: bool = True,
    ) -> None:
        self._component = component
        self._logger = logging.getLogger(f"pwquality.{component}")

        if not console_output and log_file is None:
            return

        level = getattr(logging, log_level.upper(), logging.WARNING)
        self._logger.setLevel(level)
        self._logger.propagate = False

        # Prevent duplicate handlers on re-instantiation
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            handler.close()

        if console_output:
            self._logger.addHandler(_ColorConsoleHandler(level=level))

        if log_file is not None:
            file_path = Path(log_file)
            file_path.parent.mkdir(parents=True, exist_ok=True)
            fh = RotatingFileHandler(
                filename=str(file_path),
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
            fh.setLevel(level)
            if json_logs:
                fh.setFormatter(_JSONFormatter())
            else:
                fh.setFormatter(
                    logging.Formatter(
                        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
                        datefmt="%Y-%m-%dT%H:%M:%S%z",
                    )
                )
            self._logger.addHandler(fh)

    # ------------------------------------------------------------------ #
    #  Context management -- operation scope
    # ------------------------------------------------------------------ #

    class _OperationContext:
        """Context manager that temporarily binds an operation name."""

        def __init__(self, parent: QualityLogger, operation: str) -> None:
            self._parent = parent
            self._operation = operation
            self._token: Token[str | None] | None = None

        def __enter__(self) -> QualityLogger:
            self._token = _current_operation.set(self._operation)
            return self._parent

        def __exit__(self, *exc: Any) -> None:
            if self._token is not None:
                _current_operation.reset(self._token)
                self._token = None

    def operation(self, name: str) -> _OperationContext:
        """Return a context manager that sets the *operation* field."""
        return self._OperationContext(self, name)

    # ------------------------------------------------------------------ #
    #  Log methods
    # ------------------------------------------------------------------ #

    def _enrich(self, kwargs: dict[str, Any]) -> dict[str, Any]:
        """Move non-standard keyword args into the record's *extra*."""
        extra = kwargs.pop("extra", {}) or {}

        quality_extra: dict[str, Any] = {}
        standard_keys = {"exc_info", "stack_info", "stacklevel"}
        for key in list(kwargs):
            if key not in standard_keys:
                quality_extra[key] = kwargs.pop(key)

        extra["component"] = self._component
        extra["operation"] = _current_operation.get()
        if quality_extra:
            extra["quality_extra"] = quality_extra

        kwargs["extra"] = extra
        return kwargs

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        kwargs = self._enrich(kwargs)
        self._logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        kwargs = self._enrich(kwargs)
        self._logger.info(msg, *args, **kwargs)

    # ------------------------------------------------------------------ #
    #  Properties
    # ------------------------------------------------------------------ #

    @property
    def underlying(self) -> logging.Logger:
        """Direct access to the stdlib :class:`logging.Logger`."""
        return self._logger
