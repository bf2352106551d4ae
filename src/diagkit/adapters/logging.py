"""Structured logging on top of the standard library logging module.

Library code obtains loggers through get_logger() and attaches structured
fields with with_fields(). Fields travel as ``extra`` on the LogRecord, so
any handler the application installs can pick them up. No handlers are
configured here.
"""

import logging
from typing import Any

# Keys reserved by LogRecord that cannot be passed through ``extra``
_RESERVED_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)


class StructuredLogger:
    """Logger wrapper that binds structured fields to every record.

    Example:
        ```python
        logger = get_logger(__name__)
        logger.with_fields(pid=42).debug("Process vanished")
        ```
    """

    def __init__(
        self, logger: logging.Logger, fields: dict[str, Any] | None = None
    ) -> None:
        self._logger = logger
        self._fields = fields or {}

    @property
    def fields(self) -> dict[str, Any]:
        """Fields bound to this logger."""
        return dict(self._fields)

    def with_fields(self, **fields: Any) -> "StructuredLogger":
        """Return a new logger with additional bound fields.

        Raises:
            ValueError: If a field name clashes with a LogRecord attribute.
        """
        clashes = sorted(set(fields) & _RESERVED_ATTRS)
        if clashes:
            raise ValueError(f"reserved log field names: {', '.join(clashes)}")
        return StructuredLogger(self._logger, {**self._fields, **fields})

    def _log(self, level: int, message: str, **kwargs: Any) -> None:
        if self._logger.isEnabledFor(level):
            self._logger.log(level, message, extra=self._fields, **kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, **kwargs)


def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger for the given module name."""
    return StructuredLogger(logging.getLogger(name))
