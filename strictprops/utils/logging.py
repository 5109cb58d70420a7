"""\
Logging
=======

Author: Akshay Mestry <xa@mes3.dev>
Created on: Monday, August 04 2025
Last updated on: Friday, August 08 2025

This module provides logging utilities and configuration helpers for
the package. It builds on the standard library's logging with
formatters that render `extra` fields automatically, in plain,
coloured, or JSON form.

The package never configures logging on import. Applications call
`configure` with a `LoggerConfig` when they want the package's handlers
installed.
"""

from __future__ import annotations

import json
import logging
import logging.handlers
import sys
import typing as t
from pathlib import Path

if t.TYPE_CHECKING:
    from strictprops.core.config import LoggerConfig

__all__: list[str] = [
    "ColouredFormatter",
    "JSONFormatter",
    "StrictFormatter",
    "configure",
    "get_logger",
]


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Renders each record as a single JSON object holding the timestamp,
    level, logger name, location, message, exception information, and
    any extra fields.

    :param extras: Whether to include extra fields in output, defaults
        to `True`.
    """

    def __init__(self, extras: bool = True) -> None:
        """Initialise the JSON formatter instance."""
        super().__init__()
        self.extras = extras

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        :param record: The log record to format.
        :return: JSON-formatted log message.
        """
        payload = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        if self.extras:
            for key, value in record.__dict__.items():
                if (
                    key not in payload
                    and key not in StrictFormatter.LOG_RECORD_ATTRS
                    and not key.startswith("_")
                ):
                    payload[key] = value
        return json.dumps(payload, default=str)


class StrictFormatter(logging.Formatter):
    """Formatter that renders extra fields automatically.

    Any attribute of a record that is not a standard `LogRecord`
    attribute is treated as an extra field. The extra fields are
    formatted with `extra_format`, joined with `extra_separator`, and
    made available to the format string as `%(extra)s`.

    :param fmt: The format string for log messages, defaults to `None`.
    :param datefmt: The format string for timestamps, defaults to
        `None`.
    :param extra_format: Format string for individual extra fields,
        defaults to `{key}: {value}`.
    :param extra_separator: Separator between multiple extra fields,
        defaults to a single space.
    :var LOG_RECORD_ATTRS: Set of standard `LogRecord` attributes.
    """

    LOG_RECORD_ATTRS = {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "exc_info",
        "exc_text",
        "stack_info",
        "message",
        "asctime",
        "taskName",
        "extra",
    }

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        extra_format: str = "{key}: {value}",
        extra_separator: str = " ",
    ) -> None:
        """Initialise the formatter."""
        super().__init__(fmt, datefmt)
        self.extra = extra_format
        self.extra_separator = extra_separator

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record with its extra fields.

        :param record: The log record to format.
        :return: Formatted log message with extra fields.
        """
        clone = logging.makeLogRecord(record.__dict__)
        entries = [
            self.extra.format(key=key, value=value)
            for key, value in sorted(record.__dict__.items())
            if key not in self.LOG_RECORD_ATTRS and not key.startswith("_")
        ]
        clone.extra = self.extra_separator.join(entries)
        return super().format(clone)


class ColouredFormatter(StrictFormatter):
    """Formatter colouring the level name on a terminal.

    Colours are applied only when `is_tty` is set, so the same format
    can be shared by console and file handlers without writing ANSI
    escape sequences to files.

    :var COLORS: Dictionary mapping log levels to ANSI colour codes.
    """

    COLORS = {
        "DEBUG": "\x1b[38;5;14m",
        "INFO": "\x1b[38;5;41m",
        "WARNING": "\x1b[38;5;215m",
        "ERROR": "\x1b[38;5;204m",
        "CRITICAL": "\x1b[38;5;197m",
        "RESET": "\x1b[0m",
    }

    is_tty: bool = False

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record with a padded, coloured level name."""
        clone = logging.makeLogRecord(record.__dict__)
        if self.is_tty:
            colour = self.COLORS.get(record.levelname, self.COLORS["RESET"])
            clone.levelname = (
                f"{colour}{record.levelname:>8s}{self.COLORS['RESET']}"
            )
        else:
            clone.levelname = f"{record.levelname:>8s}"
        return super().format(clone)


def configure(config: LoggerConfig, name: str = "strictprops") -> None:
    """Configure the package's logger from configuration settings.

    Replaces the handlers of the named logger with a console handler
    and a rotating file handler, each installed only when enabled in the
    configuration.

    :param config: Logging configuration settings.
    :param name: Name of the logger to configure, defaults to
        `strictprops`.
    """
    handlers: list[logging.Handler] = []
    logger = logging.getLogger(name)
    logger.handlers.clear()
    logger.setLevel(getattr(logging, config.level.upper()))
    if config.tty.enable:
        tty = logging.StreamHandler(sys.stdout)
        tty.setLevel(getattr(logging, config.tty.level.upper()))
        if config.as_json:
            formatter = JSONFormatter()
        else:
            formatter = ColouredFormatter(
                fmt=config.tty.fmt,
                datefmt=config.datefmt,
                extra_format="[{key}: {value}]",
            )
            formatter.is_tty = config.tty.colour and sys.stdout.isatty()
        tty.setFormatter(formatter)
        handlers.append(tty)
    if config.file.enable:
        Path(config.file.path).parent.mkdir(parents=True, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            filename=config.file.path,
            maxBytes=config.file.max_bytes,
            backupCount=config.file.backups,
            encoding=config.file.encoding,
        )
        handler.setLevel(getattr(logging, config.file.level.upper()))
        if config.as_json:
            formatter = JSONFormatter()
        else:
            formatter = ColouredFormatter(
                fmt=config.file.fmt,
                datefmt=config.datefmt,
                extra_format="[{key}: {value}]",
            )
        handler.setFormatter(formatter)
        handlers.append(handler)
    for handler in handlers:
        logger.addHandler(handler)


def get_logger(logger_name: str) -> logging.Logger:
    """Get a logger instance with the specified name.

    :param logger_name: Logger name.
    :return: Logger instance.
    """
    return logging.getLogger(logger_name)
