"""\
Loggers
=======

Author: Akshay Mestry <xa@mes3.dev>
Created on: Tuesday, August 05 2025
Last updated on: Tuesday, August 05 2025

This module defines the logger capability a guard forwards violation
reports to, and its default implementation backed by the standard
library's logging.
"""

from __future__ import annotations

import logging
import typing as t
from abc import ABC
from abc import abstractmethod

from strictprops.core.base import Observable
from strictprops.utils.logging import get_logger

if t.TYPE_CHECKING:
    from collections.abc import Iterator

__all__: tuple[str, ...] = (
    "ErrorLogger",
    "Logger",
)

_PREFIX: t.Final[str] = "[StrictPropertyAccess]"


class Logger(Observable, ABC):
    """Sink for violation reports.

    A guard hands every report it echoes to its logger, if it has one.
    Loggers are shared references; a guard never owns its logger.

    .. code-block:: python

        class ListLogger(Logger):
            def __init__(self):
                self.messages = []

            def log(self, message):
                self.messages.append(message)
    """

    __slots__: tuple[str, ...] = ()

    @abstractmethod
    def log(self, message: str) -> None:
        """Record a message.

        :param message: The report, possibly with a trailing newline.
        """
        raise NotImplementedError("Subclasses must implement log method")


class ErrorLogger(Logger):
    """Write reports to the process' diagnostic log.

    Messages are trimmed, prefixed with `[StrictPropertyAccess]`, and
    emitted through the named standard library logger.

    :param name: Name of the logger to write to, defaults to
        `strictprops`.
    :param level: Level the reports are logged at, defaults to
        `logging.WARNING`.
    """

    __slots__: tuple[str, ...] = ("_logger", "_level")

    def __init__(
        self,
        name: str = "strictprops",
        level: int = logging.WARNING,
    ) -> None:
        """Initialise the logger with its destination."""
        self._logger = get_logger(name)
        self._level = level

    def __inspect_attrs__(self) -> Iterator[tuple[str, t.Any]]:
        """Yield logger's attributes for introspection."""
        yield "name", self._logger.name
        yield "level", logging.getLevelName(self._level)

    def log(self, message: str) -> None:
        """Log the trimmed message with the package prefix."""
        self._logger.log(self._level, f"{_PREFIX} {message.strip()}")

    @property
    def name(self) -> str:
        """Get the name of the underlying logger."""
        return self._logger.name

    @property
    def level(self) -> int:
        """Get the level the reports are logged at."""
        return self._level
