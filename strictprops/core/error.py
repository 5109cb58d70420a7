"""\
Error and warnings
==================

Author: Akshay Mestry <xa@mes3.dev>
Created on: Monday, August 04 2025
Last updated on: Friday, August 08 2025

This module provides various error classes that are raised throughout
this package. Errors raised for field violations carry the name of the
offending field so callers can react without parsing the message.
"""

from __future__ import annotations

import typing as t

__all__: tuple[str, ...] = (
    "BaseError",
    "ConfigValidationError",
    "DynamicFieldCreationAttempt",
    "InvalidConfiguration",
    "LogicViolation",
    "MissingFieldAccess",
    "SecurityError",
    "ValidationError",
)

Error = Exception


class BaseError(Error):
    """Base error class for all exceptions in the package.

    :param message: The error message to be displayed.
    """

    def __init__(self, message: str, *args: t.Any) -> None:
        """Initialise the error with a message and optional args."""
        super().__init__(message, *args)
        self.message = message

    def __repr__(self) -> str:
        """Return a string representation of the error."""
        return f"<{type(self).__name__}(message={self.message!r})>"


class SecurityError(BaseError):
    """Errors related to guarded access and its configuration."""


class LogicViolation(SecurityError):
    """Errors raised for a violation when exceptions are enabled.

    The message is kept exactly as reported, so `str(error)` matches
    what would otherwise have been echoed.

    :param message: The violation message.
    :param field: Name of the field involved, defaults to `None`.
    """

    def __init__(self, message: str, *, field: str | None = None) -> None:
        """Initialise the violation with the offending field."""
        super().__init__(message)
        self.field = field

    def __repr__(self) -> str:
        """Return a string representation of the violation."""
        return (
            f"<{type(self).__name__}(message={self.message!r}, "
            f"field={self.field!r})>"
        )


class MissingFieldAccess(LogicViolation):
    """Errors related to reading an undeclared field."""


class DynamicFieldCreationAttempt(LogicViolation):
    """Errors related to creating an undeclared field."""


class ValidationError(SecurityError):
    """Errors related to validation check failure."""


class ConfigValidationError(ValidationError):
    """Errors related to configuration validation failure."""


InvalidConfiguration = ConfigValidationError
