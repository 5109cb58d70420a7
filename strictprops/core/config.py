"""\
Configurations
==============

Author: Akshay Mestry <xa@mes3.dev>
Created on: Monday, August 04 2025
Last updated on: Saturday, August 09 2025

This module provides the configurations used throughout this package.
Every guarded instance owns a `GuardConfig` of its own, so toggling the
mode of one object never leaks into another. The remaining objects
configure the package's logging and telemetry.
"""

from __future__ import annotations

import enum
import typing as t

from strictprops.core.error import ConfigValidationError
from strictprops.core.registry import FieldFilter

if t.TYPE_CHECKING:
    from collections.abc import Iterable

__all__: tuple[str, ...] = (
    "Config",
    "ConsoleLoggerConfig",
    "FileLoggerConfig",
    "GuardConfig",
    "LoggerConfig",
    "OutputMode",
    "TTYLoggerConfig",
    "TelemetryConfig",
    "config_property",
)

_ALLOWED_LOG_LEVELS: tuple[str, ...] = (
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR",
    "CRITICAL",
)
_DEFAULT_LOG_FMT: t.Final[str] = (
    "%(asctime)s %(levelname)s %(name)s:%(lineno)d %(extra)s: %(message)s"
)
_DEFAULT_LOG_DATEFMT: t.Final[str] = "%Y-%m-%dT%H:%M:%SZ"


class OutputMode(enum.StrEnum):
    """Channels a violation report may be written to."""

    ECHO = "echo"
    LOG = "log"
    BOTH = "both"


_ALLOWED_OUTPUT_MODES: tuple[str, ...] = tuple(mode for mode in OutputMode)


class config_property[T]:  # noqa: N801
    """Descriptor for configuration properties.

    This descriptor behaves like Python's built-in `property` but
    validates every assignment against the constraints given at
    definition time. A rejected value raises before anything is stored,
    so the previous value always survives a failed assignment.

    :param default: Value returned until the property is assigned.
    :param frozen: Whether assignments are refused, defaults to `False`.
    :param description: Optional description, defaults to `None`.
    :param allowed: Values the property may take, defaults to `None`.
    :param check: Predicate the value must satisfy, defaults to `None`.
    :param between: Inclusive numeric bounds, defaults to `None`.
    """

    __slots__: tuple[str, ...] = (
        "allowed",
        "between",
        "check",
        "default",
        "description",
        "frozen",
        "property",
        "validate",
    )

    def __init__(
        self,
        default: T,
        *,
        frozen: bool = False,
        description: str | None = None,
        allowed: Iterable[T] | None = None,
        check: t.Callable[[T], bool] | None = None,
        between: tuple[int | float, ...] | None = None,
    ) -> None:
        """Initialise configuration property."""
        self.default = default
        self.frozen = frozen
        self.description = description
        self.allowed = allowed
        self.check = check
        self.between = between
        self.property: str = ""
        self.validate: bool = any([self.between, self.check, self.allowed])

    def __set_name__(self, owner: type, name: str) -> None:
        """Bind the storage slot and validate the default.

        :param owner: The class the property is declared on.
        :param name: The attribute name of the property.
        :raises ConfigValidationError: If the default value violates the
            property's own constraints.
        """
        self.property = f"_{name}"
        if self.default is not None and self.validate:
            try:
                self.__validate__(self.default)
            except ConfigValidationError as error:
                raise ConfigValidationError(
                    f"got invalid value for {name!r}: {error}"
                ) from error
        setattr(owner, self.property, self.default)

    @t.overload
    def __get__(self, instance: None, owner: type) -> config_property[T]: ...

    @t.overload
    def __get__(self, instance: object, owner: type) -> T: ...

    def __get__(
        self,
        instance: object | None,
        owner: type,
    ) -> config_property[T] | T:
        """Return the property value from the instance."""
        if instance is None:
            return self
        return getattr(instance, self.property, self.default)

    def __set__(self, instance: object, value: T) -> None:
        """Set the property with validation & immutability checks.

        :param instance: The instance the property is set on.
        :param value: The value to be set for the property.
        :raises ConfigValidationError: If the property is frozen or the
            value fails validation.
        """
        if self.frozen:
            raise ConfigValidationError(
                f"cannot modify frozen property: {self.property[1:]!r}",
            )
        if self.validate:
            self.__validate__(value)
        setattr(instance, self.property, value)

    def __validate__(self, value: t.Any) -> None:
        """Validate the property value based on constraints.

        :param value: The value to be validated.
        :raises ConfigValidationError: If the value does not meet the
            validation criteria.
        """
        if self.allowed is not None and value not in self.allowed:
            raise ConfigValidationError(
                f"{value!r} is not one of the allowed values "
                f"({', '.join(str(item) for item in self.allowed)})"
            )
        if self.check is not None:
            try:
                if not self.check(value):
                    raise ConfigValidationError("property validation failed")
            except ConfigValidationError:
                raise
            except Exception as error:
                raise ConfigValidationError(
                    f"property validation failed for {value!r} with "
                    f"message: {error}"
                ) from error
        if self.between is not None and len(self.between) == 2:
            minimum, maximum = self.between
            if not all(
                isinstance(num, int | float) for num in (minimum, maximum)
            ):
                raise ConfigValidationError("must be a tuple of two numbers")
            if not (minimum <= value <= maximum):
                raise ConfigValidationError(
                    f"{value} is not between {minimum} and {maximum}"
                )


class GuardConfig:
    """Access guard configuration.

    Holds the mode flags of a single guarded instance. `output` is
    validated and kept but reporting does not consult it yet; echo
    happens whenever exceptions are disabled.
    """

    strict: config_property[bool] = config_property(
        True,
        allowed=[True, False],
    )
    exceptions: config_property[bool] = config_property(
        False,
        allowed=[True, False],
    )
    output: config_property[str] = config_property(
        OutputMode.BOTH,
        allowed=_ALLOWED_OUTPUT_MODES,
    )
    fields: config_property[FieldFilter] = config_property(
        FieldFilter.PUBLIC,
        check=lambda x: isinstance(x, FieldFilter),
    )

    def update(self, **options: t.Any) -> GuardConfig:
        """Assign several options at once and return `self`.

        :raises ConfigValidationError: If an option is unknown or any
            value is invalid.
        """
        for option, value in options.items():
            if not isinstance(
                getattr(type(self), option, None), config_property
            ):
                raise ConfigValidationError(
                    f"unknown guard option: {option!r}"
                )
            setattr(self, option, value)
        return self


class FileLoggerConfig:
    """File logger configuration.

    Options for logging to a rotating file, for deployments where the
    logs should outlive the process.
    """

    enable: config_property[bool] = config_property(
        False,
        allowed=[True, False],
    )
    level: config_property[str] = config_property(
        "WARNING",
        allowed=_ALLOWED_LOG_LEVELS,
    )
    fmt: config_property[str] = config_property(_DEFAULT_LOG_FMT)
    path: config_property[str] = config_property("logs/strictprops.log")
    encoding: config_property[str] = config_property("utf-8", frozen=True)
    max_bytes: config_property[int] = config_property(10485760)
    backups: config_property[int] = config_property(5, check=lambda x: x >= 0)


class ConsoleLoggerConfig:
    """Console logger configuration."""

    enable: config_property[bool] = config_property(
        True,
        allowed=[True, False],
    )
    level: config_property[str] = config_property(
        "DEBUG",
        allowed=_ALLOWED_LOG_LEVELS,
    )
    fmt: config_property[str] = config_property(_DEFAULT_LOG_FMT)
    colour: config_property[bool] = config_property(
        True,
        allowed=[True, False],
    )


TTYLoggerConfig = ConsoleLoggerConfig


class LoggerConfig:
    """Logger configuration.

    Combines the console and file logger configurations into the object
    consumed by `strictprops.utils.logging.configure`.
    """

    level: config_property[str] = config_property(
        "WARNING",
        allowed=_ALLOWED_LOG_LEVELS,
    )
    datefmt: config_property[str] = config_property(_DEFAULT_LOG_DATEFMT)
    as_json: config_property[bool] = config_property(
        False,
        allowed=[True, False],
    )

    def __init__(self) -> None:
        """Initialise a logger configuration with its own handlers."""
        self.file = FileLoggerConfig()
        self.tty = TTYLoggerConfig()


class TelemetryConfig:
    """OpenTelemetry configuration."""

    enabled: config_property[bool] = config_property(
        False,
        allowed=[True, False],
    )
    name: config_property[str | None] = config_property(None)
    debug: config_property[bool] = config_property(
        False,
        allowed=[True, False],
    )


class Config:
    """Configuration.

    Main configuration object of the package, grouping the logging and
    telemetry settings. Guard settings live on each guarded instance
    instead, see `GuardConfig`.
    """

    name: config_property[str] = config_property("strictprops", frozen=True)
    version: config_property[str] = config_property("9.8.2025", frozen=True)

    def __init__(self) -> None:
        """Initialise a configuration with fresh nested sections."""
        self.logger = LoggerConfig()
        self.telemetry = TelemetryConfig()
