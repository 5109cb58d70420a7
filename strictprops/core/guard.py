"""\
Access Guard
============

Author: Akshay Mestry <xa@mes3.dev>
Created on: Tuesday, August 05 2025
Last updated on: Saturday, August 09 2025

This module provides the access guard, the interceptor deciding what
happens when a guarded instance reads or writes an attribute that is
not one of its declared fields.

A violation goes through these layers, in order:

1. The read is recorded in the guard's history (reads only).
2. The observer, if any, is notified.
3. The instance's `handle_missing_property` hook, if it defines one,
   replaces all further reporting (reads only).
4. The report is raised as a `LogicViolation` when exceptions are
   enabled, otherwise it is printed and handed to the logger, if any.

.. note::

    Write violations are neither recorded in the history nor routed to
    the `handle_missing_property` hook.

.. note::

    The error output mode is validated and stored but reporting does
    not consult it yet: a report is always printed when exceptions are
    disabled, so `log` behaves exactly like `both`.
"""

from __future__ import annotations

import typing as t

from strictprops.core.base import Observable
from strictprops.core.config import GuardConfig
from strictprops.core.config import OutputMode
from strictprops.core.error import DynamicFieldCreationAttempt
from strictprops.core.error import LogicViolation
from strictprops.core.error import MissingFieldAccess
from strictprops.core.events import EVENTS
from strictprops.core.registry import FieldFilter
from strictprops.core.registry import FieldRegistry
from strictprops.utils.logging import get_logger

if t.TYPE_CHECKING:
    from collections.abc import Iterator

    from strictprops.core.loggers import Logger
    from strictprops.core.observers import PropertyAccessObserver

__all__: tuple[str, ...] = (
    "AccessGuard",
    "MissingFieldHandler",
)

_HOOK: t.Final[str] = "handle_missing_property"
_DYNAMIC_FIELD_MESSAGE: t.Final[str] = (
    "Deprecated: Creation of dynamic property is deprecated"
)

_log = get_logger(__name__)


@t.runtime_checkable
class MissingFieldHandler(t.Protocol):
    """Optional capability of a guarded class.

    A class defining `handle_missing_property` takes over the reporting
    of reads of undeclared fields. The hook is looked up when the
    violation happens, and whatever it returns becomes the value of the
    attribute access.
    """

    def handle_missing_property(self, name: str) -> t.Any: ...


class AccessGuard(Observable):
    """Intercept access to undeclared fields of one instance.

    A guard belongs to exactly one instance and holds its mode flags,
    its history of invalid reads, and references to the logger and
    observer it reports to. The declared field set itself is shared by
    all instances of the class through `FieldRegistry.for_type`.

    :param owner: The class of the guarded instance.
    :param logger: Logger reports are forwarded to, defaults to `None`.
    :param observer: Observer notified of violations, defaults to
        `None`.
    :param options: Initial `GuardConfig` options, `strict`,
        `exceptions`, `output` and `fields`.
    :raises ConfigValidationError: If an option is unknown or invalid.

    .. code-block:: python

        guard = AccessGuard(User, exceptions=True)
        guard.on_field_read(user, "age")  # raises MissingFieldAccess
    """

    __slots__: tuple[str, ...] = (
        "_owner",
        "_config",
        "_registry",
        "_invalid",
        "_logger",
        "_observer",
    )

    def __init__(
        self,
        owner: type,
        *,
        logger: Logger | None = None,
        observer: PropertyAccessObserver | None = None,
        **options: t.Any,
    ) -> None:
        """Initialise the guard and discover the owner's fields."""
        self._owner = owner
        self._config = GuardConfig().update(**options)
        self._registry = FieldRegistry.for_type(owner, self._config.fields)
        self._invalid: list[str] = []
        self._logger = logger
        self._observer = observer

    def __inspect_attrs__(self) -> Iterator[tuple[str, t.Any]]:
        """Yield guard's attributes for introspection."""
        yield "owner", self._owner.__qualname__
        yield "strict", self.strict_mode
        yield "exceptions", self.throw_on_violation
        yield "output", str(self.error_output_mode)
        if self._invalid:
            yield "invalid_accesses", self._invalid

    def _notice(self, event: str, **extra: t.Any) -> None:
        """Write a debug line describing a guard event."""
        _log.debug(
            EVENTS[event]["description"],
            extra={"owner": self._owner.__qualname__, **extra},
        )

    def _missing(self, instance: object, name: str) -> AttributeError:
        """Build the error raised for an attribute that is simply unset."""
        return AttributeError(
            f"{type(instance).__name__!r} object has no attribute {name!r}",
            name=name,
            obj=instance,
        )

    def on_field_read(self, instance: object, name: str) -> t.Any:
        """Intercept the read of an attribute normal lookup missed.

        Outside strict mode, and for declared fields that are not set
        yet, the read fails with the usual `AttributeError`. Any other
        name is a violation: it is recorded, the observer is notified,
        and the hook or the default report handles it.

        :param instance: The guarded instance.
        :param name: Name of the attribute being read.
        :return: The hook's result, or `None` once the violation has been
            reported.
        :raises AttributeError: If the read is not a violation.
        :raises MissingFieldAccess: If the violation is reported while
            exceptions are enabled.
        """
        if not self._config.strict or name in self._registry:
            raise self._missing(instance, name)
        self._invalid.append(name)
        self._notice("missing_field_access", field=name)
        if self._observer is not None:
            self._observer.on_missing_property(name)
        try:
            hook = object.__getattribute__(instance, _HOOK)
        except AttributeError:
            hook = None
        if callable(hook):
            return hook(name)
        self.report(f"Prop '{name}' does not exist!!!", field=name)
        return None

    def on_field_write(self, instance: object, name: str, value: t.Any) -> bool:
        """Intercept an assignment and decide whether it may happen.

        Assignments outside strict mode, to declared fields, and to
        attributes the instance already has go through untouched. Any
        other assignment would create a new field and is a violation:
        the observer is notified, the violation is reported, and the
        value is discarded.

        :param instance: The guarded instance.
        :param name: Name of the attribute being assigned.
        :param value: The value being assigned.
        :return: `True` if the assignment should be performed.
        :raises DynamicFieldCreationAttempt: If the violation is reported
            while exceptions are enabled.
        """
        if not self._config.strict or name in self._registry:
            return True
        if name in getattr(instance, "__dict__", {}):
            return True
        self._notice("dynamic_field_creation_attempt", field=name)
        if self._observer is not None:
            self._observer.on_dynamic_property_creation_attempt(name, value)
        self.report(
            _DYNAMIC_FIELD_MESSAGE,
            field=name,
            error=DynamicFieldCreationAttempt,
        )
        return False

    def report(
        self,
        message: str,
        *,
        field: str | None = None,
        error: type[LogicViolation] = MissingFieldAccess,
    ) -> None:
        """Report a violation through the configured channel.

        With exceptions enabled the trimmed message is raised and
        nothing is printed or logged. Otherwise the message is printed
        to standard output and handed to the logger, if any.

        :param message: Human readable description of the violation.
        :param field: Name of the field involved, defaults to `None`.
        :param error: Violation class raised when exceptions are
            enabled, defaults to `MissingFieldAccess`.
        :raises LogicViolation: If exceptions are enabled.
        """
        if self._config.exceptions:
            raise error(message.strip(), field=field)
        print(message)
        if self._logger is not None:
            self._logger.log(message)

    def enable_strict_mode(self) -> None:
        """Intercept access to undeclared fields."""
        self._config.strict = True
        self._notice("strict_mode_enabled")

    def disable_strict_mode(self) -> None:
        """Let undeclared fields behave like ordinary attributes."""
        self._config.strict = False
        self._notice("strict_mode_disabled")

    def enable_exceptions(self) -> None:
        """Raise violations instead of printing and logging them."""
        self._config.exceptions = True
        self._notice("exceptions_enabled")

    def disable_exceptions(self) -> None:
        """Print and log violations instead of raising them."""
        self._config.exceptions = False
        self._notice("exceptions_disabled")

    def set_logger(self, logger: Logger | None) -> None:
        """Set the logger reports are forwarded to."""
        self._logger = logger
        self._notice("logger_attached", logger=type(logger).__name__)

    def set_property_access_observer(
        self,
        observer: PropertyAccessObserver | None,
    ) -> None:
        """Set the observer notified of violations."""
        self._observer = observer
        self._notice("observer_attached", observer=type(observer).__name__)

    def set_field_filter(self, field_filter: FieldFilter) -> None:
        """Set the visibility tiers treated as declared fields.

        :param field_filter: The new visibility filter.
        :raises ConfigValidationError: If the filter is not a
            `FieldFilter`.
        """
        self._config.fields = field_filter
        self._registry = FieldRegistry.for_type(self._owner, field_filter)
        self._notice("field_filter_changed", fields=str(field_filter))

    def set_error_output_mode(self, mode: OutputMode | str) -> None:
        """Set the error output mode.

        :param mode: One of `echo`, `log` or `both`.
        :raises ConfigValidationError: If the mode is not recognised, in
            which case the previous mode is kept.
        """
        self._config.output = mode
        self._notice("output_mode_changed", output=str(mode))

    def get_invalid_accesses(self) -> list[str]:
        """Return the names of the invalid reads, oldest first."""
        return list(self._invalid)

    @property
    def owner(self) -> type:
        """Get the class of the guarded instance."""
        return self._owner

    @property
    def strict_mode(self) -> bool:
        """Check if strict mode is enabled."""
        return self._config.strict

    @property
    def throw_on_violation(self) -> bool:
        """Check if violations are raised."""
        return self._config.exceptions

    @property
    def error_output_mode(self) -> OutputMode:
        """Get the error output mode."""
        return OutputMode(self._config.output)

    @property
    def field_filter(self) -> FieldFilter:
        """Get the visibility tiers treated as declared fields."""
        return self._config.fields

    @property
    def declared_fields(self) -> frozenset[str]:
        """Get the declared fields for the current filter."""
        return self._registry.declared_fields

    @property
    def invalid_accesses(self) -> tuple[str, ...]:
        """Get the names of the invalid reads, oldest first."""
        return tuple(self._invalid)

    @property
    def logger(self) -> Logger | None:
        """Get the logger reports are forwarded to."""
        return self._logger

    @property
    def observer(self) -> PropertyAccessObserver | None:
        """Get the observer notified of violations."""
        return self._observer
