"""\
Observers
=========

Author: Akshay Mestry <xa@mes3.dev>
Created on: Tuesday, August 05 2025
Last updated on: Saturday, August 09 2025

This module defines the observer capability notified of violations and
the observers shipped with the package.

Observers are advisory. They are called synchronously, before the
guard reports a violation, and whatever they return is ignored. An
observer raising an exception does abort the access, so observers
should not raise.
"""

from __future__ import annotations

import typing as t
from abc import ABC
from abc import abstractmethod

from opentelemetry import trace

from strictprops.core.base import AuditLog
from strictprops.core.base import Observable
from strictprops.core.events import EVENTS

if t.TYPE_CHECKING:
    from collections.abc import Iterator

__all__: tuple[str, ...] = (
    "AuditObserver",
    "DebugObserver",
    "PropertyAccessObserver",
    "TracingObserver",
)


class PropertyAccessObserver(Observable, ABC):
    """Monitor violations on guarded instances.

    Concrete observers implement both notifications. One observer may
    be shared by any number of guarded instances.

    .. code-block:: python

        class CountingObserver(PropertyAccessObserver):
            def __init__(self):
                self.count = 0

            def on_missing_property(self, name):
                self.count += 1

            def on_dynamic_property_creation_attempt(self, name, value):
                self.count += 1
    """

    __slots__: tuple[str, ...] = ()

    @abstractmethod
    def on_missing_property(self, name: str) -> None:
        """Handle the read of an undeclared field.

        :param name: Name of the field that was read.
        """
        raise NotImplementedError(
            "Subclasses must implement on_missing_property method"
        )

    @abstractmethod
    def on_dynamic_property_creation_attempt(
        self,
        name: str,
        value: t.Any,
    ) -> None:
        """Handle an attempt to create an undeclared field.

        :param name: Name of the field that was assigned.
        :param value: The discarded value.
        """
        raise NotImplementedError(
            "Subclasses must implement on_dynamic_property_creation_attempt "
            "method"
        )


class DebugObserver(PropertyAccessObserver):
    """Print a warning line to standard output for every violation."""

    __slots__: tuple[str, ...] = ()

    def on_missing_property(self, name: str) -> None:
        """Print a warning for the read of an undeclared field."""
        print(f"⚠️ [Observer] Attempt to access non-existent property: {name}")

    def on_dynamic_property_creation_attempt(
        self,
        name: str,
        value: t.Any,
    ) -> None:
        """Print a warning for an attempt to create a field."""
        print(
            f"⚠️ [Observer] Attempt to create dynamic property: {name} "
            f"with value {value!r}"
        )


class AuditObserver(PropertyAccessObserver):
    """Keep an audit trail of violations.

    Each notification becomes an entry of the audit log, so the trail
    can later be filtered by event, category, or severity.

    :param component: Name recorded as the source of each event,
        defaults to `StrictPropertyAccess`.
    :param audit: Audit log to record into, defaults to a new one.
    """

    __slots__: tuple[str, ...] = ("_component", "_audit")

    def __init__(
        self,
        component: str = "StrictPropertyAccess",
        audit: AuditLog | None = None,
    ) -> None:
        """Initialise the observer with its audit log."""
        self._component = component
        self._audit = audit if audit is not None else AuditLog()

    def __inspect_attrs__(self) -> Iterator[tuple[str, t.Any]]:
        """Yield observer's attributes for introspection."""
        yield "component", self._component
        yield "entries", len(self._audit)

    def on_missing_property(self, name: str) -> None:
        """Record the read of an undeclared field."""
        self._audit.record_event(
            "missing_field_access",
            component=self._component,
            field=name,
        )

    def on_dynamic_property_creation_attempt(
        self,
        name: str,
        value: t.Any,
    ) -> None:
        """Record an attempt to create an undeclared field."""
        self._audit.record_event(
            "dynamic_field_creation_attempt",
            component=self._component,
            field=name,
            value=value,
        )

    @property
    def audit(self) -> AuditLog:
        """Get the audit log the observer records into."""
        return self._audit


class TracingObserver(PropertyAccessObserver):
    """Attach violations to the current OpenTelemetry span.

    Each notification is added as a span event named after the event in
    the catalogue. Nothing is recorded when no span is recording.
    """

    __slots__: tuple[str, ...] = ()

    def _add_event(self, event: str, **attributes: str) -> None:
        """Add an event to the current span, if it is recording."""
        span = trace.get_current_span()
        if not span.is_recording():
            return
        attributes["description"] = EVENTS[event]["description"]
        span.add_event(event, attributes=attributes)

    def on_missing_property(self, name: str) -> None:
        """Add a span event for the read of an undeclared field."""
        self._add_event("missing_field_access", field=name)

    def on_dynamic_property_creation_attempt(
        self,
        name: str,
        value: t.Any,
    ) -> None:
        """Add a span event for an attempt to create a field."""
        self._add_event(
            "dynamic_field_creation_attempt",
            field=name,
            value=repr(value),
        )
