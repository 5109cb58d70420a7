"""\
Base Tools
==========

Author: Akshay Mestry <xa@mes3.dev>
Created on: Monday, August 04 2025
Last updated on: Friday, August 08 2025

Base components.

This module provides the small foundational classes shared by the rest
of the package: an introspection mixin giving every component a concise
and consistent `repr`, and an in-memory audit log used to keep a
queryable trail of guard events.
"""

from __future__ import annotations

import time
import typing as t
from collections.abc import Iterator
from collections.abc import Sequence
from uuid import uuid4

from strictprops.core.events import EVENTS
from strictprops.core.events import EventCategory
from strictprops.core.events import EventSeverity

__all__: Sequence[str] = [
    "AuditLog",
    "Observable",
]

_AttributeStream = Iterator[tuple[str, t.Any]]
_EntryDict = dict[str, t.Any]

# NOTE(xames3): These limits keep the `repr` of components readable and
# are not meant to be changed by users.
_SEQUENCE_LIMIT: t.Final[int] = 5
_DICTIONARY_LIMIT: t.Final[int] = 3
_STRING_LIMIT: t.Final[int] = 60

_SEVERITY_LEVEL_MAP: dict[EventSeverity, int] = {
    EventSeverity.DEBUG: 0,
    EventSeverity.INFO: 1,
    EventSeverity.WARNING: 2,
    EventSeverity.ERROR: 3,
}


class Observable:
    """Provide observable behaviour for derived classes.

    This class serves as a mixin for components that expose their
    internal state through `__inspect_attrs__`. It formats the yielded
    attributes into the `repr` of the instance with sensible limits for
    long strings and large containers.

    .. note::

        This class only holds the `__weakref__` slot, which keeps it
        safe to mix into slotted classes.
    """

    __slots__: tuple[str] = ("__weakref__",)

    def __inspect_attrs__(self) -> _AttributeStream:
        """Yield public, non-`None` attributes of the instance.

        Derived classes usually override this to yield exactly the state
        worth showing.
        """
        for attr, value in getattr(self, "__dict__", {}).items():
            if not attr.startswith("_") and value is not None:
                yield attr, value

    def _format(self, value: t.Any) -> str:
        """Format value for string representation.

        :param value: The value to format.
        :return: A formatted string representation of the value.
        """
        if value is self:
            return f"<circular-{type(self).__name__}>"
        elif isinstance(value, str) and len(value) > _STRING_LIMIT:
            return f"{value[:_STRING_LIMIT - 3]}..."
        elif (
            isinstance(value, (list, tuple, set, frozenset))
            and len(value) > _SEQUENCE_LIMIT
        ):
            return f"{type(value).__name__}({len(value)} items)"
        elif isinstance(value, dict) and len(value) > _DICTIONARY_LIMIT:
            return f"dict({len(value)} items)"
        return repr(value)

    def __repr__(self) -> str:
        """Return a string representation of the instance."""
        attrs = [
            f"{name}={self._format(value)}"
            for name, value in self.__inspect_attrs__()
        ]
        return f"{type(self).__name__}({', '.join(attrs)})"


class AuditLog(Observable):
    """Record and query guard events.

    This class keeps a chronological, in-memory record of events. Each
    entry is stamped with an id, a timestamp, and the category, severity
    and description found in the event catalogue, plus any metadata
    given when recording.

    .. code-block:: python

        audit = AuditLog()
        audit.record_event(
            "missing_field_access",
            component="User",
            field="age",
        )
        audit.get_events(category=EventCategory.VIOLATION)
    """

    __slots__: tuple[str] = ("_entries",)

    def __init__(self) -> None:
        """Initialise a new, empty audit log."""
        self._entries: list[_EntryDict] = []

    def __inspect_attrs__(self) -> _AttributeStream:
        """Yield audit log's attributes for introspection."""
        yield "entries", len(self._entries)
        if self._entries:
            yield "latest", self._entries[-1]["event"]

    def __len__(self) -> int:
        """Return the number of audit entries."""
        return len(self._entries)

    def __bool__(self) -> bool:
        """Check if the audit log contains any entries."""
        return bool(self._entries)

    def __getitem__(self, index: int | slice) -> _EntryDict | list[_EntryDict]:
        """Get audit entries by index or slice."""
        return self._entries[index]

    def __iter__(self) -> Iterator[_EntryDict]:
        """Iterate over audit entries."""
        return iter(self._entries)

    def record_event(
        self,
        event: str,
        *,
        component: str,
        category: EventCategory | None = None,
        severity: EventSeverity | None = None,
        **metadata: t.Any,
    ) -> _EntryDict:
        """Record an audit event.

        Category, severity and description default to what the event
        catalogue defines for the event.

        :param event: Name of the event.
        :param component: Component that generated the event.
        :param category: The event category, defaults to `None`.
        :param severity: The event severity level, defaults to `None`.
        :return: The recorded entry.
        """
        e = EVENTS.get(event, {})
        entry = {
            "event": event,
            "event_id": str(uuid4())[:8],
            "timestamp": time.time(),
            "component": component,
            "category": category or e.get("category", EventCategory.VIOLATION),
            "severity": severity or e.get("severity", EventSeverity.INFO),
            "description": e.get("description", f"Unknown event: {event}"),
            **metadata,
        }
        self._entries.append(entry)
        return entry

    def get_events(
        self,
        event: str | None = None,
        component: str | None = None,
        category: EventCategory | None = None,
        severity: EventSeverity | None = None,
        limit: int | None = None,
    ) -> list[_EntryDict]:
        """Get filtered audit events.

        :param event: Filter by event name, defaults to `None`.
        :param component: Filter by component name, defaults to `None`.
        :param category: Filter by event category, defaults to `None`.
        :param severity: Filter by minimum severity level, defaults
            to `None`.
        :param limit: Maximum number of most recent events to return,
            defaults to `None`.
        :return: Matching entries, oldest first.
        """
        entries = self._entries
        if event:
            entries = [entry for entry in entries if entry["event"] == event]
        if component:
            entries = [
                entry for entry in entries if entry["component"] == component
            ]
        if category:
            entries = [
                entry for entry in entries if entry["category"] == category
            ]
        if severity:
            minimum = _SEVERITY_LEVEL_MAP[severity]
            entries = [
                entry
                for entry in entries
                if _SEVERITY_LEVEL_MAP.get(entry["severity"], 0) >= minimum
            ]
        if limit is not None:
            entries = entries[-limit:] if limit > 0 else []
        return list(entries)
