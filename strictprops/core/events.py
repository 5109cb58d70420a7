"""\
Events
======

Author: Akshay Mestry <xa@mes3.dev>
Created on: Monday, August 04 2025
Last updated on: Thursday, August 07 2025

This module defines the catalogue of events emitted by the access
guard. Each event carries a category, a severity, and a human readable
description which are reused by the audit log, the debug logging of
the guard, and the tracing observer.
"""

from __future__ import annotations

import typing as t
from enum import Enum
from typing import Final

__all__ = [
    "CONFIGURATION_EVENTS",
    "EVENTS",
    "EventCategory",
    "EventSeverity",
    "VIOLATION_EVENTS",
]


class EventCategory(Enum):
    """Event classification for audit trail organisation."""

    VIOLATION = "violation"
    CONFIGURATION = "configuration"


class EventSeverity(Enum):
    """Event severity levels for filtering and alerting."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


VIOLATION_EVENTS: Final[dict[str, dict[str, t.Any]]] = {
    "missing_field_access": {
        "category": EventCategory.VIOLATION,
        "severity": EventSeverity.WARNING,
        "description": "Read of an undeclared field",
    },
    "dynamic_field_creation_attempt": {
        "category": EventCategory.VIOLATION,
        "severity": EventSeverity.WARNING,
        "description": "Attempt to create an undeclared field",
    },
}

CONFIGURATION_EVENTS: Final[dict[str, dict[str, t.Any]]] = {
    "strict_mode_enabled": {
        "category": EventCategory.CONFIGURATION,
        "severity": EventSeverity.INFO,
        "description": "Strict mode enabled",
    },
    "strict_mode_disabled": {
        "category": EventCategory.CONFIGURATION,
        "severity": EventSeverity.WARNING,
        "description": "Strict mode disabled, fields are open",
    },
    "exceptions_enabled": {
        "category": EventCategory.CONFIGURATION,
        "severity": EventSeverity.INFO,
        "description": "Violations will raise",
    },
    "exceptions_disabled": {
        "category": EventCategory.CONFIGURATION,
        "severity": EventSeverity.INFO,
        "description": "Violations will be echoed and logged",
    },
    "output_mode_changed": {
        "category": EventCategory.CONFIGURATION,
        "severity": EventSeverity.DEBUG,
        "description": "Error output mode changed",
    },
    "field_filter_changed": {
        "category": EventCategory.CONFIGURATION,
        "severity": EventSeverity.DEBUG,
        "description": "Declared field visibility filter changed",
    },
    "logger_attached": {
        "category": EventCategory.CONFIGURATION,
        "severity": EventSeverity.DEBUG,
        "description": "Logger attached to guard",
    },
    "observer_attached": {
        "category": EventCategory.CONFIGURATION,
        "severity": EventSeverity.DEBUG,
        "description": "Property access observer attached to guard",
    },
}

EVENTS: Final[dict[str, dict[str, t.Any]]] = {
    **VIOLATION_EVENTS,
    **CONFIGURATION_EVENTS,
}
