"""\
Strict Models
=============

Author: Akshay Mestry <xa@mes3.dev>
Created on: Wednesday, August 06 2025
Last updated on: Saturday, August 09 2025

This module wires the access guard into Python's attribute protocol.
`StrictPropertyAccess` is a mixin funnelling `__getattr__` and
`__setattr__` through the guard of each instance, and `StrictModel` is
a ready-made base class built on it.

Only reads that normal attribute lookup cannot satisfy reach
`__getattr__`, so set fields, methods, and properties are read at full
speed and never observed. Every assignment passes through
`__setattr__`, but assignments to declared fields go straight through.

Guard defaults can be given per class as keyword arguments, and are
inherited by subclasses.

.. code-block:: python

    class User(StrictModel, exceptions=True):
        name: str
        email: str

    user = User(name="Eren", email="eren@paradis.io")
    user.age  # raises MissingFieldAccess
"""

from __future__ import annotations

import typing as t

from strictprops.core.config import GuardConfig
from strictprops.core.guard import AccessGuard
from strictprops.core.registry import is_dunder

if t.TYPE_CHECKING:
    from strictprops.core.config import OutputMode
    from strictprops.core.loggers import Logger
    from strictprops.core.observers import PropertyAccessObserver
    from strictprops.core.registry import FieldFilter

__all__: tuple[str, ...] = (
    "StrictModel",
    "StrictPropertyAccess",
    "guard_of",
)

# NOTE(xames3): The guard is stored in the instance's `__dict__` under a
# dunder key so that neither storing nor reading it is intercepted.
_GUARD: t.Final[str] = "__strict_guard__"


def guard_of(instance: object) -> AccessGuard:
    """Return the guard of an instance, creating it on first use.

    The guard starts from the defaults declared on the instance's class.

    :param instance: A `StrictPropertyAccess` instance.
    :return: The guard of the instance.
    """
    namespace = object.__getattribute__(instance, "__dict__")
    guard = namespace.get(_GUARD)
    if guard is None:
        owner = type(instance)
        guard = AccessGuard(owner, **getattr(owner, "__guard_defaults__", {}))
        namespace[_GUARD] = guard
    return guard


class StrictPropertyAccess:
    """Mixin enforcing the declared fields of a class.

    Reads of undeclared attributes and attempts to create them are
    handled by the instance's `AccessGuard`. The guard is created
    lazily, so the mixin works with classes whose `__init__` does not
    call `super().__init__()`, dataclasses included.

    :param strict: Initial strict mode of instances, defaults to `None`.
    :param exceptions: Whether instances raise violations, defaults to
        `None`.
    :param output: Initial error output mode, defaults to `None`.
    :param fields: Visibility tiers treated as declared, defaults to
        `None`.

    The parameters above are class keyword arguments; options left as
    `None` keep the value inherited from the base classes.
    """

    __guard_defaults__: t.ClassVar[dict[str, t.Any]] = {}

    def __init_subclass__(
        cls,
        *,
        strict: bool | None = None,
        exceptions: bool | None = None,
        output: OutputMode | str | None = None,
        fields: FieldFilter | None = None,
        **kwargs: t.Any,
    ) -> None:
        """Collect and validate the guard defaults of a subclass.

        :raises ConfigValidationError: If a default is invalid.
        """
        super().__init_subclass__(**kwargs)
        given = {
            "strict": strict,
            "exceptions": exceptions,
            "output": output,
            "fields": fields,
        }
        defaults = {
            **cls.__guard_defaults__,
            **{key: value for key, value in given.items() if value is not None},
        }
        GuardConfig().update(**defaults)
        cls.__guard_defaults__ = defaults

    def __getattr__(self, name: str) -> t.Any:
        """Handle the read of an attribute normal lookup missed."""
        if is_dunder(name):
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute {name!r}",
                name=name,
                obj=self,
            )
        return guard_of(self).on_field_read(self, name)

    def __setattr__(self, name: str, value: t.Any) -> None:
        """Assign the attribute unless it would create a new field."""
        if is_dunder(name) or guard_of(self).on_field_write(self, name, value):
            object.__setattr__(self, name, value)

    def __getstate__(self) -> dict[str, t.Any]:
        """Return the instance state without its guard.

        Copies and unpickled instances build a guard of their own from
        the class defaults, so modes, capabilities and history never
        travel with the state.
        """
        state = dict(object.__getattribute__(self, "__dict__"))
        state.pop(_GUARD, None)
        return state

    def enable_strict_mode(self) -> None:
        """Intercept access to undeclared fields."""
        guard_of(self).enable_strict_mode()

    def disable_strict_mode(self) -> None:
        """Let undeclared fields behave like ordinary attributes."""
        guard_of(self).disable_strict_mode()

    def enable_exceptions(self) -> None:
        """Raise violations instead of printing and logging them."""
        guard_of(self).enable_exceptions()

    def disable_exceptions(self) -> None:
        """Print and log violations instead of raising them."""
        guard_of(self).disable_exceptions()

    def set_logger(self, logger: Logger | None) -> None:
        """Set the logger reports are forwarded to."""
        guard_of(self).set_logger(logger)

    def set_property_access_observer(
        self,
        observer: PropertyAccessObserver | None,
    ) -> None:
        """Set the observer notified of violations."""
        guard_of(self).set_property_access_observer(observer)

    def set_field_filter(self, field_filter: FieldFilter) -> None:
        """Set the visibility tiers treated as declared fields."""
        guard_of(self).set_field_filter(field_filter)

    def set_error_output_mode(self, mode: OutputMode | str) -> None:
        """Set the error output mode, one of `echo`, `log` or `both`."""
        guard_of(self).set_error_output_mode(mode)

    def get_invalid_accesses(self) -> list[str]:
        """Return the names of the invalid reads, oldest first."""
        return guard_of(self).get_invalid_accesses()


class StrictModel(StrictPropertyAccess):
    """Base class for models with a closed set of fields.

    The guard is built, and the fields discovered, when the model is
    constructed. Keyword arguments are assigned as fields through the
    guard, so unknown ones are reported like any other violation.

    .. code-block:: python

        class Point(StrictModel, fields=FieldFilter.ALL):
            x: int = 0
            y: int = 0
            _label: str = ""

        point = Point(x=4, y=2)
        point.z = 1  # reported and discarded
    """

    def __init__(self, **fields: t.Any) -> None:
        """Initialise the model and assign the given fields."""
        guard_of(self)
        for name, value in fields.items():
            setattr(self, name, value)
