"""\
Field Registry
==============

Author: Akshay Mestry <xa@mes3.dev>
Created on: Monday, August 04 2025
Last updated on: Friday, August 08 2025

This module discovers the declared fields of a class. A field is
declared when the class (or one of its bases) annotates it, assigns it
a class-level default, defines it as a property or other data
descriptor, or lists it in `__slots__`. Methods, static and class
methods, and nested classes are never fields, and neither are dunder
names.

The declared field set of a class is structurally fixed, so it is
computed once per class and visibility filter and shared by every
instance of that class.

.. code-block:: python

    class User:
        name: str
        email: str = ""
        _token: str | None = None

    FieldRegistry.discover(User)
    # frozenset({'name', 'email'})
    FieldRegistry.discover(User, FieldFilter.ALL)
    # frozenset({'name', 'email', '_token'})
"""

from __future__ import annotations

import enum
import inspect
import typing as t
from weakref import WeakKeyDictionary as WKDictionary
from weakref import ref

from strictprops.core.base import Observable

if t.TYPE_CHECKING:
    from collections.abc import Iterator

__all__: tuple[str, ...] = (
    "FieldFilter",
    "FieldRegistry",
    "is_dunder",
    "visibility",
)


class FieldFilter(enum.IntFlag):
    """Visibility tiers of declared fields.

    Python has no access modifiers, so the tiers follow the naming
    convention: `PUBLIC` names have no leading underscore, `PROTECTED`
    names have one, and `PRIVATE` names are the name-mangled
    `_Class__name` form produced by a double leading underscore.
    """

    PUBLIC = enum.auto()
    PROTECTED = enum.auto()
    PRIVATE = enum.auto()
    ALL = PUBLIC | PROTECTED | PRIVATE


def is_dunder(name: str) -> bool:
    """Check if the name is a special (dunder) name."""
    return len(name) > 4 and name.startswith("__") and name.endswith("__")


def visibility(name: str, owner: type) -> FieldFilter:
    """Classify a field name into its visibility tier.

    :param name: The (possibly mangled) field name.
    :param owner: The class that declares the field, used to recognise
        its mangled private names.
    :return: The visibility tier of the name.
    """
    mangled = f"_{owner.__name__.lstrip('_')}__"
    if name.startswith(mangled) and len(name) > len(mangled):
        return FieldFilter.PRIVATE
    if name.startswith("_"):
        return FieldFilter.PROTECTED
    return FieldFilter.PUBLIC


def _is_field(value: t.Any) -> bool:
    """Check if a class attribute value describes a field."""
    if inspect.isroutine(value) or isinstance(value, type):
        return False
    return not isinstance(value, (staticmethod, classmethod))


class FieldRegistry(Observable):
    """Declared fields of a class for a visibility filter.

    Registries are immutable once built. Use `FieldRegistry.for_type`
    to get the shared, cached registry of a class rather than building
    a new one for every guarded instance.

    :param owner: The class whose fields are registered.
    :param field_filter: Visibility tiers treated as declared, defaults
        to `FieldFilter.PUBLIC`.

    .. note::

        A registry refers to its class weakly, so the type-level cache
        drops the entry once the class is garbage collected.
    """

    __slots__: tuple[str, ...] = ("_owner", "_filter", "_fields")

    _registries: WKDictionary[type, dict[FieldFilter, FieldRegistry]] = (
        WKDictionary()
    )

    def __init__(
        self,
        owner: type,
        field_filter: FieldFilter = FieldFilter.PUBLIC,
    ) -> None:
        """Initialise the registry by discovering the owner's fields."""
        self._owner = ref(owner)
        self._filter = field_filter
        self._fields = self.discover(owner, field_filter)

    def __inspect_attrs__(self) -> Iterator[tuple[str, t.Any]]:
        """Yield registry's attributes for introspection."""
        yield "owner", self.owner.__qualname__
        yield "filter", self._filter
        yield "fields", sorted(self._fields)

    def __contains__(self, name: object) -> bool:
        """Check if the name is a declared field."""
        return name in self._fields

    def __iter__(self) -> Iterator[str]:
        """Iterate over the declared field names in sorted order."""
        return iter(sorted(self._fields))

    def __len__(self) -> int:
        """Return the number of declared fields."""
        return len(self._fields)

    @staticmethod
    def discover(
        owner: type,
        field_filter: FieldFilter = FieldFilter.PUBLIC,
    ) -> frozenset[str]:
        """Discover the declared fields of a class.

        Walks the method resolution order of the class (except
        `object`) and collects every annotated name and every class
        attribute that describes a field, keeping only the names whose
        visibility tier is part of the filter. This has no side effects
        and an empty result is valid.

        :param owner: The class to introspect.
        :param field_filter: Visibility tiers to keep, defaults to
            `FieldFilter.PUBLIC`.
        :return: The declared field names.
        """
        fields: set[str] = set()
        for klass in owner.__mro__:
            if klass is object:
                continue
            names = set(inspect.get_annotations(klass))
            names.update(
                name
                for name, value in vars(klass).items()
                if _is_field(value)
            )
            for name in names:
                if is_dunder(name):
                    continue
                if visibility(name, klass) & field_filter:
                    fields.add(name)
        return frozenset(fields)

    @classmethod
    def for_type(
        cls,
        owner: type,
        field_filter: FieldFilter = FieldFilter.PUBLIC,
    ) -> FieldRegistry:
        """Return the shared registry of a class, building it once.

        :param owner: The class whose registry is requested.
        :param field_filter: Visibility tiers treated as declared,
            defaults to `FieldFilter.PUBLIC`.
        :return: The cached registry for the class and filter.
        """
        registries = cls._registries.setdefault(owner, {})
        if field_filter not in registries:
            registries[field_filter] = cls(owner, field_filter)
        return registries[field_filter]

    @property
    def owner(self) -> type:
        """Get the class whose fields are registered."""
        return self._owner()

    @property
    def field_filter(self) -> FieldFilter:
        """Get the visibility filter of the registry."""
        return self._filter

    @property
    def declared_fields(self) -> frozenset[str]:
        """Get the declared field names."""
        return self._fields
