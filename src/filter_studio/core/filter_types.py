"""
Filter Type System - Filter contract, execution variants, and type catalog.

This module defines how filter types are specified:
- Filter: Abstract contract shared by all filters (name, applicability,
  parameter access)
- InPlaceFilter / CopyFilter: The two execution variants
- FilterCatalog: Global catalog mapping stable keys to filter types
- register_filter: Class decorator adding a type to the catalog
- resolve_filter_type: Turns a configured identifier into a filter type

Filters declare their parameters as a class-level tuple of
ParameterDefinition. The tuple is compiled into a ParameterSchema once,
when the class is created, and shared by every instance.
"""

from __future__ import annotations

import importlib
import inspect
import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, ClassVar, TypeVar

from filter_studio.core.data_types import ImageBuffer, ParameterValue
from filter_studio.core.errors import FilterNotFoundError, NotAFilterError
from filter_studio.core.parameters import (
    ParameterDefinition,
    ParameterSchema,
    ParameterStore,
    ParameterType,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FilterVariant(Enum):
    """Execution shape of a filter type."""
    IN_PLACE = "in_place"   # Mutates the given buffer
    COPY = "copy"           # Returns a new buffer


class Filter(ABC):
    """
    Base class for all filters.

    Filter shouldn't be subclassed directly; subclass InPlaceFilter or
    CopyFilter instead.

    Subclasses set:
        name: Display name
        parameters: Tuple of ParameterDefinition declared by this class.
            Declarations of base classes are inherited.
    """

    name: ClassVar[str] = ""
    parameters: ClassVar[tuple[ParameterDefinition, ...]] = ()

    # Compiled from the declarations of the class and its bases
    schema: ClassVar[ParameterSchema] = ParameterSchema()
    variant: ClassVar[FilterVariant | None] = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        inherited = next(
            (base.schema for base in cls.__mro__[1:] if issubclass(base, Filter)),
            ParameterSchema(),
        )
        own = cls.__dict__.get("parameters", ())
        cls.schema = inherited.extend(tuple(own))

    def __init__(self):
        self._store = ParameterStore(type(self).schema)

    @abstractmethod
    def is_applicable(self, buffer: ImageBuffer) -> bool:
        """
        Whether a given buffer can be processed by this filter.

        Must not modify the buffer.
        """
        ...

    def describe_parameters(self) -> list[tuple[str, ParameterType]]:
        """Declared parameter names and types, in declaration order."""
        return [(d.name, d.param_type) for d in self.schema]

    def get_parameter(self, name: str, expected_type: type[T]) -> T:
        """
        Read a parameter value, falling back to the declared default.

        Raises:
            ParameterNameError: name is not declared
            ParameterTypeError: expected_type differs from the declared type
            MissingValueError: no value set and no default declared
        """
        return self._store.get(name, expected_type)

    def set_parameter(self, name: str, value: ParameterValue) -> None:
        """
        Assign a parameter value.

        Raises:
            ParameterNameError: name is not declared
            ParameterTypeError: type(value) differs from the declared type
        """
        self._store.set(name, value)

    def clear_parameter(self, name: str) -> None:
        """Forget an assigned value so the default applies again."""
        self._store.clear(name)

    def is_parameter_set(self, name: str) -> bool:
        return self._store.is_set(name)

    def parameter_values(self) -> dict[str, ParameterValue]:
        """Explicitly assigned values (defaults not included)."""
        return self._store.snapshot()

    def __str__(self) -> str:
        return self.name or type(self).__name__

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.parameter_values()!r})"


class InPlaceFilter(Filter):
    """Base class for filters which process a buffer in place."""

    variant: ClassVar[FilterVariant] = FilterVariant.IN_PLACE

    @abstractmethod
    def apply(self, buffer: ImageBuffer) -> None:
        """Process the buffer, overwriting its pixels."""
        ...


class CopyFilter(Filter):
    """Base class for filters which process into a new buffer."""

    variant: ClassVar[FilterVariant] = FilterVariant.COPY

    @abstractmethod
    def apply(self, buffer: ImageBuffer) -> ImageBuffer:
        """Process the buffer and return a new one of identical size."""
        ...


def is_filter_type(obj: object) -> bool:
    """True for concrete subclasses of InPlaceFilter or CopyFilter."""
    return (
        inspect.isclass(obj)
        and issubclass(obj, (InPlaceFilter, CopyFilter))
        and not inspect.isabstract(obj)
    )


class FilterCatalog:
    """
    Global catalog of available filter types.

    Filter types register themselves under a stable key; the registry
    resolves configured identifiers through the catalog.
    """

    _instance: FilterCatalog | None = None

    def __new__(cls) -> FilterCatalog:
        """Singleton pattern."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._types = {}
        return cls._instance

    @classmethod
    def instance(cls) -> FilterCatalog:
        """Get the singleton instance."""
        return cls()

    def __init__(self):
        if not hasattr(self, "_types"):
            self._types: dict[str, type[Filter]] = {}

    def register(self, key: str, filter_type: type[Filter]) -> None:
        """Register a filter type under a key (case-insensitive)."""
        if not is_filter_type(filter_type):
            raise NotAFilterError(key)
        self._types[key.strip().lower()] = filter_type

    def unregister(self, key: str) -> type[Filter] | None:
        """Unregister a filter type."""
        return self._types.pop(key.strip().lower(), None)

    def get(self, key: str) -> type[Filter] | None:
        """Get a filter type by key."""
        return self._types.get(key.strip().lower())

    def keys(self) -> list[str]:
        return list(self._types.keys())

    def clear(self) -> None:
        """Remove all registered types (for testing)."""
        self._types.clear()

    def __len__(self) -> int:
        return len(self._types)

    def __contains__(self, key: str) -> bool:
        return key.strip().lower() in self._types


def register_filter(key: str) -> Callable[[type[Filter]], type[Filter]]:
    """
    Decorator to register a filter type in the catalog.

    Usage:
        @register_filter("blur")
        class BlurFilter(CopyFilter):
            ...
    """
    def decorator(filter_type: type[Filter]) -> type[Filter]:
        FilterCatalog.instance().register(key, filter_type)
        return filter_type
    return decorator


def _import_dotted(path: str) -> object | None:
    """Import `package.module.Attribute`; None if nothing by that path exists."""
    module_name, _, attr = path.rpartition(".")
    # relative module names need an anchor package
    if not module_name or not attr or module_name.startswith("."):
        return None
    try:
        module = importlib.import_module(module_name)
    except ImportError:
        return None
    return getattr(module, attr, None)


def resolve_filter_type(identifier: str) -> type[Filter]:
    """
    Resolve a configured identifier into a filter type.

    Catalog keys are tried first (case-insensitive); otherwise the
    identifier is treated as a fully-qualified `module.ClassName` path,
    which is matched case-sensitively like any Python import.

    Raises:
        FilterNotFoundError: Nothing resolves from the identifier
        NotAFilterError: The resolved object is not a concrete filter type
    """
    key = identifier.strip()
    if not key:
        raise FilterNotFoundError(identifier)

    filter_type = FilterCatalog.instance().get(key)
    if filter_type is not None:
        return filter_type

    obj = _import_dotted(key)
    if obj is None:
        raise FilterNotFoundError(identifier)
    if not is_filter_type(obj):
        raise NotAFilterError(identifier)

    logger.debug("Resolved %s by import path", key)
    return obj
