"""
Parameter System - Declared parameter schemas and per-instance values.

This module defines how filter parameters are specified and stored:
- ParameterType: Closed set of supported value types
- ParameterDefinition: Describes one declared parameter
- ParameterSchema: Immutable, per-filter-type list of definitions
- ParameterStore: Per-instance values validated against a schema

The schema is the contract, the store is the state. Keeping them apart
lets callers introspect required parameters without a populated
instance, and lets many instances of one filter type hold different
values.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, TypeVar

from filter_studio.core.data_types import ChannelOption, Color, ParameterValue
from filter_studio.core.errors import (
    MissingValueError,
    ParameterNameError,
    ParameterTypeError,
    SchemaDefinitionError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ParameterType(Enum):
    """Types of filter parameters (determines parsing and prompting)."""
    INT = "int"            # Base-10 integer
    FLOAT = "float"        # Base-10 floating point
    COLOR = "color"        # R,G,B triple
    CHANNEL = "channel"    # Red / Green / Blue

    @property
    def python_type(self) -> type:
        """Runtime type a value of this parameter type must have."""
        return _PYTHON_TYPES[self]

    @property
    def type_name(self) -> str:
        """Name shown to users when prompting for a value."""
        return self.python_type.__name__


_PYTHON_TYPES: dict[ParameterType, type] = {
    ParameterType.INT: int,
    ParameterType.FLOAT: float,
    ParameterType.COLOR: Color,
    ParameterType.CHANNEL: ChannelOption,
}


@dataclass(frozen=True)
class ParameterDefinition:
    """
    Definition of a declared filter parameter.

    Attributes:
        name: Parameter identifier
        param_type: Type of parameter
        default: Default value, or None when the parameter is required
        label: Display label
        description: Prompt/help text
    """
    name: str
    param_type: ParameterType
    default: ParameterValue | None = None
    label: str = ""
    description: str = ""

    @property
    def value_type(self) -> type:
        return self.param_type.python_type

    @property
    def has_default(self) -> bool:
        return self.default is not None

    @property
    def display_label(self) -> str:
        return self.label or self.name

    @classmethod
    def integer(
        cls,
        name: str,
        default: int | None = None,
        label: str = "",
        description: str = "",
    ) -> ParameterDefinition:
        """Factory for integer parameter."""
        return cls(
            name=name,
            param_type=ParameterType.INT,
            default=default,
            label=label,
            description=description,
        )

    @classmethod
    def float_param(
        cls,
        name: str,
        default: float | None = None,
        label: str = "",
        description: str = "",
    ) -> ParameterDefinition:
        """Factory for float parameter."""
        return cls(
            name=name,
            param_type=ParameterType.FLOAT,
            default=default,
            label=label,
            description=description,
        )

    @classmethod
    def color(
        cls,
        name: str,
        default: Color | None = None,
        label: str = "",
        description: str = "",
    ) -> ParameterDefinition:
        """Factory for color parameter."""
        return cls(
            name=name,
            param_type=ParameterType.COLOR,
            default=default,
            label=label,
            description=description,
        )

    @classmethod
    def channel(
        cls,
        name: str,
        default: ChannelOption | None = None,
        label: str = "",
        description: str = "",
    ) -> ParameterDefinition:
        """Factory for channel option parameter."""
        return cls(
            name=name,
            param_type=ParameterType.CHANNEL,
            default=default,
            label=label,
            description=description,
        )


class ParameterSchema:
    """
    Immutable ordered collection of parameter definitions.

    Built once per filter type. Names must be unique and every default
    must have exactly the declared runtime type; violations are schema
    author errors and raise SchemaDefinitionError.
    """

    __slots__ = ("_definitions", "_by_name")

    def __init__(self, definitions: tuple[ParameterDefinition, ...] | list[ParameterDefinition] = ()):
        by_name: dict[str, ParameterDefinition] = {}
        for definition in definitions:
            if definition.name in by_name:
                raise SchemaDefinitionError(
                    f"Filter parameter '{definition.name}' is declared more than once"
                )
            if definition.has_default and type(definition.default) is not definition.value_type:
                raise SchemaDefinitionError(
                    f"Filter parameter '{definition.name}' has a default value of a wrong type"
                )
            by_name[definition.name] = definition
        self._definitions = tuple(definitions)
        self._by_name = by_name

    def get(self, name: str) -> ParameterDefinition | None:
        """Get a parameter definition by name."""
        return self._by_name.get(name)

    def require(self, name: str) -> ParameterDefinition:
        """Get a parameter definition by name or raise ParameterNameError."""
        definition = self._by_name.get(name)
        if definition is None:
            raise ParameterNameError(name)
        return definition

    @property
    def names(self) -> list[str]:
        return [d.name for d in self._definitions]

    def extend(self, definitions: tuple[ParameterDefinition, ...]) -> ParameterSchema:
        """Return a new schema with additional definitions appended."""
        return ParameterSchema(self._definitions + tuple(definitions))

    def __iter__(self) -> Iterator[ParameterDefinition]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __repr__(self) -> str:
        return f"ParameterSchema({self.names!r})"


class ParameterStore:
    """
    Values assigned to one filter instance.

    Every access is validated against the bound schema. A missing key
    means "not set"; reads then fall back to the declared default.
    """

    def __init__(self, schema: ParameterSchema):
        self._schema = schema
        self._values: dict[str, ParameterValue] = {}

    @property
    def schema(self) -> ParameterSchema:
        return self._schema

    def get(self, name: str, expected_type: type[T]) -> T:
        """
        Read a parameter value.

        Args:
            name: Declared parameter name
            expected_type: Runtime type the caller expects

        Raises:
            ParameterNameError: name is not declared
            ParameterTypeError: expected_type differs from the declared type
            MissingValueError: no value set and no default declared
        """
        definition = self._schema.require(name)
        if expected_type is not definition.value_type:
            raise ParameterTypeError(name, expected_type, definition.value_type)

        if name in self._values:
            return self._values[name]
        if definition.has_default:
            return definition.default
        raise MissingValueError(name, definition.value_type)

    def set(self, name: str, value: ParameterValue) -> None:
        """
        Assign a parameter value, replacing any previous one.

        The value's runtime type must equal the declared type exactly;
        no implicit widening (an int is not accepted for a float).
        """
        if value is None:
            raise ValueError(f"Value for parameter '{name}' must not be None")
        definition = self._schema.require(name)
        if type(value) is not definition.value_type:
            raise ParameterTypeError(name, type(value), definition.value_type)

        self._values[name] = value
        logger.debug("Parameter %s set to %s", name, value)

    def clear(self, name: str) -> None:
        """Forget the value of a declared parameter so its default applies."""
        self._schema.require(name)
        self._values.pop(name, None)

    def is_set(self, name: str) -> bool:
        self._schema.require(name)
        return name in self._values

    def snapshot(self) -> dict[str, ParameterValue]:
        """Copy of the explicitly assigned values."""
        return dict(self._values)

    def __len__(self) -> int:
        return len(self._values)
