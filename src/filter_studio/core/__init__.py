"""
Core module - Filter contract, parameter system, registry, and execution.

This module provides the fundamental building blocks for Filter Studio:
- Data Types: Image buffer, colors, channel options
- Parameters: Parameter schemas and per-instance stores
- Filter Types: Filter contract, execution variants, type catalog
- Registry: Loaded filters addressed by id
- Execution: Variant dispatch
- Value Parser: Text to parameter value conversion
"""

from filter_studio.core.data_types import (
    ChannelOption,
    Color,
    ImageBuffer,
    ParameterValue,
)

from filter_studio.core.errors import (
    ConfigurationError,
    FilterIdNotFoundError,
    FilterNotFoundError,
    FilterStudioError,
    MissingValueError,
    NotAFilterError,
    ParameterError,
    ParameterNameError,
    ParameterTypeError,
    SchemaDefinitionError,
)

from filter_studio.core.parameters import (
    ParameterDefinition,
    ParameterSchema,
    ParameterStore,
    ParameterType,
)

from filter_studio.core.filter_types import (
    CopyFilter,
    Filter,
    FilterCatalog,
    FilterVariant,
    InPlaceFilter,
    register_filter,
    resolve_filter_type,
)

from filter_studio.core.registry import FilterRegistry

from filter_studio.core.execution import ExecutionResult, run_filter

from filter_studio.core.value_parser import example_input, parse_value


__all__ = [
    # data_types.py
    "ChannelOption",
    "Color",
    "ImageBuffer",
    "ParameterValue",
    # errors.py
    "ConfigurationError",
    "FilterIdNotFoundError",
    "FilterNotFoundError",
    "FilterStudioError",
    "MissingValueError",
    "NotAFilterError",
    "ParameterError",
    "ParameterNameError",
    "ParameterTypeError",
    "SchemaDefinitionError",
    # parameters.py
    "ParameterDefinition",
    "ParameterSchema",
    "ParameterStore",
    "ParameterType",
    # filter_types.py
    "CopyFilter",
    "Filter",
    "FilterCatalog",
    "FilterVariant",
    "InPlaceFilter",
    "register_filter",
    "resolve_filter_type",
    # registry.py
    "FilterRegistry",
    # execution.py
    "ExecutionResult",
    "run_filter",
    # value_parser.py
    "example_input",
    "parse_value",
]
