"""
Errors - Exception hierarchy for filter loading and parameter access.

Configuration errors abort a registry load. Parameter errors are raised
while reading or assigning filter parameters and carry the offending
parameter name.
"""

from __future__ import annotations


class FilterStudioError(Exception):
    """Base exception for filter studio errors."""
    pass


# =============================================================================
# REGISTRY ERRORS
# =============================================================================

class ConfigurationError(FilterStudioError):
    """The configured filter list could not be loaded."""
    pass


class FilterNotFoundError(ConfigurationError):
    """An identifier does not resolve to any known filter type."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Filter not found: {identifier!r}")


class NotAFilterError(ConfigurationError):
    """An identifier resolved to something that is not a filter type."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"{identifier!r} is not a subclass of 'InPlaceFilter' or 'CopyFilter'")


class FilterIdNotFoundError(FilterStudioError, LookupError):
    """A filter id is absent from the current load."""

    def __init__(self, filter_id: int):
        self.filter_id = filter_id
        super().__init__(f"Filter id not found: {filter_id}")


# =============================================================================
# PARAMETER ERRORS
# =============================================================================

class ParameterError(FilterStudioError):
    """Error while reading or assigning a filter parameter."""

    def __init__(self, name: str, message: str):
        self.name = name
        super().__init__(message)


class ParameterNameError(ParameterError):
    """The parameter name is not declared by the filter."""

    def __init__(self, name: str):
        super().__init__(name, f"Parameter '{name}' not found")


class ParameterTypeError(ParameterError):
    """The requested or supplied type differs from the declared type."""

    def __init__(self, name: str, used_type: type, declared_type: type):
        self.used_type = used_type
        self.declared_type = declared_type
        super().__init__(
            name,
            f"Parameter '{name}' type is not '{used_type.__name__}' "
            f"({declared_type.__name__} found)",
        )


class MissingValueError(ParameterError):
    """A parameter without default was read before being set."""

    def __init__(self, name: str, declared_type: type):
        self.declared_type = declared_type
        super().__init__(
            name,
            f"Filter parameter value '{name}' of type '{declared_type.__name__}' not set",
        )


class SchemaDefinitionError(FilterStudioError):
    """A filter type declares an inconsistent parameter schema."""
    pass
