"""
Value Parser - Converts user text into typed parameter values.

Parsing never raises: text that cannot be read as the target type
gives None. Empty input means "skip this parameter" and must be handled
by the caller before parsing.
"""

from __future__ import annotations

import math
import re

from filter_studio.core.data_types import ChannelOption, Color, ParameterValue
from filter_studio.core.parameters import ParameterType

_INT_RE = re.compile(r"[+-]?\d+")
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

# 0-199, 200-249 or 250-255 as a 1-3 digit group
_COMPONENT = r"([01]?\d\d?|2[0-4]\d|25[0-5])"
_COLOR_RE = re.compile(rf"{_COMPONENT},\s*{_COMPONENT},\s*{_COMPONENT}")

_EXAMPLES: dict[ParameterType, str] = {
    ParameterType.INT: "1",
    ParameterType.FLOAT: "1.0",
    ParameterType.COLOR: "100,200,100",
    ParameterType.CHANNEL: "Red",
}


def parse_int(text: str) -> int | None:
    text = text.strip()
    if not _INT_RE.fullmatch(text):
        return None
    return int(text)


def parse_float(text: str) -> float | None:
    text = text.strip()
    if not _FLOAT_RE.fullmatch(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return value


def parse_color(text: str) -> Color | None:
    match = _COLOR_RE.fullmatch(text.strip())
    if match is None:
        return None
    r, g, b = (int(group) for group in match.groups())
    return Color(r, g, b)


def parse_channel(text: str) -> ChannelOption | None:
    wanted = text.strip().lower()
    for option in ChannelOption:
        if option.value.lower() == wanted:
            return option
    return None


_PARSERS = {
    ParameterType.INT: parse_int,
    ParameterType.FLOAT: parse_float,
    ParameterType.COLOR: parse_color,
    ParameterType.CHANNEL: parse_channel,
}


def parse_value(value_type: ParameterType, text: str) -> ParameterValue | None:
    """
    Parse text into a value of the given parameter type.

    Args:
        value_type: Target parameter type
        text: Raw user input

    Returns:
        The parsed value, or None if the text could not be parsed
    """
    return _PARSERS[value_type](text)


def example_input(value_type: ParameterType) -> str:
    """Sample literal accepted for the given type, for prompts."""
    return _EXAMPLES[value_type]
