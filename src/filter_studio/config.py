"""
Settings - Application configuration and the configured filter list.

Settings are stored as JSON in ~/.config/filter_studio/settings.json.
The FILTER_STUDIO_FILTERS environment variable overrides the configured
filter list with a comma-separated list of identifiers.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from filter_studio.filters import BUILTIN_FILTERS

logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = Path.home() / ".config" / "filter_studio" / "settings.json"
DEFAULT_OUTPUT_DIRECTORY = Path.home() / "Pictures" / "filter_studio"
DEFAULT_FILTERS = list(BUILTIN_FILTERS)

FILTERS_ENV_VAR = "FILTER_STUDIO_FILTERS"


def parse_filter_list(text: str) -> list[str]:
    """
    Split a comma-separated list of filter identifiers.

    Entries are trimmed but empty entries are kept, so a malformed list
    surfaces as a FilterNotFoundError when loaded.
    """
    return [part.strip() for part in text.split(",")]


@dataclass
class Settings:
    """
    Application settings.

    Attributes:
        load_filters: Ordered filter identifiers to load
        output_directory: Where processed images are written
        log_level: Logging level name
    """
    load_filters: list[str] = field(default_factory=lambda: list(DEFAULT_FILTERS))
    output_directory: Path = DEFAULT_OUTPUT_DIRECTORY
    log_level: str = "INFO"

    def to_dict(self) -> dict[str, Any]:
        """Convert settings to dictionary for serialization."""
        return {
            "load_filters": ",".join(self.load_filters),
            "output_directory": str(self.output_directory),
            "log_level": self.log_level,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Settings:
        """Create settings from dictionary."""
        filters = data.get("load_filters", DEFAULT_FILTERS)
        if isinstance(filters, str):
            filters = parse_filter_list(filters)
        return cls(
            load_filters=list(filters),
            output_directory=Path(data["output_directory"]).expanduser()
            if data.get("output_directory") else DEFAULT_OUTPUT_DIRECTORY,
            log_level=str(data.get("log_level", "INFO")).upper(),
        )


def load_settings(path: Path | None = None) -> Settings:
    """
    Load settings from file, then apply environment overrides.

    A missing file gives the defaults. A file that cannot be read or
    parsed is reported and the defaults are used.
    """
    if path is None:
        path = DEFAULT_CONFIG_PATH

    settings = Settings()
    if path.exists():
        try:
            with open(path) as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError(f"expected a JSON object, got {type(data).__name__}")
            settings = Settings.from_dict(data)
        except (OSError, ValueError, TypeError) as e:
            logger.warning("Failed to load settings from %s: %s", path, e)

    env_filters = os.environ.get(FILTERS_ENV_VAR)
    if env_filters is not None:
        settings.load_filters = parse_filter_list(env_filters)

    return settings


def save_settings(settings: Settings, path: Path | None = None) -> Path:
    """Save settings to file, creating parent directories."""
    if path is None:
        path = DEFAULT_CONFIG_PATH

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(settings.to_dict(), f, indent=2)
    return path
