"""
Filters package - Built-in filter implementations.

Importing this package registers the built-in filters in the catalog:
- blur: BlurFilter (copy variant)
- rgb_split: RgbSplitFilter (in-place variant)
"""

from filter_studio.filters.blur import BlurFilter
from filter_studio.filters.rgb_split import RgbSplitFilter

BUILTIN_FILTERS = ("blur", "rgb_split")


def register_builtin_filters() -> None:
    """Ensure the built-in filters are present in the catalog."""
    from filter_studio.core.filter_types import FilterCatalog

    catalog = FilterCatalog.instance()
    catalog.register("blur", BlurFilter)
    catalog.register("rgb_split", RgbSplitFilter)


__all__ = [
    "BUILTIN_FILTERS",
    "BlurFilter",
    "RgbSplitFilter",
    "register_builtin_filters",
]
