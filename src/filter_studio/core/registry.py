"""
Filter Registry - Loaded filter instances addressed by small integer ids.

The registry turns an ordered list of configured identifiers into filter
instances. Each successfully resolved identifier gets the next id,
starting at 1. Ids are only meaningful within one load: reloading
replaces every entry and numbers again from 1.
"""

from __future__ import annotations

import logging
import threading
from typing import Iterable, Iterator

from filter_studio.core.data_types import ImageBuffer
from filter_studio.core.errors import FilterIdNotFoundError
from filter_studio.core.filter_types import Filter, resolve_filter_type

logger = logging.getLogger(__name__)


class FilterRegistry:
    """
    Mapping from filter id to loaded filter instance.

    A load is built aside and swapped in whole, so readers see either
    the previous load or the new one. A failed load leaves the registry
    empty.
    """

    def __init__(self):
        self._filters: dict[int, Filter] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_names(cls, names: Iterable[str]) -> FilterRegistry:
        """Create a registry and load the given identifiers into it."""
        registry = cls()
        registry.load(names)
        return registry

    def load(self, names: Iterable[str]) -> dict[int, Filter]:
        """
        Load or reload filters from an ordered list of identifiers.

        Args:
            names: Catalog keys or fully-qualified filter class paths

        Returns:
            Copy of the new id -> filter mapping

        Raises:
            FilterNotFoundError: An identifier does not resolve
            NotAFilterError: An identifier resolves to a non-filter
        """
        with self._lock:
            self._filters = {}

        loaded: dict[int, Filter] = {}
        for name in names:
            filter_type = resolve_filter_type(name)
            filter_id = len(loaded) + 1
            loaded[filter_id] = filter_type()
            logger.debug("Loaded filter %d: %s", filter_id, filter_type.__name__)

        with self._lock:
            self._filters = loaded

        logger.info("Loaded %d filter(s)", len(loaded))
        return dict(loaded)

    def get(self, filter_id: int) -> Filter:
        """
        Get a loaded filter by id.

        Raises:
            FilterIdNotFoundError: id is not part of the current load
        """
        filters = self._filters
        if filter_id not in filters:
            raise FilterIdNotFoundError(filter_id)
        return filters[filter_id]

    def filters_for_image(self, buffer: ImageBuffer) -> list[tuple[int, Filter]]:
        """Loaded filters applicable to the buffer, in id order."""
        return [
            (filter_id, f)
            for filter_id, f in sorted(self._filters.items())
            if f.is_applicable(buffer)
        ]

    def items(self) -> list[tuple[int, Filter]]:
        return sorted(self._filters.items())

    def ids(self) -> list[int]:
        return sorted(self._filters.keys())

    def clear(self) -> None:
        with self._lock:
            self._filters = {}

    def __iter__(self) -> Iterator[int]:
        return iter(self.ids())

    def __len__(self) -> int:
        return len(self._filters)

    def __contains__(self, filter_id: object) -> bool:
        return filter_id in self._filters
