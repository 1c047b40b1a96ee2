"""
Tests for the filter registry.
"""

import pytest

from filter_studio.core.data_types import ImageBuffer
from filter_studio.core.errors import (
    FilterIdNotFoundError,
    FilterNotFoundError,
    NotAFilterError,
)
from filter_studio.core.registry import FilterRegistry
from filter_studio.filters import BlurFilter, RgbSplitFilter


pytestmark = pytest.mark.usefixtures("builtin_filters")


class TestFilterRegistryLoad:
    """Tests for FilterRegistry.load."""

    def test_ids_start_at_one_in_order(self):
        registry = FilterRegistry()
        loaded = registry.load(["blur", "rgb_split"])
        assert sorted(loaded) == [1, 2]
        assert isinstance(registry.get(1), BlurFilter)
        assert isinstance(registry.get(2), RgbSplitFilter)

    def test_same_type_twice_gets_two_instances(self):
        registry = FilterRegistry.from_names(["blur", "blur"])
        assert len(registry) == 2
        assert registry.get(1) is not registry.get(2)

    def test_defaults_available_after_load(self):
        registry = FilterRegistry.from_names(["blur"])
        f = registry.get(1)
        assert f.get_parameter("radius", int) == 1
        assert f.get_parameter("weight", int) == 1

    def test_dotted_names(self):
        registry = FilterRegistry.from_names([
            "filter_studio.filters.rgb_split.RgbSplitFilter",
            "filter_studio.filters.blur.BlurFilter",
        ])
        assert isinstance(registry.get(1), RgbSplitFilter)
        assert isinstance(registry.get(2), BlurFilter)

    def test_reload_with_shorter_list_renumbers(self):
        registry = FilterRegistry.from_names(["rgb_split", "blur"])
        old_blur = registry.get(2)
        registry.load(["blur"])
        assert registry.ids() == [1]
        assert isinstance(registry.get(1), BlurFilter)
        assert registry.get(1) is not old_blur
        with pytest.raises(FilterIdNotFoundError):
            registry.get(2)

    def test_reload_drops_parameter_values(self):
        registry = FilterRegistry.from_names(["blur"])
        registry.get(1).set_parameter("radius", 4)
        registry.load(["blur"])
        assert registry.get(1).get_parameter("radius", int) == 1

    def test_unknown_name_aborts_load(self):
        registry = FilterRegistry.from_names(["blur"])
        with pytest.raises(FilterNotFoundError):
            registry.load(["rgb_split", "missing"])
        assert len(registry) == 0

    def test_empty_identifier_is_not_found(self):
        registry = FilterRegistry()
        with pytest.raises(FilterNotFoundError):
            registry.load(["blur", ""])

    def test_relative_identifier_is_not_found(self):
        registry = FilterRegistry()
        with pytest.raises(FilterNotFoundError):
            registry.load(["..Blur"])
        with pytest.raises(FilterNotFoundError):
            registry.load([".blur.BlurFilter"])

    def test_non_filter_aborts_load(self):
        registry = FilterRegistry()
        with pytest.raises(NotAFilterError):
            registry.load(["filter_studio.core.registry.FilterRegistry"])
        assert len(registry) == 0

    def test_empty_list(self):
        registry = FilterRegistry.from_names([])
        assert len(registry) == 0
        assert registry.items() == []


class TestFilterRegistryLookup:
    """Tests for lookups on a loaded registry."""

    def test_get_unknown_id(self):
        registry = FilterRegistry.from_names(["blur"])
        with pytest.raises(FilterIdNotFoundError) as exc_info:
            registry.get(7)
        assert exc_info.value.filter_id == 7

    def test_contains_and_iter(self):
        registry = FilterRegistry.from_names(["blur", "rgb_split"])
        assert 1 in registry
        assert 3 not in registry
        assert list(registry) == [1, 2]

    def test_filters_for_opaque_image(self):
        registry = FilterRegistry.from_names(["blur", "rgb_split"])
        applicable = registry.filters_for_image(ImageBuffer.empty(4, 4))
        assert [fid for fid, _ in applicable] == [1, 2]

    def test_filters_for_translucent_image(self):
        registry = FilterRegistry.from_names(["rgb_split", "blur"])
        buffer = ImageBuffer.empty(4, 4, has_translucency=True)
        applicable = registry.filters_for_image(buffer)
        assert [(fid, str(f)) for fid, f in applicable] == [(2, "Blur")]

    def test_clear(self):
        registry = FilterRegistry.from_names(["blur"])
        registry.clear()
        assert len(registry) == 0
