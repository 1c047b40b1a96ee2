"""
Tests for image loading and saving.
"""

import numpy as np
import pytest
from PIL import Image

from filter_studio.core.data_types import Color, ImageBuffer
from filter_studio.image_io import load_image, save_image


class TestImageIO:

    def test_save_then_load(self, tmp_path):
        buffer = ImageBuffer.filled(4, 3, Color(12, 34, 56))
        path = save_image(buffer, tmp_path / "out")
        assert path.parent == tmp_path / "out"
        assert path.suffix == ".png"

        loaded = load_image(path)
        np.testing.assert_array_equal(loaded.pixels, buffer.pixels)
        assert loaded.has_translucency is False

    def test_unique_names(self, tmp_path):
        buffer = ImageBuffer.empty(2, 2)
        assert save_image(buffer, tmp_path) != save_image(buffer, tmp_path)
        assert len(list(tmp_path.glob("*.png"))) == 2

    def test_load_translucent_png(self, tmp_path):
        path = tmp_path / "alpha.png"
        Image.new("RGBA", (3, 2), (10, 20, 30, 128)).save(path)
        loaded = load_image(path)
        assert loaded.size == (3, 2)
        assert loaded.has_translucency is True
        assert loaded.get_pixel(0, 0) == Color(10, 20, 30)

    def test_load_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_image(tmp_path / "missing.png")
