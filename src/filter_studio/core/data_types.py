"""
Data Types - Core data structures for image and parameter data.

This module defines the data that flows through a filter invocation:
- Color: Immutable RGB triple used as a parameter value
- ChannelOption: Enumeration of the single-color channels
- ImageBuffer: Container for RGB pixels plus the pixel-format opacity flag
- ParameterValue: Union of the supported parameter value types
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TypeAlias

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class Color:
    """
    An opaque RGB color.

    Attributes:
        r: Red component [0, 255]
        g: Green component [0, 255]
        b: Blue component [0, 255]
    """
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for component in (self.r, self.g, self.b):
            if not 0 <= component <= 255:
                raise ValueError(f"Color component out of range [0, 255]: {component}")

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def __str__(self) -> str:
        return f"{self.r},{self.g},{self.b}"


class ChannelOption(Enum):
    """Supported single-color channels."""
    RED = "Red"
    GREEN = "Green"
    BLUE = "Blue"

    @property
    def index(self) -> int:
        """Position of this channel in an RGB pixel."""
        return _CHANNEL_INDEX[self]

    def __str__(self) -> str:
        return self.value


_CHANNEL_INDEX = {
    ChannelOption.RED: 0,
    ChannelOption.GREEN: 1,
    ChannelOption.BLUE: 2,
}


# Type alias for parameter values. None is never a valid value.
ParameterValue: TypeAlias = int | float | Color | ChannelOption


@dataclass(eq=False)
class ImageBuffer:
    """
    Container for image data handed to filters.

    Internally stores pixels as a numpy array in HWC format with
    uint8 values in range [0, 255] and exactly three channels.

    Attributes:
        pixels: numpy array of shape (H, W, 3) with uint8 values
        has_translucency: True when the source pixel format supports
            partial transparency
    """
    pixels: NDArray[np.uint8]
    has_translucency: bool = False

    def __post_init__(self) -> None:
        if self.pixels.ndim != 3 or self.pixels.shape[2] != 3:
            raise ValueError(
                f"Expected pixels of shape (H, W, 3), got {self.pixels.shape}"
            )
        if self.pixels.dtype != np.uint8:
            raise ValueError(f"Expected uint8 pixels, got {self.pixels.dtype}")

    @classmethod
    def empty(cls, width: int, height: int, has_translucency: bool = False) -> ImageBuffer:
        """Create an empty (black) buffer of the given size."""
        arr = np.zeros((height, width, 3), dtype=np.uint8)
        return cls(pixels=arr, has_translucency=has_translucency)

    @classmethod
    def filled(
        cls,
        width: int,
        height: int,
        color: Color,
        has_translucency: bool = False,
    ) -> ImageBuffer:
        """Create a buffer where every pixel has the same color."""
        arr = np.empty((height, width, 3), dtype=np.uint8)
        arr[:, :] = color.as_tuple()
        return cls(pixels=arr, has_translucency=has_translucency)

    @classmethod
    def from_numpy(cls, array: NDArray, has_translucency: bool = False) -> ImageBuffer:
        """
        Create an ImageBuffer from a numpy array.

        Handles various input formats:
        - float [0, 1] -> uint8 [0, 255]
        - HW (grayscale) -> HWC
        - HWC with alpha -> alpha dropped, translucency flagged
        """
        arr = np.asarray(array).copy()

        if np.issubdtype(arr.dtype, np.floating):
            arr = np.rint(arr.clip(0.0, 1.0) * 255.0)
        arr = arr.clip(0, 255).astype(np.uint8)

        if arr.ndim == 2:
            arr = np.stack([arr, arr, arr], axis=-1)
        elif arr.ndim == 3 and arr.shape[2] == 4:
            arr = np.ascontiguousarray(arr[:, :, :3])
            has_translucency = True

        return cls(pixels=arr, has_translucency=has_translucency)

    @classmethod
    def from_pil(cls, image) -> ImageBuffer:
        """Create an ImageBuffer from a PIL Image."""
        from PIL import Image

        if not isinstance(image, Image.Image):
            raise TypeError(f"Expected PIL Image, got {type(image)}")

        has_translucency = (
            image.mode in ("RGBA", "LA", "PA", "RGBa", "La")
            or "transparency" in image.info
        )

        arr = np.array(image.convert("RGB"), dtype=np.uint8)
        return cls(pixels=arr, has_translucency=has_translucency)

    @classmethod
    def from_file(cls, path: str | Path) -> ImageBuffer:
        """
        Create an ImageBuffer by loading an image from a file.

        Args:
            path: Path to the image file

        Returns:
            ImageBuffer with the loaded image
        """
        from PIL import Image

        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Image file not found: {path}")

        with Image.open(path) as image:
            image.load()
            return cls.from_pil(image)

    @property
    def width(self) -> int:
        """Image width in pixels."""
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        """Image height in pixels."""
        return self.pixels.shape[0]

    @property
    def size(self) -> tuple[int, int]:
        """Image size as (width, height)."""
        return (self.width, self.height)

    def get_pixel(self, x: int, y: int) -> Color:
        r, g, b = self.pixels[y, x]
        return Color(int(r), int(g), int(b))

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        self.pixels[y, x] = color.as_tuple()

    def to_pil(self):
        """Convert to PIL Image (RGB)."""
        from PIL import Image

        # uint8 (H, W, 3) is read as RGB
        return Image.fromarray(np.ascontiguousarray(self.pixels))

    def copy(self) -> ImageBuffer:
        """Create a copy of this buffer that shares no pixel storage."""
        return ImageBuffer(
            pixels=self.pixels.copy(),
            has_translucency=self.has_translucency,
        )
