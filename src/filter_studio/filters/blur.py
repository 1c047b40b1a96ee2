"""
Blur Filter - Weighted box blur over a square neighborhood.

Each output channel value is the mean of the (2r+1) x (2r+1)
neighborhood around the pixel, with the center sample counted `weight`
times. Samples falling outside the image count as black and still take
part in the denominator, so borders come out darker than the interior.
"""

from __future__ import annotations

import numpy as np

from filter_studio.core.data_types import ImageBuffer
from filter_studio.core.filter_types import CopyFilter, register_filter
from filter_studio.core.parameters import ParameterDefinition


@register_filter("blur")
class BlurFilter(CopyFilter):
    """Applies a blur filter to an image."""

    name = "Blur"
    parameters = (
        ParameterDefinition.integer(
            "radius", default=1, label="Radius",
            description="Neighborhood half size in pixels",
        ),
        ParameterDefinition.integer(
            "weight", default=1, label="Weight",
            description="How many times the center pixel is counted",
        ),
    )

    def is_applicable(self, buffer: ImageBuffer) -> bool:
        return True

    def apply(self, buffer: ImageBuffer) -> ImageBuffer:
        radius = self.get_parameter("radius", int)
        weight = self.get_parameter("weight", int)

        if radius < 0:
            raise ValueError(f"Blur radius must be >= 0, got {radius}")
        side = radius * 2 + 1
        denominator = side * side - 1 + weight
        if denominator <= 0:
            raise ValueError(f"Blur weight {weight} leaves no samples to average")

        return ImageBuffer(
            pixels=box_mean(buffer.pixels, radius, weight, denominator),
            has_translucency=buffer.has_translucency,
        )


def box_mean(
    pixels: np.ndarray,
    radius: int,
    weight: int,
    denominator: int,
) -> np.ndarray:
    """
    Weighted neighborhood mean with zero padding.

    Visits every offset of the neighborhood once, so the cost stays
    O(width * height * (2r+1)^2).
    """
    height, width = pixels.shape[:2]
    padded = np.pad(
        pixels.astype(np.int64),
        ((radius, radius), (radius, radius), (0, 0)),
        mode="constant",
        constant_values=0,
    )

    total = np.zeros((height, width, 3), dtype=np.int64)
    for dy in range(2 * radius + 1):
        for dx in range(2 * radius + 1):
            total += padded[dy:dy + height, dx:dx + width]
    total += (weight - 1) * pixels.astype(np.int64)

    # np.rint rounds half to even
    mean = np.rint(total / denominator)
    return mean.clip(0, 255).astype(np.uint8)
