"""
RGB Split Filter - Keeps a single color channel.
"""

from __future__ import annotations

from filter_studio.core.data_types import ChannelOption, ImageBuffer
from filter_studio.core.filter_types import InPlaceFilter, register_filter
from filter_studio.core.parameters import ParameterDefinition


@register_filter("rgb_split")
class RgbSplitFilter(InPlaceFilter):
    """
    Decomposes an image's colors into a single color channel.

    Only opaque pixel formats are supported.
    """

    name = "Rgb split"
    parameters = (
        ParameterDefinition.channel(
            "channel", label="Channel",
            description="Channel to keep (Red, Green or Blue)",
        ),
    )

    def is_applicable(self, buffer: ImageBuffer) -> bool:
        return not buffer.has_translucency

    def apply(self, buffer: ImageBuffer) -> None:
        channel = self.get_parameter("channel", ChannelOption)

        for index in range(3):
            if index != channel.index:
                buffer.pixels[:, :, index] = 0
