"""
Image I/O - Reading source images and writing processed results.
"""

from __future__ import annotations

import logging
from pathlib import Path
from uuid import uuid4

from filter_studio.core.data_types import ImageBuffer

logger = logging.getLogger(__name__)


def load_image(path: str | Path) -> ImageBuffer:
    """
    Load an image file into a buffer.

    Raises:
        FileNotFoundError: The file does not exist
    """
    path = Path(path)
    buffer = ImageBuffer.from_file(path)
    logger.info("Loaded %s (%dx%d)", path.name, buffer.width, buffer.height)
    return buffer


def save_image(buffer: ImageBuffer, directory: str | Path) -> Path:
    """
    Save a buffer as PNG under a fresh unique file name.

    Args:
        buffer: Image to save
        directory: Output directory, created if needed

    Returns:
        Path of the written file
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)

    path = directory / f"{uuid4()}.png"
    buffer.to_pil().save(path, format="PNG")
    logger.info("Output saved at %s", path)
    return path
