"""
Filter Studio - Main Entry Point

Usage:
    filter-studio IMAGE [FILTER_ID] [--config PATH] [--filters LIST]
                  [--output-dir DIR] [--verbose]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from filter_studio.config import load_settings, parse_filter_list
from filter_studio.core.errors import ConfigurationError
from filter_studio.core.registry import FilterRegistry
from filter_studio.filters import register_builtin_filters
from filter_studio.image_io import load_image
from filter_studio.shell import ConsoleSession

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_IMAGE_ERROR = 1
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="filter-studio",
        description="Apply configurable filters to an image",
    )
    parser.add_argument("image", help="Image file to process")
    parser.add_argument("filter_id", nargs="?", help="Id of the filter to apply first")
    parser.add_argument("--config", type=Path, help="Settings file (JSON)")
    parser.add_argument("--filters", help="Comma-separated filter identifiers to load")
    parser.add_argument("--output-dir", type=Path, help="Directory for processed images")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for Filter Studio.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    args = build_parser().parse_args(argv)

    settings = load_settings(args.config)
    if args.filters is not None:
        settings.load_filters = parse_filter_list(args.filters)
    if args.output_dir is not None:
        settings.output_directory = args.output_dir

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    register_builtin_filters()

    registry = FilterRegistry()
    try:
        registry.load(settings.load_filters)
    except ConfigurationError as e:
        logger.error("Error loading available filters: %s", e)
        print(f"Error loading available filters:\n{e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    image_path = Path(args.image).expanduser().resolve()
    try:
        image = load_image(image_path)
    except FileNotFoundError:
        print(f"File not found: {image_path}", file=sys.stderr)
        return EXIT_IMAGE_ERROR
    except OSError as e:
        # Pillow raises UnidentifiedImageError (an OSError) for non-images
        logger.error("Cannot read image %s: %s", image_path, e)
        print(f"Cannot read image: {image_path}", file=sys.stderr)
        return EXIT_IMAGE_ERROR

    session = ConsoleSession(
        registry=registry,
        image=image,
        output_directory=settings.output_directory,
        filter_names=settings.load_filters,
        image_label=str(image_path),
    )
    try:
        session.run(args.filter_id)
    except ConfigurationError as e:
        print(f"Error loading available filters:\n{e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except KeyboardInterrupt:
        print()

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
