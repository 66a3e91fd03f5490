"""
pixel-probe Main Application
============================

Command-line entry point: report the RGBA value of one pixel.

Pipeline:
    cli -> load_config -> load_image -> get_pixel_value -> format_pixel

Usage:
    pixel-probe --path photo.jpg -x 297 -y 85
    pixel-probe --path logo.png -x 10 -y 10 -af

Exit status:
    0 - One line printed to stdout
    1 - Validation, I/O, decode or bounds failure (logged to stderr)
    2 - Invalid command-line usage
"""

import argparse
import logging
import sys
from typing import List, Optional

from pixel_probe import __version__
from pixel_probe.config import ProbeConfig, Settings, load_config, setup_logging
from pixel_probe.errors import ConfigError, PixelProbeError
from pixel_probe.formatter import format_pixel
from pixel_probe.imaging import load_image
from pixel_probe.pixel import get_pixel_value


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pixel-probe",
        description="Print the RGBA value of a pixel in a JPEG or PNG image",
    )
    parser.add_argument(
        "--path",
        type=str,
        default="",
        help="Path to JPG or PNG file",
    )
    parser.add_argument(
        "-x",
        type=int,
        default=0,
        help="X coordinate of the pixel (default: 0)",
    )
    parser.add_argument(
        "-y",
        type=int,
        default=0,
        help="Y coordinate of the pixel (default: 0)",
    )
    parser.add_argument(
        "-af",
        "--alpha-float",
        dest="alpha_float",
        action="store_true",
        help="Return alpha value as float instead of int",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML settings file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level override (DEBUG, INFO, WARNING, ERROR)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def _probe_config(args: argparse.Namespace) -> ProbeConfig:
    if not args.path:
        raise ConfigError("no file path provided: use --path")

    return ProbeConfig(
        image_path=args.path,
        x=args.x,
        y=args.y,
        alpha_as_float=args.alpha_float,
    )


def cli(argv: Optional[List[str]] = None) -> ProbeConfig:
    """
    Parse command-line arguments into a ProbeConfig.

    Raises:
        ConfigError: If --path is missing or empty
    """
    return _probe_config(build_parser().parse_args(argv))


def probe(config: ProbeConfig, settings: Settings) -> str:
    """
    Run the pipeline for one pixel and return the report line.

    Raises:
        PixelProbeError: On any validation, I/O, decode or bounds failure
    """
    image = load_image(config.image_path, settings.validation.allowed_extensions)
    color = get_pixel_value(image, config.x, config.y)

    return format_pixel(
        config.x,
        config.y,
        color,
        alpha_as_float=config.alpha_as_float,
        precision=settings.output.alpha_precision,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    overrides = {}
    if args.log_level:
        overrides["logging"] = {"level": args.log_level}

    try:
        settings = load_config(args.config, overrides=overrides)
    except ConfigError as e:
        setup_logging(Settings())
        logger.error(e.message)
        return 1

    setup_logging(settings)

    try:
        config = _probe_config(args)
        logger.debug(f"Probing {config.image_path} at ({config.x}, {config.y})")
        line = probe(config, settings)
    except PixelProbeError as e:
        logger.error(e.message)
        return 1

    print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
