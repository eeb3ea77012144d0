#!/usr/bin/env python3

import argparse
import logging
import math
import sys

from .composer import StampParameters, compose_stamp
from .errors import RasterExportError, VectorExportError
from .renderers import NAMED_COLORS, RenderBuilder, parse_color

logger = logging.getLogger(__name__)

DEFAULTS = StampParameters()

# rotation range offered for the whole stamp
MIN_ROTATION = -45
MAX_ROTATION = 45


def _positive_size(value):
    size = float(value)
    if not math.isfinite(size) or size <= 0:
        raise argparse.ArgumentTypeError(f"size must be a positive number, got {value}")

    return size


def _rotation(value):
    angle = float(value)
    if not MIN_ROTATION <= angle <= MAX_ROTATION:
        raise argparse.ArgumentTypeError(f"rotation must be within [{MIN_ROTATION}, {MAX_ROTATION}], got {value}")

    return angle


def _legend_rotation(value):
    angle = float(value)
    if not 0 <= angle < 360:
        raise argparse.ArgumentTypeError(f"legend rotation must be within [0, 360), got {value}")

    return angle


def _color(value):
    try:
        parse_color(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e

    return NAMED_COLORS.get(value.lower(), value)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="stampart",
        description="Render a round company stamp as SVG and/or PNG.")

    parser.add_argument("--name", default=DEFAULTS.company_name, help="company name along the rim")
    parser.add_argument("--number", default=DEFAULTS.company_number, help="company number, first center line")
    parser.add_argument("--registration", default=DEFAULTS.registration_code,
                        help="registration code, second center line")
    parser.add_argument("--size", type=_positive_size, default=DEFAULTS.size, help="stamp diameter in pixels")
    parser.add_argument("--color", type=_color, default=DEFAULTS.stroke_color,
                        help=f"hex color or one of: {', '.join(NAMED_COLORS)}")
    parser.add_argument("--rotation", type=_rotation, default=DEFAULTS.overall_rotation_degrees,
                        help="rotation of the whole stamp in degrees")
    parser.add_argument("--legend-rotation", type=_legend_rotation, default=DEFAULTS.legend_rotation_degrees,
                        help="rotation of the company name around the rim in degrees")
    parser.add_argument("--font-family", default=DEFAULTS.font_family)
    parser.add_argument("-o", "--output", default="stamp", help="output file name without extension")
    parser.add_argument("--format", choices=["svg", "png", "both"], default="svg")
    parser.add_argument("--background", action="store_true", help="fill the background with white")
    parser.add_argument("--json", action="store_true", help="print the composed scene as JSON")
    parser.add_argument("-v", "--verbose", action="store_true")

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s")

    params = StampParameters(
        company_name=args.name,
        company_number=args.number,
        registration_code=args.registration,
        size=args.size,
        stroke_color=args.color,
        overall_rotation_degrees=args.rotation,
        legend_rotation_degrees=args.legend_rotation,
        font_family=args.font_family)

    scene = compose_stamp(params)

    if args.json:
        print(scene.to_json(indent=2))

    formats = ["svg", "png"] if args.format == "both" else [args.format]

    exit_code = 0
    for output_format in formats:
        builder = RenderBuilder().format(output_format).file(args.output).fill_background(args.background)

        try:
            logger.info("Wrote %s", builder(scene))
        except RasterExportError as e:
            logger.error("%s. Use the SVG export instead.", e)
            exit_code = 2
        except VectorExportError as e:
            logger.error("%s", e)
            exit_code = 1

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
