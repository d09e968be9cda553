#!/usr/bin/env python3
"""
batchresize command line entry point.

Resize every JPG/PNG in a folder to an exact size:

    batchresize --width 800 --height 600
    batchresize --input photos --output thumbs --width 128 --height 128
    batchresize --width 64 --height 64 --workers 4 --strict

Defaults for every flag come from config.yaml (see --config).

Exit status:
    0  all images resized (or some failed without --strict)
    1  input/output folder unusable, or some images failed with --strict
    2  invalid flags or configuration
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from batchresize.pipeline.dispatcher import run_batch
from batchresize.pipeline.errors import ConfigError, DirectoryError
from batchresize.pipeline.job import ResizeConfig
from batchresize.utils.settings import load_config

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="batchresize",
        description="Resize every JPG/PNG image in a folder to an exact size.",
    )

    parser.add_argument(
        "--input",
        "-i",
        default=None,
        help="Input folder with original images (default from config: input_images)",
    )
    parser.add_argument(
        "--output",
        "-o",
        default=None,
        help="Output folder for resized images, created if missing "
        "(default from config: output_images)",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=None,
        help="Target width in pixels (required, > 0)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=None,
        help="Target height in pixels (required, > 0)",
    )
    parser.add_argument(
        "--workers",
        "-w",
        type=int,
        default=None,
        help="Number of images resized in parallel (default: auto)",
    )
    parser.add_argument(
        "--quality",
        "-q",
        type=int,
        default=None,
        help="JPEG quality 1-95 (default from config: 75)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 if any image fails to resize.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a YAML config file (default: project config.yaml if present)",
    )

    return parser


def _pick(flag_value, config_value):
    return config_value if flag_value is None else flag_value


def build_config(args: argparse.Namespace) -> ResizeConfig:
    """Merge command line flags over the config file. Raises ConfigError."""
    try:
        cfg = load_config(args.config)
    except FileNotFoundError as e:
        raise ConfigError(str(e)) from e

    paths = cfg["paths"]
    resize = cfg["resize"]

    width = _pick(args.width, resize.get("width"))
    height = _pick(args.height, resize.get("height"))
    if width is None or height is None:
        raise ConfigError("--width and --height are required")

    return ResizeConfig(
        input_dir=_pick(args.input, paths.get("input")) or "",
        output_dir=_pick(args.output, paths.get("output")) or "",
        width=width,
        height=height,
        workers=_pick(args.workers, resize.get("workers")),
        jpeg_quality=_pick(args.quality, resize.get("jpeg_quality")),
        fail_on_error=args.strict or bool(resize.get("fail_on_error")),
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = build_config(args)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        parser.print_help(sys.stderr)
        return EXIT_USAGE

    try:
        summary = run_batch(config)
    except DirectoryError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    if summary.has_failures and config.fail_on_error:
        return EXIT_FAILURE
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
