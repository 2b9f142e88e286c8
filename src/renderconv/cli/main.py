#!/usr/bin/env python3
"""
renderconv: convert renderer output to display formats.

Stills in the source directory become ``<name>.<ext>.png`` files in the
destination directory, then the frames subdirectory (when present) is
assembled into one looping GIF.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from ..config import (
    DEFAULT_DESTINATION_DIR,
    DEFAULT_MAGICK_BINARY,
    DEFAULT_SOURCE_DIR,
    MAX_WORKER_CAP,
    AnimationSettings,
    Config,
    ConverterBackend,
    ConverterSettings,
    FrameOrder,
    PathSettings,
)
from ..core.exceptions import RenderConvError
from ..output.logger import SimpleLogger
from ..processing.animation import AnimationAssembler
from ..processing.batch import BatchConverter
from ..processing.converter import ImageConverter, create_converter
from ..tools.check import check_tools


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    p = argparse.ArgumentParser(
        prog="renderconv",
        description="Convert rendered images to PNG and assemble animation frames into a looping GIF.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    p.add_argument("--source-dir", type=Path, default=DEFAULT_SOURCE_DIR, help="Directory of rendered images")
    p.add_argument("--dest-dir", type=Path, default=DEFAULT_DESTINATION_DIR, help="Existing output directory")
    p.add_argument(
        "--backend", choices=[b.value for b in ConverterBackend], default=ConverterBackend.MAGICK.value,
        help="Conversion backend",
    )
    p.add_argument("--magick-binary", default=DEFAULT_MAGICK_BINARY, help="ImageMagick executable")
    p.add_argument(
        "--frame-order", choices=[o.value for o in FrameOrder], default=FrameOrder.NATURAL.value,
        help="Ordering of animation frames",
    )
    p.add_argument("-w", "--workers", type=int, default=1, help=f"Parallel still conversions (capped at {MAX_WORKER_CAP})")
    p.add_argument("--log-file", type=Path, default=None, help="Also append log lines to this file")
    p.add_argument("--check-tools", action="store_true", help="Verify external tools and exit")
    return p.parse_args(argv)


def build_config(args: argparse.Namespace) -> Config:
    """Create a Config object from parsed args."""
    return Config(
        paths=PathSettings(source_dir=args.source_dir, destination_dir=args.dest_dir),
        animation=AnimationSettings(frame_order=FrameOrder(args.frame_order)),
        converter=ConverterSettings(
            backend=ConverterBackend(args.backend),
            magick_binary=args.magick_binary,
            workers=max(1, min(args.workers, MAX_WORKER_CAP)),
        ),
    )


def run(config: Config, converter: ImageConverter, logger: SimpleLogger) -> int:
    """Run both conversion phases and return the process exit status.

    Per-entry still failures are logged but do not affect the status; a scan
    failure or a failed animation returns 1.
    """
    try:
        BatchConverter(config, converter, logger).run()
        AnimationAssembler(config, converter, logger).run()
    except RenderConvError as ex:
        logger.error(str(ex))
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point."""
    args = parse_args(argv)

    if args.check_tools:
        if ConverterBackend(args.backend) is ConverterBackend.PILLOW:
            print("Tools OK: pillow backend needs no external tools")
            return 0
        ok, probs = check_tools(args.magick_binary)
        if ok:
            print(f"Tools OK: {args.magick_binary}")
            return 0
        for p in probs:
            print(f"Missing: {p}", file=sys.stderr)
        return 1

    config = build_config(args)
    logger = SimpleLogger(args.log_file)
    return run(config, create_converter(config), logger)


if __name__ == "__main__":
    sys.exit(main())
