"""
Command line front end for the picture engine.

Decodes the input file(s), applies one operation and encodes the result.

Usage (from project root):
python -m scripts.picture_processor invert in.png out.png
python -m scripts.picture_processor grayscale in.png out.png
python -m scripts.picture_processor rotate 90|180|270 in.png out.png
python -m scripts.picture_processor flip H|V in.png out.png
python -m scripts.picture_processor blur in.png out.png
python -m scripts.picture_processor blend a.png b.png [c.png ...] out.png
python -m scripts.picture_processor mosaic 16 a.png b.png [c.png ...] out.png

Add --compare cmp.png to also write a before/after figure.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import List, Optional, Sequence

from picture import PictureError, InvalidArgument, Operation, resolve_operation, apply_operation
from picture.operations import takes_variant
from io_utils.image_handler import read_image, save_image

logger = logging.getLogger("picture_processor")

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


@dataclass
class Job:
    """One operation request parsed from the command line."""

    operation: Operation
    inputs: List[str]
    output: str
    tile_size: Optional[int] = None


def _setup_logging(debug: bool = False):
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _parse_tile_size(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise InvalidArgument(f"Tile size must be an integer, got '{text}'.") from None


def build_job(command: str, args: Sequence[str]) -> Job:
    """
    Turn `command` plus its positional words into a Job.
    Raises UnknownOperation / InvalidArgument for malformed requests.
    """
    args = list(args)
    variant = None
    if takes_variant(command):
        if not args:
            raise InvalidArgument(f"'{command}' needs a variant before the file names.")
        variant = args.pop(0)
    operation = resolve_operation(command, variant)

    tile_size = None
    if operation.needs_tile_size:
        if not args:
            raise InvalidArgument("mosaic needs a tile size before the file names.")
        tile_size = _parse_tile_size(args.pop(0))

    if len(args) < 2:
        raise InvalidArgument(f"'{command}' needs at least one input and one output path.")
    inputs, output = args[:-1], args[-1]
    if not operation.multi_input and len(inputs) != 1:
        raise InvalidArgument(f"'{command}' takes exactly one input, got {len(inputs)}.")
    return Job(operation=operation, inputs=inputs, output=output, tile_size=tile_size)


def run_job(job: Job, compare_path: Optional[str] = None) -> str:
    pictures = []
    for path in job.inputs:
        pic, meta = read_image(path)
        logger.debug("Read %s: %dx%d mode=%s", path, pic.width, pic.height, meta["mode"])
        if meta["has_alpha"]:
            logger.info("Dropping alpha channel of %s", path)
        pictures.append(pic)

    result = apply_operation(job.operation, pictures, tile_size=job.tile_size)
    save_image(job.output, result)
    logger.info(
        "%s -> %s (%dx%d)", job.operation.value, job.output, result.width, result.height
    )

    if compare_path:
        # imported lazily, matplotlib is slow to load
        from visuals.plots import compare_and_save

        compare_and_save(pictures, result, out_path=compare_path)
        logger.info("Comparison figure written to %s", compare_path)
    return job.output


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="picture_processor",
        description="Apply one transform to image file(s).",
    )
    parser.add_argument("command", help="invert, grayscale, rotate, flip, blur, blend or mosaic")
    parser.add_argument(
        "args",
        nargs="+",
        help="[variant|tile size] input(s) then output path",
    )
    parser.add_argument("--compare", metavar="PATH", help="also write a before/after figure")
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    _setup_logging(ns.debug)

    try:
        job = build_job(ns.command, ns.args)
    except PictureError as e:
        logger.error("%s", e)
        return EXIT_USAGE

    try:
        run_job(job, compare_path=ns.compare)
    except PictureError as e:
        logger.error("%s failed: %s", job.operation.value, e)
        return EXIT_FAILURE
    except OSError as e:
        # missing file, unreadable/corrupt image (PIL raises OSError subclasses)
        logger.error("I/O error: %s", e)
        return EXIT_FAILURE
    except ValueError as e:
        # Pillow: unknown output extension
        logger.error("Cannot encode %s: %s", job.output, e)
        return EXIT_FAILURE
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
