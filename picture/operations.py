"""
picture/operations.py

Closed catalog of operations and the dispatch from command words to the pure
transforms. Command grammar (same words the command line uses):

  invert | grayscale | blur | blend | mosaic
  rotate 90|180|270
  flip H|V
"""

from enum import Enum
from typing import Optional, Sequence

from .errors import InvalidArgument, UnknownOperation
from .pixel_buffer import PixelBuffer
from .color_ops import invert, grayscale
from .geom_ops import rotate90, rotate180, rotate270, flip_horizontal, flip_vertical
from .filters import blur
from .compose import blend, mosaic


class Operation(Enum):
    INVERT = "invert"
    GRAYSCALE = "grayscale"
    ROTATE_90 = "rotate90"
    ROTATE_180 = "rotate180"
    ROTATE_270 = "rotate270"
    FLIP_HORIZONTAL = "flipH"
    FLIP_VERTICAL = "flipV"
    BLEND = "blend"
    BLUR = "blur"
    MOSAIC = "mosaic"

    @property
    def multi_input(self) -> bool:
        """True for operations that take a list of pictures."""
        return self in (Operation.BLEND, Operation.MOSAIC)

    @property
    def needs_tile_size(self) -> bool:
        return self is Operation.MOSAIC


_SINGLE_INPUT = {
    Operation.INVERT: invert,
    Operation.GRAYSCALE: grayscale,
    Operation.ROTATE_90: rotate90,
    Operation.ROTATE_180: rotate180,
    Operation.ROTATE_270: rotate270,
    Operation.FLIP_HORIZONTAL: flip_horizontal,
    Operation.FLIP_VERTICAL: flip_vertical,
    Operation.BLUR: blur,
}

_PLAIN_COMMANDS = {
    "invert": Operation.INVERT,
    "grayscale": Operation.GRAYSCALE,
    "blur": Operation.BLUR,
    "blend": Operation.BLEND,
    "mosaic": Operation.MOSAIC,
}

_VARIANT_COMMANDS = {
    "rotate": {
        "90": Operation.ROTATE_90,
        "180": Operation.ROTATE_180,
        "270": Operation.ROTATE_270,
    },
    "flip": {
        "H": Operation.FLIP_HORIZONTAL,
        "V": Operation.FLIP_VERTICAL,
    },
}


def takes_variant(command: str) -> bool:
    """True if `command` needs a second word (rotation angle / flip axis)."""
    return command in _VARIANT_COMMANDS


def resolve_operation(command: str, variant: Optional[str] = None) -> Operation:
    """
    Map a command word (plus angle/axis for rotate/flip) to an Operation.
    Raises UnknownOperation for anything outside the catalog.
    """
    if command in _PLAIN_COMMANDS:
        if variant is not None:
            raise UnknownOperation(f"'{command}' does not take a variant (got '{variant}').")
        return _PLAIN_COMMANDS[command]
    if command in _VARIANT_COMMANDS:
        choices = _VARIANT_COMMANDS[command]
        if variant not in choices:
            raise UnknownOperation(
                f"Unknown {command} variant '{variant}'. Choose one of: {', '.join(choices)}."
            )
        return choices[variant]
    known = sorted(list(_PLAIN_COMMANDS) + list(_VARIANT_COMMANDS))
    raise UnknownOperation(f"Unknown operation '{command}'. Choose one of: {', '.join(known)}.")


def apply_operation(
    operation: Operation,
    pictures: Sequence[PixelBuffer],
    tile_size: Optional[int] = None,
) -> PixelBuffer:
    """
    Run `operation` on `pictures` and return the new buffer.
    Single-input operations require exactly one picture; mosaic requires tile_size.
    """
    if not isinstance(operation, Operation):
        raise UnknownOperation(f"Not an Operation: {operation!r}")
    pictures = list(pictures)
    if operation.multi_input:
        if operation.needs_tile_size:
            if tile_size is None:
                raise InvalidArgument("mosaic requires a tile size.")
            return mosaic(pictures, tile_size)
        return blend(pictures)
    if len(pictures) != 1:
        raise InvalidArgument(f"{operation.value} takes exactly one picture, got {len(pictures)}.")
    return _SINGLE_INPUT[operation](pictures[0])
