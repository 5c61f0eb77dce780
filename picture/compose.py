"""
picture/compose.py

Multi-picture transforms: blend and mosaic.

Inputs do not need to share dimensions. Both transforms work on the region
every input covers, i.e. (min width, min height) taken independently, so no
pixel beyond any input's bounds is read.
"""

from typing import List, Sequence, Tuple
import numpy as np

from .errors import InvalidArgument
from .pixel_buffer import PixelBuffer


def _check_inputs(pictures: Sequence[PixelBuffer], name: str) -> List[PixelBuffer]:
    pictures = list(pictures)
    if not pictures:
        raise InvalidArgument(f"{name} needs at least one picture.")
    for idx, pic in enumerate(pictures):
        if not isinstance(pic, PixelBuffer):
            raise InvalidArgument(f"{name}: input {idx} is not a PixelBuffer ({type(pic).__name__}).")
    return pictures


def minimum_dimensions(pictures: Sequence[PixelBuffer]) -> Tuple[int, int]:
    """Return (min width, min height) across a non-empty list of pictures."""
    pictures = _check_inputs(pictures, "minimum_dimensions")
    min_w = min(p.width for p in pictures)
    min_h = min(p.height for p in pictures)
    return min_w, min_h


def _cropped_stack(pictures: List[PixelBuffer], width: int, height: int, dtype) -> np.ndarray:
    """Stack the top-left (height, width) region of every picture -> (N, H, W, 3)."""
    return np.stack([p.as_array()[:height, :width] for p in pictures], axis=0).astype(dtype)


def blend(pictures: Sequence[PixelBuffer]) -> PixelBuffer:
    """
    Per-channel arithmetic mean across all pictures at each shared coordinate.
    Division by the picture count truncates (127.5 -> 127).
    """
    pictures = _check_inputs(pictures, "blend")
    width, height = minimum_dimensions(pictures)
    if width == 0 or height == 0:
        return PixelBuffer(width, height)
    # uint32 is plenty: 255 * count overflows only past ~16M inputs
    stack = _cropped_stack(pictures, width, height, np.uint32)
    avg = stack.sum(axis=0) // len(pictures)
    return PixelBuffer.from_array(avg.astype(np.uint8), copy=False)


def mosaic(pictures: Sequence[PixelBuffer], tile_size: int) -> PixelBuffer:
    """
    Tile the pictures in a diagonal pattern.

    The output is (min width, min height) cropped down to a multiple of
    tile_size. The tile at grid position (tx, ty) is copied entirely from
    pictures[(tx + ty) % len(pictures)], at the same absolute coordinates.
    """
    if isinstance(tile_size, bool) or not isinstance(tile_size, (int, np.integer)):
        raise InvalidArgument(f"tile_size must be an integer, got {tile_size!r}.")
    tile_size = int(tile_size)
    if tile_size <= 0:
        raise InvalidArgument(f"tile_size must be positive, got {tile_size}.")
    pictures = _check_inputs(pictures, "mosaic")

    min_w, min_h = minimum_dimensions(pictures)
    width = min_w - min_w % tile_size
    height = min_h - min_h % tile_size
    if width == 0 or height == 0:
        return PixelBuffer(width, height)

    stack = _cropped_stack(pictures, width, height, np.uint8)
    ty = (np.arange(height) // tile_size).reshape(height, 1)
    tx = (np.arange(width) // tile_size).reshape(1, width)
    source = (tx + ty) % len(pictures)
    rows = np.arange(height).reshape(height, 1)
    cols = np.arange(width).reshape(1, width)
    out = stack[source, rows, cols]
    return PixelBuffer.from_array(out, copy=False)
