"""
picture/color_ops.py

Per-pixel photometric transforms. Both return a new buffer and leave the
input untouched.
"""
import numpy as np

from .pixel_buffer import PixelBuffer


def invert(picture: PixelBuffer) -> PixelBuffer:
    """Replace every channel c by 255 - c."""
    arr = picture.as_array()
    return PixelBuffer.from_array(255 - arr, copy=False)


def grayscale(picture: PixelBuffer) -> PixelBuffer:
    """
    Average the three channels: avg = (r + g + b) // 3, written to all three.
    Integer (truncating) division, no luminance weighting.
    """
    arr = picture.as_array()
    # widen before summing, 3 * 255 overflows uint8
    avg = (arr.astype(np.uint16).sum(axis=2) // 3).astype(np.uint8)
    out = np.repeat(avg[:, :, np.newaxis], 3, axis=2)
    return PixelBuffer.from_array(out, copy=False)
