"""
Geometric transformations for pixel buffers.

Rotations are clockwise. numpy rows are y, so a clockwise quarter turn of the
picture is np.rot90 with k=-1 on the (row, col) axes.
"""
import numpy as np

from .pixel_buffer import PixelBuffer


def _wrap(arr: np.ndarray) -> PixelBuffer:
    # rot90/flip return views of the input; copy so the output owns its pixels
    return PixelBuffer.from_array(arr.copy(), copy=False)


def rotate90(picture: PixelBuffer) -> PixelBuffer:
    """Rotate 90° clockwise: (W, H) -> (H, W), out[H-1-y, x] = in[x, y]."""
    return _wrap(np.rot90(picture.as_array(), k=-1, axes=(0, 1)))


def rotate180(picture: PixelBuffer) -> PixelBuffer:
    """Rotate 180°: out[x, y] = in[W-1-x, H-1-y]."""
    return _wrap(np.rot90(picture.as_array(), k=2, axes=(0, 1)))


def rotate270(picture: PixelBuffer) -> PixelBuffer:
    """Rotate 270° clockwise: (W, H) -> (H, W), out[y, W-1-x] = in[x, y]."""
    return _wrap(np.rot90(picture.as_array(), k=1, axes=(0, 1)))


def flip_horizontal(picture: PixelBuffer) -> PixelBuffer:
    """Mirror left-right: out[x, y] = in[W-1-x, y]."""
    return _wrap(np.flip(picture.as_array(), axis=1))


def flip_vertical(picture: PixelBuffer) -> PixelBuffer:
    """Mirror top-bottom: out[x, y] = in[x, H-1-y]."""
    return _wrap(np.flip(picture.as_array(), axis=0))
