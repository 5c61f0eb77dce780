"""
picture/pixel_buffer.py

Mutable W x H grid of opaque RGB pixels.

Storage is a numpy uint8 array shaped (H, W, 3): rows are y, columns are x.
Every public coordinate is given as (x, y), like an image editor.

API:
- PixelBuffer(width, height)          blank (all black) canvas
- PixelBuffer.from_array(arr)         copy of an (H, W, 3) array
- get_pixel / set_pixel / contains    bounds-checked pixel access
- as_array() / to_array()             read-only view / independent copy
- content_hash()                      structural hash, equal buffers hash equally
"""

import operator
from typing import Tuple
import numpy as np

from .color import Color
from .errors import InvalidDimension, InvalidArgument, OutOfBounds

_HASH_MULTIPLIER = 31
_OPAQUE = 0xFF000000


def _check_dimension(name: str, value) -> int:
    try:
        as_int = int(value)
    except (TypeError, ValueError):
        raise InvalidDimension(f"{name} must be an integer, got {value!r}.") from None
    if isinstance(value, bool) or as_int != value:
        raise InvalidDimension(f"{name} must be an integer, got {value!r}.")
    value = as_int
    if value < 0:
        raise InvalidDimension(f"{name} must be non-negative, got {value}.")
    return value


class PixelBuffer:
    """
    Dense grid of Color values. Equality and hashing are structural
    (dimensions + pixel content), never identity based.
    """

    __slots__ = ("_data",)

    # numpy must not broadcast comparisons against a buffer elementwise
    __array_ufunc__ = None

    def __init__(self, width: int, height: int):
        width = _check_dimension("width", width)
        height = _check_dimension("height", height)
        self._data = np.zeros((height, width, 3), dtype=np.uint8)

    # --- construction helpers ---
    @classmethod
    def from_array(cls, arr: np.ndarray, copy: bool = True) -> "PixelBuffer":
        """
        Build a buffer from an (H, W, 3) array. Values are clipped to 0..255.
        With copy=False a uint8 C-contiguous array is adopted as-is; callers
        must hand over ownership.
        """
        a = np.asarray(arr)
        if a.ndim != 3 or a.shape[2] != 3:
            raise InvalidArgument(f"Expected an HxWx3 array, got shape {a.shape}.")
        if a.dtype != np.uint8:
            a = np.clip(a, 0, 255).astype(np.uint8)
        elif copy:
            a = a.copy()
        buf = cls.__new__(cls)
        buf._data = np.ascontiguousarray(a)
        return buf

    def copy(self) -> "PixelBuffer":
        return PixelBuffer.from_array(self._data)

    # --- dimensions ---
    @property
    def width(self) -> int:
        return int(self._data.shape[1])

    @property
    def height(self) -> int:
        return int(self._data.shape[0])

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    # --- pixel access ---
    def contains(self, x: int, y: int) -> bool:
        """True if (x, y) is an integer coordinate within the boundaries of this buffer."""
        try:
            x, y = operator.index(x), operator.index(y)
        except TypeError:
            return False
        return 0 <= x < self.width and 0 <= y < self.height

    def _check_bounds(self, x: int, y: int) -> Tuple[int, int]:
        # negative indexes would silently wrap in numpy
        if not self.contains(x, y):
            raise OutOfBounds(
                f"Pixel ({x!r}, {y!r}) is outside a {self.width}x{self.height} buffer."
            )
        return operator.index(x), operator.index(y)

    def get_pixel(self, x: int, y: int) -> Color:
        x, y = self._check_bounds(x, y)
        r, g, b = self._data[y, x]
        return Color(int(r), int(g), int(b))

    def set_pixel(self, x: int, y: int, color: Color):
        x, y = self._check_bounds(x, y)
        self._data[y, x] = color.as_tuple()

    def as_array(self) -> np.ndarray:
        """Read-only (H, W, 3) view of the pixel data."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    def to_array(self) -> np.ndarray:
        """Independent (H, W, 3) uint8 copy of the pixel data."""
        return self._data.copy()

    # --- equality / hashing ---
    def __eq__(self, other) -> bool:
        if not isinstance(other, PixelBuffer):
            return False
        if self._data.shape != other._data.shape:
            return False
        return bool(np.array_equal(self._data, other._data))

    def content_hash(self) -> int:
        """
        Polynomial hash h = 31*h + p over packed opaque pixels
        p = 0xFF000000 | r<<16 | g<<8 | b, visiting columns left to right and
        each column top to bottom. Arithmetic wraps at 32 bits and the result
        is returned as a signed int. An empty buffer hashes to 0.
        """
        if self._data.size == 0:
            return 0
        cols = self._data.transpose(1, 0, 2).reshape(-1, 3).astype(np.uint32)
        packed = np.uint32(_OPAQUE) | (cols[:, 0] << 16) | (cols[:, 1] << 8) | cols[:, 2]
        n = packed.shape[0]
        # powers[i] = 31**i mod 2**32; the first pixel gets the highest power
        powers = np.ones(n, dtype=np.uint32)
        if n > 1:
            powers[1:] = np.cumprod(np.full(n - 1, _HASH_MULTIPLIER, dtype=np.uint32), dtype=np.uint32)
        h = int(np.sum(packed * powers[::-1], dtype=np.uint32))
        return h - (1 << 32) if h >= (1 << 31) else h

    def __hash__(self) -> int:
        return self.content_hash()

    # --- representation ---
    def __repr__(self) -> str:
        return f"PixelBuffer(width={self.width}, height={self.height})"

    def __str__(self) -> str:
        lines = []
        for row in self._data:
            lines.append("".join(f"({r},{g},{b})" for r, g, b in row))
        # every row ends with a newline, followed by one blank line
        return "".join(line + "\n" for line in lines) + "\n"
