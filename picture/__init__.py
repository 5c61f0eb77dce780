"""
Picture transformation engine.
Exposes the pixel buffer, its colour type and the transform catalog.
"""
from .color import Color
from .errors import PictureError, InvalidDimension, OutOfBounds, InvalidArgument, UnknownOperation
from .pixel_buffer import PixelBuffer
from .color_ops import invert, grayscale
from .geom_ops import rotate90, rotate180, rotate270, flip_horizontal, flip_vertical
from .filters import blur
from .compose import blend, mosaic
from .operations import Operation, resolve_operation, apply_operation

__all__ = [
    "Color",
    "PixelBuffer",
    "PictureError",
    "InvalidDimension",
    "OutOfBounds",
    "InvalidArgument",
    "UnknownOperation",
    "invert",
    "grayscale",
    "rotate90",
    "rotate180",
    "rotate270",
    "flip_horizontal",
    "flip_vertical",
    "blur",
    "blend",
    "mosaic",
    "Operation",
    "resolve_operation",
    "apply_operation",
]
