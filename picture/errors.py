"""
Error types raised by the picture engine.

Each error also derives from the matching builtin so callers can keep
catching ValueError / IndexError.
"""


class PictureError(Exception):
    """Base class for every error raised by the engine."""


class InvalidDimension(PictureError, ValueError):
    """Negative (or non-integer) width/height given to a buffer."""


class OutOfBounds(PictureError, IndexError):
    """Pixel coordinate outside the buffer extent."""


class InvalidArgument(PictureError, ValueError):
    """Malformed transform parameters (empty input list, bad tile size...)."""


class UnknownOperation(PictureError, ValueError):
    """Operation name that is not part of the catalog."""
