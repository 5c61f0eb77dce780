# io_utils/image_handler.py
"""
Image read/write helpers using Pillow.

Functions:
- read_image(path) -> (PixelBuffer, meta); alpha and palettes are flattened to RGB
- save_image(path, picture, fmt=None) -> writes an 8-bit RGB image (PNG by default)
- detect_has_alpha(img) -> bool
"""

import os
from typing import Optional, Tuple

import numpy as np
from PIL import Image

from picture import PixelBuffer

DEFAULT_FORMAT = "PNG"


def detect_has_alpha(img: Image.Image) -> bool:
    return img.mode in ("RGBA", "LA", "PA") or "transparency" in img.info


def read_image(path: str) -> Tuple[PixelBuffer, dict]:
    """
    Read an image from `path` and return (picture, meta).
    - Every mode is converted to RGB; any alpha channel is dropped.
    - meta holds the source 'mode', 'size' (W, H), 'format' and 'has_alpha'.
    """
    with Image.open(path) as img:
        meta = {
            "mode": img.mode,
            "size": img.size,
            "format": img.format,
            "has_alpha": detect_has_alpha(img),
        }
        rgb = img.convert("RGB")
        arr = np.asarray(rgb, dtype=np.uint8)
    return PixelBuffer.from_array(arr), meta


def save_image(path: str, picture: PixelBuffer, fmt: Optional[str] = None) -> str:
    """
    Save `picture` to `path` as opaque 8-bit RGB.
    The format is inferred from the extension; without one, PNG is written.
    """
    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok=True)
    if fmt is None and not os.path.splitext(path)[1]:
        fmt = DEFAULT_FORMAT
    img = Image.fromarray(picture.to_array())
    img.save(path, format=fmt)
    return path
