# io_utils/__init__.py
"""
I/O helpers: decode image files into PixelBuffers and encode them back.
"""
from .image_handler import read_image, save_image, detect_has_alpha
from .file_utils import make_result_filename, save_parameters_txt

__all__ = [
    "read_image",
    "save_image",
    "detect_has_alpha",
    "make_result_filename",
    "save_parameters_txt",
]
