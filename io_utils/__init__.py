# io_utils/__init__.py
"""
I/O helpers package for the corner detector.
"""
from .image_handler import read_image, save_image, detect_is_color, to_luminance, prepare_frame
from .file_utils import make_result_filename, save_parameters_txt, save_corners_csv

__all__ = [
    "read_image",
    "save_image",
    "detect_is_color",
    "to_luminance",
    "prepare_frame",
    "make_result_filename",
    "save_parameters_txt",
    "save_corners_csv",
]
