# io_utils/image_handler.py
"""
Image read/write and frame preparation helpers using Pillow.

Functions:
- read_image(path) -> (numpy array (H x W) or (H x W x 3), meta dict), dtype preserved
- save_image(path, array) -> writes image
- detect_is_color(array) -> bool
- to_luminance(array) -> single-channel float64 array
- prepare_frame(array, downscale_factor=2) -> float64 array in [0, 1] ready for detection
"""

from PIL import Image
import numpy as np
from typing import Tuple

from core.settings import DOWNSCALE_FACTOR

# ITU-R BT.601 luma weights
LUMA_WEIGHTS = (0.2989, 0.5870, 0.1140)


def read_image(path: str) -> Tuple[np.ndarray, dict]:
    """
    Read an image from `path` and return (array, meta).
    - Returns RGB arrays of shape (H,W,3) or grayscale (H,W). Alpha is dropped.
    - High bit-depth single-channel modes (I, I;16, F) keep their numeric range.
    - Meta contains mode and size.
    """
    with Image.open(path) as img:
        if img.mode in ("1", "L", "LA"):
            img = img.convert("L")
        elif img.mode in ("I", "F") or img.mode.startswith("I;"):
            pass
        else:
            img = img.convert("RGB")
        arr = np.asarray(img)
        meta = {"mode": img.mode, "size": img.size}
    return arr, meta


def save_image(path: str, array: np.ndarray):
    """
    Save an image array to `path`. Accepts HxW (grayscale), HxWx3 (RGB) or HxWx4 (RGBA).
    Casts floats to uint8 by clipping to 0..255.
    """
    if not (array.ndim == 2 or (array.ndim == 3 and array.shape[2] in (3, 4))):
        raise ValueError("save_image expects HxW, HxWx3 or HxWx4 array.")

    if np.issubdtype(array.dtype, np.floating):
        arr = np.clip(array, 0.0, 255.0).astype(np.uint8)
    else:
        arr = array.astype(np.uint8)

    Image.fromarray(arr).save(path)


def detect_is_color(array: np.ndarray) -> bool:
    return array.ndim == 3 and array.shape[2] == 3


def to_luminance(array: np.ndarray) -> np.ndarray:
    """
    Collapse an RGB array to one channel with the BT.601 weights.
    Grayscale arrays are returned as float64 unchanged.
    """
    if array.ndim == 2:
        return array.astype(np.float64)
    if not detect_is_color(array):
        raise ValueError("to_luminance expects an HxW or HxWx3 array.")
    return np.dot(array[..., :3].astype(np.float64), LUMA_WEIGHTS)


def prepare_frame(array: np.ndarray, downscale_factor: int = DOWNSCALE_FACTOR) -> np.ndarray:
    """
    Build the detector input from a decoded image:
      - luminance only
      - keep every `downscale_factor`-th row and column
      - scale to [0, 1]: 8- and 16-bit integers by their dtype max, everything else
        (wider integers such as Pillow mode "I", floats) by the data max
    """
    if int(downscale_factor) < 1:
        raise ValueError("downscale_factor must be >= 1.")
    f = int(downscale_factor)

    if np.issubdtype(array.dtype, np.integer) and array.dtype.itemsize <= 2:
        scale = float(np.iinfo(array.dtype).max)
    else:
        peak = float(np.nanmax(np.abs(array))) if array.size else 0.0
        scale = peak if peak > 0 else 1.0

    lum = to_luminance(array)
    return lum[::f, ::f] / scale
