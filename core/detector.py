"""
core/detector.py

Full corner-detection pipeline:
  1) gradients gx, gy via spectral convolution with the Sobel kernels
  2) per-pixel structure matrix over the 3x3 neighbourhood
  3) response = det / trace
  4) ranking by descending response
  5) greedy selection of floor(m*n*quantile) separated corners

API:
- detect_corners(image, quantile, block_size=4, return_intermediates=False)
- find_corners(samples, m, n, quantile)  (flat host boundary)

If return_intermediates=True, detect_corners returns (corners, intermediates_dict)
where intermediates_dict contains keys: 'gx', 'gy', 'Ixx', 'Ixy', 'Iyy',
'response', 'ranking', 'num_corners'.
"""

from typing import Any, Sequence
import numpy as np

from .gradients import compute_gradients
from .response import structure_tensor, response_from_tensor
from .selection import rank_responses, num_corners_for, select_corners
from .settings import DEFAULT_QUANTILE, BLOCK_SIZE


def detect_corners(
    image: np.ndarray,
    quantile: float = DEFAULT_QUANTILE,
    *,
    block_size: int = BLOCK_SIZE,
    return_intermediates: bool = False,
) -> Any:
    """
    Detect corners in a single-channel 2D image.

    Returns a (k, 2) int array of (row, col) pairs in acceptance order
    (strongest first), k <= floor(m*n*quantile).
    """
    image = np.asarray(image)
    if image.ndim != 2:
        raise ValueError("detect_corners expects a 2D single-channel array.")
    if image.shape[0] <= 0 or image.shape[1] <= 0:
        raise ValueError("detect_corners expects a non-empty image.")
    image = image.astype(np.float64)

    num_corners = num_corners_for(image.shape, quantile)

    gx, gy = compute_gradients(image)
    Ixx, Ixy, Iyy = structure_tensor(gx, gy)
    response = response_from_tensor(Ixx, Ixy, Iyy)
    ranking = rank_responses(response)
    corners = select_corners(response, quantile, block_size=block_size, ranking=ranking)

    if return_intermediates:
        intermediates = {
            "gx": gx,
            "gy": gy,
            "Ixx": Ixx,
            "Ixy": Ixy,
            "Iyy": Iyy,
            "response": response,
            "ranking": ranking,
            "num_corners": num_corners,
        }
        return corners, intermediates

    return corners


def find_corners(samples: Sequence[float], m: int, n: int, quantile: float) -> np.ndarray:
    """
    Flat boundary for host callers.

    samples is a row-major sequence of m*n floats. Returns an int32 array of
    length 2*floor(m*n*quantile) holding (u, v) pairs in acceptance order.
    Slots beyond the accepted corners stay 0.
    """
    m, n = int(m), int(n)
    if m <= 0 or n <= 0:
        raise ValueError(f"find_corners expects m > 0 and n > 0, got m={m}, n={n}.")
    flat = np.asarray(samples, dtype=np.float64).ravel()
    if flat.size != m * n:
        raise ValueError(f"find_corners expects {m * n} samples, got {flat.size}.")

    corners = detect_corners(flat.reshape(m, n), quantile)
    out = np.zeros(2 * num_corners_for((m, n), quantile), dtype=np.int32)
    out[:corners.size] = corners.ravel()
    return out
