"""
core/response.py

Corner scoring from gradient maps.

For every pixel the gradient products of its 3x3 neighbourhood are summed into
the symmetric structure matrix

    | Ixx  Ixy |
    | Ixy  Iyy |

and reduced to det / trace, the harmonic combination of its two eigenvalues.
Neighbours outside the grid contribute nothing, so border pixels see a
smaller window.
"""

from typing import Tuple
import numpy as np

# Value assigned where the structure matrix has zero trace (flat region).
# The matrix is positive semi-definite, so det/trace >= 0 everywhere else.
FLAT_RESPONSE = 0.0


def _box_sum_3x3(a: np.ndarray) -> np.ndarray:
    """Sum over each pixel's 3x3 neighbourhood, clipped at the grid borders."""
    m, n = a.shape
    p = np.pad(a, 1, mode="constant", constant_values=0.0)
    out = np.zeros_like(a, dtype=np.float64)
    for du in range(3):
        for dv in range(3):
            out += p[du:du + m, dv:dv + n]
    return out


def structure_tensor(gx: np.ndarray, gy: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Accumulate the per-pixel structure matrix entries (Ixx, Ixy, Iyy).
    """
    gx = np.asarray(gx, dtype=np.float64)
    gy = np.asarray(gy, dtype=np.float64)
    if gx.ndim != 2 or gx.shape != gy.shape:
        raise ValueError("structure_tensor expects two 2D gradient maps of the same shape.")
    Ixx = _box_sum_3x3(gx * gx)
    Ixy = _box_sum_3x3(gx * gy)
    Iyy = _box_sum_3x3(gy * gy)
    return Ixx, Ixy, Iyy


def response_from_tensor(Ixx: np.ndarray, Ixy: np.ndarray, Iyy: np.ndarray) -> np.ndarray:
    """
    det / trace of the structure matrix; FLAT_RESPONSE where trace == 0.
    Non-finite entries (from non-finite samples) are passed through.
    """
    det = Ixx * Iyy - Ixy * Ixy
    trace = Ixx + Iyy
    response = np.full(trace.shape, FLAT_RESPONSE, dtype=np.float64)
    flat = trace == 0.0
    with np.errstate(divide="ignore", invalid="ignore"):
        np.divide(det, trace, out=response, where=~flat)
    return response


def corner_response(gx: np.ndarray, gy: np.ndarray) -> np.ndarray:
    """Response map (same shape as gx) from the two gradient maps."""
    Ixx, Ixy, Iyy = structure_tensor(gx, gy)
    return response_from_tensor(Ixx, Ixy, Iyy)
