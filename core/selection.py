"""
core/selection.py

Ranking of the response map and greedy spatial non-maximum suppression.

Provided functions:
- rank_responses(response)
- num_corners_for(shape, quantile)
- select_corners(response, quantile, block_size=4)

Notes:
- The ranking is strongest-first; non-finite responses are ranked last and
  equal scores keep flat (row-major) index order.
- A candidate is rejected when |du| < block_size and |dv| < block_size against
  any already accepted corner. With block_size=4 each accepted corner blocks
  the 7x7 window centred on it.
- The walk stops after num_corners acceptances or when the ranking runs out.
  In the latter case fewer than num_corners rows are returned; compare the
  length against num_corners_for(...) rather than expecting padding.
"""

from typing import Optional, Tuple
import numpy as np

from .settings import BLOCK_SIZE


def _check_quantile(quantile: float) -> float:
    q = float(quantile)
    if not (0.0 < q <= 1.0):
        raise ValueError(f"quantile must be in (0, 1], got {quantile}.")
    return q


def rank_responses(response: np.ndarray) -> np.ndarray:
    """
    Return flat pixel indices sorted by descending response.
    """
    scores = np.asarray(response, dtype=np.float64).ravel()
    scores = np.where(np.isfinite(scores), scores, -np.inf)
    return np.argsort(-scores, kind="stable")


def num_corners_for(shape: Tuple[int, int], quantile: float) -> int:
    """floor(m * n * quantile)"""
    q = _check_quantile(quantile)
    m, n = int(shape[0]), int(shape[1])
    return int(np.floor(m * n * q))


def select_corners(
    response: np.ndarray,
    quantile: float,
    *,
    block_size: int = BLOCK_SIZE,
    ranking: Optional[np.ndarray] = None,
) -> np.ndarray:
    """
    Greedily pick up to num_corners mutually separated pixels, strongest first.

    Parameters
    ----------
    response : np.ndarray
        2D response map.
    quantile : float
        Target fraction of all pixels, in (0, 1].
    block_size : int
        Exclusive Chebyshev distance that separates two accepted corners.
    ranking : np.ndarray, optional
        Precomputed output of rank_responses(response).

    Returns
    -------
    np.ndarray
        (k, 2) int array of (u, v) pairs in acceptance order, k <= num_corners.
    """
    response = np.asarray(response)
    if response.ndim != 2:
        raise ValueError("select_corners expects a 2D response map.")
    if int(block_size) < 1:
        raise ValueError("block_size must be >= 1.")
    block_size = int(block_size)

    m, n = response.shape
    num_corners = num_corners_for((m, n), quantile)
    if ranking is None:
        ranking = rank_responses(response)

    if num_corners == 0:
        return np.empty((0, 2), dtype=int)

    corners = []
    # blocked[u, v] is True when (u, v) lies inside the window of an accepted corner
    blocked = np.zeros((m, n), dtype=bool)
    reach = block_size - 1
    for idx in ranking:
        u, v = divmod(int(idx), n)
        if blocked[u, v]:
            continue
        corners.append((u, v))
        if len(corners) >= num_corners:
            break
        blocked[max(0, u - reach):u + reach + 1, max(0, v - reach):v + reach + 1] = True

    return np.array(corners, dtype=int).reshape(-1, 2)
