import numpy as np
from typing import Tuple


def pad_to_shape(grid: np.ndarray, shape: Tuple[int, int]) -> np.ndarray:
    """
    Embed a 2D grid into the top-left corner of a zero-filled grid of `shape`.
    Cell (i, j) keeps grid[i, j] when i < src_h and j < src_w, everything else is 0.
    """
    grid = np.asarray(grid, dtype=np.float64)
    if grid.ndim != 2:
        raise ValueError("pad_to_shape expects a 2D array.")
    src_h, src_w = grid.shape
    dst_h, dst_w = int(shape[0]), int(shape[1])
    if dst_h < src_h or dst_w < src_w:
        raise ValueError(
            f"Target shape {(dst_h, dst_w)} is smaller than source shape {(src_h, src_w)}."
        )
    padded = np.zeros((dst_h, dst_w), dtype=np.float64)
    padded[:src_h, :src_w] = grid
    return padded
