import numpy as np
from typing import Tuple

from .convolution import spectral_convolve

# Finite-difference (Sobel) kernels, horizontal and vertical
KERNEL_X = np.array([[1.0, 0.0, -1.0],
                     [2.0, 0.0, -2.0],
                     [1.0, 0.0, -1.0]])
KERNEL_Y = np.array([[1.0, 2.0, 1.0],
                     [0.0, 0.0, 0.0],
                     [-1.0, -2.0, -1.0]])
KERNEL_X.setflags(write=False)
KERNEL_Y.setflags(write=False)


def compute_gradients(image: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Return (gx, gy), the horizontal and vertical gradient maps of a 2D image."""
    gx = spectral_convolve(image, KERNEL_X)
    gy = spectral_convolve(image, KERNEL_Y)
    return gx, gy
