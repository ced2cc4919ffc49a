"""
core/convolution.py

Linear 2D convolution realized in the frequency domain:
  1) zero-pad image and kernel into a common (m+1) x (n+1) grid
     (each side grown to at least 3 so the kernel fits)
  2) forward DFT of both
  3) point-wise complex product of the spectra
  4) unnormalized inverse DFT
  5) divide by the padded cell count
  6) drop the first row and the first column -> (m, n) result

The single extra row/column keeps the circular wrap-around out of the kept
region for a 3x3 kernel only. The kernel sits with its top-left tap at the
spectral origin instead of centred, which shifts the aligned result down and
right by one; step 6 undoes that shift. Both facts are specific to k == 3.
"""

from typing import Any
import numpy as np

from .padding import pad_to_shape
from .fft_engine import compute_fft, compute_ifft, multiply_spectra
from .settings import KERNEL_SIZE


def spectral_convolve(
    image: np.ndarray,
    kernel: np.ndarray,
    *,
    return_intermediates: bool = False,
) -> Any:
    """
    Convolve an (m, n) image with a 3x3 kernel and return the (m, n) result
    aligned with the image coordinates.

    Returns result, or (result, intermediates) when return_intermediates=True.
    intermediates keys: 'image_padded', 'kernel_padded', 'image_fft',
    'kernel_fft', 'product', 'conv_padded'.
    """
    image = np.asarray(image, dtype=np.float64)
    kernel = np.asarray(kernel, dtype=np.float64)
    if image.ndim != 2:
        raise ValueError("spectral_convolve expects a 2D image.")
    if kernel.shape != (KERNEL_SIZE, KERNEL_SIZE):
        raise ValueError(
            f"spectral_convolve only supports {KERNEL_SIZE}x{KERNEL_SIZE} kernels, got {kernel.shape}."
        )

    m, n = image.shape
    # at least one spare row/column, and never smaller than the kernel
    shape = (max(m + 1, KERNEL_SIZE), max(n + 1, KERNEL_SIZE))

    image_padded = pad_to_shape(image, shape)
    kernel_padded = pad_to_shape(kernel, shape)

    image_fft = compute_fft(image_padded)
    kernel_fft = compute_fft(kernel_padded)
    product = multiply_spectra(image_fft, kernel_fft)

    conv_padded = compute_ifft(product, normalize=True)

    # rows 1..m, cols 1..n; for an (m+1)x(n+1) grid this is flat i with i % (n+1) != 0 and i > n+1
    result = conv_padded[1:m + 1, 1:n + 1].copy()

    if return_intermediates:
        intermediates = {
            "image_padded": image_padded,
            "kernel_padded": kernel_padded,
            "image_fft": image_fft,
            "kernel_fft": kernel_fft,
            "product": product,
            "conv_padded": conv_padded,
        }
        return result, intermediates

    return result
