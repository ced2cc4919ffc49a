'''
FFT engine helpers.

Functions:
- compute_fft: unnormalized forward 2D DFT of a single-channel grid (returns complex array)
- compute_ifft: unnormalized inverse 2D DFT, returns real part (optionally divided by cell count)
- multiply_spectra: point-wise complex product of two spectra
- magnitude_spectrum: log-scaled magnitude for visualization

Neither direction of the transform pair is scaled: ifft(fft(g)) == g.size * g.
Callers divide by the cell count once.
'''

import numpy as np
import warnings

from .settings import IMAG_TOL


def compute_fft(grid: np.ndarray) -> np.ndarray:
    """
    Compute the forward 2D DFT of a grid (single channel, 2D object).
    Raises ValueError for non-2D inputs.
    """
    if grid.ndim != 2:
        raise ValueError("compute_fft expects a 2D array.")
    return np.fft.fft2(grid)


def compute_ifft(
    F: np.ndarray,
    normalize: bool = False,
    imag_tol: float = IMAG_TOL,
    suppress_warning: bool = True,
) -> np.ndarray:
    """
    Compute the unnormalized inverse 2D DFT and return the real part.
    With normalize=True the result is divided by the number of cells.
    Warns if the imaginary part is larger than imag_tol (relative to the real magnitude).
    """
    if F.ndim != 2:
        raise ValueError("compute_ifft expects a 2D frequency-domain array.")
    # norm="forward" puts the 1/N factor on the forward transform, leaving ifft2 unscaled
    back = np.fft.ifft2(F, norm="forward")
    if normalize:
        back = back / F.size
    if not suppress_warning:
        imag_max = float(np.max(np.abs(np.imag(back))))
        scale = max(1.0, float(np.max(np.abs(np.real(back)))))
        if imag_max > imag_tol * scale:
            warnings.warn(
                f"Inverse FFT has non-negligible imaginary component (max abs = {imag_max}). "
                "Returning real part but consider checking your frequency-domain input.",
                RuntimeWarning
            )
    return np.real(back)


def multiply_spectra(A: np.ndarray, B: np.ndarray) -> np.ndarray:
    """
    Point-wise complex product (a+bi)(c+di) = (ac - bd) + (ad + bc)i.
    """
    if A.shape != B.shape:
        raise ValueError("Spectra must have the same shape for point-wise multiplication.")
    a, b = np.real(A), np.imag(A)
    c, d = np.real(B), np.imag(B)
    return (a * c - b * d) + 1j * (a * d + b * c)


def magnitude_spectrum(F: np.ndarray, log: bool = True, eps: float = 1e-8) -> np.ndarray:
    """
    Return magnitude spectrum for visualization.
    If log is True, returns log1p(abs(F)+eps).
    """
    mag = np.abs(F)
    if log:
        return np.log1p(mag + eps)
    return mag
