"""
visuals/plots.py

Plotting utilities for gradient maps, response maps, spectra and detected corners.

APIs:
- plot_magnitude_spectrum(F, out_path=None, log=True)
- plot_response_map(response, out_path=None, log=True)
- plot_gradient_maps(gx, gy, out_path=None, titles=None)
- corner_overlay(shape, corners) -> np.ndarray (H,W,4) uint8
- plot_corners(image, corners, out_path=None, title=None)

Notes:
- This module uses matplotlib and Pillow. It does not modify core behavior.
- If out_path is None, functions return the matplotlib Figure object or a
  normalized array (caller can save or display).
"""

from typing import Optional, Sequence, Tuple
import os
import numpy as np
import matplotlib.pyplot as plt
from PIL import Image
from core.fft_engine import magnitude_spectrum

# Overlay colours (RGBA): translucent gray background, opaque green corners
OVERLAY_BACKGROUND = (180, 180, 180, 60)
OVERLAY_CORNER = (0, 255, 0, 255)


# Helper to ensure outdir exists
def _ensure_outdir(out_path: Optional[str]):
    if out_path is None:
        return None
    d = os.path.dirname(out_path)
    if d:
        os.makedirs(d, exist_ok=True)
    return out_path


def _normalize(a: np.ndarray) -> np.ndarray:
    """Map finite values to 0..1; non-finite values become 0."""
    a = np.array(a, dtype=np.float64, copy=True)
    finite = np.isfinite(a)
    if not finite.any():
        return np.zeros_like(a)
    amin = float(a[finite].min())
    amax = float(a[finite].max())
    out = np.zeros_like(a)
    if amax > amin:
        out[finite] = (a[finite] - amin) / (amax - amin)
    return out


def _save_raw_array_image(out_path: Optional[str], arr: np.ndarray, log_scale: bool = False):
    """
    Save a 2D numeric array as a raw grayscale PNG. No Matplotlib involved.
    - complex input uses magnitude
    - log_scale: apply log1p(|a|) before normalization
    """
    if out_path is None:
        return None

    _ensure_outdir(out_path)

    a = np.array(arr, copy=True)
    if np.iscomplexobj(a):
        a = np.abs(a)
    if log_scale:
        a = np.log1p(np.abs(a))
    a = np.squeeze(a)
    if a.ndim != 2:
        raise ValueError("_save_raw_array_image expects a 2D array.")

    img_arr = (np.clip(_normalize(a) * 255.0, 0, 255)).astype(np.uint8)
    Image.fromarray(img_arr).save(out_path)
    return out_path


def _save_or_return(fig: plt.Figure, out_path: Optional[str]):
    if out_path is not None:
        _ensure_outdir(out_path)
        fig.savefig(out_path, bbox_inches="tight")
        plt.close(fig)
        return out_path
    else:
        return fig


def plot_magnitude_spectrum(
    F: np.ndarray,
    out_path: Optional[str] = None,
    log: bool = True,
):
    """
    Save raw magnitude spectrum image (log-scaled by default).
    If out_path is None -> return the normalized 2D float array.
    """
    mag = magnitude_spectrum(F, log=log)
    if out_path is not None:
        return _save_raw_array_image(out_path, mag, log_scale=False)
    return _normalize(mag)


def plot_response_map(
    response: np.ndarray,
    out_path: Optional[str] = None,
    log: bool = True,
):
    """
    Save the corner response map as a grayscale PNG.
    Responses span several orders of magnitude, so log1p is applied by default.
    """
    if out_path is not None:
        return _save_raw_array_image(out_path, response, log_scale=log)
    a = np.log1p(np.abs(response)) if log else response
    return _normalize(a)


def plot_gradient_maps(
    gx: np.ndarray,
    gy: np.ndarray,
    out_path: Optional[str] = None,
    titles: Optional[Sequence[str]] = None,
):
    """
    Horizontal (left) | Vertical (right) gradient maps with a diverging colormap.
    """
    titles = titles or ("Gradient x", "Gradient y")
    fig, axs = plt.subplots(1, 2, figsize=(10, 5))
    for ax, g, title in zip(axs, (gx, gy), titles):
        lim = float(np.nanmax(np.abs(g))) or 1.0
        ax.imshow(g, cmap="RdBu_r", vmin=-lim, vmax=lim, interpolation="nearest")
        ax.set_title(title)
        ax.axis("off")
    return _save_or_return(fig, out_path)


def corner_overlay(shape: Tuple[int, int], corners: np.ndarray) -> np.ndarray:
    """
    RGBA overlay of `shape`: translucent gray everywhere, opaque green at each corner.
    """
    m, n = int(shape[0]), int(shape[1])
    overlay = np.empty((m, n, 4), dtype=np.uint8)
    overlay[...] = OVERLAY_BACKGROUND
    pts = np.asarray(corners, dtype=int).reshape(-1, 2)
    if pts.size:
        overlay[pts[:, 0], pts[:, 1]] = OVERLAY_CORNER
    return overlay


def plot_corners(
    image: np.ndarray,
    corners: np.ndarray,
    out_path: Optional[str] = None,
    title: Optional[str] = "Detected corners",
):
    """
    Grayscale image with the detected corners marked, strongest first in a brighter colour.
    """
    pts = np.asarray(corners, dtype=int).reshape(-1, 2)
    fig, ax = plt.subplots(figsize=(8, 8))
    ax.imshow(image, cmap="gray", interpolation="nearest")
    if len(pts):
        order = np.arange(len(pts))
        ax.scatter(pts[:, 1], pts[:, 0], c=order, cmap="autumn", s=18, marker="+")
    if title:
        ax.set_title(f"{title} ({len(pts)})")
    ax.axis("off")
    return _save_or_return(fig, out_path)
