# visuals/__init__.py
"""
Visual helpers for the corner detector.
Provides plotting and export utilities used by the scripts.
"""
from .plots import (
    plot_magnitude_spectrum,
    plot_response_map,
    plot_gradient_maps,
    corner_overlay,
    plot_corners,
)
__all__ = [
    "plot_magnitude_spectrum",
    "plot_response_map",
    "plot_gradient_maps",
    "corner_overlay",
    "plot_corners",
]
