"""
Core package init for the FFT Harris corner detector.
Exposes public modules for import in tests and scripts.
"""
__all__ = [
    "settings",
    "padding",
    "fft_engine",
    "convolution",
    "gradients",
    "response",
    "selection",
    "detector",
]
