"""
Configuration constants for the corner detector.

Functions accept keyword overrides for all of these; scripts map their CLI
flags onto the same names.
"""

# Fraction of all pixels requested as corners (value used by the camera app)
DEFAULT_QUANTILE = 0.005

# Half-width (exclusive) of the suppression window around an accepted corner.
# 4 -> a 7x7 window centred on the corner.
BLOCK_SIZE = 4

# Side of the finite-difference kernels. The de-padding offset in
# core.convolution only holds for this size.
KERNEL_SIZE = 3

# Frame subsampling applied before detection (every 2nd row and column)
DOWNSCALE_FACTOR = 2

# Imaginary residue tolerated after the inverse transform before warning
IMAG_TOL = 1e-9

RESULTS_DIR = "results"
