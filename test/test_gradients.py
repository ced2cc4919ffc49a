import numpy as np
import pytest
from core.gradients import compute_gradients, KERNEL_X, KERNEL_Y

def test_kernels_are_read_only():
    with pytest.raises(ValueError):
        KERNEL_X[0, 0] = 5.0
    assert np.array_equal(KERNEL_Y, KERNEL_X.T)

def test_horizontal_ramp():
    # I[u, v] = v -> gx = 8 in the interior, gy = 0 in the interior
    img = np.tile(np.arange(10, dtype=float), (9, 1))
    gx, gy = compute_gradients(img)
    assert gx.shape == img.shape and gy.shape == img.shape
    assert np.allclose(gx[1:-1, 1:-1], 8.0, atol=1e-9)
    assert np.allclose(gy[1:-1, 1:-1], 0.0, atol=1e-9)

def test_vertical_ramp():
    img = np.tile(np.arange(9, dtype=float)[:, None], (1, 10))
    gx, gy = compute_gradients(img)
    assert np.allclose(gy[1:-1, 1:-1], 8.0, atol=1e-9)
    assert np.allclose(gx[1:-1, 1:-1], 0.0, atol=1e-9)

def test_zero_image_gives_zero_gradients():
    gx, gy = compute_gradients(np.zeros((7, 5)))
    assert not gx.any() and not gy.any()
