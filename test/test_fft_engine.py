import numpy as np
import pytest
from core.fft_engine import (
    compute_fft, compute_ifft, multiply_spectra, magnitude_spectrum
)

def test_fft_input_validation():
    arr = np.zeros((16, 16, 3))
    with pytest.raises(ValueError):
        compute_fft(arr)

def test_ifft_is_unnormalized():
    img = np.random.rand(12, 9)
    back = compute_ifft(compute_fft(img))
    assert np.allclose(back, img * img.size, atol=1e-8)

def test_fft_ifft_roundtrip_divided_by_cell_count():
    img = np.random.rand(33, 20)
    back = compute_ifft(compute_fft(img)) / img.size
    assert back.shape == img.shape
    assert np.allclose(img, back, atol=1e-10)

def test_ifft_normalize_flag():
    img = np.random.rand(8, 8)
    back = compute_ifft(compute_fft(img), normalize=True)
    assert np.allclose(img, back, atol=1e-12)

def test_ifft_warns_on_imaginary_residue():
    F = np.zeros((8, 8), dtype=complex)
    F[1, 2] = 1.0  # not Hermitian -> complex spatial result
    with pytest.warns(RuntimeWarning):
        compute_ifft(F, suppress_warning=False)

def test_multiply_spectra_matches_complex_product():
    A = np.random.rand(6, 7) + 1j * np.random.rand(6, 7)
    B = np.random.rand(6, 7) + 1j * np.random.rand(6, 7)
    assert np.allclose(multiply_spectra(A, B), A * B)

def test_multiply_spectra_shape_mismatch():
    with pytest.raises(ValueError):
        multiply_spectra(np.zeros((4, 4), complex), np.zeros((4, 5), complex))

def test_magnitude_spectrum_basic():
    img = np.random.rand(32, 32)
    F = compute_fft(img)
    mag = magnitude_spectrum(F, log=True)
    assert mag.shape == img.shape
    assert np.all(mag >= 0)
