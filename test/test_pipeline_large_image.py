# test/test_pipeline_large_image.py
import numpy as np
from core.detector import detect_corners
from core.selection import num_corners_for

def test_large_pipeline():
    img = np.random.rand(256, 320)
    corners = detect_corners(img, 0.005)
    assert corners.shape == (num_corners_for(img.shape, 0.005), 2)
    assert corners.dtype.kind == "i"
