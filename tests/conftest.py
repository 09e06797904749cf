"""
Pytest configuration and fixtures for bitmapkit tests
"""

import numpy as np
import pytest

from bitmapkit.config import Settings
from bitmapkit.core.bitmap import Bitmap
from bitmapkit.core.constants import Colors


@pytest.fixture
def solid():
    """Factory for single-color bitmaps"""

    def _solid(width=4, height=4, color=Colors.WHITE):
        return Bitmap.solid(width, height, color)

    return _solid


@pytest.fixture
def white_bitmap(solid):
    """4x4 opaque white bitmap"""
    return solid(4, 4, Colors.WHITE)


@pytest.fixture
def gradient_bitmap():
    """
    5x3 bitmap where every pixel is unique.

    Pixel (x, y) is (10 * x, 10 * y, x + y, 200 + x).
    """
    width, height = 5, 3
    ys, xs = np.mgrid[0:height, 0:width]
    pixels = np.stack([10 * xs, 10 * ys, xs + ys, 200 + xs], axis=-1).astype(np.uint8)
    return Bitmap.from_array(pixels)


@pytest.fixture
def random_bitmap():
    """7x5 bitmap with reproducible random content"""
    rng = np.random.default_rng(1234)
    pixels = rng.integers(0, 256, size=(5, 7, 4), dtype=np.uint8)
    return Bitmap.from_array(pixels)


@pytest.fixture
def settings():
    """Default settings, independent of the environment"""
    return Settings()


@pytest.fixture
def fake_resizer():
    """
    Resizer that records its calls and returns a buffer of the requested size.

    Set ``fake_resizer.wrong_length = True`` to make it return one byte short.
    """

    class FakeResizer:
        def __init__(self):
            self.calls = []
            self.wrong_length = False

        def __call__(self, src_width, src_height, dst_width, dst_height, buffer):
            self.calls.append((src_width, src_height, dst_width, dst_height, len(buffer)))
            size = dst_width * dst_height * 4
            if self.wrong_length:
                size -= 1
            return np.full(size, 7, dtype=np.uint8)

    return FakeResizer()
