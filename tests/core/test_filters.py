"""
Tests for per-pixel color filters
"""

import numpy as np
import pytest

from bitmapkit.core import filters
from bitmapkit.core.bitmap import Bitmap
from bitmapkit.core.constants import Colors
from bitmapkit.core.enums import SepiaMode
from bitmapkit.core.exceptions import InvalidArgumentError


class TestInvert:
    """Test color inversion"""

    def test_white_becomes_black(self, white_bitmap):
        """Test opaque white inverts to opaque black"""
        filters.invert(white_bitmap)

        assert all(white_bitmap.get_pixel(x, y) == Colors.BLACK for x in range(4) for y in range(4))

    def test_alpha_untouched(self):
        """Test only R, G and B change"""
        bitmap = Bitmap([10, 20, 30, 40], 1, 1)
        filters.invert(bitmap)
        assert bitmap.get_pixel(0, 0) == (245, 235, 225, 40)

    def test_double_invert_is_identity(self, random_bitmap):
        """Test inverting twice restores the image"""
        original = random_bitmap.to_array()

        filters.invert(random_bitmap)
        filters.invert(random_bitmap)

        np.testing.assert_array_equal(random_bitmap.pixels, original)

    def test_returns_bitmap(self, white_bitmap):
        assert filters.invert(white_bitmap) is white_bitmap


class TestGreyscale:
    """Test channel averaging"""

    def test_average(self):
        """Test (30, 60, 90) becomes (60, 60, 60)"""
        bitmap = Bitmap([30, 60, 90, 255], 1, 1)
        filters.greyscale(bitmap)
        assert bitmap.get_pixel(0, 0) == (60, 60, 60, 255)

    def test_floor(self):
        """Test the average is floored"""
        bitmap = Bitmap([1, 1, 2, 9, 255, 255, 254, 0], 2, 1)

        filters.greyscale(bitmap)

        assert bitmap.get_pixel(0, 0) == (1, 1, 1, 9)
        assert bitmap.get_pixel(1, 0) == (254, 254, 254, 0)

    def test_no_overflow(self, white_bitmap):
        """Test 255 + 255 + 255 does not wrap"""
        filters.greyscale(white_bitmap)
        assert white_bitmap.get_pixel(3, 3) == Colors.WHITE

    def test_idempotent(self, random_bitmap):
        """Test greyscaling a grey image changes nothing"""
        filters.greyscale(random_bitmap)
        once = random_bitmap.to_array()

        filters.greyscale(random_bitmap)

        np.testing.assert_array_equal(random_bitmap.pixels, once)


class TestSepia:
    """Test sepia toning"""

    def test_chained_default(self):
        """Test the green and blue rows see the updated channels"""
        bitmap = Bitmap([100, 50, 20, 255], 1, 1)

        filters.sepia(bitmap)

        # red = 39.3 + 38.45 + 3.78 = 81.53
        # green = 81.53 * 0.349 + 50 * 0.686 + 20 * 0.168 = 66.114...
        # blue = 81.53 * 0.272 + 66.114 * 0.534 + 20 * 0.131 = 60.092...
        assert bitmap.get_pixel(0, 0) == (81, 66, 60, 255)

    def test_standard(self):
        """Test every row uses the original color"""
        bitmap = Bitmap([100, 50, 20, 255], 1, 1)

        filters.sepia(bitmap, SepiaMode.STANDARD)

        # green = 34.9 + 34.3 + 3.36 = 72.56, blue = 27.2 + 26.7 + 2.62 = 56.52
        assert bitmap.get_pixel(0, 0) == (81, 72, 56, 255)

    def test_clamped(self, white_bitmap):
        """Test values above 255 are clamped"""
        filters.sepia(white_bitmap)
        assert white_bitmap.get_pixel(0, 0) == (255, 255, 255, 255)

    def test_black_stays_black(self, solid):
        bitmap = solid(2, 2, (0, 0, 0, 17))
        filters.sepia(bitmap, SepiaMode.STANDARD)
        assert bitmap.get_pixel(1, 1) == (0, 0, 0, 17)

    def test_mode_from_string(self):
        """Test the mode may be given by value"""
        bitmap = Bitmap([100, 50, 20, 255], 1, 1)
        filters.sepia(bitmap, "standard")
        assert bitmap.get_pixel(0, 0) == (81, 72, 56, 255)

    def test_invalid_mode(self, white_bitmap):
        with pytest.raises(InvalidArgumentError):
            filters.sepia(white_bitmap, "vintage")


class TestOpacity:
    """Test alpha scaling"""

    @pytest.mark.parametrize(
        "factor,alpha",
        [
            (1, 200),
            (0.5, 100),
            (0.25, 50),
            (0.333, 66),
            (0, 0),
        ],
    )
    def test_factor(self, solid, factor, alpha):
        """Test alpha is multiplied and floored"""
        bitmap = solid(2, 2, (10, 20, 30, 200))

        filters.opacity(bitmap, factor)

        assert bitmap.get_pixel(1, 1) == (10, 20, 30, alpha)

    @pytest.mark.parametrize("factor", [-0.1, 1.01, "0.5", None, True, float("nan")])
    def test_invalid_factor_leaves_bitmap_untouched(self, white_bitmap, factor):
        """Test out-of-range or non-numeric factors fail before any change"""
        with pytest.raises(InvalidArgumentError):
            filters.opacity(white_bitmap, factor)

        assert white_bitmap.get_pixel(0, 0) == Colors.WHITE
