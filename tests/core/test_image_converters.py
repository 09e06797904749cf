"""
Tests for codec and format conversions
"""

import io

import numpy as np
import pytest
from PIL import Image, UnidentifiedImageError

from bitmapkit.core.bitmap import Bitmap
from bitmapkit.core.constants import Colors
from bitmapkit.core.enums import MimeType
from bitmapkit.core.exceptions import InvalidArgumentError, UnsupportedFormatError
from bitmapkit.core.image.converters import ImageConverters, as_bitmap, resolve_mime


class TestResolveMime:
    """Test MIME type parsing"""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("image/png", MimeType.PNG),
            ("IMAGE/JPEG", MimeType.JPEG),
            (" image/png ", MimeType.PNG),
            (MimeType.JPEG, MimeType.JPEG),
        ],
    )
    def test_supported(self, value, expected):
        assert resolve_mime(value) is expected

    @pytest.mark.parametrize("value", ["image/gif", "png", "", None])
    def test_unsupported(self, value):
        with pytest.raises(UnsupportedFormatError):
            resolve_mime(value)


class TestPilConversion:
    """Test PIL <-> Bitmap"""

    def test_round_trip(self, gradient_bitmap):
        image = ImageConverters.bitmap_to_pil(gradient_bitmap)

        assert image.mode == "RGBA"
        assert image.size == (5, 3)
        assert image.getpixel((3, 2)) == (30, 20, 5, 203)

        back = ImageConverters.pil_to_bitmap(image)
        np.testing.assert_array_equal(back.pixels, gradient_bitmap.pixels)

    def test_rgb_gains_opaque_alpha(self):
        """Test images without alpha are converted to opaque RGBA"""
        image = Image.new("RGB", (2, 2), (10, 20, 30))

        bitmap = ImageConverters.pil_to_bitmap(image)

        assert bitmap.get_pixel(1, 1) == (10, 20, 30, 255)

    def test_as_bitmap(self, white_bitmap):
        """Test Bitmaps pass through and PIL images are converted"""
        assert as_bitmap(white_bitmap) is white_bitmap
        assert as_bitmap(Image.new("L", (3, 1), 9)).get_pixel(2, 0) == (9, 9, 9, 255)

        with pytest.raises(InvalidArgumentError):
            as_bitmap(np.zeros((2, 2, 4), dtype=np.uint8))


class TestNumpyConversion:
    """Test OpenCV arrays <-> Bitmap"""

    def test_bgr(self):
        """Test BGR arrays are reordered and made opaque"""
        image = np.zeros((2, 3, 3), dtype=np.uint8)
        image[..., 0] = 200  # blue

        bitmap = ImageConverters.numpy_to_bitmap(image)

        assert bitmap.size == (3, 2)
        assert bitmap.get_pixel(0, 0) == (0, 0, 200, 255)

    def test_rgb(self):
        image = np.zeros((1, 1, 3), dtype=np.uint8)
        image[..., 0] = 200

        bitmap = ImageConverters.numpy_to_bitmap(image, bgr=False)

        assert bitmap.get_pixel(0, 0) == (200, 0, 0, 255)

    def test_grayscale(self):
        image = np.full((2, 2), 77, dtype=np.uint8)
        bitmap = ImageConverters.numpy_to_bitmap(image)
        assert bitmap.get_pixel(1, 0) == (77, 77, 77, 255)

    def test_bgra_round_trip(self, gradient_bitmap):
        array = ImageConverters.bitmap_to_numpy(gradient_bitmap)

        assert array.shape == (3, 5, 4)
        assert tuple(array[2, 3]) == (5, 20, 30, 203)

        back = ImageConverters.numpy_to_bitmap(array)
        np.testing.assert_array_equal(back.pixels, gradient_bitmap.pixels)

    def test_rejects_other_dtypes(self):
        with pytest.raises(InvalidArgumentError):
            ImageConverters.numpy_to_bitmap(np.zeros((2, 2, 3), dtype=np.float32))

    def test_rejects_other_shapes(self):
        with pytest.raises(InvalidArgumentError):
            ImageConverters.numpy_to_bitmap(np.zeros((2, 2, 2), dtype=np.uint8))


class TestCodec:
    """Test PNG/JPEG encode and decode"""

    def test_png_is_lossless(self, random_bitmap):
        data = ImageConverters.encode(random_bitmap, MimeType.PNG)

        assert data[:8] == b"\x89PNG\r\n\x1a\n"
        decoded = ImageConverters.decode(data, "image/png")
        np.testing.assert_array_equal(decoded.pixels, random_bitmap.pixels)

    def test_jpeg_drops_alpha(self, solid):
        """Test JPEG output decodes as opaque"""
        bitmap = solid(8, 8, (120, 60, 200, 10))

        data = ImageConverters.encode(bitmap, "image/jpeg", quality=95)

        assert data[:2] == b"\xff\xd8"
        decoded = ImageConverters.decode(data, MimeType.JPEG)
        r, g, b, a = decoded.get_pixel(4, 4)
        assert a == 255
        assert abs(r - 120) <= 4 and abs(g - 60) <= 4 and abs(b - 200) <= 4

    def test_jpeg_quality_affects_size(self, random_bitmap):
        big = ImageConverters.encode(random_bitmap, MimeType.JPEG, quality=100)
        small = ImageConverters.encode(random_bitmap, MimeType.JPEG, quality=5)
        assert len(small) < len(big)

    @pytest.mark.parametrize("quality", [-1, 101, 50.5, "80"])
    def test_invalid_quality(self, white_bitmap, quality):
        with pytest.raises(InvalidArgumentError):
            ImageConverters.encode(white_bitmap, MimeType.JPEG, quality=quality)

    def test_unsupported_mime(self, white_bitmap):
        with pytest.raises(UnsupportedFormatError):
            ImageConverters.encode(white_bitmap, "image/bmp")
        with pytest.raises(UnsupportedFormatError):
            ImageConverters.decode(b"", "image/gif")

    def test_decode_rejects_non_bytes(self):
        with pytest.raises(InvalidArgumentError):
            ImageConverters.decode("not bytes", MimeType.PNG)

    def test_decode_format_mismatch(self, white_bitmap):
        """Test PNG data is not accepted as JPEG"""
        data = ImageConverters.encode(white_bitmap, MimeType.PNG)
        with pytest.raises(UnidentifiedImageError):
            ImageConverters.decode(data, MimeType.JPEG)

    def test_decode_palette_png(self):
        """Test paletted images are expanded to RGBA"""
        image = Image.new("P", (2, 2), 0)
        image.putpalette([255, 0, 0] + [0, 0, 0] * 255)
        buffer = io.BytesIO()
        image.save(buffer, format="PNG")

        bitmap = ImageConverters.decode(buffer.getvalue(), MimeType.PNG)

        assert bitmap.get_pixel(0, 0) == Colors.RED


class TestBase64:
    """Test base64 helpers"""

    def test_round_trip(self, gradient_bitmap):
        encoded = ImageConverters.to_base64(gradient_bitmap)

        assert isinstance(encoded, str)
        decoded = ImageConverters.from_base64(encoded)
        np.testing.assert_array_equal(decoded.pixels, gradient_bitmap.pixels)

    def test_encoded_bytes_pass_through(self):
        assert ImageConverters.to_base64(b"abc") == "YWJj"

    def test_invalid_base64(self):
        with pytest.raises(InvalidArgumentError):
            ImageConverters.from_base64("abc")

    def test_defaults_to_png(self):
        """Test both helpers default to lossless PNG"""
        bitmap = Bitmap.solid(2, 1, Colors.GREEN)
        decoded = ImageConverters.from_base64(ImageConverters.to_base64(bitmap))
        assert decoded.get_pixel(1, 0) == Colors.GREEN
