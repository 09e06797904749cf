"""
Image format conversion utilities.

Handles conversions between a Bitmap and the outside world:
- PNG/JPEG byte streams (decode/encode via Pillow)
- PIL Images (RGBA)
- NumPy arrays (OpenCV BGR, BGRA or grayscale)
- Base64 encoded strings
"""

import base64
import io
import logging
from typing import Any, Union

import cv2
import numpy as np
from PIL import Image

from bitmapkit.core.bitmap import Bitmap
from bitmapkit.core.constants import CodecConstants
from bitmapkit.core.enums import MimeType
from bitmapkit.core.exceptions import InvalidArgumentError, UnsupportedFormatError
from bitmapkit.core.utils.enum_converter import parse_enum
from bitmapkit.core.utils.params_processor import validate_params
from bitmapkit.schemas.params import QualityParams

logger = logging.getLogger(__name__)

# Pillow format names per MIME type
PIL_FORMATS = {
    MimeType.PNG: "PNG",
    MimeType.JPEG: "JPEG",
}


def resolve_mime(mime: Union[str, MimeType]) -> MimeType:
    """
    Parse a MIME type string, case-insensitively.

    Raises:
        UnsupportedFormatError: If the type is not PNG or JPEG
    """
    resolved = parse_enum(mime, MimeType, None, normalize=True)
    if resolved is None:
        raise UnsupportedFormatError(mime)
    return resolved


class ImageConverters:
    """Utilities for converting between bitmaps and image formats."""

    @staticmethod
    def pil_to_bitmap(image: Image.Image) -> Bitmap:
        """
        Convert PIL Image to Bitmap.

        Args:
            image: PIL Image in any mode

        Returns:
            Bitmap holding the image as RGBA8
        """
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        return Bitmap.from_array(np.asarray(image, dtype=np.uint8))

    @staticmethod
    def bitmap_to_pil(bitmap: Bitmap) -> Image.Image:
        """
        Convert Bitmap to PIL Image.

        Args:
            bitmap: Source bitmap

        Returns:
            PIL Image in RGBA mode (independent copy of the pixels)
        """
        return Image.fromarray(bitmap.to_array())

    @staticmethod
    def numpy_to_bitmap(image: np.ndarray, bgr: bool = True) -> Bitmap:
        """
        Convert NumPy array to Bitmap.

        Args:
            image: uint8 array, grayscale (h, w), 3 or 4 channels
            bgr: If True, treat color arrays as OpenCV BGR(A), else RGB(A)

        Returns:
            Bitmap holding the image as RGBA8
        """
        if image.dtype != np.uint8:
            raise InvalidArgumentError(f"Expected uint8 image, got {image.dtype}")

        if image.ndim == 2:
            rgba = cv2.cvtColor(image, cv2.COLOR_GRAY2RGBA)
        elif image.ndim == 3 and image.shape[2] == 3:
            rgba = cv2.cvtColor(image, cv2.COLOR_BGR2RGBA if bgr else cv2.COLOR_RGB2RGBA)
        elif image.ndim == 3 and image.shape[2] == 4:
            rgba = cv2.cvtColor(image, cv2.COLOR_BGRA2RGBA) if bgr else image
        else:
            raise InvalidArgumentError(f"Unsupported image shape: {image.shape}")

        return Bitmap.from_array(rgba)

    @staticmethod
    def bitmap_to_numpy(bitmap: Bitmap, bgr: bool = True) -> np.ndarray:
        """
        Convert Bitmap to NumPy array.

        Args:
            bitmap: Source bitmap
            bgr: If True, return OpenCV BGRA order, else RGBA

        Returns:
            (height, width, 4) uint8 array
        """
        if bgr:
            return cv2.cvtColor(bitmap.pixels, cv2.COLOR_RGBA2BGRA)
        return bitmap.to_array()

    @staticmethod
    def decode(data: bytes, mime: Union[str, MimeType]) -> Bitmap:
        """
        Decode PNG or JPEG bytes.

        Args:
            data: Encoded image
            mime: MIME type of the data

        Returns:
            Decoded Bitmap (RGBA8)

        Raises:
            UnsupportedFormatError: If mime is not PNG or JPEG
            InvalidArgumentError: If data is not bytes
        """
        resolved = resolve_mime(mime)
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise InvalidArgumentError(f"data must be bytes, got {type(data).__name__}")

        try:
            with Image.open(io.BytesIO(data), formats=[PIL_FORMATS[resolved]]) as image:
                image.load()
                bitmap = ImageConverters.pil_to_bitmap(image)
        except Exception as e:
            logger.error(f"Failed to decode {resolved.value} image: {e}")
            raise

        logger.debug(f"Decoded {resolved.value} {bitmap.width}x{bitmap.height}")
        return bitmap

    @staticmethod
    def encode(
        bitmap: Bitmap,
        mime: Union[str, MimeType],
        quality: int = CodecConstants.DEFAULT_QUALITY,
    ) -> bytes:
        """
        Encode a bitmap as PNG or JPEG.

        Args:
            bitmap: Source bitmap
            mime: Target MIME type
            quality: JPEG quality (0-100, ignored for PNG)

        Returns:
            Encoded bytes

        Raises:
            UnsupportedFormatError: If mime is not PNG or JPEG
            InvalidArgumentError: If quality is outside 0-100
        """
        resolved = resolve_mime(mime)
        params = validate_params(QualityParams, quality=quality)

        try:
            image = ImageConverters.bitmap_to_pil(bitmap)
            buffer = io.BytesIO()
            save_kwargs: dict = {"format": PIL_FORMATS[resolved]}

            if resolved == MimeType.JPEG:
                # JPEG has no alpha channel
                image = image.convert("RGB")
                save_kwargs["quality"] = params.quality

            image.save(buffer, **save_kwargs)
            return buffer.getvalue()

        except Exception as e:
            logger.error(f"Failed to encode image as {resolved.value}: {e}")
            raise

    @staticmethod
    def to_base64(
        image: Union[Bitmap, bytes], mime: Union[str, MimeType] = MimeType.PNG, quality: int = 85
    ) -> str:
        """
        Convert image to base64 string.

        Args:
            image: Bitmap or already encoded bytes
            mime: Format used when encoding a Bitmap
            quality: JPEG quality (ignored for PNG)

        Returns:
            Base64 encoded string
        """
        if isinstance(image, (bytes, bytearray)):
            return base64.b64encode(image).decode("utf-8")

        encoded = ImageConverters.encode(image, mime, quality)
        return base64.b64encode(encoded).decode("utf-8")

    @staticmethod
    def from_base64(base64_string: str, mime: Union[str, MimeType] = MimeType.PNG) -> Bitmap:
        """
        Convert base64 string to Bitmap.

        Args:
            base64_string: Base64 encoded PNG or JPEG
            mime: Format of the encoded image

        Returns:
            Decoded Bitmap
        """
        try:
            image_bytes = base64.b64decode(base64_string)
        except Exception as e:
            logger.error(f"Failed to decode base64 image: {e}")
            raise InvalidArgumentError(f"Invalid base64 data: {e}") from e

        return ImageConverters.decode(image_bytes, mime)


def as_bitmap(image: Any) -> Bitmap:
    """Accept a Bitmap or a PIL Image and return a Bitmap."""
    if isinstance(image, Bitmap):
        return image
    if isinstance(image, Image.Image):
        return ImageConverters.pil_to_bitmap(image)
    raise InvalidArgumentError(f"Expected Bitmap or PIL Image, got {type(image).__name__}")
