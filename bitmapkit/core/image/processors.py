"""
Image resizing operations.

Handles the glue between a Bitmap and the resampling collaborator:
- BilinearResizer: default resampler backed by OpenCV
- resize: rounds the target size and swaps in the resampled buffer
- scale: uniform resize by a factor
"""

import logging
from typing import Callable, Optional

import cv2
import numpy as np

from bitmapkit.core.bitmap import Bitmap
from bitmapkit.core.constants import BitmapConstants
from bitmapkit.core.exceptions import InvalidArgumentError
from bitmapkit.core.utils.params_processor import validate_params
from bitmapkit.schemas.params import ResizeParams, ScaleParams

logger = logging.getLogger(__name__)

# resizer(src_width, src_height, dst_width, dst_height, buffer) -> buffer
Resizer = Callable[[int, int, int, int, np.ndarray], np.ndarray]


class BilinearResizer:
    """Bilinear resampler over flat RGBA8 buffers."""

    def __init__(self, interpolation: int = cv2.INTER_LINEAR):
        """
        Initialize BilinearResizer

        Args:
            interpolation: OpenCV interpolation flag
        """
        self.interpolation = interpolation

    def __call__(
        self, src_width: int, src_height: int, dst_width: int, dst_height: int, buffer: np.ndarray
    ) -> np.ndarray:
        """
        Resample a buffer.

        Args:
            src_width: Source width
            src_height: Source height
            dst_width: Target width
            dst_height: Target height
            buffer: Flat RGBA8 source buffer

        Returns:
            Flat RGBA8 buffer of dst_width * dst_height * 4 bytes
        """
        image = np.asarray(buffer, dtype=np.uint8).reshape(
            src_height, src_width, BitmapConstants.CHANNELS
        )
        resized = cv2.resize(image, (dst_width, dst_height), interpolation=self.interpolation)
        return resized.reshape(-1)


_default_resizer = BilinearResizer()


def resize(bitmap: Bitmap, width: float, height: float, resizer: Optional[Resizer] = None) -> Bitmap:
    """
    Resize bitmap to the given dimensions.

    Args:
        bitmap: Bitmap to resize (modified)
        width: Target width, rounded half up
        height: Target height, rounded half up
        resizer: Resampling collaborator (defaults to BilinearResizer)

    Returns:
        The resized bitmap

    Raises:
        InvalidArgumentError: If the size is not numeric, rounds below 1 pixel,
            or the resizer returns a buffer of the wrong length
    """
    params = validate_params(ResizeParams, width=width, height=height)
    target_width, target_height = params.rounded()

    if target_width < 1 or target_height < 1:
        raise InvalidArgumentError(
            f"Resize target {params.width}x{params.height} rounds to "
            f"{target_width}x{target_height}; both sides must be at least 1"
        )

    resizer = resizer or _default_resizer
    buffer = resizer(bitmap.width, bitmap.height, target_width, target_height, bitmap.data)

    try:
        bitmap.replace(buffer, target_width, target_height)
    except InvalidArgumentError:
        logger.error(
            f"Resizer returned an invalid buffer for {target_width}x{target_height}"
        )
        raise

    logger.debug(f"Resized to {target_width}x{target_height}")
    return bitmap


def scale(bitmap: Bitmap, factor: float, resizer: Optional[Resizer] = None) -> Bitmap:
    """
    Uniformly scale the bitmap.

    Args:
        bitmap: Bitmap to scale (modified)
        factor: Non-negative scale factor
        resizer: Resampling collaborator (defaults to BilinearResizer)

    Returns:
        The scaled bitmap
    """
    params = validate_params(ScaleParams, factor=factor)
    return resize(bitmap, bitmap.width * params.factor, bitmap.height * params.factor, resizer)
