"""
Per-pixel color filters.

Each filter reads and writes only its own pixel, so the whole image is
processed as one vectorized step over the scanned region. Alpha is left
alone by everything except opacity().
"""

import logging

import numpy as np

from bitmapkit.core.bitmap import Bitmap
from bitmapkit.core.constants import BitmapConstants, FilterConstants
from bitmapkit.core.enums import SepiaMode
from bitmapkit.core.scanner import region
from bitmapkit.core.utils.params_processor import validate_params
from bitmapkit.schemas.params import OpacityParams, SepiaParams

logger = logging.getLogger(__name__)

MAX = BitmapConstants.MAX_CHANNEL_VALUE


def _whole(bitmap: Bitmap) -> np.ndarray:
    return region(bitmap, 0, 0, bitmap.width, bitmap.height)


def invert(bitmap: Bitmap) -> Bitmap:
    """Replace each color channel c with 255 - c."""
    pixels = _whole(bitmap)
    pixels[..., :3] = MAX - pixels[..., :3]

    logger.debug(f"Inverted {bitmap.width}x{bitmap.height}")
    return bitmap


def greyscale(bitmap: Bitmap) -> Bitmap:
    """Set R, G and B to floor((R + G + B) / 3)."""
    pixels = _whole(bitmap)
    grey = pixels[..., :3].sum(axis=-1, dtype=np.uint16) // 3
    pixels[..., :3] = grey[..., None].astype(np.uint8)

    logger.debug(f"Greyscaled {bitmap.width}x{bitmap.height}")
    return bitmap


def sepia(bitmap: Bitmap, mode: SepiaMode = SepiaMode.CHAINED) -> Bitmap:
    """
    Apply a sepia tone.

    In CHAINED mode the green row of the matrix is evaluated with the new
    (unclamped) red value and the blue row with the new red and green,
    matching the long-standing output of this filter. STANDARD mode uses
    the original (R, G, B) for all three rows. Results are clamped at 255
    and truncated.

    Args:
        bitmap: Bitmap to tone (modified)
        mode: SepiaMode.CHAINED or SepiaMode.STANDARD

    Returns:
        The toned bitmap
    """
    params = validate_params(SepiaParams, mode=mode)

    pixels = _whole(bitmap)
    rgb = pixels[..., :3].astype(np.float64)
    green, blue = rgb[..., 1], rgb[..., 2]

    new_red = np.dot(rgb, FilterConstants.SEPIA_RED)
    if params.mode == SepiaMode.CHAINED:
        kr, kg, kb = FilterConstants.SEPIA_GREEN
        new_green = new_red * kr + green * kg + blue * kb
        kr, kg, kb = FilterConstants.SEPIA_BLUE
        new_blue = new_red * kr + new_green * kg + blue * kb
    else:
        new_green = np.dot(rgb, FilterConstants.SEPIA_GREEN)
        new_blue = np.dot(rgb, FilterConstants.SEPIA_BLUE)

    toned = np.stack([new_red, new_green, new_blue], axis=-1)
    pixels[..., :3] = np.minimum(toned, MAX).astype(np.uint8)

    logger.debug(f"Sepia ({params.mode.value}) on {bitmap.width}x{bitmap.height}")
    return bitmap


def opacity(bitmap: Bitmap, factor: float) -> Bitmap:
    """
    Multiply the alpha channel by ``factor``.

    Args:
        bitmap: Bitmap to fade (modified)
        factor: Multiplier in [0, 1]; the result is floored

    Returns:
        The faded bitmap

    Raises:
        InvalidArgumentError: If factor is not a number in [0, 1]
    """
    params = validate_params(OpacityParams, factor=factor)

    pixels = _whole(bitmap)
    alpha = pixels[..., BitmapConstants.ALPHA_OFFSET].astype(np.float64)
    pixels[..., BitmapConstants.ALPHA_OFFSET] = np.floor(alpha * params.factor).astype(np.uint8)

    logger.debug(f"Opacity x{params.factor} on {bitmap.width}x{bitmap.height}")
    return bitmap
