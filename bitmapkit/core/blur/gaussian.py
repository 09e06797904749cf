"""
Exact Gaussian blur.

Direct 2-D convolution with a Gaussian kernel truncated at
ceil(radius * 2.57), the distance past which weights are negligible.
Cost is O(width * height * radius^2): this is the reference result the
fast box blur is measured against, not the production path.
"""

import logging
import math
from typing import Callable, Optional

import numpy as np

from bitmapkit.core.bitmap import Bitmap
from bitmapkit.core.constants import BitmapConstants, BlurConstants
from bitmapkit.core.utils.params_processor import validate_params
from bitmapkit.schemas.params import GaussianParams

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[float], None]


def significant_radius(radius: float) -> int:
    """Half-width of the truncated kernel."""
    return math.ceil(radius * BlurConstants.GAUSSIAN_SIGNIFICANT_FACTOR)


def gaussian_weight(dx: int, dy: int, radius: float) -> float:
    """Unnormalized 2-D Gaussian weight of offset (dx, dy) for sigma = radius."""
    two_r_sq = 2 * radius * radius
    return math.exp(-(dx * dx + dy * dy) / two_r_sq) / (math.pi * two_r_sq)


def gaussian(bitmap: Bitmap, radius: float, progress: Optional[ProgressCallback] = None) -> Bitmap:
    """
    Apply a true Gaussian blur to every channel, alpha included.

    Samples outside the bitmap are clamped to the nearest edge pixel. Each
    output channel is round(weighted sum / sum of weights), halves rounding
    up. All reads come from a snapshot of the input.

    Args:
        bitmap: Bitmap to blur (modified)
        radius: Blur radius (sigma), at least 1
        progress: Optional observer called with the completed fraction
            after each kernel row

    Returns:
        The blurred bitmap

    Raises:
        InvalidArgumentError: If radius is not a number >= 1
    """
    params = validate_params(GaussianParams, radius=radius)
    rs = significant_radius(params.radius)

    width, height = bitmap.size
    source = bitmap.pixels.astype(np.float64)
    accum = np.zeros_like(source)
    weight_sum = 0.0

    columns = np.arange(width)
    rows = np.arange(height)
    kernel_rows = 2 * rs + 1

    logger.debug(f"Gaussian blur r={params.radius} (kernel {kernel_rows}x{kernel_rows}) on {width}x{height}")

    for n, iy in enumerate(range(-rs, rs + 1), start=1):
        shifted_rows = source[np.clip(rows + iy, 0, height - 1)]
        for ix in range(-rs, rs + 1):
            weight = gaussian_weight(ix, iy, params.radius)
            accum += shifted_rows[:, np.clip(columns + ix, 0, width - 1)] * weight
            weight_sum += weight

        if progress is not None:
            progress(n / kernel_rows)

    blurred = np.floor(accum / weight_sum + 0.5)
    np.clip(blurred, 0, BitmapConstants.MAX_CHANNEL_VALUE, out=blurred)
    bitmap.replace(blurred.astype(np.uint8), width, height)

    return bitmap
