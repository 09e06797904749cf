"""
Operation parameter models.

One model per operation that takes user input. Building a model is the
validation step: every operation constructs its params before touching
the bitmap.
"""

import math

from pydantic import Field

from bitmapkit.core.constants import BlurConstants, CodecConstants, FilterConstants
from bitmapkit.core.enums import BlurPrecision, SepiaMode

from .base import BaseParams, Number, PixelInt


class FlipParams(BaseParams):
    """Mirror axes"""

    horizontal: bool = Field(..., strict=True, description="Mirror left/right")
    vertical: bool = Field(..., strict=True, description="Mirror top/bottom")


class RotateParams(BaseParams):
    """Clockwise rotation, rounded to the nearest quarter turn"""

    degrees: Number


class GaussianParams(BaseParams):
    """Exact Gaussian blur"""

    radius: Number = Field(..., ge=BlurConstants.GAUSSIAN_MIN_RADIUS, description="Blur radius (sigma)")


class FastBlurParams(BaseParams):
    """Two-pass box blur approximation"""

    radius: PixelInt = Field(
        ...,
        ge=BlurConstants.FAST_BLUR_MIN_RADIUS,
        le=BlurConstants.FAST_BLUR_MAX_RADIUS,
        description="Half-width of the box window",
    )
    precision: BlurPrecision = Field(
        default=BlurPrecision.EXACT, description="Normalization (exact or fixed_point)"
    )


class SepiaParams(BaseParams):
    mode: SepiaMode = SepiaMode.CHAINED


class OpacityParams(BaseParams):
    """Alpha multiplier"""

    factor: Number = Field(..., ge=FilterConstants.MIN_OPACITY, le=FilterConstants.MAX_OPACITY)


class QualityParams(BaseParams):
    """JPEG encode quality"""

    quality: PixelInt = Field(
        default=CodecConstants.DEFAULT_QUALITY,
        ge=CodecConstants.MIN_QUALITY,
        le=CodecConstants.MAX_QUALITY,
    )


class ResizeParams(BaseParams):
    """Target size before rounding"""

    width: Number
    height: Number

    def rounded(self):
        """Round half up, as the resampler works on whole pixels."""
        return math.floor(self.width + 0.5), math.floor(self.height + 0.5)


class ScaleParams(BaseParams):
    """Uniform scale factor"""

    factor: Number = Field(..., ge=0)

