"""
Schemas Package

Pydantic models for validating operation parameters, shared across the
core operations and the Image facade.
"""

# Re-export enums from centralized location for convenience
from bitmapkit.core.enums import BlurPrecision, MimeType, SepiaMode

from .base import BaseParams, Number, PixelInt
from .common import Color, Point, Region, Size
from .params import (
    FastBlurParams,
    FlipParams,
    GaussianParams,
    OpacityParams,
    QualityParams,
    ResizeParams,
    RotateParams,
    ScaleParams,
    SepiaParams,
)

__all__ = [
    # Base types
    "BaseParams",
    "Number",
    "PixelInt",
    # Common models
    "Color",
    "Point",
    "Region",
    "Size",
    # Operation params
    "FastBlurParams",
    "FlipParams",
    "GaussianParams",
    "OpacityParams",
    "QualityParams",
    "ResizeParams",
    "RotateParams",
    "ScaleParams",
    "SepiaParams",
    # Enums (re-exported from core.enums)
    "BlurPrecision",
    "MimeType",
    "SepiaMode",
]
