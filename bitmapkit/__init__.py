"""
bitmapkit - in-memory RGBA bitmap manipulation.

Geometric transforms (crop, flip, rotate, resize, blit) and filters
(invert, greyscale, sepia, opacity, Gaussian and fast box blur) over a
flat RGBA8 buffer.
"""

from bitmapkit.config import Settings, configure_logging, get_settings, load_settings
from bitmapkit.core import (
    Bitmap,
    BitmapError,
    BlurPrecision,
    ConfigurationError,
    InvalidArgumentError,
    MimeType,
    RegionOutOfBoundsError,
    SepiaMode,
    UnsupportedFormatError,
)
from bitmapkit.services.image_service import Image

__version__ = "0.1.0"

__all__ = [
    "Bitmap",
    "Image",
    "Settings",
    "configure_logging",
    "get_settings",
    "load_settings",
    "BitmapError",
    "ConfigurationError",
    "InvalidArgumentError",
    "RegionOutOfBoundsError",
    "UnsupportedFormatError",
    "BlurPrecision",
    "MimeType",
    "SepiaMode",
]
