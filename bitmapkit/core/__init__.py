"""
Core modules for bitmapkit
"""

from .bitmap import Bitmap
from .enums import BlurPrecision, MimeType, SepiaMode
from .exceptions import (
    BitmapError,
    ConfigurationError,
    InvalidArgumentError,
    RegionOutOfBoundsError,
    UnsupportedFormatError,
)

__all__ = [
    "Bitmap",
    "BlurPrecision",
    "MimeType",
    "SepiaMode",
    "BitmapError",
    "ConfigurationError",
    "InvalidArgumentError",
    "RegionOutOfBoundsError",
    "UnsupportedFormatError",
]
