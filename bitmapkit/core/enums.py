"""
Enumerations shared across bitmapkit layers.
"""

from enum import Enum


class MimeType(str, Enum):
    """Image formats supported by the codec adapter"""

    PNG = "image/png"
    JPEG = "image/jpeg"


class SepiaMode(str, Enum):
    """How the sepia tone matrix is applied"""

    # Each output row sees the channels already updated before it
    CHAINED = "chained"
    # Every output row uses the original (R, G, B)
    STANDARD = "standard"


class BlurPrecision(str, Enum):
    """Normalization used by the fast box blur"""

    EXACT = "exact"
    FIXED_POINT = "fixed_point"
