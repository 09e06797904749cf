"""
Image collaborators - modular architecture.

This package connects a Bitmap to its external collaborators:
- converters: PNG/JPEG codec, PIL, NumPy and base64 conversions
- processors: resampling (resize, scale)
"""

from bitmapkit.core.image.converters import ImageConverters, as_bitmap, resolve_mime
from bitmapkit.core.image.processors import BilinearResizer, resize, scale

__all__ = ["ImageConverters", "BilinearResizer", "as_bitmap", "resolve_mime", "resize", "scale"]
