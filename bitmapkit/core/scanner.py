"""
Region scanning for the bitmap engine.

Every rectangle-based operation goes through this module:

- scan: visitor callback per pixel, row-major
- iter_region: the same traversal as a caller-driven generator
- region_offsets: buffer offsets of a rectangle in scan order (vectorized)
- region: a numpy view of the rectangle

Rectangles are never clamped. A region that reaches outside the bitmap
raises RegionOutOfBoundsError before the first pixel is visited.
"""

import logging
from typing import Callable, Iterator, Tuple

import numpy as np

from bitmapkit.core.bitmap import Bitmap
from bitmapkit.core.constants import BitmapConstants
from bitmapkit.core.exceptions import RegionOutOfBoundsError
from bitmapkit.core.utils.params_processor import validate_params
from bitmapkit.schemas.common import Region

logger = logging.getLogger(__name__)

Visitor = Callable[[int, int, int], None]


def check_region(bitmap: Bitmap, x: int, y: int, w: int, h: int) -> Region:
    """
    Validate a rectangle against the bitmap bounds.

    Args:
        bitmap: Bitmap the region refers to
        x: Left edge
        y: Top edge
        w: Width (may be 0)
        h: Height (may be 0)

    Returns:
        Validated Region

    Raises:
        InvalidArgumentError: If any value is not a non-negative integer
        RegionOutOfBoundsError: If the region extends past the bitmap
    """
    region = validate_params(Region, x=x, y=y, width=w, height=h)

    if not region.is_empty and not region.fits(bitmap.width, bitmap.height):
        raise RegionOutOfBoundsError(
            f"Region {region.to_tuple()} exceeds bitmap bounds {bitmap.width}x{bitmap.height}",
            region=region.to_tuple(),
            bounds=bitmap.size,
        )
    return region


def scan(bitmap: Bitmap, x: int, y: int, w: int, h: int, visit: Visitor) -> Bitmap:
    """
    Call ``visit(px, py, offset)`` for every pixel of a rectangle.

    Pixels are visited top-to-bottom, left-to-right. The offset is derived
    from ``bitmap.width`` at the time of each call. The visitor must not
    resize the bitmap.

    Returns:
        The scanned bitmap, for chaining
    """
    region = check_region(bitmap, x, y, w, h)

    for py in range(region.y, region.y2):
        for px in range(region.x, region.x2):
            visit(px, py, (bitmap.width * py + px) << BitmapConstants.PIXEL_SHIFT)

    return bitmap


def iter_region(bitmap: Bitmap, x: int, y: int, w: int, h: int) -> Iterator[Tuple[int, int, int]]:
    """
    Yield ``(px, py, offset)`` for every pixel of a rectangle, in scan order.

    The region is checked when the iterator is created, not on first use.
    """
    area = check_region(bitmap, x, y, w, h)

    def _walk():
        for py in range(area.y, area.y2):
            for px in range(area.x, area.x2):
                yield px, py, (bitmap.width * py + px) << BitmapConstants.PIXEL_SHIFT

    return _walk()


def region_offsets(bitmap: Bitmap, x: int, y: int, w: int, h: int) -> np.ndarray:
    """
    Buffer offsets of every pixel of a rectangle, in scan order.

    Returns:
        1-D int64 array of length w * h
    """
    region = check_region(bitmap, x, y, w, h)
    return grid_offsets(bitmap.width, region.x, region.y, region.width, region.height)


def grid_offsets(row_width: int, x: int, y: int, w: int, h: int) -> np.ndarray:
    """Offsets of a w x h grid at (x, y) in a buffer whose rows are row_width pixels wide."""
    ys, xs = np.mgrid[y : y + h, x : x + w]
    return ((row_width * ys + xs) << BitmapConstants.PIXEL_SHIFT).astype(np.int64).reshape(-1)


def region(bitmap: Bitmap, x: int, y: int, w: int, h: int) -> np.ndarray:
    """Writable (h, w, 4) view of a rectangle."""
    area = check_region(bitmap, x, y, w, h)
    return bitmap.pixels[area.y : area.y2, area.x : area.x2]
