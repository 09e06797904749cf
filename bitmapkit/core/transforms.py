"""
Geometric transforms.

crop, flip and rotate never edit pixels in place: each builds a complete new
buffer from a read-only source and then swaps it in with Bitmap.replace().
blit writes into a second, independently owned destination bitmap.
"""

import logging
import math

import numpy as np

from bitmapkit.core.bitmap import Bitmap
from bitmapkit.core.constants import BitmapConstants
from bitmapkit.core.exceptions import InvalidArgumentError, RegionOutOfBoundsError
from bitmapkit.core.scanner import check_region, grid_offsets, region_offsets
from bitmapkit.core.utils.params_processor import validate_params
from bitmapkit.schemas.common import Point
from bitmapkit.schemas.params import FlipParams, RotateParams

logger = logging.getLogger(__name__)

QUADRANT_DEGREES = 90


def crop(bitmap: Bitmap, x: int, y: int, w: int, h: int) -> Bitmap:
    """
    Crop the bitmap to a sub-rectangle.

    Args:
        bitmap: Bitmap to crop (modified)
        x: Left edge of the kept area
        y: Top edge of the kept area
        w: Width of the kept area
        h: Height of the kept area

    Returns:
        The cropped bitmap

    Raises:
        InvalidArgumentError: If w or h is zero
        RegionOutOfBoundsError: If the area is not inside the bitmap
    """
    area = check_region(bitmap, x, y, w, h)
    if area.is_empty:
        raise InvalidArgumentError(f"Crop area must not be empty: {area.to_tuple()}")

    cropped = bitmap.pixels[area.y : area.y2, area.x : area.x2].copy()
    bitmap.replace(cropped, area.width, area.height)

    logger.debug(f"Cropped to {area.to_tuple()}")
    return bitmap


def flip(bitmap: Bitmap, horizontal: bool, vertical: bool) -> Bitmap:
    """
    Mirror the bitmap.

    Pixel (x, y) of the result is read from (width - 1 - x, y) when flipping
    horizontally and from (x, height - 1 - y) when flipping vertically.

    Args:
        bitmap: Bitmap to flip (modified)
        horizontal: Mirror left/right
        vertical: Mirror top/bottom

    Returns:
        The flipped bitmap
    """
    params = validate_params(FlipParams, horizontal=horizontal, vertical=vertical)

    source = bitmap.pixels
    if params.horizontal:
        source = source[:, ::-1]
    if params.vertical:
        source = source[::-1, :]

    bitmap.replace(np.ascontiguousarray(source), bitmap.width, bitmap.height)

    logger.debug(f"Flipped (horizontal={params.horizontal}, vertical={params.vertical})")
    return bitmap


def quadrants(degrees: float) -> int:
    """Number of clockwise quarter turns for an angle, in [0, 4)."""
    params = validate_params(RotateParams, degrees=degrees)
    # Half a quadrant rounds up: 45 -> 1, -45 -> 0
    return math.floor(params.degrees / QUADRANT_DEGREES + 0.5) % 4


def rotate_quadrant(bitmap: Bitmap) -> Bitmap:
    """
    Rotate 90 degrees clockwise.

    Walks source columns left to right and, within each, source rows bottom
    to top: the result pixel (col, row) comes from (row, old_height - 1 - col).
    """
    old_width, old_height = bitmap.size
    source = bitmap.pixels

    rows = np.arange(old_width)[:, None]
    cols = np.arange(old_height)[None, :]
    rotated = source[old_height - 1 - cols, rows]

    bitmap.replace(rotated, old_height, old_width)
    return bitmap


def rotate(bitmap: Bitmap, degrees: float) -> Bitmap:
    """
    Rotate clockwise by ``degrees`` rounded to the nearest multiple of 90.

    Each quarter turn is materialized in full before the next one starts.

    Args:
        bitmap: Bitmap to rotate (modified)
        degrees: Angle in degrees; negative values rotate counter-clockwise

    Returns:
        The rotated bitmap
    """
    turns = quadrants(degrees)
    if float(degrees) % QUADRANT_DEGREES:
        logger.warning(f"Rotation by {degrees} degrees rounded to {turns} quarter turns")

    for _ in range(turns):
        rotate_quadrant(bitmap)

    logger.debug(f"Rotated {degrees} degrees ({turns} quarter turns), now {bitmap.width}x{bitmap.height}")
    return bitmap


def blit(src: Bitmap, dst: Bitmap, sx: int, sy: int, w: int, h: int, dx: int, dy: int) -> Bitmap:
    """
    Copy the R, G, B channels of a source rectangle into another bitmap.

    Alpha in the destination is left untouched. Destination offsets are
    computed with the destination's own row width, so the two bitmaps may
    differ in shape. Destination coordinates are not clipped: a rectangle
    that overhangs the right edge continues on the following row. Offsets
    outside the destination buffer are rejected before anything is written.

    Args:
        src: Source bitmap (read only)
        dst: Destination bitmap (modified)
        sx: Source left edge
        sy: Source top edge
        w: Width of the copied area
        h: Height of the copied area
        dx: Destination left edge
        dy: Destination top edge

    Returns:
        The source bitmap, for chaining

    Raises:
        RegionOutOfBoundsError: If the source area is not inside src, or a
            destination offset falls outside dst's buffer
    """
    if not isinstance(dst, Bitmap):
        raise InvalidArgumentError(f"dst must be a Bitmap, got {type(dst).__name__}")

    src_offsets = region_offsets(src, sx, sy, w, h)
    origin = validate_params(Point, x=dx, y=dy)
    dst_offsets = grid_offsets(dst.width, origin.x, origin.y, int(w), int(h))

    if dst_offsets.size and (
        dst_offsets.min() < 0 or dst_offsets.max() + BitmapConstants.ALPHA_OFFSET >= len(dst)
    ):
        raise RegionOutOfBoundsError(
            f"Destination area at ({origin.x}, {origin.y}) size {w}x{h} "
            f"exceeds bitmap bounds {dst.width}x{dst.height}",
            region=(origin.x, origin.y, w, h),
            bounds=dst.size,
        )

    channels = np.arange(BitmapConstants.COLOR_CHANNELS)
    dst.data[dst_offsets[:, None] + channels] = src.data[src_offsets[:, None] + channels]

    logger.debug(f"Blitted {w}x{h} from ({sx}, {sy}) to ({origin.x}, {origin.y})")
    return src
