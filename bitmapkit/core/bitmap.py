"""
Bitmap - in-memory RGBA8 raster.

A Bitmap owns a flat numpy uint8 buffer plus its width and height. The
invariant ``len(data) == width * height * 4`` holds at all times: the only
way to change the dimensions is ``replace()``, which validates the new
triple before swapping all three attributes.
"""

import logging
import operator
from typing import Any, Sequence, Tuple

import numpy as np

from bitmapkit.core.constants import BitmapConstants
from bitmapkit.core.exceptions import InvalidArgumentError, RegionOutOfBoundsError

logger = logging.getLogger(__name__)

RGBA = Tuple[int, int, int, int]


def _as_int(value: Any, name: str) -> int:
    """Coerce an integer-like value (int, numpy integer), rejecting bool/float/str."""
    if isinstance(value, bool):
        raise InvalidArgumentError(f"{name} must be an integer, got bool")
    try:
        return operator.index(value)
    except TypeError:
        raise InvalidArgumentError(
            f"{name} must be an integer, got {type(value).__name__}"
        ) from None


def _as_dimension(value: Any, name: str) -> int:
    size = _as_int(value, name)
    if size < 1:
        raise InvalidArgumentError(f"{name} must be a positive integer, got {size}")
    return size


def _as_color(color: Any) -> np.ndarray:
    """Validate an (R, G, B, A) sequence of integers in 0-255."""
    try:
        channels = [_as_int(value, "color channel") for value in color]
    except TypeError:
        raise InvalidArgumentError(
            f"color must be a sequence of 4 integers, got {type(color).__name__}"
        ) from None

    if len(channels) != BitmapConstants.CHANNELS:
        raise InvalidArgumentError(f"color must have 4 channels, got {len(channels)}")
    if any(not 0 <= value <= BitmapConstants.MAX_CHANNEL_VALUE for value in channels):
        raise InvalidArgumentError(f"color channels must be in 0-255, got {tuple(channels)}")
    return np.asarray(channels, dtype=np.uint8)


def _as_buffer(data: Any) -> np.ndarray:
    """Copy raw pixel data into a private, flat uint8 array."""
    if isinstance(data, (bytes, bytearray, memoryview)):
        return np.frombuffer(data, dtype=np.uint8).copy()

    if isinstance(data, np.ndarray):
        if data.dtype != np.uint8:
            raise InvalidArgumentError(f"Pixel buffer must be uint8, got {data.dtype}")
        return np.ascontiguousarray(data).reshape(-1).copy()

    try:
        return np.asarray(data, dtype=np.uint8).reshape(-1).copy()
    except (TypeError, ValueError, OverflowError) as e:
        raise InvalidArgumentError(f"Invalid pixel buffer: {e}") from e


class Bitmap:
    """
    RGBA8 pixel buffer with its dimensions.

    Pixel (x, y) occupies the four bytes starting at ``(y * width + x) * 4``
    in the order R, G, B, A.
    """

    __slots__ = ("_data", "_width", "_height")

    def __init__(self, data: Any, width: int, height: int):
        """
        Initialize Bitmap

        Args:
            data: Raw RGBA bytes (bytes, bytearray, numpy uint8 array or int sequence)
            width: Width in pixels
            height: Height in pixels

        Raises:
            InvalidArgumentError: If the dimensions are not positive integers
                or the buffer length does not match them
        """
        self._data = np.empty(0, dtype=np.uint8)
        self._width = 0
        self._height = 0
        self.replace(data, width, height)

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def solid(cls, width: int, height: int, color: Sequence[int] = BitmapConstants.DEFAULT_FILL):
        """Create a bitmap filled with a single RGBA color."""
        width = _as_dimension(width, "width")
        height = _as_dimension(height, "height")
        fill = _as_color(color)

        pixels = np.empty((height, width, BitmapConstants.CHANNELS), dtype=np.uint8)
        pixels[...] = fill
        return cls(pixels, width, height)

    @classmethod
    def from_array(cls, array: np.ndarray):
        """Create a bitmap from a (height, width, 4) uint8 array."""
        if not isinstance(array, np.ndarray):
            raise InvalidArgumentError(f"Expected numpy array, got {type(array).__name__}")
        if array.ndim != 3 or array.shape[2] != BitmapConstants.CHANNELS:
            raise InvalidArgumentError(f"Expected array of shape (h, w, 4), got {array.shape}")
        height, width = array.shape[:2]
        return cls(array, width, height)

    def copy(self) -> "Bitmap":
        """Deep copy: the clone owns its own buffer."""
        return Bitmap(self._data, self._width, self._height)

    def to_array(self) -> np.ndarray:
        """Return a (height, width, 4) copy of the pixels."""
        return self.pixels.copy()

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def data(self) -> np.ndarray:
        return self._data

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> Tuple[int, int]:
        return self._width, self._height

    @property
    def pixels(self) -> np.ndarray:
        """Writable (height, width, 4) view of the buffer."""
        return self._data.reshape(self._height, self._width, BitmapConstants.CHANNELS)

    def pixel_index(self, x: int, y: int) -> int:
        """
        Return the buffer offset of pixel (x, y).

        The offset is computed from the current width. Coordinates are not
        bounds checked.
        """
        x = _as_int(x, "x")
        y = _as_int(y, "y")
        return (self._width * y + x) << BitmapConstants.PIXEL_SHIFT

    def _checked_index(self, x: int, y: int) -> int:
        x = _as_int(x, "x")
        y = _as_int(y, "y")
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise RegionOutOfBoundsError(
                f"Pixel ({x}, {y}) outside {self._width}x{self._height} bitmap",
                region=(x, y, 1, 1),
                bounds=self.size,
            )
        return self.pixel_index(x, y)

    def get_pixel(self, x: int, y: int) -> RGBA:
        """Return pixel (x, y) as an (R, G, B, A) tuple."""
        idx = self._checked_index(x, y)
        return tuple(int(v) for v in self._data[idx : idx + BitmapConstants.CHANNELS])

    def set_pixel(self, x: int, y: int, color: Sequence[int]) -> None:
        """Overwrite pixel (x, y) with an (R, G, B, A) color."""
        idx = self._checked_index(x, y)
        self._data[idx : idx + BitmapConstants.CHANNELS] = _as_color(color)

    # ------------------------------------------------------------------
    # Buffer replacement
    # ------------------------------------------------------------------

    def replace(self, data: Any, width: int, height: int) -> None:
        """
        Swap in a new buffer and dimensions.

        The new triple is fully validated before any attribute changes, so a
        failed call leaves the bitmap exactly as it was.

        Args:
            data: New RGBA buffer
            width: New width in pixels
            height: New height in pixels

        Raises:
            InvalidArgumentError: If the buffer length does not match width * height * 4
        """
        width = _as_dimension(width, "width")
        height = _as_dimension(height, "height")
        buffer = _as_buffer(data)

        expected = width * height * BitmapConstants.CHANNELS
        if buffer.size != expected:
            raise InvalidArgumentError(
                f"Pixel buffer has {buffer.size} bytes, expected {expected} for {width}x{height}"
            )

        self._data, self._width, self._height = buffer, width, height

    def __len__(self) -> int:
        return int(self._data.size)

    def __repr__(self) -> str:
        return f"Bitmap(width={self._width}, height={self._height})"
