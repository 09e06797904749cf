"""
Common data structures: regions, sizes and colors.
"""

from typing import Tuple

from pydantic import Field

from .base import BaseParams, PixelInt


class Region(BaseParams):
    """Half-open pixel rectangle [x, x + width) x [y, y + height)"""

    x: PixelInt = Field(..., ge=0, description="Left edge")
    y: PixelInt = Field(..., ge=0, description="Top edge")
    width: PixelInt = Field(..., ge=0, description="Width in pixels")
    height: PixelInt = Field(..., ge=0, description="Height in pixels")

    @property
    def x2(self) -> int:
        return self.x + self.width

    @property
    def y2(self) -> int:
        return self.y + self.height

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def fits(self, width: int, height: int) -> bool:
        """Check the region lies inside a width x height image."""
        return self.x2 <= width and self.y2 <= height

    def to_tuple(self) -> Tuple[int, int, int, int]:
        return (self.x, self.y, self.width, self.height)


class Point(BaseParams):
    """Pixel coordinate; may be negative (destination offsets)"""

    x: PixelInt
    y: PixelInt


class Size(BaseParams):
    """Bitmap dimensions"""

    width: PixelInt = Field(..., ge=1)
    height: PixelInt = Field(..., ge=1)


class Color(BaseParams):
    """RGBA8 color"""

    r: PixelInt = Field(..., ge=0, le=255)
    g: PixelInt = Field(..., ge=0, le=255)
    b: PixelInt = Field(..., ge=0, le=255)
    a: PixelInt = Field(255, ge=0, le=255)

    def to_tuple(self) -> Tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)
