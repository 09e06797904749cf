"""
Image Service - fluent, chainable wrapper around a Bitmap.

Every mutating method validates its arguments, applies the operation to
the wrapped bitmap and returns ``self``::

    image = Image.read("photo.png")
    image.crop(10, 10, 200, 100).greyscale().blur(3).quality(80).write("out.jpg")
"""

import logging
from pathlib import Path
from typing import Optional, Sequence, Union

from bitmapkit.config import Settings, get_settings
from bitmapkit.core import filters, scanner, transforms
from bitmapkit.core.bitmap import Bitmap
from bitmapkit.core.blur.fast import fast_blur
from bitmapkit.core.blur.gaussian import ProgressCallback
from bitmapkit.core.blur.gaussian import gaussian as gaussian_blur
from bitmapkit.core.enums import BlurPrecision, MimeType, SepiaMode
from bitmapkit.core.exceptions import InvalidArgumentError, UnsupportedFormatError
from bitmapkit.core.image.converters import ImageConverters, as_bitmap
from bitmapkit.core.image import processors
from bitmapkit.core.image.processors import Resizer
from bitmapkit.core.scanner import Visitor
from bitmapkit.core.utils.decorators import timed
from bitmapkit.core.utils.enum_converter import mime_from_path
from bitmapkit.core.utils.params_processor import validate_params
from bitmapkit.schemas.common import Color, Size
from bitmapkit.schemas.params import QualityParams

logger = logging.getLogger(__name__)

ImageSource = Union["Image", Bitmap]


class Image:
    """Chainable image editing on top of a Bitmap"""

    MIME_PNG = MimeType.PNG
    MIME_JPEG = MimeType.JPEG

    def __init__(self, bitmap, settings: Optional[Settings] = None, resizer: Optional[Resizer] = None):
        """
        Initialize Image

        Args:
            bitmap: Bitmap (or PIL Image) to wrap; a Bitmap is used directly, not copied
            settings: Settings to take defaults from (defaults to get_settings())
            resizer: Resampling collaborator for resize/scale
        """
        self.bitmap = as_bitmap(bitmap)
        self.settings = settings or get_settings()
        self.resizer = resizer
        self._quality = self.settings.codec.default_quality

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def create(cls, width: int, height: int, color: Sequence[int] = (0, 0, 0, 255), **kwargs) -> "Image":
        """Create a new image filled with one RGBA (or RGB) color."""
        size = validate_params(Size, width=width, height=height)
        if len(color) not in (3, 4):
            raise InvalidArgumentError(f"color must have 3 or 4 channels, got {len(color)}")
        fill = validate_params(Color, **dict(zip("rgba", color)))
        return cls(Bitmap.solid(size.width, size.height, fill.to_tuple()), **kwargs)

    @classmethod
    def from_buffer(cls, data: bytes, mime: Union[str, MimeType], **kwargs) -> "Image":
        """Decode PNG or JPEG bytes."""
        return cls(ImageConverters.decode(data, mime), **kwargs)

    @classmethod
    def read(cls, path: Union[str, Path], **kwargs) -> "Image":
        """
        Read a PNG or JPEG file; the format comes from the file extension.

        Raises:
            UnsupportedFormatError: If the extension is not a PNG/JPEG one
        """
        mime = mime_from_path(path)
        if mime is None:
            raise UnsupportedFormatError(Path(path).suffix or str(path))

        data = Path(path).read_bytes()
        logger.info(f"Read {path} ({len(data)} bytes)")
        return cls.from_buffer(data, mime, **kwargs)

    def clone(self) -> "Image":
        """Independent copy with the same quality setting."""
        other = Image(self.bitmap.copy(), settings=self.settings, resizer=self.resizer)
        other._quality = self._quality
        return other

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def width(self) -> int:
        return self.bitmap.width

    @property
    def height(self) -> int:
        return self.bitmap.height

    def get_quality(self) -> int:
        return self._quality

    def pixel_index(self, x: int, y: int) -> int:
        return self.bitmap.pixel_index(x, y)

    def quality(self, n: int) -> "Image":
        """Set the JPEG quality used by get_buffer/write (0-100)."""
        self._quality = validate_params(QualityParams, quality=n).quality
        return self

    def scan(self, x: int, y: int, w: int, h: int, visit: Visitor) -> "Image":
        """Call visit(px, py, offset) for each pixel of a rectangle."""
        if not callable(visit):
            raise InvalidArgumentError("visit must be callable")
        scanner.scan(self.bitmap, x, y, w, h, visit)
        return self

    # ------------------------------------------------------------------
    # Geometric transforms
    # ------------------------------------------------------------------

    @timed
    def crop(self, x: int, y: int, w: int, h: int) -> "Image":
        transforms.crop(self.bitmap, x, y, w, h)
        return self

    @timed
    def blit(self, dst: ImageSource, sx: int, sy: int, w: int, h: int, dx: int, dy: int) -> "Image":
        """Copy the RGB of a rectangle of this image into dst (alpha untouched)."""
        target = dst.bitmap if isinstance(dst, Image) else dst
        transforms.blit(self.bitmap, target, sx, sy, w, h, dx, dy)
        return self

    @timed
    def flip(self, horizontal: bool, vertical: bool) -> "Image":
        transforms.flip(self.bitmap, horizontal, vertical)
        return self

    @timed
    def rotate(self, degrees: float) -> "Image":
        """Rotate clockwise, rounded to the nearest 90 degrees."""
        transforms.rotate(self.bitmap, degrees)
        return self

    @timed
    def resize(self, w: float, h: float) -> "Image":
        processors.resize(self.bitmap, w, h, self.resizer)
        return self

    @timed
    def scale(self, f: float) -> "Image":
        processors.scale(self.bitmap, f, self.resizer)
        return self

    # ------------------------------------------------------------------
    # Filters
    # ------------------------------------------------------------------

    @timed
    def invert(self) -> "Image":
        filters.invert(self.bitmap)
        return self

    @timed
    def greyscale(self) -> "Image":
        filters.greyscale(self.bitmap)
        return self

    @timed
    def sepia(self, mode: Optional[SepiaMode] = None) -> "Image":
        filters.sepia(self.bitmap, mode or self.settings.filters.sepia_mode)
        return self

    @timed
    def opacity(self, f: float) -> "Image":
        filters.opacity(self.bitmap, f)
        return self

    @timed
    def gaussian(self, r: float, progress: Optional[ProgressCallback] = None) -> "Image":
        """True Gaussian blur (slow)."""
        gaussian_blur(self.bitmap, r, progress)
        return self

    @timed
    def blur(self, r: int, precision: Optional[BlurPrecision] = None) -> "Image":
        """Fast box-blur approximation of a Gaussian blur."""
        fast_blur(self.bitmap, r, precision or self.settings.blur.precision)
        return self

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def get_buffer(self, mime: Union[str, MimeType]) -> bytes:
        """Encode the image as PNG or JPEG bytes."""
        return ImageConverters.encode(self.bitmap, mime, self._quality)

    def write(self, path: Union[str, Path]) -> "Image":
        """
        Write the image to a PNG or JPEG file chosen by extension.

        Raises:
            UnsupportedFormatError: If the extension is not a PNG/JPEG one
        """
        mime = mime_from_path(path)
        if mime is None:
            raise UnsupportedFormatError(Path(path).suffix or str(path))

        data = self.get_buffer(mime)
        Path(path).write_bytes(data)
        logger.info(f"Wrote {path} ({len(data)} bytes)")
        return self

    def __repr__(self) -> str:
        return f"Image(width={self.width}, height={self.height}, quality={self._quality})"
