"""
Exception hierarchy for bitmapkit.

Every error raised by the engine derives from BitmapError. The concrete
classes also derive from the matching builtin so callers catching
ValueError/IndexError keep working.
"""


class BitmapError(Exception):
    """Base class for all bitmapkit errors"""


class InvalidArgumentError(BitmapError, ValueError):
    """Wrong type or out-of-range argument; raised before any mutation"""


class RegionOutOfBoundsError(BitmapError, IndexError):
    """A rectangle or offset falls outside the pixel buffer"""

    def __init__(self, message: str, region=None, bounds=None):
        super().__init__(message)
        self.region = region
        self.bounds = bounds


class UnsupportedFormatError(BitmapError, ValueError):
    """The codec was asked for a MIME type it cannot handle"""

    def __init__(self, mime):
        super().__init__(f"Unsupported MIME type: {mime}")
        self.mime = mime


class ConfigurationError(BitmapError):
    """Settings could not be loaded or validated"""
