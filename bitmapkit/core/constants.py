"""
Constants and configuration values for bitmapkit.
Centralizes all magic numbers and configuration constants.
"""


# Bitmap layout constants
class BitmapConstants:
    """Constants related to the in-memory pixel buffer."""

    # RGBA8: one byte per channel
    CHANNELS = 4
    COLOR_CHANNELS = 3
    ALPHA_OFFSET = 3
    MAX_CHANNEL_VALUE = 255

    # Shift used by pixel_index (x4 bytes per pixel)
    PIXEL_SHIFT = 2

    # Default fill for Bitmap.solid
    DEFAULT_FILL = (0, 0, 0, 255)


# Blur Constants
class BlurConstants:
    """Constants for the Gaussian and fast box blur."""

    # Gaussian: significant radius = ceil(radius * factor)
    GAUSSIAN_SIGNIFICANT_FACTOR = 2.57
    GAUSSIAN_MIN_RADIUS = 1

    # Fast blur: radius domain of the multiply/shift tables
    FAST_BLUR_MIN_RADIUS = 1
    FAST_BLUR_MAX_RADIUS = 254
    FAST_BLUR_ITERATIONS = 2


# Filter Constants
class FilterConstants:
    """Constants for per-pixel colour filters."""

    # Sepia tone matrix, one row per output channel (R, G, B)
    SEPIA_RED = (0.393, 0.769, 0.189)
    SEPIA_GREEN = (0.349, 0.686, 0.168)
    SEPIA_BLUE = (0.272, 0.534, 0.131)

    MIN_OPACITY = 0.0
    MAX_OPACITY = 1.0


# Codec Constants
class CodecConstants:
    """Constants related to PNG/JPEG encoding."""

    DEFAULT_QUALITY = 100
    MIN_QUALITY = 0
    MAX_QUALITY = 100


# System Constants
class SystemConstants:
    """Constants for logging and configuration."""

    # Logging
    LOG_LEVEL_DEFAULT = "INFO"
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

    # Environment variables are read as ENV_PREFIX + name
    ENV_PREFIX = "BITMAPKIT_"
    ENVIRONMENT_DEFAULT = "production"


# Color Constants (RGBA)
class Colors:
    """Standard colors (RGBA format)."""

    BLACK = (0, 0, 0, 255)
    WHITE = (255, 255, 255, 255)
    RED = (255, 0, 0, 255)
    GREEN = (0, 255, 0, 255)
    BLUE = (0, 0, 255, 255)
    TRANSPARENT = (0, 0, 0, 0)
