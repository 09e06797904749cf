"""
Enum conversion utilities.

Case-insensitive enum parsing with fallback defaults, and MIME type
resolution from file names.
"""

import mimetypes
from typing import Any, Optional, Type, TypeVar

from bitmapkit.core.enums import MimeType

T = TypeVar("T")


def parse_enum(value: Any, enum_class: Type[T], default: Optional[T], normalize: bool = False) -> Optional[T]:
    """
    Parse value to enum with fallback to default.

    Args:
        value: Value to parse (string, enum, or None)
        enum_class: Enum class to parse to
        default: Default enum value if parsing fails
        normalize: Whether to lowercase string before parsing
            (for case-insensitive matching)

    Returns:
        Parsed enum value or default

    Example:
        >>> parse_enum("IMAGE/PNG", MimeType, None, normalize=True)
        <MimeType.PNG: 'image/png'>
    """
    # Already an enum instance
    if isinstance(value, enum_class):
        return value

    if value is None:
        return default

    try:
        str_value = value.strip().lower() if normalize else value
        return enum_class(str_value)
    except (ValueError, AttributeError):
        return default


def mime_from_path(path: Any) -> Optional[MimeType]:
    """
    Resolve the image MIME type from a file name.

    Args:
        path: File path (str or PathLike)

    Returns:
        MimeType, or None if the extension is unknown or not PNG/JPEG
    """
    guessed, _ = mimetypes.guess_type(str(path))
    return parse_enum(guessed, MimeType, None, normalize=True)
