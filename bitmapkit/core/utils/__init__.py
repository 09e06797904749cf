"""
Utility modules for core functionality.

Modules:
- decorators: Timing context manager and decorator (timer, timed)
- enum_converter: Enum parsing and MIME resolution
- params_processor: Parameter validation utilities
"""

from .decorators import timed, timer
from .enum_converter import mime_from_path, parse_enum
from .params_processor import validate_params

__all__ = [
    "timed",
    "timer",
    "mime_from_path",
    "parse_enum",
    "validate_params",
]
