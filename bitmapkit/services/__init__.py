"""
Service layer: high-level, chainable image API.
"""

from .image_service import Image

__all__ = ["Image"]
