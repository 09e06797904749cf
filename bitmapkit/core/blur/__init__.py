"""
Blur subsystem.

- gaussian: exact Gaussian convolution (slow reference)
- fast: two-iteration, two-pass box blur approximation
"""

from .fast import fast_blur
from .gaussian import gaussian

__all__ = ["fast_blur", "gaussian"]
