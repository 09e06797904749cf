"""
Utility decorators.
"""

import functools
import logging
import time
from contextlib import contextmanager

logger = logging.getLogger(__name__)


@contextmanager
def timer(label: str = "block"):
    """
    Measure wall time of a ``with`` block.

    Yields a dict whose ``"ms"`` key is filled in when the block exits, so
    read it after the ``with`` statement:

        with timer() as t:
            ...
        elapsed = t["ms"]
    """
    result = {"ms": 0.0}
    start = time.perf_counter()
    try:
        yield result
    finally:
        result["ms"] = (time.perf_counter() - start) * 1000
        logger.debug(f"{label} took {result['ms']:.2f} ms")


def timed(func):
    """Log the wall time of each call at DEBUG level."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        with timer(func.__qualname__):
            return func(*args, **kwargs)

    return wrapper
