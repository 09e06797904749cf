"""
Base schema types shared by all parameter models.

Pixel coordinates and sizes are plain integers; numeric factors accept any
real number. Booleans and strings are rejected for both, so ``True`` can
never silently become a width of 1.
"""

import math
import numbers
import operator
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict


def _coerce_index(value: Any) -> int:
    if isinstance(value, (bool, str, bytes)):
        raise ValueError(f"expected an integer, got {type(value).__name__}")
    try:
        return operator.index(value)
    except TypeError:
        raise ValueError(f"expected an integer, got {type(value).__name__}") from None


def _coerce_number(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValueError(f"expected a number, got {type(value).__name__}")
    result = float(value)
    if math.isnan(result) or math.isinf(result):
        raise ValueError("expected a finite number")
    return result


# Integer-like input (int, numpy integer); no floats, bools or strings
PixelInt = Annotated[int, BeforeValidator(_coerce_index)]

# Any finite real number
Number = Annotated[float, BeforeValidator(_coerce_number)]


class BaseParams(BaseModel):
    """Base class for operation parameters."""

    model_config = ConfigDict(extra="forbid", frozen=True, use_enum_values=False)
