"""
Parameter processing utilities.

Turns pydantic validation failures into the engine's InvalidArgumentError,
so every bitmap operation rejects bad input the same way.
"""

from typing import Any, Type, TypeVar

from pydantic import BaseModel, ValidationError

from bitmapkit.core.exceptions import InvalidArgumentError

T = TypeVar("T", bound=BaseModel)


def _format_errors(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(loc) for loc in item.get("loc", ())) or "value"
        parts.append(f"{location}: {item.get('msg')}")
    return "; ".join(parts)


def validate_params(params_class: Type[T], **values: Any) -> T:
    """
    Build and validate a parameter model.

    Args:
        params_class: Pydantic parameter class
        **values: Raw parameter values

    Returns:
        Validated parameters instance

    Raises:
        InvalidArgumentError: If any value has the wrong type or is out of range

    Example:
        >>> params = validate_params(OpacityParams, factor=0.5)
        >>> params.factor
        0.5
    """
    try:
        return params_class(**values)
    except ValidationError as e:
        raise InvalidArgumentError(
            f"Invalid {params_class.__name__}: {_format_errors(e)}"
        ) from e
