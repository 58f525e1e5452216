from __future__ import annotations
from typing import Sequence, Union
import numpy as np
from numpy import ndarray

from .color_space import ColorSpaceTag

Scalar = int | float
RawComponents = Union[Sequence[Scalar], ndarray]
SpaceLike = Union[ColorSpaceTag, str]


def to_float(value: Scalar) -> float:
    """
    Coerce a single component to a Python float.

    bool is rejected even though it is an int subclass, and so are ints too
    large to be represented as a float.
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, float, np.integer, np.floating)):
        raise TypeError(f"Color components must be real numbers, got {type(value).__name__}")
    try:
        return float(value)
    except OverflowError:
        raise TypeError(f"Color component {value!r} is too large to represent as a float") from None
