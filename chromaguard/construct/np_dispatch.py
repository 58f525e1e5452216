from __future__ import annotations
from typing import List

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ..colors.color import Color
from ..errors import NumberOfComponents
from ..rules import SPACE_RULES
from ..types.color_space import ColorSpaceTag
from ..types.component_types import SpaceLike
from .dispatch import build


def _as_rows(space: SpaceLike, array: ArrayLike) -> tuple[ColorSpaceTag, np.ndarray]:
    tag = ColorSpaceTag.from_name(space)
    arr = np.asarray(array)
    # same rule as the scalar path: no strings, bools or objects
    if arr.dtype.kind not in "iuf":
        raise TypeError(f"{tag.value} expects a real-valued array, got dtype {arr.dtype}")
    arr = arr.astype(np.float64, copy=False)
    if arr.ndim == 0:
        raise ValueError(f"{tag.value} expects an array of shape (..., n), got a scalar")

    expected = SPACE_RULES[tag].arity
    if arr.shape[-1] != expected:
        raise NumberOfComponents(expected, arr.shape[-1])
    return tag, arr


def np_valid_mask(space: SpaceLike, array: ArrayLike) -> NDArray[np.bool_]:
    """
    Vectorized range check.

    Args:
        space: Color space tag or name
        array: Components with shape (..., n), n being the space's arity

    Returns:
        Boolean array of shape (...), True where every constrained component is in range
    """
    tag, arr = _as_rows(space, array)
    rules = SPACE_RULES[tag]

    valid = np.ones(arr.shape[:-1], dtype=bool)
    for rule in rules.constraints:
        channel = arr[..., rules.components.index(rule.name)]
        # same comparison as the scalar path, so NaN is not rejected here either
        valid &= ~((channel < rule.min) | (channel > rule.max))
    return valid


def np_build(space: SpaceLike, array: ArrayLike) -> List[Color]:
    """
    Build one color per row of an (..., n) array, in row-major order.

    Raises the error ``build`` reports for the first invalid row.
    """
    tag, arr = _as_rows(space, array)
    rows = arr.reshape(-1, arr.shape[-1])

    valid = np_valid_mask(tag, rows)
    if not valid.all():
        first = int(np.flatnonzero(~valid)[0])
        build(tag, rows[first])

    return [build(tag, row) for row in rows]
