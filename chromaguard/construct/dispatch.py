from __future__ import annotations
import logging
from typing import Sequence

from ..colors.color import Color, COLOR_CLASSES
from ..errors import NumberOfComponents, ValidationError
from ..rules import SPACE_RULES
from ..types.color_space import ColorSpaceTag
from ..types.component_types import RawComponents, Scalar, SpaceLike
from ..validation import validate_rules

logger = logging.getLogger(__name__)


def _as_sequence(values: RawComponents) -> Sequence[Scalar]:
    # ndarray rows arrive from np_build; tolist() gives plain Python floats
    if hasattr(values, "tolist"):
        return values.tolist()
    return values


def build(space: SpaceLike, values: RawComponents) -> Color:
    """
    Build a validated color from a color space and its raw components.

    Args:
        space: Color space tag, or its name (e.g. "rgb", "cmyk")
        values: Components in the order the space declares them

    Returns:
        The typed color (Rgb, Cmyk, ...)

    Raises:
        NumberOfComponents: wrong number of values; no range checks run
        Negative: first failing component has a zero minimum and got a negative value
        OutOfRange: first failing component is outside its range otherwise
    """
    tag = ColorSpaceTag.from_name(space)
    values = _as_sequence(values)

    expected = SPACE_RULES[tag].arity
    if len(values) != expected:
        logger.debug("rejected %s components: expected %d, got %d", tag.value, expected, len(values))
        raise NumberOfComponents(expected, len(values))

    try:
        return COLOR_CLASSES[tag](*values)
    except ValidationError as err:
        logger.debug("rejected %s components %r: %s", tag.value, values, err)
        raise


def validate_components(space: SpaceLike, values: RawComponents) -> None:
    """Run the same checks as :func:`build` without creating a color."""
    validate_rules(SPACE_RULES[ColorSpaceTag.from_name(space)], _as_sequence(values))
