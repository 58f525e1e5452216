"""Chromaguard: validated construction of typed color values from raw components."""
import logging

from .types.color_space import ColorSpaceTag
from .rules import ComponentRule, SpaceRules, SPACE_RULES, rules_for, required_components
from .errors import ValidationError, NumberOfComponents, Negative, OutOfRange
from .colors import (
    ColorBase,
    Color,
    COLOR_CLASSES,
    get_color_class,
    Rgb,
    Cmy,
    Cmyk,
    Hsv,
    Hsl,
    Lch,
    Luv,
    Lab,
    HunterLab,
    Xyz,
    Yxy,
)
from .construct import (
    build,
    validate_components,
    validate_component,
    np_build,
    np_valid_mask,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # color spaces and rules
    "ColorSpaceTag",
    "ComponentRule",
    "SpaceRules",
    "SPACE_RULES",
    "rules_for",
    "required_components",
    # errors
    "ValidationError",
    "NumberOfComponents",
    "Negative",
    "OutOfRange",
    # color types
    "ColorBase",
    "Color",
    "COLOR_CLASSES",
    "get_color_class",
    "Rgb",
    "Cmy",
    "Cmyk",
    "Hsv",
    "Hsl",
    "Lch",
    "Luv",
    "Lab",
    "HunterLab",
    "Xyz",
    "Yxy",
    # constructors
    "build",
    "validate_components",
    "validate_component",
    "np_build",
    "np_valid_mask",
]
