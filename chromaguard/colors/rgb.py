from typing import ClassVar
from ..types.color_space import ColorSpaceTag
from .color_base import ColorBase, build_registry


class Rgb(ColorBase):
    """sRGB with 8-bit scale components: r, g, b in 0..255."""
    space: ClassVar[ColorSpaceTag] = ColorSpaceTag.RGB
    r: float
    g: float
    b: float


rgb_registry = build_registry(Rgb)
