from typing import ClassVar
from ..types.color_space import ColorSpaceTag
from .color_base import ColorBase, build_registry


class Hsv(ColorBase):
    space: ClassVar[ColorSpaceTag] = ColorSpaceTag.HSV
    h: float
    s: float
    v: float


hsv_registry = build_registry(Hsv)
