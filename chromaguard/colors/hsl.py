from typing import ClassVar
from ..types.color_space import ColorSpaceTag
from .color_base import ColorBase, build_registry


class Hsl(ColorBase):
    space: ClassVar[ColorSpaceTag] = ColorSpaceTag.HSL
    h: float
    s: float
    l: float  # noqa: E741


hsl_registry = build_registry(Hsl)
