from typing import ClassVar
from ..types.color_space import ColorSpaceTag
from .color_base import ColorBase, build_registry


class Cmy(ColorBase):
    space: ClassVar[ColorSpaceTag] = ColorSpaceTag.CMY
    c: float
    m: float
    y: float


class Cmyk(ColorBase):
    space: ClassVar[ColorSpaceTag] = ColorSpaceTag.CMYK
    c: float
    m: float
    y: float
    k: float


cmy_registry = build_registry(Cmy, Cmyk)
