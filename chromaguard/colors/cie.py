"""CIE-derived spaces. Only lightness (and LCH chroma/hue, LUV u/v) is bounded."""
from typing import ClassVar
from ..types.color_space import ColorSpaceTag
from .color_base import ColorBase, build_registry


class Lch(ColorBase):
    space: ClassVar[ColorSpaceTag] = ColorSpaceTag.LCH
    l: float  # noqa: E741
    c: float
    h: float


class Luv(ColorBase):
    space: ClassVar[ColorSpaceTag] = ColorSpaceTag.LUV
    l: float  # noqa: E741
    u: float
    v: float


class Lab(ColorBase):
    space: ClassVar[ColorSpaceTag] = ColorSpaceTag.LAB
    l: float  # noqa: E741
    a: float
    b: float


class HunterLab(ColorBase):
    space: ClassVar[ColorSpaceTag] = ColorSpaceTag.HUNTER_LAB
    l: float  # noqa: E741
    a: float
    b: float


class Xyz(ColorBase):
    space: ClassVar[ColorSpaceTag] = ColorSpaceTag.XYZ
    x: float
    y: float
    z: float


class Yxy(ColorBase):
    space: ClassVar[ColorSpaceTag] = ColorSpaceTag.YXY
    y1: float
    x: float
    y2: float


cie_registry = build_registry(Lch, Luv, Lab, HunterLab, Xyz, Yxy)
