from __future__ import annotations
from types import MappingProxyType
from typing import Mapping, Union

from ..types.color_space import ColorSpaceTag
from ..types.component_types import SpaceLike
from .color_base import ColorBase
from .cie import Lch, Luv, Lab, HunterLab, Xyz, Yxy, cie_registry
from .cmy import Cmy, Cmyk, cmy_registry
from .hsl import Hsl, hsl_registry
from .hsv import Hsv, hsv_registry
from .rgb import Rgb, rgb_registry

Color = Union[Rgb, Cmy, Cmyk, Hsv, Hsl, Lch, Luv, Lab, HunterLab, Xyz, Yxy]

_unified_registry: dict[ColorSpaceTag, type[ColorBase]] = {
    **rgb_registry,
    **cmy_registry,
    **hsv_registry,
    **hsl_registry,
    **cie_registry,
}

_missing = [tag.name for tag in ColorSpaceTag if tag not in _unified_registry]
if _missing:
    raise RuntimeError(f"No color class registered for: {', '.join(_missing)}")

COLOR_CLASSES: Mapping[ColorSpaceTag, type[ColorBase]] = MappingProxyType(_unified_registry)


def get_color_class(color_space: SpaceLike) -> type[ColorBase]:
    return COLOR_CLASSES[ColorSpaceTag.from_name(color_space)]
