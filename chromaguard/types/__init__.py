from .color_space import ColorSpaceTag
from .component_types import RawComponents, Scalar, SpaceLike, to_float

__all__ = ["ColorSpaceTag", "RawComponents", "Scalar", "SpaceLike", "to_float"]
