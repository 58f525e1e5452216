# No dependencies
from enum import Enum


class ColorSpaceTag(str, Enum):
    RGB = "rgb"
    CMY = "cmy"
    CMYK = "cmyk"
    HSV = "hsv"
    HSL = "hsl"
    LCH = "lch"
    LUV = "luv"
    LAB = "lab"
    HUNTER_LAB = "hunterlab"
    XYZ = "xyz"
    YXY = "yxy"

    @classmethod
    def from_name(cls, name: "str | ColorSpaceTag") -> "ColorSpaceTag":
        """
        Resolve a color space name, ignoring case, dashes and underscores.

        Args:
            name: Tag member or name such as "rgb", "HunterLab" or "hunter_lab"
        Returns:
            The matching ColorSpaceTag
        """
        if isinstance(name, cls):
            return name
        key = str(name).lower().replace("_", "").replace("-", "")
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown color space: {name!r}") from None
