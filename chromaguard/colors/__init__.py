"""
Chromaguard Color Classes
=========================

One immutable class per supported color space. Constructing an instance
validates every component against the rule table in ``chromaguard.rules``,
so an existing instance is always within range.

Usage
-----
>>> from chromaguard.colors import Rgb, Luv
>>> color = Rgb(255, 128, 0)
>>> color.r
255.0
>>> color.components
(255.0, 128.0, 0.0)
>>> Luv(50, -135, 0)
Traceback (most recent call last):
    ...
chromaguard.errors.OutOfRange: Color component "u" out of range (expected -134 to 220, got -135)

Color Classes
-------------
    - Rgb(r, g, b): r, g, b in 0..255
    - Cmy(c, m, y), Cmyk(c, m, y, k): all in 0..1
    - Hsv(h, s, v), Hsl(h, s, l): h in 0..360, others in 0..1
    - Lch(l, c, h): l, c in 0..100, h in 0..360
    - Luv(l, u, v): l in 0..100, u in -134..220, v in -140..122
    - Lab(l, a, b), HunterLab(l, a, b): l in 0..100
    - Xyz(x, y, z), Yxy(y1, x, y2): unconstrained

Notes
-----
- Instances are frozen after initialization
- Components are stored as floats, never clamped or rounded
- ``Color`` is the union of all eleven classes; ``space`` is the discriminant
"""

from .color_base import ColorBase
from .rgb import Rgb
from .cmy import Cmy, Cmyk
from .hsv import Hsv
from .hsl import Hsl
from .cie import Lch, Luv, Lab, HunterLab, Xyz, Yxy
from .color import Color, COLOR_CLASSES, get_color_class


__all__ = [
    'ColorBase',
    'Color',
    'COLOR_CLASSES',
    'get_color_class',
    'Rgb',
    'Cmy',
    'Cmyk',
    'Hsv',
    'Hsl',
    'Lch',
    'Luv',
    'Lab',
    'HunterLab',
    'Xyz',
    'Yxy',
]
