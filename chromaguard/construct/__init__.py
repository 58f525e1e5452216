"""
Chromaguard Validating Constructors
===================================

Turn an untyped list of numbers plus a color space into a validated color.

Scalar API
----------
    build(space, values)
        Arity check, then per-component range checks in declared order.
        Returns the typed color or raises the first ValidationError.
    validate_components(space, values)
        Same checks as build, without creating a color
    validate_component(component, min, max, got)
        Range-check primitive used by every color class

Vectorized API
--------------
    np_valid_mask(space, array)
        Boolean mask of in-range rows of an (..., n) array
    np_build(space, array)
        One color per row; raises the error of the first invalid row

Examples
--------
>>> from chromaguard.construct import build
>>> build("rgb", [255.0, 0.0, 0.0])
Rgb(r=255.0, g=0.0, b=0.0)
>>> build("cmyk", [0.5, 0.5, 0.5])
Traceback (most recent call last):
    ...
chromaguard.errors.NumberOfComponents: Wrong number of color components (expected 4, got 3)
"""

from ..validation import validate_component
from .dispatch import build, validate_components
from .np_dispatch import np_build, np_valid_mask

__all__ = [
    'build',
    'validate_components',
    'validate_component',
    'np_build',
    'np_valid_mask',
]
