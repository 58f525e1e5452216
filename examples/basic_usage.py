"""Basic Chromaguard usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from chromaguard import (
    ColorSpaceTag,
    ValidationError,
    build,
    np_build,
    np_valid_mask,
)


def demonstrate_build() -> None:
    # Turn loose numbers into typed, range-checked colors.
    accent = build(ColorSpaceTag.RGB, [255.0, 128.0, 64.0])
    print("RGB:", accent, "red =", accent.r)

    ink = build("cmyk", [0.0, 0.6, 1.0, 0.1])
    print("CMYK:", ink.as_dict())

    white = build("xyz", [0.95047, 1.0, 1.08883])
    print("XYZ:", white.components)


def demonstrate_errors() -> None:
    # Each failure names the first offending component.
    bad_inputs = [
        ("rgb", [256.0, 0.0, 0.0]),
        ("rgb", [-1.0, 0.0, 0.0]),
        ("cmyk", [0.5, 0.5, 0.5]),
        ("luv", [50.0, -135.0, 0.0]),
    ]
    for space, values in bad_inputs:
        try:
            build(space, values)
        except ValidationError as err:
            print(f"{space} {values}: {err}")


def demonstrate_arrays() -> None:
    rows = np.array([
        [0.0, 0.5, 0.5],
        [400.0, 0.5, 0.5],
        [180.0, 1.0, 0.25],
    ])
    print("HSL rows in range:", np_valid_mask("hsl", rows))
    print("First and last rows:", np_build("hsl", rows[[0, 2]]))


if __name__ == "__main__":
    demonstrate_build()
    demonstrate_errors()
    demonstrate_arrays()
