"""
Component rule table.

For every color space: the ordered component names (which fix the arity) and
the inclusive legal range of each constrained component. Components that are
listed in ``components`` but have no ``ComponentRule`` are unconstrained.
"""
from __future__ import annotations
from types import MappingProxyType
from typing import Mapping, NamedTuple, Tuple

from .types.color_space import ColorSpaceTag
from .types.component_types import SpaceLike


class ComponentRule(NamedTuple):
    name: str
    min: float
    max: float


class SpaceRules(NamedTuple):
    components: Tuple[str, ...]
    constraints: Tuple[ComponentRule, ...]

    @property
    def arity(self) -> int:
        return len(self.components)


_UNIT = (0.0, 1.0)
_HUE = (0.0, 360.0)
_LIGHTNESS = (0.0, 100.0)

_RULES: dict[ColorSpaceTag, SpaceRules] = {
    ColorSpaceTag.RGB: SpaceRules(
        ("r", "g", "b"),
        (
            ComponentRule("r", 0.0, 255.0),
            ComponentRule("g", 0.0, 255.0),
            ComponentRule("b", 0.0, 255.0),
        ),
    ),
    ColorSpaceTag.CMY: SpaceRules(
        ("c", "m", "y"),
        (
            ComponentRule("c", *_UNIT),
            ComponentRule("m", *_UNIT),
            ComponentRule("y", *_UNIT),
        ),
    ),
    ColorSpaceTag.CMYK: SpaceRules(
        ("c", "m", "y", "k"),
        (
            ComponentRule("c", *_UNIT),
            ComponentRule("m", *_UNIT),
            ComponentRule("y", *_UNIT),
            ComponentRule("k", *_UNIT),
        ),
    ),
    ColorSpaceTag.HSV: SpaceRules(
        ("h", "s", "v"),
        (
            ComponentRule("h", *_HUE),
            ComponentRule("s", *_UNIT),
            ComponentRule("v", *_UNIT),
        ),
    ),
    ColorSpaceTag.HSL: SpaceRules(
        ("h", "s", "l"),
        (
            ComponentRule("h", *_HUE),
            ComponentRule("s", *_UNIT),
            ComponentRule("l", *_UNIT),
        ),
    ),
    ColorSpaceTag.LCH: SpaceRules(
        ("l", "c", "h"),
        (
            ComponentRule("l", *_LIGHTNESS),
            ComponentRule("c", 0.0, 100.0),
            ComponentRule("h", *_HUE),
        ),
    ),
    ColorSpaceTag.LUV: SpaceRules(
        ("l", "u", "v"),
        (
            ComponentRule("l", *_LIGHTNESS),
            ComponentRule("u", -134.0, 220.0),
            ComponentRule("v", -140.0, 122.0),
        ),
    ),
    ColorSpaceTag.LAB: SpaceRules(("l", "a", "b"), (ComponentRule("l", *_LIGHTNESS),)),
    ColorSpaceTag.HUNTER_LAB: SpaceRules(("l", "a", "b"), (ComponentRule("l", *_LIGHTNESS),)),
    ColorSpaceTag.XYZ: SpaceRules(("x", "y", "z"), ()),
    ColorSpaceTag.YXY: SpaceRules(("y1", "x", "y2"), ()),
}


def _check_table(table: Mapping[ColorSpaceTag, SpaceRules]) -> None:
    missing = [tag.name for tag in ColorSpaceTag if tag not in table]
    if missing:
        raise RuntimeError(f"No component rules declared for: {', '.join(missing)}")
    for tag, rules in table.items():
        for rule in rules.constraints:
            if rule.name not in rules.components:
                raise RuntimeError(f"{tag.name} constrains unknown component {rule.name!r}")
            if rule.min > rule.max:
                raise RuntimeError(f"{tag.name} component {rule.name!r} has an empty range")
        # constraints are checked in this order, so it must follow the fields
        order = [rules.components.index(rule.name) for rule in rules.constraints]
        if order != sorted(set(order)):
            raise RuntimeError(f"{tag.name} constraints are not in component order")


_check_table(_RULES)

SPACE_RULES: Mapping[ColorSpaceTag, SpaceRules] = MappingProxyType(_RULES)


def rules_for(space: SpaceLike) -> SpaceRules:
    return SPACE_RULES[ColorSpaceTag.from_name(space)]


def required_components(space: SpaceLike) -> int:
    """Number of components a color in ``space`` needs (4 for CMYK, else 3)."""
    return rules_for(space).arity
