import pytest

from chromaguard.rules import SPACE_RULES, ComponentRule, required_components, rules_for
from chromaguard.types.color_space import ColorSpaceTag


def test_table_covers_every_space():
    assert set(SPACE_RULES) == set(ColorSpaceTag)


def test_required_components():
    for tag in ColorSpaceTag:
        expected = 4 if tag is ColorSpaceTag.CMYK else 3
        assert required_components(tag) == expected
        assert len(rules_for(tag).components) == expected


def test_declared_ranges():
    assert SPACE_RULES[ColorSpaceTag.RGB].constraints == (
        ComponentRule("r", 0.0, 255.0),
        ComponentRule("g", 0.0, 255.0),
        ComponentRule("b", 0.0, 255.0),
    )
    assert SPACE_RULES[ColorSpaceTag.HSV].constraints[0] == ComponentRule("h", 0.0, 360.0)
    assert SPACE_RULES[ColorSpaceTag.LCH].constraints == (
        ComponentRule("l", 0.0, 100.0),
        ComponentRule("c", 0.0, 100.0),
        ComponentRule("h", 0.0, 360.0),
    )
    assert SPACE_RULES[ColorSpaceTag.LUV].constraints == (
        ComponentRule("l", 0.0, 100.0),
        ComponentRule("u", -134.0, 220.0),
        ComponentRule("v", -140.0, 122.0),
    )


def test_partially_constrained_spaces():
    for tag in (ColorSpaceTag.LAB, ColorSpaceTag.HUNTER_LAB):
        assert SPACE_RULES[tag].constraints == (ComponentRule("l", 0.0, 100.0),)
    assert SPACE_RULES[ColorSpaceTag.XYZ].constraints == ()
    assert SPACE_RULES[ColorSpaceTag.YXY].constraints == ()


def test_table_is_read_only():
    with pytest.raises(TypeError):
        SPACE_RULES[ColorSpaceTag.RGB] = SPACE_RULES[ColorSpaceTag.CMY]  # type: ignore[index]


def test_rules_for_accepts_names():
    assert rules_for("HunterLab") is SPACE_RULES[ColorSpaceTag.HUNTER_LAB]
    assert rules_for("hunter_lab") is SPACE_RULES[ColorSpaceTag.HUNTER_LAB]
    assert rules_for("CMYK").arity == 4


def test_unknown_space_name():
    with pytest.raises(ValueError, match="Unknown color space"):
        rules_for("oklab")
