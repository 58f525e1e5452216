import pytest

from chromaguard.errors import Negative, NumberOfComponents, OutOfRange, ValidationError, format_number


def test_errors_are_value_errors():
    for err in (NumberOfComponents(4, 3), Negative("r", -1.0), OutOfRange("u", -134.0, 220.0, -135.0)):
        assert isinstance(err, ValidationError)
        assert isinstance(err, ValueError)


def test_number_of_components_message():
    err = NumberOfComponents(4, 3)
    assert err.expected == 4
    assert err.got == 3
    assert str(err) == "Wrong number of color components (expected 4, got 3)"


def test_negative_message():
    err = Negative("r", -1.0)
    assert err.component == "r"
    assert err.got == -1.0
    assert str(err) == 'Color component "r" can\'t be negative (got -1)'


def test_out_of_range_message():
    err = OutOfRange("u", -134.0, 220.0, -135.5)
    assert (err.component, err.min, err.max, err.got) == ("u", -134.0, 220.0, -135.5)
    assert str(err) == 'Color component "u" out of range (expected -134 to 220, got -135.5)'


def test_equality_by_kind_and_fields():
    assert Negative("r", -1.0) == Negative("r", -1.0)
    assert Negative("r", -1.0) != Negative("g", -1.0)
    assert OutOfRange("r", 0.0, 255.0, 256.0) != Negative("r", 256.0)
    assert hash(NumberOfComponents(3, 2)) == hash(NumberOfComponents(3, 2))


def test_repr():
    assert repr(NumberOfComponents(3, 0)) == "NumberOfComponents(expected=3, got=0)"


def test_wrong_field_count():
    with pytest.raises(TypeError):
        Negative("r")


def test_format_number():
    assert format_number(255.0) == "255"
    assert format_number(-1.0) == "-1"
    assert format_number(0.5) == "0.5"
    assert format_number(3) == "3"


def test_format_number_special_values():
    assert format_number(-0.0) == "-0"
    assert format_number(0.0) == "0"
    assert format_number(float("nan")) == "NaN"
    assert format_number(float("inf")) == "inf"
    assert format_number(float("-inf")) == "-inf"
    assert str(Negative("r", -0.5)) == 'Color component "r" can\'t be negative (got -0.5)'
