"""
Validation errors.

Every failed validation raises exactly one of the three ``ValidationError``
subclasses below, for the first violated constraint.
"""
from __future__ import annotations
import math
from typing import Any, Tuple


def format_number(value: float) -> str:
    """
    Render whole numbers without a trailing ``.0``.

    Negative zero keeps its sign (``-0``), NaN prints as ``NaN`` and
    infinities as ``inf`` / ``-inf``.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if value.is_integer():
        return format(value, ".0f")
    return repr(value)


class ValidationError(ValueError):
    """Base class for component validation failures."""

    _fields: Tuple[str, ...] = ()

    def __init__(self, *args: Any) -> None:
        if len(args) != len(self._fields):
            raise TypeError(
                f"{self.__class__.__name__} takes {len(self._fields)} arguments ({len(args)} given)"
            )
        for field, value in zip(self._fields, args):
            setattr(self, field, value)
        super().__init__(*args)

    def __str__(self) -> str:
        return self.message()

    def message(self) -> str:
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))

    def __repr__(self) -> str:
        fields = ", ".join(f"{f}={getattr(self, f)!r}" for f in self._fields)
        return f"{self.__class__.__name__}({fields})"


class NumberOfComponents(ValidationError):
    _fields = ("expected", "got")
    expected: int
    got: int

    def message(self) -> str:
        return f"Wrong number of color components (expected {self.expected}, got {self.got})"


class Negative(ValidationError):
    _fields = ("component", "got")
    component: str
    got: float

    def message(self) -> str:
        return f'Color component "{self.component}" can\'t be negative (got {format_number(self.got)})'


class OutOfRange(ValidationError):
    _fields = ("component", "min", "max", "got")
    component: str
    min: float
    max: float
    got: float

    def message(self) -> str:
        return (
            f'Color component "{self.component}" out of range '
            f"(expected {format_number(self.min)} to {format_number(self.max)}, "
            f"got {format_number(self.got)})"
        )
