from __future__ import annotations
from typing import Sequence, Tuple

from .errors import Negative, NumberOfComponents, OutOfRange
from .rules import SpaceRules
from .types.component_types import Scalar, to_float


def validate_component(component: str, min: float, max: float, got: float) -> None:
    """
    Check that ``got`` lies in the inclusive range ``[min, max]``.

    Raises:
        Negative: if ``min`` is exactly zero and ``got`` is below it
        OutOfRange: for any other violation
    """
    if got < min or got > max:
        if min == 0.0 and got < min:
            raise Negative(component, got)
        raise OutOfRange(component, min, max, got)


def check_arity(rules: SpaceRules, values: Sequence[Scalar]) -> None:
    if len(values) != rules.arity:
        raise NumberOfComponents(rules.arity, len(values))


def validate_rules(rules: SpaceRules, values: Sequence[Scalar]) -> Tuple[float, ...]:
    """
    Run the arity check and every range check of ``rules`` against ``values``.

    Checks run in declared component order and stop at the first failure.
    Returns the components as floats, unchanged in value.
    """
    check_arity(rules, values)
    floats = tuple(to_float(v) for v in values)
    by_name = dict(zip(rules.components, floats))
    for rule in rules.constraints:
        validate_component(rule.name, rule.min, rule.max, by_name[rule.name])
    return floats
