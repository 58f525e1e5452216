from __future__ import annotations
from typing import Any, ClassVar, Iterator, Tuple

from ..rules import SPACE_RULES, SpaceRules
from ..types.color_space import ColorSpaceTag
from ..types.component_types import Scalar
from ..validation import validate_rules


def _component_property(index: int, name: str) -> property:
    def getter(self: ColorBase) -> float:
        return self._value[index]
    getter.__name__ = name
    return property(getter, doc=f"Component {name!r}.")


class ColorBase:
    # subclasses keep a __dict__ for _is_frozen; __setattr__ does the freezing
    __slots__ = ('_value',)

    space: ClassVar[ColorSpaceTag]
    rules: ClassVar[SpaceRules]
    num_channels: ClassVar[int]
    component_names: ClassVar[Tuple[str, ...]]
    _is_frozen: bool = False   # class-level default (instance gets its own slot)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        space = cls.__dict__.get("space")
        if space is None:
            return
        cls.rules = SPACE_RULES[space]
        cls.num_channels = cls.rules.arity
        cls.component_names = cls.rules.components
        for index, name in enumerate(cls.component_names):
            setattr(cls, name, _component_property(index, name))

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, *components: Scalar) -> None:
        if not hasattr(self.__class__, "rules"):
            raise TypeError(f"{self.__class__.__name__} is not bound to a color space")

        # raises before anything is stored, so no partially built color exists
        value = validate_rules(self.rules, components)

        # safe assignment; __setattr__ still allows it during init
        self._value = value

        # freeze instance — no more writes allowed
        super().__setattr__('_is_frozen', True)

    def __reduce__(self):
        # copy and pickle rebuild through __init__, so the components are revalidated
        return (self.__class__, self._value)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[float, ...]:
        return self._value

    @property
    def components(self) -> Tuple[float, ...]:
        return self._value

    def as_dict(self) -> dict[str, float]:
        return dict(zip(self.component_names, self._value))

    def __iter__(self) -> Iterator[float]:
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return self.space == other.space and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.space, self._value))

    def __repr__(self) -> str:
        fields = ", ".join(f"{n}={v!r}" for n, v in zip(self.component_names, self._value))
        return f"{self.__class__.__name__}({fields})"


def build_registry(*classes: type[ColorBase]) -> dict[ColorSpaceTag, type[ColorBase]]:
    return {
        cls.space: cls
        for cls in classes
    }
