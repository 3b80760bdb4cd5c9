"""Fixed-width unsigned integer states."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Dict, Type


def _require_uint(value: object, *, width: int, name: str) -> int:
    if isinstance(value, bool):
        ivalue = int(value)
    elif isinstance(value, int):
        ivalue = value
    else:
        raise TypeError(f"{name} expects an unsigned integer; got {type(value).__name__}.")
    upper = (1 << (8 * width)) - 1
    if not (0 <= ivalue <= upper):
        raise ValueError(f"{name} expects a value in [0, {upper}]; got {ivalue}.")
    return ivalue


@dataclass(frozen=True)
class UintState:
    """
    Unsigned integer occupying ``WIDTH`` bytes, encoded little-endian.

    Only the fixed-width subclasses are instantiable, so one logical value has
    exactly one state class.
    """

    number: int
    WIDTH: ClassVar[int]

    def __post_init__(self) -> None:
        if type(self) is UintState:
            raise TypeError("UintState is abstract; use Uint8State, Uint16State, Uint32State or Uint64State.")
        object.__setattr__(self, "number", _require_uint(self.number, width=self.WIDTH, name=type(self).__name__))

    def value(self) -> str:
        return str(self.number)

    def size(self) -> int:
        return self.WIDTH

    def bytes(self) -> bytes:
        return self.number.to_bytes(self.WIDTH, "little")


@dataclass(frozen=True)
class Uint8State(UintState):
    WIDTH: ClassVar[int] = 1


@dataclass(frozen=True)
class Uint16State(UintState):
    WIDTH: ClassVar[int] = 2


@dataclass(frozen=True)
class Uint32State(UintState):
    WIDTH: ClassVar[int] = 4


@dataclass(frozen=True)
class Uint64State(UintState):
    WIDTH: ClassVar[int] = 8


STATE_TYPES: Dict[int, Type[UintState]] = {
    1: Uint8State,
    2: Uint16State,
    4: Uint32State,
    8: Uint64State,
}


def uint_state(number: int, width: int = 2) -> UintState:
    if width not in STATE_TYPES:
        raise ValueError(f"width must be one of {sorted(STATE_TYPES)}, got {width}.")
    return STATE_TYPES[width](number)
