from .numeric import STATE_TYPES, Uint8State, Uint16State, Uint32State, Uint64State, UintState, uint_state
from .protocols import State
from .text import START, TextState

__all__ = [
    "State",
    "TextState",
    "START",
    "UintState",
    "Uint8State",
    "Uint16State",
    "Uint32State",
    "Uint64State",
    "STATE_TYPES",
    "uint_state",
]
