from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class State(Protocol):
    """
    Capability set required of any value used as a chain state.

    Implementations serve as keys of the model's mappings, so they must be
    immutable and compare/hash by value. ``size()`` must equal
    ``len(bytes())``.
    """

    def value(self) -> str:
        ...

    def size(self) -> int:
        ...

    def bytes(self) -> bytes:
        ...
