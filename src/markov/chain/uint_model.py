from __future__ import annotations

from markov.states.numeric import UintState

from .model import Model


class UintModel:
    """
    Ingestion path restricted to fixed-width unsigned integer states.

    Counting and size accounting are those of ``Model``; this wrapper only
    rejects data that is not a ``UintState``.
    """

    def __init__(self) -> None:
        self.model = Model()

    def add_data(self, data: object) -> None:
        if not isinstance(data, UintState):
            raise TypeError(f"Cannot call add_data with type {type(data).__name__} on a UintModel.")
        self.model.add_state(data)

    def size(self) -> int:
        return self.model.size()
