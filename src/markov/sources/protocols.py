from dataclasses import dataclass
from typing import Protocol, Sequence

from markov.states.protocols import State


@dataclass(frozen=True)
class Sample:
    states: Sequence[State]


class Source(Protocol):
    @property
    def name(self) -> str:
        ...

    def sample(self, length: int, seed: int) -> Sample:
        ...
