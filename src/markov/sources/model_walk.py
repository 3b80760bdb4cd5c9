from dataclasses import dataclass
from typing import Optional

from markov.chain.model import Model
from markov.states.protocols import State
from markov.states.text import START

from .protocols import Sample, Source


@dataclass(frozen=True)
class ModelWalk(Source):
    """
    Sequence generated by walking a fitted model.

    Each call starts from ``start`` (default: the model's start sentinel) and
    may return fewer than ``length`` states if the walk reaches a dead end.
    """

    model: Model
    start: Optional[State] = None

    @property
    def name(self) -> str:
        return "model_walk"

    def sample(self, length: int, seed: int) -> Sample:
        start = self.start if self.start is not None else START
        return Sample(states=self.model.generate(length, seed=seed, start=start))
