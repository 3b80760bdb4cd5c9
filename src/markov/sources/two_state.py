from markov.states.numeric import Uint8State
from markov.utils.rng import seeded_rng

from .protocols import Sample, Source

_ZERO = Uint8State(0)
_ONE = Uint8State(1)


class TwoStateChain(Source):
    """
    Two-state chain over single-byte states 0 and 1:
      P(X_{t+1}=1 | X_t=0) = p01
      P(X_{t+1}=1 | X_t=1) = p11
    """
    @property
    def name(self) -> str:
        return "two_state"

    def __init__(self, p01: float = 0.8, p11: float = 0.2):
        for p in (p01, p11):
            if not (0.0 <= p <= 1.0):
                raise ValueError("p01 and p11 must be between 0 and 1")
        self.p01 = p01
        self.p11 = p11

    def sample(self, length: int, seed: int) -> Sample:
        if length < 0:
            raise ValueError(f"length must be >= 0, got {length}.")
        rng = seeded_rng(seed)
        x: list[Uint8State] = []
        if length == 0:
            return Sample(states=x)
        x.append(_ONE if rng.random() < 0.5 else _ZERO)

        for _ in range(length - 1):
            p1 = self.p11 if x[-1] == _ONE else self.p01
            x.append(_ONE if rng.random() < p1 else _ZERO)

        return Sample(states=x)
