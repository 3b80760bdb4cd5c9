import math
from typing import Sequence

from markov.chain.model import Model
from markov.states.protocols import State
from markov.states.text import START


def log_loss(
    model: Model,
    states: Sequence[State],
    *,
    context: State = START,
    floor: float = 1e-12,
    strict: bool = False,
) -> float:
    """
    Mean negative log-likelihood (nats) of ``states`` under ``model``.

    The first transition is scored from ``context``. Transitions from source
    states the model never saw are skipped; unseen destinations of known
    sources are scored with probability ``floor``. Returns NaN when nothing
    could be scored, or raises ``ValueError`` if ``strict``.
    """
    if floor <= 0.0:
        raise ValueError(f"floor must be > 0, got {floor}.")

    total = 0.0
    n = 0
    prev = context
    for state in states:
        row = model.row(prev)
        if row is not None:
            p = row.state_weight(state)
            total -= math.log(max(p, floor))
            n += 1
        prev = state

    if n == 0:
        if strict:
            raise ValueError("log_loss has no evaluated timesteps.")
        return math.nan
    return total / n
