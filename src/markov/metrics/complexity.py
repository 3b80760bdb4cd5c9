"""Model-size and complexity metrics."""

import math
from typing import Dict

from markov.chain.model import Model
from markov.states.protocols import State


def n_states(model: Model) -> int:
    """Number of distinct states, as sources or destinations."""
    states = set()
    for source, row in model.rows():
        states.add(source)
        states.update(row.destinations())
    return len(states)


def occupancy(model: Model) -> Dict[State, float]:
    """Empirical occupancy: share of observations made from each source state."""
    total = sum(row.observation_count for _, row in model.rows())
    if total <= 0:
        return {}
    return {source: row.observation_count / total for source, row in model.rows()}


def statistical_complexity(model: Model) -> float:
    """Entropy (nats) of the empirical source-state occupancy."""
    eps = 1e-18
    return -sum(p * math.log(max(p, eps)) for p in occupancy(model).values())
