"""Dense views of a model's transition structure."""

from __future__ import annotations

from typing import List, Tuple

import numpy as np
import pandas as pd

from markov.chain.model import Model
from markov.states.protocols import State


def state_index(model: Model) -> List[State]:
    """All states known to the model: sources first, then pure destinations, in first-seen order."""
    seen: dict[State, None] = {}
    for source, _ in model.rows():
        seen.setdefault(source, None)
    for _, row in model.rows():
        for dest in row.destinations():
            seen.setdefault(dest, None)
    return list(seen)


def transition_matrix(model: Model) -> Tuple[List[State], np.ndarray]:
    """
    Row-stochastic matrix ``P[i, j] = P(states[j] | states[i])``.

    Rows of states without outgoing observations are all zero.
    """
    states = state_index(model)
    index = {s: i for i, s in enumerate(states)}
    matrix = np.zeros((len(states), len(states)), dtype=float)
    for source, row in model.rows():
        i = index[source]
        for dest, w in row.weights().items():
            matrix[i, index[dest]] = w
    return states, matrix


def stationary_distribution(matrix: np.ndarray) -> np.ndarray:
    """
    Left eigenvector of ``matrix`` for eigenvalue 1, normalised to sum to 1.

    All-zero rows are treated as absorbing (self-loop) so the matrix is
    stochastic. For reducible chains the eigenvector returned is one of
    several valid stationary distributions.
    """
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise ValueError(f"Expected a square matrix, got shape {matrix.shape}.")
    n = matrix.shape[0]
    if n == 0:
        return np.zeros(0, dtype=float)
    p = np.array(matrix, dtype=float, copy=True)
    dead = p.sum(axis=1) <= 0.0
    p[dead, :] = 0.0
    p[dead, dead] = 1.0

    eigvals, eigvecs = np.linalg.eig(p.T)
    k = int(np.argmin(np.abs(eigvals - 1.0)))
    vec = np.abs(np.real(eigvecs[:, k]))
    total = vec.sum()
    if total <= 0.0:
        raise ValueError("Could not normalise the stationary distribution.")
    return vec / total


def to_frame(model: Model) -> pd.DataFrame:
    """One row per observed transition: source, destination, count, probability."""
    records = []
    for source, row in model.rows():
        for dest in row.destinations():
            records.append(
                {
                    "source": source.value(),
                    "destination": dest.value(),
                    "count": row.count(dest),
                    "probability": row.state_weight(dest),
                }
            )
    return pd.DataFrame.from_records(records, columns=["source", "destination", "count", "probability"])
