from __future__ import annotations

from bisect import bisect_left
from fractions import Fraction
from typing import Dict, Iterator, List

from markov.errors import EmptyRowError, InternalError, OutOfRangeError
from markov.states.protocols import State

# Width in bytes of the row-level count field and of every per-destination counter.
COUNTER_BYTES = 4
COUNTER_MAX = (1 << (8 * COUNTER_BYTES)) - 1


class NormalizingRow:
    """
    Transition table from one fixed source state.

    Observations are folded in as plain frequency counts; weights are derived
    on read as ``count / observation_count``. The cumulative distribution used
    by ``walk`` is a cache rebuilt on the first walk after a mutation.

    The byte size tracks what a serializer would write: a 4-byte row count,
    plus the key bytes and a 4-byte counter for every distinct destination.
    """

    def __init__(self) -> None:
        self._observation_count = 0
        self._counts: Dict[State, int] = {}
        self._byte_size = COUNTER_BYTES
        self._cutoffs: List[float] = []
        self._cutoff_states: List[State] = []
        self._stale = True

    @property
    def observation_count(self) -> int:
        return self._observation_count

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, state: object) -> bool:
        return state in self._counts

    def __repr__(self) -> str:
        return f"NormalizingRow(observations={self._observation_count}, destinations={len(self._counts)}, size={self._byte_size})"

    def add_state(self, state: State) -> int:
        """Record one transition to ``state``; returns the new byte size."""
        if self._observation_count >= COUNTER_MAX:
            raise OverflowError(f"Row observation count would exceed the {COUNTER_BYTES}-byte counter limit {COUNTER_MAX}.")
        count = self._counts.get(state, 0)
        if count == 0:
            self._byte_size += state.size() + COUNTER_BYTES
        self._counts[state] = count + 1
        self._observation_count += 1
        self._stale = True
        return self._byte_size

    def size(self) -> int:
        return self._byte_size

    def count(self, state: State) -> int:
        return self._counts.get(state, 0)

    def destinations(self) -> Iterator[State]:
        return iter(self._counts)

    def state_fraction(self, state: State) -> Fraction:
        """Exact weight of ``state``; zero if unseen."""
        count = self._counts.get(state, 0)
        if count == 0:
            return Fraction(0)
        return Fraction(count, self._observation_count)

    def state_weight(self, state: State) -> float:
        count = self._counts.get(state, 0)
        if count == 0:
            return 0.0
        return count / self._observation_count

    def weights(self) -> Dict[State, float]:
        return {s: c / self._observation_count for s, c in self._counts.items()}

    def _rebuild(self) -> None:
        # Cutoffs come from integer running counts, so the last one is exactly 1.0.
        running = 0
        cutoffs: List[float] = []
        states: List[State] = []
        for state, count in self._counts.items():
            running += count
            cutoffs.append(running / self._observation_count)
            states.append(state)
        self._cutoffs = cutoffs
        self._cutoff_states = states
        self._stale = False

    def walk(self, p: float) -> State:
        """
        Sample the destination whose cumulative interval contains ``p``.

        Returns the first destination (in insertion order) whose cutoff is
        ``>= p``.
        """
        if not (0.0 <= p <= 1.0):
            raise OutOfRangeError(p)
        if self._observation_count == 0:
            raise EmptyRowError()
        if self._stale:
            self._rebuild()

        idx = bisect_left(self._cutoffs, p)
        if idx >= len(self._cutoffs):
            raise InternalError(
                f"No cumulative cutoff >= {p!r} in a row with {len(self._cutoffs)} entries "
                f"(last cutoff {self._cutoffs[-1] if self._cutoffs else None!r})."
            )
        return self._cutoff_states[idx]
