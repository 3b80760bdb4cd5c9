from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from markov.errors import EmptyRowError, UnknownStartStateError
from markov.states.protocols import State
from markov.states.text import START
from markov.utils.rng import seeded_rng

from .row import NormalizingRow

LOGGER = logging.getLogger(__name__)


class Model:
    """
    First-order Markov chain built by successively observing states.

    The model keeps a cursor (initially ``START``) and one ``NormalizingRow``
    per source state. ``add_state`` records the transition cursor -> state and
    moves the cursor; ``set_current_state`` jumps the cursor to any state that
    has outgoing observations.
    """

    def __init__(self) -> None:
        self._cursor: State = START
        self._rows: Dict[State, NormalizingRow] = {}

    @property
    def current_state(self) -> State:
        return self._cursor

    def __len__(self) -> int:
        return len(self._rows)

    def __contains__(self, state: object) -> bool:
        return state in self._rows

    def add_state(self, state: State) -> None:
        row = self._rows.get(self._cursor)
        if row is None:
            LOGGER.debug("New row for source state %r", self._cursor.value())
            row = NormalizingRow()
            self._rows[self._cursor] = row
        row.add_state(state)
        self._cursor = state

    def add_states(self, states: Iterable[State]) -> None:
        for state in states:
            self.add_state(state)

    def set_current_state(self, state: State) -> None:
        if state not in self._rows:
            raise UnknownStartStateError(state)
        self._cursor = state

    def size(self) -> int:
        """Serialized size in bytes: every source key plus its row."""
        return sum(source.size() + row.size() for source, row in self._rows.items())

    def row(self, state: State) -> Optional[NormalizingRow]:
        return self._rows.get(state)

    def rows(self) -> Iterator[Tuple[State, NormalizingRow]]:
        return iter(self._rows.items())

    def state_weight(self, source: State, destination: State) -> float:
        row = self._rows.get(source)
        if row is None:
            return 0.0
        return row.state_weight(destination)

    def walk(self, p: float) -> State:
        """Sample the successor of the current state; the cursor is not moved."""
        row = self._rows.get(self._cursor)
        if row is None:
            raise EmptyRowError(self._cursor)
        return row.walk(p)

    def generate(self, length: int, seed: int, start: Optional[State] = None) -> List[State]:
        """
        Walk up to ``length`` states from ``start`` (default: the cursor).

        Stops early when the walk reaches a state that was never a source. The
        cursor is left on the last generated state.
        """
        if length < 0:
            raise ValueError(f"length must be >= 0, got {length}.")
        if start is not None:
            self.set_current_state(start)
        rng = seeded_rng(seed)
        out: List[State] = []
        for _ in range(length):
            if self._cursor not in self._rows:
                LOGGER.debug("Walk stopped at %r after %d states: no outgoing transitions", self._cursor.value(), len(out))
                break
            nxt = self.walk(rng.random())
            out.append(nxt)
            # Dead-end states are not valid start states, so move the cursor directly.
            self._cursor = nxt
        return out
