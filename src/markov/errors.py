"""
Error types raised by chain operations.

Each error also derives from the builtin category it belongs to, so callers
may catch either the specific class or e.g. ``ValueError``.
"""

from __future__ import annotations

from typing import Optional

from markov.states.protocols import State


class MarkovError(Exception):
    """Base class for chain errors."""


class OutOfRangeError(MarkovError, ValueError):
    """
    Sampling value outside ``[0, 1]``.

    :param p: The rejected sampling value.
    """

    def __init__(self, p: float) -> None:
        self.p = p
        super().__init__(f"Sampling value must be within [0, 1], got {p!r}.")


class EmptyRowError(MarkovError, LookupError):
    """Walk requested from a state with no recorded observations."""

    def __init__(self, source: Optional[State] = None) -> None:
        self.source = source
        where = f" for state {source.value()!r}" if source is not None else ""
        super().__init__(f"Cannot walk: no observations recorded{where}.")


class UnknownStartStateError(MarkovError, LookupError):
    """Cursor jump to a state that has never been the source of an observation."""

    def __init__(self, state: State) -> None:
        self.state = state
        super().__init__(f"State {state.value()!r} has no outgoing observations and cannot be a start state.")


class InternalError(MarkovError, RuntimeError):
    """Cumulative distribution lookup failed; the table is inconsistent."""
