import math
from fractions import Fraction

import pytest

from markov.chain import NormalizingRow
from markov.errors import EmptyRowError, InternalError, OutOfRangeError
from markov.states import TextState, Uint16State

A = Uint16State(1)
B = Uint16State(2)
C = TextState("hello")


def _row(*states) -> NormalizingRow:
    row = NormalizingRow()
    for s in states:
        row.add_state(s)
    return row


def test_new_row_accounts_only_for_count_field() -> None:
    row = NormalizingRow()
    assert row.size() == 4
    assert row.observation_count == 0
    assert len(row) == 0


def test_add_state_grows_size_only_for_new_destinations() -> None:
    row = NormalizingRow()
    assert row.add_state(A) == 4 + 2 + 4
    assert row.add_state(A) == 10
    assert row.add_state(C) == 10 + 5 + 4
    assert row.add_state(A) == 19
    assert row.size() == 19
    assert row.observation_count == 4
    assert row.count(A) == 3


def test_weights_sum_to_one() -> None:
    row = _row(A, B, B, C, A, B, A, A)
    total = sum(row.state_weight(s) for s in row.destinations())
    assert abs(total - 1.0) < 1e-12
    assert sum(row.state_fraction(s) for s in row.destinations()) == Fraction(1)
    assert row.state_weight(A) == 4 / 8
    assert row.state_fraction(B) == Fraction(3, 8)


def test_unseen_state_has_zero_weight() -> None:
    row = _row(A)
    assert row.state_weight(B) == 0.0
    assert row.state_fraction(B) == 0
    assert B not in row
    assert NormalizingRow().state_weight(A) == 0.0


@pytest.mark.parametrize("p", [0.0, 0.3, 0.5, 0.999, 1.0])
def test_single_destination_row_always_walks_to_it(p: float) -> None:
    row = _row(B, B, B)
    assert row.walk(p) == B


def test_walk_follows_cumulative_cutoffs_in_insertion_order() -> None:
    # Cutoffs: A -> 0.25, B -> 0.75, C -> 1.0
    row = _row(A, B, B, C)
    assert row.walk(0.0) == A
    assert row.walk(0.25) == A
    assert row.walk(0.26) == B
    assert row.walk(0.75) == B
    assert row.walk(0.76) == C
    assert row.walk(1.0) == C


def test_walk_never_returns_zero_weight_state() -> None:
    row = _row(A, B, A, B, B)
    for i in range(101):
        s = row.walk(i / 100)
        assert row.state_weight(s) > 0.0


def test_walk_is_deterministic_and_sees_new_observations() -> None:
    row = _row(A)
    assert row.walk(0.9) == A
    assert row.walk(0.9) == A
    row.add_state(B)
    # Cache is stale after the mutation: A -> 0.5, B -> 1.0
    assert row.walk(0.9) == B
    assert row.walk(0.4) == A


@pytest.mark.parametrize("p", [-0.01, 1.01, math.nan])
def test_walk_rejects_out_of_range(p: float) -> None:
    row = _row(A)
    with pytest.raises(OutOfRangeError):
        row.walk(p)
    with pytest.raises(ValueError, match=r"within \[0, 1\]"):
        row.walk(p)


def test_walk_on_empty_row_fails() -> None:
    with pytest.raises(EmptyRowError):
        NormalizingRow().walk(0.5)


def test_many_destinations_last_cutoff_is_exactly_one() -> None:
    row = NormalizingRow()
    for i in range(7):
        for _ in range(i + 1):
            row.add_state(Uint16State(i))
    assert row.walk(1.0) == Uint16State(6)
    weights = row.weights()
    assert abs(sum(weights.values()) - 1.0) < 1e-12


def test_counter_overflow_is_reported_not_wrapped() -> None:
    from markov.chain.row import COUNTER_MAX

    row = _row(A)
    row._observation_count = COUNTER_MAX
    with pytest.raises(OverflowError, match="4-byte counter"):
        row.add_state(A)
    assert row.count(A) == 1


def test_inconsistent_cumulative_table_raises_internal_error() -> None:
    row = _row(A, B)
    row.walk(0.5)
    # Table no longer reaches 1.0 and is marked fresh, so p=0.9 matches nothing.
    row._cutoffs = [0.5]
    row._cutoff_states = [A]
    row._stale = False
    with pytest.raises(InternalError, match="No cumulative cutoff"):
        row.walk(0.9)
    assert row.walk(0.5) == A
