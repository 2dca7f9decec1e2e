"""
seqjoins.stats.schemes.joins.core
=================================

Core data structures and closed-form moments for the joins statistic.

A *join* is an alternation between the two symbols of a dichotomous
sequence: every position i >= 1 where ``S[i] != S[i - 1]``. Joins are marked
with asterisks below::

    0 0 1 0 0 0 1 0 0 0 0 1 1 0 0 0 1 1 1 1 0 0
       * *     * *       *   *     *       *

This module provides:

- `count_observed`: the observed join count
- `TrialParameters` / `resolve_trial_parameters`: trial count and event
  probability, explicit or derived from the data
- `expected_joins` / `variance_joins`: the Wishart-Hirshfeld moments

Mathematical Background
-----------------------
For N trials with event probability p and q = 1 - p:

    E[J] = 2 (N - 1) p q
    V[J] = 4 N p q (1 - 3 p q) - 2 p q (3 - 10 p q)

References:
    Wishart, J. & Hirshfeld, H. O. (1936). A theorem concerning the
    distribution of joins between line segments. Journal of the London
    Mathematical Society, 11, 227.

Examples
--------
>>> count_observed([0, 0, 1, 0, 0, 0, 1, 0, 0, 0, 0, 1, 1, 0, 0, 0, 1, 1, 1, 1, 0, 0])
8
>>> expected_joins(200, 0.5)
99.5
>>> variance_joins(200, 0.5)
49.75
>>> resolve_trial_parameters(sequence="HTTHHH", state="H")
TrialParameters(trials=6, prob=0.6666666666666666, state='H')
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from numbers import Integral, Real
from typing import Any, List, Optional, Sequence, TypedDict

from seqjoins.core.errors import InvalidParameterError, MalformedSequenceError
from seqjoins.core.names import DEFAULT_PROB, Symbol


# --- Type Definitions and Payload Schemas ---


class JoinStatsPayload(TypedDict):
    """Payload for a completed joins test (see `JoinStatistics.as_dict`)."""

    observed: int
    expected: float
    variance: float
    obsdev: float
    stdev: float
    z_value: Optional[float]
    p_value: float
    trials: int
    prob: float
    tails: int
    ccorr: bool


@dataclass(frozen=True)
class TrialParameters:
    """Trial count and event probability feeding the expected moments."""

    trials: int
    prob: float = DEFAULT_PROB
    state: Optional[Symbol] = None

    def __post_init__(self) -> None:
        check_trials(self.trials)
        check_prob(self.prob)


# --- Validation ---


def check_trials(trials: Any) -> int:
    """Return `trials` as an int, or raise if it is not a non-negative integer."""
    if isinstance(trials, bool) or not isinstance(trials, Integral) or trials < 0:
        raise InvalidParameterError(
            f"trials must be a non-negative integer, got {trials!r}"
        )
    return int(trials)


def check_prob(prob: Any) -> float:
    """Return `prob` as a float, or raise if it is not a probability."""
    if (
        isinstance(prob, bool)
        or not isinstance(prob, Real)
        or not math.isfinite(prob)
        or not 0.0 <= prob <= 1.0
    ):
        raise InvalidParameterError(f"prob must be in [0, 1], got {prob!r}")
    return float(prob)


def distinct_symbols(sequence: Sequence[Symbol], limit: Optional[int] = None) -> List[Symbol]:
    """Distinct symbols in order of first appearance.

    Symbols only need to support ``==``; they are not hashed. When `limit` is
    given, scanning stops as soon as more than `limit` symbols have been seen.

    >>> distinct_symbols(["b", "a", "b", "c"])
    ['b', 'a', 'c']
    >>> distinct_symbols([1, 2, 3, 4, 5], limit=2)
    [1, 2, 3]
    """
    seen: List[Symbol] = []
    for item in sequence:
        if not any(item == s for s in seen):
            seen.append(item)
            if limit is not None and len(seen) > limit:
                break
    return seen


def check_dichotomous(sequence: Sequence[Symbol]) -> None:
    """Raise `MalformedSequenceError` if `sequence` has more than two symbols."""
    if len(distinct_symbols(sequence, limit=2)) > 2:
        raise MalformedSequenceError(distinct_symbols(sequence))


# --- Counter ---


def count_observed(sequence: Sequence[Symbol]) -> int:
    """Number of positions where an element differs from its predecessor.

    Sequences shorter than two elements have no joins.

    >>> count_observed([1, 0, 0, 0, 1, 0, 0, 1, 0, 1, 1, 0])
    7
    >>> count_observed(["x"])
    0
    """
    check_dichotomous(sequence)
    count = 0
    for i in range(1, len(sequence)):
        if sequence[i] != sequence[i - 1]:
            count += 1
    return count


# --- Moments ---


def state_frequency(sequence: Sequence[Symbol], state: Symbol) -> float:
    """Relative frequency of `state` in `sequence`; 0.5 for an empty sequence."""
    if not len(sequence):
        return DEFAULT_PROB
    return sum(1 for item in sequence if item == state) / len(sequence)


def resolve_trial_parameters(
    sequence: Optional[Sequence[Symbol]] = None,
    trials: Optional[int] = None,
    prob: Optional[float] = None,
    state: Optional[Symbol] = None,
) -> TrialParameters:
    """Resolve the trial count and event probability for the moments.

    Explicit `trials` and `prob` always win. Otherwise the trial count is the
    sequence length, and the probability is the frequency of `state` in the
    sequence when a state is named, else 0.5.

    Raises:
        InvalidParameterError: neither `trials` nor a sequence was given, or
            a parameter is out of range
        MalformedSequenceError: the sequence is not dichotomous
    """
    if sequence is not None:
        check_dichotomous(sequence)
    if trials is None:
        if sequence is None:
            raise InvalidParameterError(
                "No data to count trials from: give a sequence or trials"
            )
        trials = len(sequence)
    if prob is None:
        if state is not None and sequence is not None:
            prob = state_frequency(sequence, state)
        else:
            prob = DEFAULT_PROB
    return TrialParameters(trials=check_trials(trials), prob=check_prob(prob), state=state)


def expected_joins(trials: int, prob: float = DEFAULT_PROB) -> float:
    """Expected join count, 2 (N - 1) p q.

    Fewer than two trials have no pairs to join, so the expectation is 0.

    >>> expected_joins(8, 0.5)
    3.5
    >>> expected_joins(0, 0.5)
    0.0
    """
    n = check_trials(trials)
    p = check_prob(prob)
    if n < 2:
        return 0.0
    return 2.0 * (n - 1) * p * (1.0 - p)


def variance_joins(trials: int, prob: float = DEFAULT_PROB) -> float:
    """Variance of the join count, 4 N p q (1 - 3 p q) - 2 p q (3 - 10 p q).

    Floored at 0 for fewer than two trials.

    >>> variance_joins(8, 0.5)
    1.75
    """
    n = check_trials(trials)
    p = check_prob(prob)
    if n < 2:
        return 0.0
    pq = p * (1.0 - p)
    return max((4.0 * n * pq) * (1.0 - 3.0 * pq) - (2.0 * pq) * (3.0 - 10.0 * pq), 0.0)
