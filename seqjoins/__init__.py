"""
seqjoins — the Wishart-Hirshfeld joins test for dichotomous sequences.

A *join* is an alternation between the two symbols of a sequence: every
place where an element differs from the one before it. Too many joins
suggest a sequence that flips more than chance allows; too few suggest
sustained runs. seqjoins counts the observed joins, computes their expected
count and variance under a binomial model, and tests the deviation with a
normal approximation (with an optional continuity correction).

The statistics are pure functions of their inputs (`seqjoins.stats`). Around
them sit a sample store and an object facade (`seqjoins.api`), a
dichotomization helper for continuous data (`seqjoins.data`), and text and
tabular reporting (`seqjoins.reporting`, `seqjoins.backends`).

Example
-------
>>> import seqjoins
>>> assert hasattr(seqjoins, "stats")
>>> result = seqjoins.run_test(["ban", "ban", "che", "ban", "che", "ban", "ban", "ban"])
>>> result.observed, result.z_value, result.p_value
(4, 0.0, 1.0)
"""

from seqjoins import stats
from seqjoins.api.joins import Joins
from seqjoins.core.errors import (
    InvalidParameterError,
    JoinsError,
    MalformedSequenceError,
)
from seqjoins.core.store import SampleStore
from seqjoins.stats.schemes.joins import (
    JoinStatistics,
    JoinsOptions,
    count_observed,
    expected_joins,
    run_test,
    variance_joins,
)

__version__ = "0.1.0"

__all__ = [
    "InvalidParameterError",
    "JoinStatistics",
    "Joins",
    "JoinsError",
    "JoinsOptions",
    "MalformedSequenceError",
    "SampleStore",
    "count_observed",
    "expected_joins",
    "run_test",
    "stats",
    "variance_joins",
]
