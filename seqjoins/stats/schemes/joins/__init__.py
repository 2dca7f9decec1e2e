"""
seqjoins.stats.schemes.joins
============================

The Wishart-Hirshfeld joins test for dichotomous sequences.

Core components:
- `count_observed`: observed alternations between the two symbols
- `expected_joins`, `variance_joins`: closed-form null moments
- `run_test`: the full test, returning a `JoinStatistics` snapshot

Example:
--------
>>> from seqjoins.stats.schemes.joins import run_test
>>> run_test([1, 0, 1, 0, 1, 0, 0, 0]).observed
5
"""

from seqjoins.stats.schemes.joins.core import (
    JoinStatsPayload,
    TrialParameters,
    check_dichotomous,
    count_observed,
    distinct_symbols,
    expected_joins,
    resolve_trial_parameters,
    state_frequency,
    variance_joins,
)
from seqjoins.stats.schemes.joins.statistics import (
    JoinStatistics,
    JoinsOptions,
    expected,
    observed,
    obsdev,
    p_value,
    run_test,
    stats_hash,
    stdev,
    variance,
    z_value,
)

__all__ = [
    # Core
    "JoinStatsPayload",
    "TrialParameters",
    "check_dichotomous",
    "count_observed",
    "distinct_symbols",
    "expected_joins",
    "resolve_trial_parameters",
    "state_frequency",
    "variance_joins",
    # Test
    "JoinStatistics",
    "JoinsOptions",
    "expected",
    "observed",
    "obsdev",
    "p_value",
    "run_test",
    "stats_hash",
    "stdev",
    "variance",
    "z_value",
]
