"""
seqjoins.stats.schemes.joins.statistics
=======================================

The joins test: observed count, null moments, z-score and p-value.

Every entry point takes the same keywords and resolves them the same way:

- ``sequence``: the dichotomous data (any two equality-comparable symbols)
- ``observed``: a precomputed join count, used instead of counting
- ``trials`` / ``prob``: trial count and event probability, used instead of
  deriving them from the sequence
- ``state``: estimate ``prob`` as the frequency of this symbol in the data

An explicit value always wins over one derived from the sequence. Test
options (continuity correction, tails, one-tailed direction, reporting
precision) travel in a `JoinsOptions` record or as keywords.

Significance is delegated to a `NormalApproximation` strategy, which callers
may replace via the ``approx`` keyword.

Examples
--------
>>> seq = ["ban", "che", "che", "che", "che", "che", "che", "che"]
>>> result = run_test(seq)
>>> result.observed, result.expected, result.variance
(1, 3.5, 1.75)
>>> round(result.z_value, 3), round(result.p_value, 5)
(-1.512, 0.13057)

Without data, from the trial count alone:

>>> expected(trials=200), variance(trials=200)
(99.5, 49.75)
>>> p_value(observed=10, trials=20, tails=1, precision_p=4)
0.5
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from seqjoins.core.errors import InvalidParameterError
from seqjoins.core.names import Direction, StatName, Symbol, Tails
from seqjoins.stats.methods.common.statistical import (
    NormalApproximation,
    check_direction,
    check_tails,
    apply_precision,
)
from seqjoins.stats.schemes.joins.core import (
    JoinStatsPayload,
    TrialParameters,
    check_trials,
    count_observed,
    expected_joins,
    resolve_trial_parameters,
    variance_joins,
)

logger = logging.getLogger(__name__)

DEFAULT_APPROXIMATION = NormalApproximation()

StatSelection = Union[Iterable[Union[StatName, str]], Mapping[Union[StatName, str], Any]]


@dataclass(frozen=True, kw_only=True)
class JoinsOptions:
    """
    Options for the significance step of a joins test.

    Attributes:
        ccorr: Apply a 0.5 continuity correction towards the expectation
        tails: 1 or 2
        direction: One-tailed direction; None follows the sign of z,
            "greater" tests for excess joins, "less" for too few
        precision_s: Decimals to round the reported z-value to
        precision_p: Decimals to round the reported p-value to
    """

    ccorr: bool = True
    tails: Tails = 2
    direction: Direction = None
    precision_s: Optional[int] = None
    precision_p: Optional[int] = None

    def __post_init__(self) -> None:
        check_tails(self.tails)
        check_direction(self.direction)
        for name in ("precision_s", "precision_p"):
            value = getattr(self, name)
            if value is not None and (
                isinstance(value, bool) or not isinstance(value, int) or value < 0
            ):
                raise InvalidParameterError(f"{name} must be an int >= 0, got {value!r}")

    def with_overrides(self, **overrides: Any) -> "JoinsOptions":
        """Return a copy with `overrides` applied; None resets a field to None."""
        return replace(self, **overrides) if overrides else self


@dataclass(frozen=True)
class JoinStatistics:
    """Immutable snapshot of a completed joins test.

    `z_value` is None when the variance is zero (degenerate test); the
    p-value is then 1.0.
    """

    observed: int
    expected: float
    variance: float
    z_value: Optional[float]
    p_value: float
    trials: int
    prob: float
    tails: Tails = 2
    ccorr: bool = True

    @property
    def obsdev(self) -> float:
        return self.observed - self.expected

    @property
    def stdev(self) -> float:
        return math.sqrt(self.variance)

    @property
    def degenerate(self) -> bool:
        return self.z_value is None

    def get(self, name: Union[StatName, str]) -> Any:
        """Return one statistic by name (see `StatName`)."""
        return getattr(self, _stat_name(name).value)

    def as_dict(self) -> JoinStatsPayload:
        return {
            "observed": self.observed,
            "expected": self.expected,
            "variance": self.variance,
            "obsdev": self.obsdev,
            "stdev": self.stdev,
            "z_value": self.z_value,
            "p_value": self.p_value,
            "trials": self.trials,
            "prob": self.prob,
            "tails": self.tails,
            "ccorr": self.ccorr,
        }


# --- Single statistics ---


def observed(
    sequence: Optional[Sequence[Symbol]] = None, *, observed: Optional[int] = None
) -> int:
    """Observed join count: the explicit `observed` value, else counted from `sequence`."""
    if observed is not None:
        try:
            return check_trials(observed)
        except InvalidParameterError:
            raise InvalidParameterError(
                f"observed must be a non-negative integer, got {observed!r}"
            ) from None
    if sequence is None:
        raise InvalidParameterError("No data to count joins from: give a sequence or observed")
    return count_observed(sequence)


def expected(
    sequence: Optional[Sequence[Symbol]] = None,
    *,
    trials: Optional[int] = None,
    prob: Optional[float] = None,
    state: Optional[Symbol] = None,
) -> float:
    """Expected join count, 2 (N - 1) p q."""
    params = resolve_trial_parameters(sequence, trials=trials, prob=prob, state=state)
    return expected_joins(params.trials, params.prob)


def variance(
    sequence: Optional[Sequence[Symbol]] = None,
    *,
    trials: Optional[int] = None,
    prob: Optional[float] = None,
    state: Optional[Symbol] = None,
) -> float:
    """Variance of the join count, 4 N p q (1 - 3 p q) - 2 p q (3 - 10 p q)."""
    params = resolve_trial_parameters(sequence, trials=trials, prob=prob, state=state)
    return variance_joins(params.trials, params.prob)


def obsdev(
    sequence: Optional[Sequence[Symbol]] = None,
    *,
    observed: Optional[int] = None,
    trials: Optional[int] = None,
    prob: Optional[float] = None,
    state: Optional[Symbol] = None,
) -> float:
    """Observed minus expected join count."""
    obs = _observed(sequence, observed)
    return obs - expected(sequence, trials=trials, prob=prob, state=state)


def stdev(
    sequence: Optional[Sequence[Symbol]] = None,
    *,
    trials: Optional[int] = None,
    prob: Optional[float] = None,
    state: Optional[Symbol] = None,
) -> float:
    """Square root of the join-count variance."""
    return math.sqrt(variance(sequence, trials=trials, prob=prob, state=state))


def z_value(
    sequence: Optional[Sequence[Symbol]] = None,
    *,
    observed: Optional[int] = None,
    trials: Optional[int] = None,
    prob: Optional[float] = None,
    state: Optional[Symbol] = None,
    options: Optional[JoinsOptions] = None,
    approx: NormalApproximation = DEFAULT_APPROXIMATION,
    **option_kw: Any,
) -> Optional[float]:
    """z-score of the observed join count; None for a degenerate test."""
    return run_test(
        sequence,
        observed=observed,
        trials=trials,
        prob=prob,
        state=state,
        options=options,
        approx=approx,
        **option_kw,
    ).z_value


def p_value(
    sequence: Optional[Sequence[Symbol]] = None,
    *,
    observed: Optional[int] = None,
    trials: Optional[int] = None,
    prob: Optional[float] = None,
    state: Optional[Symbol] = None,
    options: Optional[JoinsOptions] = None,
    approx: NormalApproximation = DEFAULT_APPROXIMATION,
    **option_kw: Any,
) -> float:
    """Normal-approximation p-value of the observed join count."""
    return run_test(
        sequence,
        observed=observed,
        trials=trials,
        prob=prob,
        state=state,
        options=options,
        approx=approx,
        **option_kw,
    ).p_value


# --- Aggregate ---


def run_test(
    sequence: Optional[Sequence[Symbol]] = None,
    *,
    observed: Optional[int] = None,
    trials: Optional[int] = None,
    prob: Optional[float] = None,
    state: Optional[Symbol] = None,
    options: Optional[JoinsOptions] = None,
    approx: NormalApproximation = DEFAULT_APPROXIMATION,
    **option_kw: Any,
) -> JoinStatistics:
    """
    Run the full joins test and return every statistic.

    The p-value is computed from the unrounded z-value; `precision_s` and
    `precision_p` only round the reported numbers.

    Parameters
    ----------
    sequence : sequence of symbols, optional
        Dichotomous data
    observed : int, optional
        Join count to use instead of counting `sequence`
    trials, prob, state : optional
        Trial parameters (see `resolve_trial_parameters`)
    options : JoinsOptions, optional
        Test options; keywords in `option_kw` override its fields
    approx : NormalApproximation
        Significance strategy

    Returns
    -------
    JoinStatistics
    """
    opts = resolve_options(options, **option_kw)
    obs = _observed(sequence, observed)
    params = resolve_trial_parameters(sequence, trials=trials, prob=prob, state=state)
    return _test_from_parameters(obs, params, opts, approx)


def stats_hash(
    values: StatSelection,
    sequence: Optional[Sequence[Symbol]] = None,
    **kwargs: Any,
) -> Dict[str, Any]:
    """
    Return the requested statistics as a dict keyed by name.

    `values` is either an iterable of names or a mapping whose truthy keys are
    wanted (``{"observed": 1, "p_value": 1}``). Remaining keywords are passed
    to `run_test`.

    >>> stats_hash(["observed", "expected"], [1, 0, 1, 0, 1, 0, 0, 0])
    {'observed': 5, 'expected': 3.5}
    """
    names = select_stats(values)
    result = run_test(sequence, **kwargs)
    return {name.value: result.get(name) for name in names}


def select_stats(values: StatSelection) -> List[StatName]:
    """Normalize a stat selection into `StatName`s, in the caller's order."""
    if isinstance(values, Mapping):
        requested = [k for k, wanted in values.items() if wanted]
    elif isinstance(values, (str, StatName)):
        requested = [values]
    else:
        requested = list(values)
    return [_stat_name(v) for v in requested]


def resolve_options(options: Optional[JoinsOptions] = None, **option_kw: Any) -> JoinsOptions:
    """Merge keyword overrides into `options` (or the defaults)."""
    unknown = set(option_kw) - set(JoinsOptions.__dataclass_fields__)
    if unknown:
        raise InvalidParameterError(f"Unknown joins options: {sorted(unknown)}")
    return (options or JoinsOptions()).with_overrides(**option_kw)


def _observed(sequence: Optional[Sequence[Symbol]], explicit: Optional[int]) -> int:
    return observed(sequence, observed=explicit)


def _stat_name(name: Union[StatName, str]) -> StatName:
    try:
        return StatName(name)
    except ValueError:
        valid = ", ".join(s.value for s in StatName)
        raise InvalidParameterError(
            f"Unknown statistic {name!r}; expected one of: {valid}"
        ) from None


def _test_from_parameters(
    obs: int,
    params: TrialParameters,
    opts: JoinsOptions,
    approx: NormalApproximation,
) -> JoinStatistics:
    exp = expected_joins(params.trials, params.prob)
    var = variance_joins(params.trials, params.prob)
    z = approx.z_score(obs, exp, var, opts.ccorr)
    if z is None:
        logger.debug(
            f"Zero variance for trials={params.trials}, prob={params.prob}; "
            "reporting z=None, p=1.0"
        )
    p = approx.p_value(z, opts.tails, opts.direction)
    return JoinStatistics(
        observed=obs,
        expected=exp,
        variance=var,
        z_value=apply_precision(z, opts.precision_s),
        p_value=apply_precision(p, opts.precision_p),
        trials=params.trials,
        prob=params.prob,
        tails=opts.tails,
        ccorr=opts.ccorr,
    )
