"""
seqjoins.api.joins
==================

Object interface to the joins test, with loaded-data convenience.

A `Joins` object owns a `SampleStore`. Every statistic method takes the data
to test in one of three ways, in order of precedence:

1. ``data=`` a sequence passed with the call
2. ``label=`` the name of a loaded sample
3. nothing: the anonymous loaded sample, if any

Numeric parameters (``observed``, ``trials``, ``prob``) always win over
values derived from data, so expectation, variance and significance can be
computed without any data at all.

Examples
--------
>>> from seqjoins.api.joins import Joins
>>> joins = Joins()
>>> joins.load([1, 0, 0, 0, 1, 1, 0, 1, 1, 0, 0, 1, 0, 0, 1, 1, 1, 1, 0, 1])
Joins(labels=[None])
>>> joins.observed()
10
>>> joins.expected(trials=20)
9.5
>>> joins.p_value(trials=20, observed=10, tails=1)
0.5
>>> joins.stats_hash(values={"observed": 1, "p_value": 1})
{'observed': 10, 'p_value': 1.0}
>>> _ = joins.dump(values=["observed", "expected", "p_value"], precision_s=3, precision_p=7)
observed = 10.000, expected = 9.500, p_value = 1.0000000
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional, Sequence, TextIO

from seqjoins.core.names import Symbol
from seqjoins.core.store import LabelLike, SampleStore
from seqjoins.reporting.joins import DEFAULT_VALUES, dump as dump_stats
from seqjoins.stats.methods.common.statistical import NormalApproximation
from seqjoins.stats.schemes.joins import statistics as stats
from seqjoins.stats.schemes.joins.statistics import (
    DEFAULT_APPROXIMATION,
    JoinStatistics,
    JoinsOptions,
    StatSelection,
)


class Joins:
    """
    Joins test over loaded or passed-in dichotomous data.

    Parameters
    ----------
    options : JoinsOptions, optional
        Default test options for this object; per-call keywords override them
    approx : NormalApproximation, optional
        Significance strategy
    store : SampleStore, optional
        Sample store to read loaded data from (a new one by default)
    """

    def __init__(
        self,
        options: Optional[JoinsOptions] = None,
        approx: NormalApproximation = DEFAULT_APPROXIMATION,
        store: Optional[SampleStore] = None,
    ) -> None:
        self.options = options or JoinsOptions()
        self.approx = approx
        self.store = store if store is not None else SampleStore()

    def __repr__(self) -> str:
        return f"Joins(labels={self.store.labels()!r})"

    # ---- data ----

    def load(self, *data: Any, **labelled: Sequence[Symbol]) -> "Joins":
        """Replace all loaded samples (see `SampleStore.load`)."""
        self.store.load(*data, **labelled)
        return self

    def add(self, *data: Any, **labelled: Sequence[Symbol]) -> "Joins":
        """Append to loaded samples (see `SampleStore.add`)."""
        self.store.add(*data, **labelled)
        return self

    def read(self, label: LabelLike = None) -> List[Symbol]:
        return self.store.read(label)

    def unload(self, label: LabelLike = None) -> "Joins":
        self.store.unload(label)
        return self

    def _data(
        self, data: Optional[Sequence[Symbol]], label: LabelLike
    ) -> Optional[Sequence[Symbol]]:
        if data is not None:
            return data
        if label is not None or None in self.store:
            return self.store.read(label)
        return None

    # ---- statistics ----

    def observed(
        self,
        data: Optional[Sequence[Symbol]] = None,
        label: LabelLike = None,
        observed: Optional[int] = None,
    ) -> int:
        """Number of joins in the data."""
        return stats.observed(self._data(data, label), observed=observed)

    def expected(
        self,
        data: Optional[Sequence[Symbol]] = None,
        label: LabelLike = None,
        trials: Optional[int] = None,
        prob: Optional[float] = None,
        state: Optional[Symbol] = None,
    ) -> float:
        """Expected number of joins."""
        seq = self._data(data, label)
        return stats.expected(seq, trials=trials, prob=prob, state=state)

    def variance(
        self,
        data: Optional[Sequence[Symbol]] = None,
        label: LabelLike = None,
        trials: Optional[int] = None,
        prob: Optional[float] = None,
        state: Optional[Symbol] = None,
    ) -> float:
        """Variance of the number of joins."""
        seq = self._data(data, label)
        return stats.variance(seq, trials=trials, prob=prob, state=state)

    def obsdev(
        self,
        data: Optional[Sequence[Symbol]] = None,
        label: LabelLike = None,
        **params: Any,
    ) -> float:
        """Observed minus expected joins."""
        return stats.obsdev(self._data(data, label), **params)

    def stdev(
        self,
        data: Optional[Sequence[Symbol]] = None,
        label: LabelLike = None,
        **params: Any,
    ) -> float:
        """Square root of the variance."""
        return stats.stdev(self._data(data, label), **params)

    def run_test(
        self,
        data: Optional[Sequence[Symbol]] = None,
        label: LabelLike = None,
        **kwargs: Any,
    ) -> JoinStatistics:
        """All statistics for the data, with this object's default options."""
        return stats.run_test(
            self._data(data, label),
            options=kwargs.pop("options", None) or self.options,
            approx=self.approx,
            **kwargs,
        )

    def z_value(
        self,
        data: Optional[Sequence[Symbol]] = None,
        label: LabelLike = None,
        **kwargs: Any,
    ) -> Optional[float]:
        """z-score of the join count; None when the variance is zero."""
        return self.run_test(data, label, **kwargs).z_value

    def p_value(
        self,
        data: Optional[Sequence[Symbol]] = None,
        label: LabelLike = None,
        **kwargs: Any,
    ) -> float:
        """p-value of the join count."""
        return self.run_test(data, label, **kwargs).p_value

    def stats_hash(
        self,
        values: StatSelection = DEFAULT_VALUES,
        data: Optional[Sequence[Symbol]] = None,
        label: LabelLike = None,
        **kwargs: Any,
    ) -> Dict[str, Any]:
        """Requested statistics as a dict keyed by name."""
        result = self.run_test(data, label, **kwargs)
        return {name.value: result.get(name) for name in stats.select_stats(values)}

    def dump(
        self,
        values: StatSelection = DEFAULT_VALUES,
        data: Optional[Sequence[Symbol]] = None,
        label: LabelLike = None,
        format: str = "line",
        flag: bool = False,
        precision_s: int = 2,
        precision_p: int = 6,
        stream: Optional[TextIO] = None,
        **kwargs: Any,
    ) -> JoinStatistics:
        """Print the requested statistics and return the full result."""
        return dump_stats(
            self.run_test(data, label, **kwargs),
            values,
            stream=stream,
            format=format,
            flag=flag,
            precision_s=precision_s,
            precision_p=precision_p,
        )

    # ---- aliases ----

    joincount_observed = observed
    jco = observed
    joincount_expected = expected
    jce = expected
    joincount_variance = variance
    jcv = variance
    observed_deviation = obsdev
    standard_deviation = stdev
    joincount_zscore = z_value
    jzs = z_value
    zscore = z_value
    test = p_value
    joins_test = p_value
    jct = p_value
