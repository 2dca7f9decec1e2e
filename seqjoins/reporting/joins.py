"""
seqjoins.reporting.joins
========================

Text and tabular views of joins-test results.

- `format_stats` / `dump`: one result as a line or a small table of text
- `JoinsReporter`: many labelled samples as a Polars frame, one row each

Examples
--------
>>> from seqjoins.stats.schemes.joins import run_test
>>> result = run_test(observed=10, trials=20)
>>> format_stats(result, ["observed", "expected", "p_value"], precision_s=3, precision_p=7)
'observed = 10.000, expected = 9.500, p_value = 1.0000000'
>>> format_stats(result, ["expected", "observed", "z_value", "p_value"], format="labeline")
'Joins: expected = 9.50, observed = 10.00, Z = 0.00, 2p = 1.000000'

>>> rep = JoinsReporter.from_samples({"a": [1, 0, 1, 0, 1, 0, 0, 0], "b": "ABBBBBBB"})
>>> rep.summary().select("label", "observed").rows()
[('a', 5), ('b', 1)]
"""

from __future__ import annotations
import sys
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Sequence, TextIO, Union

import polars as pl

from seqjoins.core.errors import InvalidParameterError
from seqjoins.core.names import StatName, Symbol
from seqjoins.stats.schemes.joins.statistics import (
    JoinStatistics,
    StatSelection,
    run_test,
    select_stats,
)

DEFAULT_VALUES = (StatName.OBSERVED, StatName.EXPECTED, StatName.Z_VALUE, StatName.P_VALUE)
FORMATS = ("line", "labeline", "table")
FLAG_ALPHA = 0.05


def format_stats(
    stats: JoinStatistics,
    values: StatSelection = DEFAULT_VALUES,
    format: str = "line",
    flag: bool = False,
    precision_s: int = 2,
    precision_p: int = 6,
) -> str:
    """
    Render selected statistics as text.

    Parameters
    ----------
    stats : JoinStatistics
        Result of `run_test`
    values : iterable of names, or mapping of name to truthy flag
        Statistics to show, in order
    format : {"line", "labeline", "table"}
        "line" joins ``name = value`` pairs with commas; "labeline" prefixes
        "Joins: " and uses the short names Z and 1p/2p; "table" puts each pair
        on its own line
    flag : bool
        Append "*" to the p-value when it is below 0.05
    precision_s, precision_p : int
        Decimals for the statistics and for the p-value

    Returns
    -------
    str
    """
    if format not in FORMATS:
        raise InvalidParameterError(f"format must be one of {FORMATS}, got {format!r}")
    pairs = []
    for name in select_stats(values):
        value = stats.get(name)
        if name is StatName.P_VALUE:
            text = f"{value:.{precision_p}f}"
            if flag and value < FLAG_ALPHA:
                text += "*"
        elif value is None:
            text = "undefined"
        else:
            text = f"{value:.{precision_s}f}"
        pairs.append((_label(name, stats, format), text))

    if format == "table":
        width = max((len(k) for k, _ in pairs), default=0)
        return "\n".join(f"{k:<{width}} = {v}" for k, v in pairs)
    line = ", ".join(f"{k} = {v}" for k, v in pairs)
    return f"Joins: {line}" if format == "labeline" else line


def dump(
    stats: JoinStatistics,
    values: StatSelection = DEFAULT_VALUES,
    stream: Optional[TextIO] = None,
    **format_kw: Any,
) -> JoinStatistics:
    """Print `format_stats` output to `stream` (stdout by default) and return `stats`."""
    print(format_stats(stats, values, **format_kw), file=stream or sys.stdout)
    return stats


def _label(name: StatName, stats: JoinStatistics, format: str) -> str:
    if format != "labeline":
        return name.value
    if name is StatName.Z_VALUE:
        return "Z"
    if name is StatName.P_VALUE:
        return f"{stats.tails}p"
    return name.value


@dataclass
class JoinsReporter:
    """Joins results for several samples, one row per sample."""

    df: pl.DataFrame

    _SCHEMA = {
        "label": pl.Utf8,
        "observed": pl.Int64,
        "expected": pl.Float64,
        "variance": pl.Float64,
        "obsdev": pl.Float64,
        "stdev": pl.Float64,
        "z_value": pl.Float64,
        "p_value": pl.Float64,
        "trials": pl.Int64,
        "prob": pl.Float64,
        "tails": pl.Int64,
        "ccorr": pl.Boolean,
    }

    @classmethod
    def from_results(
        cls, results: Union[Mapping[str, JoinStatistics], Iterable[tuple]]
    ) -> "JoinsReporter":
        """Build a reporter from ``label -> JoinStatistics`` pairs."""
        items = results.items() if isinstance(results, Mapping) else results
        rows: List[dict] = [
            {"label": str(label), **stats.as_dict()} for label, stats in items
        ]
        return cls(pl.DataFrame(rows, schema=cls._SCHEMA))

    @classmethod
    def from_samples(
        cls, samples: Mapping[str, Sequence[Symbol]], **test_kw: Any
    ) -> "JoinsReporter":
        """Run the joins test on each sample with the same options."""
        return cls.from_results(
            {label: run_test(list(seq), **test_kw) for label, seq in samples.items()}
        )

    def summary(self) -> pl.DataFrame:
        """Return the full per-sample table."""
        return self.df

    def significant(self, alpha: float = FLAG_ALPHA) -> pl.DataFrame:
        """Rows whose p-value is below `alpha`."""
        if not 0.0 < alpha <= 1.0:
            raise InvalidParameterError(f"alpha must be in (0, 1], got {alpha}")
        return self.df.filter(pl.col("p_value") < alpha)
