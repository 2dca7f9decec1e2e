"""
seqjoins.data.dichotomize
=========================

Turn multi-valued or continuous data into a two-valued sequence for the
joins test.

- `cut`: 1 above a cut point, 0 below it
- `match`: 1 where two paired sequences agree, 0 where they differ

Examples
--------
Scores from runs of 25 five-choice guesses, split at the chance expectation
of 5 hits per run (scores equal to 5 are dropped):

>>> cut([4, 6, 5, 7, 3, 5, 8, 2], value=5)
[0, 1, 1, 0, 1, 0]
>>> match(["circ", "star", "wave"], ["circ", "plus", "wave"])
[1, 0, 1]
"""

from __future__ import annotations
import math
from numbers import Real
from typing import List, Literal, Sequence, Union

import numpy as np

from seqjoins.core.errors import InvalidParameterError
from seqjoins.core.names import Symbol

CutPoint = Union[float, Literal["mean", "median"]]
EqualPolicy = Literal[0, "gt", "lt"]


def cut_point(data: Sequence[float], value: CutPoint = "median") -> float:
    """Resolve `value` to a number: itself, or the mean or median of `data`."""
    if isinstance(value, str):
        if value not in ("mean", "median"):
            raise InvalidParameterError(f"value must be a number, 'mean' or 'median', got {value!r}")
        if not len(data):
            raise InvalidParameterError(f"Cannot take the {value} of empty data")
        arr = _as_numbers(data)
        return float(np.median(arr) if value == "median" else np.mean(arr))
    if isinstance(value, bool) or not isinstance(value, Real) or math.isnan(value):
        raise InvalidParameterError(f"value must be a number, 'mean' or 'median', got {value!r}")
    return float(value)


def cut(
    data: Sequence[float], value: CutPoint = "median", equal: EqualPolicy = 0
) -> List[int]:
    """Dichotomize numeric data about a cut point.

    Args:
        data: Numeric observations
        value: Cut point; a number, "mean" or "median" of `data`
        equal: What to do with observations equal to the cut point:
            0 drops them, "gt" counts them as above (1), "lt" as below (0)

    Returns:
        A list of 0s and 1s, in the order of `data`

    >>> cut([1, 2, 3, 4, 5], equal="gt")
    [0, 0, 1, 1, 1]
    """
    if equal not in (0, "gt", "lt") or isinstance(equal, bool):
        raise InvalidParameterError(f"equal must be 0, 'gt' or 'lt', got {equal!r}")
    point = cut_point(data, value)
    out: List[int] = []
    for x in _as_numbers(data):
        if x > point:
            out.append(1)
        elif x < point:
            out.append(0)
        elif equal == "gt":
            out.append(1)
        elif equal == "lt":
            out.append(0)
    return out


def match(a: Sequence[Symbol], b: Sequence[Symbol]) -> List[int]:
    """1 where ``a[i] == b[i]``, else 0, for two sequences of equal length."""
    if len(a) != len(b):
        raise InvalidParameterError(
            f"Paired sequences must have the same length, got {len(a)} and {len(b)}"
        )
    return [1 if x == y else 0 for x, y in zip(a, b)]


def _as_numbers(data: Sequence[float]) -> np.ndarray:
    arr = np.asarray(data, dtype=float)
    if np.isnan(arr).any():
        raise InvalidParameterError("Cannot dichotomize data containing NaN")
    return arr
