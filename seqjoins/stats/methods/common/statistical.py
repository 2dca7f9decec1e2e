"""
seqjoins.stats.methods.common.statistical
=========================================

Normal-approximation building blocks.

Turns an observed count and its null moments into a standardized deviation,
and a standardized deviation into a p-value. These functions know nothing
about joins; any count statistic with a closed-form expectation and variance
can be fed through them.

Examples
--------
>>> z = z_from_moments(observed=1, expected=3.5, variance=1.75)
>>> round(z, 3)
-1.512
>>> round(p_value_from_z(z, tails=2), 5)
0.13057
>>> z_from_moments(observed=3, expected=0.0, variance=0.0) is None
True
>>> p_value_from_z(None)
1.0
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Optional

from scipy.stats import norm

from seqjoins.core.errors import InvalidParameterError
from seqjoins.core.names import Direction, Tails

CONTINUITY_CORRECTION = 0.5


def corrected_deviation(observed: float, expected: float, ccorr: bool = True) -> float:
    """Return O - E, moved 0.5 towards zero when `ccorr` is set.

    No correction is applied when O equals E. A deviation smaller than the
    correction in magnitude changes sign.

    >>> corrected_deviation(1, 3.5)
    -2.0
    >>> corrected_deviation(4, 3.5)
    0.0
    >>> corrected_deviation(1, 1.25)
    0.25
    >>> corrected_deviation(5, 3.5, ccorr=False)
    1.5
    """
    dev = float(observed) - float(expected)
    if not ccorr or dev == 0:
        return dev
    return dev - math.copysign(CONTINUITY_CORRECTION, dev)


def z_from_moments(
    observed: float, expected: float, variance: float, ccorr: bool = True
) -> Optional[float]:
    """Standardize an observed count against its null expectation and variance.

    Args:
        observed: Observed count
        expected: Expected count under the null
        variance: Variance of the count under the null
        ccorr: Apply a continuity correction of 0.5 towards the expectation

    Returns:
        The z-score, or None when the variance is zero (degenerate test)
    """
    if variance < 0 or not math.isfinite(variance):
        raise InvalidParameterError(f"variance must be finite and >= 0, got {variance}")
    if variance == 0:
        return None
    return corrected_deviation(observed, expected, ccorr) / math.sqrt(variance)


def p_value_from_z(
    z: Optional[float], tails: Tails = 2, direction: Direction = None
) -> float:
    """Normal-approximation p-value for a z-score.

    Args:
        z: Standardized deviation, or None for a degenerate test
        tails: 1 or 2
        direction: One-tailed direction. None reports the tail that z points
            into, P(Z >= |z|); "greater" reports P(Z >= z); "less" reports
            P(Z <= z). Ignored for two-tailed tests.

    Returns:
        p-value clamped to [0, 1]. A degenerate test (z is None) gives 1.0.
    """
    check_tails(tails)
    check_direction(direction)
    if z is None:
        return 1.0
    if tails == 2:
        p = 2.0 * float(norm.sf(abs(z)))
    elif direction == "greater":
        p = float(norm.sf(z))
    elif direction == "less":
        p = float(norm.cdf(z))
    else:
        p = float(norm.sf(abs(z)))
    return min(max(p, 0.0), 1.0)


def apply_precision(value: Optional[float], precision: Optional[int]) -> Optional[float]:
    """Round `value` to `precision` decimals for reporting (None passes through).

    >>> apply_precision(0.130570242, 3)
    0.131
    >>> apply_precision(0.5, None)
    0.5
    """
    if value is None or precision is None:
        return value
    if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
        raise InvalidParameterError(f"precision must be an int >= 0, got {precision!r}")
    return round(value, precision)


def check_tails(tails: int) -> None:
    if isinstance(tails, bool) or tails not in (1, 2):
        raise InvalidParameterError(f"tails must be 1 or 2, got {tails!r}")


def check_direction(direction: Direction) -> None:
    if direction not in (None, "greater", "less"):
        raise InvalidParameterError(
            f"direction must be None, 'greater' or 'less', got {direction!r}"
        )


@dataclass(frozen=True)
class NormalApproximation:
    """Significance strategy: z-score and p-value by the normal approximation.

    Injected into the joins orchestration so the significance step can be
    swapped (or stubbed in tests) without touching the counting code.

    >>> approx = NormalApproximation()
    >>> approx.p_value(0.0)
    1.0
    """

    def z_score(
        self, observed: float, expected: float, variance: float, ccorr: bool = True
    ) -> Optional[float]:
        return z_from_moments(observed, expected, variance, ccorr)

    def p_value(
        self, z: Optional[float], tails: Tails = 2, direction: Direction = None
    ) -> float:
        return p_value_from_z(z, tails, direction)
