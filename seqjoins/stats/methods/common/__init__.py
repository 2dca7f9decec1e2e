"""
seqjoins.stats.methods.common
=============================

Statistical utilities that are not specific to the joins statistic.

This module provides the normal-approximation significance step shared by
any count statistic with closed-form null moments.
"""

from seqjoins.stats.methods.common.statistical import (
    NormalApproximation,
    apply_precision,
    corrected_deviation,
    p_value_from_z,
    z_from_moments,
)

__all__ = [
    "NormalApproximation",
    "apply_precision",
    "corrected_deviation",
    "p_value_from_z",
    "z_from_moments",
]
