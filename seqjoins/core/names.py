"""
seqjoins.core.names
===================

Typed names shared across the package.

- `StatName`: an Enum of the statistics a joins test can report.
- `SampleLabel`: NewType wrapper for labels of stored samples.
- `Tails`, `Direction`: Literal tags for significance options.

Examples
--------
>>> from seqjoins.core.names import StatName
>>> StatName.P_VALUE.value
'p_value'
>>> StatName("observed") is StatName.OBSERVED
True
"""

from __future__ import annotations
from enum import Enum
from typing import Any, Literal, NewType, Optional


class StatName(str, Enum):
    """Statistics reported by a joins test, in reporting order.

    - OBSERVED: observed join count
    - EXPECTED: expected join count
    - VARIANCE: variance of the join count
    - OBSDEV: observed minus expected
    - STDEV: square root of the variance
    - Z_VALUE: standardized deviation
    - P_VALUE: normal-approximation significance
    """

    OBSERVED = "observed"
    EXPECTED = "expected"
    VARIANCE = "variance"
    OBSDEV = "obsdev"
    STDEV = "stdev"
    Z_VALUE = "z_value"
    P_VALUE = "p_value"


SampleLabel = NewType("SampleLabel", str)

Symbol = Any

Tails = Literal[1, 2]
Direction = Optional[Literal["greater", "less"]]

DEFAULT_PROB = 0.5
