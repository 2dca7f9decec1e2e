"""
seqjoins.core.errors
====================

Exceptions raised by the joins engine and its collaborators.

All of them derive from `ValueError`, so callers that already guard
statistical code with ``except ValueError`` keep working.

>>> from seqjoins.core.errors import MalformedSequenceError, JoinsError
>>> issubclass(MalformedSequenceError, JoinsError)
True
>>> issubclass(JoinsError, ValueError)
True
"""

from __future__ import annotations
from typing import Any, Sequence


class JoinsError(ValueError):
    """Base class for joins errors."""


class MalformedSequenceError(JoinsError):
    """A sequence holds more than two distinct symbols."""

    def __init__(self, distinct: Sequence[Any]) -> None:
        self.distinct = list(distinct)
        shown = " ".join(str(v) for v in self.distinct)
        super().__init__(
            f"More than two distinct elements were found in the data: {shown}"
        )


class InvalidParameterError(JoinsError):
    """A parameter is outside its domain (probability, trials, tails, ...)."""
