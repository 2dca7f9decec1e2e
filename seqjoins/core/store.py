"""
seqjoins.core.store
===================

An in-memory store of dichotomous samples, anonymous or labelled.

The statistics never hold data themselves; a `SampleStore` keeps sequences
between calls so the facade can test "the loaded data" without the caller
passing it every time. Every sample is checked to be dichotomous before it is
committed, so a failed `load` or `add` leaves the store unchanged.

- `load()`: replace everything with new samples
- `add()`: append to existing samples
- `read()`: copy a sample out
- `unload()`: drop one sample, or all of them

Examples
--------
>>> store = SampleStore()
>>> store.load([1, 0, 0, 1])
SampleStore(labels=[None])
>>> store.add(1, 1)
SampleStore(labels=[None])
>>> store.read()
[1, 0, 0, 1, 1, 1]
>>> store.load(morning="HHTH", evening=["T", "T", "H"])
SampleStore(labels=['morning', 'evening'])
>>> store.read("morning")
['H', 'H', 'T', 'H']
>>> store.read()
Traceback (most recent call last):
...
seqjoins.core.errors.InvalidParameterError: No anonymous sample has been loaded
"""

from __future__ import annotations
import logging
from collections.abc import Iterable, Mapping
from typing import Any, Dict, List, Optional, Union

from seqjoins.core.errors import InvalidParameterError
from seqjoins.core.names import SampleLabel, Symbol
from seqjoins.stats.schemes.joins.core import check_dichotomous

logger = logging.getLogger(__name__)

LabelLike = Optional[Union[SampleLabel, str]]


class SampleStore:
    """Mutable store of sequences keyed by label (None for the anonymous sample)."""

    def __init__(self) -> None:
        self._samples: Dict[LabelLike, List[Symbol]] = {}

    def __repr__(self) -> str:
        return f"SampleStore(labels={self.labels()!r})"

    def __len__(self) -> int:
        return len(self._samples)

    def __contains__(self, label: LabelLike) -> bool:
        return label in self._samples

    def labels(self) -> List[LabelLike]:
        """Labels of the stored samples, in load order (None is the anonymous one)."""
        return list(self._samples)

    # ---- writers ----

    def load(self, *data: Any, **labelled: Iterable[Symbol]) -> "SampleStore":
        """Replace all samples.

        Accepts one sequence, several symbols, a mapping of label to
        sequence, or ``label=sequence`` keywords. A string passed as a
        labelled sample is split into characters.
        """
        incoming = _collect(data, labelled)
        for label, sample in incoming.items():
            _validate(label, sample)
        self._samples = incoming
        logger.debug(f"Loaded samples {list(incoming)}")
        return self

    def add(self, *data: Any, **labelled: Iterable[Symbol]) -> "SampleStore":
        """Append to existing samples, creating any that do not exist yet."""
        incoming = _collect(data, labelled)
        merged = {
            label: self._samples.get(label, []) + sample
            for label, sample in incoming.items()
        }
        for label, sample in merged.items():
            _validate(label, sample)
        self._samples.update(merged)
        logger.debug(f"Added to samples {list(incoming)}")
        return self

    def unload(self, label: LabelLike = None) -> "SampleStore":
        """Drop the sample under `label`, or every sample when no label is given."""
        if label is None:
            self._samples.clear()
            logger.debug("Unloaded all samples")
        else:
            self._require(label)
            del self._samples[label]
            logger.debug(f"Unloaded sample {label!r}")
        return self

    # ---- readers ----

    def read(self, label: LabelLike = None) -> List[Symbol]:
        """Return a copy of the sample under `label` (the anonymous one by default)."""
        self._require(label)
        return list(self._samples[label])

    def _require(self, label: LabelLike) -> None:
        if label not in self._samples:
            if label is None:
                raise InvalidParameterError("No anonymous sample has been loaded")
            raise InvalidParameterError(f"No sample labelled {label!r} has been loaded")


def _collect(data: tuple, labelled: Dict[str, Any]) -> Dict[LabelLike, List[Symbol]]:
    samples: Dict[LabelLike, List[Symbol]] = {}
    if len(data) == 1 and isinstance(data[0], Mapping):
        labelled = {**dict(data[0]), **labelled}
    elif len(data) == 1 and _is_sequence(data[0]):
        samples[None] = list(data[0])
    elif data:
        samples[None] = list(data)
    for label, sample in labelled.items():
        samples[label] = list(sample) if _is_sequence(sample) or isinstance(sample, str) else [sample]
    if not samples:
        raise InvalidParameterError("Nothing to load: give a sequence or labelled samples")
    return samples


def _is_sequence(obj: Any) -> bool:
    return isinstance(obj, Iterable) and not isinstance(obj, (str, bytes))


def _validate(label: LabelLike, sample: List[Symbol]) -> None:
    try:
        check_dichotomous(sample)
    except ValueError:
        logger.debug(f"Rejected sample {label!r}: not dichotomous")
        raise
