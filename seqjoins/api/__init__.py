"""
seqjoins.api - User-Friendly Facade
===================================

Off-the-shelf interface to the joins test. In terms of the design patterns,
this is the facade pattern: `Joins` bundles a sample store, default test
options and the significance strategy behind one object, and keeps the
familiar method names (and their short aliases) of the joins literature.

Examples
--------
>>> from seqjoins.api import Joins
>>> joins = Joins().load(["H", "T", "T", "H"])
>>> joins.observed(), joins.jco()
(2, 2)

Architecture
------------
This facade delegates to the underlying components:
- seqjoins.core: names, errors and the sample store
- seqjoins.stats: counting, moments and significance
- seqjoins.reporting: text and tabular output
"""

from seqjoins.api.joins import Joins

__all__ = ["Joins"]
