"""
seqjoins.stats.methods
======================

Generic statistical methods independent of any particular sequence statistic.

- `common`: normal-approximation z-scores and p-values
"""
