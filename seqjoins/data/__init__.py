"""
seqjoins.data
=============

Preparing raw data for the joins test.
"""

from seqjoins.data.dichotomize import cut, cut_point, match

__all__ = ["cut", "cut_point", "match"]
