"""
seqjoins.backends.polars
========================

Polars-backed file I/O for sequences and result frames.
"""

from seqjoins.backends.polars.io import read_sequence, write_stats

__all__ = ["read_sequence", "write_stats"]
