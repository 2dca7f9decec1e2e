"""
seqjoins.backends
=================

Storage backends for sequences and results.
"""
