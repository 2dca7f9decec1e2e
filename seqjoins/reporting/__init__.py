"""
seqjoins.reporting
==================

Text and tabular views of joins-test results.
"""

from seqjoins.reporting.joins import JoinsReporter, dump, format_stats

__all__ = ["JoinsReporter", "dump", "format_stats"]
