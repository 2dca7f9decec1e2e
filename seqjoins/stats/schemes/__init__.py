"""
seqjoins.stats.schemes
======================

Statistic-specific implementations built on the generic methods in
`seqjoins.stats.methods`.

- `joins`: Wishart-Hirshfeld joins test
"""
