"""
Statistical methods for sequential structure in dichotomous data.

The package separates generic methods from statistic-specific schemes:

1. **Methods** (seqjoins.stats.methods):
   Reusable computations that do not depend on a particular statistic,
   such as turning an observed count and its null moments into a z-score
   and p-value.

2. **Schemes** (seqjoins.stats.schemes):
   Statistic-specific implementations that count and model a sequence
   feature (joins) and hand the result to the generic methods.

Example:
--------
>>> # Generic method (reusable across schemes)
>>> from seqjoins.stats.methods.common.statistical import p_value_from_z
>>> p_value_from_z(0.0)
1.0

>>> # Scheme-specific application
>>> from seqjoins.stats.schemes.joins import expected_joins
>>> expected_joins(8, 0.5)
3.5
"""
