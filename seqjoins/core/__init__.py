"""
seqjoins.core
=============

Names, errors and the sample store shared by the statistics and the facade.
"""
