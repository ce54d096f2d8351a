"""Input/output of ballot files such as BLT files.

This subpackage is structured into modules by file format. Loaders return
ballots as tuples of zero-based candidate indices mapped to the number of
voters who cast them, ready for :meth:`condorcet.Election.add_votes`.
"""
