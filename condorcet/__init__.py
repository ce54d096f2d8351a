"""Condorcet - pairwise tallying of ranked ballots.

Condorcet objects count total-preference ballots into a pairwise preference
matrix and determine the Condorcet winner - the candidate preferred to every
other candidate by a majority of voters, if there is one.

-   The :class:`Election` in the ``election`` module accumulates ballots.
    Candidates are identified by their indices; mapping candidate names to
    indices is up to the caller (the ``io.blt`` module does so for BLT files).
-   Ballots are checked by the validator from the ``vote`` module; invalid
    ballots are rejected without changing the election.
-   The :class:`Result` from the ``result`` module is an immutable snapshot of
    an election that can be queried for the winner and the number of voters.
"""

from condorcet.election import Election, InvalidCandidateCountError    # noqa
from condorcet.result import Result, condorcet_winner    # noqa
from condorcet.vote import VoteError    # noqa
