'''Condorcet winner search and immutable election results.'''

import logging
from typing import Dict, Optional, Tuple

from condorcet.tally import PairwiseTally

logger = logging.getLogger(__name__)


def condorcet_winner(tally: PairwiseTally) -> Optional[int]:
    '''Find the candidate who beats all others in pairwise comparisons.

    A forward sweep keeps the candidate that has not been beaten by any
    later challenger; a confirmation pass then checks that this candidate
    strictly beats every other candidate. A pairwise tie counts as a failure
    to beat.

    :param tally: Pairwise preference counts.
    :returns: Index of the Condorcet winner, or None if there is none (no
        ballots, pairwise ties or cyclic majorities).
    '''
    winner = 0
    for challenger in range(1, tally.n_candidates):
        if tally.beats(challenger, winner):
            winner = challenger
    for other in range(tally.n_candidates):
        if other != winner and not tally.beats(winner, other):
            logger.info('no Condorcet winner: %d fails to beat %d',
                        winner, other)
            return None
    logger.info('Condorcet winner: %d', winner)
    return winner


class Result:
    '''An immutable snapshot of an election.

    Obtain results by calling :meth:`condorcet.election.Election.result`.
    The result holds its own copy of the pairwise tally so that subsequent
    votes in the election do not change it.

    :param tally: Pairwise preference counts to copy into the result.
    :param n_voters: Number of ballots accepted into the tally.
    '''
    __slots__ = ('_tally', '_n_voters')

    def __init__(self, tally: PairwiseTally, n_voters: int):
        object.__setattr__(self, '_tally', tally.copy())
        object.__setattr__(self, '_n_voters', n_voters)

    def __setattr__(self, name, value):
        raise AttributeError(f'{type(self).__name__} is immutable')

    def __delattr__(self, name):
        raise AttributeError(f'{type(self).__name__} is immutable')

    @property
    def n_candidates(self) -> int:
        return self._tally.n_candidates

    @property
    def n_voters(self) -> int:
        '''Number of ballots accepted at the time of the snapshot.'''
        return self._n_voters

    def winner(self) -> Optional[int]:
        '''Return the index of the Condorcet winner, or None.

        A result with no votes has no winner.
        '''
        return condorcet_winner(self._tally)

    def pairwise(self, upper: int, lower: int) -> int:
        '''Return the number of ballots ranking upper above lower.'''
        return self._tally[upper, lower]

    def to_pairs(self) -> Dict[Tuple[int, int], int]:
        return self._tally.to_pairs()

    def __repr__(self):
        return (f'<Result: {self.n_candidates} candidates,'
                f' {self._n_voters} voters>')
