'''Ballot accumulation for Condorcet elections.

An :class:`Election` collects total-preference ballots over a fixed set of
candidates into a pairwise tally. The winner can be queried from the live
election at any time, or from an immutable :class:`condorcet.result.Result`
snapshot that is unaffected by further votes.

The election does not synchronize access to its state; concurrent calls to
:meth:`Election.vote` (or to :meth:`Election.result` while voting goes on)
must be serialized by the caller.
'''

import logging
from typing import Dict, Iterable, Optional, Tuple

from condorcet.result import Result, condorcet_winner
from condorcet.tally import PairwiseTally
from condorcet.vote import BallotValidator, VoteError, is_integer

logger = logging.getLogger(__name__)


class InvalidCandidateCountError(ValueError):
    '''An election cannot be held with the given number of candidates.

    :param n_candidates: The rejected number of candidates.
    '''
    def __init__(self, n_candidates):
        self.n_candidates = n_candidates
        super().__init__(
            f'invalid candidate count: {n_candidates!r},'
            ' expecting at least 2 candidates'
        )


class Election:
    '''A Condorcet election over candidates ``0 .. n_candidates - 1``.

    Calling ``Election()`` without arguments gives a two-candidate election.
    The pairwise tally is only allocated when first needed.

    :param n_candidates: Number of candidates, at least 2.
    :raises InvalidCandidateCountError: If the number of candidates is not
        an integer of at least 2.
    '''
    def __init__(self, n_candidates: int = 2):
        if not is_integer(n_candidates) or n_candidates < 2:
            raise InvalidCandidateCountError(n_candidates)
        self._n_candidates = int(n_candidates)
        self._validator = BallotValidator(self._n_candidates)
        self._tally = None
        self._n_voters = 0

    @property
    def n_candidates(self) -> int:
        return self._n_candidates

    @property
    def n_voters(self) -> int:
        '''Number of ballots accepted so far.'''
        return self._n_voters

    def validate(self, ballot: Iterable[int]) -> None:
        '''Check that the ballot is a total ranking of all candidates.

        :raises VoteError: If the ballot is invalid; see
            :meth:`condorcet.vote.BallotValidator.validate`.
        '''
        self._validator.validate(tuple(ballot))

    def vote(self, ballot: Iterable[int]) -> bool:
        '''Register a ballot.

        The first item is the preferred candidate, the second one is the
        second choice, and so on. The ballot must rank all candidates;
        otherwise it is ignored, the election is left unchanged and False
        is returned.

        :param ballot: Candidate indices, most preferred first.
        :returns: True if the ballot was accepted and counted.
        '''
        ballot = tuple(ballot)
        try:
            self._validator.validate(ballot)
        except VoteError as err:
            logger.debug('rejecting ballot %s: %s', ballot, err)
            return False
        self._get_tally().add_ranking(ballot)
        self._n_voters += 1
        return True

    def add_votes(self, votes: Dict[Tuple[int, ...], int]) -> int:
        '''Register ballots given with their counts.

        Invalid ballots are skipped with a warning.

        :param votes: A dictionary mapping ballots to the number of voters
            that cast them.
        :returns: Number of ballots accepted.
        :raises ValueError: If any count is not a non-negative integer;
            the election is left unchanged.
        '''
        for ballot, n_votes in votes.items():
            if not is_integer(n_votes) or n_votes < 0:
                raise ValueError(f'invalid ballot count: {n_votes!r}'
                                 f' for ballot {tuple(ballot)}')
        n_accepted = 0
        for ballot, n_votes in votes.items():
            ballot = tuple(ballot)
            try:
                self._validator.validate(ballot)
            except VoteError as err:
                logger.warning('skipping %d invalid ballots %s: %s',
                               n_votes, ballot, err)
                continue
            self._get_tally().add_ranking(ballot, n_votes)
            self._n_voters += n_votes
            n_accepted += n_votes
        return n_accepted

    def winner(self) -> Optional[int]:
        '''Return the index of the Condorcet winner, or None.

        An election with no votes has no winner.
        '''
        return condorcet_winner(self._get_tally())

    def result(self) -> Result:
        '''Return an immutable snapshot of the election.

        The election can continue receiving votes without affecting
        previously created results.
        '''
        logger.debug('taking result snapshot at %d voters', self._n_voters)
        return Result(self._get_tally(), self._n_voters)

    def pairwise(self, upper: int, lower: int) -> int:
        '''Return the number of ballots ranking upper above lower.'''
        return self._get_tally()[upper, lower]

    def to_pairs(self) -> Dict[Tuple[int, int], int]:
        return self._get_tally().to_pairs()

    def _get_tally(self) -> PairwiseTally:
        if self._tally is None:
            self._tally = PairwiseTally(self._n_candidates)
        return self._tally

    def __repr__(self):
        return (f'<Election: {self._n_candidates} candidates,'
                f' {self._n_voters} voters>')
