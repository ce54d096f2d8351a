'''Ballot errors and the ballot validator.

A ballot is a voter's total, strict preference order over all candidates of
an election, represented by a sequence of candidate indices with the most
preferred candidate first. Partial rankings and shared ranks are not allowed,
so a valid ballot is always a permutation of ``0 .. n_candidates - 1``.

The validator raises a subclass of :class:`VoteError` if a ballot is invalid.
:meth:`condorcet.election.Election.vote` catches these errors and reports the
rejection by returning False.
'''

import abc
import numbers
from typing import Any, Optional, Sequence, Tuple


class VoteError(Exception, metaclass=abc.ABCMeta):
    '''A ballot is invalid given the election setup.'''
    pass


class VoteTypeError(VoteError):
    '''A ballot or its entry is of an invalid type.

    E.g. candidate names in place of candidate indices.

    :param value: Value detected as invalid.
    :param expected: Type that was expected.
    '''
    def __init__(self, value: Any, expected: type = None):
        self.value = value
        self.expected = expected
        message = f'invalid ballot item type: {type(value).__name__}'
        if expected:
            message += f', must be {expected.__name__}'
        super().__init__(message)


class VoteMagnitudeError(VoteError):
    '''A ballot ranks too few or too many candidates.

    :param value: Number of candidates ranked by the ballot.
    :param expected: Number of candidates the ballot must rank.
    '''
    def __init__(self, value: int, expected: int):
        self.value = value
        self.expected = expected
        super().__init__(
            f'invalid ballot length: {value}, must be {expected}'
        )


class VoteValueError(VoteError):
    '''A ballot contains an index that does not denote a candidate.

    :param value: The offending candidate index.
    :param n_candidates: Number of candidates in the election.
    '''
    def __init__(self, value: int, n_candidates: Optional[int] = None):
        self.value = value
        self.n_candidates = n_candidates
        message = f'invalid candidate index: {value}'
        if n_candidates is not None:
            message += f', allowed: 0..{n_candidates - 1}'
        super().__init__(message)


BallotType = Tuple[int, ...]


def is_integer(value: Any) -> bool:
    '''Return True if the value is an integer (booleans excluded).'''
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


class BallotValidator:
    '''Validate that a ballot is a total ranking of all candidates.

    :param n_candidates: Number of candidates in the election.
    '''
    def __init__(self, n_candidates: int):
        self.n_candidates = n_candidates

    def validate(self, ballot: Sequence[int]) -> None:
        '''Check that the ballot ranks every candidate exactly once.

        :param ballot: Candidate indices, most preferred first.
        :raises VoteTypeError: If any entry is not an integer.
        :raises VoteMagnitudeError: If the ballot does not rank exactly
            as many candidates as there are in the election.
        :raises VoteValueError: If any entry is out of the candidate
            index range.
        :raises VoteError: If any candidate is ranked more than once.
        '''
        for item in ballot:
            if not is_integer(item):
                raise VoteTypeError(item, int)
        if len(ballot) != self.n_candidates:
            raise VoteMagnitudeError(len(ballot), self.n_candidates)
        seen = [False] * self.n_candidates
        for item in ballot:
            if not 0 <= item < self.n_candidates:
                raise VoteValueError(item, self.n_candidates)
            if seen[item]:
                raise VoteError(f'duplicated candidates: {tuple(ballot)}')
            seen[item] = True

    def __repr__(self):
        return f'<BallotValidator({self.n_candidates})>'
