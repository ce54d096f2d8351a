'''Pairwise preference counting.

The pairwise tally is a square matrix of counters indexed by ordered pairs
of candidates, where the value at ``(i, j)`` is the number of ballots that
rank candidate ``i`` strictly above candidate ``j``. The diagonal is unused
and stays at zero.
'''

from __future__ import annotations

from typing import Dict, Sequence, Tuple


class PairwiseTally:
    '''A matrix of pairwise preference counts over a fixed candidate set.

    Candidates are identified by their indices ``0 .. n_candidates - 1``.
    The tally does not validate the rankings it receives; that is the job
    of :class:`condorcet.vote.BallotValidator`.

    :param n_candidates: Number of candidates (size of the matrix).
    '''
    __slots__ = ('n_candidates', '_counts')

    def __init__(self, n_candidates: int):
        self.n_candidates = n_candidates
        self._counts = [[0] * n_candidates for _ in range(n_candidates)]

    def add_ranking(self, ranking: Sequence[int], count: int = 1) -> None:
        '''Count a total ranking of candidates.

        Every candidate in the ranking is counted as preferred to all
        candidates ranked after it.

        :param ranking: Candidate indices, most preferred first.
        :param count: Number of identical ballots with this ranking.
        '''
        for i, upper in enumerate(ranking):
            row = self._counts[upper]
            for lower in ranking[i+1:]:
                row[lower] += count

    def __getitem__(self, pair: Tuple[int, int]) -> int:
        upper, lower = pair
        self._check_index(upper)
        self._check_index(lower)
        return self._counts[upper][lower]

    def beats(self, upper: int, lower: int) -> bool:
        '''Return True if more ballots prefer upper to lower than vice versa.'''
        return self[upper, lower] > self[lower, upper]

    def copy(self) -> PairwiseTally:
        '''Return an independent copy of the tally.'''
        duplicate = PairwiseTally.__new__(PairwiseTally)
        duplicate.n_candidates = self.n_candidates
        duplicate._counts = [row[:] for row in self._counts]
        return duplicate

    def to_pairs(self) -> Dict[Tuple[int, int], int]:
        '''Export the tally as counts of ordered candidate pairs.

        :returns: A dictionary mapping every ordered pair ``(i, j)`` with
            ``i != j`` to the number of ballots ranking ``i`` above ``j``.
        '''
        return {
            (upper, lower): count
            for upper, row in enumerate(self._counts)
                for lower, count in enumerate(row)    # noqa: E131
                if upper != lower
        }

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.n_candidates:
            raise IndexError(
                f'candidate index out of range: {index},'
                f' must be in 0..{self.n_candidates - 1}'
            )

    def __eq__(self, other) -> bool:
        if not isinstance(other, PairwiseTally):
            return NotImplemented
        return (
            self.n_candidates == other.n_candidates
            and self._counts == other._counts
        )

    __hash__ = None

    def __repr__(self):
        return f'<PairwiseTally({self.n_candidates}): {self._counts!r}>'
