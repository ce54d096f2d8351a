import sys
import os
import random
import logging
import itertools

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import condorcet
from condorcet.election import Election, InvalidCandidateCountError


VOTES = {
    # https://fr.wikipedia.org/wiki/M%C3%A9thode_de_Condorcet
    'condorcet': {
        (0, 2, 1): 23,
        (1, 2, 0): 19,
        (2, 1, 0): 16,
        (2, 0, 1): 2,
    },
    # https://en.wikipedia.org/wiki/Condorcet_method
    'tennessee': {
        (2, 3, 0, 1): 42,
        (3, 0, 1, 2): 26,
        (0, 1, 3, 2): 15,
        (1, 0, 3, 2): 17,
    },
    # https://fr.wikipedia.org/wiki/Paradoxe_de_Condorcet
    'paradox': {
        (0, 1, 2): 23,
        (1, 2, 0): 17,
        (1, 0, 2): 2,
        (2, 0, 1): 10,
        (2, 1, 0): 8,
    },
    'tie': {
        (0, 1): 5,
        (1, 0): 5,
    },
}

N_CANDIDATES = {
    'condorcet': 3,
    'tennessee': 4,
    'paradox': 3,
    'tie': 2,
}

WINNERS = {
    'condorcet': 2,
    'tennessee': 3,
    'paradox': None,
    'tie': None,
}

INVALID_BALLOTS = [
    (4, [0, 3, 2]),          # partial preference, 1 is not ranked
    (3, [2, 3, 0, 1]),       # too many candidates
    (3, [0, -1, 2]),         # negative number
    (5, [0, 5, 3, 2, 1]),    # too large number
    (4, [3, 3, 1, 2]),       # duplicate candidate
    (2, []),
    (2, ['0', '1']),
]


def cast_votes(election, votes):
    for ballot, n_votes in votes.items():
        for i in range(n_votes):
            assert election.vote(ballot)


@pytest.mark.parametrize('n_candidates', [2, 3, 5, 20])
def test_construct(n_candidates):
    election = Election(n_candidates)
    assert election.n_candidates == n_candidates
    assert election.n_voters == 0


@pytest.mark.parametrize('n_candidates', [1, 0, -3, 2.0, '3', None, True])
def test_construct_invalid(n_candidates):
    with pytest.raises(InvalidCandidateCountError) as excinfo:
        Election(n_candidates)
    assert excinfo.value.n_candidates == n_candidates
    assert isinstance(excinfo.value, ValueError)


def test_default_two_candidates():
    election = Election()
    assert election.n_candidates == 2
    assert election.winner() is None
    assert election.vote((1, 0))
    assert not election.vote((0, 1, 2))
    assert election.winner() == 1
    assert election.n_voters == 1


@pytest.mark.parametrize(('n_candidates', 'ballot'), INVALID_BALLOTS)
def test_vote_invalid(n_candidates, ballot):
    election = Election(n_candidates)
    valid = list(range(n_candidates))
    assert election.vote(valid)
    before = election.to_pairs()
    assert not election.vote(ballot)
    assert election.n_voters == 1
    assert election.to_pairs() == before


@pytest.mark.parametrize(('n_candidates', 'ballot'), INVALID_BALLOTS)
def test_validate_raises(n_candidates, ballot):
    with pytest.raises(condorcet.VoteError):
        Election(n_candidates).validate(ballot)


def test_vote_rejection_logged(caplog):
    caplog.set_level(logging.DEBUG, logger='condorcet.election')
    assert not Election(3).vote([0, 0, 1])
    assert 'rejecting ballot (0, 0, 1)' in caplog.text
    assert 'duplicated' in caplog.text


def test_vote_accepts_iterables():
    election = Election(3)
    assert election.vote([2, 0, 1])
    assert election.vote(iter((2, 0, 1)))
    assert election.vote(range(3))
    assert election.n_voters == 3


def test_vote_increments_pairs():
    election = Election(4)
    ballot = (2, 0, 3, 1)
    for n in range(1, 4):
        assert election.vote(ballot)
        for i, upper in enumerate(ballot):
            for lower in ballot[i+1:]:
                assert election.pairwise(upper, lower) == n
                assert election.pairwise(lower, upper) == 0


def test_pairwise_sums_to_voters():
    rng = random.Random(1789)
    election = Election(6)
    for i in range(200):
        ballot = list(range(6))
        rng.shuffle(ballot)
        assert election.vote(ballot)
    assert election.n_voters == 200
    for i, j in itertools.permutations(range(6), 2):
        assert election.pairwise(i, j) + election.pairwise(j, i) == 200


def test_no_votes_no_winner():
    for n_candidates in range(2, 6):
        election = Election(n_candidates)
        assert election.winner() is None
        assert election.result().winner() is None
        assert election.n_voters == 0


@pytest.mark.parametrize('vote_set_name', list(VOTES.keys()))
def test_winner(vote_set_name):
    election = Election(N_CANDIDATES[vote_set_name])
    cast_votes(election, VOTES[vote_set_name])
    assert election.winner() == WINNERS[vote_set_name]
    assert election.result().winner() == WINNERS[vote_set_name]
    assert election.n_voters == sum(VOTES[vote_set_name].values())


@pytest.mark.parametrize('vote_set_name', list(VOTES.keys()))
def test_add_votes(vote_set_name):
    election = Election(N_CANDIDATES[vote_set_name])
    n_accepted = election.add_votes(VOTES[vote_set_name])
    assert n_accepted == sum(VOTES[vote_set_name].values())
    assert election.n_voters == n_accepted
    assert election.winner() == WINNERS[vote_set_name]
    manual = Election(N_CANDIDATES[vote_set_name])
    cast_votes(manual, VOTES[vote_set_name])
    assert election.to_pairs() == manual.to_pairs()


def test_add_votes_skips_invalid(caplog):
    caplog.set_level(logging.WARNING, logger='condorcet.election')
    election = Election(3)
    n_accepted = election.add_votes({
        (0, 1, 2): 4,
        (0, 1): 7,
        (2, 1, 0): 1,
    })
    assert n_accepted == 5
    assert election.n_voters == 5
    assert election.winner() == 0
    assert 'skipping 7 invalid ballots' in caplog.text


@pytest.mark.parametrize('n_votes', [-1, 1.5, '2'])
def test_add_votes_invalid_count(n_votes):
    election = Election(2)
    with pytest.raises(ValueError):
        election.add_votes({(0, 1): n_votes})
    assert election.n_voters == 0


def test_pairwise_out_of_range():
    with pytest.raises(IndexError):
        Election(3).pairwise(0, 3)


@pytest.mark.parametrize('votes', [
    {(0, 1): 3, (1, 0): -1},
    {(0, 1): 3, (0, 1, 2): 2, (1, 0): 'x'},
    {(1, 0): 1, (0, 1): 4, (1, 0, 2): 1.0},
])
def test_add_votes_invalid_count_leaves_election(votes):
    election = Election(2)
    assert election.vote((1, 0))
    before = election.to_pairs()
    with pytest.raises(ValueError):
        election.add_votes(votes)
    assert election.n_voters == 1
    assert election.to_pairs() == before


def test_add_votes_large_weight():
    election = Election(20)
    ballot = tuple(reversed(range(20)))
    assert election.add_votes({ballot: 200000, tuple(range(20)): 1}) == 200001
    assert election.n_voters == 200001
    assert election.pairwise(19, 0) == 200000
    assert election.pairwise(0, 19) == 1
    assert election.winner() == 19
