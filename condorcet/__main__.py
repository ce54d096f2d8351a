"""A commandline tool to find the Condorcet winner of a BLT ballot file.

Every ballot must rank all candidates; incomplete ballots are rejected and
reported.
"""

import argparse
import io
import logging
import sys
import warnings
from typing import Optional

import condorcet.io.blt
from condorcet.election import Election, InvalidCandidateCountError
from condorcet.io.core import BallotFile

argparser = argparse.ArgumentParser(
    prog='condorcet',
    description=__doc__,
    formatter_class=argparse.ArgumentDefaultsHelpFormatter,
)
argparser.add_argument(
    '-i', '--input-file',
    type=argparse.FileType('r', encoding='utf8'),
    help='BLT file to load input ballots from',
)
argparser.add_argument(
    '-I', '--use-stdin',
    action='store_true',
    help='load input ballots from standard input',
)
argparser.add_argument(
    '-v', '--verbose',
    action='store_true',
    help='show all log messages including rejected ballots',
)
argparser.add_argument(
    '-q', '--quiet',
    action='store_true',
    help='do not show any log messages or other info',
)


def main(input_file: Optional[io.TextIOBase] = None,
         use_stdin: bool = False,
         verbose: bool = False,
         quiet: bool = False,
         ) -> Optional[int]:
    logging.basicConfig(
        level=(
            logging.DEBUG if verbose
            else (logging.WARNING if quiet else logging.INFO)
        ),
        format='%(levelname)-10s %(message)s'
    )
    if use_stdin:
        input_file = sys.stdin
    ballot_file = condorcet.io.blt.load(input_file)
    if not ballot_file.votes:
        warnings.warn('empty votes: cannot evaluate election, terminating')
        return None
    try:
        election = Election(ballot_file.n_candidates)
    except InvalidCandidateCountError as e:
        raise ValueError(f'cannot evaluate ballot file: {e}') from e
    election.add_votes(ballot_file.votes)
    result = election.result()
    show_ballot_stats(ballot_file, result.n_voters)
    winner = result.winner()
    show_winner(ballot_file, winner)
    return winner


def show_ballot_stats(ballot_file: BallotFile, n_accepted: int) -> None:
    n_total = sum(ballot_file.votes.values())
    print()
    if ballot_file.election_name:
        print(f'Running {ballot_file.election_name}')
    print(f'Received {n_total} ballots'
          f' for {ballot_file.n_candidates} candidates')
    if n_accepted < n_total:
        print(f'Rejected {n_total - n_accepted} incomplete or invalid'
              ' ballots')
    print(f'Counted {n_accepted} ballots')
    if ballot_file.withdrawn:
        print('Withdrawn candidates (still ranked on ballots): '
              + ', '.join(ballot_file.withdrawn))


def show_winner(ballot_file: BallotFile, winner: Optional[int]) -> None:
    print()
    if winner is None:
        print('No Condorcet winner')
    else:
        print('Condorcet winner:', ballot_file.candidates[winner])


if __name__ == '__main__':
    args = argparser.parse_args()
    if not args.input_file and not args.use_stdin:
        argparser.print_usage()
    else:
        main(**vars(args))
