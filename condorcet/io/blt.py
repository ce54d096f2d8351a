'''Reading BLT ballot files.

The BLT format (used by OpenSTV and others) consists of a header line with
the number of candidates and seats, optional lines of withdrawn candidates
(given as negative candidate numbers), ballot lines with a weight followed by
one-based candidate numbers and a terminating zero, a single ``0`` line ending
the ballots, the quoted candidate names and an optional quoted election title.

Each ballot line stands for as many identical ballots as its weight, which
therefore has to be a whole number. Ballot contents are not validated here;
incomplete rankings are loaded as they are and get rejected when voted into
a :class:`condorcet.Election`.
'''

from typing import List, Dict, Tuple, Set, Iterable, Optional

import condorcet.io.core
from condorcet.io.core import BallotFile
from condorcet.vote import BallotType


class BLTParseError(condorcet.io.core.ParseError):
    pass


def load_lines(blt_lines: Iterable[str]) -> BallotFile:
    header = next((line for line in blt_lines if _clean_line(line)), None)
    if header is None:
        raise BLTParseError('empty BLT file')
    n_cands, n_seats = _parse_header(header)
    ballots, withdrawn = _parse_body(blt_lines)
    candidates, election_name = _parse_strings(blt_lines, n_cands)
    if candidates is None:
        candidates = _numeric_candidates(n_cands)
    invalid_withdrawn = [num for num in withdrawn if num > n_cands]
    if invalid_withdrawn:
        raise BLTParseError(f'withdrawn candidates out of range:'
                            f' {sorted(invalid_withdrawn)}')
    return BallotFile(
        votes=_deindex_ballots(ballots),
        n_seats=n_seats,
        candidates=candidates,
        withdrawn=[candidates[num-1] for num in sorted(withdrawn)],
        election_name=election_name,
    )


load, loads = condorcet.io.core.loaders(load_lines)


def _numeric_candidates(n_cands: int) -> List[str]:
    return [str(i+1) for i in range(n_cands)]


def _deindex_ballots(ballots: Dict[Tuple[int, ...], int]
                     ) -> Dict[BallotType, int]:
    return {
        tuple(i - 1 for i in ballot): n_votes
        for ballot, n_votes in ballots.items()
    }


def _parse_header(blt_line: str) -> Tuple[int, int]:
    blt_result = _parse_numline(blt_line)
    if len(blt_result) == 2:
        return tuple(blt_result)
    else:
        raise BLTParseError(f'need two integers (candidate and seat count)'
                            f' in BLT file header line, got {blt_line!r}')


def _parse_body(blt_lines: Iterable[str],
                ) -> Tuple[Dict[Tuple[int, ...], int], Set[int]]:
    ballots = {}
    withdrawn = set()
    ballots_encountered = False
    for line in blt_lines:
        result = _parse_numline(line, allow_negative=not ballots_encountered)
        if not result:
            continue    # ignore empty lines
        elif result == [0]:
            # End-of-ballots line, return.
            return ballots, withdrawn
        elif result[0] < 0:
            # Withdrawn candidates. Allow more than one per line.
            if any(n >= 0 for n in result):
                raise BLTParseError(f'invalid withdrawn line: {line!r}')
            withdrawn.update(-n for n in result)
        else:
            weight, ballot = _parse_ballot(result, line)
            if ballot not in ballots:
                ballots[ballot] = 0
            ballots[ballot] += weight
            ballots_encountered = True
    raise BLTParseError('incomplete BLT file:'
                        ' EOF before ballot list terminator')


def _parse_strings(blt_lines: Iterable[str],
                   n_cands: int,
                   ) -> Tuple[Optional[List[str]], Optional[str]]:
    parsed_lines = []
    empty_encountered = False
    for blt_line in blt_lines:
        blt_line = _clean_line(blt_line)
        if len(blt_line) >= 2 and blt_line[0] == blt_line[-1] == '"':
            if empty_encountered:
                raise BLTParseError(f'nonempty line after empty: {blt_line!r}')
            parsed_lines.append(blt_line[1:-1])
        elif not blt_line:
            empty_encountered = True
        else:
            raise BLTParseError(f'invalid BLT string line: {blt_line!r}')
    if not parsed_lines:
        return None, None
    elif len(parsed_lines) == 1:
        return None, parsed_lines[0]
    elif len(parsed_lines) < n_cands:
        raise BLTParseError(f'not enough candidate names: {len(parsed_lines)}'
                            f' given, {n_cands} set in header')
    elif len(parsed_lines) == n_cands:
        return parsed_lines, None
    elif len(parsed_lines) == n_cands + 1:
        return parsed_lines[:-1], parsed_lines[-1]
    else:
        raise BLTParseError(f'too many strings: {len(parsed_lines)} found'
                            f' but expecting {n_cands} candidate names'
                            ' + title')


def _clean_line(blt_line: str) -> str:
    blt_line = blt_line.strip()
    # Ignore everything after the first hash sign after the last double quote.
    hash_search_start = blt_line.rfind('"') if '"' in blt_line else 0
    leftmost_hash = blt_line[hash_search_start:].find('#')
    if leftmost_hash == -1:
        return blt_line
    else:
        return blt_line[:(hash_search_start + leftmost_hash)].rstrip()


def _parse_ballot(nums: List[int], line: str) -> Tuple[int, Tuple[int, ...]]:
    # The first element is weight, the rest are candidate numbers.
    if nums[-1] != 0:
        raise BLTParseError(f'ballot line must be zero-terminated: {line!r}')
    if 0 in nums[1:-1]:
        raise BLTParseError(f'zero candidate number in ballot: {line!r}')
    return nums[0], tuple(nums[1:-1])


def _parse_numline(blt_line: str, allow_negative: bool = False) -> List[int]:
    blt_line = _clean_line(blt_line)
    # Return empty lines as an empty list.
    if not blt_line:
        return []
    nums = []
    for i, numstr in enumerate(blt_line.split()):
        digits = numstr[1:] if allow_negative and numstr[0] == '-' else numstr
        if digits.isdigit():
            nums.append(int(numstr))
        else:
            raise BLTParseError(f'invalid BLT numberline item {i}: {numstr!r}'
                                ' (ballot weights and candidate numbers'
                                ' must be whole numbers)')
    return nums
