"""Shared functionality for ballot file I/O. Internal."""

from __future__ import annotations

import dataclasses
import typing
from typing import Any, List, Dict, Tuple, Callable, TextIO, Optional

from condorcet.vote import BallotType


class ParseError(Exception):
    """An input that is invalid according to the given format was detected."""
    pass


@dataclasses.dataclass
class BallotFile:
    """A container for data returnable from a ballot file."""
    votes: Dict[BallotType, int]
    n_seats: Optional[int] = None
    candidates: Optional[List[str]] = None
    withdrawn: List[str] = dataclasses.field(default_factory=list)
    election_name: Optional[str] = None

    @property
    def n_candidates(self) -> int:
        return len(self.candidates)


def loaders(line_loader: Callable[..., BallotFile]
            ) -> Tuple[Callable[..., BallotFile], Callable[..., BallotFile]]:
    """Create load() and loads() functions from an iterating function."""
    return_annot = typing.get_type_hints(line_loader).get('return')
    if return_annot is None:
        return_annot = Any

    def load(file: TextIO, **kwargs) -> return_annot:
        return line_loader(iter(file), **kwargs)

    def loads(text: str, **kwargs) -> return_annot:
        return line_loader(iter(text.split('\n')), **kwargs)

    return load, loads

