"""
A square on the board + the file/rank bookkeeping every other module needs.

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from voicemove.core.config import FILES
from voicemove.core.exceptions import MalformedNotationError

ALGEBRAIC_SQUARE = re.compile(r"[a-h][1-8]")


@dataclass(frozen=True)
class Square:
    file: int
    rank: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a1' - 'h8' get converted to (1,1) - (8,8)"""
        if not ALGEBRAIC_SQUARE.fullmatch(sq):
            raise MalformedNotationError(f"Cannot interpret {sq!r} as a square.")
        file = FILES.index(sq[0]) + 1
        rank = int(sq[1])
        return cls(file, rank)

    def to_algebraic(self) -> str:
        return f"{FILES[self.file - 1]}{self.rank}"

    def offset(self, d_file: int, d_rank: int) -> Square:
        """The square reached by stepping (d_file, d_rank) away. Not guaranteed to be on the board."""
        return Square(self.file + d_file, self.rank + d_rank)
