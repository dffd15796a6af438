"""Castling: which rook move goes with which king move. Needs to be imported by multiple sources"""

from dataclasses import dataclass
from enum import Enum
from typing import Self

from voicemove.chess.pieces import Color
from voicemove.chess.square import Square


class CastlingDirection(Enum):
    """The four castling directions. Values are their FEN letters."""

    WHITE_KING_SIDE = "K"
    WHITE_QUEEN_SIDE = "Q"
    BLACK_KING_SIDE = "k"
    BLACK_QUEEN_SIDE = "q"


@dataclass(frozen=True)
class CastlingSquares:
    """Squares the king/rook start from and end up in by castling."""

    king_from: Square
    king_to: Square
    rook_from: Square
    rook_to: Square

    @classmethod
    def from_algebraic(cls, k_from: str, k_to: str, r_from: str, r_to: str) -> Self:
        """Convenience method: to make mapping shown below more readable"""
        king_from = Square.from_algebraic(k_from)
        king_to = Square.from_algebraic(k_to)
        rook_from = Square.from_algebraic(r_from)
        rook_to = Square.from_algebraic(r_to)
        return cls(king_from, king_to, rook_from, rook_to)

    @property
    def king_move(self) -> str:
        """Coordinate move the game service reports for the castle"""
        return f"{self.king_from.to_algebraic()}{self.king_to.to_algebraic()}"

    @property
    def rook_move(self) -> str:
        return f"{self.rook_from.to_algebraic()}{self.rook_to.to_algebraic()}"


# The moves (in classical chess) made when castling
CASTLING_RULES: dict[CastlingDirection, CastlingSquares] = {
    CastlingDirection.WHITE_KING_SIDE: CastlingSquares.from_algebraic(
        "e1", "g1", "h1", "f1"
    ),
    CastlingDirection.WHITE_QUEEN_SIDE: CastlingSquares.from_algebraic(
        "e1", "c1", "a1", "d1"
    ),
    CastlingDirection.BLACK_KING_SIDE: CastlingSquares.from_algebraic(
        "e8", "g8", "h8", "f8"
    ),
    CastlingDirection.BLACK_QUEEN_SIDE: CastlingSquares.from_algebraic(
        "e8", "c8", "a8", "d8"
    ),
}

# king's coordinate move --> the rook's coordinate move that happens along with it
CASTLE_PAIRING: dict[str, str] = {
    squares.king_move: squares.rook_move for squares in CASTLING_RULES.values()
}


def castling_directions(color: Color) -> tuple[CastlingDirection, CastlingDirection]:
    """(king side, queen side) for the given color"""
    if color == Color.WHITE:
        return CastlingDirection.WHITE_KING_SIDE, CastlingDirection.WHITE_QUEEN_SIDE
    return CastlingDirection.BLACK_KING_SIDE, CastlingDirection.BLACK_QUEEN_SIDE
