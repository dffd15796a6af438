"""
Index of the user's own pieces: square --> piece.

Derived from the Board and kept in lockstep with it by the move applier.
Asking "where are my knights?" is then a lookup instead of a scan of the full board.
"""

from copy import deepcopy
from dataclasses import dataclass, field
from typing import Self

from voicemove.chess.board import Board
from voicemove.chess.pieces import Color, Piece, PieceType
from voicemove.chess.square import Square
from voicemove.core.exceptions import InvalidStateError


@dataclass
class UserPieceIndex:
    color: Color
    pieces: dict[Square, Piece] = field(default_factory=dict)

    @classmethod
    def from_board(cls, board: Board, color: Color) -> Self:
        return cls(color, {square: board.piece(square) for square in board.locate_color(color)})

    def __contains__(self, square: Square) -> bool:
        return square in self.pieces

    def __len__(self) -> int:
        return len(self.pieces)

    def get(self, square: Square) -> Piece | None:
        return self.pieces.get(square)

    def owns(self, piece: Piece) -> bool:
        return piece.color == self.color

    def squares_of(self, piece_type: PieceType) -> list[Square]:
        """Squares of all the user's pieces of the given type"""
        return [square for square, piece in self.pieces.items() if piece.type == piece_type]

    def promote(self, square: Square, promoted_piece: Piece) -> None:
        if square not in self.pieces:
            raise InvalidStateError(
                f"Cannot promote on {square.to_algebraic()}: no tracked piece of yours there."
            )
        self.pieces[square] = promoted_piece

    def remove(self, square: Square) -> None:
        """The opponent captured the piece standing on this square"""
        if self.pieces.pop(square, None) is None:
            raise InvalidStateError(
                f"Cannot remove piece from {square.to_algebraic()}: no tracked piece of yours there."
            )

    def relocate(self, from_square: Square, to_square: Square) -> None:
        piece = self.pieces.pop(from_square, None)
        if piece is None:
            raise InvalidStateError(
                f"Cannot move piece from {from_square.to_algebraic()}: no tracked piece of yours there."
            )
        self.pieces[to_square] = piece

    def mismatches(self, board: Board) -> list[Square]:
        """Squares where the index and the board disagree (empty if they are in lockstep)."""
        stale_entries = [
            square for square, piece in self.pieces.items() if board.piece(square) != piece
        ]
        untracked = [square for square in board.locate_color(self.color) if square not in self.pieces]
        return stale_entries + untracked

    def copy(self) -> Self:
        return deepcopy(self)
