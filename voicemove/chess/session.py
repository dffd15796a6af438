"""
Everything tracked for a single game, from game start until the next game start.

One Session is live at a time. It gets passed explicitly into every operation,
so throwing it away and creating a new one is the only way to reset.
"""

from dataclasses import dataclass, field
from typing import Self

from voicemove.chess.board import Board
from voicemove.chess.castling import CASTLING_RULES, castling_directions
from voicemove.chess.piece_index import UserPieceIndex
from voicemove.chess.pieces import Color


@dataclass
class Session:
    color: Color
    piece_rank: int
    pawn_rank: int
    kingside_castle: str
    queenside_castle: str
    board: Board
    index: UserPieceIndex
    history: list[str] = field(default_factory=list)

    @classmethod
    def new(cls, color: Color) -> Self:
        """Standard starting position, with the user playing the given color."""
        if color == Color.NONE:
            raise ValueError("A session needs the user to play either white or black.")

        piece_rank, pawn_rank = (1, 2) if color == Color.WHITE else (8, 7)
        king_side, queen_side = castling_directions(color)
        board = Board.starting_position()
        return cls(
            color=color,
            piece_rank=piece_rank,
            pawn_rank=pawn_rank,
            kingside_castle=CASTLING_RULES[king_side].king_move,
            queenside_castle=CASTLING_RULES[queen_side].king_move,
            board=board,
            index=UserPieceIndex.from_board(board, color),
        )

    @property
    def direction(self) -> int:
        """Rank direction the user's pawns move in: white moves UP the board, black moves DOWN"""
        return 1 if self.color == Color.WHITE else -1

    @property
    def double_step_rank(self) -> int:
        """Rank a pawn lands on after advancing two squares from its starting rank"""
        return self.pawn_rank + 2 * self.direction
