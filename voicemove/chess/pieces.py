"""Defines the types of chess pieces and their two-character codes ('wp', 'bN', ...)"""

from dataclasses import dataclass
from enum import Enum
from typing import Self


class PieceType(Enum):
    """Values are the letters used in piece codes / shorthand notation."""

    EMPTY = "-"
    PAWN = "p"
    KNIGHT = "N"
    BISHOP = "B"
    ROOK = "R"
    QUEEN = "Q"
    KING = "K"


class Color(Enum):
    NONE = "-"
    WHITE = "w"
    BLACK = "b"


LETTER_TO_PIECE: dict[str, PieceType] = {
    piece_type.value: piece_type
    for piece_type in PieceType
    if piece_type != PieceType.EMPTY
}

# Letters a pawn may promote into (shorthand uses upper case, coordinate moves often lower case)
PROMOTION_LETTERS = "QRBN"

# Shorthand letters that start the piece grammar
PIECE_LETTERS = "QRBNK"

EMPTY_CODE = "--"


@dataclass(frozen=True)
class Piece:
    type: PieceType
    color: Color

    @classmethod
    def empty(cls) -> Self:
        return cls(PieceType.EMPTY, Color.NONE)

    def to_code(self) -> str:
        """white knight --> 'wN', black pawn --> 'bp', empty square --> '--'"""
        if self.is_empty():
            return EMPTY_CODE
        return f"{self.color.value}{self.type.value}"

    @classmethod
    def from_fen(cls, character: str) -> Self:
        # lower case: Black pieces, upper case: White pieces
        color = Color.WHITE if character.isupper() else Color.BLACK
        letter = character.upper()
        piece_type = PieceType.PAWN if letter == "P" else LETTER_TO_PIECE[letter]
        return cls(piece_type, color)

    def to_fen(self) -> str:
        letter = self.type.value.upper()
        return letter if self.color == Color.WHITE else letter.lower()

    def is_empty(self) -> bool:
        return self.type == PieceType.EMPTY

    def promoted(self, letter: str) -> Self:
        """New piece of the same color, of the type the (case-insensitive) promotion letter denotes."""
        return type(self)(LETTER_TO_PIECE[letter.upper()], self.color)
