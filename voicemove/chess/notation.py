"""
Shorthand notation grammar
----

A single parse step sorts the (cleaned up) input into exactly one kind of move
before any board lookups happen:

* pawn advance: e4
* pawn capture: exd5 (written as ed5 once the capture marker is dropped)
* pawn promotion: e8Q, e8=Q
* pawn capture + promotion: dxe8Q
* piece move: Nf3, Nbd7, R1e2, Qh4xe1
* castling: 0-0 / 0-0-0 (or O-O / O-O-O)
* malformed: anything else
"""

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from voicemove.chess.pieces import LETTER_TO_PIECE, PIECE_LETTERS, PieceType
from voicemove.chess.square import Square
from voicemove.core.config import (
    ANNOTATION_SUFFIXES,
    CAPTURE_MARKER,
    FILES,
    KINGSIDE_CASTLE_TOKENS,
    PROMOTION_MARKER,
    QUEENSIDE_CASTLE_TOKENS,
)


class NotationKind(Enum):
    PAWN_ADVANCE = auto()
    PAWN_CAPTURE = auto()
    PAWN_PROMOTION = auto()
    PAWN_CAPTURE_PROMOTION = auto()
    PIECE_MOVE = auto()
    CASTLE_KINGSIDE = auto()
    CASTLE_QUEENSIDE = auto()
    MALFORMED = auto()


PAWN_ADVANCE = re.compile(r"[a-h][1-8]")
PAWN_CAPTURE = re.compile(r"([a-h])([a-h][1-8])")
PAWN_PROMOTION = re.compile(r"([a-h][1-8])([QRBN])")
PAWN_CAPTURE_PROMOTION = re.compile(r"([a-h])([a-h][1-8])([QRBN])")
PIECE_MOVE = re.compile(r"([QRBNK])([a-h]?[1-8]?)([a-h][1-8])")


@dataclass(frozen=True)
class ParsedNotation:
    """
    Result of the parse step. Which of the optional fields are filled in depends on the kind:

    * origin_file: pawn captures
    * promotion: pawn promotions (the letter as written, ex. 'Q')
    * piece_type / fragment: piece moves. The fragment holds the file and/or rank that singles out the moving piece ('' if none given)
    """

    kind: NotationKind
    text: str
    destination: Optional[Square] = None
    origin_file: Optional[str] = None
    promotion: Optional[str] = None
    piece_type: Optional[PieceType] = None
    fragment: str = ""


def clean_notation(text: str) -> str:
    """Drop everything that says nothing about where a piece comes from: captures, '=', check/mate marks"""
    cleaned = text.strip().replace(CAPTURE_MARKER, "").replace(PROMOTION_MARKER, "")
    return cleaned.rstrip(ANNOTATION_SUFFIXES)


def parse_notation(
    text: str,
    kingside_tokens: tuple[str, ...] = KINGSIDE_CASTLE_TOKENS,
    queenside_tokens: tuple[str, ...] = QUEENSIDE_CASTLE_TOKENS,
) -> ParsedNotation:
    """Classify the shorthand. Never raises: input that fits no grammar comes back as MALFORMED."""
    cleaned = clean_notation(text)
    if not cleaned:
        return ParsedNotation(NotationKind.MALFORMED, cleaned)

    first_character = cleaned[0]
    if first_character in FILES:
        return _parse_pawn_move(cleaned)
    if first_character in PIECE_LETTERS:
        return _parse_piece_move(cleaned)
    if cleaned in kingside_tokens:
        return ParsedNotation(NotationKind.CASTLE_KINGSIDE, cleaned)
    if cleaned in queenside_tokens:
        return ParsedNotation(NotationKind.CASTLE_QUEENSIDE, cleaned)
    return ParsedNotation(NotationKind.MALFORMED, cleaned)


def _parse_pawn_move(text: str) -> ParsedNotation:
    if len(text) == 2 and PAWN_ADVANCE.fullmatch(text):
        return ParsedNotation(
            NotationKind.PAWN_ADVANCE, text, destination=Square.from_algebraic(text)
        )

    if len(text) == 3:
        if match := PAWN_CAPTURE.fullmatch(text):
            origin_file, destination = match.groups()
            return ParsedNotation(
                NotationKind.PAWN_CAPTURE,
                text,
                destination=Square.from_algebraic(destination),
                origin_file=origin_file,
            )
        if match := PAWN_PROMOTION.fullmatch(text):
            destination, promotion = match.groups()
            return ParsedNotation(
                NotationKind.PAWN_PROMOTION,
                text,
                destination=Square.from_algebraic(destination),
                promotion=promotion,
            )

    if len(text) == 4 and (match := PAWN_CAPTURE_PROMOTION.fullmatch(text)):
        origin_file, destination, promotion = match.groups()
        return ParsedNotation(
            NotationKind.PAWN_CAPTURE_PROMOTION,
            text,
            destination=Square.from_algebraic(destination),
            origin_file=origin_file,
            promotion=promotion,
        )

    return ParsedNotation(NotationKind.MALFORMED, text)


def _parse_piece_move(text: str) -> ParsedNotation:
    match = PIECE_MOVE.fullmatch(text)
    if match is None:
        return ParsedNotation(NotationKind.MALFORMED, text)

    letter, fragment, destination = match.groups()
    return ParsedNotation(
        NotationKind.PIECE_MOVE,
        text,
        destination=Square.from_algebraic(destination),
        piece_type=LETTER_TO_PIECE[letter],
        fragment=fragment,
    )
