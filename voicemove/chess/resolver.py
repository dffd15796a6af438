"""
Turn shorthand notation into a coordinate move the game service accepts
----

Pawns: the origin square is inferred from the destination (and the user's color).
Pieces: narrowed down in stages until exactly one candidate is left:

1. only one piece of that type? --> that's the one (no questions asked).
2. the user gave a file/rank hint? --> keep the pieces on a matching square.
3. otherwise --> keep the pieces with line of sight (knights: in range) to the destination.

NOTE: pins are deliberately ignored. If two pieces see the destination but one is pinned,
the user has to say which piece moves. Better to refuse than to submit the wrong move.
"""

import logging
from typing import Optional

from voicemove.chess.geometry import has_access
from voicemove.chess.notation import NotationKind, ParsedNotation, parse_notation
from voicemove.chess.pieces import Piece, PieceType
from voicemove.chess.session import Session
from voicemove.chess.square import Square
from voicemove.core.config import Settings
from voicemove.core.exceptions import (
    AmbiguousMoveError,
    MalformedNotationError,
    PieceNotFoundError,
)

logger = logging.getLogger(__name__)

PAWN_MOVES = (
    NotationKind.PAWN_ADVANCE,
    NotationKind.PAWN_CAPTURE,
    NotationKind.PAWN_PROMOTION,
    NotationKind.PAWN_CAPTURE_PROMOTION,
)


def translate(
    session: Session, shorthand: str, settings: Optional[Settings] = None
) -> str:
    """Shorthand notation (ex. 'Nbd7') --> coordinate move (ex. 'b8d7')"""
    settings = settings or Settings()
    parsed = parse_notation(
        shorthand,
        kingside_tokens=settings.kingside_tokens(),
        queenside_tokens=settings.queenside_tokens(),
    )
    logger.debug("Parsed %r as %s", shorthand, parsed.kind.name)

    if parsed.kind in PAWN_MOVES:
        return pawn_move(session, parsed)
    if parsed.kind == NotationKind.PIECE_MOVE:
        return piece_move(session, parsed)
    if parsed.kind == NotationKind.CASTLE_KINGSIDE:
        return session.kingside_castle
    if parsed.kind == NotationKind.CASTLE_QUEENSIDE:
        return session.queenside_castle

    raise MalformedNotationError(
        f"{shorthand!r} does not follow any expected shorthand or coordinate format."
    )


def pawn_move(session: Session, parsed: ParsedNotation) -> str:
    """
    The pawn is assumed to stand one square behind its destination (in the direction it moves).

    Exception: a plain advance onto the rank a pawn reaches with its two square first move,
    without one of the user's pawns right behind it --> the pawn comes from its starting rank.

    NOTE: This is a plausibility guess, not a legality check. If the guess is wrong the service rejects the move.
    Known misfire: the square behind the destination can be empty because the user's pawn that stood
    there already advanced past it. The advance is then read as a two square one from the starting rank,
    whatever stands there now (the starting square is never checked).
    """
    destination = parsed.destination
    if destination is None:
        raise MalformedNotationError(f"No destination square found in {parsed.text!r}.")

    direction = session.direction
    origin_rank = destination.rank - direction

    if parsed.kind == NotationKind.PAWN_ADVANCE and _is_double_step(session, destination):
        origin_rank = destination.rank - 2 * direction

    origin_file = parsed.origin_file or destination.to_algebraic()[0]
    promotion = parsed.promotion or ""
    return f"{origin_file}{origin_rank}{destination.to_algebraic()}{promotion}"


def piece_move(session: Session, parsed: ParsedNotation) -> str:
    """Find the one piece of the requested type that makes this move. Never adds a promotion."""
    assert parsed.piece_type is not None and parsed.destination is not None

    candidates = session.index.squares_of(parsed.piece_type)
    if not candidates:
        raise PieceNotFoundError(
            f"None of your pieces is a {parsed.piece_type.name.lower()}; "
            "the tracked pieces may be out of sync."
        )

    origin = _single_candidate(session, candidates, parsed)
    return f"{origin.to_algebraic()}{parsed.destination.to_algebraic()}"


# --- PRIVATE HELPERS ---
def _is_double_step(session: Session, destination: Square) -> bool:
    if destination.rank != session.double_step_rank:
        return False
    square_behind = destination.offset(0, -session.direction)
    own_pawn = Piece(PieceType.PAWN, session.color)
    return session.board.piece(square_behind) != own_pawn


def _single_candidate(
    session: Session, candidates: list[Square], parsed: ParsedNotation
) -> Square:
    assert parsed.piece_type is not None and parsed.destination is not None

    if len(candidates) == 1:
        return candidates[0]

    if parsed.fragment:
        matching = [
            square for square in candidates if parsed.fragment in square.to_algebraic()
        ]
        logger.debug(
            "Hint %r narrows %s down to %s",
            parsed.fragment,
            _names(candidates),
            _names(matching),
        )
        if len(matching) == 1:
            return matching[0]
        raise AmbiguousMoveError(
            f"{parsed.text!r}: {len(matching)} of your pieces match {parsed.fragment!r} "
            f"(candidates: {_names(candidates)})."
        )

    with_access = [
        square
        for square in candidates
        if has_access(session.board, square, parsed.destination, parsed.piece_type)
    ]
    logger.debug(
        "Line of sight to %s narrows %s down to %s",
        parsed.destination.to_algebraic(),
        _names(candidates),
        _names(with_access),
    )
    if len(with_access) == 1:
        return with_access[0]

    if not with_access:
        raise AmbiguousMoveError(
            f"{parsed.text!r}: none of your pieces at {_names(candidates)} can reach "
            f"{parsed.destination.to_algebraic()}."
        )
    raise AmbiguousMoveError(
        f"{parsed.text!r}: more than one piece can reach {parsed.destination.to_algebraic()} "
        f"({_names(with_access)}); say which one should move."
    )


def _names(squares: list[Square]) -> str:
    return ",".join(square.to_algebraic() for square in squares) or "-"
