"""
Applying reported moves to the tracked state
----

The game service reports moves, not board snapshots. Every move it reports gets replayed here
onto the Board (both colors) and the index of the user's own pieces, keeping the two in lockstep.

Nothing in here checks chess legality: the service already accepted the moves.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Self

from voicemove.chess.board import Board
from voicemove.chess.castling import CASTLE_PAIRING
from voicemove.chess.piece_index import UserPieceIndex
from voicemove.chess.pieces import LETTER_TO_PIECE, PROMOTION_LETTERS, Piece, PieceType
from voicemove.chess.session import Session
from voicemove.chess.square import Square
from voicemove.core.exceptions import (
    InconsistentHistoryError,
    InvalidStateError,
    MalformedNotationError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Move:
    """A coordinate move: origin square, destination square and (maybe) the piece type a pawn promotes into"""

    from_square: Square
    to_square: Square
    promote_to: Optional[PieceType] = None

    @classmethod
    def from_uci(cls, uci: str) -> Self:
        """
        examples:
        * "e2e4": move the piece that was on e2 to e4
        * "e7e8q" : (pawn) moves from e7 to e8 and promotes to a queen (the q)
        * "e1g1": the king castles king side (the rook's move is implied)
        """
        if len(uci) not in (4, 5):
            raise MalformedNotationError(
                f"Coordinate move {uci!r} should have 4 or 5 characters."
            )
        from_sq = Square.from_algebraic(uci[:2])
        to_sq = Square.from_algebraic(uci[2:4])
        if len(uci) == 4:
            return cls(from_sq, to_sq)

        letter = uci[4].upper()
        if letter not in PROMOTION_LETTERS:
            raise MalformedNotationError(
                f"Cannot promote into {uci[4]!r} (coordinate move {uci!r})."
            )
        return cls(from_sq, to_sq, LETTER_TO_PIECE[letter])

    def to_uci(self) -> str:
        piece_char = self.promote_to.value.lower() if self.promote_to else ""
        return f"{self.from_square.to_algebraic()}{self.to_square.to_algebraic()}{piece_char}"

    @property
    def squares(self) -> str:
        """Origin + destination only (how castling moves are looked up)"""
        return f"{self.from_square.to_algebraic()}{self.to_square.to_algebraic()}"


def apply_move(session: Session, coordinate_move: str) -> None:
    """
    Update the tracked state with a single move.
    ---

    The move is played on copies of the board and index, which only replace the session's ones
    if every step went through. A failure leaves the session exactly as it was.
    """
    move = Move.from_uci(coordinate_move)
    board = session.board.copy()
    index = session.index.copy()
    _play_move(board, index, move)
    session.board = board
    session.index = index
    logger.debug("Applied %s. Board: %s", coordinate_move, board.to_fen())


def reconcile(session: Session, reported_history: list[str]) -> None:
    """
    Bring the tracked state up to date with the move list the game service reports.
    ---

    * Same length as what we have: nothing new (the same state got delivered twice).
    * Exactly one move more, and everything before it matches: apply just that move.
    * Anything else: a take-back, or the tracked state got out of sync. Cannot tell which, so no repair is attempted.
    """
    local_history = session.history
    if len(reported_history) == len(local_history):
        return

    if len(reported_history) - len(local_history) != 1:
        raise InconsistentHistoryError(
            f"Reported {len(reported_history)} moves while tracking {len(local_history)}. "
            "Expected exactly one new move."
        )

    if reported_history[:-1] != local_history:
        raise InconsistentHistoryError(
            "Reported moves do not match the tracked moves; a take-back has likely occurred."
        )

    apply_move(session, reported_history[-1])
    session.history = list(reported_history)


def replay(session: Session, history: list[str]) -> None:
    """
    Catch up with a game already in progress: apply every reported move to a session that has not tracked any yet.

    All or nothing: if any move fails, the session keeps its starting state.
    """
    if session.history:
        raise InconsistentHistoryError(
            f"Cannot replay a full move list: already tracking {len(session.history)} moves."
        )

    board = session.board.copy()
    index = session.index.copy()
    for coordinate_move in history:
        _play_move(board, index, Move.from_uci(coordinate_move))

    session.board = board
    session.index = index
    session.history = list(history)
    logger.debug("Replayed %d moves. Board: %s", len(history), board.to_fen())


def verify_consistency(session: Session) -> None:
    """Raise if the index of the user's pieces disagrees with the board anywhere."""
    mismatches = session.index.mismatches(session.board)
    if mismatches:
        squares = ",".join(square.to_algebraic() for square in mismatches)
        raise InvalidStateError(f"Tracked pieces disagree with the board on: {squares}")


# --- PRIVATE HELPERS ---
def _play_move(board: Board, index: UserPieceIndex, move: Move) -> None:
    """A castle is a two step transaction: the king's move, then the rook's move paired with it."""
    moving_piece = _move_piece(board, index, move)

    if moving_piece.type == PieceType.KING and move.squares in CASTLE_PAIRING:
        rook_move = Move.from_uci(CASTLE_PAIRING[move.squares])
        logger.debug("Castling: %s implies %s", move.squares, rook_move.squares)
        _move_piece(board, index, rook_move)


def _move_piece(board: Board, index: UserPieceIndex, move: Move) -> Piece:
    """
    1. promotion: the piece changes type before it moves (also in the index, if it is the user's)
    2. one of the user's pieces gets captured: drop it from the index
    3. one of the user's pieces moves: move its index entry along
    4. update the board

    Returns the piece as it stands on the destination square.
    """
    moving_piece = board.piece(move.from_square)
    if moving_piece.is_empty():
        raise InvalidStateError(
            f"No piece on {move.from_square.to_algebraic()} to make move {move.to_uci()}; "
            "the tracked board is out of sync."
        )

    if move.promote_to is not None:
        moving_piece = moving_piece.promoted(move.promote_to.value)
        if index.owns(moving_piece):
            index.promote(move.from_square, moving_piece)
        logger.debug("%s created via promotion", moving_piece.to_code())

    if index.owns(board.piece(move.to_square)):
        index.remove(move.to_square)
        logger.debug("Your piece on %s got captured", move.to_square.to_algebraic())

    if index.owns(moving_piece):
        index.relocate(move.from_square, move.to_square)

    board.place_piece(moving_piece, move.to_square)
    board.remove_piece(move.from_square)
    return moving_piece
