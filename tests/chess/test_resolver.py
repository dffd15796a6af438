"""Unit tests for voicemove/chess/resolver.py"""

import pytest

from voicemove.chess.moves import reconcile
from voicemove.chess.pieces import Color
from voicemove.chess.resolver import translate
from voicemove.chess.session import Session
from voicemove.core.config import Settings
from voicemove.core.exceptions import (
    AmbiguousMoveError,
    MalformedNotationError,
    NotationError,
    PieceNotFoundError,
)

# black to answer 1. e4 Nf6: knights on b8 and f6 can both jump to d7
TWO_BLACK_KNIGHTS = "rnbqkb1r/pppppppp/5n2/8/4P3/8/PPPP1PPP/RNBQKBNR"
# white rooks on a1 and a8; black pawn on a2 and queen on a4
ROOKS_ON_A_FILE = "R3k3/8/8/8/q7/8/p7/R3K3"
# white bishops on a1 and h8 both eye the long diagonal, a black pawn on f6 in between for one of them
TWO_BISHOPS = "7B/8/5p2/8/8/8/8/B3K2k"


# -- PAWNS ---
@pytest.mark.parametrize(
    "text, expected",
    [
        ("e4", "e2e4"),
        ("d4", "d2d4"),
        ("e3", "e2e3"),
        ("a3", "a2a3"),
    ],
)
def test_white_pawn_advance(white_session: Session, text: str, expected: str) -> None:
    assert translate(white_session, text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("e5", "e7e5"),
        ("d5", "d7d5"),
        ("d6", "d7d6"),
        ("h6", "h7h6"),
    ],
)
def test_black_pawn_advance(black_session: Session, text: str, expected: str) -> None:
    assert translate(black_session, text) == expected


def test_single_step_when_own_pawn_is_right_behind(session_from_fen) -> None:
    """d4 with a white pawn on d3: that pawn advances, not the one from d2"""
    session: Session = session_from_fen(
        Color.WHITE, "rnbqkbnr/pppppppp/8/8/8/3P4/PPP1PPPP/RNBQKBNR"
    )
    assert translate(session, "d4") == "d3d4"


def test_black_single_step_when_own_pawn_is_right_behind(session_from_fen) -> None:
    """d5 with a black pawn on d6: that pawn advances, not the one from d7"""
    session: Session = session_from_fen(
        Color.BLACK, "rnbqkbnr/ppp1pppp/3p4/8/8/8/PPPPPPPP/RNBQKBNR"
    )
    assert translate(session, "d5") == "d6d5"
    assert translate(session, "e5") == "e7e5"


def test_double_step_not_fooled_by_opponent_pawn_behind(session_from_fen) -> None:
    """Only the user's own pawn right behind the destination rules out the two square advance"""
    session: Session = session_from_fen(
        Color.WHITE, "rnbqkbnr/ppp1pppp/8/8/8/3p4/PPPPPPPP/RNBQKBNR"
    )
    assert translate(session, "d4") == "d2d4"


def test_pawn_advance_after_tracked_moves(white_session: Session) -> None:
    reconcile(white_session, ["e2e4"])
    reconcile(white_session, ["e2e4", "e7e5"])
    assert translate(white_session, "d4") == "d2d4"
    assert translate(white_session, "e5") == "e4e5"


@pytest.mark.parametrize(
    "color, text, expected",
    [
        (Color.WHITE, "exd5", "e4d5"),
        (Color.WHITE, "ed5", "e4d5"),
        (Color.WHITE, "axb7", "a6b7"),
        (Color.BLACK, "exd4", "e5d4"),
        (Color.BLACK, "hxg3", "h4g3"),
    ],
)
def test_pawn_capture(color: Color, text: str, expected: str) -> None:
    """The origin file is taken from the input, the origin rank is one behind the destination"""
    assert translate(Session.new(color), text) == expected


@pytest.mark.parametrize(
    "color, text, expected",
    [
        (Color.WHITE, "e8Q", "e7e8Q"),
        (Color.WHITE, "e8=N", "e7e8N"),
        (Color.WHITE, "dxe8Q", "d7e8Q"),
        (Color.WHITE, "dxe8=R+", "d7e8R"),
        (Color.BLACK, "e1Q", "e2e1Q"),
        (Color.BLACK, "fxg1B", "f2g1B"),
    ],
)
def test_pawn_promotion(color: Color, text: str, expected: str) -> None:
    """The promotion letter is appended as written"""
    assert translate(Session.new(color), text) == expected


# -- PIECES ---
def test_knight_with_file_hint(session_from_fen) -> None:
    session: Session = session_from_fen(Color.BLACK, TWO_BLACK_KNIGHTS)
    assert translate(session, "Nbd7") == "b8d7"
    assert translate(session, "Nfd7") == "f6d7"


def test_knights_without_hint_both_in_range(session_from_fen) -> None:
    """Both knights reach d7, and nothing narrows it down further"""
    session: Session = session_from_fen(Color.BLACK, TWO_BLACK_KNIGHTS)
    with pytest.raises(AmbiguousMoveError):
        _ = translate(session, "Nd7")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Nf3", "g1f3"),
        ("Nc3", "b1c3"),
        ("Nd2", "b1d2"),
        ("Nxf3", "g1f3"),
        ("Nf3+", "g1f3"),
    ],
)
def test_knight_in_range(white_session: Session, text: str, expected: str) -> None:
    """Only one of the two knights is within range of the destination"""
    assert translate(white_session, text) == expected


def test_single_candidate_is_never_second_guessed(session_from_fen) -> None:
    """One rook: the move is built even though the bishop on c1 blocks the way to e1"""
    session: Session = session_from_fen(Color.WHITE, "4k3/8/8/8/8/8/8/R1B1K3")
    assert translate(session, "Re1") == "a1e1"
    assert translate(session, "Rh8") == "a1h8"


def test_king_move(white_session: Session) -> None:
    assert translate(white_session, "Ke2") == "e1e2"


def test_blocked_rook_is_not_a_candidate(session_from_fen) -> None:
    """Ra4: the rook on a1 is blocked by the pawn on a2, so the a8 rook takes the queen"""
    session: Session = session_from_fen(Color.WHITE, ROOKS_ON_A_FILE)
    assert translate(session, "Ra4") == "a8a4"
    assert translate(session, "Rxa4") == "a8a4"


def test_rank_hint(session_from_fen) -> None:
    session: Session = session_from_fen(Color.WHITE, ROOKS_ON_A_FILE)
    assert translate(session, "R1a2") == "a1a2"
    assert translate(session, "R8a5") == "a8a5"
    assert translate(session, "Ra1b1") == "a1b1"


@pytest.mark.parametrize("text", ["Raa4", "Rha4", "R3a4"])
def test_hint_not_matching_exactly_one_piece(session_from_fen, text: str) -> None:
    """A hint matching both rooks, or neither, is ambiguous"""
    session: Session = session_from_fen(Color.WHITE, ROOKS_ON_A_FILE)
    with pytest.raises(AmbiguousMoveError):
        _ = translate(session, text)


def test_rooks_both_in_sight(session_from_fen) -> None:
    session: Session = session_from_fen(Color.WHITE, "4k3/8/8/8/8/8/8/R3K2R")
    # a1 --> d1 is open, h1 --> d1 runs into the king
    assert translate(session, "Rd1") == "a1d1"
    assert translate(session, "Rf1") == "h1f1"
    # neither rook can reach d2
    with pytest.raises(AmbiguousMoveError):
        _ = translate(session, "Rd2")


def test_bishop_line_of_sight(session_from_fen) -> None:
    session: Session = session_from_fen(Color.WHITE, TWO_BISHOPS)
    assert translate(session, "Bd4") == "a1d4"
    # g7 is in sight of the h8 bishop only
    assert translate(session, "Bg7") == "h8g7"


def test_bishops_both_in_sight(session_from_fen) -> None:
    session: Session = session_from_fen(Color.WHITE, "7B/8/8/8/8/8/8/B3K2k")
    with pytest.raises(AmbiguousMoveError):
        _ = translate(session, "Bd4")
    assert translate(session, "Bad4") == "a1d4"


def test_queens_straight_and_diagonal(session_from_fen) -> None:
    """Two queens (after a promotion): one sees the destination along a file, the other is off every line"""
    session: Session = session_from_fen(Color.WHITE, "Q3k3/8/8/8/8/8/8/3QK3")
    assert translate(session, "Qd3") == "d1d3"
    assert translate(session, "Qe4") == "a8e4"


def test_pins_are_not_considered(session_from_fen) -> None:
    """
    The e2 knight is pinned to the king by the rook on e8, so only the h1 knight could legally go to g3.
    Pins are deliberately not detected: the user must say which knight moves.
    """
    session: Session = session_from_fen(Color.WHITE, "4r2k/8/8/8/8/8/4N3/4K2N")
    with pytest.raises(AmbiguousMoveError):
        _ = translate(session, "Ng3")
    assert translate(session, "Nhg3") == "h1g3"


def test_piece_not_found(session_from_fen) -> None:
    session: Session = session_from_fen(Color.WHITE, "4k3/8/8/8/8/8/8/R3K3")
    with pytest.raises(PieceNotFoundError):
        _ = translate(session, "Qd4")


def test_captured_piece_is_not_found(white_session: Session) -> None:
    """The opponent took the queen: asking to move it hints at a desynced board"""
    moves = ["e2e4", "d7d5", "d1h5", "d8d6", "g2g3", "d6h6", "a2a3", "h6h5"]
    for n in range(1, len(moves) + 1):
        reconcile(white_session, moves[:n])
    with pytest.raises(PieceNotFoundError):
        _ = translate(white_session, "Qd1")


# -- CASTLING ---
@pytest.mark.parametrize(
    "color, text, expected",
    [
        (Color.WHITE, "0-0", "e1g1"),
        (Color.WHITE, "0-0-0", "e1c1"),
        (Color.BLACK, "0-0", "e8g8"),
        (Color.BLACK, "0-0-0", "e8c8"),
        (Color.WHITE, "O-O", "e1g1"),
        (Color.BLACK, "O-O-O+", "e8c8"),
    ],
)
def test_castling(color: Color, text: str, expected: str) -> None:
    """No check whether castling is still allowed: the game service decides"""
    assert translate(Session.new(color), text) == expected


def test_letter_o_castling_can_be_turned_off(white_session: Session) -> None:
    settings = Settings(accept_letter_o_castling=False)
    assert translate(white_session, "0-0", settings) == "e1g1"
    with pytest.raises(MalformedNotationError):
        _ = translate(white_session, "O-O", settings)


# -- MALFORMED ---
@pytest.mark.parametrize("text", ["", "hello", "e9", "exd", "e4e5e6", "Nz3", "Zf3", "e8K", "+"])
def test_malformed(white_session: Session, text: str) -> None:
    with pytest.raises(MalformedNotationError):
        _ = translate(white_session, text)


def test_notation_errors_share_a_base(white_session: Session) -> None:
    with pytest.raises(NotationError):
        _ = translate(white_session, "Zz9")
