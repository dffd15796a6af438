"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures required for testing multiple layers.
"""

from typing import Callable

import pytest

from voicemove.chess.board import Board
from voicemove.chess.piece_index import UserPieceIndex
from voicemove.chess.pieces import Color
from voicemove.chess.session import Session

SessionFactory = Callable[[Color, str], Session]


@pytest.fixture
def white_session() -> Session:
    """Fresh game, user plays white"""
    return Session.new(Color.WHITE)


@pytest.fixture
def black_session() -> Session:
    """Fresh game, user plays black"""
    return Session.new(Color.BLACK)


@pytest.fixture
def session_from_fen() -> SessionFactory:
    """Call the inner function with the user's color and the piece placement part of a FEN string.

    Handy to set up a position without having to play all the moves leading up to it.
    """

    def _create_session(color: Color, fen: str) -> Session:
        session = Session.new(color)
        session.board = Board.from_fen(fen)
        session.index = UserPieceIndex.from_board(session.board, color)
        return session

    return _create_session
