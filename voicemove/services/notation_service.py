"""Orchestration of the requests coming from the host (page integration / speech front end) to the domain layer."""

import logging
from typing import Optional

from voicemove.api.models import (
    FailureResponse,
    InitializeSessionRequest,
    ReconcileRequest,
    SessionResponse,
    TranslateRequest,
    TranslateResponse,
)
from voicemove.chess.moves import reconcile, replay
from voicemove.chess.pieces import Color as PieceColor
from voicemove.chess.resolver import translate
from voicemove.chess.session import Session
from voicemove.core.config import Settings
from voicemove.core.exceptions import SessionNotStartedError, VoiceMoveError
from voicemove.core.logging_config import configure_logging
from voicemove.core.shared_types import Color

logger = logging.getLogger(__name__)

TO_PIECE_COLOR: dict[Color, PieceColor] = {
    Color.WHITE: PieceColor.WHITE,
    Color.BLACK: PieceColor.BLACK,
}


class NotationService:
    """Owns the one live game session. Calls are expected one at a time."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or Settings()
        self.session: Optional[Session] = None

    # -- Host facing operations ---
    def initialize_session(self, request: InitializeSessionRequest) -> SessionResponse:
        """A game started (or the page got refreshed): start tracking from scratch."""
        session = Session.new(TO_PIECE_COLOR[request.color])

        # joining a game in progress: catch up with the moves played so far
        if request.history:
            replay(session, request.history)

        # only replace the live session once the new one is complete
        self.session = session
        logger.info(
            "Session started as %s (%d moves replayed)", request.color, len(request.history)
        )
        return self._create_session_response(session)

    def reconcile(self, request: ReconcileRequest) -> SessionResponse:
        """The move list on the page changed."""
        session = self._fetch_session()
        try:
            reconcile(session, request.history)
        except VoiceMoveError as error:
            logger.warning("Could not reconcile move list: %s", error)
            raise
        return self._create_session_response(session)

    def translate(self, request: TranslateRequest) -> TranslateResponse:
        """The user said/typed a move."""
        session = self._fetch_session()
        try:
            move = translate(session, request.text, self.settings)
        except VoiceMoveError as error:
            logger.warning("Could not translate %r: %s", request.text, error)
            raise
        logger.info("Translated %r to %s", request.text, move)
        return TranslateResponse(text=request.text, move=move)

    @staticmethod
    def describe_failure(error: VoiceMoveError) -> FailureResponse:
        """Structured failure the host can show the user."""
        return FailureResponse(
            error=type(error).__name__,
            message=str(error),
            advice=error.advice,
            requires_reset=error.requires_reset,
        )

    # -- Internal helpers --
    def _fetch_session(self) -> Session:
        if self.session is None:
            raise SessionNotStartedError("No game is being tracked yet.")
        return self.session

    def _create_session_response(self, session: Session) -> SessionResponse:
        return SessionResponse(
            color=Color.WHITE if session.color == PieceColor.WHITE else Color.BLACK,
            moves_tracked=len(session.history),
            board_fen=session.board.to_fen(),
        )


def create_service(settings: Optional[Settings] = None) -> NotationService:
    """Entry point for hosts: settings from the environment (unless given) and logging set up accordingly."""
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)
    return NotationService(settings)
