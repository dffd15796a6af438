"""Requests and Response models exchanged with the host (page integration / speech front end)"""

import re

from pydantic import BaseModel, field_validator

from voicemove.core.exceptions import InvalidRequestError
from voicemove.core.shared_types import Color

COORDINATE_MOVE = re.compile(r"[a-h][1-8][a-h][1-8][qrbnQRBN]?")


def _validate_history(value: list[str]) -> list[str]:
    for position, move in enumerate(value):
        if not COORDINATE_MOVE.fullmatch(move):
            raise InvalidRequestError(
                f"Cannot interpret move #{position + 1}: {move!r} as a coordinate move."
            )
    return value


# --- REQUEST MODELS ---
class InitializeSessionRequest(BaseModel):
    color: Color
    # moves already played (joining a game in progress)
    history: list[str] = []

    @field_validator("history")
    @classmethod
    def validate_history(cls, value: list[str]) -> list[str]:
        return _validate_history(value)


class ReconcileRequest(BaseModel):
    history: list[str]

    @field_validator("history")
    @classmethod
    def validate_history(cls, value: list[str]) -> list[str]:
        return _validate_history(value)


class TranslateRequest(BaseModel):
    text: str

    @field_validator("text")
    @classmethod
    def validate_text(cls, value: str) -> str:
        if not value.strip():
            raise InvalidRequestError("Nothing to translate: the move text is empty.")
        return value.strip()


# --- RESPONSE MODELS ---
class SessionResponse(BaseModel):
    color: Color
    moves_tracked: int
    board_fen: str


class TranslateResponse(BaseModel):
    text: str
    move: str


class FailureResponse(BaseModel):
    error: str
    message: str
    advice: str
    requires_reset: bool
