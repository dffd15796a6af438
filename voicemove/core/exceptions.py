"""
Custom exceptions used across layers.

Every failure is terminal for the request that raised it. The class attributes let the
service layer turn any of them into a structured failure for the host without guessing.
"""


class VoiceMoveError(Exception):
    """Top-level exception of the package (catch this one if the specific reason does not matter)."""

    advice: str = "Double-check the move and the board."
    requires_reset: bool = False


# --- SESSION / BOARD TRACKING ---
class SessionError(VoiceMoveError):
    """Something is wrong with the tracked game state."""

    advice = "Refresh the page to start tracking the game again."
    requires_reset = True


class InvalidStateError(SessionError):
    """The tracked board no longer matches reality (ex. moving a piece off an empty square)."""


class InconsistentHistoryError(SessionError):
    """The reported move list diverges from the tracked one. Most likely a take-back happened."""

    advice = (
        "Take-backs are not tracked. Refresh the page and double-check the board."
    )


class SessionNotStartedError(SessionError):
    """A move was reported or requested before a game was started."""

    advice = "Start (or rejoin) a game first."


# --- NOTATION ---
class NotationError(VoiceMoveError):
    """The shorthand could not be turned into a coordinate move."""


class MalformedNotationError(NotationError):
    """Input matches neither the pawn, the piece, nor the castle grammar."""

    advice = "Use a move like 'e4', 'Nbd7', 'exd5', 'e8Q' or '0-0'."


class PieceNotFoundError(NotationError):
    """None of your pieces has the requested type. Tracked history is probably out of sync."""

    advice = "Refresh the page: your pieces may no longer be tracked correctly."


class AmbiguousMoveError(NotationError):
    """Zero, or more than one, candidate piece survives disambiguation."""

    advice = (
        "Say which piece should move (ex. 'Nbd7' or 'R1e2'), and check the move is valid."
    )


# --- BOUNDARY ---
class InvalidRequestError(VoiceMoveError):
    """Request data rejected before reaching the domain layer."""
