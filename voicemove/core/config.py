"""
Configuration: fixed notation vocabulary + the few settings a host may want to change.
"""

import os
from typing import Self

from pydantic import BaseModel, field_validator

# Chess board is always 8x8.
BOARD_DIMENSIONS = (8, 8)
FILES = "abcdefgh"

# --- NOTATION VOCABULARY ---
CAPTURE_MARKER = "x"
PROMOTION_MARKER = "="
# check, mate and move annotations say nothing about where a piece comes from
ANNOTATION_SUFFIXES = "+#!?"
KINGSIDE_CASTLE_TOKENS: tuple[str, ...] = ("0-0",)
QUEENSIDE_CASTLE_TOKENS: tuple[str, ...] = ("0-0-0",)
LETTER_O_KINGSIDE_CASTLE = "O-O"
LETTER_O_QUEENSIDE_CASTLE = "O-O-O"

ENV_PREFIX = "VOICEMOVE_"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    """Runtime settings of the notation service."""

    log_level: str = "WARNING"
    accept_letter_o_castling: bool = True

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level {value!r}. Pick one from {','.join(LOG_LEVELS)}")
        return level

    @classmethod
    def from_env(cls) -> Self:
        """Read VOICEMOVE_* environment variables. Missing ones keep their default."""
        values: dict[str, str] = {}
        for name in cls.model_fields:
            env_value = os.environ.get(f"{ENV_PREFIX}{name.upper()}")
            if env_value is not None:
                values[name] = env_value
        return cls.model_validate(values)

    def kingside_tokens(self) -> tuple[str, ...]:
        if self.accept_letter_o_castling:
            return KINGSIDE_CASTLE_TOKENS + (LETTER_O_KINGSIDE_CASTLE,)
        return KINGSIDE_CASTLE_TOKENS

    def queenside_tokens(self) -> tuple[str, ...]:
        if self.accept_letter_o_castling:
            return QUEENSIDE_CASTLE_TOKENS + (LETTER_O_QUEENSIDE_CASTLE,)
        return QUEENSIDE_CASTLE_TOKENS
