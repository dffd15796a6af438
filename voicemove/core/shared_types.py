"""
Type definitions used across layers
"""

from enum import StrEnum

# --- Boundary version of the color: the domain layer has its own Color (with piece code letters) in voicemove/chess/pieces.py
# --- NOTE Same name on purpose; the imports show which version is used where


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"
