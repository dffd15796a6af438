"""
Geometry: shared lines, ray stepping and line of sight
----

Used to narrow down which of several same-type pieces can reach a destination square.

NOTE: Only geometric access is checked. Whether the move is legal (pins, checks, ...) is up to the game service.
"""

from typing import Protocol

from voicemove.chess.pieces import Piece, PieceType
from voicemove.chess.square import Square

Vector = tuple[int, int]


class Board(Protocol):
    """Just the parts the geometry needs"""

    def piece(self, square: Square) -> Piece: ...
    def is_occupied(self, square: Square) -> bool: ...


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def deltas(origin: Square, destination: Square) -> Vector:
    return destination.file - origin.file, destination.rank - origin.rank


def shares_file(origin: Square, destination: Square) -> bool:
    return origin.file == destination.file


def shares_rank(origin: Square, destination: Square) -> bool:
    return origin.rank == destination.rank


def shares_diagonal(origin: Square, destination: Square) -> bool:
    d_file, d_rank = deltas(origin, destination)
    return abs(d_file) == abs(d_rank)


def in_knight_range(origin: Square, destination: Square) -> bool:
    """File and rank distance differ by exactly one: the (1, 2) / (2, 1) jump of a knight."""
    d_file, d_rank = deltas(origin, destination)
    return abs(abs(d_file) - abs(d_rank)) == 1


def unit_step(origin: Square, destination: Square) -> Vector:
    """
    Direction to walk in, one square at the time, to get from origin to destination.

    Only defined when the two (distinct) squares share a file, rank or diagonal.
    """
    if origin == destination:
        raise ValueError(f"No direction between a square and itself: {origin}")

    d_file, d_rank = deltas(origin, destination)
    if shares_file(origin, destination):
        return 0, _sign(d_rank)
    if shares_rank(origin, destination):
        return _sign(d_file), 0
    if shares_diagonal(origin, destination):
        return _sign(d_file), _sign(d_rank)

    raise ValueError(
        f"Squares do not share a file, rank or diagonal. \n from: {origin}\n to:{destination}"
    )


def squares_between(origin: Square, destination: Square) -> list[Square]:
    """The squares strictly in between origin and destination, walking from origin."""
    df, dr = unit_step(origin, destination)
    squares_found: list[Square] = []
    square = origin.offset(df, dr)
    while square != destination:
        squares_found.append(square)
        square = square.offset(df, dr)
    return squares_found


def is_blocked(board: Board, origin: Square, destination: Square) -> bool:
    """
    Raycasting along the shared line
    ----

    Walk from origin towards destination (both excluded). Any occupied square (of any color) blocks the line of sight.
    """
    return any(board.is_occupied(square) for square in squares_between(origin, destination))


def has_access(
    board: Board, origin: Square, destination: Square, piece_type: PieceType
) -> bool:
    """Could a piece of the given type standing on origin reach destination (ignoring legality)?"""
    if origin == destination:
        return False

    if piece_type == PieceType.KNIGHT:
        # knights jump: nothing can block them
        return in_knight_range(origin, destination)

    straight = shares_file(origin, destination) or shares_rank(origin, destination)
    if straight and piece_type in (PieceType.ROOK, PieceType.QUEEN):
        return not is_blocked(board, origin, destination)

    diagonal = shares_diagonal(origin, destination)
    if diagonal and piece_type in (PieceType.BISHOP, PieceType.QUEEN):
        return not is_blocked(board, origin, destination)

    return False
