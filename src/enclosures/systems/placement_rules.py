"""Placement legality and the end-of-game search.

Pure functions of the grid: nothing here mutates state.
"""
from __future__ import annotations

from typing import Iterable, List, Tuple

from enclosures.components.grid import Grid, Position
from enclosures.components.piece import Piece, Shape
from enclosures.utils.shapes import all_orientations, filled_offsets

NEIGHBOR_OFFSETS: Tuple[Position, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def footprint(shape: Shape, row: int, col: int) -> List[Position]:
    """Grid positions the filled cells of shape cover when its top-left sits at (row, col)."""
    return [(row + i, col + j) for i, j in filled_offsets(shape)]


def touches_occupied(grid: Grid, positions: Iterable[Position]) -> bool:
    for r, c in positions:
        for dr, dc in NEIGHBOR_OFFSETS:
            if grid.is_occupied(r + dr, c + dc):
                return True
    return False


def can_place(grid: Grid, shape: Shape, row: int, col: int, *, first_move: bool) -> bool:
    """Return True if shape (already transformed) fits at origin (row, col).

    The whole bounding box must lie on the board and no filled cell may cover an
    occupied square. Except for the first move of a game, at least one filled cell
    must be orthogonally adjacent to an occupied square.
    """
    rows = len(shape)
    cols = len(shape[0])
    if row < 0 or col < 0 or row + rows > grid.size or col + cols > grid.size:
        return False
    cells = footprint(shape, row, col)
    if any(grid.cells[r][c] is not None for r, c in cells):
        return False
    if first_move:
        return True
    return touches_occupied(grid, cells)


def find_legal_placement(
    grid: Grid, pieces: Iterable[Piece], *, first_move: bool
) -> Tuple[Piece, bool, int, Position] | None:
    """First (piece, flipped, rotation, origin) that can be placed, or None.

    Scans pieces in order, then flip, rotation and origin in row-major order.
    """
    for piece in pieces:
        for flipped, rotation, shape in all_orientations(piece.shape):
            for r in range(grid.size):
                for c in range(grid.size):
                    if can_place(grid, shape, r, c, first_move=first_move):
                        return piece, flipped, rotation, (r, c)
    return None


def can_any_piece_be_placed(grid: Grid, pieces: Iterable[Piece], *, first_move: bool) -> bool:
    return find_legal_placement(grid, pieces, first_move=first_move) is not None
