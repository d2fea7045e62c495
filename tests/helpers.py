from __future__ import annotations

from typing import Iterable, Sequence, Tuple

from esper import World

from enclosures.components.cell import Cell
from enclosures.components.grid import Grid
from enclosures.components.marketplace import Marketplace
from enclosures.components.piece import Piece
from enclosures.utils.components import singleton
from enclosures.utils.shapes import as_shape

O_SHAPE = ((1, 1), (1, 1))
SINGLE = ((1,),)


def make_piece(shape: Sequence[Sequence[int]], color: str = "blue", pattern: str = "dots", piece_id: int = 1000) -> Piece:
    return Piece(shape=as_shape(shape), color=color, pattern=pattern, id=piece_id)


def paint(
    grid: Grid,
    positions: Iterable[Tuple[int, int]],
    color: str = "red",
    pattern: str = "dots",
    owner: int = 0,
) -> None:
    """Write cells straight onto the grid, bypassing placement rules."""
    for row, col in positions:
        grid.put(row, col, Cell(color=color, pattern=pattern, owner=owner))


def fill_except(grid: Grid, holes: Iterable[Tuple[int, int]], color: str = "red", pattern: str = "dots") -> None:
    skip = set(holes)
    paint(
        grid,
        [(r, c) for r in range(grid.size) for c in range(grid.size) if (r, c) not in skip],
        color=color,
        pattern=pattern,
    )


def stock_marketplace(world: World, pieces: Sequence[Piece]) -> None:
    """Replace the marketplace contents with known pieces."""
    market = singleton(world, Marketplace)
    market.pieces = list(pieces)


def ring_around(top: int, left: int, size: int, grid_size: int):
    """Positions bordering the size x size square at (top, left), clipped to the board."""
    ring = []
    for r in range(top - 1, top + size + 1):
        for c in range(left - 1, left + size + 1):
            inside = top <= r < top + size and left <= c < left + size
            if inside or not (0 <= r < grid_size and 0 <= c < grid_size):
                continue
            ring.append((r, c))
    return ring
