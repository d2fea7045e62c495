from __future__ import annotations

import random
from typing import List, Sequence

from esper import World

from enclosures.components.grid import Grid
from enclosures.components.marketplace import Marketplace
from enclosures.components.piece import Piece, Shape
from enclosures.components.piece_sequence import PieceSequence
from enclosures.constants import (
    COLORS,
    FILL_NO_LARGE_PIECES,
    FILL_TINY_PIECES,
    LARGE_PIECE_MIN_CELLS,
    PATTERNS,
    SMALL_PIECE_MAX_CELLS,
    TINY_PIECE_MAX_CELLS,
)
from enclosures.utils.components import singleton
from enclosures.utils.shapes import SHAPES, cell_count


def shape_pool(fill_ratio: float, shapes: Sequence[Shape] = SHAPES) -> List[Shape]:
    """Shapes eligible at the given board fill ratio.

    Falls back to the whole catalog when the filter leaves nothing.
    """
    if fill_ratio >= FILL_TINY_PIECES:
        pool = [s for s in shapes if cell_count(s) <= TINY_PIECE_MAX_CELLS]
    elif fill_ratio >= FILL_NO_LARGE_PIECES:
        pool = [s for s in shapes if cell_count(s) < LARGE_PIECE_MIN_CELLS]
    else:
        pool = [s for s in shapes if cell_count(s) > SMALL_PIECE_MAX_CELLS]
    return pool or list(shapes)


def create_random_piece(
    rng: random.Random,
    fill_ratio: float,
    piece_id: int,
    *,
    shapes: Sequence[Shape] = SHAPES,
    colors: Sequence[str] = tuple(COLORS),
    patterns: Sequence[str] = PATTERNS,
) -> Piece:
    """Uniformly random shape from the fill-ratio pool, colour and pattern."""
    pool = shape_pool(fill_ratio, shapes)
    return Piece(
        shape=rng.choice(pool),
        color=rng.choice(list(colors)),
        pattern=rng.choice(list(patterns)),
        id=piece_id,
    )


def generate_piece(world: World) -> Piece:
    """Create a piece for the current board, drawing the id from the world's sequence."""
    grid = singleton(world, Grid)
    sequence = singleton(world, PieceSequence)
    return create_random_piece(world.random, grid.fill_ratio(), sequence.issue())


def fill_marketplace(world: World) -> List[Piece]:
    """Top the marketplace up to capacity; returns the pieces added."""
    market = singleton(world, Marketplace)
    added: List[Piece] = []
    while len(market.pieces) < market.capacity:
        piece = generate_piece(world)
        market.pieces.append(piece)
        added.append(piece)
    return added


def replace_marketplace_piece(world: World, piece_id: int) -> Piece | None:
    """Swap a consumed piece for a freshly generated one in the same slot."""
    market = singleton(world, Marketplace)
    if market.index_of(piece_id) is None:
        return None
    fresh = generate_piece(world)
    market.replace(piece_id, fresh)
    return fresh
