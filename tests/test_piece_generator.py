import random

import pytest

from enclosures.components.grid import Grid
from enclosures.components.marketplace import Marketplace
from enclosures.components.piece import Piece
from enclosures.constants import COLORS, PATTERNS
from enclosures.factories.pieces import (
    create_random_piece,
    fill_marketplace,
    generate_piece,
    replace_marketplace_piece,
    shape_pool,
)
from enclosures.utils.components import singleton
from enclosures.utils.shapes import SHAPES, cell_count
from enclosures.world import create_world
from tests.helpers import fill_except


def test_sparse_board_excludes_small_pieces():
    pool = shape_pool(0.0)
    assert pool
    assert all(cell_count(shape) > 2 for shape in pool)


def test_busy_board_excludes_large_pieces():
    for ratio in (0.60, 0.7, 0.849):
        pool = shape_pool(ratio)
        assert pool
        assert all(cell_count(shape) < 5 for shape in pool)


def test_nearly_full_board_offers_only_tiny_pieces():
    for ratio in (0.85, 0.99, 1.0):
        pool = shape_pool(ratio)
        assert pool
        assert all(cell_count(shape) <= 3 for shape in pool)


def test_empty_pool_falls_back_to_catalog():
    big_only = [((1, 1, 1, 1, 1),)]
    assert shape_pool(0.9, big_only) == big_only


def test_random_piece_draws_from_pool_and_palettes():
    rng = random.Random(3)
    for piece_id in range(50):
        piece = create_random_piece(rng, 0.9, piece_id)
        assert cell_count(piece.shape) <= 3
        assert piece.color in COLORS
        assert piece.pattern in PATTERNS
        assert piece.id == piece_id


def test_generate_piece_issues_unique_ids():
    world = create_world(rng=random.Random(1))
    market = singleton(world, Marketplace)
    ids = {piece.id for piece in market.pieces}
    ids.update(generate_piece(world).id for _ in range(20))
    assert len(ids) == len(market.pieces) + 20


def test_generate_piece_follows_board_fill():
    world = create_world(grid_size=4, rng=random.Random(2))
    grid = singleton(world, Grid)
    fill_except(grid, [(0, 0), (0, 1)])
    assert grid.fill_ratio() >= 0.85
    for _ in range(20):
        assert generate_piece(world).cell_count <= 3


def test_new_world_marketplace_is_full():
    world = create_world(marketplace_size=5, rng=random.Random(4))
    market = singleton(world, Marketplace)
    assert len(market.pieces) == 5
    assert fill_marketplace(world) == []


def test_replace_marketplace_piece_keeps_slot():
    world = create_world(rng=random.Random(5))
    market = singleton(world, Marketplace)
    before = list(market.pieces)
    fresh = replace_marketplace_piece(world, before[2].id)
    assert fresh is not None
    assert market.pieces[2] is fresh
    assert market.pieces[:2] == before[:2]
    assert market.pieces[3:] == before[3:]
    assert fresh.id not in {piece.id for piece in before}


def test_replace_unknown_piece_returns_none():
    world = create_world(rng=random.Random(6))
    assert replace_marketplace_piece(world, -1) is None


def test_piece_rejects_malformed_shapes():
    with pytest.raises(ValueError):
        Piece(shape=((0, 0),), color="blue", pattern="dots", id=1)
    with pytest.raises(ValueError):
        Piece(shape=((1, 1), (1,)), color="blue", pattern="dots", id=1)
    with pytest.raises(ValueError):
        Piece(shape=(), color="blue", pattern="dots", id=1)


def test_catalog_is_never_empty_for_any_ratio():
    for ratio in (0.0, 0.3, 0.6, 0.85, 1.0):
        assert set(shape_pool(ratio)) <= set(SHAPES)
