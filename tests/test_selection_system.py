import random

import pytest

from enclosures.components.game_state import GameMode
from enclosures.components.grid import Grid
from enclosures.components.selection import PieceSelection
from enclosures.errors import UnknownPieceError
from enclosures.events.bus import (
    EVENT_FLIP_REQUEST,
    EVENT_PIECE_SELECT_REQUEST,
    EVENT_PIECE_SELECTED,
    EVENT_PIECE_TRANSFORMED,
    EVENT_ROTATE_REQUEST,
    EventBus,
)
from enclosures.systems.selection_system import SelectionSystem, selected_shape
from enclosures.utils.components import singleton
from enclosures.utils.game_state import get_game_state
from enclosures.world import create_world
from tests.helpers import make_piece, paint, stock_marketplace

L_SHAPE = ((1, 1, 1), (1, 0, 0))


@pytest.fixture
def setup_world():
    bus = EventBus()
    world = create_world(grid_size=6, rng=random.Random(31))
    stock_marketplace(world, [make_piece(L_SHAPE, piece_id=1), make_piece(((1, 1),), piece_id=2)])
    return bus, world, SelectionSystem(world, bus)


def test_select_piece_enters_placement_mode(setup_world):
    bus, world, system = setup_world
    selected = []
    bus.subscribe(EVENT_PIECE_SELECTED, lambda sender, **payload: selected.append(payload))
    assert system.select_piece(1)
    assert singleton(world, PieceSelection).piece_id == 1
    assert get_game_state(world).mode == GameMode.AWAITING_PLACEMENT
    assert selected == [{"piece_id": 1}]


def test_unknown_piece_raises(setup_world):
    bus, world, system = setup_world
    with pytest.raises(UnknownPieceError):
        system.select_piece(99)


def test_reselecting_same_piece_keeps_transform(setup_world):
    bus, world, system = setup_world
    system.select_piece(1)
    system.set_rotation(2)
    system.set_flip(True)
    system.select_piece(1)
    selection = singleton(world, PieceSelection)
    assert (selection.rotation, selection.flipped) == (2, True)


def test_selecting_other_piece_resets_transform(setup_world):
    bus, world, system = setup_world
    system.select_piece(1)
    system.rotate_piece()
    system.flip_piece()
    system.select_piece(2)
    selection = singleton(world, PieceSelection)
    assert (selection.piece_id, selection.rotation, selection.flipped) == (2, 0, False)


def test_transforms_build_from_base_shape(setup_world):
    bus, world, system = setup_world
    system.select_piece(1)
    system.set_flip(True)
    system.set_rotation(1)
    assert selected_shape(world) == ((0, 1), (0, 1), (1, 1))
    system.set_rotation(0)
    system.set_flip(False)
    assert selected_shape(world) == L_SHAPE


def test_rotation_wraps_modulo_four(setup_world):
    bus, world, system = setup_world
    system.select_piece(1)
    for _ in range(5):
        system.rotate_piece()
    assert singleton(world, PieceSelection).rotation == 1
    system.set_rotation(-1)
    assert singleton(world, PieceSelection).rotation == 3


def test_transform_without_selection_is_ignored(setup_world):
    bus, world, system = setup_world
    assert not system.rotate_piece()
    assert not system.flip_piece()
    assert not system.set_rotation(2)
    assert singleton(world, PieceSelection).rotation == 0


def test_input_events_drive_selection(setup_world):
    bus, world, system = setup_world
    transforms = []
    bus.subscribe(EVENT_PIECE_TRANSFORMED, lambda sender, **payload: transforms.append(payload))
    bus.emit(EVENT_PIECE_SELECT_REQUEST, piece_id=1)
    bus.emit(EVENT_ROTATE_REQUEST)
    bus.emit(EVENT_FLIP_REQUEST)
    assert transforms == [
        {"piece_id": 1, "rotation": 1, "flipped": False},
        {"piece_id": 1, "rotation": 1, "flipped": True},
    ]


def test_selection_ignored_after_game_over(setup_world):
    bus, world, system = setup_world
    get_game_state(world).mode = GameMode.GAME_OVER
    assert not system.select_piece(1)
    assert singleton(world, PieceSelection).piece_id is None


def test_preview_reports_cells_and_validity(setup_world):
    bus, world, system = setup_world
    assert system.preview(0, 0) is None
    system.select_piece(1)
    preview = system.preview(0, 0)
    assert preview.cells == [(0, 0), (0, 1), (0, 2), (1, 0)]
    assert preview.valid

    clipped = system.preview(5, 4)
    assert clipped.cells == [(5, 4), (5, 5)]
    assert not clipped.valid


def test_preview_flags_overlap(setup_world):
    bus, world, system = setup_world
    paint(singleton(world, Grid), [(0, 1)])
    system.select_piece(1)
    preview = system.preview(0, 0)
    assert preview.cells == [(0, 0), (0, 1), (0, 2), (1, 0)]
    assert not preview.valid
