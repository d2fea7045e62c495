from __future__ import annotations

from dataclasses import dataclass
from typing import List

from esper import World

from enclosures.components.game_state import GameMode
from enclosures.components.grid import Grid, Position
from enclosures.components.marketplace import Marketplace
from enclosures.components.piece import Piece, Shape
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
from enclosures.systems.placement_rules import can_place, footprint
from enclosures.utils.components import singleton
from enclosures.utils.game_state import get_game_state, set_game_mode
from enclosures.utils.shapes import apply_transform


@dataclass(frozen=True, slots=True)
class PlacementPreview:
    """In-bounds cells the selected piece would cover, and whether the drop is legal."""
    cells: List[Position]
    valid: bool


def selected_piece(world: World) -> Piece | None:
    selection = singleton(world, PieceSelection)
    if selection.piece_id is None:
        return None
    return singleton(world, Marketplace).find(selection.piece_id)


def selected_shape(world: World) -> Shape | None:
    """The selected piece's base shape with the pending flip and rotation applied."""
    piece = selected_piece(world)
    if piece is None:
        return None
    selection = singleton(world, PieceSelection)
    return apply_transform(piece.shape, selection.rotation, selection.flipped)


class SelectionSystem:
    """Owns piece selection and the pending rotate/flip transform.

    Nothing here touches the board. Transforms always start again from the
    selected piece's base shape.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_PIECE_SELECT_REQUEST, self.on_select_request)
        self.event_bus.subscribe(EVENT_ROTATE_REQUEST, self.on_rotate_request)
        self.event_bus.subscribe(EVENT_FLIP_REQUEST, self.on_flip_request)

    def on_select_request(self, sender, **payload):
        piece_id = payload.get("piece_id")
        if piece_id is None:
            return
        self.select_piece(piece_id)

    def on_rotate_request(self, sender, **payload):
        self.rotate_piece()

    def on_flip_request(self, sender, **payload):
        self.flip_piece()

    def _selection(self) -> PieceSelection:
        return singleton(self.world, PieceSelection)

    def select_piece(self, piece_id: int) -> bool:
        state = get_game_state(self.world)
        if state.game_over or state.mode == GameMode.RESOLVING:
            return False
        market = singleton(self.world, Marketplace)
        if market.find(piece_id) is None:
            raise UnknownPieceError(piece_id)
        selection = self._selection()
        if selection.piece_id != piece_id:
            selection.piece_id = piece_id
            selection.rotation = 0
            selection.flipped = False
        set_game_mode(self.world, self.event_bus, GameMode.AWAITING_PLACEMENT)
        self.event_bus.emit(EVENT_PIECE_SELECTED, piece_id=piece_id)
        return True

    def set_rotation(self, rotation: int) -> bool:
        selection = self._selection()
        if not self._can_transform(selection):
            return False
        selection.rotation = rotation % 4
        self._announce(selection)
        return True

    def set_flip(self, flipped: bool) -> bool:
        selection = self._selection()
        if not self._can_transform(selection):
            return False
        selection.flipped = bool(flipped)
        self._announce(selection)
        return True

    def rotate_piece(self) -> bool:
        return self.set_rotation(self._selection().rotation + 1)

    def flip_piece(self) -> bool:
        return self.set_flip(not self._selection().flipped)

    def preview(self, row: int, col: int) -> PlacementPreview | None:
        """Hover preview for the selected piece with its top-left at (row, col)."""
        shape = selected_shape(self.world)
        if shape is None:
            return None
        grid = singleton(self.world, Grid)
        first_move = not get_game_state(self.world).first_piece_placed
        cells = [(r, c) for r, c in footprint(shape, row, col) if grid.in_bounds(r, c)]
        return PlacementPreview(
            cells=cells,
            valid=can_place(grid, shape, row, col, first_move=first_move),
        )

    def _can_transform(self, selection: PieceSelection) -> bool:
        state = get_game_state(self.world)
        if state.game_over or state.mode == GameMode.RESOLVING:
            return False
        return selection.piece_id is not None

    def _announce(self, selection: PieceSelection) -> None:
        self.event_bus.emit(
            EVENT_PIECE_TRANSFORMED,
            piece_id=selection.piece_id,
            rotation=selection.rotation,
            flipped=selection.flipped,
        )
