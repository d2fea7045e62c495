"""Engine entry point for a presentation layer.

Builds the world, event bus and systems the way a window would, and exposes the
query and command surface a UI needs. Everything the engine reports happens
through the event bus after state is committed; the UI subscribes and renders.
"""
from __future__ import annotations

import random
from typing import List, Tuple

from enclosures.components.cell import Cell
from enclosures.components.game_state import GameMode
from enclosures.components.grid import Grid
from enclosures.components.marketplace import Marketplace
from enclosures.components.piece import Piece
from enclosures.components.player import Player
from enclosures.components.selection import PieceSelection
from enclosures.constants import DEFAULT_GRID_SIZE, DEFAULT_PLAYER_COUNT, MARKETPLACE_SIZE
from enclosures.events.bus import EventBus
from enclosures.systems.game_setup_system import GameSetupSystem
from enclosures.systems.group_inspection_system import CellGroups, GroupInspectionSystem
from enclosures.systems.placement_system import MoveOutcome, PlacementSystem
from enclosures.systems.player_roster_system import PlayerRosterSystem
from enclosures.systems.selection_system import PlacementPreview, SelectionSystem
from enclosures.systems.undo_system import UndoSystem
from enclosures.utils.components import singleton
from enclosures.utils.game_state import get_game_state
from enclosures.utils.turns import current_player, ordered_players
from enclosures.world import create_world


class GameSession:
    def __init__(
        self,
        event_bus: EventBus | None = None,
        *,
        player_count: int = DEFAULT_PLAYER_COUNT,
        grid_size: int = DEFAULT_GRID_SIZE,
        marketplace_size: int = MARKETPLACE_SIZE,
        rng: random.Random | None = None,
    ):
        self.event_bus = event_bus or EventBus()
        self.world = create_world(
            player_count=player_count,
            grid_size=grid_size,
            marketplace_size=marketplace_size,
            rng=rng,
        )
        self.setup_system = GameSetupSystem(self.world, self.event_bus)
        self.selection_system = SelectionSystem(self.world, self.event_bus)
        self.placement_system = PlacementSystem(self.world, self.event_bus)
        self.undo_system = UndoSystem(self.world, self.event_bus)
        self.roster_system = PlayerRosterSystem(self.world, self.event_bus)
        self.inspection_system = GroupInspectionSystem(self.world, self.event_bus)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def new_game(self, player_count: int, grid_size: int) -> None:
        self.setup_system.new_game(player_count, grid_size)

    def select_piece(self, piece_id: int) -> bool:
        return self.selection_system.select_piece(piece_id)

    def set_rotation(self, rotation: int) -> bool:
        return self.selection_system.set_rotation(rotation)

    def set_flip(self, flipped: bool) -> bool:
        return self.selection_system.set_flip(flipped)

    def rotate_piece(self) -> bool:
        return self.selection_system.rotate_piece()

    def flip_piece(self) -> bool:
        return self.selection_system.flip_piece()

    def attempt_placement(self, row: int, col: int) -> MoveOutcome:
        return self.placement_system.attempt_placement(row, col)

    def undo(self) -> bool:
        return self.undo_system.undo()

    def rename_player(self, seat: int, name: str) -> str:
        return self.roster_system.rename_player(seat, name)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_cell(self, row: int, col: int) -> Cell | None:
        return singleton(self.world, Grid).get(row, col)

    def get_grid_size(self) -> int:
        return singleton(self.world, Grid).size

    def get_players(self) -> List[Player]:
        return ordered_players(self.world)

    def get_marketplace(self) -> Tuple[Piece, ...]:
        return tuple(singleton(self.world, Marketplace).pieces)

    def get_current_player(self) -> Player:
        return current_player(self.world)

    def get_selection(self) -> PieceSelection:
        return singleton(self.world, PieceSelection)

    def get_mode(self) -> GameMode:
        return get_game_state(self.world).mode

    def is_game_over(self) -> bool:
        return get_game_state(self.world).game_over

    def get_winner(self) -> int | None:
        return get_game_state(self.world).winner

    def preview_placement(self, row: int, col: int) -> PlacementPreview | None:
        return self.selection_system.preview(row, col)

    def inspect_cell(self, row: int, col: int) -> CellGroups | None:
        return self.inspection_system.inspect_cell(row, col)
