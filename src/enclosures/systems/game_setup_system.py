"""Starts and restarts games inside an existing world."""
from __future__ import annotations

import logging

from esper import World

from enclosures.components.game_state import GameMode
from enclosures.components.grid import Grid
from enclosures.components.marketplace import Marketplace
from enclosures.components.move_history import MoveHistory
from enclosures.components.player import Player
from enclosures.components.selection import PieceSelection
from enclosures.components.turn_order import TurnOrder
from enclosures.constants import DEFAULT_GRID_SIZE, DEFAULT_PLAYER_COUNT
from enclosures.events.bus import EVENT_GAME_STARTED, EVENT_NEW_GAME_REQUEST, EventBus
from enclosures.factories.pieces import fill_marketplace
from enclosures.factories.players import create_players
from enclosures.utils.components import singleton
from enclosures.utils.game_state import get_game_state, set_game_mode
from enclosures.world import validate_game_config

logger = logging.getLogger(__name__)


class GameSetupSystem:
    """Resets every piece of game state for a fresh game.

    Configuration is validated before anything is touched, so a rejected
    request leaves the running game intact.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_NEW_GAME_REQUEST, self.on_new_game_request)

    def on_new_game_request(self, sender, **payload):
        self.new_game(
            payload.get("player_count", DEFAULT_PLAYER_COUNT),
            payload.get("grid_size", DEFAULT_GRID_SIZE),
        )

    def new_game(self, player_count: int, grid_size: int) -> None:
        market = singleton(self.world, Marketplace)
        validate_game_config(player_count, grid_size, market.capacity)

        grid = singleton(self.world, Grid)
        grid.size = grid_size
        grid.clear()

        order = singleton(self.world, TurnOrder)
        for entity in order.owners:
            self.world.delete_entity(entity, immediate=True)
        # Players created outside the turn order would otherwise leak into the new game.
        for entity, _ in list(self.world.get_component(Player)):
            self.world.delete_entity(entity, immediate=True)
        order.owners = create_players(self.world, player_count)
        order.index = 0

        singleton(self.world, PieceSelection).clear()
        singleton(self.world, MoveHistory).clear()
        state = get_game_state(self.world)
        state.first_piece_placed = False
        state.winner = None

        market.pieces.clear()
        fill_marketplace(self.world)

        set_game_mode(self.world, self.event_bus, GameMode.AWAITING_SELECTION)
        logger.info("New game: %d players on a %dx%d grid", player_count, grid_size, grid_size)
        self.event_bus.emit(EVENT_GAME_STARTED, player_count=player_count, grid_size=grid_size)
