from __future__ import annotations

import logging

from esper import World

from enclosures.components.game_state import GameMode
from enclosures.components.grid import Grid
from enclosures.components.marketplace import Marketplace
from enclosures.components.move_history import MoveHistory
from enclosures.components.player import Player
from enclosures.components.selection import PieceSelection
from enclosures.events.bus import EVENT_MOVE_UNDONE, EVENT_UNDO_REQUEST, EventBus
from enclosures.utils.components import singleton
from enclosures.utils.game_state import get_game_state, set_game_mode
from enclosures.utils.turns import get_turn_order

logger = logging.getLogger(__name__)


class UndoSystem:
    """Rolls the game back one placement at a time.

    Disabled once the game is over; an empty history is a silent no-op.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_UNDO_REQUEST, self.on_undo_request)

    def on_undo_request(self, sender, **payload):
        self.undo()

    def undo(self) -> bool:
        state = get_game_state(self.world)
        if state.game_over:
            logger.debug("Undo ignored: game is over")
            return False
        if state.mode == GameMode.RESOLVING:
            return False
        snapshot = singleton(self.world, MoveHistory).pop()
        if snapshot is None:
            return False

        singleton(self.world, Grid).restore(snapshot.cells)
        order = get_turn_order(self.world)
        for entity, saved in zip(order.owners, snapshot.players):
            player = self.world.component_for_entity(entity, Player)
            player.name = saved.name
            player.seat = saved.seat
            player.display_color = saved.display_color
            player.score = saved.score
        market = singleton(self.world, Marketplace)
        market.pieces = list(snapshot.marketplace)
        order.index = snapshot.turn_index
        state.first_piece_placed = snapshot.first_piece_placed
        singleton(self.world, PieceSelection).clear()

        set_game_mode(self.world, self.event_bus, GameMode.AWAITING_SELECTION)
        logger.debug("Undid move; seat %d to play", order.index)
        self.event_bus.emit(EVENT_MOVE_UNDONE, seat=order.index)
        return True
