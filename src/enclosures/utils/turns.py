from __future__ import annotations

from typing import List

from esper import World

from enclosures.components.player import Player
from enclosures.components.turn_order import TurnOrder
from enclosures.events.bus import EVENT_TURN_ADVANCED, EventBus
from enclosures.utils.components import singleton


def get_turn_order(world: World) -> TurnOrder:
    return singleton(world, TurnOrder)


def current_seat(world: World) -> int:
    return get_turn_order(world).index


def ordered_players(world: World) -> List[Player]:
    """Player components in seat order."""
    order = get_turn_order(world)
    return [world.component_for_entity(entity, Player) for entity in order.owners]


def current_player(world: World) -> Player:
    order = get_turn_order(world)
    owner = order.current()
    if owner is None:
        raise RuntimeError("TurnOrder has no players")
    return world.component_for_entity(owner, Player)


def advance_turn(world: World, event_bus: EventBus) -> int:
    """Advance turn order round-robin and announce the new seat."""
    order = get_turn_order(world)
    previous_seat = order.index if order.owners else None
    order.advance()
    event_bus.emit(EVENT_TURN_ADVANCED, previous_seat=previous_seat, new_seat=order.index)
    return order.index


def resolve_winner(players: List[Player]) -> int | None:
    """Seat with the strictly highest score; ties go to the earliest seat."""
    winner: int | None = None
    best = None
    for seat, player in enumerate(players):
        if best is None or player.score > best:
            best = player.score
            winner = seat
    return winner
