from __future__ import annotations

from esper import World

from enclosures.components.game_state import GameMode, GameState
from enclosures.events.bus import EVENT_GAME_MODE_CHANGED, EventBus
from enclosures.utils.components import singleton


def get_game_state(world: World) -> GameState:
    return singleton(world, GameState)


def set_game_mode(world: World, event_bus: EventBus, mode: GameMode) -> None:
    """Update the turn-cycle mode and emit a change event when it differs."""

    state = get_game_state(world)
    previous_mode = state.mode
    if previous_mode == mode:
        return
    state.mode = mode
    event_bus.emit(
        EVENT_GAME_MODE_CHANGED,
        previous_mode=previous_mode,
        new_mode=mode,
    )
