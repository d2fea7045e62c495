from esper import World

from enclosures.events.bus import EVENT_PLAYER_RENAME_REQUEST, EVENT_PLAYER_RENAMED, EventBus
from enclosures.factories.players import default_player_name
from enclosures.utils.turns import ordered_players


class PlayerRosterSystem:
    """Handles player name edits. Blank names fall back to the seat default."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_PLAYER_RENAME_REQUEST, self.on_rename_request)

    def on_rename_request(self, sender, **payload):
        seat = payload.get("seat")
        if seat is None:
            return
        self.rename_player(seat, payload.get("name") or "")

    def rename_player(self, seat: int, name: str) -> str:
        players = ordered_players(self.world)
        if not 0 <= seat < len(players):
            raise IndexError(f"Seat {seat} is out of range for {len(players)} players")
        cleaned = name.strip() or default_player_name(seat)
        players[seat].name = cleaned
        self.event_bus.emit(EVENT_PLAYER_RENAMED, seat=seat, name=cleaned)
        return cleaned
