from __future__ import annotations

from typing import List

from esper import World

from enclosures.components.player import Player
from enclosures.constants import COLORS


def default_player_name(seat: int) -> str:
    return f"Player {seat + 1}"


def create_players(world: World, count: int) -> List[int]:
    """Create count player entities in seat order; display colours cycle through the palette."""
    palette = list(COLORS.values())
    entities: List[int] = []
    for seat in range(count):
        entities.append(
            world.create_entity(
                Player(
                    name=default_player_name(seat),
                    seat=seat,
                    display_color=palette[seat % len(palette)],
                )
            )
        )
    return entities
