import random

from esper import World
from enclosures.components.game_state import GameState
from enclosures.components.grid import Grid
from enclosures.components.marketplace import Marketplace
from enclosures.components.move_history import MoveHistory
from enclosures.components.piece_sequence import PieceSequence
from enclosures.components.selection import PieceSelection
from enclosures.components.turn_order import TurnOrder
from enclosures.constants import DEFAULT_GRID_SIZE, DEFAULT_PLAYER_COUNT, MARKETPLACE_SIZE
from enclosures.errors import ConfigurationError
from enclosures.factories.pieces import fill_marketplace
from enclosures.factories.players import create_players


def validate_game_config(player_count, grid_size, marketplace_size=MARKETPLACE_SIZE) -> None:
    """Reject settings the engine cannot run with. Values are never clamped."""
    for label, value in (
        ("player_count", player_count),
        ("grid_size", grid_size),
        ("marketplace_size", marketplace_size),
    ):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigurationError(f"{label} must be an integer, got {value!r}")
        if value < 1:
            raise ConfigurationError(f"{label} must be at least 1, got {value}")


def create_world(
    *,
    player_count: int = DEFAULT_PLAYER_COUNT,
    grid_size: int = DEFAULT_GRID_SIZE,
    marketplace_size: int = MARKETPLACE_SIZE,
    rng: random.Random | None = None,
) -> World:
    validate_game_config(player_count, grid_size, marketplace_size)
    world = World()
    setattr(world, "random", rng or random.Random())

    # Global game state resource plus the move stack used by undo.
    world.create_entity(GameState(), MoveHistory(), PieceSequence())

    world.create_entity(Grid(size=grid_size))
    world.create_entity(Marketplace(capacity=marketplace_size), PieceSelection())

    players = create_players(world, player_count)
    world.create_entity(TurnOrder(owners=players, index=0))

    fill_marketplace(world)
    return world
