"""Game state resource describing where the current game is in its turn cycle."""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class GameMode(Enum):
    """Turn cycle states; placement requests are only honoured while a piece is selected."""
    AWAITING_SELECTION = auto()
    AWAITING_PLACEMENT = auto()
    RESOLVING = auto()
    GAME_OVER = auto()


@dataclass
class GameState:
    """Singleton component storing the turn-cycle mode and game-wide flags."""
    mode: GameMode = GameMode.AWAITING_SELECTION
    first_piece_placed: bool = False
    winner: Optional[int] = None

    @property
    def game_over(self) -> bool:
        return self.mode == GameMode.GAME_OVER
