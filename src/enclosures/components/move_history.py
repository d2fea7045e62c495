from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from enclosures.components.cell import Cell
from enclosures.components.piece import Piece
from enclosures.components.player import Player


@dataclass(frozen=True, slots=True)
class MoveSnapshot:
    """Everything a placement can change, captured just before it is committed."""
    cells: Tuple[Tuple[Optional[Cell], ...], ...]
    players: Tuple[Player, ...]
    marketplace: Tuple[Piece, ...]
    turn_index: int
    first_piece_placed: bool


@dataclass(slots=True)
class MoveHistory:
    snapshots: List[MoveSnapshot] = field(default_factory=list)

    def push(self, snapshot: MoveSnapshot) -> None:
        self.snapshots.append(snapshot)

    def pop(self) -> MoveSnapshot | None:
        if not self.snapshots:
            return None
        return self.snapshots.pop()

    def clear(self) -> None:
        self.snapshots.clear()

    def __len__(self) -> int:
        return len(self.snapshots)
