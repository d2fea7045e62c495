from dataclasses import dataclass
from typing import Optional

@dataclass(slots=True)
class PieceSelection:
    """Currently selected marketplace piece and its pending transform.

    rotation: number of clockwise quarter turns (0-3), applied after the flip.
    flipped: mirror the base shape horizontally before rotating.
    """
    piece_id: Optional[int] = None
    rotation: int = 0
    flipped: bool = False

    def clear(self) -> None:
        self.piece_id = None
        self.rotation = 0
        self.flipped = False
