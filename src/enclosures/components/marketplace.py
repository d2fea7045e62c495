from dataclasses import dataclass, field
from typing import List

from enclosures.components.piece import Piece


@dataclass(slots=True)
class Marketplace:
    """Fixed-size pool of pieces players can pick from.

    Pieces keep their slot: a placed piece is replaced in place by a fresh one.
    """
    capacity: int
    pieces: List[Piece] = field(default_factory=list)

    def index_of(self, piece_id: int) -> int | None:
        for index, piece in enumerate(self.pieces):
            if piece.id == piece_id:
                return index
        return None

    def find(self, piece_id: int) -> Piece | None:
        index = self.index_of(piece_id)
        if index is None:
            return None
        return self.pieces[index]

    def replace(self, piece_id: int, new_piece: Piece) -> Piece | None:
        """Swap the piece with piece_id for new_piece; returns the removed piece."""
        index = self.index_of(piece_id)
        if index is None:
            return None
        removed = self.pieces[index]
        self.pieces[index] = new_piece
        return removed
