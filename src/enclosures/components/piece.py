from dataclasses import dataclass
from typing import Tuple

Shape = Tuple[Tuple[int, ...], ...]


@dataclass(frozen=True, slots=True)
class Piece:
    """A marketplace piece. Never mutated; transforms produce new shapes."""
    shape: Shape
    color: str
    pattern: str
    id: int

    def __post_init__(self) -> None:
        if not self.shape or not self.shape[0]:
            raise ValueError("Piece shape must have at least one row and column")
        width = len(self.shape[0])
        if any(len(row) != width for row in self.shape):
            raise ValueError("Piece shape must be rectangular")
        if not any(any(row) for row in self.shape):
            raise ValueError("Piece shape must contain at least one filled cell")

    @property
    def cell_count(self) -> int:
        return sum(1 for row in self.shape for value in row if value)
