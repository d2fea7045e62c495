from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from enclosures.components.cell import Cell
from enclosures.errors import CellOutOfRangeError

Position = Tuple[int, int]


@dataclass(slots=True)
class Grid:
    """Square board of cells stored row-major; None marks an empty square."""
    size: int
    cells: List[List[Optional[Cell]]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.cells:
            self.clear()

    def clear(self) -> None:
        self.cells = [[None] * self.size for _ in range(self.size)]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def get(self, row: int, col: int) -> Optional[Cell]:
        if not self.in_bounds(row, col):
            raise CellOutOfRangeError(row, col, self.size)
        return self.cells[row][col]

    def is_occupied(self, row: int, col: int) -> bool:
        """Out-of-bounds squares count as unoccupied."""
        return self.in_bounds(row, col) and self.cells[row][col] is not None

    def put(self, row: int, col: int, cell: Cell) -> None:
        if not self.in_bounds(row, col):
            raise CellOutOfRangeError(row, col, self.size)
        self.cells[row][col] = cell

    def occupied(self) -> Iterator[Tuple[Position, Cell]]:
        for r, row in enumerate(self.cells):
            for c, cell in enumerate(row):
                if cell is not None:
                    yield (r, c), cell

    def filled_count(self) -> int:
        return sum(1 for row in self.cells for cell in row if cell is not None)

    def fill_ratio(self) -> float:
        return self.filled_count() / (self.size * self.size)

    def snapshot(self) -> Tuple[Tuple[Optional[Cell], ...], ...]:
        return tuple(tuple(row) for row in self.cells)

    def restore(self, snapshot: Tuple[Tuple[Optional[Cell], ...], ...]) -> None:
        self.size = len(snapshot)
        self.cells = [list(row) for row in snapshot]
