from dataclasses import dataclass
from enum import Enum

@dataclass(frozen=True, slots=True)
class Cell:
    """An occupied grid square. Empty squares are stored as None on the Grid.

    owner: seat index of the player whose piece covered this square.
    """
    color: str
    pattern: str
    owner: int


class Attribute(Enum):
    """Cell attribute a group can be formed over."""
    COLOR = "color"
    PATTERN = "pattern"

    def get(self, cell: Cell) -> str:
        if self is Attribute.COLOR:
            return cell.color
        return cell.pattern
