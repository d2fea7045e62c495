from __future__ import annotations

from dataclasses import dataclass
from typing import List

from esper import World

from enclosures.components.cell import Attribute
from enclosures.components.grid import Grid, Position
from enclosures.components.selection import PieceSelection
from enclosures.events.bus import EVENT_CELL_HOVER, EVENT_GROUPS_INSPECTED, EventBus
from enclosures.systems.grouping import find_group_at, group_edges, is_enclosed
from enclosures.utils.components import singleton


@dataclass(frozen=True, slots=True)
class GroupView:
    attribute: Attribute
    value: str
    cells: List[Position]
    edges: List[Position]
    enclosed: bool

    @property
    def size(self) -> int:
        return len(self.cells)


@dataclass(frozen=True, slots=True)
class CellGroups:
    color_group: GroupView
    pattern_group: GroupView

    @property
    def same_cells(self) -> bool:
        return self.color_group.cells == self.pattern_group.cells


class GroupInspectionSystem:
    """Answers "which groups is this cell part of?" for hover highlighting.

    Hovering only inspects while no piece is selected; with a piece in hand the
    presentation layer shows a placement preview instead.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_CELL_HOVER, self.on_cell_hover)

    def on_cell_hover(self, sender, **payload):
        row = payload.get("row")
        col = payload.get("col")
        if row is None or col is None:
            return
        if singleton(self.world, PieceSelection).piece_id is not None:
            return
        groups = self.inspect_cell(row, col)
        if groups is None:
            return
        self.event_bus.emit(
            EVENT_GROUPS_INSPECTED,
            row=row,
            col=col,
            color_group=groups.color_group,
            pattern_group=groups.pattern_group,
        )

    def inspect_cell(self, row: int, col: int) -> CellGroups | None:
        grid = singleton(self.world, Grid)
        cell = grid.get(row, col)
        if cell is None:
            return None
        return CellGroups(
            color_group=self._view(grid, row, col, Attribute.COLOR, cell.color),
            pattern_group=self._view(grid, row, col, Attribute.PATTERN, cell.pattern),
        )

    @staticmethod
    def _view(grid: Grid, row: int, col: int, attribute: Attribute, value: str) -> GroupView:
        cells = find_group_at(grid, row, col, attribute)
        return GroupView(
            attribute=attribute,
            value=value,
            cells=cells,
            edges=group_edges(grid, cells, attribute, value),
            enclosed=is_enclosed(grid, cells, attribute, value),
        )
