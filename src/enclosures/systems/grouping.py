"""Connected-group detection over cell colour and pattern.

Groups are recomputed from scratch on every call; nothing is cached between
moves. Positions inside a group are always sorted row-major so that the same
cell set produces the same key regardless of discovery order.
"""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Dict, List, Set, Tuple

from enclosures.components.cell import Attribute
from enclosures.components.grid import Grid, Position
from enclosures.systems.placement_rules import NEIGHBOR_OFFSETS

GroupKey = Tuple[str, str, Tuple[Position, ...]]


@dataclass(frozen=True, slots=True)
class GroupStatus:
    attribute: Attribute
    value: str
    cells: Tuple[Position, ...]
    enclosed: bool

    @property
    def size(self) -> int:
        return len(self.cells)

    @property
    def key(self) -> GroupKey:
        return group_key(self.cells, self.attribute, self.value)


def group_key(cells, attribute: Attribute, value: str) -> GroupKey:
    return attribute.value, value, tuple(sorted(cells))


def _matches(grid: Grid, row: int, col: int, attribute: Attribute, value: str) -> bool:
    cell = grid.cells[row][col]
    return cell is not None and attribute.get(cell) == value


def _flood(
    grid: Grid, start: Position, attribute: Attribute, value: str, visited: Set[Position]
) -> List[Position]:
    group: List[Position] = []
    queue = deque([start])
    visited.add(start)
    while queue:
        row, col = queue.popleft()
        group.append((row, col))
        for dr, dc in NEIGHBOR_OFFSETS:
            nr, nc = row + dr, col + dc
            if (nr, nc) in visited or not grid.in_bounds(nr, nc):
                continue
            if not _matches(grid, nr, nc, attribute, value):
                continue
            visited.add((nr, nc))
            queue.append((nr, nc))
    return sorted(group)


def find_all_groups(grid: Grid, attribute: Attribute, value: str) -> List[List[Position]]:
    """All maximal 4-connected groups of cells whose attribute equals value.

    Seeds are taken in row-major order; each cell lands in at most one group.
    """
    visited: Set[Position] = set()
    groups: List[List[Position]] = []
    for r in range(grid.size):
        for c in range(grid.size):
            if (r, c) in visited or not _matches(grid, r, c, attribute, value):
                continue
            groups.append(_flood(grid, (r, c), attribute, value, visited))
    return groups


def find_group_at(grid: Grid, row: int, col: int, attribute: Attribute) -> List[Position]:
    """Group containing (row, col) under attribute; empty list for an empty square."""
    cell = grid.get(row, col)
    if cell is None:
        return []
    return _flood(grid, (row, col), attribute, attribute.get(cell), set())


def is_enclosed(grid: Grid, group, attribute: Attribute, value: str) -> bool:
    """True when every in-bounds neighbour of the group is inside it or holds another value.

    The board edge counts as a wall. An empty neighbour, or a same-value neighbour
    missing from the group, means the group is still open.
    """
    members = set(group)
    for row, col in members:
        for dr, dc in NEIGHBOR_OFFSETS:
            nr, nc = row + dr, col + dc
            if not grid.in_bounds(nr, nc) or (nr, nc) in members:
                continue
            neighbor = grid.cells[nr][nc]
            if neighbor is None or attribute.get(neighbor) == value:
                return False
    return True


def group_edges(grid: Grid, group, attribute: Attribute, value: str) -> List[Position]:
    """Cells of the group with at least one neighbour outside it (edge, empty or other value)."""
    edges: List[Position] = []
    for row, col in sorted(group):
        for dr, dc in NEIGHBOR_OFFSETS:
            nr, nc = row + dr, col + dc
            if not grid.in_bounds(nr, nc) or not _matches(grid, nr, nc, attribute, value):
                edges.append((row, col))
                break
    return edges


def values_on_grid(grid: Grid, attribute: Attribute) -> List[str]:
    """Distinct attribute values present on the board, in row-major order of first appearance."""
    seen: Dict[str, None] = {}
    for _, cell in grid.occupied():
        seen.setdefault(attribute.get(cell), None)
    return list(seen)


def get_all_groups_status(grid: Grid) -> Dict[GroupKey, GroupStatus]:
    """Snapshot of every colour group and every pattern group with its enclosure flag."""
    status: Dict[GroupKey, GroupStatus] = {}
    for attribute in (Attribute.COLOR, Attribute.PATTERN):
        for value in values_on_grid(grid, attribute):
            for group in find_all_groups(grid, attribute, value):
                entry = GroupStatus(
                    attribute=attribute,
                    value=value,
                    cells=tuple(group),
                    enclosed=is_enclosed(grid, group, attribute, value),
                )
                status[entry.key] = entry
    return status
