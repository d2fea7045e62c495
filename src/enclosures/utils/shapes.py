"""Piece shape catalog and pure matrix transforms.

Shapes are tuples of row tuples holding 0/1. Every transform returns a new
shape; the inputs are never modified.
"""
from __future__ import annotations

from typing import Iterator, List, Sequence, Tuple

from enclosures.components.piece import Shape

SHAPES: Tuple[Shape, ...] = (
    ((1, 1, 1, 1),),                        # I
    ((1, 1), (1, 1)),                       # O
    ((1, 1, 1), (0, 1, 0)),                 # T
    ((1, 1, 0), (0, 1, 1)),                 # S
    ((0, 1, 1), (1, 1, 0)),                 # Z
    ((1, 1, 1), (1, 0, 0)),                 # L
    ((1, 1, 1), (0, 0, 1)),                 # J
    ((1,),),                                # single
    ((1, 1),),                              # domino
    ((1, 1, 1),),                           # tromino
    ((1, 0), (1, 1)),                       # small L
    ((1, 1, 0), (0, 1, 0), (0, 1, 1)),      # long S
    ((1, 0, 1), (1, 1, 1)),                 # U
    ((1, 1, 1), (1, 0, 1)),                 # inverted U
    ((1, 1), (0, 1), (0, 1)),               # long L
    ((1, 0, 0), (1, 1, 1)),                 # flat L
    ((0, 0, 1), (1, 1, 1)),                 # flat J
    ((1, 1, 1, 1, 1),),                     # long I
    ((1, 1, 1), (0, 1, 0), (0, 1, 0)),      # tree
    ((1, 0), (1, 1), (1, 0)),               # small T
    ((1, 1, 0), (0, 1, 1), (0, 0, 1)),      # stairs
    ((1, 1, 1), (1, 1, 1)),                 # 2x3
    ((1, 1), (1, 1), (1, 1)),               # 3x2
    ((1, 0, 0), (1, 0, 0), (1, 1, 1)),      # big L
    ((0, 1), (1, 1), (1, 0)),               # upright S
    ((1, 1, 1, 1), (0, 1, 0, 0)),           # T with tail
    ((1, 1, 0, 0), (0, 1, 1, 1)),           # lightning
    ((1, 0, 1, 0), (1, 1, 1, 1)),           # comb
    ((1, 1, 1), (0, 1, 0), (1, 1, 1)),      # H
)


def as_shape(matrix: Sequence[Sequence[int]]) -> Shape:
    """Normalise any nested 0/1 sequence into an immutable shape."""
    return tuple(tuple(1 if value else 0 for value in row) for row in matrix)


def cell_count(shape: Shape) -> int:
    return sum(1 for row in shape for value in row if value)


def rotate90(shape: Shape) -> Shape:
    """Quarter turn clockwise: rotated[j][rows - 1 - i] = shape[i][j]."""
    rows = len(shape)
    cols = len(shape[0])
    rotated: List[List[int]] = [[0] * rows for _ in range(cols)]
    for i in range(rows):
        for j in range(cols):
            rotated[j][rows - 1 - i] = shape[i][j]
    return as_shape(rotated)


def flip_horizontal(shape: Shape) -> Shape:
    return tuple(tuple(reversed(row)) for row in shape)


def apply_transform(base: Shape, rotation: int, flipped: bool) -> Shape:
    """Flip first, then rotate. Preview and placement must share this order."""
    shape = flip_horizontal(base) if flipped else base
    for _ in range(rotation % 4):
        shape = rotate90(shape)
    return shape


def all_orientations(base: Shape) -> Iterator[Tuple[bool, int, Shape]]:
    """Yield (flipped, rotation, shape) for all eight transforms, unflipped first."""
    for flipped in (False, True):
        for rotation in range(4):
            yield flipped, rotation, apply_transform(base, rotation, flipped)


def filled_offsets(shape: Shape) -> List[Tuple[int, int]]:
    return [(i, j) for i, row in enumerate(shape) for j, value in enumerate(row) if value]
