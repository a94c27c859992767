"""Grid coordinates and occupancy helpers."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from typing import NamedTuple

import numpy as np

DEFAULT_GRID_SIZE = 20

# Coordinates behave like unsigned 32-bit integers: stepping below zero
# wraps to a huge value that the upper-bound wall check rejects.
COORD_MODULUS = 2**32


class GridCoord(NamedTuple):
    """One cell of an ``N x N`` grid, addressed as (x, y)."""

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> GridCoord:
        """Return the neighbouring cell, wrapping like an unsigned int."""
        return GridCoord(
            (self.x + dx) % COORD_MODULUS, (self.y + dy) % COORD_MODULUS,
        )

    def unsigned(self) -> GridCoord:
        """Return the same cell with negative components wrapped."""
        return self.offset(0, 0)


class CellType(enum.IntEnum):
    """Integer codes stored in the occupancy grid."""

    EMPTY = 0
    SNAKE = 1
    FOOD = 2


def default_spawn(grid_size: int = DEFAULT_GRID_SIZE) -> GridCoord:
    """Centre of the grid, biased towards the origin (grid starts at 0, 0)."""
    centre = max(grid_size // 2 - 1, 0)
    return GridCoord(centre, centre)


def in_grid(cell: GridCoord, grid_size: int) -> bool:
    """Check whether a cell lies within ``[0, grid_size)``."""
    return 0 <= cell.x < grid_size and 0 <= cell.y < grid_size


def occupancy_grid(
    grid_size: int,
    body: Iterable[GridCoord],
    food: GridCoord | None = None,
) -> np.ndarray:
    """Paint snake and food onto a ``(grid_size, grid_size)`` int8 array.

    The array is indexed ``[y, x]`` so that rows follow screen order.
    """
    cells = np.zeros((grid_size, grid_size), dtype=np.int8)
    for x, y in body:
        cells[y, x] = CellType.SNAKE
    if food is not None:
        cells[food.y, food.x] = CellType.FOOD
    return cells
