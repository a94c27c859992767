"""Snake representation and movement logic."""

from __future__ import annotations

import enum
from collections import deque

from snek.grid import GridCoord


class Direction(enum.IntEnum):
    """Headings in clockwise order.

    The ordinal values matter: turn legality is decided by the distance
    between them.
    """

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @property
    def delta(self) -> tuple[int, int]:
        """(dx, dy) step for one cell of movement."""
        return _DELTAS[self]


_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.NORTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
}


class Snake:
    """A snake represented as an ordered deque of grid cells.

    The tail is ``body[0]``; the head is ``body[-1]``. The snake knows
    nothing about walls or food: callers validate a move before
    committing it with :meth:`move`.
    """

    def __init__(
        self,
        head: GridCoord | tuple[int, int],
        direction: Direction | None = None,
    ) -> None:
        self.head = GridCoord(*head)
        self.body: deque[GridCoord] = deque([self.head])
        self.direction = direction

    def __len__(self) -> int:
        return len(self.body)

    def get_head(self) -> GridCoord:
        return self.head

    def get_body(self) -> tuple[GridCoord, ...]:
        """Return the occupied cells, tail first."""
        return tuple(self.body)

    def get_direction(self) -> Direction | None:
        return self.direction

    def set_direction(self, direction: Direction) -> None:
        """Set the heading unconditionally (legality is the board's call)."""
        self.direction = Direction(direction)

    def get_next_head_location(self) -> GridCoord:
        """Compute the next head position without moving.

        No bounds checking is done. A snake with no heading stays put.
        """
        if self.direction is None:
            return self.head
        dx, dy = self.direction.delta
        return self.head.offset(dx, dy)

    def move(self, has_eaten_food: bool = False) -> None:
        """Advance one cell, growing by one segment if food was eaten.

        This does not check for collisions; see ``Board.update``.
        """
        self.head = self.get_next_head_location()
        self.body.append(self.head)
        if not has_eaten_food:
            self.body.popleft()

    def has_snake(self, cell: GridCoord | tuple[int, int]) -> bool:
        """Check whether any body segment occupies *cell*."""
        return GridCoord(*cell) in self.body

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        direction = None if self.direction is None else self.direction.name.lower()
        return {
            "head": list(self.head),
            "body": [list(seg) for seg in self.body],
            "direction": direction,
        }
