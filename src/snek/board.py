"""Board owning the snake and food, and enforcing the game rules."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from snek.food import BoardFullError, FoodSpawner
from snek.grid import (
    DEFAULT_GRID_SIZE,
    GridCoord,
    default_spawn,
    in_grid,
    occupancy_grid,
)
from snek.snake import Direction, Snake

if TYPE_CHECKING:
    from snek.config import BoardConfig

logger = logging.getLogger(__name__)


class Board:
    """Single-snake rule engine.

    The board owns the grid size, the food location and the snake. Each
    call to :meth:`update` advances the game by one tick and reports
    whether the snake survived it. The game phase is not tracked here;
    callers infer it from the return values of :meth:`update` and
    :meth:`reset`.
    """

    def __init__(
        self,
        grid_size: int = DEFAULT_GRID_SIZE,
        init_snake_coords: GridCoord | tuple[int, int] | None = None,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        if grid_size < 2:
            raise ValueError("Grid size must be at least 2.")
        if init_snake_coords is None:
            init_snake_coords = default_spawn(grid_size)
        init_snake_coords = GridCoord(*init_snake_coords)
        if not in_grid(init_snake_coords, grid_size):
            raise ValueError(
                f"Initial snake position {tuple(init_snake_coords)} "
                f"is outside a {grid_size}x{grid_size} grid."
            )

        self.grid_size = grid_size
        self.init_snake_coords = init_snake_coords
        self.food_spawner = FoodSpawner(
            rng if rng is not None else np.random.default_rng(seed),
        )
        self.snake = Snake(init_snake_coords)
        self.food_loc = init_snake_coords
        self.spawn_new_food()

    @classmethod
    def from_config(cls, config: BoardConfig) -> Board:
        """Build a board from a :class:`~snek.config.BoardConfig`."""
        return cls(
            grid_size=config.grid_size,
            init_snake_coords=config.init_snake_coords,
            seed=config.seed,
        )

    # --- query surface ---

    def get_grid_size(self) -> int:
        return self.grid_size

    def get_snake(self) -> Snake:
        return self.snake

    def get_food_loc(self) -> GridCoord:
        return self.food_loc

    def get_grid(self) -> np.ndarray:
        """Return an int8 occupancy array indexed ``[y, x]``."""
        return occupancy_grid(self.grid_size, self.snake.body, self.food_loc)

    @property
    def score(self) -> int:
        """Food eaten so far in this game."""
        return len(self.snake) - 1

    # --- rules ---

    def will_collide(self, next_loc: GridCoord | tuple[int, int]) -> bool:
        """Check *next_loc* against the walls and the current body.

        Coordinates are unsigned, so only the upper bound is checked. The
        body includes the tail cell even though it is about to move.
        """
        next_loc = GridCoord(*next_loc).unsigned()
        x, y = next_loc
        hits_wall = x >= self.grid_size or y >= self.grid_size
        return hits_wall or self.snake.has_snake(next_loc)

    def spawn_new_food(self) -> None:
        """Move the food to a random cell the snake does not occupy.

        Raises :class:`~snek.food.BoardFullError` if the snake fills the grid.
        """
        self.food_loc = self.food_spawner.place(
            self.grid_size, self.will_collide, occupied=len(self.snake),
        )

    def update_snake_dir(self, new_direction: Direction) -> None:
        """Change heading, ignoring 180° reversals once the snake has a body."""
        new_direction = Direction(new_direction)
        current = self.snake.get_direction()
        if len(self.snake) > 1 and abs(new_direction - current) % 3 > 1:
            logger.debug(
                "Ignoring reversal from %s to %s.", current.name, new_direction.name,
            )
            return
        self.snake.set_direction(new_direction)

    def update(self) -> bool:
        """Advance the game by one tick.

        Returns ``False`` (game over) if the snake would hit a wall or
        itself. Raises :class:`~snek.food.BoardFullError` if eating would
        leave no free cell for food. The board is left untouched in both
        cases.
        """
        if self.snake.get_direction() is None:
            return True

        next_loc = self.snake.get_next_head_location()
        if self.will_collide(next_loc):
            logger.info(
                "Snake collided at %s with score %d.", tuple(next_loc), self.score,
            )
            return False

        has_eaten_food = next_loc == self.food_loc
        if has_eaten_food and len(self.snake) + 1 >= self.grid_size**2:
            raise BoardFullError(
                f"Snake would fill the {self.grid_size}x{self.grid_size} grid."
            )
        self.snake.move(has_eaten_food)
        if has_eaten_food:
            self.spawn_new_food()
        return True

    def reset(self) -> bool:
        """Start a new game with a fresh snake and food on the same board."""
        self.snake = Snake(self.init_snake_coords)
        self.spawn_new_food()
        logger.debug("Board reset; snake at %s.", tuple(self.init_snake_coords))
        return True

    def to_dict(self) -> dict:
        """Return the full, serializable board state."""
        return {
            "grid_size": self.grid_size,
            "score": self.score,
            "food": list(self.food_loc),
            "snake": self.snake.to_dict(),
        }
