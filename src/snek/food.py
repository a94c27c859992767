"""Food placement policy."""

from __future__ import annotations

import logging
from collections.abc import Callable

import numpy as np

from snek.grid import GridCoord

logger = logging.getLogger(__name__)


class BoardFullError(RuntimeError):
    """Raised when food cannot be placed because no free cell remains."""


class FoodSpawner:
    """Places food by rejection sampling over the whole grid.

    Uses a seeded NumPy RNG for deterministic, reproducible placement.
    """

    def __init__(self, rng: np.random.Generator | None = None) -> None:
        self.rng = rng if rng is not None else np.random.default_rng()

    def place(
        self,
        grid_size: int,
        is_blocked: Callable[[GridCoord], bool],
        occupied: int = 0,
    ) -> GridCoord:
        """Sample uniform cells until one is not blocked.

        *occupied* is the number of cells already taken; when it covers
        the whole grid there is nothing to sample and
        :class:`BoardFullError` is raised instead of looping forever.
        """
        if occupied >= grid_size * grid_size:
            logger.warning(
                "No free cell left on a %dx%d grid.", grid_size, grid_size,
            )
            raise BoardFullError(
                f"No free cell for food on a {grid_size}x{grid_size} grid."
            )

        attempts = 0
        while True:
            attempts += 1
            x, y = self.rng.integers(0, grid_size, size=2).tolist()
            candidate = GridCoord(x, y)
            if not is_blocked(candidate):
                break

        logger.debug("Food placed at %s after %d attempt(s).", candidate, attempts)
        return candidate
