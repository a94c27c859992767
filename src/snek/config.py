"""Board construction parameters."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from snek.grid import DEFAULT_GRID_SIZE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoardConfig:
    """Parameters fixed for the lifetime of one game.

    ``init_snake_coords`` of ``None`` means the centre of the grid.
    Supports JSON serialization so a session can be reproduced.
    """

    grid_size: int = DEFAULT_GRID_SIZE
    init_snake_coords: tuple[int, int] | None = None
    seed: int | None = None

    def to_dict(self) -> dict:
        """Serialize to a plain dict (tuples become lists)."""
        d = asdict(self)
        if d["init_snake_coords"] is not None:
            d["init_snake_coords"] = list(d["init_snake_coords"])
        return d

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> BoardConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        if raw.get("init_snake_coords") is not None:
            raw["init_snake_coords"] = tuple(raw["init_snake_coords"])
        return cls(**raw)
