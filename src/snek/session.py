"""Headless driver mapping input signals and ticks onto a board."""

from __future__ import annotations

import enum
import logging

from snek.board import Board
from snek.food import BoardFullError
from snek.snake import Direction

logger = logging.getLogger(__name__)


class Screen(enum.Enum):
    """Which screen the presentation layer should show."""

    TITLE = "title"
    PAUSED = "paused"
    PLAY = "play"
    GAME_OVER = "game_over"


class Phase(enum.Enum):
    """Lifecycle of one game on the board."""

    NOT_STARTED = "not_started"
    RUNNING = "running"
    OVER = "over"


class Signal(enum.Enum):
    """Abstract input events delivered by the presentation layer."""

    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"
    PAUSE = "pause"
    RESET = "reset"
    QUIT = "quit"


_DIRECTIONS: dict[Signal, Direction] = {
    Signal.NORTH: Direction.NORTH,
    Signal.EAST: Direction.EAST,
    Signal.SOUTH: Direction.SOUTH,
    Signal.WEST: Direction.WEST,
}


class GameSession:
    """Owns a board and drives it the way an interactive loop would.

    Directional signals steer the snake and start play, :meth:`tick` only
    advances the board while the play screen is active, and a failed
    update moves the session to the game-over screen until it is reset.
    """

    def __init__(self, board: Board | None = None) -> None:
        self.board = board if board is not None else Board()
        self.screen = Screen.TITLE
        self.phase = Phase.NOT_STARTED
        self.ticks = 0
        self.games_played = 0
        self.high_score = 0
        self.finished = False

    def handle(self, signal: Signal) -> bool:
        """Apply one input signal. Returns ``False`` once the session quits."""
        signal = Signal(signal)
        if signal is Signal.QUIT:
            self.finished = True
            logger.info("Session quit after %d game(s).", self.games_played)
            return False

        if signal is Signal.RESET:
            self.reset()
        elif signal is Signal.PAUSE:
            if self.screen is Screen.PLAY:
                self.screen = Screen.PAUSED
            elif self.screen is Screen.PAUSED:
                self.screen = Screen.PLAY
        elif self.screen is not Screen.GAME_OVER:
            self.board.update_snake_dir(_DIRECTIONS[signal])
            self.screen = Screen.PLAY
        return True

    def tick(self) -> bool:
        """Advance the board once if playing.

        Returns ``False`` only on the tick that ends the game.
        """
        if self.finished or self.screen is not Screen.PLAY:
            return True

        try:
            alive = self.board.update()
        except BoardFullError:
            logger.info("Snake filled the board with score %d.", self.board.score)
            alive = False

        self.ticks += 1
        if self.board.get_snake().get_direction() is not None:
            self.phase = Phase.RUNNING
        if not alive:
            self._end_game()
        return alive

    def reset(self) -> None:
        """Start a fresh game on the same board."""
        self.board.reset()
        self.screen = Screen.TITLE
        self.phase = Phase.NOT_STARTED

    def _end_game(self) -> None:
        self.phase = Phase.OVER
        self.screen = Screen.GAME_OVER
        self.games_played += 1
        self.high_score = max(self.high_score, self.board.score)
        logger.info(
            "Game over at tick %d with score %d.", self.ticks, self.board.score,
        )

    def to_dict(self) -> dict:
        """Return the session and board state as a serializable dict."""
        return {
            "screen": self.screen.value,
            "phase": self.phase.value,
            "ticks": self.ticks,
            "games_played": self.games_played,
            "high_score": self.high_score,
            "board": self.board.to_dict(),
        }
