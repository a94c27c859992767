"""Tests for the Board module."""

import json

import numpy as np
import pytest

from snek.board import Board
from snek.config import BoardConfig
from snek.food import BoardFullError
from snek.grid import COORD_MODULUS, CellType, GridCoord
from snek.snake import Direction


def _eat_ahead(board: Board) -> None:
    """Put the food directly in front of the snake and take one tick."""
    board.food_loc = board.snake.get_next_head_location()
    assert board.update()


def _snapshot(board: Board) -> tuple:
    snake = board.get_snake()
    return (
        snake.get_head(), snake.get_body(),
        snake.get_direction(), board.get_food_loc(),
    )


class TestBoardInit:
    def test_default_init(self):
        board = Board(seed=0)
        assert board.get_grid_size() == 20
        assert board.init_snake_coords == (9, 9)
        assert board.get_snake().get_body() == ((9, 9),)
        assert board.get_snake().get_direction() is None
        assert board.score == 0

    def test_food_spawned_on_init(self):
        board = Board(seed=0)
        food = board.get_food_loc()
        assert 0 <= food.x < 20 and 0 <= food.y < 20
        assert not board.get_snake().has_snake(food)

    def test_custom_spawn(self):
        board = Board(grid_size=8, init_snake_coords=(0, 7), seed=0)
        assert board.get_snake().get_head() == (0, 7)

    def test_zero_grid_rejected(self):
        with pytest.raises(ValueError, match="at least 2"):
            Board(grid_size=0)

    def test_spawn_outside_grid_rejected(self):
        with pytest.raises(ValueError, match="outside"):
            Board(grid_size=10, init_snake_coords=(10, 0))

    def test_single_cell_grid_rejected(self):
        with pytest.raises(ValueError, match="at least 2"):
            Board(grid_size=1)

    def test_from_config(self):
        cfg = BoardConfig(grid_size=12, init_snake_coords=(3, 4), seed=5)
        board = Board.from_config(cfg)
        assert board.get_grid_size() == 12
        assert board.init_snake_coords == (3, 4)
        assert board.get_food_loc() == Board(12, (3, 4), seed=5).get_food_loc()


class TestWillCollide:
    def test_walls(self):
        board = Board(grid_size=10, seed=0)
        assert board.will_collide(GridCoord(10, 3))
        assert board.will_collide(GridCoord(3, 10))
        assert not board.will_collide(GridCoord(9, 9))
        assert not board.will_collide(GridCoord(0, 0))

    def test_wrapped_negative_move_hits_wall(self):
        board = Board(grid_size=10, seed=0)
        assert board.will_collide(GridCoord(COORD_MODULUS - 1, 0))

    def test_negative_coordinates_hit_wall(self):
        board = Board(grid_size=10, seed=0)
        assert board.will_collide((-1, 0))
        assert board.will_collide(GridCoord(0, -1))

    def test_body(self):
        board = Board(seed=0)
        board.update_snake_dir(Direction.EAST)
        _eat_ahead(board)
        for cell in board.get_snake().get_body():
            assert board.will_collide(cell)


class TestTurnLegality:
    def test_single_segment_may_reverse(self):
        board = Board(seed=0)
        board.update_snake_dir(Direction.EAST)
        board.update_snake_dir(Direction.WEST)
        assert board.get_snake().get_direction() == Direction.WEST

    def test_reversal_blocked_with_body(self):
        board = Board(seed=0)
        board.update_snake_dir(Direction.NORTH)
        _eat_ahead(board)
        board.update_snake_dir(Direction.SOUTH)
        assert board.get_snake().get_direction() == Direction.NORTH

    @pytest.mark.parametrize("turn", [Direction.EAST, Direction.WEST])
    def test_quarter_turns_allowed(self, turn):
        board = Board(seed=0)
        board.update_snake_dir(Direction.NORTH)
        _eat_ahead(board)
        board.update_snake_dir(turn)
        assert board.get_snake().get_direction() == turn

    def test_east_west_reversal_blocked(self):
        board = Board(seed=0)
        board.update_snake_dir(Direction.EAST)
        _eat_ahead(board)
        board.update_snake_dir(Direction.WEST)
        assert board.get_snake().get_direction() == Direction.EAST

    def test_west_to_north_allowed(self):
        board = Board(seed=0)
        board.update_snake_dir(Direction.WEST)
        _eat_ahead(board)
        board.update_snake_dir(Direction.NORTH)
        assert board.get_snake().get_direction() == Direction.NORTH


class TestBoardUpdate:
    def test_idle_snake_does_not_move(self):
        board = Board(seed=0)
        before = _snapshot(board)
        assert board.update()
        assert _snapshot(board) == before

    def test_eats_food_scenario(self):
        board = Board(grid_size=20, init_snake_coords=(9, 9), seed=0)
        board.update_snake_dir(Direction.EAST)
        board.food_loc = GridCoord(15, 9)
        for _ in range(5):
            assert board.update()
            assert len(board.get_snake()) == 1
        assert board.get_snake().get_head() == (14, 9)

        assert board.update()
        assert board.get_snake().get_head() == (15, 9)
        assert len(board.get_snake()) == 2
        assert board.score == 1
        assert board.get_food_loc() not in board.get_snake().get_body()

    def test_east_wall_collision(self):
        board = Board(grid_size=20, init_snake_coords=(19, 5), seed=0)
        board.update_snake_dir(Direction.EAST)
        before = _snapshot(board)
        assert not board.update()
        assert _snapshot(board) == before

    def test_north_wall_collision_via_wraparound(self):
        board = Board(grid_size=20, init_snake_coords=(4, 0), seed=0)
        board.update_snake_dir(Direction.NORTH)
        assert not board.update()
        assert board.get_snake().get_head() == (4, 0)

    def test_self_collision_leaves_state_untouched(self):
        board = Board(grid_size=20, init_snake_coords=(5, 5), seed=3)
        board.update_snake_dir(Direction.EAST)
        for _ in range(4):
            _eat_ahead(board)
        assert len(board.get_snake()) == 5

        for turn in (Direction.SOUTH, Direction.WEST):
            board.update_snake_dir(turn)
            board.food_loc = GridCoord(0, 19)
            assert board.update()

        board.update_snake_dir(Direction.NORTH)
        before = _snapshot(board)
        assert not board.update()
        assert _snapshot(board) == before

    def test_following_the_tail_counts_as_collision(self):
        board = Board(grid_size=20, init_snake_coords=(5, 5), seed=0)
        board.update_snake_dir(Direction.EAST)
        _eat_ahead(board)
        board.update_snake_dir(Direction.SOUTH)
        _eat_ahead(board)
        board.update_snake_dir(Direction.WEST)
        _eat_ahead(board)
        assert board.get_snake().get_body() == ((5, 5), (6, 5), (6, 6), (5, 6))

        board.update_snake_dir(Direction.NORTH)
        board.food_loc = GridCoord(0, 19)
        assert board.will_collide(board.get_snake().get_next_head_location())
        assert not board.update()

    def test_food_invariant_holds_over_random_play(self):
        board = Board(grid_size=6, seed=11)
        rng = np.random.default_rng(11)
        for _ in range(300):
            board.update_snake_dir(Direction(int(rng.integers(4))))
            if not board.update():
                assert board.reset()
            food = board.get_food_loc()
            assert 0 <= food.x < 6 and 0 <= food.y < 6
            assert not board.get_snake().has_snake(food)
            assert board.get_snake().get_body()[-1] == board.get_snake().get_head()


    def test_eating_the_last_free_cell_raises_without_moving(self):
        board = Board(grid_size=2, init_snake_coords=(0, 0), seed=0)
        for turn in (Direction.EAST, Direction.SOUTH):
            board.update_snake_dir(turn)
            _eat_ahead(board)
        board.update_snake_dir(Direction.WEST)
        board.food_loc = board.get_snake().get_next_head_location()
        before = _snapshot(board)

        with pytest.raises(BoardFullError, match="fill"):
            board.update()
        assert _snapshot(board) == before
        assert not board.get_snake().has_snake(board.get_food_loc())


class TestBoardReset:
    def test_reset_replaces_snake(self):
        board = Board(grid_size=20, init_snake_coords=(5, 5), seed=0)
        board.update_snake_dir(Direction.EAST)
        _eat_ahead(board)
        old_snake = board.get_snake()

        assert board.reset() is True
        snake = board.get_snake()
        assert snake is not old_snake
        assert snake.get_body() == ((5, 5),)
        assert snake.get_direction() is None
        assert board.score == 0
        assert not snake.has_snake(board.get_food_loc())


class TestBoardQueries:
    def test_get_grid(self):
        board = Board(grid_size=10, init_snake_coords=(2, 3), seed=0)
        cells = board.get_grid()
        assert cells.shape == (10, 10)
        assert cells[3, 2] == CellType.SNAKE
        food = board.get_food_loc()
        assert cells[food.y, food.x] == CellType.FOOD

    def test_state_is_json_serializable(self):
        board = Board(grid_size=10, seed=42)
        board.update_snake_dir(Direction.SOUTH)
        board.update()
        state = board.to_dict()
        assert isinstance(json.dumps(state), str)
        assert state["grid_size"] == 10
        assert state["snake"]["direction"] == "south"


class TestBoardDeterminism:
    def test_same_seed_same_food(self):
        assert Board(seed=123).get_food_loc() == Board(seed=123).get_food_loc()

    def test_same_seed_same_outcome(self):
        actions = [
            Direction.EAST, Direction.EAST, Direction.SOUTH,
            Direction.SOUTH, Direction.WEST,
        ]
        assert self._run_game(123, actions) == self._run_game(123, actions)

    @staticmethod
    def _run_game(seed: int, actions: list[Direction]) -> dict:
        board = Board(seed=seed)
        for action in actions:
            board.update_snake_dir(action)
            board.update()
        return board.to_dict()
