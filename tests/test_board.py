"""Tests for the Board module."""

import numpy as np
import pytest

from classic_snake.board import Board, CellType, Position, random_position
from classic_snake.snake import Direction


def _all_cells(board):
    return [
        Position(x, y)
        for x in range(board.width)
        for y in range(board.height)
    ]


class TestBoardInit:
    def test_default_dimensions(self):
        board = Board()
        assert board.width == 40
        assert board.height == 40

    def test_minimum_size_enforced(self):
        with pytest.raises(ValueError, match="at least 2"):
            Board(width=1, height=5)
        with pytest.raises(ValueError, match="at least 2"):
            Board(width=5, height=1)

    def test_contains(self):
        board = Board(width=5, height=4)
        assert board.contains(Position(0, 0))
        assert board.contains(Position(4, 3))
        assert not board.contains(Position(5, 0))
        assert not board.contains(Position(0, 4))
        assert not board.contains(Position(-1, 0))


class TestBoardMove:
    def test_unit_steps(self):
        board = Board(width=5, height=5)
        p = Position(2, 2)
        assert board.move(p, Direction.UP) == (2, 1)
        assert board.move(p, Direction.DOWN) == (2, 3)
        assert board.move(p, Direction.LEFT) == (1, 2)
        assert board.move(p, Direction.RIGHT) == (3, 2)

    def test_negative_coordinates_wrap_to_far_edge(self):
        board = Board(width=5, height=7)
        assert board.move(Position(0, 3), Direction.LEFT) == (4, 3)
        assert board.move(Position(3, 0), Direction.UP) == (3, 6)

    def test_overflow_wraps_to_zero(self):
        board = Board(width=5, height=7)
        assert board.move(Position(4, 3), Direction.RIGHT) == (0, 3)
        assert board.move(Position(3, 6), Direction.DOWN) == (3, 0)

    def test_move_returns_position(self):
        board = Board(width=5, height=5)
        result = board.move(Position(0, 0), Direction.LEFT)
        assert isinstance(result, Position)
        assert result.x == 4

    @pytest.mark.parametrize("direction", list(Direction))
    def test_results_always_on_board(self, direction):
        board = Board(width=4, height=3)
        for p in _all_cells(board):
            assert board.contains(board.move(p, direction))

    @pytest.mark.parametrize("direction", list(Direction))
    def test_inverse_move_returns_to_start(self, direction):
        board = Board(width=4, height=3)
        for p in _all_cells(board):
            there = board.move(p, direction)
            assert board.move(there, direction.inverse()) == p


class TestRandomPosition:
    def test_within_bounds(self):
        rng = np.random.default_rng(0)
        for _ in range(200):
            p = random_position(rng, 3, 2)
            assert 0 <= p.x < 3
            assert 0 <= p.y < 2

    def test_deterministic_for_seed(self):
        board = Board(width=40, height=40)
        a = [board.random_position(np.random.default_rng(9)) for _ in range(3)]
        b = [board.random_position(np.random.default_rng(9)) for _ in range(3)]
        assert a == b

    def test_covers_every_cell(self):
        board = Board(width=2, height=2)
        rng = np.random.default_rng(1)
        seen = {board.random_position(rng) for _ in range(200)}
        assert seen == set(_all_cells(board))


class TestOccupancy:
    def test_shape_and_codes(self):
        board = Board(width=5, height=4)
        segments = [Position(2, 1), Position(1, 1)]
        cells = board.occupancy(segments, Position(4, 3))
        assert cells.shape == (4, 5)
        assert cells[1, 2] == CellType.HEAD
        assert cells[1, 1] == CellType.BODY
        assert cells[3, 4] == CellType.FOOD
        assert np.count_nonzero(cells) == 3

    def test_food_drawn_over_body(self):
        board = Board(width=5, height=5)
        segments = [Position(2, 2), Position(1, 2), Position(0, 2)]
        cells = board.occupancy(segments, Position(1, 2))
        assert cells[2, 1] == CellType.FOOD
        assert cells[2, 0] == CellType.BODY

    def test_head_drawn_over_food(self):
        board = Board(width=5, height=5)
        cells = board.occupancy([Position(0, 0)], Position(0, 0))
        assert cells[0, 0] == CellType.HEAD

    def test_empty(self):
        board = Board(width=3, height=3)
        assert np.all(board.occupancy([]) == CellType.EMPTY)

    def test_to_dict(self):
        assert Board(width=6, height=7).to_dict() == {"width": 6, "height": 7}
