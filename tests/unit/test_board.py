"""
Unit tests for board transitions and termination rules.
"""

import numpy as np
import pytest
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / 'src'))

from connect4_engine.config import ROWS, COLS
from connect4_engine.game.board import (
    Player, InvalidMove, empty_board, from_rows, legal_columns,
    lowest_empty_row, apply_move, filled_count, render,
)
from connect4_engine.game.rules import winning_line, winner, is_terminal


def drawn_board():
    """Full board with no four-in-a-row for either side (21 markers each)."""
    shifts = [0, 1, 1, 0, 0, 1]
    return from_rows([[1 if (c % 2) ^ shifts[r] == 0 else 2 for c in range(COLS)] for r in range(ROWS)])


def random_playout(rng, num_moves):
    board = empty_board()
    player = Player.ONE
    for _ in range(num_moves):
        columns = legal_columns(board)
        if not columns:
            break
        board = apply_move(board, int(rng.choice(columns)), player)
        player = player.opponent
    return board


class TestBoardState:
    """Test board construction and gravity drops."""

    def test_empty_board(self):
        board = empty_board()
        assert board.shape == (ROWS, COLS)
        assert filled_count(board) == 0
        assert legal_columns(board) == list(range(COLS))

    def test_drop_lands_on_bottom(self):
        board = apply_move(empty_board(), 3, Player.ONE)
        assert board[5, 3] == Player.ONE
        assert lowest_empty_row(board, 3) == 4

    def test_drops_stack(self):
        board = empty_board()
        board = apply_move(board, 2, Player.ONE)
        board = apply_move(board, 2, Player.TWO)
        assert board[5, 2] == Player.ONE
        assert board[4, 2] == Player.TWO
        assert filled_count(board) == 2

    def test_apply_move_does_not_mutate_input(self):
        board = empty_board()
        before = board.copy()
        apply_move(board, 0, Player.ONE)
        assert np.array_equal(board, before)

    def test_full_column_raises(self):
        board = empty_board()
        for i in range(ROWS):
            board = apply_move(board, 0, Player.ONE if i % 2 == 0 else Player.TWO)

        assert lowest_empty_row(board, 0) is None
        assert 0 not in legal_columns(board)
        with pytest.raises(InvalidMove):
            apply_move(board, 0, Player.ONE)

    def test_lowest_empty_row_rejects_out_of_range(self):
        with pytest.raises(InvalidMove):
            lowest_empty_row(empty_board(), -1)
        with pytest.raises(InvalidMove):
            lowest_empty_row(empty_board(), COLS)

    def test_out_of_range_column_raises(self):
        with pytest.raises(InvalidMove):
            apply_move(empty_board(), COLS, Player.ONE)
        with pytest.raises(InvalidMove):
            apply_move(empty_board(), -1, Player.ONE)

    def test_invalid_move_is_value_error(self):
        assert issubclass(InvalidMove, ValueError)

    def test_legal_columns_match_top_row(self):
        """Legal columns are exactly the columns with an empty top cell."""
        rng = np.random.default_rng(7)
        for num_moves in range(0, 43, 3):
            board = random_playout(rng, num_moves)
            expected = [c for c in range(COLS) if board[0, c] == 0]
            assert legal_columns(board) == expected

    def test_gravity_invariant_after_every_move(self):
        rng = np.random.default_rng(11)
        board = empty_board()
        player = Player.ONE
        while legal_columns(board):
            col = int(rng.choice(legal_columns(board)))
            row = lowest_empty_row(board, col)
            board = apply_move(board, col, player)
            next_row = lowest_empty_row(board, col)
            assert next_row is None or next_row == row - 1
            # No gaps below any marker
            for c in range(COLS):
                occupied = board[:, c] != 0
                first = np.argmax(occupied) if occupied.any() else ROWS
                assert occupied[first:].all()
            player = player.opponent

    def test_from_rows_validates_shape_and_values(self):
        with pytest.raises(ValueError):
            from_rows([[0] * COLS] * (ROWS - 1))
        with pytest.raises(ValueError):
            from_rows([[3] * COLS] * ROWS)

    def test_render_shows_markers(self):
        board = apply_move(empty_board(), 0, Player.ONE)
        board = apply_move(board, 1, Player.TWO)
        text = render(board)
        assert text.splitlines()[0].split() == [str(c) for c in range(1, COLS + 1)]
        assert "| X O . . . . . |" in text

    def test_player_opponent(self):
        assert Player.ONE.opponent is Player.TWO
        assert Player.TWO.opponent is Player.ONE


class TestRules:
    """Test four-in-a-row detection and terminal positions."""

    def test_no_line_on_empty_board(self):
        board = empty_board()
        assert winning_line(board, Player.ONE) is None
        assert winning_line(board, Player.TWO) is None
        assert not is_terminal(board)

    def test_no_line_with_three_markers(self):
        board = empty_board()
        for col in range(3):
            board = apply_move(board, col, Player.ONE)
        assert winning_line(board, Player.ONE) is None

    def test_horizontal_line(self):
        # X X X X _ _ _  (row 5)
        board = empty_board()
        board[5, 0:4] = Player.ONE
        assert winning_line(board, Player.ONE) == [(5, 0), (5, 1), (5, 2), (5, 3)]
        assert winning_line(board, Player.TWO) is None

    def test_vertical_line(self):
        board = empty_board()
        board[2:6, 4] = Player.TWO
        assert winning_line(board, Player.TWO) == [(2, 4), (3, 4), (4, 4), (5, 4)]

    def test_positive_diagonal_line(self):
        board = empty_board()
        for i in range(4):
            board[2 + i, i] = Player.ONE
        assert winning_line(board, Player.ONE) == [(2, 0), (3, 1), (4, 2), (5, 3)]

    def test_negative_diagonal_line(self):
        board = empty_board()
        for i in range(4):
            board[5 - i, 3 + i] = Player.TWO
        assert winning_line(board, Player.TWO) == [(5, 3), (4, 4), (3, 5), (2, 6)]

    def test_horizontal_found_before_vertical(self):
        board = empty_board()
        board[5, 0:4] = Player.ONE
        board[2:6, 6] = Player.ONE
        assert winning_line(board, Player.ONE) == [(5, 0), (5, 1), (5, 2), (5, 3)]

    def test_upper_row_found_first(self):
        board = empty_board()
        board[5, 0:4] = Player.ONE
        board[4, 2:6] = Player.ONE
        assert winning_line(board, Player.ONE) == [(4, 2), (4, 3), (4, 4), (4, 5)]

    def test_winner_and_terminal(self):
        board = empty_board()
        board[2:6, 0] = Player.TWO
        assert winner(board) is Player.TWO
        assert is_terminal(board)

    def test_full_board_is_draw(self):
        board = drawn_board()
        assert filled_count(board) == 42
        assert winner(board) is None
        assert legal_columns(board) == []
        assert is_terminal(board)
