"""
Unit tests for static evaluation and move ordering.
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / 'src'))

from connect4_engine.config import HeuristicWeights
from connect4_engine.game.board import Player, empty_board, apply_move
from connect4_engine.engine.evaluator import (
    WINDOW_ROWS, center_score, window_scores, evaluate,
)
from connect4_engine.engine.move_ordering import order_moves


def swap_owners(board):
    swapped = board.copy()
    swapped[board == Player.ONE] = Player.TWO
    swapped[board == Player.TWO] = Player.ONE
    return swapped


class TestEvaluator:
    """Test heuristic window scoring."""

    def test_window_count(self):
        # 24 horizontal + 21 vertical + 12 + 12 diagonal
        assert WINDOW_ROWS.shape == (69, 4)

    def test_empty_board_scores_zero(self):
        board = empty_board()
        assert evaluate(board, Player.ONE) == 0
        assert evaluate(board, Player.TWO) == 0

    def test_center_marker(self):
        board = apply_move(empty_board(), 3, Player.ONE)
        assert evaluate(board, Player.ONE) == 3
        assert evaluate(board, Player.TWO) == 0

    def test_two_in_a_row(self):
        # X X _ _ _ _ _  (row 5)
        board = empty_board()
        board = apply_move(board, 0, Player.ONE)
        board = apply_move(board, 1, Player.ONE)
        assert evaluate(board, Player.ONE) == 10
        assert evaluate(board, Player.TWO) == -8

    def test_three_in_a_row(self):
        # X X X _ _ _ _  (row 5): one window 3+1 empty, one window 2+2 empty
        board = empty_board()
        for col in range(3):
            board = apply_move(board, col, Player.ONE)
        assert evaluate(board, Player.ONE) == 110
        assert evaluate(board, Player.TWO) == -128

    def test_four_in_a_row_window(self):
        board = empty_board()
        for col in range(4):
            board = apply_move(board, col, Player.ONE)
        scores = window_scores(board, Player.ONE)
        assert (scores == 10000).sum() == 1

    def test_mixed_windows_score_zero(self):
        # X X O _ _ _ _  (row 5)
        board = empty_board()
        board = apply_move(board, 0, Player.ONE)
        board = apply_move(board, 1, Player.ONE)
        board = apply_move(board, 2, Player.TWO)
        assert evaluate(board, Player.ONE) == 0

    def test_center_scoring_symmetric(self):
        board = empty_board()
        for player in (Player.ONE, Player.TWO, Player.ONE, Player.ONE):
            board = apply_move(board, 3, player)
        board = apply_move(board, 1, Player.TWO)

        swapped = swap_owners(board)
        assert center_score(board, Player.ONE) == center_score(swapped, Player.TWO) == 9
        assert center_score(board, Player.TWO) == center_score(swapped, Player.ONE) == 3

    def test_custom_weights(self):
        board = apply_move(empty_board(), 3, Player.ONE)
        assert evaluate(board, Player.ONE, HeuristicWeights(center=5)) == 5

    def test_evaluate_returns_python_int(self):
        board = apply_move(empty_board(), 3, Player.ONE)
        assert type(evaluate(board, Player.ONE)) is int


class TestMoveOrdering:

    def test_center_first(self):
        assert order_moves(range(7)) == [3, 2, 4, 1, 5, 0, 6]

    def test_subset_keeps_left_first(self):
        assert order_moves([0, 1, 5, 6]) == [1, 5, 0, 6]

    def test_empty(self):
        assert order_moves([]) == []
