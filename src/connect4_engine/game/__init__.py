"""
Connect Four board state and rules.
"""

from connect4_engine.game.board import (
    Player, InvalidMove, empty_board, from_rows, legal_columns,
    lowest_empty_row, apply_move, filled_count, render,
)
from connect4_engine.game.rules import winning_line, winner, is_terminal

__all__ = [
    'Player',
    'InvalidMove',
    'empty_board',
    'from_rows',
    'legal_columns',
    'lowest_empty_row',
    'apply_move',
    'filled_count',
    'render',
    'winning_line',
    'winner',
    'is_terminal',
]
