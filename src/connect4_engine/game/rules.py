"""
Termination rules: four-in-a-row detection and terminal positions.

Terminal status is always re-derived by scanning the 42 cells; nothing is
cached between calls.
"""

from typing import List, Optional, Tuple

import numpy as np

from connect4_engine.config import ROWS, COLS, WIN_LENGTH
from connect4_engine.game.board import Player, legal_columns


Cell = Tuple[int, int]

# (row step, col step) and the range of anchor rows for each orientation,
# in scan order: horizontal, vertical, positive diagonal, negative diagonal
_SCAN_ORDER = [
    ((0, 1), range(0, ROWS)),                   # Horizontal
    ((1, 0), range(0, ROWS - WIN_LENGTH + 1)),  # Vertical (downward from anchor)
    ((1, 1), range(0, ROWS - WIN_LENGTH + 1)),  # Down-right
    ((-1, 1), range(WIN_LENGTH - 1, ROWS)),     # Up-right from a lower anchor
]


def winning_line(board: np.ndarray, player: Player) -> Optional[List[Cell]]:
    """
    Find a four-in-a-row owned by `player`.

    Orientations are scanned horizontal, vertical, positive diagonal, then
    negative diagonal. Within each, anchors go row by row and left to right.

    Args:
        board: Board to scan
        player: Owner to look for

    Returns:
        The first four (row, col) cells found, or None
    """
    for (dr, dc), rows in _SCAN_ORDER:
        col_limit = COLS - (WIN_LENGTH - 1) * dc
        for r in rows:
            for c in range(col_limit):
                cells = [(r + dr * i, c + dc * i) for i in range(WIN_LENGTH)]
                if all(board[cr, cc] == player for cr, cc in cells):
                    return cells
    return None


def winner(board: np.ndarray) -> Optional[Player]:
    """Player owning a four-in-a-row (Player.ONE checked first), or None."""
    for player in (Player.ONE, Player.TWO):
        if winning_line(board, player) is not None:
            return player
    return None


def is_terminal(board: np.ndarray) -> bool:
    """True if either player has four in a row or no column has room."""
    return winner(board) is not None or not legal_columns(board)
