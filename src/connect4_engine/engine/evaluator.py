"""
Static heuristic evaluation of a Connect Four position.

Score for `player` = center control + sum of window scores.

A window is any 4 contiguous cells along one of the four orientations
(69 windows on a 6x7 board). Each window is scored independently:

    own pieces | empty | score
    -----------+-------+---------
         4     |   0   | +10000
         3     |   1   |   +100
         2     |   2   |    +10
    opponent 3 |   1   |   -120
    opponent 2 |   2   |     -8

Windows holding both players' pieces score 0. The window index arrays are
built once at import time so each evaluation is a single vectorized pass.
"""

import numpy as np

from connect4_engine.config import (
    ROWS, COLS, WIN_LENGTH, CENTER_COL, EMPTY,
    HeuristicWeights, DEFAULT_WEIGHTS,
)
from connect4_engine.game.board import Player


def _build_windows():
    """Returns (row_index, col_index) arrays of shape (n_windows, WIN_LENGTH)."""
    directions = [(0, 1), (1, 0), (1, 1), (-1, 1)]
    windows = []
    for dr, dc in directions:
        for r in range(ROWS):
            for c in range(COLS):
                end_r = r + dr * (WIN_LENGTH - 1)
                end_c = c + dc * (WIN_LENGTH - 1)
                if 0 <= end_r < ROWS and 0 <= end_c < COLS:
                    windows.append([(r + dr * i, c + dc * i) for i in range(WIN_LENGTH)])
    cells = np.array(windows, dtype=np.intp)
    return cells[:, :, 0], cells[:, :, 1]


WINDOW_ROWS, WINDOW_COLS = _build_windows()


def center_score(board: np.ndarray, player: Player, weights: HeuristicWeights = DEFAULT_WEIGHTS) -> int:
    return int(np.count_nonzero(board[:, CENTER_COL] == int(player))) * weights.center


def window_scores(board: np.ndarray, player: Player, weights: HeuristicWeights = DEFAULT_WEIGHTS) -> np.ndarray:
    """
    Score every window for `player`.

    Args:
        board: Board to score
        player: Player whose perspective the scores are in
        weights: Heuristic weights

    Returns:
        int array of length n_windows
    """
    cells = board[WINDOW_ROWS, WINDOW_COLS]
    mine, theirs = int(player), int(player.opponent)
    own = np.count_nonzero(cells == mine, axis=1)
    opp = np.count_nonzero(cells == theirs, axis=1)
    empty = np.count_nonzero(cells == EMPTY, axis=1)

    scores = np.select(
        [own == 4, (own == 3) & (empty == 1), (own == 2) & (empty == 2)],
        [weights.four, weights.three, weights.two],
        default=0,
    )
    scores = scores + np.select(
        [(opp == 3) & (empty == 1), (opp == 2) & (empty == 2)],
        [weights.opp_three, weights.opp_two],
        default=0,
    )
    return scores


def evaluate(board: np.ndarray, player: Player, weights: HeuristicWeights = DEFAULT_WEIGHTS) -> int:
    """
    Heuristic desirability of `board` for `player`.

    Not a termination check: a completed four only contributes its window
    weight here.
    """
    return center_score(board, player, weights) + int(window_scores(board, player, weights).sum())
