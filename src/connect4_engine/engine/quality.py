"""
Post-hoc rating of a played move.

The move is scored against the board as it was BEFORE the move, relative to
the best alternative available at that position:

    winning move            -> 1,000,000
    blocks opponent's win   ->   500,000
    anything else           -> evaluate(board after the move)

Rating from the gap (best - played): <= 10 excellent, <= 50 good,
<= 150 okay, otherwise poor. Winning and blocking moves are always excellent.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict

import numpy as np

from connect4_engine.config import QUALITY_CONFIG
from connect4_engine.game.board import Player, legal_columns, apply_move
from connect4_engine.game.rules import winning_line
from connect4_engine.engine.evaluator import evaluate
from connect4_engine.engine.policy import find_winning_move


class MoveQuality(Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    OKAY = "okay"
    POOR = "poor"
    NEUTRAL = "neutral"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    MoveQuality.EXCELLENT: "Excellent move!",
    MoveQuality.GOOD: "Good move",
    MoveQuality.OKAY: "Okay move",
    MoveQuality.POOR: "Poor move",
    MoveQuality.NEUTRAL: "Neutral",
}


@dataclass
class MoveRating:
    quality: MoveQuality
    score: int


NEUTRAL_RATING = MoveRating(MoveQuality.NEUTRAL, 0)


def score_moves(board: np.ndarray, player: Player) -> Dict[int, int]:
    """
    Score every legal column for `player` on the pre-move board.

    Returns:
        {column: score} for each legal column
    """
    opponent_win = find_winning_move(board, player.opponent)
    scores = {}
    for col in legal_columns(board):
        next_board = apply_move(board, col, player)
        if winning_line(next_board, player) is not None:
            scores[col] = QUALITY_CONFIG['winning_move_score']
        elif col == opponent_win:
            scores[col] = QUALITY_CONFIG['blocking_move_score']
        else:
            scores[col] = evaluate(next_board, player)
    return scores


def classify(best: int, played: int) -> MoveQuality:
    if played >= QUALITY_CONFIG['blocking_move_score']:
        return MoveQuality.EXCELLENT

    gap = best - played
    if gap <= QUALITY_CONFIG['excellent_gap']:
        return MoveQuality.EXCELLENT
    if gap <= QUALITY_CONFIG['good_gap']:
        return MoveQuality.GOOD
    if gap <= QUALITY_CONFIG['okay_gap']:
        return MoveQuality.OKAY
    return MoveQuality.POOR


def rate_move(board: np.ndarray, player: Player, played_column: int) -> MoveRating:
    """
    Rate `played_column` for `player`.

    Args:
        board: Board BEFORE the move was applied
        player: Player who made the move
        played_column: Column the player chose

    Returns:
        MoveRating; neutral with score 0 when there are no legal moves or the
        column was not legal
    """
    scores = score_moves(board, player)
    if not scores or played_column not in scores:
        return NEUTRAL_RATING

    played = scores[played_column]
    best = max(scores.values())
    return MoveRating(classify(best, played), played)
