"""
Move selection for the three AI difficulty tiers.

    easy   -> uniform random legal column
    medium -> win if possible, else block, else best one-ply evaluation
    hard   -> win if possible, else block, else alpha-beta search

Selection is state-free: every call receives the board and player it decides
for. The random source is injectable so callers can make play reproducible.
"""

import logging
from enum import Enum
from typing import Optional

import numpy as np

from connect4_engine.config import AI_CONFIG
from connect4_engine.game.board import Player, legal_columns, apply_move, filled_count
from connect4_engine.game.rules import winning_line
from connect4_engine.engine.evaluator import evaluate
from connect4_engine.engine.minimax import search
from connect4_engine.engine.move_ordering import order_moves

logger = logging.getLogger(__name__)


class DifficultyTier(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def from_name(cls, name: str) -> 'DifficultyTier':
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ", ".join(t.value for t in cls)
            raise ValueError(f"Unknown difficulty '{name}' (choose from {choices})") from None


def find_winning_move(board: np.ndarray, for_player: Player) -> Optional[int]:
    """
    First column (ascending) where `for_player` completes four in a row.

    Args:
        board: Current board
        for_player: Player whose immediate win we look for

    Returns:
        Column index or None
    """
    for col in legal_columns(board):
        if winning_line(apply_move(board, col, for_player), for_player) is not None:
            return col
    return None


def search_depth_for(board: np.ndarray) -> int:
    """Depth schedule for the hard tier: deeper while the board is nearly empty."""
    if filled_count(board) <= AI_CONFIG['opening_fill_threshold']:
        return AI_CONFIG['hard_opening_depth']
    return AI_CONFIG['hard_depth']


def _random_move(board: np.ndarray, rng) -> Optional[int]:
    columns = legal_columns(board)
    if not columns:
        return None
    return int(rng.choice(columns))


def _tactical_move(board: np.ndarray, player: Player) -> Optional[int]:
    """Immediate win, else the block of the opponent's immediate win."""
    win = find_winning_move(board, player)
    if win is not None:
        logger.debug("player %d wins at column %d", player, win)
        return win

    block = find_winning_move(board, player.opponent)
    if block is not None:
        logger.debug("player %d blocks at column %d", player, block)
    return block


def _greedy_move(board: np.ndarray, player: Player) -> Optional[int]:
    best_col, best_score = None, None
    for col in order_moves(legal_columns(board)):
        score = evaluate(apply_move(board, col, player), player)
        if best_score is None or score > best_score:
            best_col, best_score = col, score
    return best_col


def select_move(
    board: np.ndarray,
    player: Player,
    tier: DifficultyTier,
    rng=None,
    depth: Optional[int] = None,
) -> Optional[int]:
    """
    Choose a column for `player` at the given difficulty.

    Args:
        board: Current board (not modified)
        player: Player to move
        tier: Difficulty tier
        rng: Random source with a `choice` method (numpy Generator by default)
        depth: Search depth override for the hard tier (defaults to the
            fill-count schedule)

    Returns:
        Column index, or None if the board has no legal moves
    """
    if rng is None:
        rng = np.random.default_rng()

    if tier is DifficultyTier.EASY:
        return _random_move(board, rng)

    if tier is DifficultyTier.MEDIUM:
        tactical = _tactical_move(board, player)
        if tactical is not None:
            return tactical
        return _greedy_move(board, player)

    if tier is DifficultyTier.HARD:
        tactical = _tactical_move(board, player)
        if tactical is not None:
            return tactical
        if depth is None:
            depth = search_depth_for(board)
        result = search(board, depth, player)
        if result.column is None:
            logger.debug("search returned no column, falling back to a random move")
            return _random_move(board, rng)
        return result.column

    raise ValueError(f"Unsupported difficulty tier: {tier!r}")
