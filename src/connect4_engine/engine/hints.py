"""
Human-readable move suggestions.

The suggested column comes from the same policy the AI plays with; the
message explains whether it wins, blocks, or is a positional choice.
Columns in messages are 1-based, as players see them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np

from connect4_engine.game.board import Player, apply_move
from connect4_engine.game.rules import winning_line
from connect4_engine.engine.policy import DifficultyTier, find_winning_move, select_move


class HintReason(Enum):
    WIN = "win"
    BLOCK = "block"
    STRATEGIC = "strategic"
    NONE = "none"


_SUFFIXES = {
    HintReason.WIN: "Winning move!",
    HintReason.BLOCK: "Blocks opponent!",
    HintReason.STRATEGIC: "Strategic position",
}


@dataclass
class Hint:
    column: Optional[int]
    reason: HintReason
    message: str


def suggest_move(
    board: np.ndarray,
    player: Player,
    tier: DifficultyTier = DifficultyTier.HARD,
    rng=None,
) -> Hint:
    """
    Suggest a column for `player`.

    Args:
        board: Current board
        player: Player asking for the hint
        tier: Policy used to pick the column
        rng: Random source passed through to the policy

    Returns:
        Hint with the column, the reason and a display message
    """
    col = select_move(board, player, tier, rng=rng)
    if col is None:
        return Hint(None, HintReason.NONE, "No valid moves available!")

    if winning_line(apply_move(board, col, player), player) is not None:
        reason = HintReason.WIN
    elif find_winning_move(board, player.opponent) == col:
        reason = HintReason.BLOCK
    else:
        reason = HintReason.STRATEGIC

    return Hint(col, reason, f"Try column {col + 1} - {_SUFFIXES[reason]}")
