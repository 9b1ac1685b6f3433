"""
AI-vs-AI match runner.

The runner owns the canonical board and turn, like a UI would: it asks the
policy for a column, rates the move against the pre-move board, applies it,
and stops on four in a row or a full board.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np

from connect4_engine.game.board import Player, apply_move, empty_board, lowest_empty_row, InvalidMove
from connect4_engine.game.rules import winning_line
from connect4_engine.engine.policy import DifficultyTier, select_move
from connect4_engine.engine.quality import MoveQuality, rate_move

logger = logging.getLogger(__name__)


@dataclass
class MoveRecord:
    move_number: int
    player: Player
    column: int
    row: int
    quality: MoveQuality
    score: int


@dataclass
class MatchResult:
    winner: Optional[Player]
    winning_line: Optional[List[Tuple[int, int]]]
    moves: List[MoveRecord] = field(default_factory=list)
    board: Optional[np.ndarray] = None

    @property
    def is_draw(self) -> bool:
        return self.winner is None


def annotate_move(board: np.ndarray, player: Player, column: int, move_number: int) -> MoveRecord:
    """
    Build the history entry for a move that is about to be played.

    Args:
        board: Board BEFORE the move
        player: Player making the move
        column: Chosen column
        move_number: 1-based move number

    Raises:
        InvalidMove: if the column is full or out of range
    """
    row = lowest_empty_row(board, column)
    if row is None:
        raise InvalidMove(column)
    rating = rate_move(board, player, column)
    return MoveRecord(move_number, player, column, row, rating.quality, rating.score)


def play_match(
    tier_one: DifficultyTier,
    tier_two: DifficultyTier,
    rng=None,
    first_player: Player = Player.ONE,
) -> MatchResult:
    """
    Play one game between two AI tiers.

    Args:
        tier_one: Tier controlling Player.ONE
        tier_two: Tier controlling Player.TWO
        rng: Random source shared by both seats
        first_player: Player who moves first

    Returns:
        MatchResult with the winner (None for a draw) and annotated history
    """
    if rng is None:
        rng = np.random.default_rng()

    tiers = {Player.ONE: tier_one, Player.TWO: tier_two}
    board = empty_board()
    player = first_player
    moves = []

    while True:
        column = select_move(board, player, tiers[player], rng=rng)
        if column is None:
            logger.debug("draw after %d moves", len(moves))
            return MatchResult(winner=None, winning_line=None, moves=moves, board=board)

        record = annotate_move(board, player, column, len(moves) + 1)
        moves.append(record)
        board = apply_move(board, column, player)
        logger.debug(
            "move %d: %s (%s) -> column %d [%s]",
            record.move_number, player.label, tiers[player].value, column, record.quality.value,
        )

        line = winning_line(board, player)
        if line is not None:
            logger.debug("%s wins after %d moves", player.label, len(moves))
            return MatchResult(winner=player, winning_line=line, moves=moves, board=board)

        player = player.opponent
