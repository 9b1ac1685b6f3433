"""
Depth-limited minimax search with alpha-beta pruning.

Algorithm overview:

    def minimax(board, depth, alpha, beta, maximizing):
        if terminal(board):
            return win/loss score biased by depth, or 0 for a draw
        if depth == 0:
            return evaluate(board, root_player)

        for col in center_ordered(legal_columns(board)):
            child = apply_move(board, col, mover)     # copy, never mutate
            score = minimax(child, depth - 1, alpha, beta, not maximizing)
            keep the first strictly better score
            tighten alpha (max layer) or beta (min layer)
            if alpha >= beta:
                break                                 # cutoff

Scores are always from the root player's perspective. Terminal wins are
worth WIN_SCORE + depth, so with more plies remaining (a faster win) the
score is higher, and a loss further away is less negative.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from connect4_engine.config import WIN_SCORE, DRAW_SCORE, HeuristicWeights, DEFAULT_WEIGHTS
from connect4_engine.game.board import Player, legal_columns, apply_move
from connect4_engine.game.rules import winning_line
from connect4_engine.engine.evaluator import evaluate
from connect4_engine.engine.move_ordering import order_moves

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    """Result of a minimax search."""
    column: Optional[int]
    score: int
    depth: int = 0
    nodes_searched: int = 0


class AlphaBetaEngine:
    """
    Minimax search engine with alpha-beta pruning.

    The engine holds no board state between searches, only statistics for
    the most recent one.
    """

    def __init__(self, weights: HeuristicWeights = DEFAULT_WEIGHTS):
        """
        Initialize the engine.

        Args:
            weights: Heuristic weights used at leaf nodes
        """
        self.weights = weights
        self.nodes_searched = 0

    def search(self, board: np.ndarray, depth: int, player: Player) -> SearchResult:
        """
        Main search entry point.

        Args:
            board: Current board (not modified)
            depth: Plies to search ahead
            player: Player to move; scores are from this player's perspective

        Returns:
            SearchResult with the chosen column (None at a terminal position,
            a full board, or depth 0) and its score
        """
        if depth < 0:
            raise ValueError(f"Search depth must be non-negative, got {depth}")

        self.nodes_searched = 0
        column, score = self._minimax(board, depth, -math.inf, math.inf, True, player)

        logger.debug(
            "search depth=%d player=%d -> column=%s score=%s nodes=%d",
            depth, player, column, score, self.nodes_searched,
        )
        return SearchResult(column=column, score=int(score), depth=depth, nodes_searched=self.nodes_searched)

    def _terminal_score(self, board: np.ndarray, depth: int, player: Player) -> Optional[int]:
        """Score of a finished game, or None if the game is still running."""
        for side in (Player.ONE, Player.TWO):
            if winning_line(board, side) is not None:
                return WIN_SCORE + depth if side == player else -(WIN_SCORE + depth)
        if not legal_columns(board):
            return DRAW_SCORE
        return None

    def _minimax(
        self,
        board: np.ndarray,
        depth: int,
        alpha: float,
        beta: float,
        maximizing: bool,
        player: Player,
    ) -> Tuple[Optional[int], float]:
        """
        Recursive minimax with alpha-beta bounds.

        Args:
            board: Board at this node
            depth: Remaining depth
            alpha: Best score the maximizer can already guarantee
            beta: Best score the minimizer can already guarantee
            maximizing: True on the root player's layers
            player: Root player

        Returns:
            (best column or None, score)
        """
        self.nodes_searched += 1

        terminal = self._terminal_score(board, depth, player)
        if terminal is not None:
            return None, terminal

        if depth == 0:
            return None, evaluate(board, player, self.weights)

        moves = order_moves(legal_columns(board))
        mover = player if maximizing else player.opponent
        best_col = moves[0]

        if maximizing:
            value = -math.inf
            for col in moves:
                child = apply_move(board, col, mover)
                _, score = self._minimax(child, depth - 1, alpha, beta, False, player)
                if score > value:
                    value = score
                    best_col = col
                alpha = max(alpha, value)
                if alpha >= beta:
                    break
        else:
            value = math.inf
            for col in moves:
                child = apply_move(board, col, mover)
                _, score = self._minimax(child, depth - 1, alpha, beta, True, player)
                if score < value:
                    value = score
                    best_col = col
                beta = min(beta, value)
                if alpha >= beta:
                    break

        return best_col, value


def search(board: np.ndarray, depth: int, player: Player) -> SearchResult:
    """Run a one-off search with a fresh engine."""
    return AlphaBetaEngine().search(board, depth, player)
