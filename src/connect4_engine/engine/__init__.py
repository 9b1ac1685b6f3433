"""
Search and evaluation engine for Connect Four.

This module contains the decision-making components:
- Static heuristic evaluation over all 4-cell windows
- Center-first move ordering
- Minimax search with alpha-beta pruning
- Difficulty-tiered move selection (easy / medium / hard)
- Move quality rating and hints
"""

from connect4_engine.engine.evaluator import evaluate
from connect4_engine.engine.move_ordering import order_moves
from connect4_engine.engine.minimax import AlphaBetaEngine, SearchResult, search
from connect4_engine.engine.policy import DifficultyTier, find_winning_move, search_depth_for, select_move
from connect4_engine.engine.quality import MoveQuality, MoveRating, rate_move
from connect4_engine.engine.hints import Hint, HintReason, suggest_move

__all__ = [
    'evaluate',
    'order_moves',
    'AlphaBetaEngine',
    'SearchResult',
    'search',
    'DifficultyTier',
    'find_winning_move',
    'search_depth_for',
    'select_move',
    'MoveQuality',
    'MoveRating',
    'rate_move',
    'Hint',
    'HintReason',
    'suggest_move',
]
