"""
Tier-vs-tier tournaments.
"""

import numpy as np
from tqdm import tqdm

from connect4_engine.game.board import Player
from connect4_engine.engine.policy import DifficultyTier
from .match import play_match


def run_tournament(tier_a: DifficultyTier, tier_b: DifficultyTier, num_games=20, seed=None, verbose=True):
    """
    Play num_games between two tiers, alternating who moves first.
    tier_a always sits as Player.ONE, so Player.ONE and Player.TWO take turns
    opening.

    Returns: dict with wins, losses, draws (from tier_a's perspective),
    win_rate and average_moves
    """
    rng = np.random.default_rng(seed)
    wins = 0
    losses = 0
    draws = 0
    total_moves = 0

    iterator = tqdm(range(num_games), desc=f"{tier_a.value} vs {tier_b.value}") if verbose else range(num_games)

    for game_idx in iterator:
        first = Player.ONE if game_idx % 2 == 0 else Player.TWO
        result = play_match(tier_a, tier_b, rng=rng, first_player=first)
        total_moves += len(result.moves)

        if result.winner is Player.ONE:
            wins += 1
        elif result.winner is Player.TWO:
            losses += 1
        else:
            draws += 1

    return {
        'wins': wins,
        'losses': losses,
        'draws': draws,
        'win_rate': wins / num_games if num_games else 0.0,
        'average_moves': total_moves / num_games if num_games else 0.0,
    }
