"""
Headless play: single AI-vs-AI matches and tier-vs-tier tournaments.
"""
from .match import MoveRecord, MatchResult, annotate_move, play_match
from .tournament import run_tournament

__all__ = ['MoveRecord', 'MatchResult', 'annotate_move', 'play_match', 'run_tournament']
