"""
Configuration for the Connect Four engine.

Board geometry and scoring constants are fixed at import time; nothing here
is loaded at runtime.
"""

from dataclasses import dataclass


# Board geometry
ROWS = 6
COLS = 7
WIN_LENGTH = 4
CENTER_COL = COLS // 2      # Column 3
MAX_MOVES = ROWS * COLS     # 42 cells

# Cell values
EMPTY = 0


# Heuristic weights (empirically chosen, treat as tunable)
@dataclass(frozen=True)
class HeuristicWeights:
    center: int = 3               # Per own marker in the center column
    four: int = 10000             # Four own markers in a window
    three: int = 100              # Three own + one empty
    two: int = 10                 # Two own + two empty
    opp_three: int = -120         # Opponent three + one empty (heavier than +100 to favor blocking)
    opp_two: int = -8             # Opponent two + two empty

DEFAULT_WEIGHTS = HeuristicWeights()


# Search scoring
# Terminal win/loss scores are biased by the remaining depth:
#   win  ->  WIN_SCORE + depth   (faster wins score higher)
#   loss -> -(WIN_SCORE + depth) (slower losses score less negative)
WIN_SCORE = 1_000_000
DRAW_SCORE = 0


# AI configuration
AI_CONFIG = {
    'hard_opening_depth': 4,        # Depth while few markers are on the board
    'hard_depth': 3,                # Depth once the board fills up
    'opening_fill_threshold': 8,    # Opening depth applies while filled cells <= this
}


# Move quality scoring
QUALITY_CONFIG = {
    'winning_move_score': 1_000_000,
    'blocking_move_score': 500_000,
    'excellent_gap': 10,            # best - played <= 10 -> excellent
    'good_gap': 50,                 # <= 50 -> good
    'okay_gap': 150,                # <= 150 -> okay, otherwise poor
}
