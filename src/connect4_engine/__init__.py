"""
Connect Four decision engine: board rules, heuristic evaluation, alpha-beta
search, difficulty-tiered move selection and move quality rating.
"""

__version__ = "0.1.0"
