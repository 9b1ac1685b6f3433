"""
Move ordering for alpha-beta search.

Searching center columns first finds strong moves early and maximizes
cutoffs. Ordering never changes the value of a search, only its speed.
"""

from typing import Iterable, List

from connect4_engine.config import CENTER_COL


def center_distance(col: int) -> int:
    return abs(col - CENTER_COL)


def order_moves(columns: Iterable[int]) -> List[int]:
    """
    Sort columns by ascending distance from the center.

    The sort is stable, so with ascending input the left column of each
    equidistant pair comes first: 3, 2, 4, 1, 5, 0, 6.
    """
    return sorted(columns, key=center_distance)
