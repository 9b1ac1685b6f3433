"""
Board representation and gravity-based transitions for Connect Four.

Board: 6 rows x 7 columns numpy array (int8)
Row 0 is the TOP of the board, row 5 is the BOTTOM.
Values: 0 = empty, 1 = Player.ONE, 2 = Player.TWO
"""

from enum import IntEnum
from typing import List, Optional, Sequence

import numpy as np

from connect4_engine.config import ROWS, COLS, EMPTY


class Player(IntEnum):
    """The two seats. The value is the marker stored in the board."""
    ONE = 1
    TWO = 2

    @property
    def opponent(self) -> 'Player':
        return Player.TWO if self is Player.ONE else Player.ONE

    @property
    def label(self) -> str:
        return "Player 1" if self is Player.ONE else "Player 2"


class InvalidMove(ValueError):
    """Raised when a move targets a full or non-existent column."""

    def __init__(self, column: int, reason: str = "is full"):
        self.column = column
        super().__init__(f"Column {column} {reason}")


def empty_board() -> np.ndarray:
    """Returns a board with every cell empty."""
    return np.zeros((ROWS, COLS), dtype=np.int8)


def from_rows(rows: Sequence[Sequence[int]]) -> np.ndarray:
    """
    Build a board from nested lists (row 0 first).

    Args:
        rows: 6 sequences of 7 cell values each

    Returns:
        Board array

    Raises:
        ValueError: if the shape or cell values are wrong
    """
    board = np.array(rows, dtype=np.int8)
    if board.shape != (ROWS, COLS):
        raise ValueError(f"Expected a {ROWS}x{COLS} grid, got shape {board.shape}")
    if not np.isin(board, (EMPTY, Player.ONE, Player.TWO)).all():
        raise ValueError("Cell values must be 0, 1 or 2")
    return board


def legal_columns(board: np.ndarray) -> List[int]:
    """
    Returns column indices (ascending) whose top cell is empty.

    An empty list means the board is full.
    """
    return [int(c) for c in np.flatnonzero(board[0] == EMPTY)]


def lowest_empty_row(board: np.ndarray, col: int) -> Optional[int]:
    """
    Row of the first empty cell scanning from the bottom up, or None if full.

    Raises:
        InvalidMove: if the column is out of range
    """
    if not 0 <= col < COLS:
        raise InvalidMove(col, reason="is out of range")
    for row in range(ROWS - 1, -1, -1):
        if board[row, col] == EMPTY:
            return row
    return None


def apply_move(board: np.ndarray, col: int, player: Player) -> np.ndarray:
    """
    Drop a marker for `player` into column `col`.

    The input board is left untouched; a new board is returned.

    Args:
        board: Current board
        col: Column index (0 to COLS-1)
        player: Player making the move

    Returns:
        New board with the marker placed

    Raises:
        InvalidMove: if the column is out of range or full
    """
    row = lowest_empty_row(board, col)
    if row is None:
        raise InvalidMove(col)

    next_board = board.copy()
    next_board[row, col] = player
    return next_board


def filled_count(board: np.ndarray) -> int:
    return int(np.count_nonzero(board))


def render(board: np.ndarray) -> str:
    """ASCII rendering with 1-based column numbers, as shown to players."""
    symbols = {EMPTY: ".", Player.ONE: "X", Player.TWO: "O"}
    header = "  " + " ".join(str(c + 1) for c in range(COLS))
    lines = [header]
    for row in board:
        lines.append("| " + " ".join(symbols[int(cell)] for cell in row) + " |")
    lines.append("  " + "-" * (COLS * 2 - 1))
    return "\n".join(lines)
