"""
Position strings for tic-tac-toe boards.

A position string has 9 characters, one per cell in row-major order:
'x' for a mark by x, 'o' for a mark by o and '.' for an empty cell.
This is only a format check; positions with two winners are accepted here
and the tablebase decides whether they are reachable.
"""

from typing import Optional

from .board import Board

SYMBOLS = 'xo.'


class PositionError(ValueError):
    """Raised for a position string that doesn't meet the format."""

    def __init__(self, position, reason: str):
        self.position = position
        self.reason = reason
        super().__init__(f"board: invalid position string {position!r} ({reason})")


def _invalid_reason(position) -> Optional[str]:
    if not isinstance(position, str):
        return "not a string"
    if len(position) != Board.NUM_CELLS:
        return f"expected {Board.NUM_CELLS} cells, got {len(position)}"
    if position.strip(SYMBOLS):
        return "only 'x', 'o' and '.' are allowed"

    x_count = position.count('x')
    o_count = position.count('o')
    # x moves first: equal counts (x to move) or one more x (o to move)
    if x_count != o_count and x_count - 1 != o_count:
        return f"{x_count} x marks and {o_count} o marks can't come from alternating play"
    return None


def is_valid_position(position) -> bool:
    return _invalid_reason(position) is None


def parse_position(position: str) -> Board:
    """Decode a position string into a Board, raising PositionError if invalid."""
    reason = _invalid_reason(position)
    if reason is not None:
        raise PositionError(position, reason)

    x_mask = 0
    o_mask = 0
    for cell, mark in enumerate(position):
        if mark == 'x':
            x_mask |= 1 << cell
        elif mark == 'o':
            o_mask |= 1 << cell

    return Board(x_mask, o_mask)


def format_position(board: Board) -> str:
    return ''.join('.xo'[board.get_cell(cell)] for cell in range(Board.NUM_CELLS))
