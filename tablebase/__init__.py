"""
Tic-Tac-Toe Tablebase

Every position reachable from the empty board, solved exactly by
backward induction, with each position's moves ranked best first.
"""

from .tablebase import (
    Tablebase, TablebaseEntry, BoardIndex,
    REACHABLE_POSITIONS, REACHABLE_BY_MOVE_COUNT,
)
from .generator import TablebaseGenerator, generate

__all__ = [
    'Tablebase',
    'TablebaseEntry',
    'BoardIndex',
    'REACHABLE_POSITIONS',
    'REACHABLE_BY_MOVE_COUNT',
    'TablebaseGenerator',
    'generate',
]
