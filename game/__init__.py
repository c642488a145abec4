from .board import Board, GameState, IllegalMoveError
from .position import PositionError, is_valid_position, parse_position, format_position

EMPTY_POSITION = '.........'

__all__ = [
    'Board', 'GameState', 'IllegalMoveError',
    'PositionError', 'is_valid_position', 'parse_position', 'format_position',
    'EMPTY_POSITION',
]
