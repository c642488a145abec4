"""Evaluation scale and perspective conversions for solved positions."""
from .values import (
    DRAW, WIN, LOSS, MAX_PLIES,
    to_relative, to_absolute, flip,
    plies_to_end, winner_of, describe,
)

__all__ = [
    'DRAW', 'WIN', 'LOSS', 'MAX_PLIES',
    'to_relative', 'to_absolute', 'flip',
    'plies_to_end', 'winner_of', 'describe',
]
