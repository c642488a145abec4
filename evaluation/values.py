"""
Evaluation scale for solved tic-tac-toe positions.

One signed small integer carries the whole result:
    0           confirmed draw
    +n / -n     a win for one side; the closer to WIN, the fewer plies remain

Absolute evaluations are always from x's point of view (positive = x wins).
Relative evaluations are from the point of view of the player to move
(positive = the mover wins). A finished game is scored from the side that
would move next, so a decided terminal board is always LOSS relative.

    WIN - |e|   plies until the game ends with the decisive mark
"""
from typing import Optional


# ─── Scale ───────────────────────────────────────────────────────

DRAW = 0
WIN = 10
LOSS = -WIN
MAX_PLIES = 9  # a 9-cell game never lasts longer

# smallest decisive magnitude; flipping it would land on DRAW
MIN_DECISIVE = WIN - MAX_PLIES


def _check_range(e: int):
    if not -WIN <= e <= WIN:
        raise ValueError(f"evaluation {e} outside [{LOSS}, {WIN}]")


# ─── Perspective conversions ─────────────────────────────────────

def to_relative(e: int, x_to_move: bool) -> int:
    """Absolute (x's view) -> relative (mover's view)."""
    return e if x_to_move else -e


def to_absolute(e: int, x_to_move: bool) -> int:
    """Relative (mover's view) -> absolute (x's view). Inverse of to_relative."""
    return e if x_to_move else -e


def flip(e: int) -> int:
    """
    Turn a child's relative evaluation into its value for the parent's mover.

    The sign is inverted and a decisive result moves one ply further from the
    end: the child mover's loss right now (LOSS) becomes a win in one ply
    (WIN - 1) for the parent, a win in n for the opponent becomes a loss in
    n + 1. Larger is always better for the mover, which makes max() choose
    the quickest win and the slowest loss.
    """
    _check_range(e)
    if e == DRAW:
        return DRAW
    if abs(e) <= MIN_DECISIVE:
        raise ValueError(f"evaluation {e} is already {MAX_PLIES} plies from the end")

    flipped = -e
    return flipped - 1 if flipped > 0 else flipped + 1


# ─── Reading evaluations ─────────────────────────────────────────

def plies_to_end(e: int) -> Optional[int]:
    """Plies until the deciding mark is placed; None for a draw."""
    _check_range(e)
    if e == DRAW:
        return None
    return WIN - abs(e)


def winner_of(e: int) -> Optional[int]:
    """1 for x, 2 for o, None for a draw (absolute evaluations only)."""
    if e > 0:
        return 1
    if e < 0:
        return 2
    return None


def describe(e: int) -> str:
    """Human-readable form of an absolute evaluation."""
    plies = plies_to_end(e)
    if plies is None:
        return "draw"

    side = 'x' if winner_of(e) == 1 else 'o'
    if plies == 0:
        return f"{side} has won"
    return f"{side} wins in {plies}"
