from enum import IntEnum
from typing import List, Optional, Tuple


class GameState(IntEnum):
    ONGOING = 0
    DRAW = 1
    X_WON = 2
    O_WON = 3

    @property
    def label(self) -> str:
        return _STATE_LABELS[self]


_STATE_LABELS = {
    GameState.ONGOING: "unfinished game",
    GameState.DRAW: "draw",
    GameState.X_WON: "x wins",
    GameState.O_WON: "o wins",
}


class IllegalMoveError(ValueError):
    """Raised when a move can't be played on a board."""

    def __init__(self, move, reason: str = "illegal move"):
        self.move = move
        self.reason = reason
        super().__init__(f"play: invalid move {move!r} ({reason})")


class Board:
    """
    Tic-tac-toe position stored as two 9-bit occupancy masks.

    Cell numbering is row-major (cell = r*3 + c), bit ``1 << cell``.
    x always moves first, so x is to move whenever the move count is even.
    Boards behave as values: apply_move() returns a new Board.
    """

    NUM_CELLS = 9
    FULL_MASK = 0b111111111

    # Bitmask win patterns (bit = r*3+c)
    WIN_MASKS = (
        0b000000111,  # row 0
        0b000111000,  # row 1
        0b111000000,  # row 2
        0b001001001,  # col 0
        0b010010010,  # col 1
        0b100100100,  # col 2
        0b100010001,  # diag
        0b001010100,  # anti-diag
    )

    __slots__ = ('_x', '_o', '_move_count', '_state')

    def __init__(self, x_mask: int = 0, o_mask: int = 0):
        if x_mask & o_mask:
            raise ValueError(f"board: overlapping marks {x_mask:09b} / {o_mask:09b}")
        if (x_mask | o_mask) & ~Board.FULL_MASK:
            raise ValueError("board: marks outside the 9 playable cells")

        self._x = x_mask
        self._o = o_mask
        self._move_count = bin(x_mask | o_mask).count('1')
        self._state = self._compute_state()

    @property
    def x_mask(self) -> int:
        return self._x

    @property
    def o_mask(self) -> int:
        return self._o

    @property
    def move_count(self) -> int:
        return self._move_count

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def key(self) -> Tuple[int, int]:
        """Canonical occupancy key used for memoization."""
        return (self._x, self._o)

    @property
    def x_to_move(self) -> bool:
        return self._move_count % 2 == 0

    def terminal_state(self) -> GameState:
        return self._state

    def is_game_over(self) -> bool:
        return self._state != GameState.ONGOING

    def get_cell(self, cell: int) -> int:
        """0 for empty, 1 for x, 2 for o."""
        bit = 1 << cell
        if self._x & bit:
            return 1
        if self._o & bit:
            return 2
        return 0

    def is_valid_move(self, move) -> bool:
        return self._reject_reason(move) is None

    def get_legal_moves(self) -> List[int]:
        if self._state != GameState.ONGOING:
            return []

        filled = self._x | self._o
        return [cell for cell in range(Board.NUM_CELLS) if not filled & (1 << cell)]

    def apply_move(self, move: int) -> 'Board':
        reason = self._reject_reason(move)
        if reason is not None:
            raise IllegalMoveError(move, reason)

        new_board = Board.__new__(Board)
        bit = 1 << move
        if self.x_to_move:
            new_board._x = self._x | bit
            new_board._o = self._o
        else:
            new_board._x = self._x
            new_board._o = self._o | bit
        new_board._move_count = self._move_count + 1
        new_board._state = new_board._compute_state()
        return new_board

    def _reject_reason(self, move) -> Optional[str]:
        if self._state != GameState.ONGOING:
            return "game is over"
        if isinstance(move, bool) or not isinstance(move, int):
            return "not a cell number"
        if not (0 <= move < Board.NUM_CELLS):
            return "cell out of range"
        if (self._x | self._o) & (1 << move):
            return "cell is occupied"
        return None

    def _compute_state(self) -> GameState:
        # Priority: x win, o win, full board, ongoing
        for mask in Board.WIN_MASKS:
            if (self._x & mask) == mask:
                return GameState.X_WON
        for mask in Board.WIN_MASKS:
            if (self._o & mask) == mask:
                return GameState.O_WON
        if self._move_count == Board.NUM_CELLS:
            return GameState.DRAW
        return GameState.ONGOING

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self._x == other._x and self._o == other._o

    def __hash__(self):
        return hash((self._x, self._o))

    def __repr__(self):
        symbols = ''.join('.xo'[self.get_cell(cell)] for cell in range(Board.NUM_CELLS))
        return f"<Board {symbols} move={self._move_count} {self._state.label}>"

    def __str__(self):
        rows = []
        for r in range(3):
            rows.append(' '.join('.xo'[self.get_cell(r * 3 + c)] for c in range(3)))
        return '\n'.join(rows)
