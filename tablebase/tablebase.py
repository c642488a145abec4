"""
Tablebase Storage and Lookup for Tic-Tac-Toe

Every position reachable from the empty board, bucketed by move count.
Entries live in flat per-bucket lists and refer to their children by
BoardIndex, so traversals always go through the owning Tablebase.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, NamedTuple, Optional, Tuple

from game import Board
from evaluation import DRAW, to_relative

# Distinct positions reachable under alternating play, per move count
REACHABLE_BY_MOVE_COUNT = (1, 9, 72, 252, 756, 1260, 1520, 1140, 390, 78)
REACHABLE_POSITIONS = sum(REACHABLE_BY_MOVE_COUNT)  # 5478


class BoardIndex(NamedTuple):
    """Address of an entry: (move-count bucket, position within bucket)."""
    move_count: int
    position: int


@dataclass(frozen=True, eq=False)
class TablebaseEntry:
    """
    A solved position.

    Attributes:
        board: the position itself
        evaluation: absolute evaluation (positive = good for x)
        moves: legal move -> index of the resulting entry, best move first
    """
    board: Board
    evaluation: int
    moves: Mapping[int, BoardIndex] = field(default_factory=dict)

    def __post_init__(self):
        # read-only view over a private copy
        object.__setattr__(self, 'moves', MappingProxyType(dict(self.moves)))

    @property
    def relative_evaluation(self) -> int:
        return to_relative(self.evaluation, self.board.x_to_move)

    @property
    def is_terminal(self) -> bool:
        return self.board.is_game_over()

    def best_moves(self) -> List[int]:
        """Legal moves ordered from best to worst for the player to move."""
        return list(self.moves)

    def best_move(self) -> Optional[int]:
        for move in self.moves:
            return move
        return None


class Tablebase:
    """
    Table of every reachable tic-tac-toe position and its evaluation.

    Filled once by TablebaseGenerator; read-only afterwards.
    """

    NUM_BUCKETS = Board.NUM_CELLS + 1

    def __init__(self):
        self.buckets: List[List[TablebaseEntry]] = [[] for _ in range(self.NUM_BUCKETS)]
        # canonical key -> position within bucket
        self._keys: List[Dict[Tuple[int, int], int]] = [{} for _ in range(self.NUM_BUCKETS)]
        self.is_complete = False

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self.buckets)

    def __iter__(self) -> Iterator[TablebaseEntry]:
        for bucket in self.buckets:
            yield from bucket

    def __contains__(self, board) -> bool:
        return isinstance(board, Board) and self.index_of(board) is not None

    def get(self, index: BoardIndex) -> TablebaseEntry:
        return self.buckets[index.move_count][index.position]

    def index_of(self, board: Board) -> Optional[BoardIndex]:
        """
        Find the index of a position.

        Returns:
            BoardIndex if the position is in the table, None otherwise
        """
        move_count = board.move_count
        position = self._keys[move_count].get(board.key)
        if position is None:
            return None
        return BoardIndex(move_count, position)

    def lookup(self, board: Board) -> Optional[TablebaseEntry]:
        """
        Look up position in tablebase.

        None means the position can't be reached from the empty board under
        alternating play (or the table hasn't been generated yet).
        """
        index = self.index_of(board)
        if index is None:
            return None
        return self.get(index)

    def follow(self, entry: TablebaseEntry, move: int) -> Optional[TablebaseEntry]:
        """Entry reached by playing move from entry, None if move isn't legal there."""
        index = entry.moves.get(move)
        if index is None:
            return None
        return self.get(index)

    def lines(self, entry: TablebaseEntry) -> List[Tuple[int, int]]:
        """(move, absolute evaluation after the move) pairs, best first."""
        return [(move, self.get(index).evaluation) for move, index in entry.moves.items()]

    def push(self, entry: TablebaseEntry) -> BoardIndex:
        """Add a new entry; a position can only be stored once."""
        board = entry.board
        move_count = board.move_count
        if not 0 <= move_count < self.NUM_BUCKETS:
            raise RuntimeError(f"tablebase: move count {move_count} has no bucket")

        keys = self._keys[move_count]
        if board.key in keys:
            raise RuntimeError(f"tablebase: {board!r} is already stored")

        bucket = self.buckets[move_count]
        keys[board.key] = len(bucket)
        bucket.append(entry)
        return BoardIndex(move_count, len(bucket) - 1)

    def get_stats(self) -> dict:
        """Get tablebase statistics."""
        stats = {
            'total_positions': len(self),
            'by_move_count': [len(bucket) for bucket in self.buckets],
            'terminal': 0,
            'x_wins': 0,
            'o_wins': 0,
            'draws': 0,
        }
        for entry in self:
            if entry.is_terminal:
                stats['terminal'] += 1
            if entry.evaluation > DRAW:
                stats['x_wins'] += 1
            elif entry.evaluation < DRAW:
                stats['o_wins'] += 1
            else:
                stats['draws'] += 1
        return stats
