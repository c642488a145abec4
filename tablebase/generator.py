"""
Tablebase Generator for Tic-Tac-Toe

Depth-first walk over every position reachable from the empty board.
Each position is solved from its children (or from its terminal state),
memoized on its occupancy so transpositions are solved once.
"""

import time
from collections import defaultdict
from typing import Optional, Tuple

from tqdm import tqdm

from config import TablebaseConfig
from game import Board, GameState
from evaluation import DRAW, LOSS, flip, to_absolute
from .tablebase import BoardIndex, Tablebase, TablebaseEntry, REACHABLE_POSITIONS


class TablebaseGenerator:
    """
    Solve every reachable position by backward induction.

    Children always have one more mark than their parent, so recursion depth
    is bounded by the board size and a parent entry is pushed only after all
    of its children exist.
    """

    def __init__(self, table: Optional[Tablebase] = None, show_progress: bool = False):
        self.table = table if table is not None else Tablebase()
        self.show_progress = show_progress
        self.stats = defaultdict(int)
        self._pbar = None

    def generate(self, root: Optional[Board] = None) -> Tablebase:
        """
        Generate the complete tablebase.

        Args:
            root: starting position (the empty board by default)
        """
        root = root if root is not None else Board()

        self._pbar = tqdm(total=REACHABLE_POSITIONS, desc="Generating", unit="pos") if self.show_progress else None
        try:
            self.resolve(root)
        finally:
            if self._pbar is not None:
                self._pbar.close()
                self._pbar = None

        self.table.is_complete = True
        return self.table

    def resolve(self, board: Board, depth: int = 0) -> Tuple[BoardIndex, int]:
        """
        Solve a position and every position below it.

        Returns:
            (index, relative evaluation for the player to move at board)
        """
        index = self.table.index_of(board)
        if index is not None:
            self.stats['cache_hits'] += 1
            return index, self.table.get(index).relative_evaluation

        self.stats['max_depth'] = max(self.stats['max_depth'], depth)

        ranked = []
        if board.is_game_over():
            # scored for the side that would move next: it lost or drew
            value = DRAW if board.state == GameState.DRAW else LOSS
        else:
            for move in board.get_legal_moves():
                child_index, child_value = self.resolve(board.apply_move(move), depth + 1)
                ranked.append((move, child_index, flip(child_value)))

            # best first; equal values keep ascending cell order
            ranked.sort(key=lambda item: item[2], reverse=True)
            value = ranked[0][2]

        entry = TablebaseEntry(
            board=board,
            evaluation=to_absolute(value, board.x_to_move),
            moves={move: child_index for move, child_index, _ in ranked},
        )
        index = self.table.push(entry)

        self.stats['solves'] += 1
        if board.is_game_over():
            self.stats['terminal'] += 1
        if self._pbar is not None:
            self._pbar.update(1)

        return index, value


def generate(config: Optional[TablebaseConfig] = None) -> Tablebase:
    """Build the whole tablebase from the empty board."""
    config = config if config is not None else TablebaseConfig()

    start_time = time.time()
    generator = TablebaseGenerator(show_progress=config.show_progress)
    table = generator.generate()
    elapsed = time.time() - start_time

    if config.verbose:
        print(f"✓ Generated tablebase: {len(table)} positions in {elapsed:.2f}s")
        print(f"  Transpositions reused: {generator.stats['cache_hits']}")
        if len(table) != REACHABLE_POSITIONS:
            print(f"⚠ Expected {REACHABLE_POSITIONS} positions")

    return table
