"""
Interactive shell for the tic-tac-toe tablebase.

Usage:
    wreck [position]

The whole tablebase is generated at startup; every command afterwards is
a lookup. Cells are numbered 1-9 in the shell:
    1 2 3
    4 5 6
    7 8 9
"""

import argparse
import cmd
import sys
from typing import Optional

from config import Config, TablebaseConfig
from game import Board, IllegalMoveError, PositionError, parse_position
from evaluation import describe
from tablebase import Tablebase, TablebaseEntry, generate

HELP_TEXT = """Commands:
  load <position>   Load the given position into wreck
  play <move>       Play the given move on the current position
  eval              Evaluate the current position and show data
  moves             List the legal moves, best first
  stats             Show tablebase statistics
  exit              Exit from the repl

Position String (<position>):
  A position in wreck is represented by a 9-character string which is
  composed of the symbols x, o, and . which represent a mark by player x, a
  mark by player o, and an empty cell. Each character represents a cell in
  the tic tac toe board.

Moves (<move>):
  Moves are represented by the numbers 1-9 where each number represents a
  position in the tic tac toe board.
    1 2 3
    4 5 6
    7 8 9"""

NOT_FOUND = "wreck: current position not found in tablebase"


def format_eval(e: int) -> str:
    return f"{e:+d} ({describe(e)})" if e else f"0 ({describe(e)})"


def format_entry(table: Tablebase, entry: TablebaseEntry) -> str:
    """Render a solved position: grid, evaluation and ranked lines."""
    out = [str(entry.board), "", f"Evaluation: {format_eval(entry.evaluation)}"]
    if entry.is_terminal:
        out.append(f"Game over: {entry.board.state.label}")
        return '\n'.join(out)

    out += ["", "Lines:"]
    for move, child_eval in table.lines(entry):
        out.append(f"  {move + 1}: {format_eval(child_eval)}")
    return '\n'.join(out)


class WreckShell(cmd.Cmd):
    """Line-oriented shell over a generated tablebase."""

    def __init__(self, table: Tablebase, board: Optional[Board] = None,
                 config: Optional[Config] = None, stdin=None, stdout=None):
        super().__init__(stdin=stdin, stdout=stdout)
        self.config = config if config is not None else Config()
        self.table = table
        self.board = board if board is not None else Board()
        self.prompt = "\n" + self.config.shell.prompt
        self.intro = self.config.shell.banner
        if stdin is not None:
            self.use_rawinput = False

    def _print(self, text: str = ""):
        print(text, file=self.stdout)

    def _show_current(self):
        entry = self.table.lookup(self.board)
        if entry is None:
            self._print(NOT_FOUND)
        else:
            self._print(format_entry(self.table, entry))

    def emptyline(self):
        pass

    def default(self, line):
        self._print(f'wreck: unknown command "{line.split()[0]}"')

    def do_load(self, arg):
        args = arg.split()
        if len(args) != 1:
            self._print("wreck: usage: load <position>")
            return
        try:
            self.board = parse_position(args[0])
        except PositionError as e:
            self._print(str(e))
            return
        self._show_current()

    def do_play(self, arg):
        args = arg.split()
        if len(args) != 1:
            self._print("wreck: usage: play <move>")
            return
        if len(args[0]) != 1 or args[0] not in "123456789":
            self._print(f'wreck: "{args[0]}" is not a valid move')
            return
        try:
            self.board = self.board.apply_move(int(args[0]) - 1)
        except IllegalMoveError as e:
            self._print(str(e))
            return
        self._show_current()

    def do_eval(self, arg):
        if arg.strip():
            self._print("wreck: usage: eval")
            return
        self._show_current()

    def do_moves(self, arg):
        entry = self.table.lookup(self.board)
        if entry is None:
            self._print(NOT_FOUND)
            return
        moves = entry.best_moves()
        if not moves:
            self._print(f"wreck: no legal moves ({self.board.state.label})")
            return
        self._print(' '.join(str(move + 1) for move in moves))

    def do_stats(self, arg):
        stats = self.table.get_stats()
        self._print(f"Positions: {stats['total_positions']}")
        self._print(f"By move count: {stats['by_move_count']}")
        self._print(f"Terminal: {stats['terminal']}")
        self._print(f"x wins: {stats['x_wins']}  o wins: {stats['o_wins']}  draws: {stats['draws']}")

    def do_help(self, arg):
        self._print(HELP_TEXT)

    def do_exit(self, arg):
        return True

    do_quit = do_exit

    def do_EOF(self, arg):
        self._print()
        return True


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog='wreck', description='Tic-tac-toe tablebase shell')
    parser.add_argument('position', nargs='?', default=None, help='Starting position (9 chars of x, o, .)')
    parser.add_argument('--progress', action='store_true', help='Show a progress bar while generating')
    parser.add_argument('--quiet', action='store_true', help='Skip the generation summary')
    args = parser.parse_args(argv)

    config = Config(tablebase=TablebaseConfig(show_progress=args.progress, verbose=not args.quiet))
    position = args.position if args.position is not None else config.shell.start_position

    try:
        board = parse_position(position)
    except PositionError as e:
        print(e, file=sys.stderr)
        return 1

    table = generate(config.tablebase)

    try:
        WreckShell(table, board, config).cmdloop()
    except KeyboardInterrupt:
        print()
    return 0


if __name__ == '__main__':
    sys.exit(main())
