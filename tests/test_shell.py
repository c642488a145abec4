"""
Shell tests: drive WreckShell with scripted input against the real tablebase.
"""
import io

import pytest

from game import Board, parse_position
from wreck import WreckShell, format_entry, main, NOT_FOUND


def run_shell(table, commands, board=None):
    stdin = io.StringIO(''.join(line + '\n' for line in commands))
    stdout = io.StringIO()
    shell = WreckShell(table, board=board, stdin=stdin, stdout=stdout)
    shell.cmdloop()
    return shell, stdout.getvalue()


class TestFormatEntry:

    def test_root(self, table):
        text = format_entry(table, table.lookup(Board()))
        assert text.startswith(". . .\n. . .\n. . .")
        assert "Evaluation: 0 (draw)" in text
        assert "Lines:" in text
        assert "  5: 0 (draw)" in text

    def test_terminal(self, table):
        text = format_entry(table, table.lookup(parse_position('xxxoo....')))
        assert "Evaluation: +10 (x has won)" in text
        assert "Game over: x wins" in text
        assert "Lines:" not in text

    def test_winning_line_listed_first(self, table):
        text = format_entry(table, table.lookup(parse_position('xx.oo....')))
        lines = text.split("Lines:\n")[1].splitlines()
        assert lines[0] == "  3: +10 (x has won)"


class TestCommands:

    def test_eval_start(self, table):
        _, out = run_shell(table, ["eval", "exit"])
        assert "Evaluation: 0 (draw)" in out

    def test_load(self, table):
        shell, out = run_shell(table, ["load xx.oo....", "exit"])
        assert shell.board == parse_position('xx.oo....')
        assert "Evaluation: +9 (x wins in 1)" in out

    def test_load_invalid_keeps_board(self, table):
        shell, out = run_shell(table, ["load xxxxxooo.", "exit"])
        assert "invalid position string" in out
        assert shell.board == Board()

    def test_load_unreachable(self, table):
        _, out = run_shell(table, ["load xxxooo...", "exit"])
        assert NOT_FOUND in out

    def test_load_usage(self, table):
        _, out = run_shell(table, ["load", "exit"])
        assert "wreck: usage: load <position>" in out

    def test_play(self, table):
        shell, out = run_shell(table, ["play 5", "play 1", "exit"])
        assert shell.board == Board().apply_move(4).apply_move(0)
        assert "o . .\n. x .\n. . ." in out

    def test_play_occupied(self, table):
        shell, out = run_shell(table, ["play 5", "play 5", "exit"])
        assert "cell is occupied" in out
        assert shell.board == Board().apply_move(4)

    @pytest.mark.parametrize("move", ["0", "10", "a"])
    def test_play_bad_move(self, table, move):
        shell, out = run_shell(table, [f"play {move}", "exit"])
        assert f'wreck: "{move}" is not a valid move' in out
        assert shell.board == Board()

    def test_play_after_game_over(self, table):
        shell, out = run_shell(table, ["play 4"], board=parse_position('xxxoo....'))
        assert "game is over" in out

    def test_moves(self, table):
        stdout = io.StringIO()
        shell = WreckShell(table, board=parse_position('xx.o.....'), stdin=io.StringIO(), stdout=stdout)
        shell.onecmd("moves")
        assert stdout.getvalue().split()[0] == "3"
        assert sorted(stdout.getvalue().split()) == ["3", "5", "6", "7", "8", "9"]

    def test_stats(self, table):
        _, out = run_shell(table, ["stats", "exit"])
        assert "Positions: 5478" in out
        assert "Terminal: 958" in out

    def test_help(self, table):
        _, out = run_shell(table, ["help", "exit"])
        assert "load <position>" in out
        assert "7 8 9" in out

    def test_unknown_command(self, table):
        _, out = run_shell(table, ["frobnicate now", "exit"])
        assert 'wreck: unknown command "frobnicate"' in out

    def test_eof_exits(self, table):
        shell, _ = run_shell(table, ["play 5"])
        assert shell.board.move_count == 1


class TestMain:

    def test_invalid_start_position(self, capsys):
        assert main(["xxxxx...."]) == 1
        assert "invalid position string" in capsys.readouterr().err

    def test_runs_shell(self, monkeypatch, capsys):
        monkeypatch.setattr('sys.stdin', io.StringIO("eval\nexit\n"))
        monkeypatch.setattr(WreckShell, 'use_rawinput', False)
        assert main(["--quiet", "x...o...."]) == 0
        out = capsys.readouterr().out
        assert "The Wreck Tic-Tac-Toe Engine" in out
        assert "Evaluation:" in out

    def test_progress_flag(self, monkeypatch, capsys):
        monkeypatch.setattr('sys.stdin', io.StringIO("exit\n"))
        monkeypatch.setattr(WreckShell, 'use_rawinput', False)
        assert main(["--progress", "--quiet"]) == 0
        captured = capsys.readouterr()
        assert "5478/5478" in captured.err
        assert "✓ Generated tablebase" not in captured.out

    def test_default_start_position(self, monkeypatch, capsys):
        monkeypatch.setattr('sys.stdin', io.StringIO("eval\nexit\n"))
        monkeypatch.setattr(WreckShell, 'use_rawinput', False)
        assert main(["--quiet"]) == 0
        assert ". . .\n. . .\n. . ." in capsys.readouterr().out
