"""
Unit tests for the command-line front end.
"""
import io

import pytest
from minefield import Action, BoardConfig, GameStatus
from minefield.cli import demo, main, parse_command, play


# ============================================================================
# Command Parsing Tests
# ============================================================================

class TestParseCommand:
    """Test play-loop command parsing."""

    @pytest.mark.parametrize(
        "line, expected",
        [
            ("r 1 2", (Action.REVEAL, (1, 2))),
            ("reveal 0 8", (Action.REVEAL, (0, 8))),
            ("F 3 4", (Action.TOGGLE_FLAG, (3, 4))),
            ("flag 3 4\n", (Action.TOGGLE_FLAG, (3, 4))),
        ],
    )
    def test_cell_commands(self, line: str, expected) -> None:
        assert parse_command(line) == expected

    @pytest.mark.parametrize("line", ["r", "r 1", "r a b", "f 1 2 3"])
    def test_bad_coordinates_give_no_position(self, line: str) -> None:
        action, position = parse_command(line)
        assert position is None

    @pytest.mark.parametrize("line", ["", "   ", "x 1 2", "help"])
    def test_unknown_verbs(self, line: str) -> None:
        assert parse_command(line) is None


# ============================================================================
# Play Loop Tests
# ============================================================================

class TestPlay:
    """Test the interactive loop with scripted input."""

    def test_reveal_then_quit(self) -> None:
        stdin = io.StringIO("r 4 4\nq\nf 8 8\n")
        stdout = io.StringIO()
        controller = play(BoardConfig(), seed=1, stdin=stdin, stdout=stdout)
        assert controller.mines_placed is True
        assert controller.board.get(4, 4).is_revealed is True
        assert controller.flags_placed == 0
        assert "[ACTIVE]" in stdout.getvalue() or "[WON]" in stdout.getvalue()

    def test_off_board_command_is_ignored(self) -> None:
        stdout = io.StringIO()
        controller = play(
            BoardConfig(), stdin=io.StringIO("r 9 9\n"), stdout=stdout
        )
        assert controller.status == GameStatus.NOT_STARTED

    def test_flag_updates_mines_left(self) -> None:
        stdout = io.StringIO()
        play(BoardConfig(), stdin=io.StringIO("f 0 0\n"), stdout=stdout)
        assert "mines left: 9" in stdout.getvalue()

    def test_new_game_command(self) -> None:
        stdin = io.StringIO("r 4 4\nn\n")
        controller = play(BoardConfig(), seed=2, stdin=stdin, stdout=io.StringIO())
        assert controller.status == GameStatus.NOT_STARTED

    def test_unknown_command_prints_help(self) -> None:
        stdout = io.StringIO()
        play(BoardConfig(), stdin=io.StringIO("dance\n"), stdout=stdout)
        assert stdout.getvalue().count("Commands:") == 2


# ============================================================================
# Demo and Entry Point Tests
# ============================================================================

class TestDemoAndMain:
    """Test the random-player demo and argument handling."""

    def test_demo_plays_every_game(self, capsys) -> None:
        wins = demo(BoardConfig(5, 5, 3), games=3, seed=0)
        out = capsys.readouterr().out
        assert 0 <= wins <= 3
        assert out.count("=== Game") == 3

    @pytest.mark.parametrize("games", ["0", "-3"])
    def test_main_rejects_non_positive_games(self, games: str, capsys) -> None:
        with pytest.raises(SystemExit):
            main(["demo", "--games", games])
        assert "--games must be at least 1" in capsys.readouterr().err

    def test_demo_rejects_zero_games(self) -> None:
        with pytest.raises(ValueError, match="at least 1"):
            demo(BoardConfig(5, 5, 3), games=0)

    def test_main_rejects_impossible_mine_count(self) -> None:
        with pytest.raises(SystemExit):
            main(["demo", "--width", "3", "--height", "3", "--mines", "5"])

    def test_main_without_command_prints_help(self, capsys) -> None:
        main([])
        assert "usage" in capsys.readouterr().out.lower()
