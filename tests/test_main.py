"""Test config loading and the terminal front end."""

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from wordsearch.environment import GameConfig, PuzzleSnapshot, WordSearchGame
from wordsearch.main import load_config, main, parse_move, play, render
from wordsearch.puzzle import Placement


def make_game() -> WordSearchGame:
    game = WordSearchGame(config=GameConfig(seed=0))
    game.word_list = ["CAT", "DOG"]
    game.snapshot = PuzzleSnapshot(
        size=4,
        grid=[list("CATQ"), list("DZZZ"), list("OZZZ"), list("GZZZ")],
        words=["CAT", "DOG"],
        placements=[
            Placement(word="CAT", positions=[(0, 0), (0, 1), (0, 2)]),
            Placement(word="DOG", positions=[(1, 0), (2, 0), (3, 0)]),
        ],
    )
    game.loading = False
    return game


def scripted(commands):
    """Build an input function that replays commands, then signals EOF."""
    remaining = iter(commands)

    def input_fn(prompt: str) -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError

    return input_fn


class TestLoadConfig:
    """Test YAML configuration loading."""

    def test_load_config(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "grid_size: 10\n"
            "seed: 42\n"
            "word_source:\n"
            "  count: 30\n"
            "  timeout: 5\n"
        )
        config = load_config(str(path))
        assert config.grid_size == 10
        assert config.seed == 42
        assert config.word_source.count == 30
        assert config.word_source.timeout == 5
        assert config.max_attempts == 100

    def test_empty_config_uses_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(str(path)) == GameConfig()

    def test_missing_config(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.yaml"))

    def test_invalid_config(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("min_words: 20\nmax_words: 10\n")
        with pytest.raises(ValidationError):
            load_config(str(path))


class TestParseMove:
    """Test parsing of drag commands."""

    def test_space_separated(self):
        assert parse_move("0 0 0 4") == [0, 0, 0, 4]

    def test_comma_separated(self):
        assert parse_move("1,2, 3,4") == [1, 2, 3, 4]

    @pytest.mark.parametrize("command", ["", "1 2 3", "a b c d", "1 2 3 4 5"])
    def test_malformed(self, command):
        assert parse_move(command) is None


class TestRender:
    """Test the terminal rendering of a game."""

    def test_loading(self):
        assert render(WordSearchGame()) == "Loading words..."

    def test_progress_and_markers(self):
        game = make_game()
        game.select((0, 0), (0, 2))
        text = render(game)
        assert "[x] CAT" in text
        assert "[ ] DOG" in text
        assert "Found: 1 / 2" in text
        assert "0  c  a  t  Q " in text
        assert "Congratulations" not in text

    def test_completion_banner(self):
        game = make_game()
        game.select((0, 0), (0, 2))
        game.select((3, 0), (1, 0))
        assert "Congratulations! You found all words!" in render(game)


class TestPlay:
    """Test the interactive loop with scripted input."""

    def test_find_words_then_quit(self):
        game = make_game()
        output = []
        found = play(game, scripted(["0 0 0 2", "quit", "1 0 3 0"]), output.append)

        assert found == 1
        assert "Found CAT!" in output
        assert game.snapshot.found == frozenset({"CAT"})

    def test_miss_and_bad_command(self):
        game = make_game()
        output = []
        play(game, scripted(["0 0 1 1", "hello"]), output.append)

        assert "No word there." in output
        assert "Unrecognized command: 'hello'" in output
        assert game.found_count == 0

    def test_new_game_command(self):
        game = make_game()
        output = []
        play(game, scripted(["0 0 0 2", "new"]), output.append)

        assert game.found_count == 0
        assert game.snapshot.size == 15

    def test_eof_ends_loop(self):
        game = make_game()
        assert play(game, scripted([]), lambda text: None) == 0


class TestMainCommand:
    """Test the game CLI's top-level error handling."""

    @patch("wordsearch.main.play")
    def test_error_during_play_exits_cleanly(self, mock_play, monkeypatch, capsys):
        mock_play.side_effect = RuntimeError("terminal closed")
        monkeypatch.setattr("sys.argv", ["wordsearch", "--offline", "--seed", "1"])

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1
        assert capsys.readouterr().err.strip() == "Error: terminal closed"

    @patch("wordsearch.main.play")
    def test_offline_game_runs(self, mock_play, monkeypatch, capsys):
        mock_play.return_value = 0
        monkeypatch.setattr("sys.argv", ["wordsearch", "--offline", "--seed", "1"])

        assert main() == 0
        game = mock_play.call_args.args[0]
        assert game.snapshot is not None
        assert "Words found: 0 /" in capsys.readouterr().out

    def test_missing_config_exits(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setattr("sys.argv", ["wordsearch", str(tmp_path / "missing.yaml")])
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1
        assert "Error loading config" in capsys.readouterr().err
