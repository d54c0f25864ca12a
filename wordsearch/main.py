"""
Terminal front end for the word search game.

Usage:
    python -m wordsearch.main
    python -m wordsearch.main config.yaml --seed 42 --verbose
    python -m wordsearch.main --offline

Commands at the prompt:
    R1 C1 R2 C2   drag from (R1, C1) to (R2, C2)
    new           start a new game with the same word list
    quit          leave the game
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional

import yaml

from .environment import GameConfig, WordSearchGame
from .puzzle import render_grid


HELP_TEXT = "Enter 'R1 C1 R2 C2' to select a line, 'new' for a new game, 'quit' to exit."


def load_config(config_path: str) -> GameConfig:
    """Load game configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return GameConfig(**data)


def render(game: WordSearchGame) -> str:
    """Render the grid, word list and progress for the terminal."""
    if game.loading or game.snapshot is None:
        return "Loading words..."

    snapshot = game.snapshot
    found_cells = {
        (r, c)
        for r in range(snapshot.size)
        for c in range(snapshot.size)
        if game.is_cell_in_found_word(r, c)
    }
    selected_cells = set(game.selected_cells)

    lines = [render_grid(snapshot.grid, found=found_cells, selected=selected_cells), ""]
    lines.append("Find These Words:")
    for word in snapshot.words:
        mark = "x" if word in snapshot.found else " "
        lines.append(f"  [{mark}] {word}")
    lines.append("")
    lines.append(f"Found: {game.found_count} / {game.total_words}")

    if game.is_complete:
        lines.append("Congratulations! You found all words!")

    return "\n".join(lines)


def parse_move(command: str) -> Optional[List[int]]:
    """Parse 'R1 C1 R2 C2' into four ints, or None if malformed."""
    parts = command.replace(",", " ").split()
    if len(parts) != 4:
        return None
    try:
        return [int(p) for p in parts]
    except ValueError:
        return None


def play(
    game: WordSearchGame,
    input_fn: Callable[[str], str] = input,
    output: Callable[[str], None] = print,
) -> int:
    """
    Run the interactive loop until the player quits or input ends.

    Returns:
        Number of words found in the last game
    """
    output(render(game))
    output(HELP_TEXT)

    while True:
        try:
            command = input_fn("> ").strip()
        except EOFError:
            break

        lowered = command.lower()
        if lowered in ("quit", "q", "exit"):
            break
        if lowered in ("new", "n"):
            game.new_game()
            output(render(game))
            continue
        if lowered in ("help", "h", "?", ""):
            output(HELP_TEXT)
            continue

        move = parse_move(command)
        if move is None:
            output(f"Unrecognized command: {command!r}")
            output(HELP_TEXT)
            continue

        r1, c1, r2, c2 = move
        found = game.select((r1, c1), (r2, c2))
        if found:
            output(f"Found {found}!")
        else:
            output("No word there.")
        output(render(game))

    return game.found_count


def main():
    parser = argparse.ArgumentParser(
        description="Play a word search in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  grid_size: 15
  min_words: 12
  max_words: 16
  seed: 42
  word_source:
    url: https://random-word-api.vercel.app/api
    count: 20
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file (defaults are used if omitted)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducible puzzles (overrides config)"
    )
    parser.add_argument(
        "--offline",
        action="store_true",
        help="Skip the word API and use the built-in word list"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print progress to stdout"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else GameConfig()
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        sys.exit(1)

    if args.seed is not None:
        config = config.model_copy(update={"seed": args.seed})

    game = WordSearchGame.create(config=config)

    if args.verbose:
        print(f"Grid size: {config.grid_size}")
        print(f"Word source: {'built-in list' if args.offline else config.word_source.url}")
        print()

    words = list(config.word_source.fallback_words) if args.offline else None

    try:
        game.load_words(words)

        if args.verbose:
            print(f"Loaded {len(game.word_list)} candidate words")
            print()

        found = play(game)
    except KeyboardInterrupt:
        print("\nGame interrupted by user")
        found = game.found_count
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print()
    print(f"Words found: {found} / {game.total_words}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
