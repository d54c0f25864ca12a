"""Grid generation and rendering utilities."""

import random
import string
from typing import Iterable, List, Optional, Set, Tuple

from .models import Grid, Direction, Position, Placement, Puzzle


GRID_SIZE = 15
MIN_WORDS = 12
MAX_WORDS = 16
MIN_WORD_LENGTH = 3
MAX_WORD_LENGTH = 12
MAX_ATTEMPTS = 100

# Up-left, up, up-right, left, right, down-left, down, down-right
DIRECTIONS: List[Direction] = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
]


def random_letter(rng: random.Random) -> str:
    """Draw a uniformly random uppercase letter."""
    return rng.choice(string.ascii_uppercase)


def is_valid_position(row: int, col: int, size: int = GRID_SIZE) -> bool:
    """Check that (row, col) lies inside a size x size grid."""
    return 0 <= row < size and 0 <= col < size


def empty_grid(size: int = GRID_SIZE) -> Grid:
    """Build a size x size grid of blank cells."""
    return [['' for _ in range(size)] for _ in range(size)]


def can_place_word(grid: Grid, word: str, row: int, col: int, direction: Direction) -> bool:
    """
    Check whether a word fits starting at (row, col) along direction.

    Every letter must land in bounds, on either a blank cell or a cell
    already holding the same letter.
    """
    d_row, d_col = direction
    size = len(grid)

    for i, letter in enumerate(word):
        r = row + i * d_row
        c = col + i * d_col

        if not is_valid_position(r, c, size):
            return False

        cell = grid[r][c]
        if cell != '' and cell != letter:
            return False

    return True


def place_word(grid: Grid, word: str, row: int, col: int, direction: Direction) -> List[Position]:
    """Write a word into the grid in place and return the cells it covers."""
    d_row, d_col = direction
    positions: List[Position] = []

    for i, letter in enumerate(word):
        r = row + i * d_row
        c = col + i * d_col
        grid[r][c] = letter
        positions.append(Position(r, c))

    return positions


def select_words(
    words: Iterable[str],
    rng: random.Random,
    min_count: int = MIN_WORDS,
    max_count: int = MAX_WORDS,
    min_length: int = MIN_WORD_LENGTH,
    max_length: int = MAX_WORD_LENGTH,
) -> List[str]:
    """
    Pick the words for one puzzle.

    Shuffle, slice to a random count in [min_count, max_count], then keep
    words whose length lies in [min_length, max_length]. Filtering after the
    slice means fewer than min_count words can come back.
    """
    if min_count > max_count:
        raise ValueError(f"min_count ({min_count}) exceeds max_count ({max_count})")
    if min_length > max_length:
        raise ValueError(f"min_length ({min_length}) exceeds max_length ({max_length})")

    candidates = list(words)
    rng.shuffle(candidates)
    count = rng.randint(min_count, max_count)

    return [w for w in candidates[:count] if min_length <= len(w) <= max_length]


def try_place(
    grid: Grid,
    word: str,
    rng: random.Random,
    max_attempts: int = MAX_ATTEMPTS,
) -> Optional[Placement]:
    """
    Try random (row, col, direction) triples until the word fits.

    Returns the placement, or None once max_attempts is exhausted.
    """
    size = len(grid)

    for _ in range(max_attempts):
        row = rng.randrange(size)
        col = rng.randrange(size)
        direction = rng.choice(DIRECTIONS)

        if can_place_word(grid, word, row, col, direction):
            positions = place_word(grid, word, row, col, direction)
            return Placement(word=word, positions=positions)

    return None


def fill_empty_cells(grid: Grid, rng: random.Random) -> None:
    """Backfill every blank cell with a random letter."""
    for row in grid:
        for c, cell in enumerate(row):
            if cell == '':
                row[c] = random_letter(rng)


def generate_puzzle(
    words: List[str],
    rng: Optional[random.Random] = None,
    size: int = GRID_SIZE,
    min_count: int = MIN_WORDS,
    max_count: int = MAX_WORDS,
    min_length: int = MIN_WORD_LENGTH,
    max_length: int = MAX_WORD_LENGTH,
    max_attempts: int = MAX_ATTEMPTS,
) -> Optional[Puzzle]:
    """
    Build a filled size x size puzzle from a candidate word list.

    Returns None when the word list is empty so the caller can keep
    whatever puzzle it already has.
    """
    if not words:
        return None
    if size < 1:
        raise ValueError(f"Grid size must be positive, got {size}")

    rng = rng or random.Random()
    grid = empty_grid(size)

    selected = select_words(words, rng, min_count, max_count, min_length, max_length)

    placements: List[Placement] = []
    for word in selected:
        placement = try_place(grid, word, rng, max_attempts)
        if placement is not None:
            placements.append(placement)

    fill_empty_cells(grid, rng)

    return Puzzle(size=size, grid=grid, words=selected, placements=placements)


def render_grid(
    grid: Grid,
    found: Optional[Set[Tuple[int, int]]] = None,
    selected: Optional[Set[Tuple[int, int]]] = None,
) -> str:
    """
    Render the grid to a string with row and column indices.

    Cells belonging to found words are lower-cased and selected cells are
    wrapped in brackets.
    """
    if not grid:
        return ""

    found = found or set()
    selected = selected or set()
    width = len(str(len(grid) - 1))

    header = ' ' * (width + 1) + ''.join(f"{c:^3}" for c in range(len(grid[0])))
    lines = [header]

    for r, row in enumerate(grid):
        cells = []
        for c, letter in enumerate(row):
            if (r, c) in found:
                letter = letter.lower()
            cells.append(f"[{letter}]" if (r, c) in selected else f" {letter} ")
        lines.append(f"{r:>{width}} " + ''.join(cells))

    return '\n'.join(lines)
