"""
Pure state transitions for a word search game.

Every function takes the current state and returns the next one without
mutating its arguments. The orchestrator in game.py wires these to input
events and notifies subscribers when the snapshot changes.
"""

import random
from typing import List, Optional, Tuple

from ..puzzle.grid import generate_puzzle
from ..puzzle.models import Position
from ..puzzle.selection import cells_in_line, match_selection
from .models import GameConfig, PuzzleSnapshot, GestureState, IdleGesture, DraggingGesture


def new_snapshot(
    words: List[str],
    config: GameConfig,
    rng: Optional[random.Random] = None,
) -> Optional[PuzzleSnapshot]:
    """
    Generate a fresh puzzle with an empty found set.

    Returns None for an empty word list; callers keep their current snapshot.
    """
    puzzle = generate_puzzle(
        words,
        rng=rng,
        size=config.grid_size,
        min_count=config.min_words,
        max_count=config.max_words,
        min_length=config.min_word_length,
        max_length=config.max_word_length,
        max_attempts=config.max_attempts,
    )
    if puzzle is None:
        return None

    return PuzzleSnapshot(
        size=puzzle.size,
        grid=puzzle.grid,
        words=puzzle.words,
        placements=puzzle.placements,
    )


def record_match(snapshot: PuzzleSnapshot, word: str) -> PuzzleSnapshot:
    """Add a word to the found set. Already-found words leave it unchanged."""
    if word in snapshot.found:
        return snapshot
    return snapshot.model_copy(update={"found": snapshot.found | {word}})


def start_gesture(state: GestureState, cell: Position, size: Optional[int] = None) -> DraggingGesture:
    """Begin a drag at cell. A drag already in progress is discarded."""
    cell = Position(*cell)
    return DraggingGesture(start=cell, current=cell, cells=cells_in_line(cell, cell, size))


def move_gesture(state: GestureState, cell: Position, size: Optional[int] = None) -> GestureState:
    """Extend the drag to cell. Moves while idle are ignored."""
    if not isinstance(state, DraggingGesture):
        return state

    cell = Position(*cell)
    return DraggingGesture(
        start=state.start,
        current=cell,
        cells=cells_in_line(state.start, cell, size),
    )


def end_gesture(
    state: GestureState,
    snapshot: Optional[PuzzleSnapshot],
) -> Tuple[IdleGesture, Optional[PuzzleSnapshot], Optional[str]]:
    """
    Finish the drag and check the selection against the word list.

    Returns (idle state, next snapshot, newly found word or None).
    """
    idle = IdleGesture()

    if not isinstance(state, DraggingGesture) or not state.cells or snapshot is None:
        return idle, snapshot, None

    matched = match_selection(snapshot.grid, state.cells, snapshot.words)
    if matched is None or matched in snapshot.found:
        return idle, snapshot, None

    return idle, record_match(snapshot, matched), matched
