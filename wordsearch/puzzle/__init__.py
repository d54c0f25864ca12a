"""Puzzle generation and selection for wordsearch."""

from .models import Grid, Direction, Position, Placement, Puzzle
from .grid import (
    GRID_SIZE,
    DIRECTIONS,
    can_place_word,
    place_word,
    select_words,
    generate_puzzle,
    render_grid,
)
from .selection import (
    cells_in_line,
    selection_word,
    match_selection,
    is_cell_in_found_word,
    is_cell_selected,
)

__all__ = [
    # Models
    "Grid",
    "Direction",
    "Position",
    "Placement",
    "Puzzle",
    # Generation
    "GRID_SIZE",
    "DIRECTIONS",
    "can_place_word",
    "place_word",
    "select_words",
    "generate_puzzle",
    "render_grid",
    # Selection
    "cells_in_line",
    "selection_word",
    "match_selection",
    "is_cell_in_found_word",
    "is_cell_selected",
]
