"""Line selection and word matching."""

from typing import Iterable, List, Optional

from .models import Grid, Position, Placement
from .grid import is_valid_position


def cells_in_line(start: Position, end: Position, size: Optional[int] = None) -> List[Position]:
    """
    Get the ordered cells from start to end, inclusive.

    Only horizontal, vertical and 45-degree diagonal lines are selectable;
    anything else yields an empty list. When size is given, a start or end
    outside the grid also yields an empty list.
    """
    start, end = Position(*start), Position(*end)

    if size is not None and not (
        is_valid_position(start.row, start.col, size) and is_valid_position(end.row, end.col, size)
    ):
        return []

    row_diff = end.row - start.row
    col_diff = end.col - start.col
    distance = max(abs(row_diff), abs(col_diff))

    if distance == 0:
        return [start]

    if not (row_diff == 0 or col_diff == 0 or abs(row_diff) == abs(col_diff)):
        return []

    row_step = (row_diff > 0) - (row_diff < 0)
    col_step = (col_diff > 0) - (col_diff < 0)

    return [Position(start.row + i * row_step, start.col + i * col_step) for i in range(distance + 1)]


def selection_word(grid: Grid, cells: Iterable[Position]) -> str:
    """Concatenate the letters under the selected cells."""
    return ''.join(grid[row][col] for row, col in cells)


def match_selection(grid: Grid, cells: List[Position], words: List[str]) -> Optional[str]:
    """
    Find the word spelled by a selection, read forwards or backwards.

    Returns the first word in list order that matches, or None.
    """
    if not cells:
        return None

    selected = selection_word(grid, cells)
    reversed_word = selected[::-1]

    for word in words:
        if word == selected or word == reversed_word:
            return word
    return None


def is_cell_in_found_word(placements: List[Placement], found: Iterable[str], row: int, col: int) -> bool:
    """Check whether a cell belongs to the placement of any found word."""
    found = set(found)
    return any(
        placement.word in found and (row, col) in placement.positions
        for placement in placements
    )


def is_cell_selected(cells: List[Position], row: int, col: int) -> bool:
    """Check whether a cell is part of the in-progress selection."""
    return (row, col) in cells
