"""Data models for puzzle generation and selection."""

from typing import List, Tuple, NamedTuple
from pydantic import BaseModel, ConfigDict, Field


# Type aliases
Grid = List[List[str]]
Direction = Tuple[int, int]


class Position(NamedTuple):
    """A single cell on the grid."""
    row: int
    col: int


class Placement(BaseModel):
    """A word embedded in the grid along a straight line."""
    model_config = ConfigDict(frozen=True)

    word: str = Field(..., min_length=1)
    positions: List[Position] = Field(default_factory=list)

    @property
    def direction(self) -> Direction:
        """The (d_row, d_col) step between consecutive positions."""
        if len(self.positions) < 2:
            return (0, 0)
        first, second = self.positions[0], self.positions[1]
        return (second.row - first.row, second.col - first.col)


class Puzzle(BaseModel):
    """Result of one generation pass."""
    model_config = ConfigDict(frozen=True)

    size: int = Field(..., ge=1)
    grid: Grid
    words: List[str] = Field(default_factory=list)  # Selected words, placed or not
    placements: List[Placement] = Field(default_factory=list)

    @property
    def placed_words(self) -> List[str]:
        """Words that actually made it onto the grid."""
        return [p.word for p in self.placements]
