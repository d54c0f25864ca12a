"""
Pydantic models for the environment layer.

This module contains the configuration models, the immutable puzzle snapshot
and the gesture states. The logic that moves between them lives in
state.py (pure transitions) and game.py (the orchestrator).
"""

from typing import List, Optional, Literal, Union, FrozenSet
from pydantic import BaseModel, Field, ConfigDict, model_validator

from ..puzzle.models import Grid, Position, Placement


DEFAULT_WORDS_URL = "https://random-word-api.vercel.app/api"

FALLBACK_WORDS: List[str] = [
    "JAVASCRIPT", "REACT", "COMPONENT", "FUNCTION", "VARIABLE", "ARRAY",
    "OBJECT", "STRING", "NUMBER", "BOOLEAN", "METHOD", "CLASS",
    "ELEMENT", "RENDER", "STATE", "PROPS", "HOOK", "EVENT",
]


class WordSourceConfig(BaseModel):
    """Where the candidate word list comes from."""
    url: str = DEFAULT_WORDS_URL
    count: int = Field(default=20, ge=1)
    word_type: str = "uppercase"
    timeout: Optional[float] = None  # None waits indefinitely
    fallback_words: List[str] = Field(default_factory=lambda: list(FALLBACK_WORDS))


class GameConfig(BaseModel):
    """Configuration for a game session."""
    grid_size: int = Field(default=15, ge=1)
    min_words: int = Field(default=12, ge=0)
    max_words: int = Field(default=16, ge=0)
    min_word_length: int = Field(default=3, ge=1)
    max_word_length: int = Field(default=12, ge=1)
    max_attempts: int = Field(default=100, ge=1)
    seed: Optional[int] = None
    word_source: WordSourceConfig = Field(default_factory=WordSourceConfig)

    @model_validator(mode="after")
    def _check_ranges(self) -> "GameConfig":
        if self.min_words > self.max_words:
            raise ValueError(f"min_words ({self.min_words}) exceeds max_words ({self.max_words})")
        if self.min_word_length > self.max_word_length:
            raise ValueError(
                f"min_word_length ({self.min_word_length}) exceeds max_word_length ({self.max_word_length})"
            )
        return self


class PuzzleSnapshot(BaseModel):
    """
    Immutable state of one game.

    Grid, words and placements come from a single generation pass. Finding a
    word produces a new snapshot; starting a new game replaces it entirely.
    """
    model_config = ConfigDict(frozen=True)

    size: int
    grid: Grid
    words: List[str] = Field(default_factory=list)
    placements: List[Placement] = Field(default_factory=list)
    found: FrozenSet[str] = Field(default_factory=frozenset)

    @property
    def found_count(self) -> int:
        return len(self.found)

    @property
    def total_words(self) -> int:
        return len(self.words)

    @property
    def is_complete(self) -> bool:
        """True once every displayed word has been found."""
        return self.found_count == self.total_words


class IdleGesture(BaseModel):
    """No drag in progress."""
    model_config = ConfigDict(frozen=True)

    state: Literal["idle"] = "idle"


class DraggingGesture(BaseModel):
    """A drag in progress, with the line selected so far."""
    model_config = ConfigDict(frozen=True)

    state: Literal["dragging"] = "dragging"
    start: Position
    current: Position
    cells: List[Position] = Field(default_factory=list)


GestureState = Union[IdleGesture, DraggingGesture]
