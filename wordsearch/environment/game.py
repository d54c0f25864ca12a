import random
from typing import List, Dict, Optional, Any, Callable
from pydantic import BaseModel, Field, ConfigDict

from ..puzzle.models import Position
from ..puzzle.selection import is_cell_in_found_word, is_cell_selected
from .models import GameConfig, PuzzleSnapshot, GestureState, IdleGesture, DraggingGesture
from .state import new_snapshot, start_gesture, move_gesture, end_gesture
from .word_source import WordSource


Subscriber = Callable[[PuzzleSnapshot], None]


class WordSearchGame(BaseModel):
    """
    Orchestrates a word search session.

    Holds the current puzzle snapshot and gesture state, applies the pure
    transitions from state.py in response to input events, and notifies
    subscribers whenever the snapshot is replaced.

    Attributes:
        config: Game configuration
        word_source: Client used to fetch the candidate word list
        word_list: Candidate words reused for every new game
        snapshot: Current puzzle, None until words have loaded
        gesture: Current drag state
        loading: True until the word list has been loaded
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: GameConfig = Field(default_factory=GameConfig)
    word_source: Optional[WordSource] = None
    word_list: List[str] = Field(default_factory=list)
    snapshot: Optional[PuzzleSnapshot] = None
    gesture: GestureState = Field(default_factory=IdleGesture)
    loading: bool = True
    _rng: random.Random = None
    _subscribers: List[Subscriber] = None

    def model_post_init(self, __context) -> None:
        """Initialize the random generator and subscriber list after model creation."""
        self._rng = random.Random(self.config.seed)
        self._subscribers = []

    @classmethod
    def create(
        cls,
        config: Optional[GameConfig] = None,
        **config_kwargs: Any
    ) -> "WordSearchGame":
        """
        Factory method to create a game with a configured word source.

        Args:
            config: Optional GameConfig instance
            **config_kwargs: Config parameters if config not provided

        Returns:
            A new WordSearchGame in the loading state
        """
        if config is None:
            config = GameConfig(**config_kwargs)

        return cls(config=config, word_source=WordSource.from_config(config.word_source))

    # -- Subscriptions --

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register a callback invoked with each new snapshot.

        Returns:
            A function that removes the subscription
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _set_snapshot(self, snapshot: PuzzleSnapshot) -> None:
        if snapshot is self.snapshot:
            return
        self.snapshot = snapshot
        for callback in list(self._subscribers):
            callback(snapshot)

    # -- Lifecycle --

    def load_words(self, words: Optional[List[str]] = None) -> List[str]:
        """
        Load the candidate word list and start the first game.

        Args:
            words: Words to use directly; fetched from word_source when omitted

        Returns:
            The loaded word list
        """
        self.loading = True

        if words is None:
            source = self.word_source or WordSource.from_config(self.config.word_source)
            words = source.fetch()

        self.word_list = list(words)
        self.loading = False

        if self.word_list:
            self.new_game()

        return self.word_list

    def new_game(self) -> Optional[PuzzleSnapshot]:
        """
        Replace the puzzle with a fresh one built from the same word list.

        With an empty word list nothing changes.
        """
        snapshot = new_snapshot(self.word_list, self.config, self._rng)
        if snapshot is None:
            return self.snapshot

        self.gesture = IdleGesture()
        self._set_snapshot(snapshot)
        return snapshot

    # -- Gestures --

    @property
    def grid_size(self) -> int:
        return self.snapshot.size if self.snapshot else self.config.grid_size

    def start_selection(self, row: int, col: int) -> None:
        """Handle a pointer/touch start on a cell."""
        self.gesture = start_gesture(self.gesture, Position(row, col), self.grid_size)

    def move_selection(self, row: int, col: int) -> None:
        """Handle the pointer/touch moving onto a cell."""
        self.gesture = move_gesture(self.gesture, Position(row, col), self.grid_size)

    def end_selection(self) -> Optional[str]:
        """
        Handle the pointer/touch end and run the match check.

        Returns:
            The newly found word, or None
        """
        self.gesture, snapshot, matched = end_gesture(self.gesture, self.snapshot)
        if snapshot is not None:
            self._set_snapshot(snapshot)
        return matched

    def select(self, start: Position, end: Position) -> Optional[str]:
        """Run a complete drag from start to end."""
        self.start_selection(*start)
        self.move_selection(*end)
        return self.end_selection()

    # -- Queries --

    @property
    def selected_cells(self) -> List[Position]:
        if isinstance(self.gesture, DraggingGesture):
            return list(self.gesture.cells)
        return []

    @property
    def is_selecting(self) -> bool:
        return isinstance(self.gesture, DraggingGesture)

    def is_cell_in_found_word(self, row: int, col: int) -> bool:
        if self.snapshot is None:
            return False
        return is_cell_in_found_word(self.snapshot.placements, self.snapshot.found, row, col)

    def is_cell_selected(self, row: int, col: int) -> bool:
        return is_cell_selected(self.selected_cells, row, col)

    @property
    def found_count(self) -> int:
        return self.snapshot.found_count if self.snapshot else 0

    @property
    def total_words(self) -> int:
        return self.snapshot.total_words if self.snapshot else 0

    @property
    def is_complete(self) -> bool:
        return self.snapshot is not None and self.snapshot.is_complete

    def get_state(self) -> Dict:
        """
        Get the current game state as a dictionary.

        Useful for rendering and serialization.

        Returns:
            Dictionary containing game state
        """
        snapshot = self.snapshot
        return {
            "loading": self.loading,
            "grid": [list(row) for row in snapshot.grid] if snapshot else [],
            "words": list(snapshot.words) if snapshot else [],
            "found": sorted(snapshot.found) if snapshot else [],
            "found_count": self.found_count,
            "total_words": self.total_words,
            "is_complete": self.is_complete,
            "is_selecting": self.is_selecting,
            "selected_cells": [list(cell) for cell in self.selected_cells],
        }
