"""Game state and word source for wordsearch."""

from .models import (
    FALLBACK_WORDS,
    WordSourceConfig,
    GameConfig,
    PuzzleSnapshot,
    IdleGesture,
    DraggingGesture,
    GestureState,
)
from .state import new_snapshot, record_match, start_gesture, move_gesture, end_gesture
from .word_source import WordSource
from .game import WordSearchGame

__all__ = [
    "FALLBACK_WORDS",
    "WordSourceConfig",
    "GameConfig",
    "PuzzleSnapshot",
    "IdleGesture",
    "DraggingGesture",
    "GestureState",
    "new_snapshot",
    "record_match",
    "start_gesture",
    "move_gesture",
    "end_gesture",
    "WordSource",
    "WordSearchGame",
]
