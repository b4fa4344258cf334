"""
Build published puzzle answers from upstream payloads.
Route by puzzle type and delegate to puzzle-specific adapters.
"""

from puzzles_factory.base import BasePuzzleAdapter
from puzzles_factory.router import (
    build_answer,
    get_adapter,
    normalize_raw,
    register_adapter,
    registered_types,
)

# Register built-in adapters; registration order is the batch generation order
from puzzles_factory.adapters.wordle import WordleAdapter
from puzzles_factory.adapters.strands import StrandsAdapter
from puzzles_factory.adapters.connections import ConnectionsAdapter
from puzzles_factory.adapters.spelling_bee import SpellingBeeAdapter
from puzzles_factory.adapters.letter_boxed import LetterBoxedAdapter
from puzzles_factory.adapters.sudoku import SudokuAdapter

register_adapter(WordleAdapter())
register_adapter(StrandsAdapter())
register_adapter(ConnectionsAdapter())
register_adapter(SpellingBeeAdapter())
register_adapter(LetterBoxedAdapter())
register_adapter(SudokuAdapter())

__all__ = [
    "BasePuzzleAdapter",
    "build_answer",
    "get_adapter",
    "normalize_raw",
    "register_adapter",
    "registered_types",
]
