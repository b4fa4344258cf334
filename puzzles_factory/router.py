"""
Route answer requests to the correct puzzle adapter: fetch, decode, normalize.
"""

import logging
from typing import TYPE_CHECKING

from upstream import RawResponse, fetch_raw

if TYPE_CHECKING:
    from puzzles_factory.base import BasePuzzleAdapter

logger = logging.getLogger(__name__)

# Registry: puzzle_type -> adapter instance (insertion order is batch order)
_registry: dict[str, "BasePuzzleAdapter"] = {}


def register_adapter(adapter: "BasePuzzleAdapter") -> None:
    """Register an adapter for its puzzle_type. Re-registering overwrites."""
    _registry[adapter.puzzle_type] = adapter


def get_adapter(puzzle_type: str) -> "BasePuzzleAdapter":
    """Return adapter for puzzle_type; raise if unknown."""
    adapter = _registry.get(puzzle_type)
    if adapter is None:
        raise ValueError(f"Unknown puzzle type: {puzzle_type}. Registered: {list(_registry)}")
    return adapter


def registered_types() -> list[str]:
    return list(_registry)


def normalize_raw(raw: RawResponse) -> dict:
    """Decode a fetched payload and normalize it with the adapter for its puzzle type."""
    adapter = get_adapter(raw.puzzle_type)
    data = adapter.decode(raw)
    answer = adapter.normalize(data)
    return answer


def build_answer(puzzle_type: str, date: str | None = None, *, timeout: float | None = None) -> dict:
    """
    Fetch one puzzle from upstream and return its published answer.

    Args:
        puzzle_type: Registered puzzle slug (e.g. "wordle", "sudoku").
        date: YYYY-MM-DD. Required for date-keyed puzzles; optional for Spelling Bee;
              ignored by Letter Boxed and Sudoku.
        timeout: Upstream timeout in seconds (default from REQUEST_TIMEOUT).

    Returns:
        PuzzleAnswer dict, e.g. {"answer": ...} (Strands adds "spangram").

    Raises:
        MissingDateError, UpstreamError, NotFoundError, ParseError, ShapeError.
    """
    adapter = get_adapter(puzzle_type)
    url = adapter.build_url(date)
    raw = fetch_raw(puzzle_type, url, adapter.content_kind, timeout=timeout)
    answer = normalize_raw(raw)
    logger.info("built answer puzzle=%s date=%s", puzzle_type, date)
    return answer
