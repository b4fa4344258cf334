"""
Abstract base for per-puzzle adapters.
Each adapter knows its upstream URL and how to normalize decoded data into the
published answer shape.
"""

import json
from abc import ABC, abstractmethod
from typing import Any

from core.errors import MissingDateError, ParseError, PuzzleError, ShapeError
from extraction import extract_game_data
from upstream import RawResponse
from upstream.client import build_url as upstream_url


class BasePuzzleAdapter(ABC):
    """Adapter for one puzzle type: upstream URL, decoding, and normalization."""

    #: Whether the upstream URL needs a date (YYYY-MM-DD).
    date_required: bool = False

    @property
    @abstractmethod
    def puzzle_type(self) -> str:
        """Puzzle slug (e.g. 'wordle', 'spellingbee'); also the output file stem."""
        ...

    @property
    @abstractmethod
    def content_kind(self) -> str:
        """'json' for API payloads, 'html' for pages carrying window.gameData."""
        ...

    @abstractmethod
    def url_path(self, date: str | None) -> tuple[str, str]:
        """
        Return (base kind, path) for the upstream request.

        Args:
            date: YYYY-MM-DD, or None for "today" where the upstream supports it.
        """
        ...

    @abstractmethod
    def normalize(self, data: dict) -> dict:
        """
        Build the published answer from decoded upstream data.

        Raises:
            ShapeError: a strictly required field is missing or has the wrong type.
        """
        ...

    def check_date(self, date: str | None) -> None:
        if self.date_required and not date:
            raise MissingDateError(self.puzzle_type)

    def build_url(self, date: str | None = None) -> str:
        """Absolute upstream URL for this puzzle and date."""
        self.check_date(date)
        base, path = self.url_path(date)
        return upstream_url(base, path)

    def decode(self, raw: RawResponse) -> Any:
        """Turn the raw body into structured data (JSON body, or embedded gameData)."""
        if raw.content_kind == "html":
            try:
                return extract_game_data(raw.text)
            except PuzzleError as e:
                e.puzzle_type = e.puzzle_type or self.puzzle_type
                raise
        try:
            return json.loads(raw.text)
        except json.JSONDecodeError as e:
            raise ParseError(f"Invalid JSON from {raw.url}: {e}", puzzle_type=self.puzzle_type) from e

    def _require_object(self, data: Any) -> dict:
        if not isinstance(data, dict):
            raise ShapeError(
                f"Expected a JSON object for {self.puzzle_type}, got {type(data).__name__}",
                puzzle_type=self.puzzle_type,
            )
        return data

    def _require(self, data: dict, key: str, kind: type | tuple[type, ...] | None = None) -> Any:
        """Return data[key]; raise ShapeError if it is absent or not of kind."""
        if key not in data or data[key] is None:
            raise ShapeError(
                f"Found {self.puzzle_type} data, but it does not contain the '{key}' property.",
                puzzle_type=self.puzzle_type,
            )
        value = data[key]
        if kind is not None and not isinstance(value, kind):
            raise ShapeError(
                f"'{key}' in {self.puzzle_type} data has type {type(value).__name__}",
                puzzle_type=self.puzzle_type,
            )
        return value
