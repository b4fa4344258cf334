"""Shared configuration and error types for the puzzle answer service."""

from core.errors import (
    MissingDateError,
    NotFoundError,
    ParseError,
    PublishError,
    PuzzleError,
    ShapeError,
    UpstreamError,
)

__all__ = [
    "MissingDateError",
    "NotFoundError",
    "ParseError",
    "PublishError",
    "PuzzleError",
    "ShapeError",
    "UpstreamError",
]
