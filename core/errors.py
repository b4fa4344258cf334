"""
Error taxonomy for fetching, extracting, normalizing and publishing puzzle answers.
Every error carries the puzzle type it happened for when that is known.
"""


class PuzzleError(Exception):
    """Base class for all puzzle pipeline errors."""

    def __init__(self, message: str, *, puzzle_type: str | None = None):
        super().__init__(message)
        self.message = message
        self.puzzle_type = puzzle_type

    def __str__(self) -> str:
        return self.message


class NotFoundError(PuzzleError):
    """The embedded game data (or part of it) could not be located in the HTML."""

    MESSAGES = {
        "marker": "Could not find gameData in the HTML content.",
        "assignment": "Could not find gameData assignment in the HTML content.",
        "object-start": "Could not find the start of the gameData object.",
        "object-end": "Could not find the end of the gameData object.",
    }

    def __init__(self, stage: str, *, puzzle_type: str | None = None):
        super().__init__(self.MESSAGES.get(stage, stage), puzzle_type=puzzle_type)
        self.stage = stage


class ParseError(PuzzleError):
    """Located text is not valid structured data."""


class ShapeError(PuzzleError):
    """Parsed data is missing a required field, or the field has the wrong type."""


class UpstreamError(PuzzleError):
    """The upstream fetch failed (network error or non-2xx status)."""

    def __init__(
        self,
        puzzle_type: str,
        cause: BaseException,
        *,
        status_code: int | None = None,
    ):
        detail = f"status {status_code}" if status_code is not None else str(cause)
        super().__init__(f"Failed to fetch {puzzle_type} data: {detail}", puzzle_type=puzzle_type)
        self.cause = cause
        self.status_code = status_code


class PublishError(PuzzleError, OSError):
    """Writing a published answer failed."""


class MissingDateError(PuzzleError, ValueError):
    """A date-keyed puzzle was requested without a date."""

    def __init__(self, puzzle_type: str):
        super().__init__("Date is required", puzzle_type=puzzle_type)
