"""
Letter Boxed adapter: id, solution and date of today's puzzle.
"""

from puzzles_factory.base import BasePuzzleAdapter


class LetterBoxedAdapter(BasePuzzleAdapter):
    """Letter Boxed answers from {BASE_URL_OLD}/letter-boxed/."""

    @property
    def puzzle_type(self) -> str:
        return "letterboxd"

    @property
    def content_kind(self) -> str:
        return "html"

    def url_path(self, date: str | None) -> tuple[str, str]:
        return "old", "/letter-boxed/"

    def normalize(self, data: dict) -> dict:
        data = self._require_object(data)
        return {
            "answer": {
                "id": self._require(data, "id"),
                "solution": self._require(data, "ourSolution", list),
                "date": self._require(data, "date"),
            }
        }
