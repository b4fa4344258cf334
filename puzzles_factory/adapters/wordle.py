"""
Wordle adapter: the upstream JSON for a date is published unchanged as the answer.
"""

from puzzles_factory.base import BasePuzzleAdapter


class WordleAdapter(BasePuzzleAdapter):
    """Wordle answers from {BASE_URL_NEW}/wordle/v2/{date}.json."""

    date_required = True

    @property
    def puzzle_type(self) -> str:
        return "wordle"

    @property
    def content_kind(self) -> str:
        return "json"

    def url_path(self, date: str | None) -> tuple[str, str]:
        return "new", f"/wordle/v2/{date}.json"

    def normalize(self, data: dict) -> dict:
        return {"answer": data}
