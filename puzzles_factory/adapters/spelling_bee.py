"""
Spelling Bee adapter: publishes gameData["today"] from the Spelling Bee page.
The page is fetched for a given date when one is passed (on-demand), otherwise
for today (batch). Whether the upstream serves historical dates is unverified.
"""

from core.errors import ShapeError
from puzzles_factory.base import BasePuzzleAdapter


class SpellingBeeAdapter(BasePuzzleAdapter):
    """Spelling Bee answers from {BASE_URL_OLD}/spelling-bee[/{date}]."""

    @property
    def puzzle_type(self) -> str:
        return "spellingbee"

    @property
    def content_kind(self) -> str:
        return "html"

    def url_path(self, date: str | None) -> tuple[str, str]:
        if date:
            return "old", f"/spelling-bee/{date}"
        return "old", "/spelling-bee"

    def normalize(self, data: dict) -> dict:
        data = self._require_object(data)
        today = data.get("today")
        if not today:
            raise ShapeError(
                "Found gameData, but it does not contain the 'today' property.",
                puzzle_type=self.puzzle_type,
            )
        return {"answer": today}
