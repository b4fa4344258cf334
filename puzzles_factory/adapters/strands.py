"""
Strands adapter: theme words and spangram for a date.
"""

from puzzles_factory.base import BasePuzzleAdapter


class StrandsAdapter(BasePuzzleAdapter):
    """Strands answers from {BASE_URL_NEW}/strands/v2/{date}.json."""

    date_required = True

    @property
    def puzzle_type(self) -> str:
        return "strands"

    @property
    def content_kind(self) -> str:
        return "json"

    def url_path(self, date: str | None) -> tuple[str, str]:
        return "new", f"/strands/v2/{date}.json"

    def normalize(self, data: dict) -> dict:
        data = self._require_object(data)
        return {
            "answer": self._require(data, "themeWords", list),
            "spangram": self._require(data, "spangram", str),
        }
