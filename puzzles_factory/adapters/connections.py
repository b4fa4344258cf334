"""
Connections adapter: one {title: [card contents]} entry per category, in upstream order.
"""

from core.errors import ShapeError
from puzzles_factory.base import BasePuzzleAdapter


class ConnectionsAdapter(BasePuzzleAdapter):
    """Connections groups from {BASE_URL_NEW}/connections/v2/{date}.json."""

    date_required = True

    @property
    def puzzle_type(self) -> str:
        return "connections"

    @property
    def content_kind(self) -> str:
        return "json"

    def url_path(self, date: str | None) -> tuple[str, str]:
        return "new", f"/connections/v2/{date}.json"

    def normalize(self, data: dict) -> dict:
        data = self._require_object(data)
        categories = data.get("categories") or []
        if not isinstance(categories, list):
            raise ShapeError("'categories' in connections data is not a list", puzzle_type=self.puzzle_type)
        return {"answer": [self._category_words(cat) for cat in categories]}

    def _category_words(self, category: dict) -> dict:
        category = self._require_object(category)
        title = self._require(category, "title", str)
        cards = category.get("cards")
        if not isinstance(cards, list):
            return {title: []}
        words = [card.get("content") if isinstance(card, dict) else None for card in cards]
        return {title: words}
