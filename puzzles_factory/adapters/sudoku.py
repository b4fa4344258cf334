"""
Sudoku adapter: solution grids for today's easy, medium and hard puzzles.
Best effort: a difficulty whose puzzle_data.solution is missing or not a list
is left out of the answer instead of failing the whole puzzle.
"""

import logging

from puzzles_factory.base import BasePuzzleAdapter

logger = logging.getLogger(__name__)

DIFFICULTIES = ("easy", "medium", "hard")


class SudokuAdapter(BasePuzzleAdapter):
    """Sudoku solutions from {BASE_URL_OLD}/sudoku/."""

    @property
    def puzzle_type(self) -> str:
        return "sudoku"

    @property
    def content_kind(self) -> str:
        return "html"

    def url_path(self, date: str | None) -> tuple[str, str]:
        return "old", "/sudoku/"

    def normalize(self, data: dict) -> dict:
        solutions = {}
        for level in DIFFICULTIES:
            block = data.get(level) if isinstance(data, dict) else None
            puzzle_data = block.get("puzzle_data") if isinstance(block, dict) else None
            solution = puzzle_data.get("solution") if isinstance(puzzle_data, dict) else None
            if isinstance(solution, list):
                solutions[level] = solution
            else:
                logger.info("sudoku level=%s has no solution list; omitted", level)
        return {"answer": solutions}
