"""Extraction of game data embedded in upstream HTML pages."""

from extraction.game_data import extract_game_data, find_object_span, locate_game_data
from extraction.literal import LiteralSyntaxError, parse_literal

__all__ = [
    "LiteralSyntaxError",
    "extract_game_data",
    "find_object_span",
    "locate_game_data",
    "parse_literal",
]
