"""
Extract the inline `window.gameData = {...}` object from an upstream HTML page.

The object is located by scanning from its opening brace to the matching close
brace while tracking string literals, so braces inside puzzle text do not end
the object early. The slice is parsed as strict JSON first and as a relaxed
object literal second.
"""

import json
import logging
from typing import Any

from core.errors import NotFoundError, ParseError
from extraction.literal import parse_literal

logger = logging.getLogger(__name__)

GAME_DATA_MARKER = "window.gameData"
QUOTES = "\"'`"


def find_object_span(text: str, start: int) -> int:
    """
    Return the index of the brace that closes the object opened at text[start].

    Quote characters open a string literal unless they are already inside one;
    a string closes on the same quote character when the previous character is
    not a backslash. Braces inside strings are ignored.

    Raises:
        NotFoundError("object-end"): input ends before the object closes.
    """
    depth = 0
    string_char = ""
    prev_char = ""
    for i in range(start, len(text)):
        ch = text[i]
        if string_char:
            if ch == string_char and prev_char != "\\":
                string_char = ""
        elif ch in QUOTES:
            string_char = ch
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return i
        prev_char = ch
    raise NotFoundError("object-end")


def locate_game_data(html: str) -> str:
    """Return the source text of the gameData object literal, braces included."""
    marker_index = html.find(GAME_DATA_MARKER)
    if marker_index == -1:
        raise NotFoundError("marker")
    assign_index = html.find("=", marker_index)
    if assign_index == -1:
        raise NotFoundError("assignment")
    first_brace = html.find("{", assign_index)
    if first_brace == -1:
        raise NotFoundError("object-start")
    end_index = find_object_span(html, first_brace)
    return html[first_brace:end_index + 1]


def parse_game_data(source: str) -> Any:
    """Parse object-literal source as JSON, falling back to the relaxed literal parser."""
    try:
        return json.loads(source)
    except json.JSONDecodeError as json_err:
        try:
            value = parse_literal(source)
        except ParseError as literal_err:
            logger.warning("gameData parse failed json_error=%s literal_error=%s", json_err, literal_err)
            raise ParseError(
                f"Failed to parse gameData JSON: {json_err}; as object literal: {literal_err}"
            ) from literal_err
        logger.debug("gameData parsed as object literal (not strict JSON) length=%s", len(source))
        return value


def extract_game_data(html: str) -> dict:
    """
    Locate and parse the game data embedded in an HTML page.

    Args:
        html: Full page text.

    Returns:
        The gameData object as a dict.

    Raises:
        NotFoundError: marker, assignment, or object boundaries missing (see .stage).
        ParseError: the located text is neither JSON nor a supported object literal.
    """
    source = locate_game_data(html)
    data = parse_game_data(source)
    if not isinstance(data, dict):
        raise ParseError(f"gameData is not an object (got {type(data).__name__})")
    return data
