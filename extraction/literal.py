"""
Relaxed parser for JavaScript object literals.

Accepts everything strict JSON accepts, plus the object-literal syntax that
pages emit inline and json.loads rejects: unquoted identifier keys, single-quoted
and backtick strings, JS escape sequences, trailing commas, comments,
undefined/NaN/Infinity, hex integers and leading '+' or '.' in numbers.
Nothing is evaluated; expressions other than literals are rejected.
"""

import math
import re
from typing import Any

from core.errors import ParseError

_ESCAPES = {
    '"': '"',
    "'": "'",
    "`": "`",
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "0": "\0",
}

_LINE_TERMINATORS = "\n\r\u2028\u2029"

_KEYWORDS = {
    "true": True,
    "false": False,
    "null": None,
    "undefined": None,
    "NaN": math.nan,
    "Infinity": math.inf,
}

_NUMBER_RE = re.compile(
    r"""
    [+-]?
    (?:
        0[xX][0-9a-fA-F]+
      | Infinity
      | NaN
      | (?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?
    )
    """,
    re.VERBOSE,
)

_HEX4_RE = re.compile(r"[0-9a-fA-F]{4}")


class LiteralSyntaxError(ParseError):
    """Text is not a valid object literal; position is the offset of the problem."""

    def __init__(self, message: str, position: int):
        super().__init__(f"{message} at offset {position}")
        self.position = position


def _is_ident_start(ch: str) -> bool:
    return ch.isalpha() or ch in "_$"


def _is_ident_part(ch: str) -> bool:
    return ch.isalnum() or ch in "_$"


class _LiteralParser:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def parse(self) -> Any:
        value = self._value()
        self._skip()
        if self.pos < len(self.text):
            raise self._error("Unexpected trailing content")
        return value

    def _error(self, message: str) -> LiteralSyntaxError:
        return LiteralSyntaxError(message, self.pos)

    def _peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def _skip(self) -> None:
        """Skip whitespace and comments."""
        text = self.text
        while self.pos < len(text):
            ch = text[self.pos]
            if ch.isspace() or ch == "\ufeff":
                self.pos += 1
            elif text.startswith("//", self.pos):
                end = self.pos + 2
                while end < len(text) and text[end] not in _LINE_TERMINATORS:
                    end += 1
                self.pos = end
            elif text.startswith("/*", self.pos):
                end = text.find("*/", self.pos + 2)
                if end == -1:
                    raise self._error("Unterminated comment")
                self.pos = end + 2
            else:
                break

    def _value(self) -> Any:
        self._skip()
        ch = self._peek()
        if not ch:
            raise self._error("Unexpected end of input")
        if ch == "{":
            return self._object()
        if ch == "[":
            return self._array()
        if ch in "\"'`":
            return self._string()
        if ch in "+-." or ch.isdigit():
            return self._number()
        if _is_ident_start(ch):
            start = self.pos
            word = self._identifier()
            if word in _KEYWORDS:
                return _KEYWORDS[word]
            self.pos = start
            raise self._error(f"Unexpected identifier {word!r}")
        raise self._error(f"Unexpected character {ch!r}")

    def _object(self) -> dict:
        self.pos += 1
        result: dict[str, Any] = {}
        while True:
            self._skip()
            if self._peek() == "}":
                self.pos += 1
                return result
            key = self._key()
            self._skip()
            if self._peek() != ":":
                raise self._error("Expected ':' after object key")
            self.pos += 1
            result[key] = self._value()
            self._skip()
            ch = self._peek()
            if ch == ",":
                self.pos += 1
            elif ch == "}":
                self.pos += 1
                return result
            else:
                raise self._error("Expected ',' or '}' in object")

    def _array(self) -> list:
        self.pos += 1
        result: list[Any] = []
        while True:
            self._skip()
            if self._peek() == "]":
                self.pos += 1
                return result
            result.append(self._value())
            self._skip()
            ch = self._peek()
            if ch == ",":
                self.pos += 1
            elif ch == "]":
                self.pos += 1
                return result
            else:
                raise self._error("Expected ',' or ']' in array")

    def _key(self) -> str:
        ch = self._peek()
        if ch and ch in "\"'`":
            return self._string()
        if ch.isdigit() or ch == ".":
            number = self._number()
            if isinstance(number, float) and number.is_integer():
                return str(int(number))
            return str(number)
        if ch and _is_ident_start(ch):
            return self._identifier()
        raise self._error("Expected object key")

    def _identifier(self) -> str:
        text = self.text
        start = self.pos
        if self.pos < len(text) and _is_ident_start(text[self.pos]):
            self.pos += 1
            while self.pos < len(text) and _is_ident_part(text[self.pos]):
                self.pos += 1
        if self.pos == start:
            raise self._error("Expected identifier")
        return text[start:self.pos]

    def _number(self) -> int | float:
        match = _NUMBER_RE.match(self.text, self.pos)
        if not match:
            raise self._error("Invalid number")
        token = match.group(0)
        end = match.end()
        if end < len(self.text) and _is_ident_part(self.text[end]):
            raise LiteralSyntaxError("Invalid number", end)
        self.pos = end

        negative = token.startswith("-")
        body = token.lstrip("+-")
        if body[:2] in ("0x", "0X"):
            value: int | float = int(body, 16)
        elif body == "Infinity":
            value = math.inf
        elif body == "NaN":
            return math.nan
        elif "." in body or "e" in body or "E" in body:
            value = float(body)
        else:
            value = int(body)
        return -value if negative else value

    def _string(self) -> str:
        text = self.text
        quote = text[self.pos]
        self.pos += 1
        chunks: list[str] = []
        while True:
            if self.pos >= len(text):
                raise self._error("Unterminated string")
            ch = text[self.pos]
            if ch == quote:
                self.pos += 1
                return "".join(chunks)
            if ch == "\\":
                chunks.append(self._escape())
                continue
            if quote == "`":
                if text.startswith("${", self.pos):
                    raise self._error("Template interpolation is not supported")
            elif ch in "\n\r":
                raise self._error("Unescaped line break in string")
            chunks.append(ch)
            self.pos += 1

    def _escape(self) -> str:
        text = self.text
        self.pos += 1
        if self.pos >= len(text):
            raise self._error("Unterminated escape sequence")
        ch = text[self.pos]
        self.pos += 1
        if ch in _ESCAPES:
            return _ESCAPES[ch]
        if ch == "x":
            return chr(self._hex(2))
        if ch == "u":
            return self._unicode_escape()
        if ch == "\r":
            # line continuation; \r\n counts as one terminator
            if self._peek() == "\n":
                self.pos += 1
            return ""
        if ch in _LINE_TERMINATORS:
            return ""
        return ch

    def _hex(self, width: int) -> int:
        digits = self.text[self.pos:self.pos + width]
        if len(digits) != width or not all(c in "0123456789abcdefABCDEF" for c in digits):
            raise self._error("Invalid hexadecimal escape")
        self.pos += width
        return int(digits, 16)

    def _unicode_escape(self) -> str:
        text = self.text
        if self._peek() == "{":
            end = text.find("}", self.pos)
            if end == -1:
                raise self._error("Unterminated unicode escape")
            digits = text[self.pos + 1:end]
            try:
                code = int(digits, 16)
            except ValueError:
                raise self._error("Invalid unicode escape")
            if code > 0x10FFFF:
                raise self._error("Unicode escape out of range")
            self.pos = end + 1
            return chr(code)

        code = self._hex(4)
        # join a UTF-16 surrogate pair into one code point
        if 0xD800 <= code <= 0xDBFF and text.startswith("\\u", self.pos):
            low_digits = text[self.pos + 2:self.pos + 6]
            if _HEX4_RE.fullmatch(low_digits):
                low = int(low_digits, 16)
                if 0xDC00 <= low <= 0xDFFF:
                    self.pos += 6
                    return chr(0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00))
        return chr(code)


def parse_literal(text: str) -> Any:
    """
    Parse a JavaScript object/array/scalar literal into Python values.

    Args:
        text: Literal source, e.g. "{id: 1, words: ['a', 'b'],}".

    Returns:
        dict / list / str / int / float / bool / None. undefined maps to None.

    Raises:
        LiteralSyntaxError: text is not a literal this parser accepts.
    """
    return _LiteralParser(text).parse()
