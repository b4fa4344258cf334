import math

import pytest

from core.errors import ParseError
from extraction.literal import LiteralSyntaxError, parse_literal


def test_plain_json() -> None:
    assert parse_literal('{"a": [1, 2.5, true, false, null], "b": "x"}') == {
        "a": [1, 2.5, True, False, None],
        "b": "x",
    }


def test_unquoted_keys_and_single_quotes() -> None:
    assert parse_literal("{id: 7, name: 'bee', $tag: 'a', _x: \"y\"}") == {
        "id": 7,
        "name": "bee",
        "$tag": "a",
        "_x": "y",
    }


def test_trailing_commas_and_comments() -> None:
    text = """{
        // letters
        letters: ['a', 'b',], /* block
        comment */ count: 2,
    }"""
    assert parse_literal(text) == {"letters": ["a", "b"], "count": 2}


def test_js_only_values() -> None:
    value = parse_literal("{u: undefined, n: NaN, i: Infinity, m: -Infinity, h: 0x1F, p: +3, d: .5, e: 1e3}")
    assert value["u"] is None
    assert math.isnan(value["n"])
    assert value["i"] == math.inf
    assert value["m"] == -math.inf
    assert value["h"] == 31
    assert value["p"] == 3
    assert value["d"] == 0.5
    assert value["e"] == 1000.0


def test_numeric_and_keyword_keys() -> None:
    assert parse_literal("{1: 'a', 2.0: 'b', null: 'c'}") == {"1": "a", "2": "b", "null": "c"}


def test_escapes() -> None:
    text = r"""['it\'s', "tab\there", '\x41B\u{43}', '\ud83d\ude00', 'line\
break', `back\`tick`]"""
    assert parse_literal(text) == ["it's", "tab\there", "ABC", "\U0001F600", "linebreak", "back`tick"]


def test_backtick_string_spans_lines() -> None:
    assert parse_literal("`a\nb`") == "a\nb"


def test_template_interpolation_rejected() -> None:
    with pytest.raises(LiteralSyntaxError):
        parse_literal("{a: `x${y}`}")


@pytest.mark.parametrize(
    "text",
    [
        "{a: foo}",
        "{a: 1} extra",
        "{a 1}",
        "[1 2]",
        "{'a': 'unterminated}",
        "{a: 1e}",
        "{a: 'x\ny'}",
        "/* open",
        "",
    ],
)
def test_invalid_literals(text: str) -> None:
    with pytest.raises(ParseError):
        parse_literal(text)


def test_error_reports_position() -> None:
    with pytest.raises(LiteralSyntaxError) as exc_info:
        parse_literal("{a: 1, b: oops}")
    assert exc_info.value.position == 10
