import pytest

import json_parser as jp
from lexer import INVALID, STRING, tokenize


@pytest.mark.parametrize("esc", ['\\"', "\\\\", "\\/", "\\b", "\\f", "\\n", "\\r", "\\t", "\\u00e9"])
def test_recognised_escapes_accepted(esc):
    assert jp.validate('{"a":"x' + esc + 'y"}')


def test_newline_escape_accepted():
    assert jp.validate('{"a":"\\n"}')


def test_invalid_single_escape_rejected():
    bad = '{"a":"\\q"}'
    assert tokenize(bad)[-1].kind == INVALID
    assert tokenize(bad)[-1].text == "\\q"
    assert not jp.validate(bad)


@pytest.mark.parametrize("raw", ["\n", "\t", "\r"])
def test_raw_control_character_rejected(raw):
    assert not jp.validate('["a' + raw + 'b"]')


def test_unterminated_string_rejected():
    toks = tokenize('["abc')
    assert toks[-1].kind == INVALID
    assert toks[-1].text == "abc"
    assert not jp.validate('["abc')


def test_trailing_backslash_before_end_of_input():
    # The backslash has nothing after it, so the string never closes
    assert tokenize('"\\')[-1].kind == INVALID


def test_escaped_quote_does_not_close_string():
    toks = tokenize('["say \\"hi\\""]')
    assert toks[1].kind == STRING
    assert toks[1].text == 'say \\"hi\\"'
    assert jp.validate('["say \\"hi\\""]')


def test_non_ascii_content_accepted():
    assert jp.validate('{"name": "Zoë ☃"}')
