"""
Scanner primitive tests.

Exercises the cursor-based functions directly, the way callers scanning
known-shape JSON without a tree would use them.
"""

import math

import pytest

from treejson import Classification
from treejson import ValueType
from treejson import classify_nameless_value
from treejson import classify_value
from treejson import get_number
from treejson import get_string
from treejson import literal_text
from treejson import skip_whitespace


@pytest.mark.parametrize(
    "text,cursor,expected",
    [
        ("  \t\r\nx", 0, 5),
        ("x", 0, 0),
        ("a  b", 1, 3),
        ("   ", 0, 3),
        ("", 0, 0),
        ("ab", 2, 2),
    ],
)
def test_skip_whitespace(text: str, cursor: int, expected: int) -> None:
    """
    Validates whitespace skipping stops at content or end of input.
    """
    assert skip_whitespace(text, cursor) == expected


def test_skip_whitespace_is_idempotent() -> None:
    """
    Validates that a second skip from the result does not move.
    """
    text = " \n {"
    once = skip_whitespace(text, 0)
    assert skip_whitespace(text, once) == once


@pytest.mark.parametrize(
    "value_text,expected",
    [
        ("{}", Classification.OBJECT),
        ("[]", Classification.ARRAY),
        ('"s"', Classification.STRING),
        ("12", Classification.NUMBER),
        ("-1", Classification.NUMBER),
        ("+1", Classification.NUMBER),
        (".5", Classification.NUMBER),
        ("true", Classification.TRUE),
        ("false", Classification.FALSE),
        ("null", Classification.NULL),
        ("nil", Classification.INVALID),
        ("}", Classification.INVALID),
        ("", Classification.INVALID),
    ],
)
def test_classify_value_kinds(value_text: str, expected: Classification) -> None:
    """
    Validates classification by first significant character or literal.
    """
    text = f'"name" : {value_text}'
    kind, name, cursor = classify_value(text, 0)

    assert kind is expected
    if expected is Classification.INVALID:
        assert name == ""
        assert cursor == 0
    else:
        assert name == "name"
        assert cursor == text.index(":") + 2


@pytest.mark.parametrize(
    "text",
    [
        'name: 1',
        '"": 1',
        '"name" 1',
        '"name": ',
        '"unterminated: 1',
        '"name"',
    ],
)
def test_classify_value_invalid_forms(text: str) -> None:
    """
    Validates rejection of bad names, missing colons and missing values.
    """
    kind, name, cursor = classify_value(text, 0)
    assert kind is Classification.INVALID
    assert name == ""
    assert cursor == 0


def test_classify_value_unescapes_name() -> None:
    """
    Validates that member names come back decoded.
    """
    kind, name, cursor = classify_value(r'"a\"b\\":null', 0)
    assert kind is Classification.NULL
    assert name == 'a"b\\'
    assert cursor == 9


def test_classify_nameless_value() -> None:
    """
    Validates element classification with leading whitespace.
    """
    assert classify_nameless_value("[  true]", 1) == (Classification.TRUE, 3)
    assert classify_nameless_value("[ ,]", 1) == (Classification.INVALID, 1)
    assert classify_nameless_value("[", 1) == (Classification.INVALID, 1)


def test_classification_value_types() -> None:
    """
    Validates the mapping from classifications to tree tags.
    """
    assert Classification.TRUE.value_type is ValueType.BOOL
    assert Classification.FALSE.value_type is ValueType.BOOL
    assert Classification.OBJECT.value_type is ValueType.OBJECT
    assert Classification.INVALID.value_type is None


@pytest.mark.parametrize(
    "text,expected,end",
    [
        ('"plain"', "plain", 7),
        ('"a\\"b"', 'a"b', 6),
        ('"a\\\\"b', "a\\", 5),
        ('"a\\\\\\"b"', 'a\\"b', 8),
        ('"\\r\\n\\t\\/"', "\r\n\t/", 10),
        ('""', "", 2),
    ],
)
def test_get_string(text: str, expected: str, end: int) -> None:
    """
    Validates closing-quote detection by backslash parity and unescaping.
    """
    assert get_string(text, 0) == (expected, end)


def test_get_string_unterminated() -> None:
    """
    Validates that a string with no closing quote yields None.
    """
    assert get_string('"never closed', 0) is None
    assert get_string('"escaped at end\\"', 0) is None


def test_get_string_with_explicit_search_start() -> None:
    """
    Validates that the closing-quote search can begin past the opener.
    """
    text = '"ab"cd"'
    assert get_string(text, 0, 4) == ('ab"cd', 7)


@pytest.mark.parametrize(
    "text,expected,end",
    [
        ("42", 42.0, 2),
        ("-3.5,", -3.5, 4),
        ("+7]", 7.0, 2),
        (".25 ", 0.25, 3),
        ("0", 0.0, 1),
    ],
)
def test_get_number(text: str, expected: float, end: int) -> None:
    """
    Validates consumption of the maximal number-character run.
    """
    assert get_number(text, 0) == (expected, end)


@pytest.mark.parametrize("text", ["1.2.3", "--5", "-", "1-2"])
def test_get_number_leniency(text: str) -> None:
    """
    Validates that ill-formed runs are consumed whole and become NaN.
    """
    number, end = get_number(text, 0)
    assert math.isnan(number)
    assert end == len(text)


def test_get_number_stops_at_exponent() -> None:
    """
    Validates that exponent markers are not part of a number run.
    """
    assert get_number("1e5", 0) == (1.0, 1)


def test_literal_text() -> None:
    """
    Validates the fixed spelling of each literal classification.
    """
    assert literal_text(Classification.TRUE) == "true"
    assert literal_text(Classification.FALSE) == "false"
    assert literal_text(Classification.NULL) == "null"
    assert literal_text(Classification.NUMBER) is None
