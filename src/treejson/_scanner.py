"""
Stateless scanning primitives over a text buffer and an explicit cursor.

Every function takes the full document and an index into it and returns
the new index alongside whatever it extracted, so callers can scan
known-shape JSON without building a tree.
"""

import math
from enum import Enum

from ._profile import StepTimer
from ._tree import ValueType

type Cursor = int

WHITESPACE = " \t\r\n"
NUMBER_CHARS = "0123456789-+."
QUOTE = '"'
BACKSLASH = "\\"
NAME_SEPARATOR = ":"
MEMBER_SEPARATOR = ","
OBJECT_OPEN = "{"
OBJECT_CLOSE = "}"
ARRAY_OPEN = "["
ARRAY_CLOSE = "]"

# Escapes decoded by get_string; any other backslash pair is kept verbatim.
UNESCAPE_MAP = {
    "\\": "\\",
    '"': '"',
    "r": "\r",
    "n": "\n",
    "t": "\t",
    "/": "/",
}


class Classification(Enum):
    """Kind of JSON value found at a cursor position."""

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    TRUE = "true"
    FALSE = "false"
    NULL = "null"
    INVALID = "invalid"

    @property
    def value_type(self) -> ValueType | None:
        return _VALUE_TYPES.get(self)


_VALUE_TYPES = {
    Classification.OBJECT: ValueType.OBJECT,
    Classification.ARRAY: ValueType.ARRAY,
    Classification.STRING: ValueType.STRING,
    Classification.NUMBER: ValueType.NUMBER,
    Classification.TRUE: ValueType.BOOL,
    Classification.FALSE: ValueType.BOOL,
    Classification.NULL: ValueType.NULL,
}

_LITERALS = (
    ("true", Classification.TRUE),
    ("false", Classification.FALSE),
    ("null", Classification.NULL),
)


def literal_text(kind: Classification) -> str | None:
    """Returns the fixed text of a literal classification."""
    for text, literal in _LITERALS:
        if literal is kind:
            return text
    return None


def skip_whitespace(text: str, cursor: Cursor) -> Cursor:
    """Advances past space, tab, CR and LF; stops at end of input."""
    length = len(text)
    while cursor < length and text[cursor] in WHITESPACE:
        cursor += 1
    return cursor


def _classify_at(text: str, cursor: Cursor) -> Classification:
    """Peeks at the first significant character of a value."""
    if cursor >= len(text):
        return Classification.INVALID

    char = text[cursor]
    if char == OBJECT_OPEN:
        return Classification.OBJECT
    elif char == ARRAY_OPEN:
        return Classification.ARRAY
    elif char == QUOTE:
        return Classification.STRING
    elif char in NUMBER_CHARS:
        return Classification.NUMBER

    for literal, kind in _LITERALS:
        if text.startswith(literal, cursor):
            return kind
    return Classification.INVALID


def classify_value(
    text: str, cursor: Cursor
) -> tuple[Classification, str, Cursor]:
    """
    Reads a member name and classifies the value that follows it.

    ``cursor`` must sit on the name's opening quote. On success the
    returned cursor points at the first character of the value. The
    classification is INVALID, with an empty name and the input cursor,
    when the name is missing, unterminated or empty, when no colon follows
    it, or when the value matches none of the JSON forms.
    """
    with StepTimer("classify_value", cursor) as timer:
        kind, name, pos = _read_member_head(text, cursor)
        timer.finish(None if kind is Classification.INVALID else pos)
        return kind, name, pos


def _read_member_head(
    text: str, cursor: Cursor
) -> tuple[Classification, str, Cursor]:
    if cursor >= len(text) or text[cursor] != QUOTE:
        return Classification.INVALID, "", cursor

    scanned = get_string(text, cursor)
    if scanned is None:
        return Classification.INVALID, "", cursor
    name, pos = scanned
    if not name:
        return Classification.INVALID, "", cursor

    pos = skip_whitespace(text, pos)
    if pos >= len(text) or text[pos] != NAME_SEPARATOR:
        return Classification.INVALID, "", cursor
    pos = skip_whitespace(text, pos + 1)

    kind = _classify_at(text, pos)
    if kind is Classification.INVALID:
        return Classification.INVALID, "", cursor
    return kind, name, pos


def classify_nameless_value(
    text: str, cursor: Cursor
) -> tuple[Classification, Cursor]:
    """Classifies an array element, skipping any leading whitespace."""
    with StepTimer("classify_nameless_value", cursor) as timer:
        pos = skip_whitespace(text, cursor)
        kind = _classify_at(text, pos)
        if kind is Classification.INVALID:
            timer.finish(None)
            return kind, cursor
        timer.finish(pos)
        return kind, pos


def _find_closing_quote(
    text: str, start_quote: Cursor, cursor: Cursor
) -> Cursor:
    """
    Finds the first quote at or after ``cursor`` that ends a string.

    A quote ends the string only when an even number of backslashes
    immediately precede it. Returns -1 when there is none.
    """
    pos = text.find(QUOTE, cursor)
    while pos >= 0:
        backslashes = 0
        i = pos - 1
        while i > start_quote and text[i] == BACKSLASH:
            backslashes += 1
            i -= 1
        if backslashes % 2 == 0:
            return pos
        pos = text.find(QUOTE, pos + 1)
    return -1


def _unescape(raw: str) -> str:
    if BACKSLASH not in raw:
        return raw

    result = []
    i = 0
    while i < len(raw):
        char = raw[i]
        if char == BACKSLASH and i + 1 < len(raw):
            next_char = raw[i + 1]
            if next_char in UNESCAPE_MAP:
                result.append(UNESCAPE_MAP[next_char])
            else:
                result.append(char + next_char)
            i += 2
        else:
            result.append(char)
            i += 1
    return "".join(result)


def get_string(
    text: str, start_quote: Cursor, cursor: Cursor | None = None
) -> tuple[str, Cursor] | None:
    """
    Extracts and unescapes the string opened at ``start_quote``.

    The search for the closing quote begins at ``cursor`` (by default just
    after the opening quote). Returns the decoded text and the position
    just past the closing quote, or None if the string is never closed.
    """
    if cursor is None:
        cursor = start_quote + 1
    with StepTimer("get_string", start_quote) as timer:
        end = _find_closing_quote(text, start_quote, cursor)
        if end < 0:
            timer.finish(None)
            return None
        timer.finish(end + 1)
        return _unescape(text[start_quote + 1 : end]), end + 1


def get_number(text: str, cursor: Cursor) -> tuple[float, Cursor]:
    """
    Consumes the longest run of digits, signs and dots at ``cursor``.

    The run is not validated against the JSON number grammar; runs that
    ``float()`` rejects, such as ``1.2.3`` or ``--5``, convert to NaN.
    """
    with StepTimer("get_number", cursor) as timer:
        end = cursor
        length = len(text)
        while end < length and text[end] in NUMBER_CHARS:
            end += 1

        try:
            number = float(text[cursor:end])
        except ValueError:
            number = math.nan
        timer.finish(end)
        return number, end
