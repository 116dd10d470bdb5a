"""
Recursive-descent tree builder.

Object and array bodies are parsed by two mutually recursive loops that
drive the scanner primitives. Every step returns either the next cursor or
a ``ParseFailure``; a failure is handed back unchanged through each
enclosing call without any attempt at recovery.
"""

import logging
from dataclasses import dataclass
from dataclasses import field

from ._config import ParseConfig
from ._profile import StepTimer
from ._scanner import ARRAY_CLOSE
from ._scanner import MEMBER_SEPARATOR
from ._scanner import OBJECT_CLOSE
from ._scanner import OBJECT_OPEN
from ._scanner import Classification
from ._scanner import Cursor
from ._scanner import classify_nameless_value
from ._scanner import classify_value
from ._scanner import get_number
from ._scanner import get_string
from ._scanner import literal_text
from ._scanner import skip_whitespace
from ._tree import FALSE
from ._tree import NULL
from ._tree import TRUE
from ._tree import JsonArray
from ._tree import JsonObject
from ._tree import Value
from ._tree import ValueType

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = ParseConfig()

_LITERAL_VALUES = {
    kind: (value, len(literal_text(kind) or ""))
    for kind, value in (
        (Classification.TRUE, TRUE),
        (Classification.FALSE, FALSE),
        (Classification.NULL, NULL),
    )
}


@dataclass(frozen=True)
class ParseFailure:
    """
    Why and where a parse step failed.

    Line and column numbers are derived from ``pos`` within ``doc``.
    """

    msg: str
    pos: Cursor
    doc: str = field(default="", repr=False)

    @property
    def lineno(self) -> int:
        return self.doc.count("\n", 0, self.pos) + 1 if self.doc else 1

    @property
    def colno(self) -> int:
        if not self.doc:
            return self.pos + 1
        return self.pos - self.doc.rfind("\n", 0, self.pos)

    def __str__(self) -> str:
        return f"{self.msg} at line {self.lineno}, column {self.colno}"


type ParseStep = Cursor | ParseFailure


def _depth_exceeded(
    text: str, cursor: Cursor, config: ParseConfig, depth: int
) -> ParseFailure | None:
    if config.max_depth is not None and depth > config.max_depth:
        return ParseFailure(
            f"Nesting depth {depth} exceeds limit {config.max_depth}",
            cursor,
            text,
        )
    return None


def _skip_separator(text: str, cursor: Cursor) -> Cursor:
    """Skips whitespace and at most one comma."""
    cursor = skip_whitespace(text, cursor)
    if cursor < len(text) and text[cursor] == MEMBER_SEPARATOR:
        cursor += 1
    return cursor


def _end_of_input(
    text: str, cursor: Cursor, config: ParseConfig, closer: str
) -> ParseStep:
    """Handles input running out before ``closer`` was seen."""
    if config.strict:
        return ParseFailure(
            f"Unexpected end of input, expected '{closer}'", cursor, text
        )
    logger.debug(
        "Input ended before '%s' at position %d; keeping partial container",
        closer,
        cursor,
    )
    return cursor


def read_value(
    text: str,
    cursor: Cursor,
    kind: Classification,
    config: ParseConfig = DEFAULT_CONFIG,
    depth: int = 1,
) -> tuple[Value, Cursor] | ParseFailure:
    """
    Decodes one classified value starting at ``cursor``.

    ``depth`` is the nesting level of the container holding the value;
    nested objects and arrays are parsed one level deeper.
    """
    if kind is Classification.STRING:
        scanned = get_string(text, cursor)
        if scanned is None:
            return ParseFailure("Unterminated string starting at", cursor, text)
        string, cursor = scanned
        return Value(ValueType.STRING, string), cursor
    elif kind is Classification.NUMBER:
        number, cursor = get_number(text, cursor)
        return Value(ValueType.NUMBER, number), cursor
    elif kind is Classification.OBJECT:
        obj = JsonObject()
        step = parse_members(text, cursor + 1, obj, config, depth + 1)
        if isinstance(step, ParseFailure):
            return step
        return Value(ValueType.OBJECT, obj), step
    elif kind is Classification.ARRAY:
        arr = JsonArray()
        step = parse_elements(text, cursor + 1, arr, config, depth + 1)
        if isinstance(step, ParseFailure):
            return step
        return Value(ValueType.ARRAY, arr), step
    elif kind in _LITERAL_VALUES:
        value, width = _LITERAL_VALUES[kind]
        return value, cursor + width
    else:
        return ParseFailure("Expecting value", cursor, text)


def _step_end(step: ParseStep) -> Cursor | None:
    return None if isinstance(step, ParseFailure) else step


def parse_members(
    text: str,
    cursor: Cursor,
    target: JsonObject,
    config: ParseConfig = DEFAULT_CONFIG,
    depth: int = 1,
    *,
    closed: bool = True,
) -> ParseStep:
    """
    Parses object members into ``target`` until the closing brace.

    ``cursor`` points just past the opening brace. Returns the cursor past
    the closing brace. Running out of input first is tolerated unless
    ``config.strict`` is set and ``closed`` says a brace was opened. With
    ``closed`` false there is no brace to match, so a ``}`` is an error.
    """
    with StepTimer("parse_members", cursor) as timer:
        step = _parse_members(text, cursor, target, config, depth, closed)
        timer.finish(_step_end(step))
        return step


def _parse_members(
    text: str,
    cursor: Cursor,
    target: JsonObject,
    config: ParseConfig,
    depth: int,
    closed: bool,
) -> ParseStep:
    failure = _depth_exceeded(text, cursor, config, depth)
    if failure is not None:
        return failure

    length = len(text)
    while cursor < length:
        cursor = skip_whitespace(text, cursor)
        if cursor >= length:
            break
        if text[cursor] == OBJECT_CLOSE:
            if not closed:
                return ParseFailure("Unmatched '}'", cursor, text)
            return cursor + 1

        kind, name, value_start = classify_value(text, cursor)
        if kind is Classification.INVALID:
            return ParseFailure(
                "Expecting property name enclosed in double quotes "
                "followed by ':' and a value",
                cursor,
                text,
            )

        result = read_value(text, value_start, kind, config, depth)
        if isinstance(result, ParseFailure):
            return result
        value, cursor = result
        target.set(name, value)
        cursor = _skip_separator(text, cursor)

    if not closed:
        return cursor
    return _end_of_input(text, cursor, config, OBJECT_CLOSE)


def parse_elements(
    text: str,
    cursor: Cursor,
    target: JsonArray,
    config: ParseConfig = DEFAULT_CONFIG,
    depth: int = 1,
) -> ParseStep:
    """
    Parses array elements into ``target`` until the closing bracket.

    ``cursor`` points just past the opening bracket. Returns the cursor
    past the closing bracket.
    """
    with StepTimer("parse_elements", cursor) as timer:
        step = _parse_elements(text, cursor, target, config, depth)
        timer.finish(_step_end(step))
        return step


def _parse_elements(
    text: str,
    cursor: Cursor,
    target: JsonArray,
    config: ParseConfig,
    depth: int,
) -> ParseStep:
    failure = _depth_exceeded(text, cursor, config, depth)
    if failure is not None:
        return failure

    length = len(text)
    while cursor < length:
        cursor = skip_whitespace(text, cursor)
        if cursor >= length:
            break
        if text[cursor] == ARRAY_CLOSE:
            return cursor + 1

        kind, value_start = classify_nameless_value(text, cursor)
        if kind is Classification.INVALID:
            return ParseFailure("Expecting value", cursor, text)

        result = read_value(text, value_start, kind, config, depth)
        if isinstance(result, ParseFailure):
            return result
        value, cursor = result
        target.append(value)
        cursor = _skip_separator(text, cursor)

    return _end_of_input(text, cursor, config, ARRAY_CLOSE)


def build(
    text: str, config: ParseConfig = DEFAULT_CONFIG
) -> JsonObject | ParseFailure:
    """
    Builds a tree from ``text``.

    The root is always an object; its opening brace is optional, in which
    case the members run to the end of input. Empty or blank input is an
    empty object. Text after the root's closing brace is ignored.
    """
    with StepTimer("build") as timer:
        cursor = skip_whitespace(text, 0)
        braced = cursor < len(text) and text[cursor] == OBJECT_OPEN
        if braced:
            cursor += 1

        root = JsonObject()
        step = parse_members(text, cursor, root, config, closed=braced)
        timer.finish(_step_end(step))
        if isinstance(step, ParseFailure):
            logger.debug("Parse failed: %s", step)
            return step
        return root
