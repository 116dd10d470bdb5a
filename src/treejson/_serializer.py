"""
Tree to text serializer.

String escaping mirrors the scanner's unescaping, so any tree without
characters that would need ``\\u`` escapes survives a dump/parse round
trip unchanged.
"""

import math
from decimal import Decimal

from ._config import EncodeConfig
from ._profile import StepTimer
from ._tree import JsonArray
from ._tree import JsonObject
from ._tree import Value
from ._tree import ValueType

# Applied in this order; later passes must not re-escape earlier output.
_STRING_ESCAPES = (
    ("\\", "\\\\"),
    ("\r", "\\r"),
    ("\n", "\\n"),
    ("\t", "\\t"),
    ('"', '\\"'),
)

# Integral floats below this magnitude print without a fractional part.
_INTEGRAL_LIMIT = 2**53


def encode_string(s: str) -> str:
    """Escapes and quotes ``s``; non-ASCII characters pass through."""
    for char, escaped in _STRING_ESCAPES:
        s = s.replace(char, escaped)
    return f'"{s}"'


def encode_number(n: float) -> str:
    """Formats ``n`` in positional notation the scanner can read back."""
    if math.isnan(n) or math.isinf(n):
        msg = "Out of range float values are not JSON compliant"
        raise ValueError(msg)
    if n.is_integer() and abs(n) < _INTEGRAL_LIMIT:
        return str(int(n))

    text = repr(n)
    if "e" in text:
        return format(Decimal(text), "f")
    return text


def _indent_string(indent: str | int | None, level: int) -> str:
    if indent is None:
        return ""
    elif isinstance(indent, int):
        return " " * (indent * level)
    else:
        return indent * level


def _join(
    items: list[str], opener: str, closer: str, config: EncodeConfig, level: int
) -> str:
    if not items:
        return opener + closer
    if config.indent is None:
        return opener + ",".join(items) + closer

    outer = _indent_string(config.indent, level)
    inner = _indent_string(config.indent, level + 1)
    lines = [opener]
    for i, item in enumerate(items):
        line = f"{inner}{item}"
        if i < len(items) - 1:
            line += ","
        lines.append(line)
    lines.append(f"{outer}{closer}")
    return "\n".join(lines)


def _encode_object(obj: JsonObject, config: EncodeConfig, level: int) -> str:
    separator = ": " if config.pretty or config.indent is not None else ":"
    items = [
        f"{encode_string(name)}{separator}{_encode_value(value, config, level + 1)}"
        for name, value in obj
    ]
    return _join(items, "{", "}", config, level)


def _encode_array(arr: JsonArray, config: EncodeConfig, level: int) -> str:
    items = [_encode_value(value, config, level + 1) for value in arr]
    return _join(items, "[", "]", config, level)


def _encode_value(value: Value, config: EncodeConfig, level: int) -> str:  # noqa: PLR0911
    kind = value.kind
    if kind is ValueType.NULL:
        return "null"
    elif kind is ValueType.BOOL:
        return "true" if value.data else "false"
    elif kind is ValueType.NUMBER:
        return encode_number(value.data)  # type: ignore[arg-type]
    elif kind is ValueType.STRING:
        return encode_string(value.data)  # type: ignore[arg-type]
    elif kind is ValueType.ARRAY:
        return _encode_array(value.data, config, level)  # type: ignore[arg-type]
    else:
        return _encode_object(value.data, config, level)  # type: ignore[arg-type]


def serialize(tree: JsonObject | Value, config: EncodeConfig) -> str:
    """Writes the document rooted at ``tree`` as JSON text."""
    if isinstance(tree, Value):
        root = tree.unwrap(ValueType.OBJECT)
        if root is None:
            msg = f"the root must be an object, not {tree.kind.name}"
            raise TypeError(msg)
        tree = root
    if not isinstance(tree, JsonObject):
        msg = f"the root must be a JsonObject, not {type(tree).__name__}"
        raise TypeError(msg)

    with StepTimer("serialize") as timer:
        text = _encode_object(tree, config, 0)
        timer.finish(len(text))
        return text
