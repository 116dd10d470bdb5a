"""
Order-preserving JSON tree parser and serializer.

Parses JSON text into a tree of tagged ``Value`` nodes rooted at a
``JsonObject`` and writes such trees back to text. Parsing never raises
on malformed input: ``loads`` returns None instead, and the reason is
logged at DEBUG level on the ``treejson`` loggers.

The grammar is deliberately small: no ``\\u`` escapes, no exponents, and
all numbers are floats.
"""

from typing import IO
from typing import Any

from ._builder import ParseFailure
from ._builder import build
from ._builder import parse_elements
from ._builder import parse_members
from ._config import EncodeConfig
from ._config import ParseConfig
from ._profile import StepStats
from ._profile import clear_step_stats
from ._profile import disable_profiling
from ._profile import enable_profiling
from ._profile import get_step_stats
from ._profile import profiling_enabled
from ._scanner import Classification
from ._scanner import Cursor
from ._scanner import classify_nameless_value
from ._scanner import classify_value
from ._scanner import get_number
from ._scanner import get_string
from ._scanner import literal_text
from ._scanner import skip_whitespace
from ._serializer import serialize
from ._tree import JsonArray
from ._tree import JsonObject
from ._tree import Value
from ._tree import ValueType
from ._tree import make_value

__version__ = "0.1.0"


def loads(s: str, **kwargs: Any) -> JsonObject | None:
    """
    Parses JSON text into a tree rooted at an object.

    Returns None for malformed input. Input that ends before its closing
    brace or bracket still yields the partially filled tree unless
    ``strict=True`` is passed.
    """
    if not isinstance(s, str):
        msg = f"the JSON object must be str, not {type(s).__name__}"
        raise TypeError(msg)

    config = ParseConfig(**kwargs)
    result = build(s, config)
    if isinstance(result, ParseFailure):
        return None
    return result


def dumps(tree: JsonObject | Value, pretty: bool = False, **kwargs: Any) -> str:
    """
    Serializes a tree to JSON text.

    ``pretty`` puts a space after each colon; ``indent`` lays members out
    one per line.
    """
    config = EncodeConfig(pretty=pretty, **kwargs)
    return serialize(tree, config)


def load(fp: IO[str], **kwargs: Any) -> JsonObject | None:
    """
    Parses JSON from a file-like object.
    """
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return loads(fp.read(), **kwargs)


def dump(
    tree: JsonObject | Value, fp: IO[str], pretty: bool = False, **kwargs: Any
) -> None:
    """
    Serializes a tree to a file-like object.
    """
    if not hasattr(fp, "write"):
        raise TypeError("fp must have a write() method")

    fp.write(dumps(tree, pretty, **kwargs))


__all__ = [
    "Classification",
    "Cursor",
    "EncodeConfig",
    "JsonArray",
    "JsonObject",
    "ParseConfig",
    "ParseFailure",
    "StepStats",
    "Value",
    "ValueType",
    "classify_nameless_value",
    "classify_value",
    "clear_step_stats",
    "disable_profiling",
    "dump",
    "dumps",
    "enable_profiling",
    "get_step_stats",
    "get_number",
    "get_string",
    "literal_text",
    "load",
    "loads",
    "make_value",
    "parse_elements",
    "parse_members",
    "profiling_enabled",
    "skip_whitespace",
]
