"""Immutable configuration for parsing and dumping."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures parsing behavior with immutable settings.

    ``strict`` turns input that ends before an object or array is closed
    into a parse failure instead of a partial tree. ``max_depth`` caps
    container nesting; None leaves it bounded only by the call stack.
    Each nesting level costs three Python frames, so under the default
    recursion limit of 1000 documents nested a little over 300 deep raise
    ``RecursionError``. Set ``max_depth`` below that to get a parse
    failure instead.
    """

    strict: bool = False
    max_depth: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.strict, bool):
            raise TypeError("strict must be a boolean")
        if self.max_depth is not None:
            if isinstance(self.max_depth, bool) or not isinstance(
                self.max_depth, int
            ):
                raise TypeError("max_depth must be an integer or None")
            if self.max_depth <= 0:
                raise ValueError("max_depth must be positive")


@dataclass(frozen=True)
class EncodeConfig:
    """
    Configures serialization with immutable settings.

    ``pretty`` adds a space after each colon. ``indent`` additionally
    places every member and element on its own line.
    """

    pretty: bool = False
    indent: str | int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.pretty, bool):
            raise TypeError("pretty must be a boolean")
        if self.indent is not None:
            if isinstance(self.indent, bool) or not isinstance(
                self.indent, str | int
            ):
                raise TypeError("indent must be a string, integer or None")
            if isinstance(self.indent, int) and self.indent < 0:
                raise ValueError("indent must be non-negative")
