"""
Tagged value tree for parsed JSON documents.

A document is a ``JsonObject`` root holding ``Value`` nodes. Objects keep
their members in an ordered list rather than a hash map so iteration order
is insertion order and re-setting a member moves it to the end. Containers
are stored by reference: attaching the same ``JsonArray`` or ``JsonObject``
under two parents aliases it, and mutations show through both.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any

type Payload = None | bool | float | str | JsonArray | JsonObject


class ValueType(Enum):
    """Tag carried by every tree node."""

    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def _payload_matches(kind: ValueType, data: Any) -> bool:  # noqa: PLR0911
    if kind is ValueType.NULL:
        return data is None
    elif kind is ValueType.BOOL:
        return isinstance(data, bool)
    elif kind is ValueType.NUMBER:
        return isinstance(data, float)
    elif kind is ValueType.STRING:
        return isinstance(data, str)
    elif kind is ValueType.ARRAY:
        return isinstance(data, JsonArray)
    elif kind is ValueType.OBJECT:
        return isinstance(data, JsonObject)
    return False


@dataclass(frozen=True)
class Value:
    """
    Tagged node of the tree.

    The tag is fixed at construction and always agrees with the payload;
    integers given for a NUMBER node are stored as floats. Nodes compare
    by value but are not hashable, since containers are mutable.
    """

    kind: ValueType
    data: Payload = None

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if not isinstance(self.kind, ValueType):
            raise TypeError("kind must be a ValueType")
        if (
            self.kind is ValueType.NUMBER
            and isinstance(self.data, int)
            and not isinstance(self.data, bool)
        ):
            object.__setattr__(self, "data", float(self.data))
        if not _payload_matches(self.kind, self.data):
            msg = (
                f"{type(self.data).__name__} payload does not match "
                f"{self.kind.name} tag"
            )
            raise TypeError(msg)

    def unwrap(self, kind: ValueType, default: Any = None) -> Any:
        """Returns the payload if this node is tagged ``kind``, else ``default``."""
        if self.kind is kind:
            return self.data
        return default

    @property
    def is_null(self) -> bool:
        return self.kind is ValueType.NULL


NULL = Value(ValueType.NULL)
TRUE = Value(ValueType.BOOL, True)
FALSE = Value(ValueType.BOOL, False)


def make_value(obj: Any) -> Value:  # noqa: PLR0911
    """
    Wraps a Python primitive or container into a tree node.

    Tree containers are wrapped by reference. Plain lists and tuples are
    copied into a fresh ``JsonArray`` element by element.
    """
    if isinstance(obj, Value):
        return obj
    elif obj is None:
        return NULL
    elif isinstance(obj, bool):
        return TRUE if obj else FALSE
    elif isinstance(obj, int | float):
        return Value(ValueType.NUMBER, float(obj))
    elif isinstance(obj, str):
        return Value(ValueType.STRING, obj)
    elif isinstance(obj, JsonArray):
        return Value(ValueType.ARRAY, obj)
    elif isinstance(obj, JsonObject):
        return Value(ValueType.OBJECT, obj)
    elif isinstance(obj, list | tuple):
        return Value(ValueType.ARRAY, JsonArray(obj))
    else:
        msg = f"Object of type {type(obj).__name__} is not JSON serializable"
        raise TypeError(msg)


class JsonArray:
    """Ordered, heterogeneous sequence of ``Value`` nodes."""

    def __init__(self, items: Any = ()) -> None:
        self._items: list[Value] = [make_value(item) for item in items]

    def append(self, value: Any) -> None:
        self._items.append(make_value(value))

    def insert(self, index: int, value: Any) -> None:
        self._items.insert(index, make_value(value))

    def set(self, index: int, value: Any) -> bool:
        """Replaces the element at ``index``; False when out of range."""
        if not -len(self._items) <= index < len(self._items):
            return False
        self._items[index] = make_value(value)
        return True

    def remove(self, index: int) -> bool:
        """Removes the element at ``index``; False when out of range."""
        if not -len(self._items) <= index < len(self._items):
            return False
        del self._items[index]
        return True

    def type(self, index: int) -> ValueType | None:
        if not -len(self._items) <= index < len(self._items):
            return None
        return self._items[index].kind

    def get(
        self, index: int, kind: ValueType | None = None, default: Any = None
    ) -> Any:
        """
        Returns the element at ``index``.

        Without ``kind`` the ``Value`` node itself is returned. With ``kind``
        the payload is returned only when the element carries that tag;
        an out-of-range index or a tag mismatch yields ``default``.
        """
        if not -len(self._items) <= index < len(self._items):
            return default
        value = self._items[index]
        if kind is None:
            return value
        return value.unwrap(kind, default)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Value:
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonArray):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"JsonArray({self._items!r})"


class JsonObject:
    """
    Ordered association list of uniquely named members.

    Lookups are linear scans over the member list.
    """

    def __init__(self) -> None:
        self._members: list[tuple[str, Value]] = []

    def _find(self, name: str) -> int:
        for i, (member_name, _) in enumerate(self._members):
            if member_name == name:
                return i
        return -1

    def has(self, name: str) -> bool:
        return self._find(name) >= 0

    def type(self, name: str) -> ValueType | None:
        """Returns the tag of member ``name``, or None when absent."""
        i = self._find(name)
        if i < 0:
            return None
        return self._members[i][1].kind

    def get(
        self, name: str, kind: ValueType | None = None, default: Any = None
    ) -> Any:
        """
        Looks up member ``name``.

        Without ``kind`` the member's ``Value`` node is returned. With
        ``kind`` the payload is returned only when the member carries that
        tag; a missing member or a tag mismatch yields ``default``. A NULL
        member reads as None, so use ``type()`` to tell it apart from a
        miss.
        """
        i = self._find(name)
        if i < 0:
            return default
        value = self._members[i][1]
        if kind is None:
            return value
        return value.unwrap(kind, default)

    def set(self, name: str, value: Any) -> None:
        """Stores ``value`` under ``name``, moving an existing member to the end."""
        if not isinstance(name, str):
            msg = f"member names must be strings, not {type(name).__name__}"
            raise TypeError(msg)
        if not name:
            raise ValueError("member names must be non-empty")
        node = make_value(value)
        i = self._find(name)
        if i >= 0:
            del self._members[i]
        self._members.append((name, node))

    def unset(self, name: str) -> bool:
        i = self._find(name)
        if i < 0:
            return False
        del self._members[i]
        return True

    def list_members(self) -> list[str]:
        return [name for name, _ in self._members]

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[tuple[str, Value]]:
        return iter(list(self._members))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonObject):
            return NotImplemented
        return self._members == other._members

    def __repr__(self) -> str:
        inner = ", ".join(f"{name!r}: {value!r}" for name, value in self._members)
        return f"JsonObject({{{inner}}})"
