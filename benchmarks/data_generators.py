"""
Document generators for the treejson benchmarks.

Every document has an object at its root and avoids exponents and ``\\u``
escapes, so each compared library reads the same values from it. The
shapes stress what the tree builder does differently from a dict-based
parser: linear member lookup in wide objects, duplicate names that move
a member to the end, deep alternating nesting and escape-dense strings.

Generation is seeded so repeated runs time identical text.
"""

import json
import random
import string
from typing import Any

SEED = 20240115

# Characters the serializer escapes, plus the slash the scanner unescapes.
ESCAPED_CHARS = '"\\\r\n\t/'

DATA_TYPES = [
    "small_object",
    "wide_object",
    "record_list",
    "duplicate_names",
    "nested_structure",
    "escape_heavy",
]


def generate_test_data(data_type: str) -> str:
    """Generates the document for ``data_type`` as JSON text."""
    generators = {
        "small_object": _small_object,
        "wide_object": _wide_object,
        "record_list": _record_list,
        "duplicate_names": _duplicate_names,
        "nested_structure": _nested_structure,
        "escape_heavy": _escape_heavy,
    }
    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    return generators[data_type](random.Random(SEED))


def _word(rng: random.Random, length: int) -> str:
    return "".join(rng.choices(string.ascii_lowercase, k=length))


def _scalar(rng: random.Random) -> Any:
    choice = rng.randrange(5)
    if choice == 0:
        return rng.randint(-10_000, 10_000)
    elif choice == 1:
        return round(rng.uniform(-500.0, 500.0), 3)
    elif choice == 2:
        return _word(rng, rng.randint(3, 20))
    elif choice == 3:
        return rng.random() < 0.5
    return None


def _small_object(rng: random.Random) -> str:
    """A handful of members of every kind, about 200 characters."""
    data = {
        "id": rng.randint(1, 99_999),
        "name": _word(rng, 12),
        "active": True,
        "ratio": 0.25,
        "parent": None,
        "tags": [_word(rng, 5) for _ in range(3)],
        "limits": {"soft": 10, "hard": 20},
    }
    return json.dumps(data)


def _wide_object(rng: random.Random) -> str:
    """One object with 400 members, the worst case for linear lookup."""
    data = {
        f"field_{i:03d}_{_word(rng, 4)}": _scalar(rng) for i in range(400)
    }
    return json.dumps(data)


def _record_list(rng: random.Random) -> str:
    """Many small objects whose member order matters to the tree."""
    records = []
    for i in range(250):
        record = {
            "seq": i,
            "kind": rng.choice(["insert", "update", "delete"]),
            "key": _word(rng, 8),
            "value": _scalar(rng),
            "weight": round(rng.uniform(0.0, 1.0), 4),
        }
        if rng.random() < 0.3:
            record["note"] = _word(rng, 30)
        records.append(record)
    return json.dumps({"records": records})


def _duplicate_names(rng: random.Random) -> str:
    """
    Members drawn from a small name pool, so most of them replace an
    earlier member and move it to the end.
    """
    names = [_word(rng, 6) for _ in range(40)]
    members = [
        f"{json.dumps(rng.choice(names))}:{json.dumps(_scalar(rng))}"
        for _ in range(600)
    ]
    return "{" + ",".join(members) + "}"


def _nested_structure(rng: random.Random) -> str:
    """Objects and arrays alternating 60 levels deep, a few wide at each."""

    def level(depth: int) -> Any:
        if depth == 0:
            return _word(rng, 6)
        if depth % 2:
            return [_scalar(rng), level(depth - 1), _scalar(rng)]
        return {
            "depth": depth,
            "child": level(depth - 1),
            "sibling": _scalar(rng),
        }

    data = {"branches": [level(60) for _ in range(20)]}
    return json.dumps(data)


def _escape_heavy(rng: random.Random) -> str:
    """Strings where roughly a third of the characters need escaping."""

    def text(length: int) -> str:
        return "".join(
            rng.choice(ESCAPED_CHARS)
            if rng.random() < 0.35
            else rng.choice(string.ascii_letters + " ")
            for _ in range(length)
        )

    data = {
        "lines": [text(80) for _ in range(150)],
        "paths": {
            f'C:\\data\\"{_word(rng, 5)}"': f"{text(20)}\\{_word(rng, 8)}"
            for _ in range(40)
        },
        "accented": [f"caf\xe9 {_word(rng, 6)} \xfcber" for _ in range(40)],
    }
    return json.dumps(data, ensure_ascii=False)
