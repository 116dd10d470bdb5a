"""
Pytest configuration and shared fixtures for treejson tests.

Provides immutable test data fixtures shared across the parsing, tree and
serialization tests.
"""

from dataclasses import dataclass
from typing import Any

import pytest

from treejson import ValueType


@dataclass(frozen=True)
class JsonTestCase:
    """
    Immutable container for JSON test case data.

    Holds test input and expected behavior for consistent test execution.
    """

    description: str
    input_data: str
    should_fail: bool = False
    expected_kind: ValueType | None = None
    expected_output: Any = None


@pytest.fixture
def json_fail_cases() -> list[JsonTestCase]:
    """
    Provides documents whose parse must produce no tree at all.

    Each one is structurally broken somewhere the scanner can see before
    input runs out.
    """
    fail_docs = [
        ('{unquoted_key: "keys must be quoted"}', "unquoted key"),
        ('{"Illegal expression": 1 + 2}', "bare operator in object"),
        ('{"Illegal invocation": alert()}', "identifier value"),
        ('{"Missing colon" null}', "missing colon"),
        ('{"Double colon":: null}', "double colon"),
        ('{"Comma instead of colon", null}', "comma instead of colon"),
        ('{"Bad value": truth}', "misspelled literal"),
        ("{'single': 'quote'}", "single quoted name"),
        ('{"a":}', "missing value"),
        ('{"":1}', "empty member name"),
        ('{"a":"unterminated}', "unterminated string value"),
        ('{"unterminated:1}', "unterminated name"),
        ('{"a":[1,,2]}', "doubled array separator"),
        ('{"a":[1, nul]}', "truncated literal in array"),
        ('{"a":{"b":{"c":?}}}', "invalid value three levels deep"),
        ("[1, 2, 3]", "array root"),
        ("true", "bare literal root"),
        ("}", "closing brace with no opening brace"),
    ]
    return [
        JsonTestCase(description=desc, input_data=doc, should_fail=True)
        for doc, desc in fail_docs
    ]


@pytest.fixture
def json_pass_cases() -> list[JsonTestCase]:
    """
    Provides documents that must parse into a tree.
    """
    return [
        JsonTestCase(
            description="complex nested structure",
            input_data="""{
    "object with 1 member":{"array with 1 element":["element"]},
    "empty object": {},
    "empty array": [],
    "negative": -42,
    "integer": 1234567890,
    "real": -9876.543210,
    "zero": 0,
    "space": " ",
    "quote": "\\"",
    "backslash": "\\\\",
    "controls": "\\n\\r\\t",
    "slash": "/ & \\/",
    "alpha": "abcdefghijklmnopqrstuvwyz",
    "special": "`1~!@#$%^&*()_+-={':[,]}|;.</>?",
    "true": true,
    "false": false,
    "null": null,
    "comment": "// /* <!-- --",
    " s p a c e d " :[1,2 , 3

,

4 , 5        ,          6           ,7        ],"compact":[1,2,3,4,5,6,7],
    "jsontext": "{\\"object with 1 member\\":[\\"array with 1 element\\"]}"
}""",
        ),
        JsonTestCase(
            description="deep nesting",
            input_data='{"deep": [[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]]}',
        ),
        JsonTestCase(
            description="simple nested object",
            input_data='{"pass3": {"The outermost value": "must be an object.", "In this test": "It is an object."}}',
        ),
        JsonTestCase(description="empty object", input_data="{}"),
        JsonTestCase(description="blank input", input_data="   "),
    ]


@pytest.fixture
def basic_json_values() -> list[JsonTestCase]:
    """
    Provides single-member documents covering every value kind.
    """
    return [
        JsonTestCase("null value", '{"v": null}', False, ValueType.NULL, None),
        JsonTestCase("true boolean", '{"v": true}', False, ValueType.BOOL, True),
        JsonTestCase(
            "false boolean", '{"v": false}', False, ValueType.BOOL, False
        ),
        JsonTestCase("integer", '{"v": 42}', False, ValueType.NUMBER, 42.0),
        JsonTestCase(
            "negative integer", '{"v": -17}', False, ValueType.NUMBER, -17.0
        ),
        JsonTestCase("float", '{"v": 3.14}', False, ValueType.NUMBER, 3.14),
        JsonTestCase(
            "leading dot", '{"v": .5}', False, ValueType.NUMBER, 0.5
        ),
        JsonTestCase(
            "explicit plus", '{"v": +8}', False, ValueType.NUMBER, 8.0
        ),
        JsonTestCase("empty string", '{"v": ""}', False, ValueType.STRING, ""),
        JsonTestCase(
            "simple string", '{"v": "hello"}', False, ValueType.STRING, "hello"
        ),
    ]
