"""Integration tests for the json-document pytest plugin.

These tests verify that the assert_json_document fixture is auto-discovered
via the pytest11 entry point and behaves correctly.

NOTE: These tests require json-document to be installed (even in editable mode
via ``pip install -e .``). The pytest11 entry point is only registered at
install time -- running from a raw source checkout without installing will not
discover the fixture.
"""

from __future__ import annotations

from typing import Any

import pytest

from json_document import JsonBean, JsonEntity


class Order(JsonEntity):
    __slots__ = ()


def test_fixture_passes_equal_documents(assert_json_document: Any) -> None:
    order = Order().put_string("id", "A-1").put_number("qty", 2)
    assert_json_document(order, "{'id':'A-1','qty':2}")


def test_fixture_ignores_key_order(assert_json_document: Any) -> None:
    assert_json_document({"a": 1, "b": 2}, {"b": 2, "a": 1})


def test_fixture_ignores_document_subtype(assert_json_document: Any) -> None:
    assert_json_document(Order().put_string("a", "x"), JsonBean.of({"a": "x"}))


def test_fixture_fails_on_difference(assert_json_document: Any) -> None:
    with pytest.raises(AssertionError, match="JSON documents differ"):
        assert_json_document({"a": 1}, {"a": 2})


def test_fixture_error_message_contents(assert_json_document: Any) -> None:
    with pytest.raises(AssertionError) as exc_info:
        assert_json_document({"a": 1}, "{'a':true}")
    message = str(exc_info.value)
    assert 'actual:   {"a":1}' in message
    assert 'expected: {"a":true}' in message


def test_fixture_rejects_unsupported_values(assert_json_document: Any) -> None:
    with pytest.raises(TypeError, match="Cannot compare"):
        assert_json_document(42, {"a": 1})
