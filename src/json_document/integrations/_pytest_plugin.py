"""pytest plugin for json-document.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from json_document.bean import JsonBean
from json_document.entity import JsonEntity
from json_document.parser import string_to_entity


def _as_document(value: Any) -> JsonEntity:
    if isinstance(value, JsonEntity):
        return value
    if isinstance(value, str):
        return string_to_entity(value, JsonBean)
    if isinstance(value, Mapping):
        return JsonBean.of(dict(value))
    raise TypeError(f"Cannot compare a {type(value).__name__} with a document")


@pytest.fixture(scope="session")
def assert_json_document() -> Any:
    """Fixture that returns a callable structural-equality asserter.

    Usage in tests::

        def test_order(assert_json_document):
            order = Order().put_string("id", "A-1")
            assert_json_document(order, "{'id':'A-1'}")

    Returns:
        A callable ``_assert(actual, expected) -> None``.  Both arguments may
        be a document, a map, or JSON text (single quotes allowed).  Raises
        ``AssertionError`` showing both canonical JSON strings on mismatch.
    """

    def _assert(actual: Any, expected: Any) -> None:
        actual_doc = _as_document(actual)
        expected_doc = _as_document(expected)
        if actual_doc != expected_doc:
            raise AssertionError(
                "JSON documents differ:\n"
                f"  actual:   {actual_doc.as_string()}\n"
                f"  expected: {expected_doc.as_string()}"
            )

    return _assert
