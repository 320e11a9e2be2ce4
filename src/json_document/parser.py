"""Serializer: conversion between JSON text, Plain Trees and documents.

Decoding goes through ``json5`` so that both ``'single'`` and ``"double"``
quoted strings are accepted (``{'foo':'FOO'}`` is valid input).  The rest of
JSON5 comes along: comments, unquoted keys, hex integers and trailing commas
are accepted too.  Every integral number decodes as a Python ``int`` within
the signed 64-bit range; ``NaN``, ``Infinity`` and larger integers are
rejected so that every decoded tree can be encoded again.

Encoding uses the standard ``json`` module and produces canonical compact
text (``{"foo":"FOO"}``).

Lists of documents keep their ``None`` positions in both directions.

Every function takes an optional ``ParserConfig``; ``None`` means the
defaults.  Failures raise ``DeserializationError`` or ``SerializationError``
with the underlying error attached as ``__cause__``.
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Callable, Mapping
from typing import Any

import json5

from json_document.config import DEFAULT_CONFIG, ParserConfig
from json_document.entity import INT64_MAX, INT64_MIN, JsonEntity
from json_document.exceptions import (
    DeserializationError,
    SerializationError,
    TypeMismatchError,
)
from json_document.factory import EntityFactory, FactorySource
from json_document.tree import PlainTree, TreeKind, kind_of

__all__ = [
    "entities_to_list",
    "entities_to_string",
    "entity_to_map",
    "entity_to_string",
    "from_entity_to",
    "from_map_to",
    "list_to_entities",
    "list_to_string",
    "map_to_entity",
    "map_to_string",
    "string_to_entities",
    "string_to_entity",
    "string_to_list",
    "string_to_map",
    "string_to_tree",
    "tree_to_string",
]

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Text <-> tree
# ---------------------------------------------------------------------------


def string_to_tree(text: str, config: ParserConfig | None = None) -> PlainTree:
    """Decode any JSON value.

    Raises:
        DeserializationError: If ``text`` is not valid JSON (or JSON5 when
            single quotes are allowed), or holds a non-finite number or an
            integer outside the signed 64-bit range.
    """
    config = config or DEFAULT_CONFIG
    try:
        if config.allow_single_quotes:
            tree = json5.loads(text)
        else:
            tree = json.loads(text)
    except (ValueError, TypeError) as exc:
        logger.debug("Failed to decode JSON text: %s", exc)
        raise DeserializationError("Deserialization failed") from exc
    _check_numbers(tree)
    return tree


def string_to_map(text: str, config: ParserConfig | None = None) -> dict[str, Any]:
    """Decode a JSON object.  Any other top-level kind is an error."""
    return _expect(string_to_tree(text, config), TreeKind.MAP)


def string_to_list(text: str, config: ParserConfig | None = None) -> list[Any]:
    """Decode a JSON array.  Any other top-level kind is an error."""
    return _expect(string_to_tree(text, config), TreeKind.LIST)


def tree_to_string(tree: PlainTree, config: ParserConfig | None = None) -> str:
    """Encode any Plain Tree as JSON text.

    Raises:
        SerializationError: If the tree holds a value JSON cannot represent.
    """
    config = config or DEFAULT_CONFIG
    try:
        return json.dumps(
            tree,
            ensure_ascii=config.ensure_ascii,
            sort_keys=config.sort_keys,
            indent=config.indent,
            separators=config.separators,
            allow_nan=False,
        )
    except (TypeError, ValueError) as exc:
        logger.debug("Failed to encode tree: %s", exc)
        raise SerializationError("Serialization failed") from exc


def map_to_string(tree: Mapping[str, Any], config: ParserConfig | None = None) -> str:
    return tree_to_string(tree, config)  # type: ignore[arg-type]


def list_to_string(tree: list[Any], config: ParserConfig | None = None) -> str:
    return tree_to_string(tree, config)


# ---------------------------------------------------------------------------
# Tree <-> documents
# ---------------------------------------------------------------------------


def map_to_entity(tree: Mapping[str, Any], factory: FactorySource) -> Any:
    return EntityFactory.of(factory).create_from_tree(tree)


def list_to_entities(trees: list[Any], factory: FactorySource) -> list[Any]:
    """Load each map through ``factory``; ``None`` elements stay ``None``."""
    entity_factory = EntityFactory.of(factory)
    return [
        None if tree is None else entity_factory.create_from_tree(tree)
        for tree in trees
    ]


def entity_to_map(entity: JsonEntity) -> dict[str, Any]:
    return entity.as_map()


def entities_to_list(entities: list[JsonEntity | None]) -> list[Any]:
    """Export each document's map; ``None`` entries stay ``None``."""
    return [None if entity is None else entity.as_map() for entity in entities]


def from_map_to(factory: FactorySource) -> Callable[[Mapping[str, Any]], Any]:
    """Return a function loading a map into a new instance from ``factory``.

    Handy with ``map()``::

        beans = list(map(from_map_to(JsonBean), trees))
    """
    entity_factory = EntityFactory.of(factory)
    return entity_factory.create_from_tree


def from_entity_to(factory: FactorySource) -> Callable[[JsonEntity], Any]:
    """Return a function converting any document into an instance from ``factory``."""
    entity_factory = EntityFactory.of(factory)

    def convert(entity: JsonEntity) -> Any:
        return entity.as_entity(entity_factory)

    return convert


# ---------------------------------------------------------------------------
# Text <-> documents
# ---------------------------------------------------------------------------


def string_to_entity(
    text: str, factory: FactorySource, config: ParserConfig | None = None
) -> Any:
    return map_to_entity(string_to_map(text, config), factory)


def string_to_entities(
    text: str, factory: FactorySource, config: ParserConfig | None = None
) -> list[Any]:
    return list_to_entities(string_to_list(text, config), factory)


def entity_to_string(entity: JsonEntity, config: ParserConfig | None = None) -> str:
    return map_to_string(entity_to_map(entity), config)


def entities_to_string(
    entities: list[JsonEntity | None], config: ParserConfig | None = None
) -> str:
    return list_to_string(entities_to_list(entities), config)


def _expect(tree: PlainTree, kind: TreeKind) -> Any:
    try:
        actual = kind_of(tree)
    except TypeMismatchError as exc:
        raise DeserializationError("Deserialization failed") from exc
    if actual is not kind:
        raise DeserializationError(
            f"Deserialization failed: expected {kind}, got {actual}"
        )
    return tree


def _check_numbers(tree: PlainTree) -> None:
    """Reject decoded numbers that a document cannot hold or encode again."""
    pending: list[Any] = [tree]
    while pending:
        node = pending.pop()
        if isinstance(node, dict):
            pending.extend(node.values())
        elif isinstance(node, list):
            pending.extend(node)
        elif isinstance(node, float) and not math.isfinite(node):
            raise DeserializationError(
                f"Deserialization failed: non-finite number {node!r}"
            )
        elif (
            isinstance(node, int)
            and not isinstance(node, bool)
            and not INT64_MIN <= node <= INT64_MAX
        ):
            raise DeserializationError(
                f"Deserialization failed: integer {node} is outside the signed 64-bit range"
            )
