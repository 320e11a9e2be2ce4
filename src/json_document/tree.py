"""Plain Tree primitives: kind dispatch, validated deep copy, structural freezing.

A Plain Tree is recursively one of:

- a map (``dict`` with ``str`` keys, insertion ordered),
- a list,
- a scalar: ``str``, ``int``, ``bool``, ``None``.

Floats are tolerated so that decoded JSON round-trips, but they are outside
the typed-accessor contract (see ``JsonEntity.get_number``).

Dispatch order matters everywhere in this module: ``bool`` MUST be checked
before ``int`` because ``isinstance(True, int)`` is True.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum, auto
from typing import Any

from json_document.exceptions import TypeMismatchError

__all__ = ["PlainTree", "TreeKind", "copy_tree", "freeze_tree", "kind_of"]

# Type alias for valid Plain Tree values
PlainTree = dict[str, Any] | list[Any] | str | int | float | bool | None


class TreeKind(StrEnum):
    """Kind of a Plain Tree node.

    StrEnum values are the lowercased member names, which read naturally in
    error messages ("expected map, got list").
    """

    MAP = auto()
    LIST = auto()
    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    NULL = auto()


def kind_of(value: Any) -> TreeKind:
    """Return the kind of ``value``.

    Raises:
        TypeMismatchError: If ``value`` is not a Plain Tree node.
    """
    # bool before int
    if isinstance(value, bool):
        return TreeKind.BOOLEAN
    if value is None:
        return TreeKind.NULL
    if isinstance(value, str):
        return TreeKind.STRING
    if isinstance(value, (int, float)):
        return TreeKind.NUMBER
    if isinstance(value, Mapping):
        return TreeKind.MAP
    if isinstance(value, list):
        return TreeKind.LIST
    raise TypeMismatchError(f"Unsupported tree value type: {type(value)!r}")


def copy_tree(value: Any) -> PlainTree:
    """Return an independent deep copy of ``value``, validating it on the way.

    Any ``Mapping`` is copied into a plain ``dict`` so that the result holds
    only builtin containers.

    Raises:
        TypeMismatchError: If any node is not a Plain Tree value, or a map key
            is not a string.
    """
    kind = kind_of(value)
    if kind is TreeKind.MAP:
        copied: dict[str, Any] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeMismatchError(f"Map keys must be strings, got {key!r}")
            copied[key] = copy_tree(item)
        return copied
    if kind is TreeKind.LIST:
        return [copy_tree(item) for item in value]
    return value


def freeze_tree(value: PlainTree) -> Any:
    """Convert a tree into a hashable value with the tree's structural equality.

    - Maps become frozensets of ``(key, frozen)`` pairs, so key order is ignored.
    - Lists become tuples, so element order matters.
    - Scalars are tagged with their kind so that ``True``, ``1`` and ``1.0``
      stay distinct (plain Python equality would merge them).
    """
    if isinstance(value, bool):
        return (TreeKind.BOOLEAN, value)
    if isinstance(value, int):
        return (TreeKind.NUMBER, "int", value)
    if isinstance(value, float):
        return (TreeKind.NUMBER, "float", value)
    if isinstance(value, Mapping):
        return frozenset((key, freeze_tree(item)) for key, item in value.items())
    if isinstance(value, list):
        return tuple(freeze_tree(item) for item in value)
    return value
