"""JsonEntity: a mutable, path-addressed document over one Plain Tree map.

Domain types subclass ``JsonEntity`` and expose typed properties built on the
generic accessors instead of declaring a fixed field mapping::

    class Order(JsonEntity):
        @property
        def customer(self) -> str | None:
            return self.get_string("customer.name")

        @customer.setter
        def customer(self, value: str | None) -> None:
            self.put_string("customer.name", value)

Semantics:

- Reads never fail on absence.  A missing key, an explicit ``null``, or a
  path that descends through a non-map value all read as the caller's
  ``default`` (``None`` unless given).
- Writes create every missing (or null) ancestor as an empty map.  An
  ancestor that holds a scalar or a list is never overwritten; the write
  raises ``TypeMismatchError`` instead.
- Ownership: a document exclusively owns its tree.  Values are copied on the
  way in (``from_tree``, ``put_*``, ``merge_*``) and on the way out
  (``get_*`` on containers, ``as_tree``, ``as_entity``), so a document never
  shares storage with its caller or with another document.
- Every mutator returns ``self`` for chaining.
- Equality and hashing are structural over the tree; the concrete subtype
  does not take part.  Documents are not internally synchronised.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Self

from json_document.exceptions import PathSyntaxError, TypeMismatchError
from json_document.factory import EntityFactory, FactorySource
from json_document.path import parse_path
from json_document.tree import PlainTree, TreeKind, copy_tree, freeze_tree, kind_of

__all__ = ["INT64_MAX", "INT64_MIN", "JsonEntity"]

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class JsonEntity:
    """Base class for path-addressed JSON documents.

    A new instance holds an empty map.  Subclasses must stay constructible
    without arguments so that ``EntityFactory`` can produce them.
    """

    __slots__ = ("_root",)

    def __init__(self) -> None:
        self._root: dict[str, Any] = {}

    def from_tree(self, tree: Mapping[str, Any]) -> Self:
        """Replace the document content with a copy of ``tree``.

        Raises:
            TypeMismatchError: If ``tree`` is not a map of Plain Tree values.
        """
        if not isinstance(tree, Mapping):
            raise TypeMismatchError(
                f"Document root must be a map, got {type(tree).__name__}"
            )
        self._root = copy_tree(tree)  # type: ignore[assignment]
        return self

    # ------------------------------------------------------------------
    # Generic path access
    # ------------------------------------------------------------------

    def contains(self, path: str) -> bool:
        """True iff ``path`` holds a non-null value."""
        return self._resolve(parse_path(path)) is not None

    def get_object(self, path: str, default: Any = None) -> Any:
        """Return a copy of the value at ``path``, or ``default`` when absent."""
        node = self._resolve(parse_path(path))
        if node is None:
            return default
        return copy_tree(node)

    def put_object(self, path: str, value: Any) -> Self:
        """Write ``value`` at ``path``, creating missing ancestor maps.

        A ``JsonEntity`` value is stored as its map.  ``None`` stores an
        explicit null, after which ``contains(path)`` is False.
        """
        if isinstance(value, JsonEntity):
            return self._write(path, value.as_map())
        return self._write(path, copy_tree(value))

    def remove(self, path: str) -> Self:
        """Delete the node at ``path``; a no-op when nothing is there."""
        segments = parse_path(path)
        if not segments:
            raise PathSyntaxError(path, "cannot remove the document root")
        parent = self._resolve(segments[:-1])
        if isinstance(parent, dict):
            parent.pop(segments[-1], None)
        return self

    # ------------------------------------------------------------------
    # Typed accessors
    # ------------------------------------------------------------------

    def get_string(self, path: str, default: str | None = None) -> str | None:
        return self._read(path, TreeKind.STRING, default)

    def put_string(self, path: str, value: str | None) -> Self:
        return self._check_and_write(path, value, TreeKind.STRING)

    def get_number(self, path: str, default: int | None = None) -> int | None:
        """Return the integer at ``path``.

        Only integral numbers are supported.  A fractional value raises
        ``TypeMismatchError`` rather than being truncated.
        """
        value = self._read(path, TreeKind.NUMBER, default)
        if isinstance(value, float):
            raise TypeMismatchError(
                f"Value at {path!r} is fractional ({value!r}); only integers are supported"
            )
        return value

    def put_number(self, path: str, value: int | None) -> Self:
        if isinstance(value, float):
            raise TypeMismatchError(f"Cannot write fractional number {value!r} at {path!r}")
        if value is not None and not isinstance(value, bool) and isinstance(value, int):
            if not INT64_MIN <= value <= INT64_MAX:
                raise TypeMismatchError(
                    f"Number {value} at {path!r} is outside the signed 64-bit range"
                )
        return self._check_and_write(path, value, TreeKind.NUMBER)

    def get_boolean(self, path: str, default: bool | None = None) -> bool | None:
        return self._read(path, TreeKind.BOOLEAN, default)

    def put_boolean(self, path: str, value: bool | None) -> Self:
        return self._check_and_write(path, value, TreeKind.BOOLEAN)

    def get_map(
        self, path: str, default: dict[str, Any] | None = None
    ) -> dict[str, Any] | None:
        return self._read(path, TreeKind.MAP, default)

    def put_map(self, path: str, value: Mapping[str, Any] | None) -> Self:
        return self._check_and_write(path, value, TreeKind.MAP)

    def merge_map(self, value: Mapping[str, Any]) -> Self:
        """Shallow-merge the top-level keys of ``value`` into the root.

        Incoming keys overwrite existing ones wholesale; nested maps are
        replaced, not combined.
        """
        if not isinstance(value, Mapping):
            raise TypeMismatchError(f"Cannot merge {type(value).__name__}, expected a map")
        self._root.update(copy_tree(value))  # type: ignore[arg-type]
        return self

    def get_list(self, path: str, default: list[Any] | None = None) -> list[Any] | None:
        return self._read(path, TreeKind.LIST, default)

    def put_list(self, path: str, value: list[Any] | None) -> Self:
        return self._check_and_write(path, value, TreeKind.LIST)

    # ------------------------------------------------------------------
    # Nested documents
    # ------------------------------------------------------------------

    def get_entity(
        self, path: str, factory: FactorySource, default: JsonEntity | None = None
    ) -> Any:
        """Return the map at ``path`` loaded into a new instance from ``factory``."""
        node = self._lookup(path, TreeKind.MAP)
        if node is None:
            return default
        return EntityFactory.of(factory).create_from_tree(node)

    def put_entity(self, path: str, entity: JsonEntity | None) -> Self:
        if entity is None:
            return self._write(path, None)
        if not isinstance(entity, JsonEntity):
            raise TypeMismatchError(
                f"Cannot write {type(entity).__name__} at {path!r}, expected a JsonEntity"
            )
        return self._write(path, entity.as_map())

    def merge_entity(self, entity: JsonEntity) -> Self:
        """Shallow-merge the top-level keys of ``entity`` into this document."""
        if not isinstance(entity, JsonEntity):
            raise TypeMismatchError(
                f"Cannot merge {type(entity).__name__}, expected a JsonEntity"
            )
        return self.merge_map(entity._root)

    def get_entities(
        self,
        path: str,
        factory: FactorySource,
        default: list[Any] | None = None,
    ) -> list[Any] | None:
        """Return each map in the list at ``path`` as a new instance.

        Positions are preserved: a null element yields ``None`` in the result.
        """
        items = self._lookup(path, TreeKind.LIST)
        if items is None:
            return default
        entity_factory = EntityFactory.of(factory)
        entities: list[Any] = []
        for index, item in enumerate(items):
            if item is None:
                entities.append(None)
            elif isinstance(item, dict):
                entities.append(entity_factory.create_from_tree(item))
            else:
                raise TypeMismatchError(
                    f"Element {index} at {path!r} is a {kind_of(item)}, expected map"
                )
        return entities

    def put_entities(self, path: str, entities: list[JsonEntity | None] | None) -> Self:
        if entities is None:
            return self._write(path, None)
        maps: list[dict[str, Any] | None] = []
        for entity in entities:
            if entity is None:
                maps.append(None)
            elif isinstance(entity, JsonEntity):
                maps.append(entity.as_map())
            else:
                raise TypeMismatchError(
                    f"Cannot write {type(entity).__name__} at {path!r}, expected a JsonEntity"
                )
        return self._write(path, maps)

    # ------------------------------------------------------------------
    # Representation
    # ------------------------------------------------------------------

    def as_tree(self) -> dict[str, Any]:
        """Return a snapshot copy of the whole tree."""
        return copy_tree(self._root)  # type: ignore[return-value]

    def as_map(self) -> dict[str, Any]:
        """Synonym for ``as_tree``; the root is always a map."""
        return self.as_tree()

    def as_string(self) -> str:
        """Return the tree as compact JSON text."""
        from json_document.parser import map_to_string

        return map_to_string(self._root)

    def as_entity(self, factory: FactorySource) -> Any:
        """Return a copy of this document as an instance from ``factory``."""
        return EntityFactory.of(factory).create_from_tree(self._root)

    def __str__(self) -> str:
        return self.as_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._root!r})"

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, JsonEntity):
            return NotImplemented
        return freeze_tree(self._root) == freeze_tree(other._root)

    def __hash__(self) -> int:
        return hash(freeze_tree(self._root))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _resolve(self, segments: tuple[str, ...]) -> PlainTree:
        """Walk ``segments`` from the root; None when any step is missing."""
        node: Any = self._root
        for segment in segments:
            if not isinstance(node, dict):
                return None
            node = node.get(segment)
            if node is None:
                return None
        return node

    def _lookup(self, path: str, kind: TreeKind) -> Any:
        """Return the live node at ``path`` if present, checking its kind."""
        node = self._resolve(parse_path(path))
        if node is None:
            return None
        actual = kind_of(node)
        if actual is not kind:
            raise TypeMismatchError(f"Value at {path!r} is a {actual}, expected {kind}")
        return node

    def _read(self, path: str, kind: TreeKind, default: Any) -> Any:
        node = self._lookup(path, kind)
        if node is None:
            return default
        return copy_tree(node)

    def _check_and_write(self, path: str, value: Any, kind: TreeKind) -> Self:
        if value is not None:
            actual = kind_of(value)
            if actual is not kind:
                raise TypeMismatchError(
                    f"Cannot write a {actual} at {path!r}, expected {kind}"
                )
        return self._write(path, copy_tree(value))

    def _write(self, path: str, stored: PlainTree) -> Self:
        """Store an already-copied tree at ``path``."""
        segments = parse_path(path)
        if not segments:
            raise PathSyntaxError(path, "cannot write the document root")
        node = self._root
        for depth, segment in enumerate(segments[:-1]):
            child = node.get(segment)
            if child is None:
                child = {}
                node[segment] = child
            elif not isinstance(child, dict):
                ancestor = ".".join(segments[: depth + 1])
                raise TypeMismatchError(
                    f"Cannot write {path!r}: {ancestor!r} holds a {kind_of(child)}, not a map"
                )
            node = child
        node[segments[-1]] = stored
        return self
