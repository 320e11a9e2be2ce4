"""EntityFactory and EntityRegistry: zero-argument construction of documents.

An ``EntityFactory`` binds a construction recipe (a ``JsonEntity`` subclass or
any zero-argument callable returning one) and produces new instances on
demand.  It owns no instances, only the recipe, so one factory can be shared
freely.

The recipe is checked when the factory is bound: a callable that cannot be
invoked without arguments is rejected immediately rather than on first use.

``EntityRegistry`` maps string tags to factories, so generic code can produce
a document subtype chosen at runtime without reflection::

    registry = EntityRegistry()

    @registry.register("order")
    class Order(JsonEntity):
        ...

    order = registry.create("order")
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, Generic, TypeVar, Union

from json_document.exceptions import ConstructionError

if TYPE_CHECKING:
    from json_document.entity import JsonEntity
    from json_document.tree import PlainTree

__all__ = ["EntityFactory", "EntityRegistry", "FactorySource"]

logger = logging.getLogger(__name__)

E = TypeVar("E", bound="JsonEntity")

# Anything accepted where a caller says "how to build a result"
FactorySource = Union["EntityFactory[Any]", Callable[[], "JsonEntity"]]


def _recipe_name(recipe: Any) -> str:
    return getattr(recipe, "__qualname__", None) or repr(recipe)


class EntityFactory(Generic[E]):
    """Stateless handle producing new instances of one document subtype.

    Args:
        recipe: A ``JsonEntity`` subclass or a zero-argument callable that
            returns a ``JsonEntity``.

    Raises:
        ConstructionError: If ``recipe`` is not callable or requires arguments.

    Example::

        factory = EntityFactory(JsonBean)
        bean = factory.create()
        loaded = factory.create_from_tree({"foo": "FOO"})
    """

    __slots__ = ("_name", "_recipe")

    def __init__(self, recipe: Callable[[], E]) -> None:
        name = _recipe_name(recipe)
        if not callable(recipe):
            raise ConstructionError(f"Recipe {name} is not callable")
        try:
            inspect.signature(recipe).bind()
        except TypeError as exc:
            raise ConstructionError(
                f"Recipe {name} cannot be called without arguments"
            ) from exc
        except ValueError:
            # No introspectable signature (some builtins); checked on create().
            pass
        self._recipe: Callable[[], E] = recipe
        self._name = name
        logger.debug("Bound entity factory to %s", name)

    @classmethod
    def of(cls, source: FactorySource) -> EntityFactory[Any]:
        """Return ``source`` if it already is a factory, else bind a new one."""
        if isinstance(source, EntityFactory):
            return source
        return cls(source)

    @property
    def name(self) -> str:
        """Qualified name of the bound recipe."""
        return self._name

    def create(self) -> E:
        """Return a new, empty instance.

        Raises:
            ConstructionError: If the recipe raises or returns something that
                is not a ``JsonEntity``.  The recipe's exception is attached as
                ``__cause__``.
        """
        from json_document.entity import JsonEntity

        try:
            instance = self._recipe()
        except Exception as exc:
            raise ConstructionError(f"Recipe {self._name} failed") from exc
        if not isinstance(instance, JsonEntity):
            raise ConstructionError(
                f"Recipe {self._name} returned {type(instance).__name__}, "
                "expected a JsonEntity"
            )
        return instance

    def create_from_tree(self, tree: PlainTree) -> E:
        """Return a new instance whose root is a copy of ``tree``."""
        return self.create().from_tree(tree)

    def __call__(self) -> E:
        return self.create()

    def __repr__(self) -> str:
        return f"EntityFactory({self._name})"


class EntityRegistry:
    """Explicit mapping from string tags to entity factories.

    Each registry is independent; there is no process-wide default, so two
    registries never see each other's tags.
    """

    def __init__(self) -> None:
        self._factories: dict[str, EntityFactory[Any]] = {}

    def register(
        self, tag: str, recipe: FactorySource | None = None
    ) -> Any:
        """Register ``recipe`` under ``tag``.

        Without ``recipe`` this returns a decorator, so it can be applied
        directly to a ``JsonEntity`` subclass.

        Raises:
            ConstructionError: If ``tag`` is already registered or the recipe
                is not a valid zero-argument recipe.
        """
        if recipe is None:

            def decorator(target: Callable[[], E]) -> Callable[[], E]:
                self.register(tag, target)
                return target

            return decorator

        if tag in self._factories:
            raise ConstructionError(f"Entity tag {tag!r} is already registered")
        factory = EntityFactory.of(recipe)
        self._factories[tag] = factory
        logger.debug("Registered entity tag %r -> %s", tag, factory.name)
        return factory

    def factory(self, tag: str) -> EntityFactory[Any]:
        """Return the factory registered under ``tag``.

        Raises:
            ConstructionError: If ``tag`` is unknown.
        """
        try:
            return self._factories[tag]
        except KeyError:
            raise ConstructionError(f"Unknown entity tag {tag!r}") from None

    def create(self, tag: str) -> JsonEntity:
        return self.factory(tag).create()

    def create_from_tree(self, tag: str, tree: PlainTree) -> JsonEntity:
        return self.factory(tag).create_from_tree(tree)

    def tags(self) -> list[str]:
        """Registered tags in registration order."""
        return list(self._factories)

    def __contains__(self, tag: object) -> bool:
        return tag in self._factories

    def __iter__(self) -> Iterator[str]:
        return iter(self._factories)

    def __len__(self) -> int:
        return len(self._factories)
