"""Tests for EntityFactory and EntityRegistry.

Covers:
- Zero-argument recipes: classes, bound classmethods, lambdas
- Rejection of recipes needing arguments, at bind time
- Recipe failures and wrong return types surface as ConstructionError with cause
- create_from_tree loads a copy of the tree
- Registry tagging, decorator form, duplicates and unknown tags
"""

from __future__ import annotations

import pytest

from json_document import (
    ConstructionError,
    EntityFactory,
    EntityRegistry,
    JsonBean,
    JsonEntity,
    TypeMismatchError,
)
from json_document.parser import string_to_entity


class Customer(JsonEntity):
    __slots__ = ()


class NeedsArgument(JsonEntity):
    __slots__ = ("_tag",)

    def __init__(self, tag: str) -> None:
        super().__init__()
        self._tag = tag


class Exploding(JsonEntity):
    __slots__ = ()

    def __init__(self) -> None:
        raise RuntimeError("boom")


# ---------------------------------------------------------------------------
# EntityFactory
# ---------------------------------------------------------------------------


class TestEntityFactory:
    def test_create_equals_parsed_empty_document(self) -> None:
        created = EntityFactory(Customer).create()
        assert type(created) is Customer
        assert created == string_to_entity("{}", Customer)

    def test_create_returns_fresh_instances(self) -> None:
        factory = EntityFactory(Customer)
        assert factory.create() is not factory.create()

    def test_callable_recipes(self) -> None:
        assert type(EntityFactory(JsonBean.create).create()) is JsonBean
        assert type(EntityFactory(lambda: Customer()).create()) is Customer

    def test_call_synonym(self) -> None:
        assert type(EntityFactory(Customer)()) is Customer

    def test_create_from_tree(self) -> None:
        tree = {"name": "Ada"}
        customer = EntityFactory(Customer).create_from_tree(tree)
        tree["name"] = "Bob"
        assert customer.get_string("name") == "Ada"

    def test_create_from_tree_rejects_non_map(self) -> None:
        with pytest.raises(TypeMismatchError):
            EntityFactory(Customer).create_from_tree(["not", "a", "map"])  # type: ignore[arg-type]

    def test_of_returns_existing_factory(self) -> None:
        factory = EntityFactory(Customer)
        assert EntityFactory.of(factory) is factory

    def test_of_binds_new_factory(self) -> None:
        assert isinstance(EntityFactory.of(Customer), EntityFactory)

    def test_name_and_repr(self) -> None:
        factory = EntityFactory(Customer)
        assert factory.name == "Customer"
        assert repr(factory) == "EntityFactory(Customer)"


class TestEntityFactoryErrors:
    def test_recipe_needing_arguments_rejected_at_bind(self) -> None:
        with pytest.raises(ConstructionError, match="without arguments") as exc_info:
            EntityFactory(NeedsArgument)  # type: ignore[arg-type]
        assert isinstance(exc_info.value.__cause__, TypeError)

    def test_non_callable_rejected(self) -> None:
        with pytest.raises(ConstructionError, match="not callable"):
            EntityFactory("Customer")  # type: ignore[arg-type]

    def test_recipe_raising_wrapped_with_cause(self) -> None:
        factory = EntityFactory(Exploding)
        with pytest.raises(ConstructionError, match="failed") as exc_info:
            factory.create()
        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert str(exc_info.value.__cause__) == "boom"

    def test_recipe_returning_non_entity(self) -> None:
        factory = EntityFactory(lambda: {"not": "an entity"})  # type: ignore[arg-type, return-value]
        with pytest.raises(ConstructionError, match="expected a JsonEntity"):
            factory.create()


# ---------------------------------------------------------------------------
# EntityRegistry
# ---------------------------------------------------------------------------


class TestEntityRegistry:
    def test_register_and_create(self) -> None:
        registry = EntityRegistry()
        registry.register("customer", Customer)
        assert type(registry.create("customer")) is Customer
        assert "customer" in registry
        assert len(registry) == 1

    def test_decorator_form_returns_class(self) -> None:
        registry = EntityRegistry()

        @registry.register("order")
        class Order(JsonEntity):
            __slots__ = ()

        assert Order.__name__ == "Order"
        assert type(registry.create("order")) is Order

    def test_create_from_tree(self) -> None:
        registry = EntityRegistry()
        registry.register("bean", JsonBean.create)
        bean = registry.create_from_tree("bean", {"a": 1})
        assert bean == JsonBean.of({"a": 1})

    def test_tags_in_registration_order(self) -> None:
        registry = EntityRegistry()
        registry.register("b", JsonBean)
        registry.register("a", Customer)
        assert registry.tags() == ["b", "a"]
        assert list(registry) == ["b", "a"]

    def test_factory_lookup(self) -> None:
        registry = EntityRegistry()
        factory = registry.register("customer", Customer)
        assert registry.factory("customer") is factory

    def test_duplicate_tag_rejected(self) -> None:
        registry = EntityRegistry()
        registry.register("customer", Customer)
        with pytest.raises(ConstructionError, match="already registered"):
            registry.register("customer", JsonBean)

    def test_unknown_tag(self) -> None:
        with pytest.raises(ConstructionError, match="Unknown entity tag"):
            EntityRegistry().create("missing")

    def test_invalid_recipe_not_registered(self) -> None:
        registry = EntityRegistry()
        with pytest.raises(ConstructionError):
            registry.register("bad", NeedsArgument)  # type: ignore[arg-type]
        assert "bad" not in registry

    def test_registries_are_independent(self) -> None:
        first = EntityRegistry()
        second = EntityRegistry()
        first.register("customer", Customer)
        assert "customer" not in second
