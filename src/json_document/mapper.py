"""JsonMapper: transform documents into documents of another subtype.

A mapper pairs a transformation engine with an entity factory.  The source
document's tree is handed to the engine and the resulting map is loaded
through the factory::

    mapper = JsonMapper.create("{bar: foo}", JsonBean)
    mapper.map(JsonBean.of({"foo": "FOO"}))     # JsonBean({'bar': 'FOO'})

A transformation must always produce a map.  ``None`` output (the engine
found nothing to produce) is a failure: the expression should supply a default,
e.g. ``"{bar: foo} || `{}`"``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Generic, TypeVar

from json_document.entity import JsonEntity
from json_document.exceptions import ConfigurationError, TransformationError
from json_document.factory import EntityFactory, FactorySource
from json_document.parser import entities_to_list
from json_document.protocols import TransformationProvider
from json_document.providers.jmespath import JmesPathProvider
from json_document.tree import PlainTree

__all__ = ["JsonMapper"]

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=JsonEntity)


class JsonMapper(Generic[R]):
    """Document-to-document transformation.

    Args:
        provider: Any ``TransformationProvider``-conformant engine.
        factory:  Builds the result documents.
    """

    def __init__(self, provider: TransformationProvider, factory: FactorySource) -> None:
        self._provider: Any = provider
        self._factory: EntityFactory[Any] = EntityFactory.of(factory)

    @classmethod
    def create(cls, spec: str | Sequence[str], factory: FactorySource) -> JsonMapper[Any]:
        """Build a mapper from one JMESPath expression or a pipeline of them.

        Raises:
            ConfigurationError: If an expression does not compile.  The engine's
                error is attached as ``__cause__``.
        """
        try:
            provider = JmesPathProvider(spec)
        except Exception as exc:
            logger.debug("Rejected transformation spec %r: %s", spec, exc)
            raise ConfigurationError("Configuration failed") from exc
        return cls(provider, factory)

    def map(self, entity: JsonEntity) -> R:
        """Transform one document."""
        if entity is None:
            raise TransformationError("Transformation failed: input is undefined")
        return self._load(self._transform(entity.as_map()))

    def map_all(self, entities: list[JsonEntity | None]) -> R:
        """Transform a list of documents into a single document.

        The engine sees a list of maps; ``None`` entries are passed as nulls.
        """
        if entities is None:
            raise TransformationError("Transformation failed: input is undefined")
        return self._load(self._transform(entities_to_list(entities)))

    def _transform(self, tree: PlainTree) -> dict[str, Any]:
        try:
            output = self._provider.transform(tree)
        except Exception as exc:
            logger.debug("Transformation engine raised: %s", exc)
            raise TransformationError("Transformation failed") from exc
        if output is None:
            raise TransformationError(
                "Transformation failed: output is undefined (supply a default output)"
            )
        if not isinstance(output, Mapping):
            raise TransformationError(
                f"Transformation failed: output is {type(output).__name__}, expected a map"
            )
        return output  # type: ignore[return-value]

    def _load(self, output: dict[str, Any]) -> R:
        return self._factory.create_from_tree(output)

    def __repr__(self) -> str:
        return f"JsonMapper({self._provider!r}, {self._factory!r})"
