"""JsonValidator: check documents against a schema.

The default engine is JSON Schema (``jsonschema``).  The schema can be given
as JSON text, single quotes allowed, or as an already-decoded map::

    validator = JsonValidator.create('{"required": ["foo"]}')
    validator.validate(JsonBean.of({"foo": "FOO"}))    # passes, returns None
    validator.is_valid(JsonBean.create())               # False

A failed validation raises ``ValidationError`` listing every violation.
Documents are never modified by validation.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from json_document.entity import JsonEntity
from json_document.exceptions import ConfigurationError, ValidationError
from json_document.parser import entities_to_list, string_to_tree
from json_document.protocols import ValidationProvider
from json_document.providers.jsonschema import JsonSchemaProvider
from json_document.result import Violation
from json_document.tree import PlainTree

__all__ = ["JsonValidator"]

logger = logging.getLogger(__name__)


class JsonValidator:
    """Schema validation for documents and lists of documents.

    Args:
        provider: Any ``ValidationProvider``-conformant engine.
    """

    def __init__(self, provider: ValidationProvider) -> None:
        self._provider: Any = provider

    @classmethod
    def create(cls, schema: str | Mapping[str, Any]) -> JsonValidator:
        """Build a JSON Schema validator.

        Raises:
            ConfigurationError: If the schema text does not parse or the
                schema is not valid against its metaschema.
        """
        try:
            decoded = string_to_tree(schema) if isinstance(schema, str) else schema
            provider = JsonSchemaProvider(decoded)  # type: ignore[arg-type]
        except Exception as exc:
            logger.debug("Rejected schema: %s", exc)
            raise ConfigurationError("Configuration failed") from exc
        return cls(provider)

    def validate(self, entity: JsonEntity) -> None:
        """Raise ``ValidationError`` unless ``entity`` conforms."""
        if entity is None:
            raise ValidationError("Validation failed: input is undefined", [])
        self._check(entity.as_map())

    def validate_all(self, entities: list[JsonEntity | None]) -> None:
        """Validate a list of documents as one array instance."""
        if entities is None:
            raise ValidationError("Validation failed: input is undefined", [])
        self._check(entities_to_list(entities))

    def is_valid(self, entity: JsonEntity) -> bool:
        return not self._violations(entity.as_map())

    def violations(self, entity: JsonEntity) -> list[Violation]:
        """Return every violation of ``entity``; empty when it conforms."""
        return self._violations(entity.as_map())

    def _violations(self, tree: PlainTree) -> list[Violation]:
        try:
            return list(self._provider.violations(tree))
        except Exception as exc:
            logger.debug("Validation engine raised: %s", exc)
            raise ValidationError("Validation failed", []) from exc

    def _check(self, tree: PlainTree) -> None:
        found = self._violations(tree)
        if found:
            logger.debug("Validation found %d violation(s)", len(found))
            raise ValidationError("Validation failed", found)

    def __repr__(self) -> str:
        return f"JsonValidator({self._provider!r})"
