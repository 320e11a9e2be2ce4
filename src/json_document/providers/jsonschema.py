"""JsonSchemaProvider: validation against a JSON Schema document.

The validator class is picked from the schema's ``$schema`` keyword (latest
draft when absent) and the schema is checked against its metaschema when the
provider is created, so a malformed schema fails at setup rather than on the
first document.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from jsonschema.validators import validator_for

from json_document.result import Violation

if TYPE_CHECKING:
    from json_document.tree import PlainTree

__all__ = ["JsonSchemaProvider"]


class JsonSchemaProvider:
    """JSON Schema validation engine.

    Args:
        schema: The decoded schema (a map, or a boolean schema).

    Raises:
        jsonschema.exceptions.SchemaError: If ``schema`` is not a valid schema.
    """

    def __init__(self, schema: Mapping[str, Any] | bool) -> None:
        validator_cls = validator_for(schema)
        validator_cls.check_schema(schema)
        self._validator = validator_cls(schema)

    def violations(self, tree: PlainTree) -> list[Violation]:
        """Return every violation of ``tree``, sorted by path then message."""
        found = [
            Violation(
                path=_format_path(error.absolute_path),
                message=error.message,
                validator=str(error.validator),
            )
            for error in self._validator.iter_errors(tree)
        ]
        return sorted(found, key=lambda v: (v.path, v.message))


def _format_path(parts: Any) -> str:
    """Render a jsonschema error path as a dotted path (``$`` for the root)."""
    if not parts:
        return "$"
    return "$" + "".join(f"[{p}]" if isinstance(p, int) else f".{p}" for p in parts)
