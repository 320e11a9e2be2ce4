"""Providers subpackage: adapters over third-party engines.

- ``JmesPathProvider``: transformation through a pipeline of JMESPath
  expressions.
- ``JsonSchemaProvider``: validation against a JSON Schema document.

Both satisfy the Protocols in ``json_document.protocols`` structurally.
"""

from json_document.providers.jmespath import JmesPathProvider
from json_document.providers.jsonschema import JsonSchemaProvider

__all__ = ["JmesPathProvider", "JsonSchemaProvider"]
