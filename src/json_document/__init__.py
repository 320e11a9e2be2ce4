"""json-document - path-addressed JSON documents with typed accessors."""

from __future__ import annotations

from json_document.bean import JsonBean
from json_document.config import ParserConfig
from json_document.entity import JsonEntity
from json_document.exceptions import (
    ConfigurationError,
    ConstructionError,
    DeserializationError,
    JsonDocumentError,
    ParserError,
    PathSyntaxError,
    SerializationError,
    TransformationError,
    TypeMismatchError,
    ValidationError,
)
from json_document.factory import EntityFactory, EntityRegistry
from json_document.mapper import JsonMapper
from json_document.result import Violation
from json_document.validator import JsonValidator

__version__: str = "0.1.0"
__all__: list[str] = [
    "ConfigurationError",
    "ConstructionError",
    "DeserializationError",
    "EntityFactory",
    "EntityRegistry",
    "JsonBean",
    "JsonDocumentError",
    "JsonEntity",
    "JsonMapper",
    "JsonValidator",
    "ParserConfig",
    "ParserError",
    "PathSyntaxError",
    "SerializationError",
    "TransformationError",
    "TypeMismatchError",
    "ValidationError",
    "Violation",
]
