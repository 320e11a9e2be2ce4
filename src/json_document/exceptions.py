"""Exception hierarchy for json-document.

Every error raised by the package derives from ``JsonDocumentError``.  Errors
that wrap a failure of an underlying engine (json5, jmespath, jsonschema, a
user-supplied recipe) are raised with ``raise ... from exc`` so the original
cause stays attached as ``__cause__``.

Absence of a value is never an error: reads of missing or null paths return
the caller's default instead.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from json_document.result import Violation

__all__ = [
    "ConfigurationError",
    "ConstructionError",
    "DeserializationError",
    "JsonDocumentError",
    "ParserError",
    "PathSyntaxError",
    "SerializationError",
    "TransformationError",
    "TypeMismatchError",
    "ValidationError",
]


class JsonDocumentError(Exception):
    """Base class for all json-document errors."""


class PathSyntaxError(JsonDocumentError, ValueError):
    """A path string could not be parsed, or addresses the root for writing."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid path {path!r}: {reason}")


class TypeMismatchError(JsonDocumentError, TypeError):
    """A value does not have the kind an accessor expects."""


class ConstructionError(JsonDocumentError):
    """An entity factory could not build an instance."""


class ParserError(JsonDocumentError):
    """Base class for serializer failures."""


class DeserializationError(ParserError):
    """JSON text could not be decoded into the requested tree kind."""


class SerializationError(ParserError):
    """A tree could not be encoded as JSON text."""


class ConfigurationError(JsonDocumentError):
    """A transformation spec or a schema is malformed."""


class TransformationError(JsonDocumentError):
    """A transformation failed or produced no usable output."""


class ValidationError(JsonDocumentError):
    """A document does not conform to a schema.

    Attributes:
        violations: Every violation found, sorted by path.  Empty only when
            the input was undefined or the validation engine itself failed
            (see ``__cause__``).
    """

    def __init__(self, message: str, violations: list[Violation]) -> None:
        self.violations = violations
        details = "; ".join(str(v) for v in violations)
        super().__init__(f"{message}: {details}" if details else message)
