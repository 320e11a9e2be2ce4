"""Violation dataclass for validation output.

This module provides the record type produced by validation providers and
carried by ``ValidationError``.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Violation"]


@dataclass(frozen=True, slots=True)
class Violation:
    """One way in which a tree fails a schema.

    Attributes:
        path: Location of the offending node, ``$`` for the root, e.g.
            ``$.items[0].foo``.
        message: Human-readable description from the validation engine.
        validator: Name of the failing schema keyword (``enum``,
            ``required``, ...).
    """

    path: str
    message: str
    validator: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"
