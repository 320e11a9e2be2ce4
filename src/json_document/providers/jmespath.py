"""JmesPathProvider: transformation through a pipeline of JMESPath expressions.

Each expression is compiled once when the provider is created; ``transform``
runs them in order, feeding each step the previous step's result::

    provider = JmesPathProvider(["items[?active]", "{names: [*].name}"])
    provider.transform({"items": [{"name": "a", "active": True}]})
    # {"names": ["a"]}

Compilation errors (``jmespath.exceptions.ParseError`` and friends) propagate
from the constructor; ``JsonMapper`` wraps them in ``ConfigurationError``.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

import jmespath

if TYPE_CHECKING:
    from json_document.tree import PlainTree

__all__ = ["JmesPathProvider"]


class JmesPathProvider:
    """Multi-step JMESPath transformation engine.

    Args:
        spec: One expression, or a non-empty sequence of expressions applied
            in order.

    Raises:
        ValueError: If ``spec`` is an empty sequence.
        jmespath.exceptions.JMESPathError: If an expression does not compile.
    """

    def __init__(self, spec: str | Sequence[str]) -> None:
        expressions = [spec] if isinstance(spec, str) else list(spec)
        if not expressions:
            raise ValueError("A transformation needs at least one expression")
        self._expressions: tuple[str, ...] = tuple(expressions)
        self._steps: list[Any] = [jmespath.compile(e) for e in expressions]

    @property
    def expressions(self) -> tuple[str, ...]:
        return self._expressions

    def transform(self, tree: PlainTree) -> PlainTree:
        result: Any = tree
        for step in self._steps:
            result = step.search(result)
        return result

    def __repr__(self) -> str:
        return f"JmesPathProvider({list(self._expressions)!r})"
