"""Provider Protocols for the transformation and validation extension points.

``JsonMapper`` and ``JsonValidator`` never import a concrete engine at type-check
time; they talk to any object with the right method.  No inheritance is
required: structural conformance passes ``isinstance`` checks.

Example::

    from json_document.protocols import TransformationProvider

    class Uppercase:
        def transform(self, tree):
            return {key.upper(): value for key, value in tree.items()}

    assert isinstance(Uppercase(), TransformationProvider)  # True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from json_document.tree import PlainTree
    from json_document.result import Violation

__all__ = ["TransformationProvider", "ValidationProvider"]


@runtime_checkable
class TransformationProvider(Protocol):
    """Structural protocol for transformation engines.

    ``transform`` receives a map or a list (never mutated by contract) and
    returns the transformed tree.  It may return ``None`` or a non-map; the
    mapper treats both as failures.  Engine errors propagate unchanged and
    are wrapped by the mapper.
    """

    def transform(self, tree: PlainTree) -> PlainTree: ...


@runtime_checkable
class ValidationProvider(Protocol):
    """Structural protocol for validation engines.

    ``violations`` receives a map or a list and returns every violation found,
    or an empty list when the tree conforms.  It must not mutate its input.
    """

    def violations(self, tree: PlainTree) -> list[Violation]: ...
