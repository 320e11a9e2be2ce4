"""JsonBean: the generic, general-purpose document.

Use beans for short-lived, ad hoc documents with a limited scope.  Anything
that lives longer or travels across module boundaries deserves its own
``JsonEntity`` subclass with typed properties.

On top of the ``JsonEntity`` accessors a bean supports item syntax keyed by
path::

    bean = JsonBean.create()
    bean["order.id"] = 42
    bean["order.id"]          # 42
    "order.id" in bean        # True
    del bean["order.id"]
"""

from __future__ import annotations

from typing import Any, Self, final

from json_document.entity import JsonEntity

__all__ = ["JsonBean"]


@final
class JsonBean(JsonEntity):
    """Generic JSON document with public path access."""

    __slots__ = ()

    @classmethod
    def create(cls) -> Self:
        """Return a new, empty bean (same as ``JsonBean()``)."""
        return cls()

    @classmethod
    def of(cls, tree: dict[str, Any]) -> Self:
        """Return a new bean holding a copy of ``tree``."""
        return cls().from_tree(tree)

    def __getitem__(self, path: str) -> Any:
        value = self.get_object(path)
        if value is None:
            raise KeyError(path)
        return value

    def __setitem__(self, path: str, value: Any) -> None:
        self.put_object(path, value)

    def __delitem__(self, path: str) -> None:
        if not self.contains(path):
            raise KeyError(path)
        self.remove(path)

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and self.contains(path)
