"""Dotted path parsing with an LRU cache of parsed segment tuples.

A path is a string of dot-separated map keys, e.g. ``"order.customer.name"``.

- ``"$"`` alone denotes the document root and parses to ``()``.
- A leading ``"$."`` prefix is accepted and dropped.
- Segments may not be empty and may not contain ``[``, ``]`` or ``*``:
  index and wildcard syntax belong to external navigation engines.

Each distinct path string is parsed once; the resulting tuple is immutable
and therefore safe to share from the cache.  Malformed paths always fail
here, before any read or write touches the tree.
"""

from __future__ import annotations

import threading

from cachetools import LRUCache, cached

from json_document.exceptions import PathSyntaxError

__all__ = ["PATH_CACHE_SIZE", "ROOT", "clear_path_cache", "parse_path", "path_cache_info"]

ROOT = "$"
PATH_CACHE_SIZE = 1024

_FORBIDDEN = frozenset("[]*")

_cache: LRUCache[str, tuple[str, ...]] = LRUCache(maxsize=PATH_CACHE_SIZE)
_lock = threading.Lock()


def parse_path(path: str) -> tuple[str, ...]:
    """Parse ``path`` into its ordered key segments.

    Args:
        path: Dotted path string.

    Returns:
        Tuple of key segments; ``()`` for the root path ``"$"``.

    Raises:
        PathSyntaxError: If the path is not a string, is empty, has an empty
            segment, or uses unsupported index/wildcard syntax.
    """
    if not isinstance(path, str):
        raise PathSyntaxError(repr(path), "path must be a string")
    return _parse(path)


@cached(cache=_cache, lock=_lock)
def _parse(path: str) -> tuple[str, ...]:
    if path == ROOT:
        return ()
    if not path:
        raise PathSyntaxError(path, "path is empty")

    body = path[len(ROOT) + 1 :] if path.startswith(ROOT + ".") else path
    segments = tuple(body.split("."))
    for segment in segments:
        if not segment:
            raise PathSyntaxError(path, "empty segment")
        bad = _FORBIDDEN.intersection(segment)
        if bad:
            raise PathSyntaxError(
                path, f"unsupported character(s) {''.join(sorted(bad))!r} in {segment!r}"
            )
    return segments


def path_cache_info() -> tuple[int, int]:
    """Return ``(current_size, max_size)`` of the parsed-path cache."""
    return int(_cache.currsize), int(_cache.maxsize)


def clear_path_cache() -> None:
    """Drop every cached parse."""
    with _lock:
        _cache.clear()
