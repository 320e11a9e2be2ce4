"""ParserConfig: serializer options for json-document.

ParserConfig is a frozen (immutable) dataclass.  The defaults reproduce the
canonical behaviour: lenient decoding that accepts single-quoted strings and
compact, order-preserving encoding.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["DEFAULT_CONFIG", "ParserConfig"]


@dataclass(frozen=True, slots=True)
class ParserConfig:
    """Immutable serializer configuration.

    Attributes:
        allow_single_quotes: When True (default), decoding goes through json5
            and accepts ``'single'`` as well as ``"double"`` quoted strings,
            along with the other JSON5 relaxations (comments, unquoted keys,
            hex integers, trailing commas).
            When False, only strict JSON is accepted.
        ensure_ascii: Escape non-ASCII characters on encoding.  Default False.
        sort_keys: Emit map keys sorted on encoding.  Default False, which
            keeps insertion order.
        indent: Pretty-print with this many spaces per level.  Default None
            (compact output with no whitespace between tokens).
    """

    allow_single_quotes: bool = True
    ensure_ascii: bool = False
    sort_keys: bool = False
    indent: int | None = None

    def __post_init__(self) -> None:
        if self.indent is not None and self.indent < 0:
            msg = f"indent must be >= 0 or None, got {self.indent}"
            raise ValueError(msg)

    @property
    def separators(self) -> tuple[str, str]:
        """Item and key separators matching ``indent``."""
        return (",", ":") if self.indent is None else (",", ": ")


DEFAULT_CONFIG = ParserConfig()
