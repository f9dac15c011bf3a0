"""Member-name tokenizer."""

from __future__ import annotations

SEPARATOR = "_"


def tokenize(name: str) -> tuple[str, ...]:
    """Split *name* on ``_`` into trimmed, non-empty raw segments.

    Falls back to ``(name,)`` when no usable segment remains, so the result is
    never empty::

        >>> tokenize("DB_Connection_Open")
        ('DB', 'Connection', 'Open')
        >>> tokenize("__")
        ('__',)
    """
    parts = tuple(part.strip() for part in name.split(SEPARATOR))
    tokens = tuple(part for part in parts if part)
    return tokens or (name,)


__all__ = ["SEPARATOR", "tokenize"]
