"""Identifier normalisation and per-scope name allocation."""

from __future__ import annotations

import keyword
from typing import Final

PLACEHOLDER: Final = "Value"
IDENTIFIER_PREFIX: Final = "N"


def _is_word_char(ch: str) -> bool:
    return ch.isalnum() and f"x{ch}".isidentifier()


def normalize(segment: str) -> str:
    """Turn a raw name segment into a capitalised Python identifier.

    A word starts at the beginning and after every non-alphanumeric character;
    its first letter is upper-cased and the rest lower-cased.  Everything that
    is not alphanumeric is dropped.

    * empty result -> ``"Value"``
    * result not starting with an identifier character -> ``"N"`` prefix
    * result equal to a Python keyword -> trailing ``_``

    Never raises::

        >>> normalize("http2-client")
        'Http2Client'
        >>> normalize("404")
        'N404'
        >>> normalize("none")
        'None_'
    """
    chars: list[str] = []
    word_start = True
    for ch in segment:
        if _is_word_char(ch):
            chars.append(ch.upper() if word_start else ch.lower())
            word_start = False
        else:
            word_start = True

    candidate = "".join(chars)
    if not candidate:
        return PLACEHOLDER
    if not candidate[0].isidentifier():
        candidate = IDENTIFIER_PREFIX + candidate
    if keyword.iskeyword(candidate):
        candidate += "_"
    return candidate


class NameAllocator:
    """Collision-free identifiers within one sibling scope.

    The first request for a base name returns it unchanged; each repeat returns
    ``base + count`` with ``count`` starting at 1.  A suffixed form that was
    already handed out is skipped, so every returned name is unique::

        >>> names = NameAllocator()
        >>> [names.allocate("Open") for _ in range(3)]
        ['Open', 'Open1', 'Open2']
    """

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}
        self._issued: set[str] = set()

    def allocate(self, base_name: str) -> str:
        base = base_name if base_name.strip() else PLACEHOLDER
        if base not in self._issued:
            self._counts.setdefault(base, 0)
            self._issued.add(base)
            return base

        count = self._counts.get(base, 0)
        while True:
            count += 1
            candidate = f"{base}{count}"
            if candidate not in self._issued:
                break
        self._counts[base] = count
        self._issued.add(candidate)
        return candidate

    def __contains__(self, name: object) -> bool:
        return name in self._issued

    def __len__(self) -> int:
        return len(self._issued)


__all__ = ["IDENTIFIER_PREFIX", "PLACEHOLDER", "NameAllocator", "normalize"]
