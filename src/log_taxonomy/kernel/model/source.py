"""Event definition sources and their members.

Both types are frozen, slotted dataclasses: two sources built from the same
declaration compare and hash equal, which is what the generation pipeline
memoises on.
"""

from __future__ import annotations

import dataclasses
import keyword
from collections.abc import Iterable, Mapping

from log_taxonomy.kernel.errors import EmptySourceError, InvalidEventValueError, InvalidFacadeNameError

_SEPARATOR = "_"


@dataclasses.dataclass(frozen=True, slots=True)
class Member:
    """One named integer constant of an event definition source."""

    name: str
    value: int

    @property
    def tokens(self) -> tuple[str, ...]:
        """Raw name segments; never empty."""
        from log_taxonomy.generation.tokenizer import tokenize

        return tokenize(self.name)

    @property
    def has_separator(self) -> bool:
        return _SEPARATOR in self.name

    @property
    def area_token(self) -> str:
        """Raw text before the first separator (the whole name when there is none)."""
        head, _, _ = self.name.partition(_SEPARATOR)
        return head


@dataclasses.dataclass(frozen=True, slots=True)
class EventDefinitionSource:
    """A named, ordered collection of members driving one generation pass.

    ``members`` keeps declaration order; name suffixing in the taxonomy depends on it.
    Values must be ``int`` (``bool`` excluded): equality and hashing of sources then
    never conflate ``1``, ``1.0`` and ``True``.
    """

    source_name: str
    members: tuple[Member, ...]
    root_facade_name: str = ""
    base_path: str | None = None
    declared_namespace: str | None = None

    def __post_init__(self) -> None:
        if not self.members:
            raise EmptySourceError(self.source_name)
        for member in self.members:
            value = member.value
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidEventValueError(
                    self.source_name, member.name, value, "event identifiers must be integers"
                )
        if not self.root_facade_name.strip():
            object.__setattr__(self, "root_facade_name", f"{self.source_name}Logger")
        else:
            object.__setattr__(self, "root_facade_name", self.root_facade_name.strip())
        if not self.root_facade_name.isidentifier() or keyword.iskeyword(self.root_facade_name):
            raise InvalidFacadeNameError(self.source_name, self.root_facade_name)
        base_path = (self.base_path or "").strip()
        object.__setattr__(self, "base_path", base_path or None)
        namespace = (self.declared_namespace or "").strip()
        object.__setattr__(self, "declared_namespace", namespace or None)

    @property
    def member_count(self) -> int:
        return len(self.members)

    @classmethod
    def from_pairs(
        cls,
        source_name: str,
        members: Mapping[str, int] | Iterable[tuple[str, int]],
        **options: str | None,
    ) -> "EventDefinitionSource":
        """Build a source from ``name -> value`` pairs, keeping their order."""
        pairs = members.items() if isinstance(members, Mapping) else members
        return cls(
            source_name=source_name,
            members=tuple(Member(name, value) for name, value in pairs),
            **options,  # type: ignore[arg-type]
        )


__all__ = ["EventDefinitionSource", "Member"]
