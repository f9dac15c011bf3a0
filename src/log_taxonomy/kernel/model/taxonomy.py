"""Taxonomy tree nodes.

The tree is owned top-down (root -> areas -> groups -> events) with no parent
back-references.  Children are stored as tuples already sorted by
``display_identifier`` using ordinal comparison.
"""

from __future__ import annotations

import dataclasses
from typing import TypeAlias


@dataclasses.dataclass(frozen=True, slots=True)
class EventNode:
    """Leaf bound to exactly one member, numeric id and path."""

    display_identifier: str
    path_segments: tuple[str, ...]
    member_name: str
    event_id: int
    event_path: str


@dataclasses.dataclass(frozen=True, slots=True)
class GroupNode:
    """Intermediate grouping inferred from a middle name segment."""

    token: str
    display_identifier: str
    path_segments: tuple[str, ...]
    type_segments: tuple[str, ...]
    groups: tuple[GroupNode, ...] = ()
    events: tuple[EventNode, ...] = ()

    def group(self, token: str) -> GroupNode | None:
        """Look up a direct child group by its raw token."""
        return next((g for g in self.groups if g.token == token), None)

    def walk_groups(self) -> tuple[GroupNode, ...]:
        """This node's descendant groups, depth-first, in presentation order."""
        found: list[GroupNode] = []
        for child in self.groups:
            found.append(child)
            found.extend(child.walk_groups())
        return tuple(found)


@dataclasses.dataclass(frozen=True, slots=True)
class AreaNode:
    """Top-level grouping inferred from a member's first name segment."""

    token: str
    display_identifier: str
    path_segments: tuple[str, ...]
    groups: tuple[GroupNode, ...] = ()
    events: tuple[EventNode, ...] = ()

    @property
    def type_segments(self) -> tuple[str, ...]:
        return (self.display_identifier,)

    def group(self, token: str) -> GroupNode | None:
        """Look up a direct child group by its raw token."""
        return next((g for g in self.groups if g.token == token), None)

    def walk_groups(self) -> tuple[GroupNode, ...]:
        found: list[GroupNode] = []
        for child in self.groups:
            found.append(child)
            found.extend(child.walk_groups())
        return tuple(found)


TaxonomyNode: TypeAlias = AreaNode | GroupNode | EventNode


@dataclasses.dataclass(frozen=True, slots=True)
class RootNode:
    """Root of one source's taxonomy."""

    source_name: str
    root_facade_name: str
    base_path: str | None
    declared_namespace: str | None
    areas: tuple[AreaNode, ...]

    def area(self, token: str) -> AreaNode | None:
        return next((a for a in self.areas if a.token == token), None)

    def iter_events(self) -> tuple[EventNode, ...]:
        """Every leaf, areas first then their groups depth-first."""
        found: list[EventNode] = []

        def visit(node: TaxonomyNode) -> None:
            match node:
                case EventNode():
                    found.append(node)
                case AreaNode() | GroupNode():
                    for event in node.events:
                        visit(event)
                    for group in node.groups:
                        visit(group)

        for area in self.areas:
            visit(area)
        return tuple(found)


__all__ = ["AreaNode", "EventNode", "GroupNode", "RootNode", "TaxonomyNode"]
