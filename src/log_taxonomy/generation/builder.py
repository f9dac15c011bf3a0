"""Taxonomy builder – merges a source's members into an area/group/event tree.

Members are inserted in declaration order.  Name suffixes therefore depend on
that order, while the presentation order of the finished tree does not:
every scope's groups and events are sorted by ``display_identifier`` (ordinal)
when the tree is frozen.
"""

from __future__ import annotations

from log_taxonomy.config.settings import GeneratorSettings
from log_taxonomy.generation.naming import NameAllocator, normalize
from log_taxonomy.generation.paths import compose_path
from log_taxonomy.kernel.errors import InvalidEventValueError
from log_taxonomy.kernel.model import (
    AreaNode,
    EventDefinitionSource,
    EventNode,
    GroupNode,
    Member,
    RootNode,
)


class _Scope:
    """Mutable construction state of one area or group."""

    def __init__(
        self,
        token: str,
        display_identifier: str,
        path_segments: tuple[str, ...],
        type_segments: tuple[str, ...],
    ) -> None:
        self.token = token
        self.display_identifier = display_identifier
        self.path_segments = path_segments
        self.type_segments = type_segments
        self.groups: dict[str, _Scope] = {}
        self.events: list[EventNode] = []
        # events and groups may share a display name, so they get separate allocators
        self._group_names = NameAllocator()
        self._event_names = NameAllocator()

    def child(self, token: str) -> _Scope:
        existing = self.groups.get(token)
        if existing is not None:
            return existing
        segment = normalize(token)
        identifier = self._group_names.allocate(segment)
        created = _Scope(
            token,
            identifier,
            self.path_segments + (segment,),
            self.type_segments + (identifier,),
        )
        self.groups[token] = created
        return created

    def add_event(self, member: Member, action_token: str, base_path: str | None) -> None:
        segment = normalize(action_token)
        segments = self.path_segments + (segment,)
        self.events.append(
            EventNode(
                display_identifier=self._event_names.allocate(segment),
                path_segments=segments,
                member_name=member.name,
                event_id=member.value,
                event_path=compose_path(segments, base_path),
            )
        )

    def _frozen_children(self) -> tuple[tuple[GroupNode, ...], tuple[EventNode, ...]]:
        groups = sorted(
            (scope.freeze_group() for scope in self.groups.values()),
            key=lambda g: g.display_identifier,
        )
        events = sorted(self.events, key=lambda e: e.display_identifier)
        return tuple(groups), tuple(events)

    def freeze_group(self) -> GroupNode:
        groups, events = self._frozen_children()
        return GroupNode(
            token=self.token,
            display_identifier=self.display_identifier,
            path_segments=self.path_segments,
            type_segments=self.type_segments,
            groups=groups,
            events=events,
        )

    def freeze_area(self) -> AreaNode:
        groups, events = self._frozen_children()
        return AreaNode(
            token=self.token,
            display_identifier=self.display_identifier,
            path_segments=self.path_segments,
            groups=groups,
            events=events,
        )


def check_members(source: EventDefinitionSource, settings: GeneratorSettings) -> None:
    """Reject members whose value does not fit the configured event-id width."""
    id_range = settings.event_id_range
    for member in source.members:
        value = member.value
        if value not in id_range:
            raise InvalidEventValueError(
                source.source_name,
                member.name,
                value,
                f"does not fit a {settings.event_id_bits}-bit signed event id",
            )


def build(source: EventDefinitionSource, settings: GeneratorSettings | None = None) -> RootNode:
    """Build the taxonomy of *source*.

    Raises
    ------
    InvalidEventValueError
        When a member value does not fit the configured event-id width.
    """
    settings = settings or GeneratorSettings()
    check_members(source, settings)

    areas: dict[str, _Scope] = {}
    area_names = NameAllocator()

    for member in source.members:
        tokens = member.tokens
        area_token, action_token = tokens[0], tokens[-1]
        group_tokens = tokens[1:-1]

        area = areas.get(area_token)
        if area is None:
            segment = normalize(area_token)
            identifier = area_names.allocate(segment)
            area = _Scope(area_token, identifier, (segment,), (identifier,))
            areas[area_token] = area

        scope = area
        for token in group_tokens:
            scope = scope.child(token)
        scope.add_event(member, action_token, source.base_path)

    frozen = sorted((area.freeze_area() for area in areas.values()), key=lambda a: a.display_identifier)
    return RootNode(
        source_name=source.source_name,
        root_facade_name=source.root_facade_name,
        base_path=source.base_path,
        declared_namespace=source.declared_namespace,
        areas=tuple(frozen),
    )


__all__ = ["build", "check_members"]
