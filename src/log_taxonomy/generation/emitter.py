"""Facade emitter – describes the facade shapes for a finished taxonomy.

Nothing is constructed here.  The descriptors are plain frozen dataclasses
consumed by :mod:`log_taxonomy.runtime.facades` (live classes) and
:mod:`log_taxonomy.generation.render` (module source text).
"""

from __future__ import annotations

import dataclasses
from enum import Enum

from log_taxonomy.generation.naming import NameAllocator
from log_taxonomy.generation.paths import compose_path
from log_taxonomy.kernel.model import AreaNode, EventNode, GroupNode, RootNode


class FacadeKind(str, Enum):
    AREA = "area"
    GROUP = "group"


@dataclasses.dataclass(frozen=True, slots=True)
class EntryPointDescriptor:
    """One leaf entry point: ``EventLogger(category, event_id, event_path)``."""

    property_name: str
    event_id: int
    event_path: str
    member_name: str


@dataclasses.dataclass(frozen=True, slots=True)
class FacadeSlot:
    """A named child facade held by a parent facade."""

    property_name: str
    type_name: str


@dataclasses.dataclass(frozen=True, slots=True)
class CompositeFacadeDescriptor:
    """Facade of one area or group.

    Its constructor takes the caller's category logger, binds it into every
    entry point and builds every child facade with the same logger.
    """

    type_name: str
    kind: FacadeKind
    path: str
    entry_points: tuple[EntryPointDescriptor, ...]
    child_facades: tuple[FacadeSlot, ...]


@dataclasses.dataclass(frozen=True, slots=True)
class RootFacadeDescriptor:
    """Root facade: takes one constructed instance per area facade."""

    type_name: str
    areas: tuple[FacadeSlot, ...]


@dataclasses.dataclass(frozen=True, slots=True)
class RegistrationDescriptor:
    """Facade types a container registers as scoped, per caller category."""

    type_names: tuple[str, ...]


@dataclasses.dataclass(frozen=True, slots=True)
class FacadeDescription:
    source_name: str
    namespace: str | None
    root: RootFacadeDescriptor
    facades: tuple[CompositeFacadeDescriptor, ...]
    registration: RegistrationDescriptor

    def facade(self, type_name: str) -> CompositeFacadeDescriptor:
        for descriptor in self.facades:
            if descriptor.type_name == type_name:
                return descriptor
        raise KeyError(type_name)

    @property
    def entry_points(self) -> tuple[EntryPointDescriptor, ...]:
        return tuple(ep for facade in self.facades for ep in facade.entry_points)


class FacadeEmitter:
    """Walks a :class:`RootNode` and produces its :class:`FacadeDescription`.

    Type names go through one allocator for the whole source (root first), so
    no two emitted types share a name even when an area and a group flatten to
    the same text.  Within one facade, entry points claim their property names
    before child facades; a child facade whose name is taken by an event gets
    the next free suffix.
    """

    def __init__(self, suffix: str = "Logger") -> None:
        self._suffix = suffix

    def emit(self, root: RootNode) -> FacadeDescription:
        types = NameAllocator()
        root_type = types.allocate(root.root_facade_name)

        area_slots: list[FacadeSlot] = []
        pending: list[tuple[AreaNode, str]] = []
        for area in root.areas:
            type_name = types.allocate(self._type_name(area.type_segments))
            area_slots.append(FacadeSlot(area.display_identifier, type_name))
            pending.append((area, type_name))

        facades: list[CompositeFacadeDescriptor] = []
        for area, type_name in pending:
            self._emit_scope(area, type_name, root.base_path, types, facades)

        return FacadeDescription(
            source_name=root.source_name,
            namespace=root.declared_namespace,
            root=RootFacadeDescriptor(root_type, tuple(area_slots)),
            facades=tuple(facades),
            registration=RegistrationDescriptor(
                tuple(f.type_name for f in facades) + (root_type,)
            ),
        )

    def _type_name(self, segments: tuple[str, ...]) -> str:
        return "".join(segments) + self._suffix

    def _emit_scope(
        self,
        node: AreaNode | GroupNode,
        type_name: str,
        base_path: str | None,
        types: NameAllocator,
        out: list[CompositeFacadeDescriptor],
    ) -> None:
        properties = NameAllocator()
        entry_points = tuple(self._entry_point(event, properties) for event in node.events)

        slots: list[FacadeSlot] = []
        pending: list[tuple[GroupNode, str]] = []
        for group in node.groups:
            child_type = types.allocate(self._type_name(group.type_segments))
            slots.append(FacadeSlot(properties.allocate(group.display_identifier), child_type))
            pending.append((group, child_type))

        match node:
            case AreaNode():
                kind = FacadeKind.AREA
            case GroupNode():
                kind = FacadeKind.GROUP

        out.append(
            CompositeFacadeDescriptor(
                type_name=type_name,
                kind=kind,
                path=compose_path(node.path_segments, base_path),
                entry_points=entry_points,
                child_facades=tuple(slots),
            )
        )
        for group, child_type in pending:
            self._emit_scope(group, child_type, base_path, types, out)

    @staticmethod
    def _entry_point(event: EventNode, properties: NameAllocator) -> EntryPointDescriptor:
        return EntryPointDescriptor(
            property_name=properties.allocate(event.display_identifier),
            event_id=event.event_id,
            event_path=event.event_path,
            member_name=event.member_name,
        )


def emit(root: RootNode, suffix: str = "Logger") -> FacadeDescription:
    """Describe the facades of *root*."""
    return FacadeEmitter(suffix).emit(root)


__all__ = [
    "CompositeFacadeDescriptor",
    "EntryPointDescriptor",
    "FacadeDescription",
    "FacadeEmitter",
    "FacadeKind",
    "FacadeSlot",
    "RegistrationDescriptor",
    "RootFacadeDescriptor",
    "emit",
]
