"""Runtime – materialise facade descriptions into live Python classes.

Each composite descriptor becomes a subclass of :class:`CompositeFacade`, the
root descriptor a subclass of :class:`RootFacade`.  Classes are created once
per description (memoised); instances are only built on demand.
"""
from __future__ import annotations

import dataclasses
import functools
import logging
from collections.abc import Mapping
from typing import Any, ClassVar

from log_taxonomy.generation.emitter import (
    CompositeFacadeDescriptor,
    FacadeDescription,
    RootFacadeDescriptor,
)
from log_taxonomy.runtime.event_logger import EventLogger


def category_for(owner: type | str) -> logging.Logger:
    """Return the category logger of *owner* (``<module>.<qualname>`` for a type)."""
    if isinstance(owner, str):
        return logging.getLogger(owner)
    return logging.getLogger(f"{owner.__module__}.{owner.__qualname__}")


class CompositeFacade:
    """Base of generated area and group facades."""

    __descriptor__: ClassVar[CompositeFacadeDescriptor]
    __children__: ClassVar[Mapping[str, type[CompositeFacade]]]

    def __init__(self, inner: logging.Logger) -> None:
        if inner is None:
            raise TypeError(f"{type(self).__name__} requires a category logger")
        self._inner = inner
        descriptor = self.__descriptor__
        for ep in descriptor.entry_points:
            setattr(self, ep.property_name, EventLogger(inner, ep.event_id, ep.event_path))
        for slot in descriptor.child_facades:
            setattr(self, slot.property_name, self.__children__[slot.property_name](inner))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={self.__descriptor__.path!r})"


class RootFacade:
    """Base of generated root facades.

    The constructor takes one constructed instance of every area facade, by
    keyword, already bound to the caller's category.
    """

    __descriptor__: ClassVar[RootFacadeDescriptor]
    __areas__: ClassVar[Mapping[str, type[CompositeFacade]]]

    def __init__(self, **areas: CompositeFacade) -> None:
        unknown = sorted(set(areas) - set(self.__areas__))
        if unknown:
            raise TypeError(f"{type(self).__name__} got unexpected areas: {', '.join(unknown)}")
        for name, area_type in self.__areas__.items():
            instance = areas.get(name)
            if instance is None:
                raise TypeError(f"{type(self).__name__} requires area '{name}'")
            if not isinstance(instance, area_type):
                raise TypeError(
                    f"area '{name}' must be {area_type.__name__}, got {type(instance).__name__}"
                )
            setattr(self, name, instance)

    @classmethod
    def for_category(cls, inner: logging.Logger) -> RootFacade:
        return cls(**{name: area_type(inner) for name, area_type in cls.__areas__.items()})


@dataclasses.dataclass(frozen=True)
class FacadeSet:
    """The classes materialised from one :class:`FacadeDescription`."""

    description: FacadeDescription
    root_type: type[RootFacade]
    types: Mapping[str, type[Any]]

    def create(self, category: logging.Logger | type | str) -> RootFacade:
        """Build a fully wired root facade for *category* (a logger or its owner)."""
        if not isinstance(category, logging.Logger):
            category = category_for(category)
        return self.root_type.for_category(category)

    def registered_types(self) -> tuple[type[Any], ...]:
        return tuple(self.types[name] for name in self.description.registration.type_names)


@functools.lru_cache(maxsize=128)
def materialize(description: FacadeDescription) -> FacadeSet:
    """Create the facade classes for *description*."""
    module = description.namespace or __name__
    types: dict[str, type[Any]] = {}

    # facades are listed parents first; build children before their parents
    for descriptor in reversed(description.facades):
        children = {slot.property_name: types[slot.type_name] for slot in descriptor.child_facades}
        types[descriptor.type_name] = type(
            descriptor.type_name,
            (CompositeFacade,),
            {"__descriptor__": descriptor, "__children__": children, "__module__": module},
        )

    root = description.root
    root_type = type(
        root.type_name,
        (RootFacade,),
        {
            "__descriptor__": root,
            "__areas__": {slot.property_name: types[slot.type_name] for slot in root.areas},
            "__module__": module,
        },
    )
    types[root.type_name] = root_type
    return FacadeSet(description, root_type, types)


__all__ = ["CompositeFacade", "FacadeSet", "RootFacade", "category_for", "materialize"]
