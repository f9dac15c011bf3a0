"""Runtime – container registration of generated facades."""
from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from log_taxonomy.runtime.facades import FacadeSet


@runtime_checkable
class ServiceCollection(Protocol):
    """Minimal container port: register a type with a per-scope lifetime."""

    def add_scoped(self, service_type: type) -> object: ...


S = TypeVar("S", bound=ServiceCollection)


def add_generated_logging(services: S, facades: FacadeSet) -> S:
    """Register every facade type of *facades* as scoped and return *services*."""
    if services is None:
        raise TypeError("services must not be None")
    for service_type in facades.registered_types():
        services.add_scoped(service_type)
    return services


__all__ = ["ServiceCollection", "add_generated_logging"]
