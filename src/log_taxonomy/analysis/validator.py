"""Validator – structural diagnostics over a source's raw member list.

Independent of the taxonomy tree.  Every check sees every member; nothing
short-circuits except structural misuse, which stops before members are read.

Output order is stable: per-member findings (``KLG0003``, ``KLG0004``) in
declaration order, then duplicate values grouped by first occurrence of the
value, then duplicate paths, then single-member areas.
"""

from __future__ import annotations

import enum

from log_taxonomy.analysis.descriptors import (
    ATTRIBUTE_ON_NON_ENUM,
    DUPLICATE_EVENT_PATH,
    DUPLICATE_VALUE,
    MISSING_SEPARATOR,
    NON_POSITIVE_VALUE,
    SINGLE_MEMBER_AREA,
)
from log_taxonomy.config.settings import GeneratorSettings
from log_taxonomy.generation.naming import normalize
from log_taxonomy.generation.paths import compose_path
from log_taxonomy.kernel.model import Diagnostic, EventDefinitionSource, Member


def _event_path(member: Member, base_path: str | None) -> str:
    tokens = member.tokens
    if len(tokens) == 1:
        tokens = (tokens[0], tokens[0])
    return compose_path([normalize(t) for t in tokens], base_path)


def validate(
    source: EventDefinitionSource,
    settings: GeneratorSettings | None = None,
) -> tuple[Diagnostic, ...]:
    """Return every diagnostic for *source*."""
    settings = settings or GeneratorSettings()
    diagnostics: list[Diagnostic] = []
    by_value: dict[int, list[Member]] = {}
    by_path: dict[str, list[Member]] = {}
    by_area: dict[str, list[Member]] = {}

    for member in source.members:
        by_value.setdefault(member.value, []).append(member)
        by_path.setdefault(_event_path(member, source.base_path), []).append(member)
        by_area.setdefault(member.area_token.casefold(), []).append(member)

        if not member.has_separator:
            diagnostics.append(Diagnostic(MISSING_SEPARATOR, member.name, (member.name,)))
        if member.value <= 0:
            diagnostics.append(
                Diagnostic(NON_POSITIVE_VALUE, member.name, (member.name, member.value))
            )

    for value, members in by_value.items():
        if len(members) > 1:
            diagnostics.extend(
                Diagnostic(DUPLICATE_VALUE, m.name, (value, source.source_name)) for m in members
            )

    if settings.report_duplicate_paths:
        for path, members in by_path.items():
            if len(members) > 1:
                diagnostics.extend(
                    Diagnostic(DUPLICATE_EVENT_PATH, m.name, (m.name, path)) for m in members
                )

    if settings.report_single_member_areas:
        for members in by_area.values():
            if len(members) == 1:
                (member,) = members
                diagnostics.append(
                    Diagnostic(SINGLE_MEMBER_AREA, member.name, (member.area_token, member.name))
                )

    return tuple(diagnostics)


def validate_declaration(
    target: object,
    settings: GeneratorSettings | None = None,
) -> tuple[Diagnostic, ...]:
    """Validate a declaration marked with ``@log_event_source``.

    Anything other than an :class:`enum.Enum` subclass yields a single
    ``KLG0002`` diagnostic and nothing else.
    """
    from log_taxonomy.runtime.discovery import describe

    if not (isinstance(target, type) and issubclass(target, enum.Enum)):
        return (Diagnostic(ATTRIBUTE_ON_NON_ENUM, None),)
    return validate(describe(target, settings), settings)


__all__ = ["validate", "validate_declaration"]
