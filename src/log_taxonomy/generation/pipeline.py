"""Generation pipeline – validate, build, emit.

:func:`generate` is a pure function of ``(source, settings)``.  Both are frozen,
hashable dataclasses, so results are memoised on structural equality: an
unchanged source is not rebuilt even when other sources in the same run are.
Rejected sources are never cached.
"""

from __future__ import annotations

import dataclasses
import functools
from collections.abc import Iterable

from log_taxonomy.analysis.validator import validate
from log_taxonomy.config.settings import GeneratorSettings
from log_taxonomy.generation.builder import build, check_members
from log_taxonomy.generation.emitter import FacadeDescription, FacadeEmitter
from log_taxonomy.kernel.errors import GenerationError
from log_taxonomy.kernel.model import Diagnostic, EventDefinitionSource, RootNode, Severity
from log_taxonomy.observability.logging import get_logger

_log = get_logger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class GenerationResult:
    """Everything one pass produces for one source."""

    source: EventDefinitionSource
    taxonomy: RootNode
    facade: FacadeDescription
    diagnostics: tuple[Diagnostic, ...]

    @property
    def has_errors(self) -> bool:
        return any(d.severity is Severity.ERROR for d in self.diagnostics)


@dataclasses.dataclass(frozen=True, slots=True)
class GenerationBatch:
    """Results of a multi-source run; rejected sources are kept apart."""

    results: tuple[GenerationResult, ...]
    rejected: tuple[tuple[str, GenerationError], ...]

    def result(self, source_name: str) -> GenerationResult:
        for result in self.results:
            if result.source.source_name == source_name:
                return result
        raise KeyError(source_name)


@functools.lru_cache(maxsize=256)
def _generate(source: EventDefinitionSource, settings: GeneratorSettings) -> GenerationResult:
    try:
        check_members(source, settings)
    except GenerationError as exc:
        _log.warning("taxonomy.source_rejected", source=source.source_name, **exc.to_dict())
        raise
    diagnostics = validate(source, settings)
    taxonomy = build(source, settings)
    facade = FacadeEmitter(settings.facade_suffix).emit(taxonomy)
    _log.debug(
        "taxonomy.generated",
        source=source.source_name,
        members=source.member_count,
        areas=len(taxonomy.areas),
        facades=len(facade.facades),
        diagnostics=len(diagnostics),
    )
    return GenerationResult(source, taxonomy, facade, diagnostics)


def generate(
    source: EventDefinitionSource,
    settings: GeneratorSettings | None = None,
) -> GenerationResult:
    """Run the full pipeline for one source.

    Validation findings never stop generation: a source with duplicate values
    still gets a complete tree and facade description.

    Raises
    ------
    GenerationError
        When the source cannot be built at all (e.g. a value out of range).
    """
    return _generate(source, settings or GeneratorSettings())


def generate_many(
    sources: Iterable[EventDefinitionSource],
    settings: GeneratorSettings | None = None,
) -> GenerationBatch:
    """Run :func:`generate` for each source, skipping the ones that fail."""
    results: list[GenerationResult] = []
    rejected: list[tuple[str, GenerationError]] = []
    for source in sources:
        try:
            results.append(generate(source, settings))
        except GenerationError as exc:
            rejected.append((source.source_name, exc))
    return GenerationBatch(tuple(results), tuple(rejected))


def cache_info() -> functools._CacheInfo:
    return _generate.cache_info()


def clear_cache() -> None:
    _generate.cache_clear()


__all__ = [
    "GenerationBatch",
    "GenerationResult",
    "cache_info",
    "clear_cache",
    "generate",
    "generate_many",
]
