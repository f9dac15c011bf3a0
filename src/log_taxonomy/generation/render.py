"""Render a generation result as Python module source.

The rendered module only depends on :mod:`log_taxonomy.runtime` and uses
underscore-prefixed aliases for its imports; generated names are capitalised
identifiers and can never shadow them.
"""

from __future__ import annotations

import contextlib
from collections.abc import Iterator

from log_taxonomy.generation.emitter import (
    CompositeFacadeDescriptor,
    FacadeDescription,
    RootFacadeDescriptor,
)
from log_taxonomy.generation.pipeline import GenerationResult

_INDENT = "    "


class _Writer:
    def __init__(self) -> None:
        self._lines: list[str] = []
        self._level = 0

    def line(self, text: str = "") -> None:
        self._lines.append(f"{_INDENT * self._level}{text}" if text else "")

    @contextlib.contextmanager
    def block(self, header: str) -> Iterator[None]:
        self.line(header)
        self._level += 1
        try:
            yield
        finally:
            self._level -= 1

    def text(self) -> str:
        return "\n".join(self._lines) + "\n"


def _write_null_check(out: _Writer, name: str) -> None:
    with out.block(f"if {name} is None:"):
        out.line(f'raise TypeError("{name} must not be None")')


def _write_root(out: _Writer, root: RootFacadeDescriptor) -> None:
    params = ", ".join(f"{slot.property_name}: {slot.type_name}" for slot in root.areas)
    with out.block(f"class {root.type_name}:"):
        out.line(f'"""Root logging facade ({len(root.areas)} areas)."""')
        out.line()
        signature = f"def __init__(self, *, {params}) -> None:" if params else "def __init__(self) -> None:"
        with out.block(signature):
            for slot in root.areas:
                _write_null_check(out, slot.property_name)
                out.line(f"self.{slot.property_name} = {slot.property_name}")
            if not root.areas:
                out.line("pass")
        out.line()
        out.line("@classmethod")
        with out.block(f"def for_category(cls, inner: _logging.Logger) -> {root.type_name}:"):
            args = ", ".join(f"{slot.property_name}={slot.type_name}(inner)" for slot in root.areas)
            out.line(f"return cls({args})")


def _write_composite(out: _Writer, facade: CompositeFacadeDescriptor) -> None:
    with out.block(f"class {facade.type_name}:"):
        out.line(f'"""{facade.kind.value.capitalize()} facade."""')
        out.line(f"# {facade.path!r}")
        out.line()
        with out.block("def __init__(self, inner: _logging.Logger) -> None:"):
            _write_null_check(out, "inner")
            out.line("self._inner = inner")
            for ep in facade.entry_points:
                out.line(
                    f"self.{ep.property_name} = _runtime.EventLogger("
                    f"inner, {ep.event_id}, {ep.event_path!r})  # {ep.member_name!r}"
                )
            for slot in facade.child_facades:
                out.line(f"self.{slot.property_name} = {slot.type_name}(inner)")


def _write_registration(out: _Writer, description: FacadeDescription) -> None:
    with out.block("def add_generated_logging(services):"):
        out.line('"""Register every facade type as a scoped service."""')
        _write_null_check(out, "services")
        for type_name in description.registration.type_names:
            out.line(f"services.add_scoped({type_name})")
        out.line("return services")


def render_module(result: GenerationResult) -> str:
    """Return the Python source of the facades described by *result*."""
    description = result.facade
    out = _Writer()
    out.line(f"# <auto-generated> by log_taxonomy from {result.source.source_name!r}. Do not edit.")
    out.line('"""Generated logging facades."""')
    out.line("from __future__ import annotations")
    out.line()
    out.line("import logging as _logging")
    out.line()
    out.line("from log_taxonomy.runtime import event_logger as _runtime")
    out.line()
    out.line()
    _write_root(out, description.root)
    for facade in description.facades:
        out.line()
        out.line()
        _write_composite(out, facade)
    out.line()
    out.line()
    _write_registration(out, description)
    out.line()
    out.line()
    names = [description.root.type_name, *(f.type_name for f in description.facades), "add_generated_logging"]
    out.line(f"__all__ = {sorted(names)!r}")
    return out.text()


__all__ = ["render_module"]
