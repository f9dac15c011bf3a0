"""Config settings – Settings base class and GeneratorSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from log_taxonomy.config.validation.errors import InvalidSettingValueError

_EVENT_ID_WIDTHS = frozenset({16, 32, 64})


@dataclasses.dataclass(frozen=True)
class Settings:
    """Base class for 12-factor settings.

    Settings are frozen so they can take part in memoisation keys.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass(frozen=True)
class GeneratorSettings(Settings):
    """Knobs for one generation pass.

    Parameters
    ----------
    event_id_bits:
        Width of the host event identifier.  Member values outside the signed
        range of this width are generation-fatal.
    report_single_member_areas:
        Emit the informational ``KLG0005`` diagnostic (off by default).
    report_duplicate_paths:
        Emit ``KLG0006`` when two members share a full token sequence.
    facade_suffix:
        Suffix appended to area and group facade type names.
    """

    _prefix: ClassVar[str] = "LOG_TAXONOMY"

    event_id_bits: int = 32
    report_single_member_areas: bool = False
    report_duplicate_paths: bool = True
    facade_suffix: str = "Logger"

    def _validate(self) -> None:
        if self.event_id_bits not in _EVENT_ID_WIDTHS:
            raise InvalidSettingValueError(
                "event_id_bits", self.event_id_bits, f"must be one of {sorted(_EVENT_ID_WIDTHS)}"
            )
        if not self.facade_suffix.isidentifier():
            raise InvalidSettingValueError(
                "facade_suffix", self.facade_suffix, "must be a valid identifier"
            )

    @property
    def event_id_range(self) -> range:
        """Inclusive-exclusive range of representable event identifiers."""
        half = 1 << (self.event_id_bits - 1)
        return range(-half, half)


__all__ = ["GeneratorSettings", "Settings"]
