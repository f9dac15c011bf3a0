"""Unit tests for the end-to-end generation pipeline."""

from __future__ import annotations

import pytest
from structlog.testing import capture_logs

from log_taxonomy.config.settings import GeneratorSettings
from log_taxonomy.generation.pipeline import (
    GenerationResult,
    cache_info,
    clear_cache,
    generate,
    generate_many,
)
from log_taxonomy.kernel.errors import GenerationError, InvalidEventValueError
from log_taxonomy.kernel.model import EventDefinitionSource


def _duplicate_source() -> EventDefinitionSource:
    return EventDefinitionSource.from_pairs(
        "Broken", {"APP_Start": 0, "APP_Restart": 0, "APPNoSeparator": -1}
    )


# ---------------------------------------------------------------------------
# generate
# ---------------------------------------------------------------------------


class TestGenerate:
    def test_returns_full_result(self, sample_source: EventDefinitionSource) -> None:
        result = generate(sample_source)
        assert isinstance(result, GenerationResult)
        assert result.source is sample_source
        assert [a.display_identifier for a in result.taxonomy.areas] == ["App", "Db"]
        assert result.facade.root.type_name == "SampleEventsLogger"
        assert result.diagnostics == ()
        assert result.has_errors is False

    def test_errors_do_not_stop_generation(self) -> None:
        result = generate(_duplicate_source())
        assert result.has_errors is True
        assert len(result.taxonomy.iter_events()) == 3
        assert [a.display_identifier for a in result.taxonomy.areas] == ["App", "Appnoseparator"]
        assert len(result.facade.entry_points) == 3

    def test_fatal_source_raises(self) -> None:
        source = EventDefinitionSource.from_pairs("Huge", {"APP_Big": 2**40})
        with pytest.raises(InvalidEventValueError):
            generate(source)

    def test_settings_change_diagnostics(self) -> None:
        plain = generate(_duplicate_source())
        verbose = generate(_duplicate_source(), GeneratorSettings(report_single_member_areas=True))
        assert "KLG0005" not in {d.code for d in plain.diagnostics}
        assert "KLG0005" in {d.code for d in verbose.diagnostics}


# ---------------------------------------------------------------------------
# Memoisation
# ---------------------------------------------------------------------------


class TestMemoisation:
    def test_equal_inputs_hit_the_cache(self, sample_source: EventDefinitionSource) -> None:
        first = generate(sample_source)
        rebuilt = EventDefinitionSource.from_pairs(
            "SampleEvents",
            [(m.name, m.value) for m in sample_source.members],
            base_path="MyApp",
        )
        second = generate(rebuilt)
        assert second is first
        assert cache_info().hits == 1

    def test_rerun_after_clearing_is_value_equal(self, sample_source: EventDefinitionSource) -> None:
        first = generate(sample_source)
        clear_cache()
        second = generate(sample_source)
        assert second is not first
        assert second == first

    def test_changed_source_recomputed(self, sample_source: EventDefinitionSource) -> None:
        generate(sample_source)
        changed = EventDefinitionSource.from_pairs("SampleEvents", {"APP_Startup": 1000})
        result = generate(changed)
        assert len(result.taxonomy.iter_events()) == 1
        assert cache_info().misses == 2

    @pytest.mark.parametrize("lookalike", [1.0, True])
    def test_lookalike_values_never_served_from_cache(self, lookalike: object) -> None:
        generate(EventDefinitionSource.from_pairs("S", {"APP_Start": 1}))
        with pytest.raises(InvalidEventValueError):
            generate(EventDefinitionSource.from_pairs("S", {"APP_Start": lookalike}))
        assert cache_info().hits == 0

    def test_rejected_sources_not_cached(self) -> None:
        source = EventDefinitionSource.from_pairs("Huge", {"APP_Big": 2**40})
        for _ in range(2):
            with pytest.raises(InvalidEventValueError):
                generate(source)
        assert cache_info().currsize == 0


# ---------------------------------------------------------------------------
# generate_many
# ---------------------------------------------------------------------------


class TestGenerateMany:
    def test_skips_rejected_sources(self, sample_source: EventDefinitionSource) -> None:
        bad = EventDefinitionSource.from_pairs("Huge", {"APP_Big": 2**40})
        batch = generate_many([sample_source, bad])
        assert [r.source.source_name for r in batch.results] == ["SampleEvents"]
        ((name, error),) = batch.rejected
        assert name == "Huge"
        assert isinstance(error, InvalidEventValueError)

    @pytest.mark.parametrize("value", ["x", None, 1.5])
    def test_non_integer_value_rejected_as_generation_error(self, value: object) -> None:
        with pytest.raises(GenerationError) as exc_info:
            EventDefinitionSource.from_pairs("Bad", {"APP_Stop": 2, "APP_Start": value})
        assert isinstance(exc_info.value, InvalidEventValueError)
        assert exc_info.value.member_name == "APP_Start"

    def test_rejection_logged_before_any_diagnostics(self, sample_source: EventDefinitionSource) -> None:
        bad = EventDefinitionSource.from_pairs("Huge", {"APP_Big": -(2**40), "APP_Small": -(2**40)})
        with capture_logs() as logs:
            batch = generate_many([bad, sample_source])
        assert [name for name, _ in batch.rejected] == ["Huge"]
        assert logs[0]["event"] == "taxonomy.source_rejected"
        assert logs[-1]["event"] == "taxonomy.generated"
        assert logs[0]["code"] == "invalid_event_value"

    def test_result_lookup(self, sample_source: EventDefinitionSource) -> None:
        batch = generate_many([sample_source])
        assert batch.result("SampleEvents").source is sample_source
        with pytest.raises(KeyError):
            batch.result("Missing")

    def test_sources_do_not_share_allocator_state(self) -> None:
        a = EventDefinitionSource.from_pairs("A", {"DB_Open": 1})
        b = EventDefinitionSource.from_pairs("B", {"DB_Open": 1})
        batch = generate_many([a, b])
        assert [r.taxonomy.areas[0].events[0].display_identifier for r in batch.results] == [
            "Open",
            "Open",
        ]
