"""Unit tests for GeneratorSettings and EnvSettingsLoader."""

from __future__ import annotations

import dataclasses
from typing import ClassVar

import pytest

from log_taxonomy.config.settings import EnvSettingsLoader, GeneratorSettings, Settings
from log_taxonomy.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)


# ---------------------------------------------------------------------------
# GeneratorSettings
# ---------------------------------------------------------------------------


class TestGeneratorSettings:
    def test_defaults(self) -> None:
        settings = GeneratorSettings()
        assert settings.event_id_bits == 32
        assert settings.report_single_member_areas is False
        assert settings.report_duplicate_paths is True
        assert settings.facade_suffix == "Logger"

    def test_prefix_is_not_a_field(self) -> None:
        assert "_prefix" not in {f.name for f in dataclasses.fields(GeneratorSettings)}
        assert GeneratorSettings._prefix == "LOG_TAXONOMY"

    def test_event_id_range(self) -> None:
        assert GeneratorSettings(event_id_bits=16).event_id_range == range(-32768, 32768)
        assert 2**31 - 1 in GeneratorSettings().event_id_range
        assert 2**31 not in GeneratorSettings().event_id_range

    def test_unsupported_width_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            GeneratorSettings(event_id_bits=24)

    def test_suffix_must_be_identifier(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            GeneratorSettings(facade_suffix="Log-Facade")

    def test_frozen_and_hashable(self) -> None:
        settings = GeneratorSettings()
        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.event_id_bits = 64  # type: ignore[misc]
        assert hash(settings) == hash(GeneratorSettings())


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_empty_environment_gives_defaults(self) -> None:
        assert EnvSettingsLoader({}).load(GeneratorSettings) == GeneratorSettings()

    def test_reads_prefixed_variables(self) -> None:
        environ = {
            "LOG_TAXONOMY_EVENT_ID_BITS": "64",
            "LOG_TAXONOMY_REPORT_SINGLE_MEMBER_AREAS": "yes",
            "LOG_TAXONOMY_REPORT_DUPLICATE_PATHS": "off",
            "LOG_TAXONOMY_FACADE_SUFFIX": "Events",
        }
        settings = EnvSettingsLoader(environ).load(GeneratorSettings)
        assert settings == GeneratorSettings(
            event_id_bits=64,
            report_single_member_areas=True,
            report_duplicate_paths=False,
            facade_suffix="Events",
        )

    def test_bad_integer(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader({"LOG_TAXONOMY_EVENT_ID_BITS": "wide"}).load(GeneratorSettings)

    def test_bad_boolean(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader({"LOG_TAXONOMY_REPORT_DUPLICATE_PATHS": "maybe"}).load(GeneratorSettings)

    def test_validation_errors_are_config_errors(self) -> None:
        with pytest.raises(ConfigError):
            EnvSettingsLoader({"LOG_TAXONOMY_EVENT_ID_BITS": "8"}).load(GeneratorSettings)

    def test_reads_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_TAXONOMY_EVENT_ID_BITS", "16")
        assert EnvSettingsLoader().load(GeneratorSettings).event_id_bits == 16


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


@dataclasses.dataclass(frozen=True)
class _TokenSettings(Settings):
    _prefix: ClassVar[str] = "ORDERS"

    token: str
    retries: int = 3


class TestConfigErrors:
    def test_missing_required_setting(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader({}).load(_TokenSettings)
        error = exc_info.value
        assert error.env_key == "ORDERS_TOKEN"
        assert error.to_dict()["detail"] == {"env_key": "ORDERS_TOKEN", "settings": "_TokenSettings"}

    def test_required_setting_present(self) -> None:
        settings = EnvSettingsLoader({"ORDERS_TOKEN": "abc"}).load(_TokenSettings)
        assert settings == _TokenSettings(token="abc", retries=3)

    def test_invalid_value_detail(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            GeneratorSettings(event_id_bits=24)
        payload = exc_info.value.to_dict()
        assert payload["code"] == "invalid_setting_value"
        assert payload["detail"] == {
            "setting": "event_id_bits",
            "value": "24",
            "reason": "must be one of [16, 32, 64]",
        }
        assert payload["message"] == "event_id_bits=24 rejected: must be one of [16, 32, 64]"
