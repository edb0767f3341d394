from __future__ import annotations

import allure
import pytest

from wrapcalc.config import Settings
from wrapcalc.runners import RunStrategy

pytestmark = [
    allure.epic("Configuration"),
    allure.feature("Environment Settings"),
]


def test_defaults_are_valid() -> None:
    settings = Settings()
    settings.validate()

    assert settings.run_strategy == RunStrategy.SEQUENTIAL
    assert settings.channel_capacity == 0
    assert settings.benchmark_repeat == 1


def test_from_env_reads_wrapcalc_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WRAPCALC_STRATEGY", " Channel ")
    monkeypatch.setenv("WRAPCALC_CHANNEL_CAPACITY", "16")
    monkeypatch.setenv("WRAPCALC_BENCHMARK_REPEAT", "5")
    monkeypatch.setenv("WRAPCALC_LOG_LEVEL", "debug")

    settings = Settings.from_env()
    settings.validate()

    assert settings.run_strategy == RunStrategy.CHANNEL
    assert settings.channel_capacity == 16
    assert settings.benchmark_repeat == 5
    assert settings.log_level == "DEBUG"


def test_from_env_rejects_non_integer(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WRAPCALC_CHANNEL_CAPACITY", "lots")

    with pytest.raises(ValueError, match="WRAPCALC_CHANNEL_CAPACITY must be an integer"):
        Settings.from_env()


@pytest.mark.parametrize(
    ("settings", "match"),
    [
        (Settings(strategy="actors"), "WRAPCALC_STRATEGY"),
        (Settings(channel_capacity=-1), "WRAPCALC_CHANNEL_CAPACITY"),
        (Settings(benchmark_repeat=0), "WRAPCALC_BENCHMARK_REPEAT"),
        (Settings(log_level="LOUD"), "WRAPCALC_LOG_LEVEL"),
    ],
)
def test_validate_rejects_bad_values(settings: Settings, match: str) -> None:
    with pytest.raises(ValueError, match=match):
        settings.validate()
