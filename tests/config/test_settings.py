"""Tests for environment-driven settings."""

import pytest

from daytrip.config.settings import DEFAULT_DENSE_REGION_SPEED_MULTIPLIER, DEFAULT_WALK_SPEED_M_PER_MIN, Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DAYTRIP_WALK_SPEED_M_PER_MIN", raising=False)
    monkeypatch.delenv("DAYTRIP_LOG_LEVEL", raising=False)
    monkeypatch.delenv("DAYTRIP_LOG_FILE", raising=False)
    monkeypatch.delenv("DAYTRIP_DENSE_REGION_SPEED_MULTIPLIER", raising=False)

    settings = Settings(_env_file=None)

    assert settings.walk_speed_m_per_min == DEFAULT_WALK_SPEED_M_PER_MIN == 75.0
    assert settings.log_level == "INFO"
    assert settings.log_file is None
    assert settings.dense_region_speed_multiplier == DEFAULT_DENSE_REGION_SPEED_MULTIPLIER == 0.7


def test_walk_speed_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DAYTRIP_WALK_SPEED_M_PER_MIN", "50")

    settings = Settings(_env_file=None)

    assert settings.walk_speed_m_per_min == 50.0


def test_non_positive_walk_speed_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DAYTRIP_WALK_SPEED_M_PER_MIN", "0")

    with pytest.raises(ValueError, match="greater than 0"):
        Settings(_env_file=None)


def test_log_level_is_normalized(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DAYTRIP_LOG_LEVEL", "debug")

    assert Settings(_env_file=None).log_level == "DEBUG"


def test_invalid_log_level_falls_back_to_info(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DAYTRIP_LOG_LEVEL", "verbose")

    assert Settings(_env_file=None).log_level == "INFO"


def test_dense_region_multiplier_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DAYTRIP_DENSE_REGION_SPEED_MULTIPLIER", "0.5")

    assert Settings(_env_file=None).dense_region_speed_multiplier == 0.5


@pytest.mark.parametrize("value", ["0", "1.5"])
def test_dense_region_multiplier_must_slow_walking(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("DAYTRIP_DENSE_REGION_SPEED_MULTIPLIER", value)

    with pytest.raises(ValueError):
        Settings(_env_file=None)
