"""Tests for settings, logging setup and cent formatting."""

from __future__ import annotations


import pytest
import structlog

from rules_engine.calculators.money import format_cents, half_of, percent_of
from rules_engine.config import DatabaseSettings, EngineSettings, Settings
from rules_engine.logging_config import configure_logging


class TestSettings:
    def test_root_settings_fields(self) -> None:
        assert set(Settings.model_fields) == {"log_level", "db", "engine"}

    def test_log_level_normalized(self) -> None:
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self) -> None:
        with pytest.raises(ValueError, match="Invalid log level"):
            Settings(log_level="chatty")

    def test_sync_database_url(self) -> None:
        db = DatabaseSettings(database_url="postgresql+asyncpg://u:p@host:5432/db")
        assert db.database_url_sync == "postgresql://u:p@host:5432/db"

    def test_timeout_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            EngineSettings(calculation_timeout_seconds=0)

    def test_env_override(self, monkeypatch) -> None:
        monkeypatch.setenv("JURISDICTION", "Virginia")
        assert EngineSettings().jurisdiction == "Virginia"


class TestLogging:
    def test_configure_sets_up_structlog(self) -> None:
        configure_logging("WARNING")
        assert structlog.is_configured()

    def test_unknown_level_rejected(self) -> None:
        with pytest.raises(ValueError, match="Invalid log level"):
            configure_logging("chatty")


class TestMoney:
    def test_format_cents(self) -> None:
        assert format_cents(115050) == "$1,150.50"
        assert format_cents(0) == "$0.00"
        assert format_cents(7) == "$0.07"
        assert format_cents(-500) == "-$5.00"

    def test_percent_of_floors(self) -> None:
        assert percent_of(100700, 30) == 30210
        assert percent_of(100001, 30) == 30000

    def test_half_of_floors(self) -> None:
        assert half_of(80701) == 40350
        assert half_of(-19301) == -9651
