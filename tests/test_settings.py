"""Tests for configuration loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from budget_buddy.config import BudgetSettings, get_settings


class TestBudgetSettings:

    def test_defaults(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        settings = BudgetSettings()
        assert settings.storage_backend == "file"
        assert settings.storage_path == Path("budget_data.json")
        assert settings.storage_key == "transactions"
        assert settings.strict_type_decoding is False
        assert settings.recover_corrupt_store is True
        assert settings.currency_symbol == "€"
        assert settings.log_level == "INFO"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("BUDGET_STORAGE_BACKEND", "memory")
        monkeypatch.setenv("BUDGET_STORAGE_KEY", "ledger")
        monkeypatch.setenv("BUDGET_STRICT_TYPE_DECODING", "true")
        settings = BudgetSettings()
        assert settings.storage_backend == "memory"
        assert settings.storage_key == "ledger"
        assert settings.strict_type_decoding is True

    def test_log_level_is_normalized(self):
        assert BudgetSettings(log_level=" debug ").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError, match="Unsupported log level"):
            BudgetSettings(log_level="LOUD")

    def test_invalid_backend(self):
        with pytest.raises(ValidationError):
            BudgetSettings(storage_backend="cloud")

    def test_get_settings_is_cached(self):
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
