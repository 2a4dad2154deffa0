"""Tests for environment-driven settings."""

from pathlib import Path

import pydantic
import pytest

from storefront.domain.service.cart_reducer import StockPolicy
from storefront.infrastructure.config import Settings


class TestSettings:

    def test_defaults(self, monkeypatch):
        for name in ("CATALOG_PATH", "CURRENCY", "STOCK_POLICY", "LOG_LEVEL"):
            monkeypatch.delenv(f"STOREFRONT_{name}", raising=False)
        settings = Settings(_env_file=None)
        assert settings.catalog_path.name == "catalog.json"
        assert settings.currency == "USD"
        assert settings.stock_policy is StockPolicy.UNCHECKED
        assert settings.log_level == "WARNING"

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("STOREFRONT_CATALOG_PATH", str(tmp_path / "other.json"))
        monkeypatch.setenv("STOREFRONT_STOCK_POLICY", "clamp")
        monkeypatch.setenv("STOREFRONT_CURRENCY", "EUR")
        settings = Settings(_env_file=None)
        assert settings.catalog_path == Path(tmp_path / "other.json")
        assert settings.stock_policy is StockPolicy.CLAMP
        assert settings.currency == "EUR"

    def test_log_level_is_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("STOREFRONT_LOG_LEVEL", "debug")
        assert Settings(_env_file=None).log_level == "DEBUG"

    def test_unknown_log_level_rejected(self, monkeypatch):
        monkeypatch.setenv("STOREFRONT_LOG_LEVEL", "LOUD")
        with pytest.raises(pydantic.ValidationError):
            Settings(_env_file=None)
