"""Tests for settings and configuration loading."""

import json

import pytest

import config as config_module
from config import Settings, load_pricing_config
from pricing import ConfigurationError


class TestSettings:
    """Test the environment-driven settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("ESTIMATOR_MAX_BUNDLE_QUANTITY", raising=False)
        settings = Settings()
        assert settings.max_bundle_quantity == 50
        assert settings.default_days_per_bundle == 0.5
        assert settings.get_pricing_config_path().name == "pricing.json"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("ESTIMATOR_MAX_BUNDLE_QUANTITY", "10")
        monkeypatch.setenv("ESTIMATOR_CURRENCY_SYMBOL", "$")
        settings = Settings()
        assert settings.max_bundle_quantity == 10
        assert settings.currency_symbol == "$"

    def test_settings_max_bundles_used_without_bundle_section(self, monkeypatch, pricing_config, base_request):
        from pricing import InputValidator, InputValidationError

        del pricing_config["bundles"]
        monkeypatch.setattr(config_module.settings, "max_bundle_quantity", 3)
        base_request["bundles"] = 4
        with pytest.raises(InputValidationError):
            InputValidator(pricing_config).validate(base_request)


class TestLoadPricingConfig:
    """Test reading the pricing configuration file."""

    def test_load_file(self, tmp_path, pricing_config):
        path = tmp_path / "pricing.json"
        path.write_text(json.dumps(pricing_config), encoding="utf-8")
        assert load_pricing_config(str(path)) == pricing_config

    def test_default_path_from_settings(self, tmp_path, monkeypatch, pricing_config):
        path = tmp_path / "default.json"
        path.write_text(json.dumps(pricing_config), encoding="utf-8")
        monkeypatch.setattr(config_module.settings, "pricing_config_path", str(path))
        assert load_pricing_config()["day_rate"] == {"min": 800, "max": 1200}

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_pricing_config(str(tmp_path / "absent.json"))

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            load_pricing_config(str(path))

    def test_top_level_must_be_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_pricing_config(str(path))

    def test_shipped_configuration_loads(self, sample_config_path):
        config = load_pricing_config(str(sample_config_path))
        assert "web_app" in config["project_types"]


class TestSetupLogging:
    """Test the rich logging setup."""

    def test_idempotent(self):
        import logging
        from rich.logging import RichHandler
        from utils import setup_logging

        setup_logging("INFO")
        setup_logging("DEBUG")
        root = logging.getLogger()
        handlers = [h for h in root.handlers if isinstance(h, RichHandler)]
        assert len(handlers) == 1
        assert root.level == logging.DEBUG
        assert handlers[0].level == logging.DEBUG
        setup_logging("WARNING")
