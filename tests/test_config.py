"""
Configuration tests
"""

import json
import logging

import pytest

from statewire.app import config as config_module
from statewire.app.config import ApplicationConfig, Environment, configure_logging, get_config, set_config


class TestApplicationConfig:
    def test_environment_defaults(self):
        assert ApplicationConfig.for_environment(Environment.DEVELOPMENT).logging.level == "DEBUG"
        testing = ApplicationConfig.for_environment(Environment.TESTING)
        assert testing.persistence.backend == "memory"
        assert testing.persistence.simulated_delay == 0.0

    def test_from_dict(self):
        config = ApplicationConfig.from_dict({
            "environment": "production",
            "persistence": {"backend": "memory"},
            "web": {"port": 8080, "live_updates": False},
        })
        assert config.environment is Environment.PRODUCTION
        assert config.persistence.backend == "memory"
        assert config.web.port == 8080
        assert config.web.live_updates is False

    def test_from_dict_rejects_unknown_keys(self):
        with pytest.raises(ValueError):
            ApplicationConfig.from_dict({"web": {"colour": "blue"}})

    def test_round_trip_through_file(self, tmp_path):
        original = ApplicationConfig.for_environment(Environment.TESTING)
        original.web.port = 9000
        path = tmp_path / "statewire.json"
        path.write_text(json.dumps(original.to_dict()))
        assert ApplicationConfig.from_file(path).to_dict() == original.to_dict()

    def test_from_file_errors(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ApplicationConfig.from_file(tmp_path / "missing.json")
        yaml_path = tmp_path / "config.yaml"
        yaml_path.write_text("debug: true")
        with pytest.raises(ValueError):
            ApplicationConfig.from_file(yaml_path)

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("STATEWIRE_ENV", "testing")
        monkeypatch.setenv("STATEWIRE_BACKEND", "database")
        monkeypatch.setenv("STATEWIRE_DB_DELAY", "0.25")
        monkeypatch.setenv("STATEWIRE_PORT", "7000")
        monkeypatch.setenv("STATEWIRE_LOG_LEVEL", "error")
        config = ApplicationConfig.from_environment()
        assert config.environment is Environment.TESTING
        assert config.persistence.backend == "database"
        assert config.persistence.simulated_delay == 0.25
        assert config.web.port == 7000
        assert config.logging.level == "ERROR"


class TestGlobalConfig:
    def test_set_and_get(self, monkeypatch):
        monkeypatch.setattr(config_module, "_current_config", None)
        monkeypatch.setenv("STATEWIRE_ENV", "production")
        assert get_config().environment is Environment.PRODUCTION

        custom = ApplicationConfig.for_environment(Environment.TESTING)
        set_config(custom)
        assert get_config() is custom

    def test_configure_logging(self):
        root = logging.getLogger()
        previous_level, previous_handlers = root.level, list(root.handlers)
        try:
            configure_logging(ApplicationConfig.for_environment(Environment.TESTING).logging)
            assert root.level == logging.WARNING
        finally:
            root.handlers = previous_handlers
            root.setLevel(previous_level)
