"""
Tests for hardhat settings.
"""

from __future__ import annotations

from hardhat.core.settings import HardhatSettings, get_settings


class TestHardhatSettings:
    def test_defaults(self):
        s = HardhatSettings()
        assert s.debug is False
        assert s.log_level == "INFO"
        assert s.log_json is None
        assert s.service_name == "hardhat"
        assert s.emit_deprecations is True

    def test_custom_values(self):
        s = HardhatSettings(debug=True, log_level="DEBUG", emit_deprecations=False)
        assert s.debug is True
        assert s.log_level == "DEBUG"
        assert s.emit_deprecations is False

    def test_env_prefix(self):
        assert HardhatSettings.model_config["env_prefix"] == "HARDHAT_"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("HARDHAT_DEBUG", "true")
        monkeypatch.setenv("HARDHAT_LOG_JSON", "false")
        s = HardhatSettings()
        assert s.debug is True
        assert s.log_json is False

    def test_unknown_env_ignored(self, monkeypatch):
        monkeypatch.setenv("HARDHAT_NOT_A_FIELD", "1")
        HardhatSettings()


class TestGetSettings:
    def test_cached(self):
        assert get_settings() is get_settings()

    def test_cache_clear_reloads(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("HARDHAT_SERVICE_NAME", "edge")
        get_settings.cache_clear()
        second = get_settings()
        assert second is not first
        assert second.service_name == "edge"
