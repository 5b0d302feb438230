"""Tests for client settings storage and management."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from dissect.settings import DissectSettings, SettingsManager


class TestDissectSettings:
    """Test DissectSettings model."""

    def test_defaults(self) -> None:
        s = DissectSettings()
        assert s.proxy_base_url == "http://localhost:3001"
        assert s.proxy_path == "/api/deepseek"
        assert s.gemini_api_key is None
        assert s.gemini_model == "gemini-2.5-flash"
        assert s.gemini_temperature == 0.8
        assert s.history_capacity == 50

    def test_resolve_gemini_key_from_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GEMINI_API_KEY", "env-key")
        assert DissectSettings(gemini_api_key=" cfg-key ").resolve_gemini_key() == "cfg-key"

    def test_resolve_gemini_key_env_order(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        monkeypatch.setenv("VITE_GEMINI_API_KEY", "vite-key")
        monkeypatch.setenv("API_KEY", "generic-key")
        assert DissectSettings().resolve_gemini_key() == "vite-key"

    def test_resolve_gemini_key_generic_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        monkeypatch.delenv("VITE_GEMINI_API_KEY", raising=False)
        monkeypatch.setenv("API_KEY", "generic-key")
        assert DissectSettings().resolve_gemini_key() == "generic-key"

    def test_resolve_gemini_key_missing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for var in ("GEMINI_API_KEY", "VITE_GEMINI_API_KEY", "API_KEY"):
            monkeypatch.delenv(var, raising=False)
        assert DissectSettings(gemini_api_key="  ").resolve_gemini_key() is None

    def test_mask_keys_long(self) -> None:
        masked = DissectSettings(gemini_api_key="AIza1234567890abcdef").mask_keys()
        assert masked["gemini_api_key"].startswith("AIza1234")
        assert masked["gemini_api_key"].endswith("cdef")
        assert "567890ab" not in masked["gemini_api_key"]

    def test_mask_keys_short(self) -> None:
        assert DissectSettings(gemini_api_key="short").mask_keys()["gemini_api_key"] == "****"

    def test_capacity_lower_bound(self) -> None:
        with pytest.raises(ValueError):
            DissectSettings(history_capacity=1)


class TestSettingsManager:
    """Test SettingsManager load/save/update cycle."""

    @pytest.fixture()
    def tmp_dir(self, tmp_path: Path) -> Path:
        return tmp_path / "config"

    def test_load_defaults_when_no_file(self, tmp_dir: Path) -> None:
        s = SettingsManager(str(tmp_dir)).load()
        assert s.proxy_base_url == "http://localhost:3001"

    def test_save_and_load(self, tmp_dir: Path) -> None:
        sm = SettingsManager(str(tmp_dir))
        sm.save(DissectSettings(proxy_base_url="", gemini_model="gemini-2.5-pro"))
        loaded = sm.load()
        assert loaded.proxy_base_url == ""
        assert loaded.gemini_model == "gemini-2.5-pro"

    def test_update_ignores_none(self, tmp_dir: Path) -> None:
        sm = SettingsManager(str(tmp_dir))
        sm.update({"gemini_api_key": "k1"})
        updated = sm.update({"gemini_api_key": None, "request_timeout": 30})
        assert updated.gemini_api_key == "k1"
        assert updated.request_timeout == 30
        data = json.loads((tmp_dir / "settings.json").read_text())
        assert data["request_timeout"] == 30

    def test_corrupt_file_returns_defaults(self, tmp_dir: Path) -> None:
        tmp_dir.mkdir(parents=True)
        (tmp_dir / "settings.json").write_text("{not json")
        loaded = SettingsManager(str(tmp_dir)).load()
        assert loaded.proxy_base_url == "http://localhost:3001"
        assert loaded.gemini_api_key is None

    def test_invalid_update_leaves_file(self, tmp_dir: Path) -> None:
        sm = SettingsManager(str(tmp_dir))
        sm.update({"request_timeout": 30})
        with pytest.raises(ValidationError):
            sm.update({"request_timeout": 0})
        assert sm.load().request_timeout == 30

    def test_config_dir_from_env(self, tmp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DISSECT_CONFIG_DIR", str(tmp_dir))
        assert SettingsManager().path == tmp_dir / "settings.json"
