"""Tests for environment-driven settings."""

from pathlib import Path

from storefront.infrastructure.config import Settings


class TestSettings:

    def test_state_dir_defaults_under_data_dir(self, monkeypatch, tmp_path):
        monkeypatch.setenv("STOREFRONT_DATA_DIR", str(tmp_path))
        monkeypatch.delenv("STOREFRONT_STATE_DIR", raising=False)
        settings = Settings()

        assert settings.state_dir is None
        assert settings.resolved_state_dir == tmp_path / "state"
        assert settings.catalog_path == tmp_path / "products.json"

    def test_state_dir_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv("STOREFRONT_STATE_DIR", str(tmp_path / "elsewhere"))
        settings = Settings()

        assert isinstance(settings.state_dir, Path)
        assert settings.resolved_state_dir == tmp_path / "elsewhere"
