"""
Tests for config.settings_manager
"""

from __future__ import annotations

import json
from unittest import mock

import pytest

from config.settings_manager import Settings, SettingsManager
from core.models import SlideCanvas


@pytest.fixture
def no_poppler():
    with mock.patch("config.settings_manager.shutil.which", return_value=None):
        yield


class TestSettings:

    def test_defaults(self):
        settings = Settings()
        assert (settings.slide_width, settings.slide_height, settings.dpi) == (10.0, 5.625, 96)

    def test_canvas(self):
        assert Settings(slide_width=13.333, slide_height=7.5, dpi=150).canvas() == SlideCanvas(13.333, 7.5, 150)

    def test_invalid_canvas(self):
        assert not Settings(dpi=0).canvas_ok()
        assert not Settings(slide_height=-1).canvas_ok()

    def test_valid_with_poppler_dir(self, tmp_path):
        assert Settings(poppler_path=str(tmp_path)).is_valid()

    def test_invalid_with_missing_poppler_dir(self, tmp_path):
        assert not Settings(poppler_path=str(tmp_path / "missing")).is_valid()

    def test_blank_poppler_uses_path(self, no_poppler):
        assert not Settings().poppler_ok()
        with mock.patch("config.settings_manager.shutil.which", return_value="/usr/bin/pdftoppm"):
            assert Settings().poppler_ok()


class TestSettingsManager:

    def test_creates_file_with_defaults(self, tmp_path, no_poppler):
        path = tmp_path / "settings.json"
        manager = SettingsManager(settings_path=path)

        assert path.exists()
        assert manager.settings == Settings()
        assert json.loads(path.read_text(encoding="utf-8"))["dpi"] == 96

    def test_update_persists(self, tmp_path, no_poppler):
        path = tmp_path / "settings.json"
        SettingsManager(settings_path=path).update(slide_width=13.333, dpi=150, unknown="x")

        reloaded = SettingsManager(settings_path=path).settings
        assert reloaded.slide_width == 13.333
        assert reloaded.dpi == 150
        assert not hasattr(reloaded, "unknown")

    def test_corrupt_file_falls_back_to_defaults(self, tmp_path, no_poppler):
        path = tmp_path / "settings.json"
        path.write_text("{not json", encoding="utf-8")

        assert SettingsManager(settings_path=path).settings == Settings()

    def test_unknown_keys_fall_back_to_defaults(self, tmp_path, no_poppler):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"tesseract_path": "/usr/bin/tesseract"}), encoding="utf-8")

        assert SettingsManager(settings_path=path).settings == Settings()

    def test_detects_poppler_on_path(self, tmp_path):
        bin_dir = tmp_path / "bin"
        bin_dir.mkdir()
        with mock.patch(
            "config.settings_manager.shutil.which",
            return_value=str(bin_dir / "pdftoppm"),
        ):
            manager = SettingsManager(settings_path=tmp_path / "settings.json")

        assert manager.settings.poppler_path == str(bin_dir)

    def test_stale_poppler_path_replaced(self, tmp_path, no_poppler):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"poppler_path": str(tmp_path / "gone")}), encoding="utf-8")

        assert SettingsManager(settings_path=path).settings.poppler_path == ""
