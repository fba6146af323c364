"""Tests for preferences loading and saving."""

from __future__ import annotations

from pathlib import Path

import yaml

from soundboard_tui.preferences import (
    DEFAULT_STORAGE_PATH,
    Preferences,
    load_preferences,
    save_theme_name,
)


class TestLoadPreferences:
    def test_creates_default_file(self, tmp_path):
        path = tmp_path / "prefs.yaml"
        prefs = load_preferences(path)
        assert prefs == Preferences()
        assert path.exists()
        data = yaml.safe_load(path.read_text())
        assert data["storage"]["max_recently_played"] == 10
        assert data["display"]["theme"] == "allied"

    def test_default_file_loads_as_defaults(self, tmp_path):
        path = tmp_path / "prefs.yaml"
        load_preferences(path)
        prefs = load_preferences(path)
        assert prefs.storage.path == DEFAULT_STORAGE_PATH
        assert prefs.catalog_path is None

    def test_reads_values(self, tmp_path):
        path = tmp_path / "prefs.yaml"
        path.write_text(
            "storage:\n"
            f"  path: {tmp_path / 'kv.json'}\n"
            "  max_recently_played: 5\n"
            "catalog:\n"
            f"  path: {tmp_path / 'cat.yaml'}\n"
            "display:\n"
            "  show_filenames: true\n"
            "  theme: soviet\n"
        )
        prefs = load_preferences(path)
        assert prefs.storage.path == tmp_path / "kv.json"
        assert prefs.storage.max_recently_played == 5
        assert prefs.catalog_path == tmp_path / "cat.yaml"
        assert prefs.display.show_filenames is True
        assert prefs.display.theme == "soviet"

    def test_expands_user(self, tmp_path):
        path = tmp_path / "prefs.yaml"
        path.write_text("storage:\n  path: ~/kv.json\n")
        assert load_preferences(path).storage.path == Path.home() / "kv.json"

    def test_max_recent_at_least_one(self, tmp_path):
        path = tmp_path / "prefs.yaml"
        path.write_text("storage:\n  max_recently_played: 0\n")
        assert load_preferences(path).storage.max_recently_played == 1

    def test_unknown_theme_ignored(self, tmp_path):
        path = tmp_path / "prefs.yaml"
        path.write_text("display:\n  theme: neon\n")
        assert load_preferences(path).display.theme == "allied"

    def test_invalid_yaml_falls_back(self, tmp_path):
        path = tmp_path / "prefs.yaml"
        path.write_text("storage: [unclosed\n")
        assert load_preferences(path) == Preferences()

    def test_invalid_value_falls_back(self, tmp_path):
        path = tmp_path / "prefs.yaml"
        path.write_text("storage:\n  max_recently_played: lots\n")
        assert load_preferences(path) == Preferences()

    def test_non_mapping_document_falls_back(self, tmp_path):
        path = tmp_path / "prefs.yaml"
        path.write_text("- just\n- a list\n")
        assert load_preferences(path) == Preferences()


class TestSavePreferences:
    def test_save_theme_preserves_comments(self, tmp_path):
        path = tmp_path / "prefs.yaml"
        load_preferences(path)
        save_theme_name("soviet", path)
        text = path.read_text()
        assert 'theme: "soviet"' in text
        assert "# allied | soviet" in text
        assert load_preferences(path).display.theme == "soviet"

    def test_save_adds_missing_section(self, tmp_path):
        path = tmp_path / "prefs.yaml"
        path.write_text("storage:\n  max_recently_played: 3\n")
        save_theme_name("soviet", path)
        prefs = load_preferences(path)
        assert prefs.display.theme == "soviet"
        assert prefs.storage.max_recently_played == 3

    def test_save_without_existing_file(self, tmp_path):
        path = tmp_path / "sub" / "prefs.yaml"
        save_theme_name("soviet", path)
        assert load_preferences(path).display.theme == "soviet"
