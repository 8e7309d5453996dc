"""
Tests for settings loading, deep merge logic and locale loading.

Uses real TOML and JSON files on disk (no mocking).
"""

import json

import toml

from academy_search.utils.helpers import _deep_merge, load_locales, load_settings


class TestDeepMerge:
    """Test the _deep_merge function directly."""

    def test_override_replaces_flat_key(self):
        result = _deep_merge({"max_results": 25, "language": "ru"}, {"language": "en"})
        assert result == {"max_results": 25, "language": "en"}

    def test_nested_sections_are_merged(self):
        base = {"search": {"max_results": 25, "default_language": "ru"}}
        override = {"search": {"default_language": "kg"}, "panel": {"debounce_ms": 100}}
        result = _deep_merge(base, override)
        assert result == {
            "search": {"max_results": 25, "default_language": "kg"},
            "panel": {"debounce_ms": 100},
        }

    def test_base_is_not_mutated(self):
        base = {"panel": {"debounce_ms": 300}}
        _deep_merge(base, {"panel": {"debounce_ms": 10}})
        assert base["panel"]["debounce_ms"] == 300


class TestLoadSettings:
    """Test load_settings with real TOML files."""

    def test_returns_defaults_when_file_missing(self, tmp_path):
        settings = load_settings(tmp_path / "nonexistent.toml")
        assert settings["search"]["max_results"] == 25
        assert settings["search"]["languages"] == ["ru", "en", "kg"]
        assert settings["panel"]["debounce_ms"] == 300

    def test_loaded_values_override_defaults(self, tmp_path):
        path = tmp_path / "settings.toml"
        path.write_text(toml.dumps({"panel": {"debounce_ms": 500}}))
        settings = load_settings(path)
        assert settings["panel"]["debounce_ms"] == 500
        assert settings["search"]["default_language"] == "ru"

    def test_invalid_toml_falls_back_to_defaults(self, tmp_path):
        path = tmp_path / "settings.toml"
        path.write_text("[search\nmax_results = ")
        settings = load_settings(path)
        assert settings["search"]["max_results"] == 25

    def test_bundled_settings(self):
        settings = load_settings()
        assert settings["search"]["max_results"] == 25
        assert settings["locales"]["path"] == "locales"


class TestLoadLocales:
    """Test locale dictionary loading from <lang>/translation.json."""

    def test_loads_all_languages(self, tmp_locales, content):
        locales = load_locales(tmp_locales, ["ru", "en", "kg"])
        assert locales == content

    def test_missing_language_is_empty(self, tmp_locales):
        locales = load_locales(tmp_locales, ["ru", "de"])
        assert locales["de"] == {}
        assert locales["ru"]["nav"]["history"] == "История"

    def test_malformed_json_is_empty(self, tmp_path):
        (tmp_path / "ru").mkdir()
        (tmp_path / "ru" / "translation.json").write_text("{not json", encoding="utf-8")
        assert load_locales(tmp_path, ["ru"]) == {"ru": {}}

    def test_non_object_json_is_empty(self, tmp_path):
        (tmp_path / "en").mkdir()
        (tmp_path / "en" / "translation.json").write_text(json.dumps(["a", "b"]))
        assert load_locales(tmp_path, ["en"]) == {"en": {}}

    def test_relative_path_uses_package_data(self):
        locales = load_locales("locales", ["en"])
        assert locales["en"]["nav"]["bachelor"] == "Bachelor"
