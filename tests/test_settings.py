"""Tests for settings loading and typed getters."""

import json

import pytest

from gitlanes.config.settings import Settings
from gitlanes.constants import DEFAULT_PAGE_SIZE, DEFAULT_PALETTE


class TestSettings:
    """JSON settings merged over defaults."""

    def test_defaults_without_file(self, tmp_path):
        settings = Settings(tmp_path / "settings.json")

        assert settings.get_palette() == DEFAULT_PALETTE
        assert settings.get_page_size() == DEFAULT_PAGE_SIZE
        assert settings.get_include_tags() is True
        assert settings.get_include_remotes() is False

    def test_file_overrides_merge_with_defaults(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"graph": {"page_size": 10}}))

        settings = Settings(path)

        assert settings.get_page_size() == 10
        assert settings.get_palette() == DEFAULT_PALETTE

    def test_defaults_not_shared_between_instances(self, tmp_path):
        first = Settings(tmp_path / "a.json")
        first.set("graph.page_size", 3)
        second = Settings(tmp_path / "b.json")

        assert second.get_page_size() == DEFAULT_PAGE_SIZE

    def test_save_round_trip(self, tmp_path):
        path = tmp_path / "nested" / "settings.json"
        settings = Settings(path)
        settings.set("graph.palette", ["red", "blue"])
        settings.save()

        assert Settings(path).get_palette() == ["red", "blue"]

    def test_get_missing_path(self, tmp_path):
        settings = Settings(tmp_path / "settings.json")

        assert settings.get("graph.nope", "fallback") == "fallback"
        assert settings.get("graph.page_size.deeper") is None

    @pytest.mark.parametrize("palette", [[], "red", ["red", ""], [1, 2]])
    def test_invalid_palette(self, tmp_path, palette):
        settings = Settings(tmp_path / "settings.json")
        settings.set("graph.palette", palette)

        with pytest.raises(ValueError):
            settings.get_palette()

    def test_invalid_page_size(self, tmp_path):
        settings = Settings(tmp_path / "settings.json")
        settings.set("graph.page_size", 0)

        with pytest.raises(ValueError):
            settings.get_page_size()
