"""
Tests for viewer settings loaded from YAML.
"""
import logging

import pytest

from csv_preview.config.viewer_settings import ViewerSettings, load_viewer_settings
from csv_preview.core.errors import ValidationError


class TestViewerSettings:
    """Test defaults and validation."""

    def test_defaults(self):
        settings = ViewerSettings()

        assert settings.default_rows_per_page == 18
        assert settings.min_rows_per_page == 5
        assert settings.row_padding == 0
        assert settings.collation_locale is None

    def test_layout_metrics(self):
        metrics = ViewerSettings(estimated_row_height=30, row_padding=2).layout_metrics

        assert metrics.row_height == 30
        assert metrics.row_padding == 2
        assert metrics.chrome_height == 40 + 48 + 4

    @pytest.mark.parametrize("kwargs", [
        {"min_rows_per_page": 0},
        {"default_rows_per_page": 0},
        {"estimated_row_height": 0},
        {"row_padding": -1},
        {"view_cache_size": 0},
        {"min_rows_per_page": "5"},
        {"row_padding": True},
        {"collation_locale": 12},
    ])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValidationError):
            ViewerSettings(**kwargs)


class TestLoadViewerSettings:
    """Test reading settings files."""

    def test_no_path(self):
        assert load_viewer_settings() == ViewerSettings()

    def test_missing_file(self, tmp_path):
        assert load_viewer_settings(tmp_path / "missing.yaml") == ViewerSettings()

    def test_empty_file(self, tmp_path):
        path = tmp_path / "viewer.yaml"
        path.write_text("", encoding="utf-8")

        assert load_viewer_settings(path) == ViewerSettings()

    def test_values(self, tmp_path):
        path = tmp_path / "viewer.yaml"
        path.write_text(
            "default_rows_per_page: 25\nrow_padding: 3\ncollation_locale: fr_FR\n",
            encoding="utf-8"
        )

        settings = load_viewer_settings(path)

        assert settings.default_rows_per_page == 25
        assert settings.row_padding == 3
        assert settings.collation_locale == "fr_FR"
        assert settings.min_rows_per_page == 5

    def test_unknown_keys_ignored(self, tmp_path, caplog):
        path = tmp_path / "viewer.yaml"
        path.write_text("theme: dark\nmin_rows_per_page: 4\n", encoding="utf-8")

        with caplog.at_level(logging.WARNING):
            settings = load_viewer_settings(path)

        assert settings.min_rows_per_page == 4
        assert any("theme" in record.message for record in caplog.records)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "viewer.yaml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")

        with pytest.raises(ValidationError):
            load_viewer_settings(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "viewer.yaml"
        path.write_text("a: [1, 2\n", encoding="utf-8")

        with pytest.raises(ValidationError):
            load_viewer_settings(path)

    def test_invalid_value(self, tmp_path):
        path = tmp_path / "viewer.yaml"
        path.write_text("estimated_row_height: -4\n", encoding="utf-8")

        with pytest.raises(ValidationError):
            load_viewer_settings(path)
