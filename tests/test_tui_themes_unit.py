#!/usr/bin/env python3
"""Unit tests for tui_themes module."""

from ratatodo import Status
from ratatodo.interface.tui_themes import (
    THEMES,
    DEFAULT_THEME,
    get_theme_palette,
    build_style,
)


class TestThemes:
    """Tests for THEMES constant."""

    def test_themes_has_default_theme(self):
        assert DEFAULT_THEME in THEMES

    def test_theme_structure(self):
        """Each theme styles every class the renderers emit."""
        required_keys = {
            "",
            "text",
            "text.dim",
            "text.dimmer",
            "selected",
            "header",
            "border",
            "key",
            "editor.label",
            "editor.active",
            "editor.cursor",
            "message",
        }
        for status in Status:
            required_keys.add(f"status.{status.style_suffix}")
            required_keys.add(f"selected.{status.style_suffix}")
        for theme_name, theme_dict in THEMES.items():
            missing = required_keys - set(theme_dict.keys())
            assert not missing, f"Theme {theme_name} missing keys: {missing}"


class TestGetThemePalette:
    def test_get_theme_palette_existing_theme(self):
        palette = get_theme_palette("dark-olive")
        assert palette == THEMES["dark-olive"]

    def test_get_theme_palette_returns_copy(self):
        palette1 = get_theme_palette("dark-olive")
        palette2 = get_theme_palette("dark-olive")
        assert palette1 == palette2
        assert palette1 is not palette2
        assert palette1 is not THEMES["dark-olive"]

    def test_get_theme_palette_unknown_theme_falls_back(self):
        assert get_theme_palette("non-existent-theme") == get_theme_palette(DEFAULT_THEME)


class TestBuildStyle:
    def test_build_style_all_themes(self):
        for theme_name in THEMES:
            style = build_style(theme_name)
            assert style.style_rules

    def test_build_style_unknown_theme_falls_back(self):
        assert build_style("nope").style_rules == build_style(DEFAULT_THEME).style_rules
