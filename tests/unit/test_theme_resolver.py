"""Tests for theme variant resolution and inheritance."""

from __future__ import annotations

import logging

import pytest

from delvforge.core.options import Options, ThemeSpec
from delvforge.themes import ThemeResolver, resolve_theme_inheritance, theme_color


def _themes(**specs: dict) -> dict[str, ThemeSpec]:
    return {key: ThemeSpec.model_validate(value) for key, value in specs.items()}


class TestResolveVariants:
    """Tests for variant name resolution."""

    def test_default_first(self):
        """The default theme's variant name is empty."""
        resolver = ThemeResolver(_themes(light={"default": True}, dark={}))
        assert resolver.resolve_variants() == ["", "dark"]

    def test_default_not_first(self):
        """Declaration order is kept even when the default comes later."""
        resolver = ThemeResolver(_themes(dark={}, light={"default": True}))
        assert resolver.resolve_variants() == ["dark", ""]
        assert resolver.default_key == "light"

    def test_first_theme_is_default_when_none_marked(self):
        resolver = ThemeResolver(_themes(light={}, dark={}))
        assert resolver.resolve_variants() == ["", "dark"]

    def test_name_field_overrides_key(self):
        """A theme's name field is its variant name."""
        resolver = ThemeResolver(_themes(light={"default": True}, night={"name": "midnight"}))
        assert resolver.resolve_variants() == ["", "midnight"]

    def test_no_themes(self):
        """No themes resolves to the single unscoped variant."""
        assert ThemeResolver({}).resolve_variants() == [""]

    def test_multiple_defaults_warn(self, caplog: pytest.LogCaptureFixture):
        """Several default themes: the first wins and a warning is logged."""
        with caplog.at_level(logging.WARNING):
            resolver = ThemeResolver(_themes(a={"default": True}, b={"default": True}))

        assert resolver.resolve_variants() == ["", "b"]
        assert "marked default" in caplog.text


class TestIteration:
    """Tests for variant iteration helpers."""

    def test_for_each_skips_when_empty(self):
        calls: list[str] = []
        ThemeResolver({}).for_each(calls.append)
        assert calls == []

    def test_always_runs_once_when_empty(self):
        calls: list[str] = []
        ThemeResolver({}).always(calls.append)
        assert calls == [""]

    def test_always_runs_per_variant(self):
        calls: list[str] = []
        ThemeResolver(_themes(light={"default": True}, dark={})).always(calls.append)
        assert calls == ["", "dark"]

    def test_with_theme_found(self):
        """with_theme finds themes by key or name."""
        found: list[ThemeSpec] = []
        resolver = ThemeResolver(_themes(night={"name": "midnight"}))
        resolver.with_theme("midnight", found.append)
        resolver.with_theme("night", found.append)
        assert len(found) == 2

    def test_with_theme_missing_is_noop(self):
        found: list[ThemeSpec] = []
        ThemeResolver(_themes(light={})).with_theme("sepia", found.append)
        assert found == []

    def test_entries(self):
        resolver = ThemeResolver(_themes(light={"default": True}, dark={}))
        assert [(key, variant) for key, variant, _ in resolver.entries()] == [
            ("light", ""),
            ("dark", "dark"),
        ]


class TestInheritance:
    """Tests for the global-into-theme merge."""

    def test_global_colors_merged(self):
        """Themes receive global colors; their own entries win."""
        options = Options(
            colors={"brand": {"500": "#111111"}, "accent": "#222222"},
            themes={"dark": {"colors": {"accent": "#333333"}}},
        )
        merged = resolve_theme_inheritance(options)

        colors = merged.themes["dark"].colors
        assert colors["brand"] == {"500": "#111111"}
        assert colors["accent"] == "#333333"

    def test_input_untouched(self):
        """The merge returns new options and leaves the input alone."""
        options = Options(colors={"accent": "#222222"}, themes={"dark": {"colors": {}}})
        merged = resolve_theme_inheritance(options)

        assert merged is not options
        assert options.themes["dark"].colors == {}

    def test_merged_colors_are_copies(self):
        """Nested global tables are copied, not shared."""
        options = Options(colors={"brand": {"500": "#111111"}}, themes={"dark": {}})
        merged = resolve_theme_inheritance(options)
        assert merged.themes["dark"].colors["brand"] is not options.colors["brand"]

    def test_idempotent(self):
        options = Options(colors={"accent": "#222222"}, themes={"dark": {}})
        once = resolve_theme_inheritance(options)
        twice = resolve_theme_inheritance(once)
        assert once.themes == twice.themes

    def test_disabled(self):
        options = Options(inherit_themes=False, colors={"accent": "#222"}, themes={"dark": {}})
        assert resolve_theme_inheritance(options) is options

    def test_components_merged(self):
        options = Options(
            components={"card": {"base": "p-4"}},
            themes={"dark": {"components": {"pill": {"base": "rounded-full"}}}},
        )
        merged = resolve_theme_inheritance(options)
        assert set(merged.themes["dark"].components) == {"card", "pill"}


class TestThemeColor:
    """Tests for per-theme color lookup."""

    def test_theme_value(self, themed_options: Options):
        assert theme_color(themed_options, "", "background") == "#ffffff"
        assert theme_color(themed_options, "dark", "background") == "#000000"

    def test_global_fallback(self):
        """Colors the theme does not declare fall back to the global palette."""
        options = Options(colors={"brand": {"500": "#123456"}}, themes={"dark": {}})
        assert theme_color(options, "dark", "brand", "500") == "#123456"

    def test_missing_color_logs_and_returns_none(self, caplog: pytest.LogCaptureFixture):
        """A color nobody declares is a logged defect, not an exception."""
        options = Options(colors={}, themes={"dark": {}})
        with caplog.at_level(logging.WARNING):
            assert theme_color(options, "dark", "nonexistent") is None
        assert "nonexistent" in caplog.text
