"""Tests for the full generation pipeline."""

from __future__ import annotations

from typing import Any

import pytest

from delvforge.core.errors import ConfigurationError
from delvforge.engine import Declaration, Stylesheet, StyleRule
from delvforge.generator import generate, generate_css, generate_with_stats, prepare_options
from delvforge.utilities import CATEGORIES


def _mark(sheet: Stylesheet, options, plugin_options) -> None:
    sheet.append(StyleRule(f".{plugin_options['name']}", (Declaration("content", "''"),)))


class TestGenerate:
    """Tests for the generation entry point."""

    def test_deterministic(self, small_config: dict[str, Any]):
        """Identical input renders byte-identical CSS."""
        assert generate_css(small_config) == generate_css(small_config)

    def test_contains_categories(self, small_config: dict[str, Any]):
        selectors = set(generate(small_config).selectors())
        assert ".df-text-center" in selectors
        assert ".df-flex" in selectors
        assert ".df-p-4" in selectors
        assert ".df-btn" in selectors
        assert ":root" in selectors

    def test_stats_cover_every_category(self, small_config: dict[str, Any]):
        sheet, counts = generate_with_stats(small_config)
        assert list(counts) == [name for name, _ in CATEGORIES] + ["plugins"]
        assert sum(counts.values()) == sheet.rule_count()
        assert counts["plugins"] == 0

    def test_overrides(self, small_config: dict[str, Any]):
        sheet = generate(small_config, prefix={"className": "x-", "cssVariable": "x-"})
        assert ".x-flex" in sheet.selectors()

    def test_invalid_config(self):
        with pytest.raises(ConfigurationError):
            generate({"grid": {"columns": "many"}})

    def test_minified(self, small_config: dict[str, Any]):
        css = generate_css(small_config, minify=True)
        assert "\n" not in css
        assert ".df-flex{display:flex}" in css


class TestThemeInheritance:
    """Tests for the one-time theme merge before generation."""

    def test_prepare_merges_global_colors(self, small_config: dict[str, Any]):
        options = prepare_options(small_config)
        assert options.themes["dark"].colors["brand"] == {"500": "#2196f3"}

    def test_theme_only_color_per_variant(self, small_config: dict[str, Any]):
        """Theme-declared colors resolve differently in each theme pass."""
        sheet = generate(small_config)

        (light,) = sheet.find(".df-bg-background")
        assert light.get("background-color") == "#ffffff"
        dark_selector = (
            ':is([data-theme="dark"] .dark\\:df-bg-background, '
            '[data-theme="dark"].dark\\:df-bg-background)'
        )
        (dark,) = sheet.find(dark_selector)
        assert dark.get("background-color") == "#000000"


class TestPlugins:
    """Tests for plugin invocation."""

    def test_run_after_categories_in_order(self, small_config: dict[str, Any]):
        """Plugins run last, in declaration order, with their options."""
        config = {
            **small_config,
            "plugins": [(_mark, {"name": "first"}), (_mark, {"name": "second"})],
        }
        sheet, counts = generate_with_stats(config)

        assert sheet.selectors()[-2:] == [".first", ".second"]
        assert counts["plugins"] == 2

    def test_plugin_receives_resolved_options(self, small_config: dict[str, Any]):
        seen = []
        config = {**small_config, "plugins": [lambda sheet, options, opts: seen.append(options)]}
        generate(config)
        assert seen[0].themes["dark"].colors["brand"] == {"500": "#2196f3"}
