"""Tests for CSS custom property generation."""

from __future__ import annotations

from delvforge.core.options import Options
from delvforge.themes import flatten_tokens, generate_custom_properties, generate_theme_properties


def _pairs(declarations) -> list[tuple[str, str]]:
    return [(d.prop, d.value) for d in declarations]


class TestFlattenTokens:
    """Tests for depth-first token flattening."""

    def test_nested_paths(self):
        """Nested keys are joined with hyphens under the prefix."""
        tree = {"color": {"primary": {"500": "#2196f3"}}, "gap": "1rem"}
        assert _pairs(flatten_tokens(tree, "df-")) == [
            ("--df-color-primary-500", "#2196f3"),
            ("--df-gap", "1rem"),
        ]

    def test_numbers_have_no_unit(self):
        """Numeric leaves are stringified as-is."""
        assert _pairs(flatten_tokens({"spacing": {"4": 1, "0.5": 0.125}}, "df-")) == [
            ("--df-spacing-4", "1"),
            ("--df-spacing-0.5", "0.125"),
        ]

    def test_sequences_use_indexes(self):
        assert _pairs(flatten_tokens({"pair": ["a", "b"]}, "")) == [
            ("--pair-0", "a"),
            ("--pair-1", "b"),
        ]

    def test_none_skipped(self):
        assert flatten_tokens({"gone": None}, "df-") == []


class TestGenerateCustomProperties:
    """Tests for the :root property rule."""

    def test_root_rule(self, bare_options: Options):
        rule = generate_custom_properties({"radius": {"sm": "2px"}}, bare_options)
        assert rule.selector == ":root"
        assert rule.get("--df-radius-sm") == "2px"

    def test_variable_prefix(self):
        """Variables use the cssVariable prefix, not the class prefix."""
        options = Options(prefix={"className": "x-", "cssVariable": "v-"}, themes={})
        rule = generate_custom_properties({"a": "1"}, options)
        assert _pairs(rule.declarations) == [("--v-a", "1")]

    def test_custom_selector(self, bare_options: Options):
        rule = generate_custom_properties({"a": "1"}, bare_options, selector=".scope")
        assert rule.selector == ".scope"


class TestGenerateThemeProperties:
    """Tests for per-theme property rules."""

    def test_one_rule_per_theme(self, themed_options: Options):
        """The default theme targets :root; others target their attribute."""
        rules = generate_theme_properties(themed_options)
        assert [r.selector for r in rules] == [":root", '[data-theme="dark"]']
        assert rules[1].get("--df-background") == "#000000"

    def test_color_scheme_and_radius(self):
        options = Options(
            themes={
                "light": {
                    "default": True,
                    "colorScheme": "light",
                    "borderRadius": "6px",
                    "colors": {"background": "#fff"},
                }
            }
        )
        (rule,) = generate_theme_properties(options)
        assert _pairs(rule.declarations) == [
            ("--df-background", "#fff"),
            ("--df-border-radius", "6px"),
            ("color-scheme", "light"),
        ]

    def test_theme_without_colors_skipped(self):
        options = Options(themes={"light": {"default": True}, "dark": {"colors": {"bg": "#000"}}})
        rules = generate_theme_properties(options)
        assert [r.selector for r in rules] == ['[data-theme="dark"]']
